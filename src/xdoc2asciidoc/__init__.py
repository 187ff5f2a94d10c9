"""xdoc to AsciiDoc converter."""

__version__ = "0.1.0"
