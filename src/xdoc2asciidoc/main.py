"""Command-line entry - convert a folder of xdoc files to AsciiDoc.

Usage:
  xdoc2asciidoc <folder containing xdocs> <output folder in which to place asciidocs>

Env: see ``config.py`` (XDOC2ASCIIDOC_* variables, optionally from ``.env``).
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from .config import load_settings
from .errors import InvalidInvocationError
from .pipeline import ConversionPipeline

logger = logging.getLogger("xdoc2asciidoc")

USAGE = (
    "Usage : xdoc2asciidoc [folder containing xdocs] "
    "[output folder in which to place asciidocs]"
)

NOTICE = """
NOTE :: This tool is only meant to help in migrating xdoc documents
        to asciidoc format. The resulting documents will likely still
        require manual fixes.
"""


def main(argv: list[str] | None = None) -> None:
    args = sys.argv[1:] if argv is None else argv
    if len(args) != 2:
        print(USAGE)
        return

    try:
        settings = load_settings()
        logging.basicConfig(level=settings.log_level, format="%(message)s")
        input_dir, output_dir = Path(args[0]), Path(args[1])
        if not input_dir.is_dir():
            raise InvalidInvocationError(f"Invalid input directory... {input_dir}")
        if not output_dir.is_dir():
            raise InvalidInvocationError(f"Invalid output directory... {output_dir}")
        print(NOTICE)
        ConversionPipeline(settings).run(input_dir, output_dir)
    except Exception:
        logger.exception("Conversion aborted")


if __name__ == "__main__":
    main()
