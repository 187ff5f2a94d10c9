"""Exception taxonomy for xdoc conversion runs.

Every failure is terminal for the run: nothing here is retried and no file is
isolated from another's failure.
"""

from __future__ import annotations

from pathlib import Path


class XDocError(Exception):
    """Base class for all conversion errors."""


class InvalidInvocationError(XDocError):
    """Input or output path is not a directory."""


class MarkupError(XDocError, ValueError):
    """Structural violation in xdoc source."""


class MalformedTokenError(MarkupError):
    """A ref/link/img token, section level or header kind could not be parsed."""


class RecursionLimitError(MarkupError):
    def __init__(self, depth: int, line: str) -> None:
        self.depth = depth
        self.line = line
        super().__init__(f"Recursion limit of {depth} reached while translating line: {line!r}")


class UnbalancedMarkupError(MarkupError):
    """Closing marker with no open context (strict mode only)."""


class DuplicateChapterError(MarkupError):
    def __init__(self, chapter_id: str, existing: str, new: str) -> None:
        self.chapter_id = chapter_id
        self.existing = existing
        self.new = new
        super().__init__(
            f"Chapter id '{chapter_id}' already defined in '{existing}', redefined in '{new}'"
        )


class DuplicateRootDocumentError(MarkupError):
    def __init__(self, first: Path, second: Path) -> None:
        self.first = first
        self.second = second
        super().__init__(
            "Two or more files cannot start with 'document' in the same folder : "
            f"{second}, {first}"
        )


class OutputExistsError(XDocError, FileExistsError):
    """Output file exists and overwriting is not enabled."""


class ConversionError(XDocError):
    """Translation of one source file failed; the cause is chained."""

    def __init__(self, source: Path, cause: Exception) -> None:
        self.source = source
        super().__init__(f"Failed to convert {source}: {cause}")
