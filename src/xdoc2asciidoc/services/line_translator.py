"""xdoc line -> AsciiDoc translation engine.

Each source line is consumed as a series of fragments. A step handles the
construct at the start of the fragment, writes its AsciiDoc to the document
buffer and hands back what is left of the line; the loop keeps going until
nothing remains or the depth limit is hit. All open-context bookkeeping goes
through ``TranslationState``.
"""

from __future__ import annotations

import logging

from ..errors import MalformedTokenError, RecursionLimitError, UnbalancedMarkupError
from .chapter_table import ChapterTable
from .context_stack import ContextKind, TranslationState
from .escaping import escape_text, unescape_brackets
from .scanner import (
    find_next_reserved_token,
    move_forward,
    move_forward_to_first_non_whitespace,
    trim_leading_whitespace,
)
from .token_matcher import (
    HeaderMatch,
    Prefix,
    SectionMatch,
    match_inline,
    match_line,
    match_prefix,
    render_inline,
)

logger = logging.getLogger(__name__)

DEFAULT_MAX_DEPTH = 100
INDEX_STUB_NAME = "stunt_index.asc"
INDEX_STUB_CONTENT = "[index]\n== Dummy Index"

TABLE_DELIMITER = "|========"
BLOCK_DELIMITER = "----"

AUTHORS_PREAMBLE = (
    ":doctype: book\n"
    ":encoding: utf-8\n"
    ":lang: en\n"
    ":toc: left\n"
    ":toclevels: 2\n"
    ":numbered:\n"
    "\n"
)

_OPENERS: dict[Prefix, ContextKind] = {
    Prefix.RAW_BLOCK: ContextKind.CODE,
    Prefix.CODE_RAW: ContextKind.CODE,
    Prefix.CODE: ContextKind.CODE,
    Prefix.ORDERED_LIST: ContextKind.LIST,
    Prefix.UNORDERED_LIST: ContextKind.LIST,
    Prefix.TABLE_ROW: ContextKind.TABLE_ROW,
    Prefix.EMPHASIS: ContextKind.EMPHASIS,
    Prefix.LIST_ITEM: ContextKind.LIST_ITEM,
    Prefix.TABLE_CELL: ContextKind.TABLE_CELL,
    Prefix.TABLE: ContextKind.TABLE,
}

# kind -> (text emitted, line break when the line ends, skip following spacing)
_CLOSERS: dict[ContextKind, tuple[str, bool, bool]] = {
    ContextKind.EMPHASIS: ("*", True, False),
    ContextKind.LIST_ITEM: ("", True, True),
    ContextKind.LIST: ("\n", False, True),
    ContextKind.TABLE_CELL: ("", False, True),
    ContextKind.TABLE_ROW: ("\n", False, True),
    ContextKind.TABLE: (TABLE_DELIMITER + "\n", False, True),
    ContextKind.CODE: (BLOCK_DELIMITER + "\n", False, True),
}

# Openers whose AsciiDoc must start on a line of its own
_BLOCK_KINDS = (ContextKind.CODE, ContextKind.LIST, ContextKind.TABLE)


def _split_lines(text: str) -> list[str]:
    """Split on ``\\n`` only; form feeds and Unicode separators stay in the line."""
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return lines


class LineTranslator:
    """Translates the lines of one document at a time into an output buffer.

    The chapter table is shared across documents of a run; the translation
    state and buffer are reset by ``start_document``.
    """

    def __init__(
        self,
        chapters: ChapterTable | None = None,
        max_depth: int = DEFAULT_MAX_DEPTH,
        strict: bool = False,
    ) -> None:
        self.chapters = chapters if chapters is not None else ChapterTable()
        self.max_depth = max_depth
        self.strict = strict
        self.state = TranslationState()
        self.output_name = ""
        self._out: list[str] = []

    # -- document lifecycle -------------------------------------------------

    def start_document(self, output_name: str) -> None:
        self.state.reset()
        self.output_name = output_name
        self._out = []

    def finish_document(self, is_root: bool = False) -> str:
        if self.state.stack:
            logger.warning(
                "%s: contexts still open at end of document: %s",
                self.output_name or "<document>",
                self.state.describe(),
            )
        if is_root:
            self._emit(f"include::{INDEX_STUB_NAME}[]\n")
        return self.getvalue()

    def translate_document(self, text: str, output_name: str = "", is_root: bool = False) -> str:
        """Translate a whole document and return its AsciiDoc."""
        self.start_document(output_name)
        for line in _split_lines(text):
            self.translate_line(line)
        return self.finish_document(is_root)

    def getvalue(self) -> str:
        return "".join(self._out)

    # -- line loop ----------------------------------------------------------

    def translate_line(self, line: str) -> None:
        fragment: str | None = line
        depth = 0
        while fragment is not None:
            if depth >= self.max_depth:
                raise RecursionLimitError(depth, line)
            fragment = self._step(fragment, depth)
            depth += 1

    def _step(self, line: str, depth: int) -> str | None:
        if self.state.in_code:
            return self._code_fragment(line)

        matched = match_line(line)
        if isinstance(matched, SectionMatch):
            self._section(matched)
            return None
        if isinstance(matched, HeaderMatch):
            self._header(matched)
            return None

        prefix = match_prefix(line)
        if prefix is None:
            return self._text(line, depth)
        if prefix is Prefix.CLOSE:
            return self._close(line)
        if prefix in (Prefix.REF, Prefix.LINK, Prefix.IMAGE):
            return self._inline(prefix, line, depth)
        return self._open(prefix, line)

    # -- whole-line constructs ----------------------------------------------

    def _section(self, m: SectionMatch) -> None:
        if m.explicit_id:
            self._emit(f'[id="{m.chapter_id}"]\n')
        heading = m.heading
        if m.level == "chapter":
            self.chapters.register(m.chapter_id, self.output_name)
        self._emit(heading + "\n")

    def _header(self, m: HeaderMatch) -> None:
        if m.kind == "document":
            self._emit(f"= {m.value}\n")
        elif m.kind == "authors":
            self._emit(f"{m.value}\n{AUTHORS_PREAMBLE}")
        elif m.kind == "chapter-ref":
            self._emit(f"include::{self.chapters.resolve(m.value)}[]\n")
        else:
            raise MalformedTokenError(f"Invalid header item : {m.kind}")

    # -- prefix constructs --------------------------------------------------

    def _open(self, prefix: Prefix, line: str) -> str | None:
        kind = _OPENERS[prefix]
        state = self.state
        if kind in _BLOCK_KINDS and self._out and self._tail(1) != "\n":
            self._emit("\n")
        if kind is ContextKind.CODE:
            self._emit(BLOCK_DELIMITER + "\n")
            state.push(kind)
        elif kind is ContextKind.LIST:
            self._emit('[options="compact"]\n')
            state.push(kind, ordered=line.strip() == Prefix.ORDERED_LIST.value)
        elif kind is ContextKind.LIST_ITEM:
            self._emit("1. " if state.ordered_list else "* ")
            state.push(kind)
        elif kind is ContextKind.TABLE:
            self._emit(TABLE_DELIMITER + "\n")
            state.push(kind)
        elif kind is ContextKind.TABLE_CELL:
            self._emit("| ")
            state.push(kind)
        elif kind is ContextKind.EMPHASIS:
            self._emit("*")
            state.push(kind)
        else:
            state.push(kind)
        return move_forward_to_first_non_whitespace(line, prefix.width)

    def _inline(self, prefix: Prefix, line: str, depth: int) -> str | None:
        m = match_inline(prefix, line)
        # Separate from preceding cell content on continuation lines
        if prefix is not Prefix.IMAGE and self.state.in_table_cell and depth == 0:
            tail = self._tail(2)
            if len(tail) == 2 and tail[0] != "|":
                self._emit(" ")
        self._emit(render_inline(m))
        rest = move_forward(line, m.consumed)
        if rest is None:
            self._emit("\n")
        return rest

    def _close(self, line: str) -> str | None:
        frame = self.state.pop()
        if frame is None:
            if self.strict:
                raise UnbalancedMarkupError(f"Closing marker with no open context: {line!r}")
            logger.warning("%s: dropping closing marker with no open context", self.output_name or "<document>")
            return move_forward_to_first_non_whitespace(line, 1)

        text, line_break, skip_spacing = _CLOSERS[frame.kind]
        if text:
            self._emit(text)
        if skip_spacing:
            rest = move_forward_to_first_non_whitespace(line, 1)
        else:
            rest = move_forward(line, 1)
        if rest is None and line_break:
            self._emit("\n")
        return rest

    def _code_fragment(self, line: str) -> str | None:
        if line.startswith("]"):
            return self._close(line)
        # Content and end marker on the same line: end the block on its own line
        if line.endswith("]") and len(line) > 1 and line[-2] != "\\":
            self._emit(unescape_brackets(line[:-1]) + "\n")
            return "]"
        self._emit(unescape_brackets(line) + "\n")
        return None

    # -- plain text ---------------------------------------------------------

    def _text(self, line: str, depth: int) -> str | None:
        in_cell = self.state.in_table_cell
        index = find_next_reserved_token(line)
        if index == -1:
            if depth == 0:
                line = trim_leading_whitespace(line)
            self._emit(escape_text(line, in_cell))
            # Cells end at their closing marker, not at the line break
            if not in_cell:
                self._emit("\n")
            return None

        head = line[:index]
        if depth == 0:
            head = trim_leading_whitespace(head)
        self._emit(escape_text(head, in_cell))
        return line[index:]

    # -- buffer -------------------------------------------------------------

    def _emit(self, text: str) -> None:
        if text:
            self._out.append(text)

    def _tail(self, n: int) -> str:
        tail = ""
        for chunk in reversed(self._out):
            tail = chunk + tail
            if len(tail) >= n:
                break
        return tail[-n:]
