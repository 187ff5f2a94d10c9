"""xdoc token matching: whole-line constructs and prefix constructs.

Whole-line constructs (sections, header items) consume the entire fragment.
Prefix constructs are recognised with a literal ``startswith`` test and leave a
remainder for the line translator to keep working on.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

from ..errors import MalformedTokenError

SECTION_WITH_ID_PATTERN = re.compile(
    r"\s*(chapter|section|section2|section3):([^\)]+)\[([^\]]+)\]\s*"
)
SECTION_PATTERN = re.compile(r"\s*(chapter|section|section2|section3)\[([^\]]+)]\s*")
HEADER_PATTERN = re.compile(r"(document|authors|chapter-ref)\[([^\[\]]+)\]\s*")

REF_PATTERN = re.compile(r"ref\:([^\[\]]+)\[([^\[\]]+)\](.*)")
LINK_PATTERN = re.compile(r"link\[([^\[\]]+)\]\s*\[([^\[\]]+)\](.*)")
IMAGE_PATTERN = re.compile(
    r"img\[([^\]]+)\]\[(?:[^\]]*)\]\[(?:[^\]]*)\]\[(?:[^\]]*)\](.*)"
)

# Heading prefixes; chapters sit one level below the document title.
SECTION_PREFIXES: dict[str, str] = {
    "chapter": "## ",
    "section": "### ",
    "section2": "#### ",
    "section3": "##### ",
}


class Prefix(str, Enum):
    """Prefix constructs in the order they are tested."""

    RAW_BLOCK = "on["
    CODE_RAW = "code-raw["
    CODE = "code["
    ORDERED_LIST = "ol["
    UNORDERED_LIST = "ul["
    TABLE_ROW = "tr["
    EMPHASIS = "e["
    LIST_ITEM = "item["
    TABLE_CELL = "td["
    REF = "ref:"
    LINK = "link["
    IMAGE = "img["
    TABLE = "table["
    CLOSE = "]"

    @property
    def width(self) -> int:
        return len(self.value)


@dataclass
class SectionMatch:
    level: str
    chapter_id: str
    title: str
    explicit_id: bool

    @property
    def heading(self) -> str:
        try:
            return SECTION_PREFIXES[self.level] + self.title
        except KeyError:
            raise MalformedTokenError(f"Invalid type : {self.level}") from None


@dataclass
class HeaderMatch:
    kind: str
    value: str


@dataclass
class InlineMatch:
    """A ref/link/img token and the remainder of the fragment after it."""

    prefix: Prefix
    target: str
    text: str
    consumed: int


def match_line(line: str) -> SectionMatch | HeaderMatch | None:
    """Try the whole-line constructs in priority order."""
    m = SECTION_WITH_ID_PATTERN.fullmatch(line)
    if m:
        return SectionMatch(level=m.group(1), chapter_id=m.group(2), title=m.group(3), explicit_id=True)
    m = SECTION_PATTERN.fullmatch(line)
    if m:
        return SectionMatch(level=m.group(1), chapter_id=m.group(2), title=m.group(2), explicit_id=False)
    m = HEADER_PATTERN.fullmatch(line)
    if m:
        return HeaderMatch(kind=m.group(1), value=m.group(2))
    return None


def match_prefix(line: str) -> Prefix | None:
    for prefix in Prefix:
        if line.startswith(prefix.value):
            return prefix
    return None


def match_inline(prefix: Prefix, line: str) -> InlineMatch:
    """Parse a ref/link/img token at the start of ``line``.

    Raises MalformedTokenError when the fragment starts with the token's
    literal but does not have its full shape.
    """
    if prefix is Prefix.REF:
        m = REF_PATTERN.fullmatch(line)
        if not m:
            raise MalformedTokenError(f"Invalid reference pattern : {line}")
        return InlineMatch(prefix, m.group(1), m.group(2), len(line) - len(m.group(3)))
    if prefix is Prefix.LINK:
        m = LINK_PATTERN.fullmatch(line)
        if not m:
            raise MalformedTokenError(f"Invalid link pattern : {line}")
        return InlineMatch(prefix, m.group(1), m.group(2), len(line) - len(m.group(3)))
    if prefix is Prefix.IMAGE:
        m = IMAGE_PATTERN.fullmatch(line)
        if not m:
            raise MalformedTokenError(f"Invalid images pattern : {line}")
        return InlineMatch(prefix, m.group(1), "", len(line) - len(m.group(2)))
    raise ValueError(f"Not an inline token: {prefix.value}")


def render_inline(match: InlineMatch) -> str:
    if match.prefix is Prefix.REF:
        return f"<<{match.target},{match.text}>>"
    if match.prefix is Prefix.LINK:
        return f"link:{match.target}[{match.text}]"
    return f'image:{match.target}[align="center"]'
