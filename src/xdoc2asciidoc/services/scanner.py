"""Reserved-token scanning and fragment advancing."""

from __future__ import annotations

RESERVED_TOKENS: tuple[str, ...] = (
    "e[",
    "td[",
    "tr[",
    "table[",
    "ref:",
    "img[",
    "ol[",
    "ul[",
    "item[",
    "link[",
    "code[",
    "code-raw[",
)

CLOSE = "]"
_SPACING = " \t"


def find_next_reserved_token(line: str) -> int:
    """Return the offset of the leftmost reserved token or unescaped ``]``, or -1."""
    if line.startswith(CLOSE):
        return 0
    found = [i for i in (line.find(tok) for tok in RESERVED_TOKENS) if i != -1]
    previous_was_backslash = False
    for i, c in enumerate(line):
        if c == "\\":
            previous_was_backslash = True
            continue
        if c == CLOSE and not previous_was_backslash:
            found.append(i)
            break
        previous_was_backslash = False
    return min(found) if found else -1


def trim_leading_whitespace(text: str) -> str:
    return text.lstrip(_SPACING)


def move_forward(text: str, offset: int) -> str | None:
    """Return ``text[offset:]``, or None when nothing but whitespace remains."""
    rest = text[offset:]
    # Only control characters and space count as blank; NBSP is content
    if all(c <= " " for c in rest):
        return None
    return rest


def move_forward_to_first_non_whitespace(text: str, offset: int) -> str | None:
    rest = move_forward(text, offset)
    if rest is None:
        return None
    rest = trim_leading_whitespace(rest)
    return rest or None
