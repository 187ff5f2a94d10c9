"""Escaping of literal text written to AsciiDoc.

Only bracket escapes are undone and, inside table cells, bare pipes are
escaped. Other AsciiDoc-significant characters such as ``#`` pass through
unchanged and may need manual fixing in the output.
"""

from __future__ import annotations


def unescape_brackets(text: str) -> str:
    return text.replace("\\[", "[").replace("\\]", "]")


def escape_text(text: str, in_table_cell: bool = False) -> str:
    if in_table_cell:
        text = text.replace("|", "\\|")
    return unescape_brackets(text)
