"""Per-document translation state: an explicit stack of open contexts."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class ContextKind(str, Enum):
    EMPHASIS = "emphasis"
    CODE = "code"
    LIST = "list"
    LIST_ITEM = "list_item"
    TABLE = "table"
    TABLE_ROW = "table_row"
    TABLE_CELL = "table_cell"


@dataclass(frozen=True)
class Frame:
    kind: ContextKind
    ordered: bool = False


@dataclass
class TranslationState:
    """Open contexts of the document being translated.

    The closing marker always pops the top frame, so constructs nest freely.
    """

    stack: list[Frame] = field(default_factory=list)
    table_row: int = 0

    def reset(self) -> None:
        self.stack.clear()
        self.table_row = 0

    def push(self, kind: ContextKind, ordered: bool = False) -> Frame:
        frame = Frame(kind, ordered)
        self.stack.append(frame)
        if kind is ContextKind.TABLE_ROW:
            self.table_row += 1
        return frame

    def pop(self) -> Frame | None:
        if not self.stack:
            return None
        frame = self.stack.pop()
        if frame.kind is ContextKind.TABLE_ROW:
            self.table_row -= 1
        elif frame.kind is ContextKind.TABLE:
            self.table_row = 0
        return frame

    @property
    def top(self) -> Frame | None:
        return self.stack[-1] if self.stack else None

    @property
    def in_code(self) -> bool:
        top = self.top
        return top is not None and top.kind is ContextKind.CODE

    @property
    def in_table_cell(self) -> bool:
        """True inside a cell of the innermost open table."""
        for frame in reversed(self.stack):
            if frame.kind is ContextKind.TABLE_CELL:
                return True
            if frame.kind is ContextKind.TABLE:
                return False
        return False

    @property
    def ordered_list(self) -> bool:
        for frame in reversed(self.stack):
            if frame.kind is ContextKind.LIST:
                return frame.ordered
        return False

    @property
    def list_item_depth(self) -> int:
        return sum(1 for f in self.stack if f.kind is ContextKind.LIST_ITEM)

    def describe(self) -> str:
        return " > ".join(f.kind.value for f in self.stack)
