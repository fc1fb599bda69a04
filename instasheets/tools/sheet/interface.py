from __future__ import annotations

from dataclasses import dataclass
from typing import List, Protocol

from instasheets.utils.flatten import Row


@dataclass(frozen=True)
class Cursor:
    """1-based destination cell (row, column) for the next write."""

    row: int = 1
    column: int = 1

    def __post_init__(self):
        if self.row < 1 or self.column < 1:
            raise ValueError(f"Cursor must be 1-based, got ({self.row}, {self.column})")

    def advance(self, rows: int) -> "Cursor":
        return Cursor(self.row + rows, self.column)


class TableSink(Protocol):
    """Protocol for the spreadsheet that receives flattened rows.

    Implementations write two columns per row starting at `cursor`, grow the
    table when too few rows remain below the cursor, and return the cursor
    positioned just below the last written row.
    """

    def write_rows(self, rows: List[Row], cursor: Cursor) -> Cursor:
        ...


__all__ = ["Cursor", "TableSink"]
