"""In-memory sheet.

A grid of string cells standing in for the host spreadsheet. Used by tests
and by the CLI, which prints the written block after an action completes.
"""

from __future__ import annotations

from typing import List

from instasheets.tools.sheet.interface import Cursor
from instasheets.utils.flatten import Row


class InMemorySheet:
	def __init__(self, max_rows: int = 1000, max_columns: int = 26) -> None:
		self._grid: List[List[str]] = [["" for _ in range(max_columns)] for _ in range(max_rows)]
		self.max_columns = max_columns

	@property
	def max_rows(self) -> int:
		return len(self._grid)

	# Internal helpers --------------------------------------------------
	def insert_rows_after(self, after: int, count: int) -> None:
		"""Insert `count` blank rows after 1-based row `after`."""
		blank = [["" for _ in range(self.max_columns)] for _ in range(count)]
		self._grid[after:after] = blank

	def _ensure_columns(self, needed: int) -> None:
		if needed <= self.max_columns:
			return
		extra = needed - self.max_columns
		for line in self._grid:
			line.extend("" for _ in range(extra))
		self.max_columns = needed

	# Sink API ----------------------------------------------------------
	def write_rows(self, rows: List[Row], cursor: Cursor) -> Cursor:
		if not rows:
			return cursor
		available = self.max_rows - cursor.row + 1
		if available < len(rows):
			self.insert_rows_after(self.max_rows, len(rows) - available)
		self._ensure_columns(cursor.column + 1)
		for offset, (label, value) in enumerate(rows):
			line = self._grid[cursor.row - 1 + offset]
			line[cursor.column - 1] = label
			line[cursor.column] = value
		return cursor.advance(len(rows))

	# Read helpers -------------------------------------------------------
	def cell(self, row: int, column: int) -> str:
		return self._grid[row - 1][column - 1]

	def block(self, start: Cursor, end: Cursor) -> List[List[str]]:
		"""Two-column block from `start` down to (not including) `end.row`."""
		c = start.column - 1
		return [line[c:c + 2] for line in self._grid[start.row - 1:end.row - 1]]


__all__ = ["InMemorySheet"]
