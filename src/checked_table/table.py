"""Error-checked, in-memory two-dimensional table with optional named columns.

A Table holds a list of rows (each a list of cells) and, when built with
``headers=True``, a map from column name to column index.  Every public
operation keeps two invariants:

  1. Rectangularity -- all rows have the same length.
  2. Header consistency -- with header support, the header map's values are
     exactly ``{0, ..., column_count - 1}``.

Every array-shaped input (the initial dataset, a new row, a new column) is
validated and deep-copied before it is stored, so the table never shares
storage with its caller.  All validation happens before any mutation: an
operation that raises leaves the table exactly as it was.

Usage:
    table = Table([["name", "age"], ["Tom", 32], ["Beth", 12]], headers=True)
    table.get(1, "name")                       # "Beth"
    table.add_column(["city", "NYC", "LA"])
    table.delete_column("age")
"""

import logging
from collections.abc import Callable
from typing import Any

from checked_table import headers as header_map
from checked_table.errors import NoColumnError
from checked_table.indexing import (
    check_column_insert_position,
    check_row_index,
    check_row_insert_position,
    is_known_name,
    resolve_column,
)
from checked_table.schema import parse_cells, parse_rows

logger = logging.getLogger(__name__)


class Table:
    """Mutable rectangular dataset with optional column names."""

    def __init__(self, data: Any = None, headers: bool = False):
        rows = parse_rows([] if data is None else data)
        self._header_support = bool(headers)
        self._headers: dict[Any, int] = {}
        if self._header_support and rows:
            self._headers = header_map.build_headers(rows.pop(0))
        self._rows: list[list[Any]] = rows
        logger.debug(
            "Created table: %d rows x %d columns (header support: %s)",
            self.row_count,
            self.column_count,
            self._header_support,
        )

    # ─── Shape & Attributes ──────────────────────────────────────────────────

    @property
    def rows(self) -> list[list[Any]]:
        """The stored rows.  This is the live storage: read it, do not reshape it."""
        return self._rows

    @property
    def headers(self) -> dict[Any, int]:
        """A copy of the column-name -> column-index map (empty without header support)."""
        return dict(self._headers)

    @property
    def header_support(self) -> bool:
        return self._header_support

    @property
    def row_count(self) -> int:
        return len(self._rows)

    @property
    def column_count(self) -> int:
        """Length of the first row; with no rows, the number of headers."""
        if self._rows:
            return len(self._rows[0])
        return len(self._headers)

    def __len__(self) -> int:
        return self.row_count

    # ─── Index Resolution & Cell Access ──────────────────────────────────────

    def column_index(self, pos: Any) -> int:
        """Resolve a column name or (possibly negative) position to a canonical column index."""
        return resolve_column(pos, self._headers, self.column_count)

    def get(self, row: int, col: Any) -> Any:
        """Return the cell at *row* in column *col* (a name or a position)."""
        r = check_row_index(row, self.row_count)
        c = self.column_index(col)
        return self._rows[r][c]

    def __getitem__(self, key: tuple[int, Any]) -> Any:
        """``table[row, col]`` is the same as ``table.get(row, col)``."""
        if not isinstance(key, tuple) or len(key) != 2:
            raise TypeError(f"Table indices must be (row, column) pairs, not {key!r}")
        return self.get(*key)

    # ─── Row Manipulations ───────────────────────────────────────────────────

    def add_row(self, new_row: Any, pos: int | None = None) -> None:
        """Insert a copy of *new_row* at *pos* (default: append).

        The row must be exactly column_count cells long.  The only exception
        is the first row of a table that has neither rows nor headers, which
        defines the width.
        """
        expected = self.column_count if (self._rows or self._header_support) else -1
        cells = parse_cells(new_row, expected, "row")
        i = self.row_count if pos is None else check_row_insert_position(pos, self.row_count)
        self._rows.insert(i, cells)
        logger.debug("Inserted row at %d (%d rows)", i, self.row_count)

    def row(self, i: int) -> list[Any]:
        """Return the stored row at *i* (not a copy)."""
        return self._rows[check_row_index(i, self.row_count)]

    def delete_row(self, pos: int) -> list[Any]:
        """Remove and return the row at *pos*."""
        i = check_row_index(pos, self.row_count)
        removed = self._rows.pop(i)
        logger.debug("Deleted row %d (%d rows left)", i, self.row_count)
        return removed

    def transform_row(self, pos: int, fn: Callable[[Any], Any]) -> None:
        """Replace every cell of row *pos* with ``fn(cell)``, left to right."""
        row = self._rows[check_row_index(pos, self.row_count)]
        # Compute the whole row first so a failing fn leaves it untouched
        row[:] = [fn(cell) for cell in row]

    def select_rows(self, predicate: Callable[[list[Any]], Any]) -> None:
        """Keep only the rows for which ``predicate(row)`` is truthy, in their original order."""
        kept = [row for row in self._rows if predicate(row)]
        logger.debug("Selected %d of %d rows", len(kept), self.row_count)
        self._rows[:] = kept

    # ─── Column Manipulations ────────────────────────────────────────────────

    def column(self, pos: Any) -> list[Any]:
        """Return a new list with the cells of column *pos*, top to bottom."""
        i = self.column_index(pos)
        return [row[i] for row in self._rows]

    def rename_column(self, old_name: Any, new_name: Any) -> None:
        """Bind the column currently named *old_name* to *new_name*."""
        if not is_known_name(old_name, self._headers):
            raise NoColumnError(f"Unknown column {old_name!r}")
        header_map.check_name(self._headers, new_name)
        self._headers[new_name] = self._headers.pop(old_name)
        logger.debug("Renamed column %r to %r", old_name, new_name)

    def add_column(self, col: Any, pos: int | None = None) -> None:
        """Insert a copy of *col* as a new column at *pos* (default: append).

        *col* holds one cell per row.  With header support it starts with one
        extra element, the new column's name.
        """
        expected = self.row_count + (1 if self._header_support else 0)
        cells = parse_cells(col, expected, "column")
        i = self.column_count if pos is None else check_column_insert_position(pos, self.column_count)

        if self._header_support:
            name = cells.pop(0)
            header_map.check_name(self._headers, name)
            header_map.shift_for_insert(self._headers, i)
            self._headers[name] = i

        for row, cell in zip(self._rows, cells):
            row.insert(i, cell)
        logger.debug("Inserted column at %d (%d columns)", i, self.column_count)

    def delete_column(self, pos: Any) -> list[Any]:
        """Remove column *pos* and return its cells.

        With header support the column's name is returned first, so the result
        can be passed straight back to add_column.
        """
        i = self.column_index(pos)
        removed = [row[i] for row in self._rows]

        if self._header_support:
            name = header_map.name_at(self._headers, i)
            header_map.shift_for_delete(self._headers, i)
            del self._headers[name]
            removed.insert(0, name)

        for row in self._rows:
            del row[i]
        logger.debug("Deleted column %d (%d columns left)", i, self.column_count)
        return removed

    def transform_column(self, pos: Any, fn: Callable[[Any], Any]) -> None:
        """Replace, in every row, the cell of column *pos* with ``fn(cell)``."""
        i = self.column_index(pos)
        new_cells = [fn(row[i]) for row in self._rows]
        for row, cell in zip(self._rows, new_cells):
            row[i] = cell

    def select_columns(self, predicate: Callable[[list[Any]], Any]) -> None:
        """Keep only the columns for which ``predicate(column_cells)`` is truthy.

        Every predicate is evaluated before anything is deleted.  Rejected
        columns are then deleted from the highest index down, because each
        delete_column shifts the indices of the columns to its right.
        """
        rejected = [i for i in range(self.column_count) if not predicate(self.column(i))]
        for i in reversed(rejected):
            self.delete_column(i)
        logger.debug("Dropped %d columns, %d left", len(rejected), self.column_count)
