"""Bounds checks and column-name resolution for Table positions.

Each function takes a requested position plus the current table dimensions
and returns the canonical, non-negative index, or raises NoRowError /
NoColumnError.  Negative positions count from the end, as with Python lists.

Two windows are used:

  element access  -- ``[-count, count - 1]``: the position must name an
                     existing row or column.
  insertion       -- ``[-count, count]``: one past the end means "append".
"""

from collections.abc import Mapping
from typing import Any

from checked_table.errors import NoColumnError, NoRowError


def _is_position(pos: Any) -> bool:
    """Return True if *pos* is a plain integer (bool is not accepted as a position)."""
    return isinstance(pos, int) and not isinstance(pos, bool)


def _in_window(pos: int, count: int, slack: int = 0) -> bool:
    return -count <= pos < count + slack


def is_known_name(name: Any, headers: Mapping[Any, int]) -> bool:
    """Return True if *name* is a key of *headers*; unhashable names are never known."""
    try:
        return name in headers
    except TypeError:
        return False


def _canonical(pos: int, count: int) -> int:
    return pos + count if pos < 0 else pos


def _describe_window(count: int, slack: int = 0) -> str:
    if count + slack == 0:
        return "the table is empty"
    return f"valid range is [{-count}, {count + slack - 1}]"


# ─── Rows ─────────────────────────────────────────────────────────────────────


def check_row_index(pos: Any, row_count: int) -> int:
    """Return the canonical index of an existing row, or raise NoRowError."""
    if not _is_position(pos) or not _in_window(pos, row_count):
        raise NoRowError(f"Row index {pos!r} is out of range ({_describe_window(row_count)})")
    return _canonical(pos, row_count)


def check_row_insert_position(pos: Any, row_count: int) -> int:
    """Return the canonical position at which a new row may be inserted, or raise NoRowError."""
    if not _is_position(pos) or not _in_window(pos, row_count, slack=1):
        raise NoRowError(f"Row insert position {pos!r} is out of range ({_describe_window(row_count, 1)})")
    return _canonical(pos, row_count)


# ─── Columns ──────────────────────────────────────────────────────────────────


def check_column_index(pos: Any, column_count: int) -> int:
    """Return the canonical index of an existing column, or raise NoColumnError."""
    if not _is_position(pos) or not _in_window(pos, column_count):
        raise NoColumnError(f"Column index {pos!r} is out of range ({_describe_window(column_count)})")
    return _canonical(pos, column_count)


def check_column_insert_position(pos: Any, column_count: int) -> int:
    """Return the canonical position at which a new column may be inserted, or raise NoColumnError."""
    if not _is_position(pos) or not _in_window(pos, column_count, slack=1):
        raise NoColumnError(
            f"Column insert position {pos!r} is out of range ({_describe_window(column_count, 1)})"
        )
    return _canonical(pos, column_count)


def resolve_column(pos: Any, headers: Mapping[Any, int], column_count: int) -> int:
    """Resolve a column name or position to a canonical column index.

    A name found in *headers* wins over the positional reading, so a table
    whose header row holds integers is still addressed by those names.
    Anything that is not a known name must be an in-range integer; an
    unknown name is never passed through.
    """
    if is_known_name(pos, headers):
        return headers[pos]
    if not _is_position(pos):
        raise NoColumnError(f"Unknown column {pos!r}")
    return check_column_index(pos, column_count)
