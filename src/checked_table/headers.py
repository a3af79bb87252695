"""Header map helpers: construction, name checks, and index rebalancing.

A header map binds each column name to its column index.  When a column is
inserted or deleted, every index on the far side of that point moves by one
so that the map's values stay exactly ``{0, ..., column_count - 1}``.

The boundaries are asymmetric on purpose: an insertion at *pos* shifts
indices ``>= pos`` (the column previously at *pos* moves right), while a
deletion at *pos* shifts indices ``> pos`` (the deleted column's own entry
is removed, not shifted).
"""

from collections.abc import Iterable
from typing import Any

from checked_table.errors import DuplicateNameError, InvalidInputError, NoColumnError


def check_name(headers: dict[Any, int], name: Any) -> None:
    """Raise unless *name* can be added to *headers* as a new column name."""
    try:
        hash(name)
    except TypeError as exc:
        raise InvalidInputError(f"Column name {name!r} is not hashable") from exc
    if name in headers:
        raise DuplicateNameError(name)


def build_headers(names: Iterable[Any]) -> dict[Any, int]:
    """Map each name to its position; names must be unique."""
    headers: dict[Any, int] = {}
    for index, name in enumerate(names):
        check_name(headers, name)
        headers[name] = index
    return headers


def name_at(headers: dict[Any, int], index: int) -> Any:
    """Reverse lookup: return the name bound to *index*."""
    for name, i in headers.items():
        if i == index:
            return name
    raise NoColumnError(f"No column name is bound to index {index}")


def shift_for_insert(headers: dict[Any, int], pos: int) -> None:
    """Make room for a new column at *pos*: every index >= pos moves up by one."""
    for name, i in headers.items():
        if i >= pos:
            headers[name] = i + 1


def shift_for_delete(headers: dict[Any, int], pos: int) -> None:
    """Close the gap left by the column at *pos*: every index > pos moves down by one."""
    for name, i in headers.items():
        if i > pos:
            headers[name] = i - 1
