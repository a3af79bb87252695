"""Pydantic models for raw table input.

Everything array-shaped that enters a Table (the initial dataset, a new row,
a new column) passes through one of these models first.  The models reject
anything that is not a sequence (strings and mappings included) and, for the
initial dataset, guarantee that every row has the same number of cells.

The validated value is deep-copied before it is handed back, so a Table never
shares storage with the caller's objects.
"""

import copy
from collections.abc import Sequence
from typing import Any

from pydantic import RootModel, ValidationError, model_validator

from checked_table.errors import InvalidInputError


def _require_sequence(value: Any, what: str) -> None:
    """Raise ValueError unless *value* is an ordered sequence other than a string."""
    if isinstance(value, (str, bytes, bytearray)) or not isinstance(value, Sequence):
        raise ValueError(f"{what} must be an ordered sequence, not {type(value).__name__}")


class TableData(RootModel[list[list[Any]]]):
    """A two-dimensional dataset: a list of rows, each a list of cells.

    Sets, generators and other unordered or one-shot iterables are rejected
    before pydantic's list coercion sees them, at both the table and the row
    level.  The after-validator guarantees that every row has exactly as many
    cells as the first one, so a Table built from it starts out rectangular.
    """

    @model_validator(mode="before")
    @classmethod
    def validate_sequences(cls, data: Any) -> Any:
        """Ensure the table and each of its rows are ordered sequences."""
        _require_sequence(data, "Table data")
        for i, row in enumerate(data):
            _require_sequence(row, f"Row {i}")
        return data

    @model_validator(mode="after")
    def validate_row_widths(self) -> "TableData":
        """Ensure every row has exactly len(rows[0]) cells."""
        if not self.root:
            return self
        n_cols = len(self.root[0])
        for i, row in enumerate(self.root):
            if len(row) != n_cols:
                raise ValueError(f"Row {i} has {len(row)} cells, expected {n_cols} (matching row 0)")
        return self


class CellSequence(RootModel[list[Any]]):
    """A single row or column of cells."""

    @model_validator(mode="before")
    @classmethod
    def validate_sequence(cls, data: Any) -> Any:
        """Ensure the cells come from an ordered sequence."""
        _require_sequence(data, "Cells")
        return data


def _first_error(exc: ValidationError) -> str:
    """Return the message of the first pydantic error, prefixed with its location."""
    err = exc.errors()[0]
    loc = ".".join(str(part) for part in err["loc"])
    return f"{loc}: {err['msg']}" if loc else err["msg"]


def parse_rows(data: Any) -> list[list[Any]]:
    """Validate *data* as a rectangular sequence of rows and return a deep copy of it."""
    try:
        validated = TableData.model_validate(data)
    except ValidationError as exc:
        raise InvalidInputError(f"Input is not a rectangular sequence of rows ({_first_error(exc)})") from exc
    return copy.deepcopy(validated.root)


def parse_cells(data: Any, expected: int, what: str = "row") -> list[Any]:
    """Validate *data* as a sequence of exactly *expected* cells and return a deep copy of it.

    *expected* may be -1 to accept any length (the first row of an empty table).
    """
    try:
        validated = CellSequence.model_validate(data)
    except ValidationError as exc:
        raise InvalidInputError(f"New {what} is not a sequence ({_first_error(exc)})") from exc
    cells = validated.root
    if expected >= 0 and len(cells) != expected:
        raise InvalidInputError(f"Inconsistent {what} length: expected {expected} cells, got {len(cells)}")
    return copy.deepcopy(cells)
