"""Exception classes raised by Table operations.

Every class derives from TableError and from the closest built-in exception,
so callers can catch either ``TableError`` or the familiar built-in
(``IndexError`` for a bad row, ``ValueError`` for malformed input, ...).
"""


class TableError(Exception):
    """Base class for all table errors."""


class InvalidInputError(TableError, ValueError):
    """Raised when data passed to construction, add_row or add_column is not a
    sequence, or does not have the expected row/column length."""


class NoRowError(TableError, IndexError):
    """Raised when a row index lies outside the table."""


class NoColumnError(TableError, LookupError):
    """Raised when a column index lies outside the table or a column name is unknown."""


class DuplicateNameError(TableError, ValueError):
    """Raised when a header name is already taken."""

    def __init__(self, name):
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"column name {self.name!r} is already taken"
