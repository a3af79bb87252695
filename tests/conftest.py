"""Shared test configuration and fixtures."""

from pathlib import Path

import pytest
from dotenv import load_dotenv

from checked_table.table import Table

# Load .env from project root for all tests
root = Path(__file__).parent.parent.resolve()
load_dotenv(root / ".env")


PEOPLE = [
    ["name", "age", "occupation"],
    ["Tom", 32, "engineer"],
    ["Beth", 12, "student"],
    ["George", 45, "photographer"],
    ["Laura", 23, "aviator"],
    ["Marilyn", 84, "retiree"],
]


@pytest.fixture
def people_data() -> list[list]:
    """A fresh copy of the people dataset, header row first."""
    return [list(row) for row in PEOPLE]


@pytest.fixture
def people(people_data) -> Table:
    """A header-enabled table built from the people dataset."""
    return Table(people_data, headers=True)
