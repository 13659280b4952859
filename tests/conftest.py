"""Shared test configuration and fixtures."""

from pathlib import Path

import pytest
from dotenv import load_dotenv

# Load .env from project root for all tests
root = Path(__file__).parent.parent.resolve()
load_dotenv(root / ".env")


@pytest.fixture
def example_text() -> str:
    """A single two-column table with one body row."""
    return "|A|B|\n|---|---|\n|1|2|"


@pytest.fixture
def two_tables_text() -> str:
    """Two tables separated by a blank line, with prose above and below."""
    return "\n".join(
        [
            "Intro",  # 0
            "| Name | Qty |",  # 1
            "| --- | ---: |",  # 2
            "| apple | 1 |",  # 3
            "| pear | 2 |",  # 4
            "",  # 5
            "| Key | Value |",  # 6
            "|:---|---|",  # 7
            "| x | 10 |",  # 8
            "tail",  # 9
        ]
    )
