"""Shared configuration for table parsing and editing."""

import os
from pathlib import Path

from dotenv import load_dotenv

ROOT = Path(__file__).parent.parent.parent.resolve()
load_dotenv(ROOT / ".env")

LOG_LEVEL = os.getenv("MDTABLE_LOG_LEVEL", "INFO").upper()

# Separator token for a newly inserted column (left aligned)
DEFAULT_SEPARATOR_TOKEN = "---"

# Placeholder content for cells of new columns and new rows
NEW_COLUMN_CELL = "   "
NEW_ROW_CELL = "  "

FILE_ENCODING = os.getenv("MDTABLE_FILE_ENCODING", "utf-8")
