"""Table detection over a document's lines.

Scans the lines once, top to bottom.  Each separator row marks a table whose
header is the line directly above it; the body is every following line that
starts with ``|`` (after leading whitespace).  The scan resumes on the line
after the one that ended the body, so no line belongs to two tables.
"""

import logging

from mdtable_edit.tables.patterns import LINE_SPLIT_RE, SEPARATOR_ROW_RE
from mdtable_edit.tables.rows import split_row
from mdtable_edit.tables.schema import Table

logger = logging.getLogger(__name__)


def is_separator_row(line: str) -> bool:
    """Return True if *line* holds only ``|``, ``-``, ``:`` and whitespace, with at least one ``|``."""
    return bool(SEPARATOR_ROW_RE.match(line))


def is_body_row(line: str) -> bool:
    """Return True if *line* continues a table body."""
    return line.lstrip().startswith("|")


def split_lines(text: str) -> list[str]:
    """Split document text on CRLF or LF."""
    return LINE_SPLIT_RE.split(text)


def _read_table(lines: list[str], sep_idx: int) -> Table:
    """Build the Table whose separator row is at *sep_idx*; the header is the line above."""
    cells = [split_row(lines[sep_idx - 1])]
    end = sep_idx + 1
    while end < len(lines) and is_body_row(lines[end]):
        cells.append(split_row(lines[end]))
        end += 1
    return Table(
        from_row_index=sep_idx - 1,
        to_row_index=end,
        separator_spec=split_row(lines[sep_idx]),
        cells=cells,
    )


def parse_lines(lines: list[str]) -> dict[str, Table]:
    """Return a fresh registry of every table in *lines*, keyed by identifier.

    Identifiers are not unique; a later table with the same identifier
    replaces the earlier one.
    """
    tables: dict[str, Table] = {}
    i = 0
    n = len(lines)
    while i < n:
        if not is_separator_row(lines[i]):
            i += 1
            continue
        # A separator on the first line has no header above it
        if i == 0:
            i += 1
            continue

        table = _read_table(lines, i)
        table_id = table.identifier
        if table_id in tables:
            logger.warning(
                "Table at line %d has the same identifier %r as the table at line %d; replacing it",
                table.from_row_index,
                table_id,
                tables[table_id].from_row_index,
            )
        tables[table_id] = table
        # The line that ended the body cannot start another table
        i = table.to_row_index + 1

    logger.debug("Parsed %d lines into %d tables", n, len(tables))
    return tables


def parse_text(text: str) -> dict[str, Table]:
    """Split *text* into lines and detect its tables."""
    return parse_lines(split_lines(text))
