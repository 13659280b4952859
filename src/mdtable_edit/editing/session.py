"""Editing session over one open document: table registry, cell reads, and mutations.

Lifecycle: ``open`` (parse) -> any number of mutations -> ``close``.  Each
mutation resolves its table by identifier, updates the in-memory grid and
line bookkeeping, and writes the matching line edits through the editing
surface as one ordered batch followed by a single persist.

Failures never raise.  Lookups that miss and structural refusals come back
as an ``EditResult`` with a non-applied outcome and leave everything
untouched.  Without an attached surface the grid is still mutated, but no
edits are written and nothing is persisted until the next parse.

Exceptions raised by the host surface itself propagate unchanged.

Mutations must not overlap: await one before starting the next.
"""

import logging

from mdtable_edit.config import DEFAULT_SEPARATOR_TOKEN, NEW_COLUMN_CELL, NEW_ROW_CELL
from mdtable_edit.editing.edits import (
    DeleteLine,
    DeleteLineRange,
    EditOutcome,
    EditResult,
    InsertLineAfter,
    LineEdit,
    SetLine,
)
from mdtable_edit.editing.surface import DocumentSource, EditingSurface
from mdtable_edit.tables.detection import parse_text
from mdtable_edit.tables.rows import blank_row, join_row
from mdtable_edit.tables.schema import Table

logger = logging.getLogger(__name__)


class TableSession:
    """Owns the table registry of one document between two parses."""

    def __init__(self, source: DocumentSource, surface: EditingSurface | None = None):
        self.source = source
        self.surface = surface
        self._tables: dict[str, Table] = {}

    # ─── Lifecycle ───────────────────────────────────────────────────────

    async def __aenter__(self) -> "TableSession":
        await self.open()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        self.close()

    async def open(self) -> None:
        await self.parse()

    async def parse(self) -> None:
        """Rebuild the registry from the document's current text."""
        text = await self.source.read_full_text()
        self._tables = parse_text(text)
        logger.info("Parsed %d tables", len(self._tables))

    def close(self) -> None:
        self._tables = {}
        self.surface = None

    def attach_surface(self, surface: EditingSurface) -> None:
        self.surface = surface

    def detach_surface(self) -> None:
        self.surface = None

    # ─── Reads ───────────────────────────────────────────────────────────

    @property
    def table_ids(self) -> list[str]:
        return list(self._tables)

    def get_table(self, table_id: str) -> Table | None:
        """Return a copy of the table registered under *table_id*."""
        table = self._tables.get(table_id)
        return table.model_copy(deep=True) if table is not None else None

    def get_cell(self, table_id: str, row_index: int, col_index: int) -> str:
        """Return the trimmed cell content, or ``""`` if anything does not exist."""
        table = self._tables.get(table_id)
        if table is None or not table.has_row(row_index):
            return ""
        row = table.cells[row_index]
        if not 0 <= col_index < len(row):
            return ""
        return row[col_index].strip()

    # ─── Mutations ───────────────────────────────────────────────────────

    async def update(self, table_id: str, row_index: int, col_index: int, text: str) -> EditResult:
        """Replace one cell and rewrite its line."""
        table = self._tables.get(table_id)
        if table is None or not table.has_row(row_index) or col_index < 0:
            return self._skip(EditOutcome.NOT_FOUND, table_id, "update")
        row = table.cells[row_index]
        if col_index >= len(row):
            # Ragged row: pad up to the column, but never past the column count
            if col_index >= table.column_count:
                return self._skip(EditOutcome.NOT_FOUND, table_id, "update")
            row.extend(blank_row(col_index + 1 - len(row), NEW_ROW_CELL))

        row[col_index] = text
        return await self._emit(table_id, [SetLine(line=table.line_of(row_index), text=join_row(row))])

    async def delete_row(self, table_id: str, row_index: int) -> EditResult:
        """Delete one body row.  The header row cannot be deleted."""
        table = self._tables.get(table_id)
        if table is None:
            return self._skip(EditOutcome.NOT_FOUND, table_id, "delete_row")
        if row_index == 0:
            return self._skip(EditOutcome.REFUSED, table_id, "delete_row")
        if not table.has_row(row_index):
            return self._skip(EditOutcome.NOT_FOUND, table_id, "delete_row")

        line = table.line_of(row_index)
        old_end = table.to_row_index
        del table.cells[row_index]
        table.to_row_index -= 1
        self._shift_tables_below(table, old_end, -1)
        return await self._emit(table_id, [DeleteLine(line=line)])

    async def delete_col(self, table_id: str, col_index: int) -> EditResult:
        """Delete one column; deleting the last column deletes the whole table block."""
        table = self._tables.get(table_id)
        if table is None or not 0 <= col_index < table.column_count:
            return self._skip(EditOutcome.NOT_FOUND, table_id, "delete_col")

        del table.separator_spec[col_index]
        for row in table.cells:
            if col_index < len(row):
                del row[col_index]

        if table.column_count == 0:
            start, end = table.from_row_index, table.to_row_index
            del self._tables[table_id]
            self._shift_tables_below(table, end, start - end)
            logger.debug("Removed table %r (lines %d..%d)", table_id, start, end)
            return await self._emit(table_id, [DeleteLineRange(start=start, end=end)])
        return await self._emit(table_id, self._rewrite_table(table))

    async def insert_col_right(self, table_id: str, col_index: int) -> EditResult:
        """Insert a blank, left-aligned column after *col_index* (``-1`` inserts a first column)."""
        table = self._tables.get(table_id)
        if table is None or not -1 <= col_index < table.column_count:
            return self._skip(EditOutcome.NOT_FOUND, table_id, "insert_col_right")

        table.separator_spec.insert(col_index + 1, DEFAULT_SEPARATOR_TOKEN)
        for row in table.cells:
            row.insert(col_index + 1, NEW_COLUMN_CELL)
        return await self._emit(table_id, self._rewrite_table(table))

    async def insert_row_below(self, table_id: str, row_index: int) -> EditResult:
        """Insert a blank row after body row *row_index*.  Not allowed below the header."""
        table = self._tables.get(table_id)
        if table is None:
            return self._skip(EditOutcome.NOT_FOUND, table_id, "insert_row_below")
        if row_index == 0:
            return self._skip(EditOutcome.REFUSED, table_id, "insert_row_below")
        if not table.has_row(row_index):
            return self._skip(EditOutcome.NOT_FOUND, table_id, "insert_row_below")

        new_row = blank_row(table.column_count, NEW_ROW_CELL)
        line = table.line_of(row_index)
        old_end = table.to_row_index
        table.cells.insert(row_index + 1, new_row)
        table.to_row_index += 1
        self._shift_tables_below(table, old_end, 1)
        return await self._emit(
            table_id,
            [InsertLineAfter(line=line), SetLine(line=line + 1, text=join_row(new_row))],
        )

    # ─── Helpers ─────────────────────────────────────────────────────────

    @staticmethod
    def _rewrite_table(table: Table) -> list[LineEdit]:
        """SetLine edits for the separator line and every header/body line."""
        edits: list[LineEdit] = [SetLine(line=table.separator_line, text=join_row(table.separator_spec))]
        for i, row in enumerate(table.cells):
            edits.append(SetLine(line=table.line_of(i), text=join_row(row)))
        return edits

    def _shift_tables_below(self, table: Table, old_end: int, offset: int) -> None:
        """Move every other table starting at or after *old_end* by *offset* lines."""
        for other in self._tables.values():
            if other is not table and other.from_row_index >= old_end:
                other.shift(offset)

    async def _emit(self, table_id: str, edits: list[LineEdit]) -> EditResult:
        if self.surface is None:
            logger.info("No editing surface attached; %r changed in memory only", table_id)
            return EditResult(outcome=EditOutcome.SURFACE_UNAVAILABLE, table_id=table_id)
        self.surface.apply(edits)
        await self.surface.persist()
        logger.debug("Applied %d line edits to %r", len(edits), table_id)
        return EditResult(outcome=EditOutcome.APPLIED, table_id=table_id, edits=edits)

    @staticmethod
    def _skip(outcome: EditOutcome, table_id: str, operation: str) -> EditResult:
        logger.debug("%s on %r skipped: %s", operation, table_id, outcome.value)
        return EditResult(outcome=outcome, table_id=table_id)
