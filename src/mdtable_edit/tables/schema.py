"""Pydantic model for a pipe table parsed out of a document.

A Table records where it sits in the document (``from_row_index`` through
``to_row_index``, exclusive) together with its separator tokens and its cell
grid.  ``cells[0]`` is the header row; the separator line sits between the
header and the first body row in the document but is not part of ``cells``.
"""

from pydantic import BaseModel, model_validator

from mdtable_edit.tables.patterns import NON_LETTER_RE


class Table(BaseModel):
    """A parsed table block: header line, separator line, and body lines.

    Rows are allowed to be ragged.  ``separator_spec`` is the authoritative
    column count used to size newly inserted rows and columns, but parsed
    rows are never padded or truncated to match it.
    """

    from_row_index: int
    to_row_index: int
    separator_spec: list[str]
    cells: list[list[str]]

    @model_validator(mode="after")
    def validate_header_present(self) -> "Table":
        """Ensure the header row exists and the line range is not inverted."""
        if not self.cells:
            raise ValueError("Table must have a header row (cells[0])")
        if self.to_row_index < self.from_row_index:
            raise ValueError(f"Line range {self.from_row_index}..{self.to_row_index} is inverted")
        return self

    @property
    def identifier(self) -> str:
        """Letters of the trimmed first-column cells, concatenated top to bottom."""
        first_column = "".join(row[0].strip() for row in self.cells if row)
        return NON_LETTER_RE.sub("", first_column)

    @property
    def column_count(self) -> int:
        return len(self.separator_spec)

    @property
    def separator_line(self) -> int:
        return self.from_row_index + 1

    def line_of(self, row_index: int) -> int:
        """Return the absolute document line of *row_index*, skipping the separator line."""
        return self.from_row_index + (0 if row_index == 0 else row_index + 1)

    def has_row(self, row_index: int) -> bool:
        return 0 <= row_index < len(self.cells)

    def shift(self, offset: int) -> None:
        """Move the whole table *offset* lines down (negative moves it up)."""
        self.from_row_index += offset
        self.to_row_index += offset
