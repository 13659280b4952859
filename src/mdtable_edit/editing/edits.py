"""Line edits emitted by table mutations, and the outcome of each mutation.

A mutation produces an ordered batch of line edits.  Edits in a batch are
applied in order and each one sees the line-count effects of the ones before
it.
"""

from enum import Enum
from typing import Literal, Union

from pydantic import BaseModel


class SetLine(BaseModel, frozen=True):
    """Replace the text of one line."""

    kind: Literal["set"] = "set"
    line: int
    text: str


class InsertLineAfter(BaseModel, frozen=True):
    """Insert an empty line directly after *line*."""

    kind: Literal["insert_after"] = "insert_after"
    line: int


class DeleteLine(BaseModel, frozen=True):
    kind: Literal["delete"] = "delete"
    line: int


class DeleteLineRange(BaseModel, frozen=True):
    """Delete lines *start* (inclusive) through *end* (exclusive)."""

    kind: Literal["delete_range"] = "delete_range"
    start: int
    end: int


LineEdit = Union[SetLine, InsertLineAfter, DeleteLine, DeleteLineRange]


class EditOutcome(str, Enum):
    APPLIED = "applied"
    NOT_FOUND = "not_found"  # unknown table id or index out of range
    REFUSED = "refused"  # header row delete / insert below the header
    SURFACE_UNAVAILABLE = "surface_unavailable"  # grid mutated, document untouched


class EditResult(BaseModel):
    """What a mutation did: its outcome and the line edits it emitted (if any)."""

    outcome: EditOutcome
    table_id: str
    edits: list[LineEdit] = []

    @property
    def applied(self) -> bool:
        return self.outcome is EditOutcome.APPLIED
