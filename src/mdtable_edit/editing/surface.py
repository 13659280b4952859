"""Host collaborators: the document source and the line-addressable editing surface.

The session reads the whole document once per parse through a
``DocumentSource`` and writes every mutation back through an
``EditingSurface``.  Line indices are zero-based and every edit takes effect
immediately, so later edits in the same batch see earlier line-count changes.

Two hosts are provided:
  LineBuffer    -- in-memory list of lines; source and surface in one object
  FileDocument  -- LineBuffer backed by a file on disk; persist writes it back
"""

import asyncio
import logging
from pathlib import Path

from mdtable_edit.config import FILE_ENCODING
from mdtable_edit.editing.edits import DeleteLine, DeleteLineRange, InsertLineAfter, LineEdit, SetLine
from mdtable_edit.tables.detection import split_lines
from mdtable_edit.tables.patterns import LINE_TERMINATOR_RE

logger = logging.getLogger(__name__)


class DocumentSource:
    """Provides the full text of the open document."""

    async def read_full_text(self) -> str:
        raise NotImplementedError


class EditingSurface:
    """Line-addressable editing surface of the open document.

    Subclasses implement the four line primitives and ``persist``.  ``apply``
    dispatches a batch to the primitives one by one; hosts that can group
    edits into a single transaction override it.
    """

    def set_line(self, line: int, text: str) -> None:
        raise NotImplementedError

    def insert_line_after(self, line: int) -> None:
        raise NotImplementedError

    def delete_line(self, line: int) -> None:
        raise NotImplementedError

    def delete_line_range(self, start: int, end: int) -> None:
        raise NotImplementedError

    async def persist(self) -> None:
        raise NotImplementedError

    def apply(self, edits: list[LineEdit]) -> None:
        """Apply *edits* in order."""
        for edit in edits:
            if isinstance(edit, SetLine):
                self.set_line(edit.line, edit.text)
            elif isinstance(edit, InsertLineAfter):
                self.insert_line_after(edit.line)
            elif isinstance(edit, DeleteLine):
                self.delete_line(edit.line)
            elif isinstance(edit, DeleteLineRange):
                self.delete_line_range(edit.start, edit.end)
            else:
                raise TypeError(f"Unknown line edit: {edit!r}")


class LineBuffer(DocumentSource, EditingSurface):
    """In-memory document held as a list of lines."""

    def __init__(self, text: str = ""):
        self.lines = split_lines(text)
        self.persist_count = 0

    @property
    def text(self) -> str:
        return "\n".join(self.lines)

    def _check(self, line: int) -> None:
        if not 0 <= line < len(self.lines):
            raise IndexError(f"Line {line} out of range (document has {len(self.lines)} lines)")

    async def read_full_text(self) -> str:
        return self.text

    def set_line(self, line: int, text: str) -> None:
        self._check(line)
        self.lines[line] = text

    def insert_line_after(self, line: int) -> None:
        self._check(line)
        self.lines.insert(line + 1, "")

    def delete_line(self, line: int) -> None:
        self._check(line)
        del self.lines[line]

    def delete_line_range(self, start: int, end: int) -> None:
        if start > end:
            raise IndexError(f"Line range {start}..{end} is inverted")
        self._check(start)
        if end > len(self.lines):
            raise IndexError(f"Line range end {end} past end of document ({len(self.lines)} lines)")
        del self.lines[start:end]

    async def persist(self) -> None:
        self.persist_count += 1


class FileDocument(LineBuffer):
    """A text file opened for table editing.

    Every line keeps its own terminator (``\\r\\n``, ``\\n``, or none for an
    unterminated last line), so lines that are not edited are written back
    byte for byte even in files with mixed line endings.  An inserted line
    takes the terminator of the line it follows.  Reading the full text
    reloads the buffer from disk, so the lines being edited are the lines
    that were last parsed.

    The constructor reads the file synchronously; create the document before
    entering the event loop.
    """

    def __init__(self, path: Path | str, encoding: str = FILE_ENCODING):
        super().__init__()
        self.path = Path(path)
        self.encoding = encoding
        self.newline = "\n"
        self.endings: list[str] = [""]
        self._load()

    def _load(self) -> None:
        # newline="" keeps CRLF visible so each terminator is kept as found
        with open(self.path, "r", encoding=self.encoding, newline="") as fopen:
            raw = fopen.read()
        parts = LINE_TERMINATOR_RE.split(raw)
        lines = parts[0::2]
        endings = parts[1::2] + [""]
        # A final terminator closes the last line; it does not open an empty one
        if len(lines) > 1 and lines[-1] == "":
            lines.pop()
            endings.pop()
        self.lines = lines
        self.endings = endings
        self.newline = next((ending for ending in endings if ending), "\n")
        logger.debug("Loaded %s (%d lines)", self.path, len(self.lines))

    @property
    def text(self) -> str:
        return "".join(line + ending for line, ending in zip(self.lines, self.endings))

    async def read_full_text(self) -> str:
        await asyncio.to_thread(self._load)
        return self.text

    def insert_line_after(self, line: int) -> None:
        super().insert_line_after(line)
        # The new line takes over the old terminator; an unterminated line gets the default
        self.endings.insert(line + 1, self.endings[line])
        if not self.endings[line]:
            self.endings[line] = self.newline

    def delete_line(self, line: int) -> None:
        self.delete_line_range(line, line + 1)

    def delete_line_range(self, start: int, end: int) -> None:
        last_ending = self.endings[end - 1] if start < end <= len(self.endings) else ""
        at_end = start < end == len(self.lines)
        super().delete_line_range(start, end)
        del self.endings[start:end]
        # An unterminated file stays unterminated when its last line goes
        if at_end and self.endings and not last_ending:
            self.endings[-1] = ""
        if not self.lines:
            self.lines, self.endings = [""], [""]

    def _write(self) -> None:
        with open(self.path, "w", encoding=self.encoding, newline="") as fopen:
            fopen.write(self.text)

    async def persist(self) -> None:
        await asyncio.to_thread(self._write)
        self.persist_count += 1
        logger.debug("Saved %s (%d lines)", self.path, len(self.lines))
