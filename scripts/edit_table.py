"""Inspect and edit the pipe tables of a markdown file from the command line.

Each invocation opens the file, parses its tables, applies at most one edit
as line-local changes, and saves the file.  Tables are addressed by their
identifier (the letters of their first column); run ``list`` to see them.

Usage:
    python scripts/edit_table.py notes.md list
    python scripts/edit_table.py notes.md get Aab 1 1
    python scripts/edit_table.py notes.md update Aab 1 1 "new value"
    python scripts/edit_table.py notes.md delete-row Aab 2
    python scripts/edit_table.py notes.md delete-col Aab 0
    python scripts/edit_table.py notes.md insert-col Aab 0
    python scripts/edit_table.py notes.md insert-row Aab 1
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

# Ensure project root is importable
ROOT = Path(__file__).parent.parent.resolve()
sys.path.insert(0, str(ROOT / "src"))

from mdtable_edit.config import LOG_LEVEL  # pylint: disable=wrong-import-position
from mdtable_edit.editing.session import TableSession  # pylint: disable=wrong-import-position
from mdtable_edit.editing.surface import FileDocument  # pylint: disable=wrong-import-position

logger = logging.getLogger(__name__)


def print_tables(session: TableSession) -> None:
    """Print every table's identifier, line range, and size."""
    if not session.table_ids:
        print("No tables found.")
        return
    for table_id in session.table_ids:
        table = session.get_table(table_id)
        print(
            f"{table_id or '(empty id)'}: lines {table.from_row_index}-{table.to_row_index - 1}, "
            f"{table.column_count} columns, {len(table.cells) - 1} body rows"
        )


async def run(args: argparse.Namespace, document: FileDocument) -> int:
    """Parse the document, run the requested command, and return an exit code."""
    async with TableSession(document, document) as session:
        if args.command == "list":
            print_tables(session)
            return 0
        if args.command == "get":
            print(session.get_cell(args.table_id, args.row, args.col))
            return 0

        if args.command == "update":
            result = await session.update(args.table_id, args.row, args.col, args.text)
        elif args.command == "delete-row":
            result = await session.delete_row(args.table_id, args.row)
        elif args.command == "delete-col":
            result = await session.delete_col(args.table_id, args.col)
        elif args.command == "insert-col":
            result = await session.insert_col_right(args.table_id, args.col)
        else:
            result = await session.insert_row_below(args.table_id, args.row)

        print(f"{args.command} {result.table_id!r}: {result.outcome.value} ({len(result.edits)} line edits)")
        return 0 if result.applied else 1


def main():
    """Parse arguments and dispatch."""
    parser = argparse.ArgumentParser(description="Edit markdown pipe tables with line-local edits")
    parser.add_argument("path", type=Path, help="Markdown file to edit")
    parser.add_argument("--verbose", action="store_true", help="Log at DEBUG level")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("list", help="List detected tables")

    get_p = sub.add_parser("get", help="Print one cell")
    update_p = sub.add_parser("update", help="Replace one cell")
    for p in (get_p, update_p):
        p.add_argument("table_id")
        p.add_argument("row", type=int)
        p.add_argument("col", type=int)
    update_p.add_argument("text")

    for name, index, help_text in (
        ("delete-row", "row", "Delete a body row"),
        ("insert-row", "row", "Insert a blank row below a body row"),
        ("delete-col", "col", "Delete a column"),
        ("insert-col", "col", "Insert a blank column to the right of a column"),
    ):
        p = sub.add_parser(name, help=help_text)
        p.add_argument("table_id")
        p.add_argument(index, type=int)

    args = parser.parse_args()
    level = logging.DEBUG if args.verbose else LOG_LEVEL
    logging.basicConfig(level=level, format="%(asctime)s - %(levelname)s - %(message)s")

    # The file is read before the event loop starts
    document = FileDocument(args.path)
    sys.exit(asyncio.run(run(args, document)))


if __name__ == "__main__":
    main()
