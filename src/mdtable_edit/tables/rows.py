"""Split a pipe-table line into cells and join cells back into a line.

``split_row`` and ``join_row`` are inverses for well-formed rows
(``|a|b|``).  Cell content is kept verbatim, including surrounding
whitespace, so that unedited cells are written back exactly as they were.
Escaped pipes inside cells are not supported.
"""


def split_row(line: str) -> list[str]:
    """Split *line* on ``|`` and drop the fields outside the bounding pipes."""
    return line.split("|")[1:-1]


def join_row(cells: list[str]) -> str:
    """Render *cells* as ``|cell|cell|``."""
    return "|" + "".join(f"{cell}|" for cell in cells)


def blank_row(width: int, placeholder: str) -> list[str]:
    """Return a row of *width* placeholder cells."""
    return [placeholder] * width
