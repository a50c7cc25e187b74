"""
Grid preview layout.

The preview is a fixed window of ``rows`` x ``columns`` cells filled
column-major: top to bottom inside a column, then the next column. The row
count never changes; a longer list only adds columns. Anything past
``rows * columns`` is left out of the preview (the export still has it).
"""

import math
from typing import Iterator, List, NamedTuple, Optional, Sequence, Tuple

DEFAULT_ROWS = 10
DEFAULT_COLUMNS = 5


class GridCell(NamedTuple):
    row: int
    column: int
    index: int
    code: str


def _check_size(rows: int, columns: int = 1) -> None:
    if rows < 1 or columns < 1:
        raise ValueError(f"Grid size must be positive, got {rows}x{columns}")


def cell_position(index: int, rows: int = DEFAULT_ROWS) -> Tuple[int, int]:
    """Return (row, column) of list position *index*."""
    _check_size(rows)
    return index % rows, index // rows


def column_count(length: int, rows: int = DEFAULT_ROWS) -> int:
    """Number of columns holding at least one entry."""
    _check_size(rows)
    return math.ceil(length / rows)


def hidden_count(length: int, rows: int = DEFAULT_ROWS, columns: int = DEFAULT_COLUMNS) -> int:
    """Number of entries that do not fit in the preview window."""
    _check_size(rows, columns)
    return max(0, length - rows * columns)


def build_grid(
    codes: Sequence[str],
    rows: int = DEFAULT_ROWS,
    columns: int = DEFAULT_COLUMNS,
) -> List[List[Optional[str]]]:
    """
    Lay *codes* out as ``rows`` lists of ``columns`` entries each.
    Empty cells are None.
    """
    _check_size(rows, columns)
    grid: List[List[Optional[str]]] = []
    for row in range(rows):
        line = []
        for column in range(columns):
            index = row + column * rows
            line.append(codes[index] if index < len(codes) else None)
        grid.append(line)
    return grid


def iter_cells(
    codes: Sequence[str],
    rows: int = DEFAULT_ROWS,
    columns: int = DEFAULT_COLUMNS,
) -> Iterator[GridCell]:
    """Yield the visible, non-empty cells in list order."""
    _check_size(rows, columns)
    visible = min(len(codes), rows * columns)
    for index in range(visible):
        row, column = cell_position(index, rows)
        yield GridCell(row, column, index, codes[index])


def remove_code(codes: Sequence[str], value: str) -> List[str]:
    """Return a copy of *codes* with every occurrence of *value* dropped."""
    return [code for code in codes if code != value]
