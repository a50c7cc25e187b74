"""Code extraction, grid layout and session state."""

from code_extractor.core.extractor import (
    CODE_PATTERN,
    DocumentReadError,
    extract_codes,
    read_document,
)
from code_extractor.core.grid import (
    GridCell,
    build_grid,
    cell_position,
    column_count,
    hidden_count,
    iter_cells,
    remove_code,
)
from code_extractor.core.session import SessionState

__all__ = [
    "CODE_PATTERN",
    "DocumentReadError",
    "extract_codes",
    "read_document",
    "GridCell",
    "build_grid",
    "cell_position",
    "column_count",
    "hidden_count",
    "iter_cells",
    "remove_code",
    "SessionState",
]
