"""Spreadsheet export of the code list, shared by GUI and headless mode."""

import io
import os
import uuid
from typing import Optional, Sequence

from openpyxl import Workbook
from openpyxl.utils import get_column_letter

DEFAULT_FILENAME = "extracted_codes.xlsx"
DEFAULT_SHEET_NAME = "Codes"


class ExportError(Exception):
    """Raised when the workbook cannot be built or saved."""


def _col_width(ws, col_idx: int, max_width: int = 60) -> float:
    """Estimate column width from the longest cell value in the column."""
    best = 0
    for row in ws.iter_rows(min_col=col_idx, max_col=col_idx):
        for cell in row:
            if cell.value is not None:
                best = max(best, len(str(cell.value)))
    return min(best + 4, max_width)


def _autofit(ws) -> None:
    """Set each column width based on its longest cell content."""
    for col_idx in range(1, ws.max_column + 1):
        ws.column_dimensions[get_column_letter(col_idx)].width = _col_width(ws, col_idx)


def build_workbook_bytes(
    codes: Sequence[str],
    sheet_name: str = DEFAULT_SHEET_NAME,
    header: Optional[str] = None,
) -> bytes:
    """
    Encode *codes* as a one-sheet, one-column xlsx workbook.
    One row per code in list order, preceded by *header* when given.
    """
    try:
        wb = Workbook()
        ws = wb.active
        ws.title = sheet_name
        if header:
            ws.append([header])
        for code in codes:
            ws.append([code])
        _autofit(ws)
        buffer = io.BytesIO()
        wb.save(buffer)
        return buffer.getvalue()
    except Exception as e:
        raise ExportError(f"Could not build workbook: {e}") from e


class ExportArtifact:
    """Encoded workbook plus the handle used to download it."""

    def __init__(self, data: bytes, row_count: int, filename: str = DEFAULT_FILENAME):
        self.handle = uuid.uuid4().hex
        self.filename = filename
        self.row_count = row_count
        self._data: Optional[bytes] = data

    @property
    def data(self) -> Optional[bytes]:
        return self._data

    @property
    def released(self) -> bool:
        return self._data is None

    @property
    def size(self) -> int:
        return len(self._data) if self._data is not None else 0

    def release(self) -> None:
        """Drop the buffer; the handle is no longer usable."""
        self._data = None

    def __repr__(self) -> str:
        state = "released" if self.released else f"{self.size} bytes"
        return f"ExportArtifact({self.filename!r}, rows={self.row_count}, {state})"


def export_codes(
    codes: Sequence[str],
    filename: str = DEFAULT_FILENAME,
    sheet_name: str = DEFAULT_SHEET_NAME,
) -> Optional[ExportArtifact]:
    """Build a fresh artifact for *codes*, or None when the list is empty."""
    if not codes:
        return None
    data = build_workbook_bytes(codes, sheet_name=sheet_name)
    return ExportArtifact(data, len(codes), filename)


def materialize(artifact: Optional[ExportArtifact], directory: str) -> Optional[str]:
    """
    Save *artifact* as ``<directory>/<artifact.filename>`` and return the path.
    Does nothing when there is no artifact. Saving again overwrites the file
    with the same bytes.
    """
    if artifact is None:
        return None
    data = artifact.data
    if data is None:
        raise ExportError(f"Artifact {artifact.handle} was released")
    output_path = os.path.join(directory, artifact.filename)
    try:
        os.makedirs(directory, exist_ok=True)
        with open(output_path, "wb") as f:
            f.write(data)
    except OSError as e:
        raise ExportError(f"Could not save {output_path}: {e}") from e
    return output_path
