"""Read exported code workbooks back into a list."""

import io
import os
from typing import List, Optional, Union

import openpyxl

from code_extractor.excel.export import DEFAULT_SHEET_NAME


def load_codes(
    source: Union[bytes, str],
    sheet_name: str = DEFAULT_SHEET_NAME,
    header: Optional[str] = None,
) -> List[str]:
    """
    Return the first column of *sheet_name*, top to bottom.

    *source* is either the workbook bytes or a path to an .xlsx file.
    When *header* is given and matches the first cell, that row is skipped.
    Empty cells are ignored.
    """
    if isinstance(source, (bytes, bytearray)):
        workbook = openpyxl.load_workbook(io.BytesIO(source), read_only=True)
    else:
        if not os.path.exists(source):
            raise FileNotFoundError(f"Workbook not found: {source}")
        workbook = openpyxl.load_workbook(source, read_only=True)

    try:
        if sheet_name not in workbook.sheetnames:
            raise KeyError(f"No '{sheet_name}' sheet found")
        sheet = workbook[sheet_name]
        codes = []
        for row in sheet.iter_rows(min_col=1, max_col=1, values_only=True):
            value = row[0] if row else None
            if value is None:
                continue
            codes.append(str(value))
    finally:
        workbook.close()

    if header and codes and codes[0] == header:
        codes = codes[1:]
    return codes
