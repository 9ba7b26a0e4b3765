# timegap/utils/sheet_reader.py
"""
Reads the first sheet of an uploaded spreadsheet into a raw 2D grid.
Supports legacy .xls (xlrd) and zip-based .xlsx (openpyxl) via pandas.
No header interpretation happens here; see services.tabular_decoder.
"""

import io
import math
from typing import Any

import pandas as pd

XLS_SIGNATURE = b"\xd0\xcf\x11\xe0\xa1\xb1\x1a\xe1"   # OLE2 compound document
XLSX_SIGNATURE = b"PK\x03\x04"                        # zip container


def detect_engine(raw_bytes: bytes) -> str:
    """Pick the pandas Excel engine from the file signature."""
    if raw_bytes.startswith(XLSX_SIGNATURE):
        return "openpyxl"
    if raw_bytes.startswith(XLS_SIGNATURE):
        return "xlrd"
    raise ValueError("Unsupported file type. Only .xls and .xlsx workbooks are supported.")


def is_blank_cell(value: Any) -> bool:
    """True for None, NaN and whitespace-only strings."""
    if value is None:
        return True
    if isinstance(value, float) and math.isnan(value):
        return True
    return isinstance(value, str) and not value.strip()


def read_first_sheet(raw_bytes: bytes) -> list[list[Any]]:
    """
    Return every row of the first sheet as a list of cell values.
    Empty cells come back as None or "". Text such as "NA" or "null" is
    kept verbatim. Raises ValueError if the bytes are not
    a readable workbook.
    """
    engine = detect_engine(raw_bytes)
    try:
        df = pd.read_excel(
            io.BytesIO(raw_bytes),
            sheet_name=0,
            header=None,
            dtype=object,
            keep_default_na=False,
            na_values=[],
            engine=engine,
        )
    except Exception as e:
        raise ValueError(f"Could not read workbook (format error or corruption): {e}") from e

    df = df.astype(object).where(pd.notna(df), None)
    return df.values.tolist()
