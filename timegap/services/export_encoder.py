# timegap/services/export_encoder.py
"""
Reshapes time gap summaries into export rows and writes them to a
single-sheet .xlsx workbook.
"""

import io
from typing import Optional, Sequence

import pandas as pd
from openpyxl.utils import get_column_letter

from timegap.config import settings
from timegap.models.time_gap_summary import TimeGapSummary
from timegap.utils.timestamps import calendar_day, time_of_day
from timegap.utils.logger import get_logger

logger = get_logger(__name__)

EXPORT_COLUMNS = [
    "Employee Name",
    "Employee Code",
    "Date",
    "In Time",
    "Out Time",
    "Total Gap",
    "Record Count",
]
XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


def build_export_rows(summaries: Sequence[TimeGapSummary]) -> list[dict]:
    return [
        {
            "Employee Name": s.employee_name,
            "Employee Code": s.employee_code,
            "Date": calendar_day(s.first_time),
            "In Time": time_of_day(s.first_time),
            "Out Time": time_of_day(s.last_time),
            "Total Gap": s.total_gap,
            "Record Count": s.record_count,
        }
        for s in summaries
    ]


def encode_export(summaries: Sequence[TimeGapSummary], sheet_name: Optional[str] = None) -> bytes:
    """Serialize summaries to .xlsx bytes. An empty list yields a header-only sheet."""
    sheet_name = sheet_name or settings.EXPORT_SHEET_NAME
    df = pd.DataFrame(build_export_rows(summaries), columns=EXPORT_COLUMNS)

    buffer = io.BytesIO()
    with pd.ExcelWriter(buffer, engine="openpyxl") as writer:
        df.to_excel(writer, index=False, sheet_name=sheet_name)
        ws = writer.sheets[sheet_name]
        for position, column in enumerate(EXPORT_COLUMNS, start=1):
            width = max([len(column)] + [len(str(v)) for v in df[column]])
            ws.column_dimensions[get_column_letter(position)].width = width + 2

    logger.info(f"Encoded {len(df)} summaries to '{sheet_name}'")
    return buffer.getvalue()
