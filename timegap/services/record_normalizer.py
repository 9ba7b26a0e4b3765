# timegap/services/record_normalizer.py
"""
Coerces decoded row mappings into EventRecord instances.
Column labels are matched exactly (case-sensitive, no aliases).
"""

from datetime import datetime
from typing import Any, Iterable, Mapping

from timegap.models.event_record import EventRecord
from timegap.utils.sheet_reader import is_blank_cell
from timegap.utils.timestamps import format_log_date

FIELD_COLUMNS = {
    "log_date": "Log Date",
    "direction": "Direction",
    "employee_code": "Employee Code",
    "employee_name": "Employee Name",
    "company": "Company",
    "department": "Department",
}


def coerce_cell(value: Any) -> str:
    """String form of a cell value; blanks become ''."""
    if is_blank_cell(value):
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, datetime):
        return format_log_date(value)
    if isinstance(value, float) and value.is_integer():
        # xlrd hands back every number as float: 101.0 -> "101"
        return str(int(value))
    return str(value)


def normalize_records(rows: Iterable[Mapping[str, Any]]) -> list[EventRecord]:
    records = []
    for position, row in enumerate(rows, start=1):
        fields = {field: coerce_cell(row.get(column)) for field, column in FIELD_COLUMNS.items()}
        records.append(EventRecord(id=position, **fields))
    return records
