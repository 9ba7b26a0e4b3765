"""Unit tests for the summary export workbook."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import io
from openpyxl import load_workbook
from timegap.models import TimeGapSummary
from timegap.services.export_encoder import EXPORT_COLUMNS, build_export_rows, encode_export


def make_summary(name="Alice", code="101", first="25-Jun-2025 08:00:00",
                 last="25-Jun-2025 17:30:15", gap="9h 30m 15s", count=2):
    return TimeGapSummary(
        employee_name=name,
        employee_code=code,
        first_time=first,
        last_time=last,
        total_gap=gap,
        record_count=count,
    )


def read_sheet(content):
    wb = load_workbook(io.BytesIO(content))
    assert len(wb.sheetnames) == 1
    ws = wb[wb.sheetnames[0]]
    return ws.title, [list(row) for row in ws.iter_rows(values_only=True)]


class TestBuildExportRows:
    def test_reshapes_summary(self):
        assert build_export_rows([make_summary()]) == [{
            "Employee Name": "Alice",
            "Employee Code": "101",
            "Date": "25-Jun-2025",
            "In Time": "08:00:00",
            "Out Time": "17:30:15",
            "Total Gap": "9h 30m 15s",
            "Record Count": 2,
        }]

    def test_single_scan_in_equals_out(self):
        row = build_export_rows([make_summary(last="25-Jun-2025 08:00:00", gap="0h 0m 0s", count=1)])[0]
        assert row["In Time"] == row["Out Time"] == "08:00:00"


class TestEncodeExport:
    def test_single_sheet_with_header(self):
        title, rows = read_sheet(encode_export([make_summary(), make_summary("Bob", "102")]))
        assert title == "Time Gap Summary"
        assert rows[0] == EXPORT_COLUMNS
        assert rows[1] == ["Alice", "101", "25-Jun-2025", "08:00:00", "17:30:15", "9h 30m 15s", 2]
        assert rows[2][0] == "Bob"
        assert len(rows) == 3

    def test_empty_summary_list(self):
        title, rows = read_sheet(encode_export([]))
        assert title == "Time Gap Summary"
        assert rows == [EXPORT_COLUMNS]

    def test_custom_sheet_name(self):
        title, _ = read_sheet(encode_export([make_summary()], sheet_name="June"))
        assert title == "June"
