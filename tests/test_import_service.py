"""Unit tests for decoding uploaded workbook bytes."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import io
import pytest
import xlwt
from openpyxl import Workbook
from timegap.services.import_service import decode
from timegap.services.tabular_decoder import DecodeError
from timegap.utils.sheet_reader import detect_engine

HEADER = ["Log Date", "Direction", "Employee Code", "Employee Name", "Company", "Department"]


def make_workbook(rows):
    wb = Workbook()
    ws = wb.active
    for row in rows:
        ws.append(row)
    buffer = io.BytesIO()
    wb.save(buffer)
    return buffer.getvalue()


def make_xls_workbook(rows):
    wb = xlwt.Workbook()
    ws = wb.add_sheet("Scans")
    for r, row in enumerate(rows):
        for c, value in enumerate(row):
            if value is not None:
                ws.write(r, c, value)
    buffer = io.BytesIO()
    wb.save(buffer)
    return buffer.getvalue()


SCENARIO = make_workbook([
    ["ignore"],
    HEADER,
    ["25-Jun-2025 08:00:00", "IN", "101", "Alice", "Acme", "Ops"],
    ["25-Jun-2025 17:30:15", "OUT", "101", "Alice", "Acme", "Ops"],
])


class TestDecode:
    def test_banner_row_skipped(self):
        records = decode(SCENARIO)
        assert len(records) == 2
        assert records[0].id == 1
        assert records[0].log_date == "25-Jun-2025 08:00:00"
        assert records[0].direction == "IN"
        assert records[0].employee_name == "Alice"
        assert records[1].id == 2
        assert records[1].log_date == "25-Jun-2025 17:30:15"

    def test_idempotent(self):
        assert decode(SCENARIO) == decode(SCENARIO)

    def test_numeric_code_cells(self):
        body = make_workbook([HEADER, ["25-Jun-2025 08:00:00", "IN", 101, "Alice", "Acme", "Ops"]])
        assert decode(body)[0].employee_code == "101"

    def test_sparse_trailing_columns(self):
        body = make_workbook([HEADER, ["25-Jun-2025 08:00:00", "IN", "101"]])
        record = decode(body)[0]
        assert record.employee_name == ""
        assert record.company == ""

    def test_na_like_text_kept_verbatim(self):
        body = make_workbook([HEADER, ["25-Jun-2025 08:00:00", "NA", "101", "None", "null", "N/A"]])
        record = decode(body)[0]
        assert (record.direction, record.employee_name, record.company, record.department) == \
            ("NA", "None", "null", "N/A")

    def test_nan_and_lowercase_na_text_kept(self):
        body = make_workbook([HEADER, ["25-Jun-2025 08:00:00", "n/a", "101", "nan", "", "NULL"]])
        record = decode(body)[0]
        assert record.direction == "n/a"
        assert record.employee_name == "nan"
        assert record.company == ""
        assert record.department == "NULL"

    def test_no_header_row(self):
        body = make_workbook([["Date", "Who"], ["25-Jun-2025 08:00:00", "Alice"]])
        with pytest.raises(DecodeError):
            decode(body)

    def test_empty_bytes(self):
        with pytest.raises(DecodeError):
            decode(b"")

    def test_not_a_workbook(self):
        with pytest.raises(DecodeError):
            decode(b"Log Date,Direction\n25-Jun-2025 08:00:00,IN\n")

    def test_corrupt_zip(self):
        with pytest.raises(DecodeError):
            decode(b"PK\x03\x04" + b"\x00" * 64)


class TestDetectEngine:
    def test_xlsx(self):
        assert detect_engine(SCENARIO) == "openpyxl"

    def test_legacy_xls(self):
        assert detect_engine(b"\xd0\xcf\x11\xe0\xa1\xb1\x1a\xe1" + b"\x00" * 16) == "xlrd"

    def test_unknown(self):
        with pytest.raises(ValueError):
            detect_engine(b"%PDF-1.7")


class TestLegacyXls:
    def test_xls_decodes_end_to_end(self):
        body = make_xls_workbook([
            ["Device log"],
            HEADER,
            ["25-Jun-2025 08:00:00", "IN", 101, "Alice", "Acme", "N/A"],
            ["25-Jun-2025 17:30:15", "OUT", 101, "Alice", "Acme", "N/A"],
            [None, None, None, None, None, None],
            ["25-Jun-2025 09:00:00", "IN", 102.5, "Bob"],
        ])
        assert detect_engine(body) == "xlrd"

        records = decode(body)
        assert [r.id for r in records] == [1, 2, 3]
        assert records[0].employee_code == "101"      # xlrd numbers arrive as floats
        assert records[0].department == "N/A"
        assert records[1].log_date == "25-Jun-2025 17:30:15"
        assert records[2].employee_code == "102.5"
        assert records[2].company == ""

    def test_xls_without_header(self):
        with pytest.raises(DecodeError):
            decode(make_xls_workbook([["Date", "Who"], ["25-Jun-2025", "Alice"]]))
