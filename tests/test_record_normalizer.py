"""Unit tests for record normalization."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest
from datetime import datetime
from timegap.models import EventRecord
from timegap.services.record_normalizer import coerce_cell, normalize_records


class TestCoerceCell:
    @pytest.mark.parametrize("value", [None, "", float("nan"), "   "])
    def test_blank_values(self, value):
        assert coerce_cell(value) == ""

    def test_integral_float_drops_decimal(self):
        assert coerce_cell(101.0) == "101"

    def test_other_values_stringified(self):
        assert coerce_cell(101) == "101"
        assert coerce_cell(2.5) == "2.5"
        assert coerce_cell("Alice") == "Alice"

    def test_bool(self):
        assert coerce_cell(True) == "true"

    def test_datetime_in_log_format(self):
        assert coerce_cell(datetime(2025, 6, 25, 8, 0, 0)) == "25-Jun-2025 08:00:00"


class TestNormalizeRecords:
    def test_full_row(self):
        rows = [{
            "Log Date": "25-Jun-2025 08:00:00",
            "Direction": "IN",
            "Employee Code": 101,
            "Employee Name": "Alice",
            "Company": "Acme",
            "Department": "Ops",
        }]
        assert normalize_records(rows) == [EventRecord(
            id=1,
            log_date="25-Jun-2025 08:00:00",
            direction="IN",
            employee_code="101",
            employee_name="Alice",
            company="Acme",
            department="Ops",
        )]

    def test_ids_are_sequential_from_one(self):
        records = normalize_records([{"Log Date": "a"}, {"Log Date": "b"}, {"Log Date": "c"}])
        assert [r.id for r in records] == [1, 2, 3]

    def test_missing_columns_default_to_empty(self):
        record = normalize_records([{"Log Date": "25-Jun-2025 08:00:00"}])[0]
        assert record.direction == ""
        assert record.employee_code == ""
        assert record.department == ""

    def test_column_names_are_exact(self):
        record = normalize_records([{"employee name": "Alice", "EmployeeName": "Alice"}])[0]
        assert record.employee_name == ""

    def test_extra_columns_ignored(self):
        record = normalize_records([{"Log Date": "x", "Device": "Gate 3"}])[0]
        assert record.log_date == "x"
