# timegap/services/filter_engine.py
"""
Record filtering and the distinct value sets behind the filter dropdowns.
Criteria are ANDed; an empty criterion imposes no constraint.
"""

from dataclasses import dataclass
from typing import Iterable, Optional, Sequence

from timegap.models.event_record import EventRecord
from timegap.utils.timestamps import calendar_day


@dataclass(frozen=True)
class FilterCriteria:
    date: str = ""              # substring of log_date, normally a calendar day
    employee_name: str = ""     # exact match
    employee_code: str = ""     # exact match

    def is_empty(self) -> bool:
        return not (self.date or self.employee_name or self.employee_code)


def _distinct(values: Iterable[str]) -> list[str]:
    return sorted({v for v in values if v})


def distinct_dates(records: Iterable[EventRecord]) -> list[str]:
    return _distinct(calendar_day(r.log_date) for r in records)


def distinct_employee_names(records: Iterable[EventRecord]) -> list[str]:
    return _distinct(r.employee_name for r in records)


def distinct_employee_codes(records: Iterable[EventRecord]) -> list[str]:
    return _distinct(r.employee_code for r in records)


def apply_filters(records: Sequence[EventRecord], criteria: Optional[FilterCriteria] = None) -> Sequence[EventRecord]:
    """
    Subset of records matching every non-empty criterion, in original order.
    With no criteria the input sequence itself is returned.
    """
    if criteria is None or criteria.is_empty():
        return records

    filtered = list(records)
    if criteria.date:
        filtered = [r for r in filtered if criteria.date in r.log_date]
    if criteria.employee_name:
        filtered = [r for r in filtered if r.employee_name == criteria.employee_name]
    if criteria.employee_code:
        filtered = [r for r in filtered if r.employee_code == criteria.employee_code]
    return filtered


def clear_filters() -> FilterCriteria:
    """The cleared state: all three criteria empty."""
    return FilterCriteria()
