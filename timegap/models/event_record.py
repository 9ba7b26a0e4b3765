# timegap/models/event_record.py
from dataclasses import dataclass


@dataclass(frozen=True)
class EventRecord:
    """One badge scan. Text fields are never None; missing cells decode to ""."""
    id: int                  # 1-based, assigned in decode order
    log_date: str            # "25-Jun-2025 11:35:45"
    direction: str           # IN | OUT | free text
    employee_code: str
    employee_name: str
    company: str
    department: str
