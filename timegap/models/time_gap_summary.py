# timegap/models/time_gap_summary.py
from dataclasses import dataclass


@dataclass(frozen=True)
class TimeGapSummary:
    """First/last scan of one employee on one calendar day."""
    employee_name: str
    employee_code: str
    first_time: str          # original log_date text of the earliest scan
    last_time: str           # original log_date text of the latest scan
    total_gap: str           # "9h 30m 15s"
    record_count: int
    has_unparsed_timestamps: bool = False   # ordering/gap is best-effort when True
