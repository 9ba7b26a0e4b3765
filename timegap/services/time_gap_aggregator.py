# timegap/services/time_gap_aggregator.py
"""
Groups badge scans by (employee name, employee code, calendar day) and
reports the first scan, last scan and elapsed time for each group.

Records with a non-numeric employee code are dropped before grouping.
Unparsable log dates fall back to the current time so one bad row cannot
abort the report; the affected summaries are flagged and logged.
"""

import re
from datetime import datetime
from typing import Optional, Sequence

from timegap.config import settings
from timegap.models.event_record import EventRecord
from timegap.models.time_gap_summary import TimeGapSummary
from timegap.services.filter_engine import FilterCriteria, apply_filters
from timegap.utils.timestamps import calendar_day, format_gap, gap_seconds, parse_log_date
from timegap.utils.logger import get_logger

logger = get_logger(__name__)

VALID_CODE_RE = re.compile(r"[0-9]+")
ZERO_GAP = "0h 0m 0s"

GroupKey = tuple[str, str, str]   # (employee_name, employee_code, calendar_day)


def is_valid_employee_code(code: str) -> bool:
    return VALID_CODE_RE.fullmatch(code) is not None


def group_records(records: Sequence[EventRecord]) -> dict[GroupKey, list[EventRecord]]:
    groups: dict[GroupKey, list[EventRecord]] = {}
    for record in records:
        key = (record.employee_name, record.employee_code, calendar_day(record.log_date))
        groups.setdefault(key, []).append(record)
    return groups


def summarize_group(key: GroupKey, records: Sequence[EventRecord]) -> TimeGapSummary:
    employee_name, employee_code, day = key

    timed = []
    unparsed = []
    for record in records:
        parsed = parse_log_date(record.log_date)
        if parsed is None:
            unparsed.append(record.log_date)
            parsed = datetime.now()
        timed.append((parsed, record))
    if unparsed:
        logger.warning(
            f"Unparsable log dates for {employee_name} ({employee_code}) on '{day}': "
            f"{unparsed}; substituted current time, gap is unreliable"
        )

    timed.sort(key=lambda pair: pair[0])
    first_ts, first = timed[0]
    last_ts, last = timed[-1]

    if len(timed) == 1:
        total_gap = ZERO_GAP
    else:
        total_gap = format_gap(gap_seconds(first_ts, last_ts))

    return TimeGapSummary(
        employee_name=employee_name,
        employee_code=employee_code,
        first_time=first.log_date,
        last_time=last.log_date,
        total_gap=total_gap,
        record_count=len(timed),
        has_unparsed_timestamps=bool(unparsed),
    )


def aggregate(records: Sequence[EventRecord], date_criterion: str = "",
              sort_summaries: Optional[bool] = None) -> list[TimeGapSummary]:
    """
    One TimeGapSummary per (name, code, day) group in the records.
    date_criterion is applied with the same substring semantics as the
    filter engine. Output follows first-seen group order unless
    sort_summaries (default: settings.SORT_SUMMARIES) is set.
    """
    if sort_summaries is None:
        sort_summaries = settings.SORT_SUMMARIES

    records = apply_filters(records, FilterCriteria(date=date_criterion or ""))
    valid = [r for r in records if is_valid_employee_code(r.employee_code)]
    if len(valid) != len(records):
        logger.debug(f"Skipped {len(records) - len(valid)} records with non-numeric employee codes")

    groups = group_records(valid)
    keys = sorted(groups) if sort_summaries else list(groups)
    return [summarize_group(key, groups[key]) for key in keys]
