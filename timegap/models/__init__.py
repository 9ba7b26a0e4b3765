# Time Gap Pipeline: in-memory record types

from timegap.models.event_record import EventRecord            # noqa
from timegap.models.time_gap_summary import TimeGapSummary     # noqa
