# services/api/core/timestamps.py
from __future__ import annotations

from datetime import datetime
from typing import Optional
from zoneinfo import ZoneInfo

# Day-first, 24-hour: "19/10/2026, 14:03:05"
SALE_TIMESTAMP_FORMAT = "%d/%m/%Y, %H:%M:%S"


def server_timestamp(tz_name: str, now: Optional[datetime] = None) -> str:
    """
    Local date-time string stamped on sales that arrive without a timestamp.
    `now` is accepted for tests; naive values are taken as already local.
    """
    tz = ZoneInfo(tz_name)
    if now is None:
        now = datetime.now(tz)
    elif now.tzinfo is not None:
        now = now.astimezone(tz)
    return now.strftime(SALE_TIMESTAMP_FORMAT)
