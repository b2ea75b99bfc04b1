"""Timezone-aware timestamps for stored rows."""

import datetime


def utc_now() -> datetime.datetime:
    """Current time in UTC with ``tzinfo`` set."""
    return datetime.datetime.now(datetime.timezone.utc)
