"""
Datetime utilities
Provides a replacement for the deprecated datetime.utcnow()
"""
from datetime import datetime, timezone


def utc_now() -> datetime:
    """
    Get current UTC time as a naive datetime
    
    DateTime columns are stored without tzinfo, so values compared against
    them must be naive too.
    """
    return datetime.now(timezone.utc).replace(tzinfo=None)
