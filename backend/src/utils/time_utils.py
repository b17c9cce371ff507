import os
from datetime import datetime
from pytz import timezone

DEFAULT_TIMEZONE = "UTC"


def get_timezone():
    """Application timezone, taken from APP_TIMEZONE."""
    return timezone(os.getenv("APP_TIMEZONE", DEFAULT_TIMEZONE))

def get_current_time() -> datetime:
    """Get current time in the application timezone."""
    return datetime.now(get_timezone())
