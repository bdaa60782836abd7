from datetime import datetime, timezone
from typing import Optional

RFC850_FORMAT = "%A, %d-%b-%y %H:%M:%S %Z"


def last_updated(now: Optional[datetime] = None) -> str:
    """Format a timestamp for the `last_updated` attribute of a resource

    :param now: The timestamp, defaults to the current time in UTC
    :return: The timestamp in RFC 850 format, e.g. ``Monday, 02-Jan-06 15:04:05 UTC``
    """
    return (now or datetime.now(timezone.utc)).strftime(RFC850_FORMAT)
