import email.utils
from datetime import datetime, timezone
from typing import Optional


def parse_http_date(value: str) -> datetime:
    """
    Parse an HTTP-date (RFC 7231, Section 7.1.1.1) into a timezone-aware
    :class:`~datetime.datetime` in UTC.

    The preferred IMF-fixdate form is accepted along with the obsolete
    RFC 850 and asctime forms. Dates without a zone designator are taken to
    be in GMT.

    :raises ValueError: if ``value`` is not an HTTP-date.
    """
    try:
        parsed = email.utils.parsedate_to_datetime(value.strip())
    except (TypeError, ValueError, IndexError, OverflowError) as e:
        raise ValueError(f"Not an HTTP-date: {value!r}") from e
    if parsed is None:
        raise ValueError(f"Not an HTTP-date: {value!r}")
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def format_http_date(dt: Optional[datetime] = None) -> str:
    """
    Format ``dt`` (the current time if omitted) as an IMF-fixdate, e.g.
    ``Wed, 01 Jan 2020 00:00:00 GMT``. Naive datetimes are taken as UTC.
    """
    if dt is None:
        dt = datetime.now(timezone.utc)
    elif dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return email.utils.format_datetime(dt.astimezone(timezone.utc), usegmt=True)
