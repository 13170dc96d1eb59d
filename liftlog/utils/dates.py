from datetime import datetime, timezone

DISPLAY_FORMAT = "%d/%m/%Y %H:%M:%S"


def now() -> datetime:
    return datetime.now(timezone.utc)


def to_utc(dt: datetime) -> datetime:
    """
    Normalise a datetime to aware UTC. Naive datetimes are taken to already be UTC.
    """
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def dt_to_iso(dt: datetime) -> str:
    """
    Convert a datetime to canonical ISO8601 for the remote API.
    Always returns a UTC Z-suffixed string.
    """
    return to_utc(dt).isoformat().replace("+00:00", "Z")


def iso_to_dt(d: str) -> datetime:
    """
    Convert an ISO8601 string to an aware UTC datetime.
    """
    return to_utc(datetime.fromisoformat(d.replace("Z", "+00:00")))


def parse_timestamp(value: str) -> datetime | None:
    """
    Parse either an ISO8601 timestamp or a stored display timestamp
    (DD/MM/YYYY HH:mm:ss). Returns None when the value is neither.
    """
    if not isinstance(value, str) or not value.strip():
        return None

    text = value.strip()
    try:
        return iso_to_dt(text)
    except ValueError:
        pass

    try:
        return datetime.strptime(text, DISPLAY_FORMAT).replace(tzinfo=timezone.utc)
    except ValueError:
        return None


def epoch_millis(dt: datetime) -> int:
    return int(to_utc(dt).timestamp() * 1000)
