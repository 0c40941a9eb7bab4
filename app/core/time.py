from datetime import UTC, datetime


def now_utc() -> datetime:
    return datetime.now(UTC)


def isoformat_utc(value: datetime) -> str:
    """Render a timestamp the way browsers do: millisecond precision with a ``Z`` suffix."""
    return value.astimezone(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")
