from __future__ import annotations

from datetime import datetime, timezone

from ..errors import ScanError

# RFC3339 in UTC; lexical order matches chronological order
RFC3339_UTC = "%Y-%m-%dT%H:%M:%SZ"


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def format_timestamp(value: datetime) -> str:
    """Render an instant as RFC3339 UTC at second precision. Naive values are taken as UTC."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).strftime(RFC3339_UTC)


def parse_timestamp(text) -> datetime:
    """Parse a stored RFC3339 string into an aware UTC datetime."""
    if not isinstance(text, str) or not text.strip():
        raise ScanError(f"invalid timestamp: {text!r}")
    s = text.strip()
    if s.endswith("Z") or s.endswith("z"):
        s = s[:-1] + "+00:00"
    try:
        value = datetime.fromisoformat(s)
    except ValueError as e:
        raise ScanError(f"invalid timestamp: {text!r}") from e
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)
