"""Utility helper functions"""

from datetime import UTC, datetime
from typing import Any, Optional

NOT_AVAILABLE = "N/A"


def sanitize_url(url: str) -> str:
    """
    Sanitize and normalize URL

    Args:
        url: URL to sanitize

    Returns:
        Sanitized URL
    """
    url = url.strip()

    # Ensure https
    if url.startswith("http://"):
        url = url.replace("http://", "https://", 1)

    return url


def parse_datetime(raw: Any) -> Optional[datetime]:
    """
    Parse an ISO 8601 timestamp as returned by the GitHub API

    Args:
        raw: Timestamp string (e.g., "2024-01-01T00:00:00Z")

    Returns:
        Timezone-aware datetime, or None when the value is missing or malformed
    """
    if not isinstance(raw, str) or not raw.strip():
        return None

    text = raw.strip().replace("Z", "+00:00")
    try:
        value = datetime.fromisoformat(text)
    except ValueError:
        return None

    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


def format_short_date(raw: Any) -> str:
    """
    Format a timestamp as a month/day/year date in UTC

    Args:
        raw: ISO 8601 timestamp string

    Returns:
        Date such as "1/1/2024", or "N/A" when the timestamp is unusable
    """
    value = parse_datetime(raw)
    if value is None:
        return NOT_AVAILABLE

    value = value.astimezone(UTC)
    return f"{value.month}/{value.day}/{value.year}"


def display_metric(value: Optional[float]) -> Any:
    """Render an optional metric, using "N/A" for missing values"""
    return NOT_AVAILABLE if value is None else value


def coerce_int(value: Any, default: int = 0) -> int:
    """
    Convert a payload count to int without failing on unexpected values

    Args:
        value: Raw payload value (int, float, numeric string, None, ...)
        default: Value used when conversion is not possible

    Returns:
        Integer count
    """
    if value is None or isinstance(value, bool):
        return default
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError):
        try:
            return int(float(value))
        except (TypeError, ValueError, OverflowError):
            return default
