"""Timestamp normalization for display and tie-breaking."""

from typing import Optional

from triage.errors import MalformedTimestamp

DATE_PREFIX_LENGTH = len("YYYY-MM-DD")


def normalize_date(timestamp: str) -> str:
    """Keep only the 'YYYY-MM-DD' prefix of a full timestamp."""
    if len(timestamp) < DATE_PREFIX_LENGTH:
        raise MalformedTimestamp(timestamp)
    return timestamp[:DATE_PREFIX_LENGTH]


def normalize_optional_date(timestamp: Optional[str]) -> Optional[str]:
    if timestamp is None:
        return None
    return normalize_date(timestamp)
