"""Common helpers shared across models."""

import math
from datetime import UTC, datetime


def utc_now() -> datetime:
    return datetime.now(UTC)


def utc_now_iso() -> str:
    return utc_now().isoformat()


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves toward +inf (2.5 -> 3, -2.5 -> -2)."""
    return math.floor(value + 0.5)
