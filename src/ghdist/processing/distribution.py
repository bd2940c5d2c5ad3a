"""Percentage distributions with top-N bucketing.

Turns raw ``{key: count}`` maps into floor-rounded percentages, ranks them
and folds everything past the top N entries into a single "Others" entry.
All functions are pure.
"""

import math
from collections.abc import Iterable, Mapping

from pydantic import BaseModel, ConfigDict, Field

OTHERS_KEY = "Others"
DEFAULT_TOP_N = 5
LANGUAGE_DIGITS = 2
ACTIVITY_DIGITS = 3

Key = str | int


class InvalidBucketCountError(ValueError):
    """Raised when a negative top-N bucket count is requested."""


class RankedEntry(BaseModel):
    """A single (key, percentage) pair of a ranked distribution."""

    model_config = ConfigDict(frozen=True)

    key: Key = Field(description="Category key, e.g. language name or year")
    percentage: float = Field(description="Percentage of the total")


def floor_to(value: float, digits: int) -> float:
    """Truncate ``value`` towards negative infinity at ``digits`` decimals."""
    scale = 10**digits
    scaled = value * scale
    if not math.isfinite(scaled):
        return value
    return math.floor(scaled) / scale


def to_percentages(counts: Mapping[Key, float], rounding_digits: int) -> dict[Key, float]:
    """Convert counts into floor-rounded percentages of their total.

    Args:
        counts: Mapping of key to non-negative count
        rounding_digits: Number of decimals kept by floor-rounding

    Returns:
        Mapping with the same keys. Every value is 0 when the total is 0.
    """
    total = sum(counts.values())
    if total == 0 or not math.isfinite(total):
        # Rescale huge counts so their sum stays finite
        peak = max((abs(count) for count in counts.values()), default=0)
        if peak == 0 or not math.isfinite(peak):
            return {key: 0.0 for key in counts}
        counts = {key: count / peak for key, count in counts.items()}
        total = sum(counts.values())
        if total == 0:
            return {key: 0.0 for key in counts}

    return {key: floor_to(percent_of(count, total), rounding_digits) for key, count in counts.items()}


def percent_of(count: float, total: float) -> float:
    """``count * 100 / total``, falling back to dividing first on overflow."""
    pct = count * 100 / total
    if not math.isfinite(pct):
        pct = count / total * 100
    return pct


def _key_order(key: Key) -> tuple[bool, Key]:
    # Numbers sort before strings so mixed year/sentinel keys stay comparable
    return (isinstance(key, str), key)


def rank(percents: Mapping[Key, float]) -> list[RankedEntry]:
    """Sort a percentage map by percentage descending, then key ascending."""
    ordered = sorted(percents.items(), key=lambda item: (-item[1], _key_order(item[0])))
    return [RankedEntry(key=key, percentage=value) for key, value in ordered]


def bucket_top(ranked: Iterable[RankedEntry], n: int) -> list[RankedEntry]:
    """Keep the first ``n`` entries and fold the rest into an "Others" entry.

    The "Others" value is the sum of the excluded entries' rounded
    percentages. It is only appended when that sum is positive.

    Raises:
        InvalidBucketCountError: If ``n`` is negative
    """
    if n < 0:
        raise InvalidBucketCountError(f"Bucket count must be >= 0, got {n}")

    entries = list(ranked)
    if len(entries) <= n:
        return entries

    kept = entries[:n]
    others = sum(entry.percentage for entry in entries[n:])
    if others > 0:
        kept.append(RankedEntry(key=OTHERS_KEY, percentage=others))
    return kept
