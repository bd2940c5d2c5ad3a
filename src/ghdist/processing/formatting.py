"""Rendering of bucketed distributions as display strings."""

import re
from collections.abc import Iterable
from enum import Enum

from ghdist.processing.distribution import OTHERS_KEY, RankedEntry

LINE_SEPARATOR = "\n"
FLAT_SEPARATOR = " - "

_NEWLINE_RE = re.compile(r"\r?\n")


class DistributionStyle(str, Enum):
    """Display shapes for a distribution line."""

    PLAIN = "plain"
    PERCENT_SIGN = "percent_sign"


def format_entry(entry: RankedEntry, style: DistributionStyle) -> str:
    suffix = "%" if style == DistributionStyle.PERCENT_SIGN else ""
    return f"{entry.key}:{entry.percentage:.2f}{suffix}"


def format_distribution(
    bucketed: Iterable[RankedEntry],
    style: DistributionStyle = DistributionStyle.PLAIN,
) -> str:
    """Join entries as ``key:value`` lines in their given order.

    A zero-valued "Others" entry is left out entirely.
    """
    lines = [
        format_entry(entry, style)
        for entry in bucketed
        if not (entry.key == OTHERS_KEY and entry.percentage == 0)
    ]
    return LINE_SEPARATOR.join(lines)


def flatten_distribution(text: str) -> str:
    """Put a multi-line distribution on one line for JSON export."""
    flat = _NEWLINE_RE.sub(FLAT_SEPARATOR, text)
    return flat.removesuffix(FLAT_SEPARATOR)
