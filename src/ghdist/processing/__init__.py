"""Distribution engine for ghdist."""

from ghdist.processing.activity import (
    BEFORE_WINDOW,
    ActivityRecord,
    YearWindow,
    classify_activity,
    order_activity,
)
from ghdist.processing.distribution import (
    OTHERS_KEY,
    InvalidBucketCountError,
    RankedEntry,
    bucket_top,
    rank,
    to_percentages,
)
from ghdist.processing.formatting import (
    DistributionStyle,
    flatten_distribution,
    format_distribution,
)

__all__ = [
    "BEFORE_WINDOW",
    "OTHERS_KEY",
    "ActivityRecord",
    "DistributionStyle",
    "InvalidBucketCountError",
    "RankedEntry",
    "YearWindow",
    "bucket_top",
    "classify_activity",
    "flatten_distribution",
    "format_distribution",
    "order_activity",
    "rank",
    "to_percentages",
]
