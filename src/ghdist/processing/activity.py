"""Year-bucket classification of repository activity."""

from collections.abc import Iterable, Mapping

from pydantic import BaseModel, Field, model_validator

from ghdist.core.models import Repository
from ghdist.processing.distribution import OTHERS_KEY, Key, RankedEntry

BEFORE_WINDOW = "before-window"


class YearWindow(BaseModel):
    """Contiguous range of calendar years treated as recent activity."""

    min_year: int
    max_year: int

    @model_validator(mode="after")
    def check_order(self) -> "YearWindow":
        if self.min_year > self.max_year:
            raise ValueError(f"min_year {self.min_year} is after max_year {self.max_year}")
        return self

    @classmethod
    def ending_at(cls, year: int, span: int = 5) -> "YearWindow":
        """Window of ``span`` years ending with ``year`` (inclusive)."""
        if span < 1:
            raise ValueError(f"Window span must be >= 1, got {span}")
        return cls(min_year=year - span + 1, max_year=year)

    def __contains__(self, year: int) -> bool:
        return self.min_year <= year <= self.max_year

    def years(self) -> list[int]:
        """Window years, most recent first."""
        return list(range(self.max_year, self.min_year - 1, -1))


class ActivityRecord(BaseModel):
    """Creation and last-update years of one repository."""

    created_year: int = Field(description="Year the repository was created")
    updated_year: int = Field(description="Year the repository was last updated")

    @classmethod
    def from_repository(cls, repo: Repository) -> "ActivityRecord":
        return cls(created_year=repo.created_at.year, updated_year=repo.updated_at.year)


def classify_activity(records: Iterable[ActivityRecord], window: YearWindow) -> dict[Key, int]:
    """Count records per window year.

    A record counts towards its creation year when that year is inside the
    window, otherwise towards its last-update year when that one is, and
    otherwise towards the ``BEFORE_WINDOW`` bucket. Each record increments
    exactly one bucket.

    Returns:
        Mapping with every window year plus ``BEFORE_WINDOW``, zero-filled.
    """
    counts: dict[Key, int] = {year: 0 for year in window.years()}
    counts[BEFORE_WINDOW] = 0

    for record in records:
        if record.created_year in window:
            counts[record.created_year] += 1
        elif record.updated_year in window:
            counts[record.updated_year] += 1
        else:
            counts[BEFORE_WINDOW] += 1

    return counts


def order_activity(percents: Mapping[Key, float], window: YearWindow) -> list[RankedEntry]:
    """Order activity percentages by year descending, then the catch-all.

    The before-window bucket is always emitted last under the "Others" key;
    a zero value is dropped at format time.
    """
    entries = [RankedEntry(key=year, percentage=percents.get(year, 0.0)) for year in window.years()]
    entries.append(RankedEntry(key=OTHERS_KEY, percentage=percents.get(BEFORE_WINDOW, 0.0)))
    return entries
