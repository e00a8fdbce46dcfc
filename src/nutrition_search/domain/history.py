"""Domain models for search history."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class RecentSearch:
    """A committed search term."""

    term: str
    timestamp: datetime
    result_count: int


@dataclass(frozen=True)
class TrendingTerm:
    """Frequency counter for a search term."""

    term: str
    frequency: int
    last_searched: datetime
