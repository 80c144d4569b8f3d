from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple, Union

from joblens.config.settings import settings


class TimeUnit(Enum):
    """Recognized posted-time units, in matching order."""

    MINUTE = "minute"
    HOUR = "hour"
    DAY = "day"
    WEEK = "week"
    MONTH = "month"


class SortKey(Enum):
    TITLE_ASCENDING = "title-asc"
    TITLE_DESCENDING = "title-desc"
    POSTED_NEWEST_FIRST = "posted-new"
    POSTED_OLDEST_FIRST = "posted-old"


@dataclass(frozen=True)
class PostedTime:
    value: int
    unit: Optional[TimeUnit]  # None when the unit token is not recognized


@dataclass(frozen=True)
class Job:
    """
    Canonical Job model representing one posting loaded from a job file.
    """

    title: str
    posted_time: str
    job_no: Union[str, int] = ""
    job_page_link: str = ""
    type: str = ""
    level: str = ""
    skill: str = ""
    estimated_time: str = ""
    detail: str = ""


JobCollection = Tuple[Job, ...]

FILTER_FIELDS = ("level", "type", "skill")


@dataclass(frozen=True)
class FilterCriteria:
    """Exact-match constraints; the "all" option leaves a field unconstrained."""

    level: str = settings.ALL_OPTION
    type: str = settings.ALL_OPTION
    skill: str = settings.ALL_OPTION

    def active(self) -> Dict[str, str]:
        """Return only the fields that constrain the result."""
        return {
            name: getattr(self, name)
            for name in FILTER_FIELDS
            if getattr(self, name) != settings.ALL_OPTION
        }


@dataclass(frozen=True)
class FilterOptions:
    """Distinct values seen per filterable field, in first-seen order."""

    level: Tuple[str, ...] = ()
    type: Tuple[str, ...] = ()
    skill: Tuple[str, ...] = ()

    def choices(self, name: str) -> List[str]:
        if name not in FILTER_FIELDS:
            raise ValueError(f"Unknown filter field '{name}'. Available: {list(FILTER_FIELDS)}")
        return [settings.ALL_OPTION, *getattr(self, name)]


@dataclass(frozen=True)
class JobRow:
    """A job paired with its display-ready posted time."""

    job: Job
    posted_display: str


@dataclass(frozen=True)
class BoardView:
    rows: Tuple[JobRow, ...] = ()
    criteria: FilterCriteria = field(default_factory=FilterCriteria)
    sort_key: Optional[SortKey] = None

    @property
    def jobs(self) -> List[Job]:
        return [row.job for row in self.rows]

    def __len__(self) -> int:
        return len(self.rows)
