"""
Filtering, sorting and filter-option derivation over a JobCollection.
Every function returns a new sequence; the collection passed in is never reordered.
"""

import logging
import math
from typing import Callable, Dict, Iterable, List, Optional, Sequence, Tuple

from joblens.core.models import (
    FILTER_FIELDS,
    FilterCriteria,
    FilterOptions,
    Job,
    SortKey,
)
from joblens.core.posted_time import posted_to_minutes

logger = logging.getLogger(__name__)


def filter_jobs(jobs: Iterable[Job], criteria: FilterCriteria) -> List[Job]:
    """Keep jobs matching every active criterion exactly."""
    active = criteria.active()
    return [
        job
        for job in jobs
        if all(getattr(job, name) == value for name, value in active.items())
    ]


def _title_key(job: Job) -> Tuple[str, str]:
    return (job.title.casefold(), job.title)


def _newest_key(job: Job) -> Tuple[bool, float]:
    minutes = posted_to_minutes(job.posted_time)
    return (math.isinf(minutes), minutes)


def _oldest_key(job: Job) -> Tuple[bool, float]:
    # Unknown ages stay last in both directions
    minutes = posted_to_minutes(job.posted_time)
    if math.isinf(minutes):
        return (True, 0)
    return (False, -minutes)


SORTERS: Dict[SortKey, Tuple[Callable[[Job], tuple], bool]] = {
    SortKey.TITLE_ASCENDING: (_title_key, False),
    SortKey.TITLE_DESCENDING: (_title_key, True),
    SortKey.POSTED_NEWEST_FIRST: (_newest_key, False),
    SortKey.POSTED_OLDEST_FIRST: (_oldest_key, False),
}


def sort_jobs(jobs: Iterable[Job], sort_key: Optional[SortKey]) -> List[Job]:
    if sort_key is None:
        return list(jobs)
    key, reverse = SORTERS[sort_key]
    return sorted(jobs, key=key, reverse=reverse)


def filter_and_sort(
    jobs: Sequence[Job],
    criteria: FilterCriteria,
    sort_key: Optional[SortKey] = None,
) -> List[Job]:
    """
    Apply criteria then ordering to a working copy of the collection.
    An empty result is valid.
    """
    result = sort_jobs(filter_jobs(jobs, criteria), sort_key)
    logger.debug(
        f"Filtered {len(jobs)} jobs to {len(result)} "
        f"(criteria: {criteria.active()}, sort: {sort_key.value if sort_key else None})"
    )
    return result


def derive_filter_options(jobs: Iterable[Job]) -> FilterOptions:
    """Collect distinct level/type/skill values in first-seen order."""
    seen: Dict[str, Dict[str, None]] = {name: {} for name in FILTER_FIELDS}
    for job in jobs:
        for name in FILTER_FIELDS:
            seen[name].setdefault(getattr(job, name), None)
    return FilterOptions(**{name: tuple(values) for name, values in seen.items()})
