import asyncio
import logging
from pathlib import Path
from typing import Optional, Sequence, Union

from joblens.config.settings import settings
from joblens.core.errors import MalformedInputError, ParseError
from joblens.core.models import (
    BoardView,
    FilterCriteria,
    FilterOptions,
    Job,
    JobCollection,
    JobRow,
    SortKey,
)
from joblens.core.posted_time import format_posted_time
from joblens.engine.filter_sort import derive_filter_options, filter_and_sort
from joblens.parser.job_parser import load_jobs

logger = logging.getLogger(__name__)


def default_sort() -> SortKey:
    return SortKey(settings.DEFAULT_SORT)


def build_rows(jobs: Sequence[Job]) -> tuple:
    return tuple(JobRow(job=job, posted_display=format_posted_time(job.posted_time)) for job in jobs)


class JobBoard:
    """
    Owns the current job collection and answers filter/sort requests against it.
    Each load wholly replaces the collection; a failed load empties it.
    """

    def __init__(self):
        self._jobs: JobCollection = ()
        self._options = FilterOptions()
        self._criteria = FilterCriteria()
        self._sort_key: Optional[SortKey] = default_sort()

    @property
    def jobs(self) -> JobCollection:
        return self._jobs

    @property
    def options(self) -> FilterOptions:
        return self._options

    @property
    def criteria(self) -> FilterCriteria:
        return self._criteria

    @property
    def sort_key(self) -> Optional[SortKey]:
        return self._sort_key

    def load(self, content: Union[str, bytes]) -> BoardView:
        """
        Parse file content into a new collection.
        On ParseError all state is cleared before the error propagates.
        """
        try:
            jobs = load_jobs(content)
        except ParseError as e:
            logger.error(f"Error processing file: {e}")
            self._clear()
            raise

        self._jobs = jobs
        self._options = derive_filter_options(jobs)
        self._criteria = FilterCriteria()
        self._sort_key = default_sort()
        logger.info(f"Loaded {len(jobs)} jobs.")
        return self._unfiltered_view()

    async def load_file(self, path: Optional[Union[str, Path]]) -> Optional[BoardView]:
        """
        Read a job file off the event loop, then load it.
        Returns None without touching state when no file is given.
        """
        if path is None:
            logger.info("No file chosen")
            return None

        path = Path(path)
        try:
            content = await asyncio.to_thread(self._read, path)
        except MalformedInputError as e:
            logger.error(f"Error reading file {path.name}: {e}")
            self._clear()
            raise
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Error reading file {path.name}: {e}")
            self._clear()
            raise MalformedInputError(f"Could not read {path.name}: {e}") from e

        logger.info(f"Read {path.name} ({len(content)} characters).")
        return self.load(content)

    @staticmethod
    def _read(path: Path) -> str:
        size = path.stat().st_size
        if size > settings.MAX_FILE_BYTES:
            raise MalformedInputError(
                f"{path.name} is {size} bytes, above the {settings.MAX_FILE_BYTES} byte limit"
            )
        return path.read_text(encoding=settings.FILE_ENCODING)

    def query(
        self,
        criteria: Optional[FilterCriteria] = None,
        sort_key: Optional[SortKey] = None,
    ) -> BoardView:
        criteria = criteria or FilterCriteria()
        self._criteria = criteria
        self._sort_key = sort_key
        jobs = filter_and_sort(self._jobs, criteria, sort_key)
        return BoardView(rows=build_rows(jobs), criteria=criteria, sort_key=sort_key)

    def reset(self) -> BoardView:
        """Restore default criteria and show the collection in file order."""
        self._criteria = FilterCriteria()
        self._sort_key = default_sort()
        return self._unfiltered_view()

    def _unfiltered_view(self) -> BoardView:
        return BoardView(
            rows=build_rows(self._jobs),
            criteria=self._criteria,
            sort_key=self._sort_key,
        )

    def _clear(self):
        self._jobs = ()
        self._options = FilterOptions()
        self._criteria = FilterCriteria()
        self._sort_key = default_sort()
