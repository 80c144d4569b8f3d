"""
Turn decoded job-file content into a canonical JobCollection.
Bad records are skipped one by one; the batch fails only when nothing survives.
"""

import json
import logging
from typing import Any, Dict, List, Optional, Union

from joblens.core.errors import (
    MalformedInputError,
    NoValidEntriesError,
    NotAListError,
    TimeParseError,
)
from joblens.core.models import Job, JobCollection
from joblens.core.posted_time import parse_posted_time
from joblens.parser.fields import FIELD_MAP, REQUIRED_KEYS

logger = logging.getLogger(__name__)


def _is_empty(value: Any) -> bool:
    return value is None or value == ""


def _text(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def _skip_reason(record: Any) -> Optional[str]:
    """Return why a record cannot become a Job, or None if it can."""
    if not isinstance(record, dict):
        return f"is a {type(record).__name__}, not an object"

    missing = [key for key in REQUIRED_KEYS if _is_empty(record.get(key))]
    if missing:
        return f"is missing required fields {missing}"

    title = record["Title"]
    if not isinstance(title, str):
        return f"has a non-text Title value {title!r}"

    posted = record["Posted"]
    if not isinstance(posted, str):
        return f"has a non-text Posted value {posted!r}"
    try:
        parsed = parse_posted_time(posted)
    except TimeParseError as e:
        return f"has an unreadable Posted value: {e}"
    if parsed.unit is None:
        return f"has an unknown Posted unit in {posted!r}"
    return None


def build_job(record: Dict[str, Any]) -> Job:
    """Map a validated record onto Job through FIELD_MAP."""
    values = {}
    for key, name in FIELD_MAP.items():
        raw = record.get(key)
        if name == "job_no" and isinstance(raw, (int, str)) and not isinstance(raw, bool):
            values[name] = raw
        else:
            values[name] = _text(raw)
    return Job(**values)


def parse_jobs(data: Any) -> JobCollection:
    """
    Validate decoded file content and build Jobs in file order.
    Raises NotAListError or NoValidEntriesError for batch-level failures.
    """
    if not isinstance(data, list):
        raise NotAListError(type(data).__name__)

    jobs: List[Job] = []
    for index, record in enumerate(data):
        reason = _skip_reason(record)
        if reason:
            logger.warning(f"Job at index {index} {reason}. Skipping.")
            continue
        jobs.append(build_job(record))

    if not jobs:
        raise NoValidEntriesError(len(data))

    skipped = len(data) - len(jobs)
    logger.info(f"Parsed {len(jobs)} jobs ({skipped} skipped).")
    return tuple(jobs)


def load_jobs(content: Union[str, bytes]) -> JobCollection:
    """Decode JSON text and parse it. Decode failures raise MalformedInputError."""
    try:
        data = json.loads(content)
    except (json.JSONDecodeError, UnicodeDecodeError, RecursionError) as e:
        raise MalformedInputError(f"Could not decode job file: {e}") from e
    return parse_jobs(data)
