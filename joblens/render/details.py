"""
Plain-text rendering of job rows and job details for terminal output.
"""

from typing import Optional

from joblens.core.models import BoardView, Job
from joblens.core.posted_time import format_posted_time

NO_JOBS_MESSAGE = "No jobs available."


def format_job_line(job: Job, posted_display: Optional[str] = None) -> str:
    if posted_display is None:
        posted_display = format_posted_time(job.posted_time)
    return f"{job.title} ({posted_display})"


def format_job_details(job: Job) -> str:
    lines = [
        job.title,
        f"Type: {job.type}",
        f"Level: {job.level}",
        f"Skill: {job.skill}",
        f"Estimated Time: {job.estimated_time}",
        f"Details: {job.detail}",
        f"Posted: {format_posted_time(job.posted_time)}",
    ]
    if job.job_page_link:
        lines.append(f"Job Page: {job.job_page_link}")
    return "\n".join(lines)


def format_job_list(view: BoardView) -> str:
    """Numbered list of rows, or the empty-board message."""
    if not view.rows:
        return NO_JOBS_MESSAGE
    return "\n".join(
        f"{number}. {format_job_line(row.job, row.posted_display)}"
        for number, row in enumerate(view.rows, 1)
    )
