"""
External key names used in job files and their canonical Job field names.
Keys outside this table are ignored.
"""

FIELD_MAP = {
    "Job No": "job_no",
    "Title": "title",
    "Job Page Link": "job_page_link",
    "Posted": "posted_time",
    "Type": "type",
    "Level": "level",
    "Estimated Time": "estimated_time",
    "Skill": "skill",
    "Detail": "detail",
}

# Records missing either of these (or holding an empty value) are skipped
REQUIRED_KEYS = ("Title", "Posted")
