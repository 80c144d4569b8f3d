"""
Exception hierarchy for loading and reading job files.
"""


class JobLensError(Exception):
    """Base class for all joblens errors."""


class ParseError(JobLensError):
    """
    A whole batch of job records could not be loaded.
    Raised once per load; per-record problems never raise.
    """


class NotAListError(ParseError):
    def __init__(self, found_type: str):
        self.found_type = found_type
        super().__init__(f"JSON file does not contain an array of jobs (got {found_type})")


class NoValidEntriesError(ParseError):
    def __init__(self, total: int):
        self.total = total
        super().__init__(
            f"No valid job entries found in the JSON file ({total} records checked)"
        )


class MalformedInputError(ParseError):
    """File content could not be read or decoded. The cause is chained."""


class TimeParseError(JobLensError):
    """A posted-time string could not be parsed."""


class InvalidNumberError(TimeParseError):
    def __init__(self, token: str):
        self.token = token
        super().__init__(f"Invalid posted-time number: {token!r}")
