"""Errors raised while collecting, classifying and ranking issues.

Every error here is fatal for an export run: nothing is written when one
is raised.
"""


class TriageError(Exception):
    """Base class for all issue triage errors."""


class MalformedRepositoryURL(TriageError, ValueError):
    """Repository identifier is not a URL or has no path segments."""

    def __init__(self, repository_url: str, reason: str = "no path segments"):
        self.repository_url = repository_url
        super().__init__(f"Malformed repository URL {repository_url!r}: {reason}")


class MalformedTimestamp(TriageError, ValueError):
    """Timestamp is too short to contain a YYYY-MM-DD date."""

    def __init__(self, value: str):
        self.value = value
        super().__init__(f"Malformed timestamp {value!r}: expected at least a YYYY-MM-DD date")


class SourceFetchFailed(TriageError):
    """The issue source could not return the issues of a repository."""

    def __init__(self, owner: str, component: str, reason: str):
        self.owner = owner
        self.component = component
        super().__init__(f"Failed to fetch issues for {owner}/{component}: {reason}")
