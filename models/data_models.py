"""Data models for GitHub issue records and the exported rows."""

from enum import Enum, IntEnum
from typing import Optional
from pydantic import BaseModel, ConfigDict


class RawState(str, Enum):
    """Lifecycle state exactly as reported by the issue tracker."""
    OPEN = "open"
    CLOSED = "closed"


class DerivedState(IntEnum):
    """Triage state computed from an issue.

    Member order is the ranking order: blocked work first, closed work last.
    """
    BLOCKED = 0
    UNDER_REVIEW = 1
    OPEN = 2
    CLOSED = 3

    @property
    def display_name(self) -> str:
        """User-facing text written to the export."""
        return self.name.lower().replace("_", " ")


class Label(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str


class Assignee(BaseModel):
    model_config = ConfigDict(frozen=True)

    login: str


class Milestone(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str


class PullRequestLink(BaseModel):
    """Present on issue-list records that are really pull requests."""
    model_config = ConfigDict(frozen=True)

    url: Optional[str] = None
    html_url: Optional[str] = None
    diff_url: Optional[str] = None
    patch_url: Optional[str] = None


class Issue(BaseModel):
    """Issue record decoded from the GitHub issues list endpoint.

    Only the fields used for triage and export are kept; anything else in
    the API payload is ignored. Instances are immutable for the whole run.
    """
    model_config = ConfigDict(frozen=True, extra="ignore")

    title: str
    html_url: str
    number: int  # Unique within repository_url only
    repository_url: str  # e.g., "https://api.github.com/repos/owner/repo"
    pull_request: Optional[PullRequestLink] = None
    assignee: Optional[Assignee] = None
    milestone: Optional[Milestone] = None
    labels: Optional[list[Label]] = None
    state: RawState
    created_at: str  # Full ISO 8601 timestamp, kept as text
    closed_at: Optional[str] = None

    def is_pull_request(self) -> bool:
        return self.pull_request is not None

    def label_names(self) -> list[str]:
        """Label names in the order the tracker returned them."""
        if self.labels is None:
            return []
        return [label.name for label in self.labels]


class IssueRow(BaseModel):
    """One exported line. Field order is the column order."""
    model_config = ConfigDict(frozen=True)

    component: str
    id: str  # "#<number>"
    title: str
    state: str
    assignee: Optional[str] = None
    milestone: Optional[str] = None
    priority: Optional[int] = None
    created_at: str
    closed_at: Optional[str] = None
    url: str
