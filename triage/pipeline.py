"""
Export pipeline: collect issues from several repositories, rank them and
hand the projected rows to a sink.

The source and the sink are collaborators passed in by the caller:
- source: any object with fetch_issues(owner, component) -> list[Issue]
- sink: a callable taking the ordered list of IssueRow
"""

import logging
from collections.abc import Callable, Collection, Sequence
from typing import Any, Protocol

from models.data_models import Issue, IssueRow
from triage.component import resolve_component
from triage.dates import normalize_date, normalize_optional_date
from triage.priority import extract_priority
from triage.ranker import rank_issues
from triage.state import classify_state

logger = logging.getLogger(__name__)


class IssueSource(Protocol):
    def fetch_issues(self, owner: str, component: str) -> list[Issue]:
        ...


def collect_issues(source: IssueSource, owner: str, components: Sequence[str]) -> list[Issue]:
    """
    Fetch and merge the issues of every component, dropping pull requests.

    Components are fetched one at a time in the given order. The first
    failure propagates; nothing is returned for the others.

    Raises:
        SourceFetchFailed: If the source cannot fetch a component
    """
    merged: list[Issue] = []
    for component in components:
        fetched = source.fetch_issues(owner, component)
        logger.debug(f"Merged {len(fetched)} records from {owner}/{component}")
        merged.extend(fetched)

    issues = [issue for issue in merged if not issue.is_pull_request()]
    dropped = len(merged) - len(issues)
    if dropped:
        logger.info(f"Dropped {dropped} pull requests")
    return issues


def to_row(issue: Issue, maintainers: Collection[str] = ()) -> IssueRow:
    """Project an issue onto an export row."""
    return IssueRow(
        component=resolve_component(issue.repository_url),
        id=f"#{issue.number}",
        title=issue.title,
        state=classify_state(issue, maintainers).display_name,
        assignee=issue.assignee.login if issue.assignee else None,
        milestone=issue.milestone.title if issue.milestone else None,
        priority=extract_priority(issue),
        created_at=normalize_date(issue.created_at),
        closed_at=normalize_optional_date(issue.closed_at),
        url=issue.html_url,
    )


def build_export(
    source: IssueSource,
    owner: str,
    components: Sequence[str],
    maintainers: Collection[str] = (),
) -> list[Issue]:
    """Collect issues from all components and return them in ranked order."""
    issues = collect_issues(source, owner, components)
    return rank_issues(issues, maintainers)


def run_export(
    source: IssueSource,
    sink: Callable[[list[IssueRow]], Any],
    owner: str,
    components: Sequence[str],
    maintainers: Collection[str] = (),
) -> int:
    """
    Run a full export.

    Every row is projected before the sink is called, so a malformed issue
    aborts the run without any output.

    Args:
        source: Issue source to fetch from
        sink: Callable receiving the ordered rows
        owner: Owner of all components
        components: Repository names to aggregate
        maintainers: Maintainer allowlist for state classification

    Returns:
        Number of rows handed to the sink

    Raises:
        SourceFetchFailed: If any component cannot be fetched
        MalformedRepositoryURL: If an issue's repository URL is malformed
        MalformedTimestamp: If an issue's dates are malformed
    """
    ranked = build_export(source, owner, components, maintainers)
    rows = [to_row(issue, maintainers) for issue in ranked]
    sink(rows)
    logger.info(f"Exported {len(rows)} issues from {len(components)} components")
    return len(rows)
