"""
Total ordering of issues merged from several repositories.

The most actionable issues come first and closed issues come last. Two
issues are compared by the following rules, each consulted only when all
earlier rules tie:

1. A closed issue sorts after an issue that is not closed.
2. An issue with a priority label sorts before one without; lower levels
   (more urgent) sort first.
3. Triage state: blocked, under review, open.
4. Closed issues: most recently closed first; a missing closing date counts
   as the oldest.
5. Component name, ascending.
6. Issue number, ascending.

Priority is checked before state, so an open P0 issue outranks a blocked
issue without a priority.
"""

import logging
from collections.abc import Collection, Iterable
from dataclasses import dataclass
from functools import cmp_to_key
from typing import Optional

from models.data_models import DerivedState, Issue
from triage.component import resolve_component
from triage.dates import normalize_optional_date
from triage.priority import extract_priority
from triage.state import classify_state

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RankKey:
    """Derived values of one issue used by the comparison rules."""
    state: DerivedState
    priority: Optional[int]
    closed_at: Optional[str]
    component: str
    number: int

    @classmethod
    def for_issue(cls, issue: Issue, maintainers: Collection[str] = ()) -> "RankKey":
        return cls(
            state=classify_state(issue, maintainers),
            priority=extract_priority(issue),
            closed_at=normalize_optional_date(issue.closed_at),
            component=resolve_component(issue.repository_url),
            number=issue.number,
        )


def _cmp(a, b) -> int:
    return (a > b) - (a < b)


def compare_keys(a: RankKey, b: RankKey) -> int:
    """Compare two rank keys; negative means a sorts first."""
    a_closed = a.state == DerivedState.CLOSED
    b_closed = b.state == DerivedState.CLOSED
    if a_closed != b_closed:
        return 1 if a_closed else -1

    if a.priority is not None and b.priority is None:
        return -1
    if a.priority is None and b.priority is not None:
        return 1
    if a.priority is not None and b.priority is not None and a.priority != b.priority:
        return _cmp(a.priority, b.priority)

    if a.state != b.state:
        return _cmp(a.state, b.state)

    if a_closed:
        # Descending; None (missing date) is the minimum
        cmp = _cmp(b.closed_at or "", a.closed_at or "")
        if cmp:
            return cmp

    cmp = _cmp(a.component, b.component)
    if cmp:
        return cmp

    return _cmp(a.number, b.number)


def compare_issues(a: Issue, b: Issue, maintainers: Collection[str] = ()) -> int:
    """
    Compare two issues by the ranking rules.

    Args:
        a: First issue
        b: Second issue
        maintainers: Maintainer allowlist passed to the state classifier

    Returns:
        Negative if a sorts first, positive if b sorts first, 0 on a tie

    Raises:
        MalformedRepositoryURL: If either repository URL cannot be resolved
        MalformedTimestamp: If either closing date is malformed
    """
    return compare_keys(
        RankKey.for_issue(a, maintainers),
        RankKey.for_issue(b, maintainers),
    )


def rank_issues(issues: Iterable[Issue], maintainers: Collection[str] = ()) -> list[Issue]:
    """
    Sort issues into export order.

    Keys are derived once per issue before sorting, so a malformed issue
    fails the whole ranking even when it would never be compared.

    Returns:
        New list of the same issues, most actionable first
    """
    keyed = [(RankKey.for_issue(issue, maintainers), issue) for issue in issues]
    keyed.sort(key=cmp_to_key(lambda x, y: compare_keys(x[0], y[0])))
    logger.debug(f"Ranked {len(keyed)} issues")
    return [issue for _, issue in keyed]
