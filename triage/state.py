"""Triage state classification."""

from collections.abc import Collection

from models.data_models import DerivedState, Issue, RawState

UNDER_REVIEW_LABEL = "under review"
BLOCKED_LABEL = "blocked"


def classify_state(issue: Issue, maintainers: Collection[str] = ()) -> DerivedState:
    """
    Derive the triage state of an issue.

    Rules are checked in order and the first match wins:
    closed issues are CLOSED whatever their labels, then an "under review"
    label gives UNDER_REVIEW, then a "blocked" label gives BLOCKED. An issue
    carrying both labels is therefore UNDER_REVIEW.

    When a maintainer allowlist is given, an issue that would otherwise be
    OPEN is BLOCKED unless it is assigned to one of those logins.

    Args:
        issue: Issue to classify
        maintainers: Logins of known maintainers (empty disables the check)

    Returns:
        DerivedState for the issue
    """
    if issue.state == RawState.CLOSED:
        return DerivedState.CLOSED

    names = issue.label_names()
    if UNDER_REVIEW_LABEL in names:
        return DerivedState.UNDER_REVIEW
    if BLOCKED_LABEL in names:
        return DerivedState.BLOCKED

    if maintainers:
        assignee = issue.assignee.login if issue.assignee else None
        if assignee not in maintainers:
            return DerivedState.BLOCKED

    return DerivedState.OPEN
