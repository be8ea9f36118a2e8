"""Tests for data models."""

import pytest
from pydantic import ValidationError

from conftest import issue_payload, make_issue
from models.data_models import DerivedState, Issue, IssueRow, RawState


class TestIssue:
    """Tests for decoding Issue records."""

    def test_minimal_issue(self):
        """Optional fields may be missing or null."""
        issue = Issue.model_validate({
            "title": "Crash on start",
            "html_url": "https://github.com/acme/alpha/issues/1",
            "number": 1,
            "repository_url": "https://api.github.com/repos/acme/alpha",
            "state": "open",
            "created_at": "2021-03-05T12:00:00Z",
        })
        assert issue.state == RawState.OPEN
        assert issue.labels is None
        assert issue.assignee is None
        assert issue.closed_at is None
        assert issue.is_pull_request() is False
        assert issue.label_names() == []

    def test_full_payload_ignores_unknown_fields(self):
        issue = make_issue(
            number=7,
            labels=["bug", "P2"],
            assignee="alice",
            milestone="v1.0",
            state="closed",
            closed_at="2021-04-01T00:00:00Z",
        )
        assert issue.number == 7
        assert issue.label_names() == ["bug", "P2"]
        assert issue.assignee.login == "alice"
        assert issue.milestone.title == "v1.0"
        assert issue.state == RawState.CLOSED
        assert not hasattr(issue, "body")

    def test_pull_request_record(self):
        assert make_issue(pull_request=True).is_pull_request() is True

    def test_unknown_state_rejected(self):
        with pytest.raises(ValidationError):
            Issue.model_validate(issue_payload(state="merged"))

    def test_issue_is_immutable(self):
        issue = make_issue()
        with pytest.raises(ValidationError):
            issue.title = "changed"


class TestDerivedState:
    """Tests for the DerivedState enum."""

    def test_ranking_order(self):
        assert DerivedState.BLOCKED < DerivedState.UNDER_REVIEW < DerivedState.OPEN < DerivedState.CLOSED

    def test_display_names(self):
        assert DerivedState.BLOCKED.display_name == "blocked"
        assert DerivedState.UNDER_REVIEW.display_name == "under review"
        assert DerivedState.OPEN.display_name == "open"
        assert DerivedState.CLOSED.display_name == "closed"


class TestIssueRow:
    """Tests for IssueRow."""

    def test_column_order(self):
        assert list(IssueRow.model_fields) == [
            "component", "id", "title", "state", "assignee", "milestone",
            "priority", "created_at", "closed_at", "url",
        ]
