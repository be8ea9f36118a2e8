"""Shared pytest fixtures and configuration."""

import pytest

from models.data_models import Issue


def issue_payload(
    number=1,
    component="alpha",
    owner="acme",
    title=None,
    state="open",
    labels=None,
    assignee=None,
    milestone=None,
    pull_request=False,
    created_at="2020-01-01T08:00:00Z",
    closed_at=None,
):
    """
    Build a record shaped like one element of GitHub's issues list response.
    """
    return {
        "title": title or f"Issue {number} in {component}",
        "html_url": f"https://github.com/{owner}/{component}/issues/{number}",
        "number": number,
        "repository_url": f"https://api.github.com/repos/{owner}/{component}",
        "pull_request": (
            {
                "url": f"https://api.github.com/repos/{owner}/{component}/pulls/{number}",
                "html_url": f"https://github.com/{owner}/{component}/pull/{number}",
                "diff_url": f"https://github.com/{owner}/{component}/pull/{number}.diff",
                "patch_url": f"https://github.com/{owner}/{component}/pull/{number}.patch",
            }
            if pull_request
            else None
        ),
        "assignee": {"login": assignee, "id": 42} if assignee else None,
        "milestone": {"title": milestone, "number": 3} if milestone else None,
        "labels": [{"name": name, "color": "ededed"} for name in labels] if labels is not None else None,
        "state": state,
        "created_at": created_at,
        "closed_at": closed_at,
        "comments": 0,
        "body": "Some description",
    }


def make_issue(**kwargs) -> Issue:
    """Create an Issue from the same arguments as issue_payload()."""
    return Issue.model_validate(issue_payload(**kwargs))


class FakeIssueSource:
    """In-memory issue source keyed by component name."""

    def __init__(self, issues_by_component, failing=()):
        self.issues_by_component = issues_by_component
        self.failing = set(failing)
        self.calls = []

    def fetch_issues(self, owner, component):
        from triage.errors import SourceFetchFailed

        self.calls.append((owner, component))
        if component in self.failing:
            raise SourceFetchFailed(owner, component, "404 Not Found")
        return list(self.issues_by_component.get(component, []))


@pytest.fixture
def test_env(monkeypatch):
    """
    Set up valid test environment variables so config can be loaded
    during tests without requiring real credentials.
    """
    monkeypatch.setenv("GITHUB_TOKEN", "ghp_test_token_1234567890")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("TRIAGE_MAINTAINERS", "")
    monkeypatch.setenv("GITHUB_PER_PAGE", "100")

    return {
        "github_token": "ghp_test_token_1234567890",
        "log_level": "DEBUG",
    }


@pytest.fixture
def invalid_env(monkeypatch):
    """
    Set up missing environment variables for testing validation.
    """
    monkeypatch.setenv("GITHUB_TOKEN", "")
    monkeypatch.setenv("LOG_LEVEL", "INFO")
    monkeypatch.setenv("TRIAGE_MAINTAINERS", "")
    monkeypatch.setenv("GITHUB_PER_PAGE", "100")


@pytest.fixture
def alpha_beta_source():
    """Two repositories: alpha (open P1 #5, closed #2) and beta (blocked #9, PR #10)."""
    return FakeIssueSource({
        "alpha": [
            make_issue(number=2, component="alpha", state="closed",
                       closed_at="2020-01-01T10:00:00Z"),
            make_issue(number=5, component="alpha", labels=["P1"]),
        ],
        "beta": [
            make_issue(number=10, component="beta", pull_request=True),
            make_issue(number=9, component="beta", labels=["blocked"]),
        ],
    })
