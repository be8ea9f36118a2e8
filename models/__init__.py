"""Data models for the issue triage exporter."""

from models.config_models import Config, CredentialsConfig, TriageConfig
from models.data_models import (
    Assignee,
    DerivedState,
    Issue,
    IssueRow,
    Label,
    Milestone,
    PullRequestLink,
    RawState,
)

__all__ = [
    "Config",
    "CredentialsConfig",
    "TriageConfig",
    "Assignee",
    "DerivedState",
    "Issue",
    "IssueRow",
    "Label",
    "Milestone",
    "PullRequestLink",
    "RawState",
]
