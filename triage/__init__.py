"""Classification and ranking of issues aggregated from several repositories."""

from triage.component import resolve_component
from triage.dates import normalize_date, normalize_optional_date
from triage.errors import (
    MalformedRepositoryURL,
    MalformedTimestamp,
    SourceFetchFailed,
    TriageError,
)
from triage.pipeline import build_export, collect_issues, run_export, to_row
from triage.priority import extract_priority
from triage.ranker import compare_issues, rank_issues
from triage.state import classify_state

__all__ = [
    "resolve_component",
    "normalize_date",
    "normalize_optional_date",
    "MalformedRepositoryURL",
    "MalformedTimestamp",
    "SourceFetchFailed",
    "TriageError",
    "build_export",
    "collect_issues",
    "run_export",
    "to_row",
    "extract_priority",
    "compare_issues",
    "rank_issues",
    "classify_state",
]
