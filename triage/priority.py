"""Priority extraction from issue labels."""

from typing import Optional

from models.data_models import Issue

# "P0" is the most urgent
PRIORITY_LABELS = {f"P{level}": level for level in range(6)}


def extract_priority(issue: Issue) -> Optional[int]:
    """Return the level of the first "P0".."P5" label, or None if there is none."""
    for name in issue.label_names():
        if name in PRIORITY_LABELS:
            return PRIORITY_LABELS[name]
    return None
