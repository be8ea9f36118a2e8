"""CSV sink for ranked issue rows."""

import csv
import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Union

from models.data_models import IssueRow

logger = logging.getLogger(__name__)

COLUMNS = list(IssueRow.model_fields)


def _hyperlink(url: str, label: str) -> str:
    """Spreadsheet formula showing label and linking to url."""
    url = url.replace('"', '""')
    label = label.replace('"', '""')
    return f'=HYPERLINK("{url}","{label}")'


def row_to_record(row: IssueRow, hyperlinks: bool = False) -> dict[str, str]:
    """
    Convert a row to CSV cells.

    Optional fields that are not set become empty cells.

    Args:
        row: Row to convert
        hyperlinks: Render the id column as a HYPERLINK formula to the issue

    Returns:
        Dict keyed by column name
    """
    record = {}
    for column, value in row.model_dump().items():
        record[column] = "" if value is None else str(value)
    if hyperlinks:
        record["id"] = _hyperlink(row.url, row.id)
    return record


def write_issue_rows(
    rows: Iterable[IssueRow],
    output: Union[str, Path],
    hyperlinks: bool = False,
) -> int:
    """
    Write rows to a CSV file in the order given, with a header line.

    Args:
        rows: Rows in export order
        output: Destination file path (overwritten)
        hyperlinks: Render the id column as a HYPERLINK formula

    Returns:
        Number of rows written

    Raises:
        OSError: If the file cannot be written
    """
    count = 0
    with open(output, "w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=COLUMNS)
        writer.writeheader()
        for row in rows:
            logger.debug(f"{row.component} {row.id} [{row.state}] {row.title}")
            writer.writerow(row_to_record(row, hyperlinks=hyperlinks))
            count += 1

    logger.info(f"✓ Wrote {count} rows to {output}")
    return count
