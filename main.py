#!/usr/bin/env python3
"""
Issue Triage Exporter - Main CLI entrypoint

Aggregates the issues of several GitHub repositories belonging to one owner,
classifies and ranks them, and writes the ranked list to a CSV file.

Usage:
    python main.py export acme alpha beta                   # Token from GITHUB_TOKEN
    python main.py export acme alpha beta --token ghp_xxx   # Explicit token
    python main.py export acme alpha -o triage.csv --hyperlinks
"""

import argparse
import sys
from functools import partial

from triage.errors import TriageError
from triage.pipeline import run_export
from utils.config_loader import load_config
from utils.logger import setup_logger

logger = setup_logger()


def export_issues(
    owner: str,
    components: list[str],
    output: str = "issues.csv",
    token: str = None,
    hyperlinks: bool = False,
    source=None,
) -> bool:
    """
    Fetch, rank and export the issues of the given components.

    Args:
        owner: Owner of the GitHub repositories (e.g., "acme")
        components: Repository names to aggregate
        output: Destination CSV file (default: issues.csv)
        token: GitHub token; falls back to GITHUB_TOKEN from .env
        hyperlinks: Render issue ids as spreadsheet HYPERLINK formulas
        source: Issue source (optional, a GitHubIssueSource is created if not provided)

    Returns:
        bool: True if successful, False otherwise
    """
    config = load_config(token=token)
    setup_logger(config.log_level)

    if source is None:
        from fetchers.github import GitHubIssueSource

        source = GitHubIssueSource(
            config.credentials.github_token,
            per_page=config.triage.per_page,
        )

    from storage.csv_writer import write_issue_rows

    logger.info("=" * 80)
    logger.info(f"EXPORTING ISSUES: {owner} ({', '.join(components) or 'no components'})")
    logger.info("=" * 80)

    if not components:
        logger.warning("No components given - the export will be empty")

    try:
        count = run_export(
            source,
            partial(write_issue_rows, output=output, hyperlinks=hyperlinks),
            owner,
            components,
            maintainers=config.triage.maintainers,
        )
    except TriageError as e:
        logger.error(f"✗ Export failed: {e}")
        return False
    except OSError as e:
        logger.error(f"✗ Failed to write {output}: {e}")
        return False

    logger.info(f"✓ Exported {count} issues to {output}")
    return True


def main():
    """Main CLI entrypoint."""
    parser = argparse.ArgumentParser(
        description="Issue Triage Exporter - Rank issues across repositories",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Export issues of two repositories to issues.csv
  python main.py export acme alpha beta

  # Write to a different file with clickable issue ids
  python main.py export acme alpha beta -o triage.csv --hyperlinks
        """
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    export_parser = subparsers.add_parser(
        "export",
        help="Aggregate, rank and export issues to CSV"
    )
    export_parser.add_argument(
        "owner",
        help="Owner of the GitHub components (user or organization)"
    )
    export_parser.add_argument(
        "components",
        nargs="*",
        default=[],
        help="GitHub components (repository names) to look for issues"
    )
    export_parser.add_argument(
        "--token",
        default=None,
        help="GitHub auth token (default: GITHUB_TOKEN from .env)"
    )
    export_parser.add_argument(
        "-o", "--output",
        default="issues.csv",
        help="Output file (default: issues.csv)"
    )
    export_parser.add_argument(
        "--hyperlinks",
        action="store_true",
        help="Write issue ids as spreadsheet HYPERLINK formulas"
    )

    args = parser.parse_args()

    # Show help if no command provided
    if not args.command:
        parser.print_help()
        sys.exit(1)

    if args.command == "export":
        success = export_issues(
            owner=args.owner,
            components=args.components,
            output=args.output,
            token=args.token,
            hyperlinks=args.hyperlinks,
        )
        sys.exit(0 if success else 1)


if __name__ == "__main__":
    main()
