"""GitHub API client for fetching the issues of a repository.

The issues list endpoint returns pull requests as well; they are decoded
like any other record and filtered out later by the export pipeline.
"""

import logging
import time
from datetime import datetime
from typing import Optional

import requests
from pydantic import ValidationError

from models.data_models import Issue
from triage.errors import SourceFetchFailed

logger = logging.getLogger(__name__)


class GitHubIssueSource:
    """Fetch issue records from the GitHub REST API."""

    def __init__(self, token: str, per_page: int = 100, max_pages: Optional[int] = None):
        """Initialize GitHub API client.

        Args:
            token: GitHub personal access token for authentication
            per_page: Issues requested per page (GitHub caps this at 100)
            max_pages: Stop after this many pages (default: no limit)
        """
        self.token = token
        self.per_page = per_page
        self.max_pages = max_pages
        self.base_url = "https://api.github.com"
        self.headers = {
            "Accept": "application/vnd.github+json",
            "Authorization": f"Bearer {token}",
            "X-GitHub-Api-Version": "2022-11-28"
        }

    def _make_github_request(self, url: str, params: Optional[dict] = None) -> requests.Response:
        """Make GitHub API request with automatic rate limit handling.

        If rate limited (429), waits until rate limit resets and retries.

        Args:
            url: GitHub API URL to request
            params: Optional query parameters

        Returns:
            Response object from requests
        """
        while True:
            response = requests.get(url, headers=self.headers, params=params)

            # Log rate limit info
            remaining = response.headers.get("X-RateLimit-Remaining")
            limit = response.headers.get("X-RateLimit-Limit")
            if remaining and limit:
                logger.debug(f"Rate limit: {remaining}/{limit} remaining")

            if response.status_code == 429:
                reset_time = int(response.headers.get("X-RateLimit-Reset", 0))
                current_time = int(time.time())
                wait_seconds = max(reset_time - current_time + 5, 60)  # +5 second buffer, minimum 60s

                reset_str = datetime.fromtimestamp(reset_time).strftime("%H:%M:%S")
                logger.warning(
                    f"⏳ Rate limited! Waiting until {reset_str} "
                    f"({wait_seconds/60:.1f} minutes)..."
                )
                time.sleep(wait_seconds)
                logger.info("Rate limit reset - resuming...")
                continue

            return response

    def fetch_issues(self, owner: str, component: str) -> list[Issue]:
        """Fetch all issues of a repository, open and closed, including pull requests.

        Pages through the issues list endpoint until a short or empty page
        (or max_pages) is reached.

        Args:
            owner: Repository owner (e.g., "facebook")
            component: Repository name (e.g., "react")

        Returns:
            Issue records in the order the API returned them

        Raises:
            SourceFetchFailed: On HTTP or network errors, or when a record
                does not decode as an issue
        """
        url = f"{self.base_url}/repos/{owner}/{component}/issues"
        issues: list[Issue] = []
        page = 1

        logger.info(f"Fetching issues from {owner}/{component}")

        while self.max_pages is None or page <= self.max_pages:
            params = {"state": "all", "per_page": self.per_page, "page": page}

            try:
                response = self._make_github_request(url, params=params)

                if response.status_code in (401, 403):
                    logger.error(
                        f"Authentication error: {response.status_code} - "
                        f"{response.text[:200]}"
                    )
                response.raise_for_status()

                records = response.json()
            except (requests.RequestException, ValueError) as e:
                logger.error(f"Error fetching page {page} of {owner}/{component}: {e}")
                raise SourceFetchFailed(owner, component, str(e)) from e

            if not isinstance(records, list):
                raise SourceFetchFailed(owner, component, "response is not a list of issues")

            try:
                issues.extend(Issue.model_validate(record) for record in records)
            except ValidationError as e:
                logger.error(f"Unexpected issue payload from {owner}/{component}: {e}")
                raise SourceFetchFailed(owner, component, "invalid issue record") from e

            logger.debug(f"Page {page}: {len(records)} records (total: {len(issues)})")

            if len(records) < self.per_page:
                break
            page += 1

        logger.info(f"Fetched {len(issues)} records from {owner}/{component}")
        return issues
