"""Resolve the short component name of an issue's repository."""

from urllib.parse import urlparse

from triage.errors import MalformedRepositoryURL


def resolve_component(repository_url: str) -> str:
    """
    Return the last path segment of a repository URL.

    Examples:
        "https://api.github.com/repos/acme/alpha" -> "alpha"

    Args:
        repository_url: Repository identifier as returned by the tracker

    Returns:
        Component name

    Raises:
        MalformedRepositoryURL: If the value is not an absolute URL or its
            path has no segments
    """
    try:
        parsed = urlparse(repository_url)
    except ValueError as e:
        raise MalformedRepositoryURL(repository_url, str(e)) from e

    if not parsed.scheme or not parsed.netloc:
        raise MalformedRepositoryURL(repository_url, "not an absolute URL")

    segments = parsed.path.split("/")[1:]
    if not any(segments):
        raise MalformedRepositoryURL(repository_url)

    # A trailing slash yields an empty last segment, as URL path iteration does
    return segments[-1]
