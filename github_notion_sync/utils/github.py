"""Contains utility functions for GitHub interactions."""


def split_repository(repo: str | None) -> tuple[str, str]:
    """Splits a repository full name into owner and repository."""
    if repo is None:
        raise ValueError("Repository is required in the format 'owner/repo'.")
    repo = repo.strip("/")
    parts = repo.split("/")
    if len(parts) != 2 or not all(parts):
        raise ValueError("Repository must be in the format 'owner/repo' with no leading/trailing slashes or extra parts.")
    owner, repository = parts
    return owner, repository


def split_repository_url(repository_url: str) -> tuple[str, str]:
    """Derive (organization, repository) from a repository API URL.

    Takes the last two path segments, so
    ``https://api.github.com/repos/acme/widgets`` yields ``("acme", "widgets")``.
    """
    segments = repository_url.split("/")
    if len(segments) < 2:
        return "", segments[-1]
    return segments[-2], segments[-1]


def issue_number_from_url(url: str | None) -> int | None:
    """Return the issue number at the end of an issue URL, or None if there isn't one."""
    if not url:
        return None
    trailing_segment = url.rstrip("/").split("/")[-1]
    try:
        return int(trailing_segment)
    except ValueError:
        return None


def issue_number_from_content_url(content_url: str | None) -> int | None:
    """Return the issue number a project card links to, or None for notes and other content."""
    if not content_url or "/issues/" not in content_url:
        return None
    suffix = content_url.split("/issues/", 1)[1]
    try:
        return int(suffix)
    except ValueError:
        return None
