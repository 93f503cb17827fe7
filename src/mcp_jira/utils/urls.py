"""URL-related utility functions for MCP Jira."""

from urllib.parse import quote, urlparse

# Sub-delimiters allowed unescaped inside a single path segment (RFC 3986)
PATH_SEGMENT_SAFE = "$&+:=@"


def is_absolute_url(url: str | None) -> bool:
    """Check that a URL is absolute, with an http(s) scheme and a host.

    Args:
        url: The URL to check

    Returns:
        True if the URL can serve as a base URL for API requests
    """
    if not url:
        return False
    try:
        parsed_url = urlparse(url)
    except ValueError:
        return False
    return parsed_url.scheme in ("http", "https") and bool(parsed_url.netloc)


def escape_path_segment(value: str) -> str:
    """Escape a value for use as a single URL path segment.

    ``/``, ``?`` and ``#`` are always escaped, so an issue key can never
    change the endpoint or add a query string.
    """
    return quote(value, safe=PATH_SEGMENT_SAFE)
