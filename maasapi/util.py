"""URL helpers."""


def join_urls(base_url: str, path: str) -> str:
    """Join a base URL and a subpath with exactly one slash between them."""
    return base_url.rstrip("/") + "/" + path.lstrip("/")


def ensure_trailing_slash(url: str) -> str:
    """Return the URL with a trailing slash, adding one if missing."""
    return url if url.endswith("/") else url + "/"