"""
URL helpers used when the router answers with a redirect.
"""

from urllib.parse import urlsplit, urlunsplit


def normalize_base_path(base_path: str | None) -> str:
    """Return ``base_path`` as ``/segment`` without a trailing slash, or ``""``."""
    if not base_path:
        return ""
    stripped = base_path.strip("/")
    return f"/{stripped}" if stripped else ""


def has_base_path(path: str, base_path: str | None) -> bool:
    """Return True when ``path`` lies under ``base_path`` (always True without one)."""
    prefix = normalize_base_path(base_path)
    return not prefix or path == prefix or path.startswith(prefix + "/")


def strip_base_path(path: str, base_path: str | None) -> str:
    """Remove ``base_path`` from the front of ``path`` when it is there."""
    prefix = normalize_base_path(base_path)
    if not prefix:
        return path
    if path == prefix:
        return "/"
    if path.startswith(prefix + "/"):
        return path[len(prefix) :]
    return path


def construct_next_url(base_url: str, path: str, base_path: str | None = "") -> str:
    """Insert ``path`` in front of the application path of ``base_url``.

    Scheme, host, query string and fragment of ``base_url`` are kept. The
    application root is replaced rather than suffixed, so ``/`` with ``/fr``
    gives ``/fr`` and not ``/fr/``. When a base path is configured it stays in
    front of the inserted prefix.

    Args:
        base_url:  Current request URL, absolute or relative.
        path:      Prefix to insert, e.g. ``"/fr"``.
        base_path: Application base path, e.g. ``"/docs"``.

    Returns:
        The rewritten URL.
    """
    parts = urlsplit(base_url)
    current = strip_base_path(parts.path or "/", base_path)
    if current == "/":
        current = ""
    new_path = f"{normalize_base_path(base_path)}{path}{current}" or "/"
    return urlunsplit((parts.scheme, parts.netloc, new_path, parts.query, parts.fragment))
