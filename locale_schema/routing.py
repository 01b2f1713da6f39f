"""Rewrite URL paths when switching the active locale."""
from collections.abc import Iterable, Mapping
from urllib.parse import urlencode


def strip_locale(path: str, locales: Iterable[str], base_path: str | None = None) -> str:
    """
    Remove the base path and a leading locale segment from ``path``.

    Args:
        path: Current URL path, e.g. ``/docs/en/guide``
        locales: Known locale codes
        base_path: Optional prefix the application is served under

    Returns:
        The path without base path and locale, always starting with ``/`` or empty
    """
    if base_path and (path == base_path or path.startswith(f"{base_path.rstrip('/')}/")):
        path = path[len(base_path.rstrip("/")):]

    segment, sep, rest = path.lstrip("/").partition("/")
    if segment in set(locales):
        return f"/{rest}" if sep else ""
    return path if path != "/" else ""


def change_locale_path(
        path: str,
        new_locale: str,
        locales: Iterable[str],
        *,
        base_path: str | None = None,
        query: str | Mapping[str, str] | None = None,
) -> str:
    """
    Build the path of the current page in another locale.

    Args:
        path: Current URL path
        new_locale: Locale to switch to
        locales: Known locale codes
        base_path: Optional prefix the application is served under; it is
            dropped, as routers add it back themselves
        query: Current query string, or its parameters

    Returns:
        ``/<new_locale><path>`` followed by the query string when there is one
    """
    if isinstance(query, Mapping):
        query = urlencode(query)
    query = (query or "").lstrip("?")

    rewritten = f"/{new_locale}{strip_locale(path, locales, base_path)}"
    return f"{rewritten}?{query}" if query else rewritten


__all__ = ["change_locale_path", "strip_locale"]
