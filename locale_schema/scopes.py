"""Scope (namespace prefix) extraction and scoped key resolution."""
from collections.abc import Iterable


def extract_scopes(paths: Iterable[str]) -> tuple[str, ...]:
    """
    Collect every proper dot-delimited prefix of the given paths.

    ``a.b.c`` contributes ``a`` and ``a.b``. Scopes are returned in the order
    they are first seen.

    Args:
        paths: Flattened leaf paths

    Returns:
        Unique scopes in first-appearance order
    """
    scopes: dict[str, None] = {}
    for path in paths:
        index = path.find(".")
        while index != -1:
            scopes.setdefault(path[:index])
            index = path.find(".", index + 1)
    return tuple(scopes)


def resolve_key(key: str, scope: str | None = None) -> str:
    """Join a scope and a relative key into a full path."""
    return f"{scope}.{key}" if scope else key


def strip_scope(path: str, scope: str | None) -> str | None:
    """
    Return ``path`` relative to ``scope``, or None if it is outside of it.
    """
    if not scope:
        return path
    prefix = f"{scope}."
    if path.startswith(prefix) and len(path) > len(prefix):
        return path[len(prefix):]
    return None


__all__ = ["extract_scopes", "resolve_key", "strip_scope"]
