"""CLDR plural category selection backed by Babel's CLDR data."""

import functools

from babel.core import Locale, UnknownLocaleError


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale: str) -> Locale:
    """Parse and cache a Babel locale; accepts ``en-US`` as well as ``en_US``."""
    return Locale.parse(locale.replace("-", "_"))


def select_plural_category(n: int | float, locale: str) -> str:
    """Select the CLDR plural category of ``n`` in ``locale``.

    Examples:
        >>> select_plural_category(1, "en")
        'one'
        >>> select_plural_category(5, "ru")
        'many'
        >>> select_plural_category(2, "ar")
        'two'

    Unknown or invalid locales fall back to the one/other rule.
    """
    try:
        locale_obj = get_babel_locale(locale)
    except (UnknownLocaleError, ValueError):
        return "one" if abs(n) == 1 else "other"
    return locale_obj.plural_form(n)


__all__ = ["get_babel_locale", "select_plural_category"]
