"""Locale utilities backed by Babel's CLDR data.

Used for diagnostics only: the resolver never changes the code it returns
based on these checks.

Python 3.13+.
"""

from __future__ import annotations

import functools
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "clear_locale_cache",
    "get_babel_locale",
    "is_known_language",
    "normalize_locale",
]


def normalize_locale(locale_code: str) -> str:
    """Convert a hyphenated language code to POSIX format for Babel.

    Args:
        locale_code: Language code (e.g., "en-US", "zh-Hans")

    Returns:
        POSIX-formatted code (e.g., "en_US", "zh_Hans")

    Example:
        >>> normalize_locale("pt-BR")
        'pt_BR'
        >>> normalize_locale("en")
        'en'
    """
    return locale_code.replace("-", "_")


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Args:
        locale_code: Language code (hyphenated or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(normalize_locale(locale_code))


def is_known_language(locale_code: str) -> bool:
    """Check whether the language subtag of a code exists in CLDR.

    Only the language subtag is checked. Region subtags produced by the
    override table (e.g. "en-UK") are not CLDR territories and are ignored.

    Args:
        locale_code: Language code (e.g., "en-US", "zh-Hant", "id")

    Returns:
        True if Babel knows the language subtag
    """
    from babel import UnknownLocaleError  # noqa: PLC0415

    language = locale_code.split("-", 1)[0]
    try:
        get_babel_locale(language)
    except (UnknownLocaleError, ValueError):
        return False
    return True


def clear_locale_cache() -> None:
    """Clear the cached Babel Locale objects."""
    get_babel_locale.cache_clear()
