"""Type aliases for the droidstrings domain.

Python 3.13+. Zero external dependencies.
"""

__all__ = [
    "CanonicalValue",
    "EncodedValue",
    "LanguageCode",
    "StringKey",
]

type LanguageCode = str
"""Canonical language code (e.g., 'en', 'zh-Hans', 'en-UK')."""

type StringKey = str
"""Resource key matching [A-Za-z0-9_]+ (e.g., 'save_button')."""

type CanonicalValue = str
"""Platform-agnostic text with canonical (%@) placeholders and no escaping."""

type EncodedValue = str
"""Text as written inside a <string> element of strings.xml."""
