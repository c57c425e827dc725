"""Canonical translation model seams.

The codec never owns the translation container. Reading writes through the
narrow ``TranslationSink`` protocol; writing consumes plain ``Section`` and
``Entry`` records supplied by the caller.

``StringsCatalog`` is a minimal in-memory container implementing the sink,
for callers (and tests) that do not bring their own.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from droidstrings.types import CanonicalValue, LanguageCode, StringKey

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Read side
    "TranslationSink",
    "ParsedEntry",
    # Write side
    "Entry",
    "Section",
    # Reference container
    "StringsCatalog",
]

logger = logging.getLogger(__name__)


class TranslationSink(Protocol):
    """Write capability handed to the parser.

    Example:
        >>> class PrintingSink:
        ...     def register_value(self, key, language, value):
        ...         print(f"{language}:{key}={value}")
        ...     def register_comment(self, key, comment):
        ...         print(f"# {key}: {comment}")
    """

    def register_value(
        self, key: StringKey, language: LanguageCode, value: CanonicalValue
    ) -> None:
        """Record the translation of key for language, replacing any previous one."""

    def register_comment(self, key: StringKey, comment: str) -> None:
        """Record the developer comment attached to key."""


@dataclass(frozen=True, slots=True)
class ParsedEntry:
    """One entry extracted from a resource document.

    Attributes:
        key: Resource key
        value: Decoded canonical value (empty when the value was not on the key line)
        comment: Attached comment, None when no comment was attached
    """

    key: StringKey
    value: CanonicalValue
    comment: str | None = None


@dataclass(frozen=True, slots=True)
class Entry:
    """One entry to serialize.

    Attributes:
        key: Resource key
        value: Canonical value, encoded on output
        comment: Optional developer comment written above the entry
    """

    key: StringKey
    value: CanonicalValue
    comment: str | None = None


@dataclass(frozen=True, slots=True)
class Section:
    """Named, ordered group of entries.

    Attributes:
        name: Section name written as a header comment; None or "" writes no header
        entries: Entries in output order
    """

    name: str | None = None
    entries: tuple[Entry, ...] = ()

    def __post_init__(self) -> None:
        """Accept any iterable of entries and store it as a tuple."""
        if not isinstance(self.entries, tuple):
            object.__setattr__(self, "entries", tuple(self.entries))


@dataclass(slots=True)
class StringsCatalog:
    """In-memory translation container implementing TranslationSink.

    Keys keep the order in which they were first registered. Values are
    stored per key and language; later registrations overwrite earlier ones.

    Example:
        >>> catalog = StringsCatalog()
        >>> catalog.register_value("save", "en", "Save")
        >>> catalog.register_comment("save", "Button label")
        >>> catalog.translation_for("save", "en")
        'Save'
    """

    _values: dict[StringKey, dict[LanguageCode, CanonicalValue]] = field(default_factory=dict)
    _comments: dict[StringKey, str] = field(default_factory=dict)

    def register_value(
        self, key: StringKey, language: LanguageCode, value: CanonicalValue
    ) -> None:
        """Record value for key and language."""
        translations = self._values.setdefault(key, {})
        if language in translations:
            logger.debug("Overwriting %s translation of %s", language, key)
        translations[language] = value

    def register_comment(self, key: StringKey, comment: str) -> None:
        """Record comment for key."""
        self._comments[key] = comment

    @property
    def keys(self) -> tuple[StringKey, ...]:
        """All keys in first-registration order."""
        return tuple(self._values)

    @property
    def languages(self) -> tuple[LanguageCode, ...]:
        """All languages with at least one translation, in first-seen order."""
        seen: dict[LanguageCode, None] = {}
        for translations in self._values.values():
            for language in translations:
                seen.setdefault(language, None)
        return tuple(seen)

    def translation_for(self, key: StringKey, language: LanguageCode) -> CanonicalValue | None:
        """Get the translation of key for language, or None."""
        return self._values.get(key, {}).get(language)

    def comment_for(self, key: StringKey) -> str | None:
        """Get the comment attached to key, or None."""
        return self._comments.get(key)

    def sections_for(self, language: LanguageCode) -> tuple[Section, ...]:
        """Build the sections to serialize for one language.

        Returns a single unnamed section with every key translated into
        language, in first-registration order. Keys without a translation
        are skipped. Returns an empty tuple when nothing is translated.
        """
        entries = tuple(
            Entry(key, translations[language], self._comments.get(key))
            for key, translations in self._values.items()
            if language in translations
        )
        if not entries:
            return ()
        return (Section(None, entries),)
