"""Serialize canonical sections into an Android strings.xml document.

Output layout::

    <?xml version="1.0" encoding="utf-8"?>
    <!-- Android Strings File -->
    <!-- Generated by droidstrings 0.1.0 -->
    <!-- Language: fr -->
    <resources>
    \t<!-- SECTION: Buttons -->
    \t<!-- Save button label -->
    \t<string name="save">Enregistrer</string>

    \t<!-- SECTION: Errors -->
    \t<string name="network_error">Erreur réseau</string>
    </resources>

Python 3.13+.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from droidstrings.android.values import build_encoder
from droidstrings.constants import COMMENT_DASH_REPLACEMENT, SECTION_MARKER

if TYPE_CHECKING:
    from collections.abc import Iterable

    from droidstrings.android.pipeline import TransformChain
    from droidstrings.model import Entry, Section
    from droidstrings.types import LanguageCode

__all__ = ["DocumentFormatter"]

_INDENT: str = "\t"
_KEY_VALUE_PATTERN: str = '\t<string name="{key}">{value}</string>'


def _generator_version() -> str:
    # Deferred import: droidstrings/__init__ imports this module
    from droidstrings import __version__  # noqa: PLC0415

    return __version__


@dataclass(frozen=True, slots=True)
class DocumentFormatter:
    """Converts canonical sections into strings.xml text.

    Thread-safe: no mutable state. Sections and entries are written in the
    order given; sections without entries are omitted.

    Example:
        >>> from droidstrings.model import Entry, Section
        >>> formatter = DocumentFormatter()
        >>> text = formatter.format("en", [Section("Buttons", [Entry("save", "Save")])])
        >>> print(text.split("<resources>")[1])
        <BLANKLINE>
        \t<!-- SECTION: Buttons -->
        \t<string name="save">Save</string>
        </resources>
    """

    encoder: TransformChain = field(default_factory=build_encoder)

    def format(self, language: LanguageCode, sections: Iterable[Section]) -> str:
        """Serialize sections for one language.

        Args:
            language: Language written into the header comment
            sections: Sections in output order

        Returns:
            Complete document text, without a trailing newline
        """
        return f"{self.format_header(language)}\n{self.format_sections(sections)}"

    def format_header(self, language: LanguageCode) -> str:
        """Return the four header lines."""
        return (
            '<?xml version="1.0" encoding="utf-8"?>\n'
            "<!-- Android Strings File -->\n"
            f"<!-- Generated by droidstrings {_generator_version()} -->\n"
            f"<!-- Language: {language} -->"
        )

    def format_sections(self, sections: Iterable[Section]) -> str:
        """Return the ``<resources>`` element holding every non-empty section."""
        formatted = (self.format_section(section) for section in sections)
        body = "\n".join(text for text in formatted if text is not None)
        return f"<resources>{body}\n</resources>"

    def format_section(self, section: Section) -> str | None:
        """Return the section's lines, each prefixed with a newline.

        Returns None for a section with no entries.
        """
        if not section.entries:
            return None

        parts: list[str] = []
        if section.name:
            parts.append(f"\n{self.format_section_header(section)}")
        parts.extend(f"\n{self.format_entry(entry)}" for entry in section.entries)
        return "".join(parts)

    def format_section_header(self, section: Section) -> str:
        return f"{_INDENT}<!-- {SECTION_MARKER} {section.name} -->"

    def format_comment(self, comment: str) -> str:
        """Return an indented comment line; ``--`` is written as an em dash."""
        return f"{_INDENT}<!-- {comment.replace('--', COMMENT_DASH_REPLACEMENT)} -->"

    def format_entry(self, entry: Entry) -> str:
        """Return the optional comment line followed by the key/value line."""
        key_value = _KEY_VALUE_PATTERN.format(key=entry.key, value=self.encoder(entry.value))
        if entry.comment:
            return f"{self.format_comment(entry.comment)}\n{key_value}"
        return key_value
