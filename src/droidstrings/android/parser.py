"""Tolerant line scanner for Android strings.xml documents.

This is deliberately not an XML parser. Hand-edited resource files are often
not well-formed, so the scanner locates the ``<resources>`` body and tests
each physical line against two independent patterns: a ``<string>`` key
line and an XML comment. Anything else is ignored.

Limitations:
- A value must open and close on the key line. A ``<string>`` element that
  continues on the next line yields an empty value.
- The comment test runs after the key test, so a comment sharing a line
  with a key attaches to the next key, not to that one.

Python 3.13+.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from droidstrings.android.values import build_decoder
from droidstrings.constants import SECTION_MARKER
from droidstrings.model import ParsedEntry

if TYPE_CHECKING:
    from droidstrings.android.pipeline import TransformChain
    from droidstrings.model import TranslationSink
    from droidstrings.types import LanguageCode

__all__ = ["ResourceDocumentParser"]

logger = logging.getLogger(__name__)

_RESOURCES_PATTERN = re.compile(r"<resources(?:[^>]*)>(.*)</resources>", re.DOTALL)
_KEY_PATTERN = re.compile(r'<string name="(\w+)">', re.ASCII)
_VALUE_PATTERN = re.compile(r'<string name="\w+">(.*)</string>', re.ASCII)
_COMMENT_PATTERN = re.compile(r"<!-- (.*) -->")
_LINE_BREAK_PATTERN = re.compile(r"\r?\n")


@dataclass(frozen=True, slots=True)
class ResourceDocumentParser:
    """Extract (key, value, comment) triples from strings.xml text.

    Thread-safe: holds no per-parse state. The pending comment lives in
    the local scope of parse().

    Example:
        >>> from droidstrings.model import StringsCatalog
        >>> catalog = StringsCatalog()
        >>> text = '''<resources>
        ...     <!-- Save button label -->
        ...     <string name="save">Save</string>
        ... </resources>'''
        >>> ResourceDocumentParser().parse(text, "en", catalog)
        (ParsedEntry(key='save', value='Save', comment='Save button label'),)
    """

    decoder: TransformChain = field(default_factory=build_decoder)

    def parse(
        self, text: str, language: LanguageCode, sink: TranslationSink
    ) -> tuple[ParsedEntry, ...]:
        """Scan a document and register every entry into sink.

        Args:
            text: Full document text
            language: Language the document holds
            sink: Receives register_value/register_comment calls

        Returns:
            The registered entries in document order. Empty when the document
            has no ``<resources>`` element.
        """
        content_match = _RESOURCES_PATTERN.search(text)
        if content_match is None:
            logger.debug("No <resources> element found, nothing to parse")
            return ()

        entries: list[ParsedEntry] = []
        comment: str | None = None

        for line in _LINE_BREAK_PATTERN.split(content_match.group(1)):
            key_match = _KEY_PATTERN.search(line)
            if key_match:
                key = key_match.group(1)
                value_match = _VALUE_PATTERN.search(line)
                raw_value = value_match.group(1) if value_match else ""

                value = self.decoder(raw_value)
                sink.register_value(key, language, value)

                attached: str | None = None
                if comment and not comment.startswith(SECTION_MARKER):
                    sink.register_comment(key, comment)
                    attached = comment
                comment = None

                logger.debug("Registered %s string: %s", language, key)
                entries.append(ParsedEntry(key, value, attached))

            comment_match = _COMMENT_PATTERN.search(line)
            if comment_match:
                comment = comment_match.group(1)

        logger.info("Parsed %d %s strings", len(entries), language)
        return tuple(entries)
