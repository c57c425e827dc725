"""Android formatter: one object bundling path resolution, reading and writing.

The multi-platform toolkit drives every platform codec through the same
surface (format_name, extension, determine_language_given_path, read_file,
format_file...). AndroidFormatter provides that surface by delegating to
LanguagePathResolver, ResourceDocumentParser and DocumentFormatter.

Python 3.13+.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from droidstrings.android.parser import ResourceDocumentParser
from droidstrings.android.paths import LanguagePathResolver
from droidstrings.android.serializer import DocumentFormatter
from droidstrings.android.values import build_decoder, build_encoder
from droidstrings.config import ResourceLayout
from droidstrings.constants import FORMAT_NAME
from droidstrings.placeholders import PrintfPlaceholders

if TYPE_CHECKING:
    import os
    from collections.abc import Iterable

    from droidstrings.model import ParsedEntry, Section, TranslationSink
    from droidstrings.placeholders import PlaceholderConverter
    from droidstrings.types import LanguageCode

__all__ = ["AndroidFormatter"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class AndroidFormatter:
    """Codec for Android ``res/values*/strings.xml`` files.

    Attributes:
        layout: Directory/file naming (default: ResourceLayout())
        placeholders: Converter shared by the read and write value chains
            (default: PrintfPlaceholders())
        resolver: Path-to-language resolution
        parser: Document reader
        document_formatter: Document writer

    Example:
        >>> formatter = AndroidFormatter()
        >>> formatter.determine_language_given_path("res/values-zh-rCN/strings.xml", "en")
        'zh-Hans'
        >>> formatter.output_path_for_language("de")
        'values-de'
    """

    layout: ResourceLayout = field(default_factory=ResourceLayout)
    placeholders: PlaceholderConverter = field(default_factory=PrintfPlaceholders)
    resolver: LanguagePathResolver = field(init=False)
    parser: ResourceDocumentParser = field(init=False)
    document_formatter: DocumentFormatter = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "resolver", LanguagePathResolver(self.layout))
        object.__setattr__(
            self, "parser", ResourceDocumentParser(build_decoder(self.placeholders))
        )
        object.__setattr__(
            self, "document_formatter", DocumentFormatter(build_encoder(self.placeholders))
        )

    @property
    def format_name(self) -> str:
        return FORMAT_NAME

    @property
    def extension(self) -> str:
        return self.layout.extension

    @property
    def default_file_name(self) -> str:
        return self.layout.default_file_name

    def determine_language_given_path(
        self, path: str | os.PathLike[str], default_language: LanguageCode | None
    ) -> LanguageCode | None:
        """Resolve the language of a resource path; None means skip the file."""
        return self.resolver.resolve_language(path, default_language)

    def can_handle_directory(self, path: str | os.PathLike[str]) -> bool:
        return self.resolver.can_handle_directory(path)

    def output_path_for_language(self, language: LanguageCode) -> str:
        return self.resolver.output_path_for_language(language)

    def read_file(
        self, path: str | os.PathLike[str], language: LanguageCode, sink: TranslationSink
    ) -> tuple[ParsedEntry, ...]:
        """Read a strings.xml file and register its entries into sink.

        Args:
            path: File to read (UTF-8)
            language: Language the file holds
            sink: Receives the parsed entries

        Returns:
            The registered entries in document order

        Raises:
            FileNotFoundError: If the file does not exist
            OSError: If the file cannot be read
            UnicodeDecodeError: If the file is not valid UTF-8
        """
        logger.debug("Reading %s strings from %s", language, path)
        with Path(path).open(encoding="utf-8") as f:
            return self.parser.parse(f.read(), language, sink)

    def format_file(self, language: LanguageCode, sections: Iterable[Section]) -> str:
        """Serialize sections into strings.xml text for language.

        Writing the text to disk is left to the caller.
        """
        return self.document_formatter.format(language, sections)
