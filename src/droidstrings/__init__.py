"""droidstrings - Android strings.xml codec for a multi-platform localization toolkit.

Converts between Android ``res/values*/strings.xml`` resource documents and a
canonical, platform-agnostic translation model.

Public API:
    AndroidFormatter - Facade: path resolution, read_file, format_file
    LanguagePathResolver - Resource directory <-> language code
    ResourceDocumentParser - Tolerant strings.xml scanner
    DocumentFormatter - strings.xml writer
    decode_value / encode_value - Value escaping pipelines
    ResourceLayout - Directory/file naming configuration

Model:
    TranslationSink - Protocol the parser registers entries through
    Entry, Section - Records consumed by the writer
    StringsCatalog - In-memory reference container

Exceptions:
    StringsError - Base exception class
    PlaceholderMismatchError - Mixed numbered/non-numbered placeholders (strict mode)
"""

from .android import (
    AndroidFormatter,
    DocumentFormatter,
    LanguagePathResolver,
    ResourceDocumentParser,
    decode_value,
    encode_value,
)
from .config import ResourceLayout
from .errors import PlaceholderMismatchError, StringsError
from .model import Entry, ParsedEntry, Section, StringsCatalog, TranslationSink
from .placeholders import PlaceholderConverter, PrintfPlaceholders

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("droidstrings")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "AndroidFormatter",
    "DocumentFormatter",
    "Entry",
    "LanguagePathResolver",
    "ParsedEntry",
    "PlaceholderConverter",
    "PlaceholderMismatchError",
    "PrintfPlaceholders",
    "ResourceDocumentParser",
    "ResourceLayout",
    "Section",
    "StringsCatalog",
    "StringsError",
    "TranslationSink",
    "__version__",
    "decode_value",
    "encode_value",
]
