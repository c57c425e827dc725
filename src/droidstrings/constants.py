"""Shared constants for droidstrings.

Centralizes the fixed vocabulary of the Android resource format so the
resolver, parser, value pipelines and serializer agree on one definition.

Constants are grouped by domain:
- Resource layout: directory and file naming
- Language normalization: qualifier overrides
- Value escaping: Android-specific escape tokens
- Document shape: header and comment markers

Python 3.13+.
"""

from types import MappingProxyType

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Resource layout
    "BASE_DIRECTORY",
    "DEFAULT_FILE_NAME",
    "EXTENSION",
    "FORMAT_NAME",
    # Language normalization
    "LANGUAGE_OVERRIDES",
    "REGION_MARKER",
    # Value escaping
    "UNICODE_SPACE_ESCAPE",
    "UNICODE_SPACE_WIDTH",
    # Document shape
    "SECTION_MARKER",
    "COMMENT_DASH_REPLACEMENT",
]

# ============================================================================
# RESOURCE LAYOUT
# ============================================================================

# Android resolves string resources from res/values[-<qualifier>]/strings.xml.
BASE_DIRECTORY: str = "values"
DEFAULT_FILE_NAME: str = "strings.xml"
EXTENSION: str = ".xml"
FORMAT_NAME: str = "android"

# ============================================================================
# LANGUAGE NORMALIZATION
# ============================================================================

# Exact-match overrides applied to the raw qualifier before the region
# marker is rewritten. Keys are Android qualifiers, values canonical codes.
# "in" is the legacy ISO 639 code Android still uses for Indonesian.
LANGUAGE_OVERRIDES: MappingProxyType[str, str] = MappingProxyType({
    "zh": "zh-Hans",
    "zh-rCN": "zh-Hans",
    "zh-rHK": "zh-Hant",
    "en-rGB": "en-UK",
    "in": "id",
    "nb": "no",
})

# Android prefixes the region subtag with a lowercase "r": values-en-rUS.
REGION_MARKER: str = "-r"

# ============================================================================
# VALUE ESCAPING
# ============================================================================

# aapt trims leading/trailing whitespace from string values. A literal space
# survives only when written as this escape sequence.
UNICODE_SPACE_ESCAPE: str = "\\u0020"

# Width of UNICODE_SPACE_ESCAPE in characters. Decoding divides the length of
# a matched run by this value.
UNICODE_SPACE_WIDTH: int = len(UNICODE_SPACE_ESCAPE)

# ============================================================================
# DOCUMENT SHAPE
# ============================================================================

# Comment prefix that marks a section header rather than an entry comment.
SECTION_MARKER: str = "SECTION:"

# "--" is not allowed inside an XML comment; it is written as an em dash.
COMMENT_DASH_REPLACEMENT: str = "—"
