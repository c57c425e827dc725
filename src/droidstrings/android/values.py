"""Value escaping for Android string resources.

Android string values go through two escaping layers: XML (the document is
XML) and aapt's own rules (backslash-escaped quotes and ``@``, trimmed
whitespace, printf placeholders). This module expresses both directions as
TransformChains with a fixed step order.

Decoding (strings.xml -> canonical):
    html -> apostrophes -> quotes -> placeholders -> at_signs -> spaces

Encoding (canonical -> strings.xml):
    quotes -> apostrophes -> html -> placeholders -> at_signs -> spaces

The two chains are not strict inverses. Values containing placeholders,
literal backslashes or embedded escaped spaces may not round-trip
byte-for-byte.

Python 3.13+.
"""

from __future__ import annotations

import html
import re
from typing import TYPE_CHECKING

from droidstrings.android.pipeline import TransformChain, TransformStep
from droidstrings.constants import UNICODE_SPACE_ESCAPE, UNICODE_SPACE_WIDTH
from droidstrings.placeholders import PrintfPlaceholders

if TYPE_CHECKING:
    from droidstrings.placeholders import PlaceholderConverter
    from droidstrings.types import CanonicalValue, EncodedValue

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Chain builders
    "build_decoder",
    "build_encoder",
    # Default chains
    "decode_value",
    "encode_value",
    # Shared helpers
    "unescape_html",
    "escape_quotes",
    "escape_at_signs",
    "escape_edge_spaces",
    "collapse_edge_spaces",
]

# @[<package_name>:]<resource_type>/<resource_name>
# https://developer.android.com/guide/topics/resources/accessing-resources#ResourcesFromXml
_NON_REFERENCE_AT = re.compile(r"@(?!(?:[a-z.]+:)?[a-z+]+/[a-zA-Z_]+)")

# XML predefined entities and numeric character references, semicolon required
_XML_ENTITY = re.compile(r"&(?:amp|lt|gt|quot|apos|#\d+|#[xX][0-9a-fA-F]+);")

_EDGE_SPACES = re.compile(r"\A +| +\Z")

_ESCAPED_SPACE = re.escape(UNICODE_SPACE_ESCAPE)
_EDGE_ESCAPED_SPACES = re.compile(rf"\A(?:{_ESCAPED_SPACE})+|(?:{_ESCAPED_SPACE})+\Z")


def escape_quotes(value: str) -> str:
    """Backslash-escape double quotes: ``"`` -> ``\\"``."""
    return value.replace('"', '\\"')


def escape_apostrophes(value: str) -> str:
    """Backslash-escape apostrophes: ``'`` -> ``\\'``."""
    return value.replace("'", "\\'")


def escape_html(value: str) -> str:
    """Entity-encode ``&``, ``<`` and ``>``.

    Quotes are left alone: they already carry a backslash escape and
    entity-encoding them too would write ``\\&quot;``.
    """
    return html.escape(value, quote=False)


def escape_at_signs(value: str) -> str:
    """Backslash-escape every ``@`` that does not start a resource reference.

    Example:
        >>> escape_at_signs("mail me @ home")
        'mail me \\\\@ home'
        >>> escape_at_signs("@string/app_name")
        '@string/app_name'
    """
    return _NON_REFERENCE_AT.sub(r"\\@", value)


def escape_edge_spaces(value: str) -> str:
    """Replace each leading and trailing space with the unicode space escape.

    Interior spaces are untouched.
    """
    return _EDGE_SPACES.sub(lambda m: UNICODE_SPACE_ESCAPE * len(m.group()), value)


def unescape_html(value: str) -> str:
    """Decode XML entities and numeric character references.

    Only ``&amp;``, ``&lt;``, ``&gt;``, ``&quot;``, ``&apos;`` and ``&#...;``
    forms terminated by ``;`` are decoded. HTML named entities and
    references missing their semicolon stay literal text.

    Example:
        >>> unescape_html("R&amp;D &#169;")
        'R&D ©'
        >>> unescape_html("Terms &notice &copy;")
        'Terms &notice &copy;'
    """
    return _XML_ENTITY.sub(lambda m: html.unescape(m.group()), value)


def unescape_apostrophes(value: str) -> str:
    return value.replace("\\'", "'")


def unescape_quotes(value: str) -> str:
    return value.replace('\\"', '"')


def unescape_at_signs(value: str) -> str:
    return value.replace("\\@", "@")


def collapse_edge_spaces(value: str) -> str:
    """Turn leading and trailing runs of the unicode space escape into spaces.

    A run is made of whole escape tokens only, so its length is always a
    multiple of UNICODE_SPACE_WIDTH. A truncated token next to a run is
    left as literal text. Escapes in the middle of the value are untouched.
    """
    return _EDGE_ESCAPED_SPACES.sub(
        lambda m: " " * (len(m.group()) // UNICODE_SPACE_WIDTH), value
    )


def build_decoder(placeholders: PlaceholderConverter | None = None) -> TransformChain:
    """Build the strings.xml -> canonical chain.

    Args:
        placeholders: Placeholder converter (default: PrintfPlaceholders())

    Returns:
        TransformChain with steps html, apostrophes, quotes, placeholders,
        at_signs, spaces
    """
    converter = placeholders if placeholders is not None else PrintfPlaceholders()
    return TransformChain((
        TransformStep("html", unescape_html),
        TransformStep("apostrophes", unescape_apostrophes),
        TransformStep("quotes", unescape_quotes),
        TransformStep("placeholders", converter.to_canonical),
        TransformStep("at_signs", unescape_at_signs),
        TransformStep("spaces", collapse_edge_spaces),
    ))


def build_encoder(placeholders: PlaceholderConverter | None = None) -> TransformChain:
    """Build the canonical -> strings.xml chain.

    Args:
        placeholders: Placeholder converter (default: PrintfPlaceholders())

    Returns:
        TransformChain with steps quotes, apostrophes, html, placeholders,
        at_signs, spaces
    """
    converter = placeholders if placeholders is not None else PrintfPlaceholders()
    return TransformChain((
        TransformStep("quotes", escape_quotes),
        TransformStep("apostrophes", escape_apostrophes),
        TransformStep("html", escape_html),
        TransformStep("placeholders", converter.to_platform),
        TransformStep("at_signs", escape_at_signs),
        TransformStep("spaces", escape_edge_spaces),
    ))


_DEFAULT_DECODER = build_decoder()
_DEFAULT_ENCODER = build_encoder()


def decode_value(raw: EncodedValue) -> CanonicalValue:
    """Decode a strings.xml value into canonical text with the default chain.

    Example:
        >>> decode_value("Tom &amp; Jerry\\\\'s %1$s")
        "Tom & Jerry's %1$@"
    """
    return _DEFAULT_DECODER(raw)


def encode_value(value: CanonicalValue) -> EncodedValue:
    """Encode canonical text into a strings.xml value with the default chain.

    Example:
        >>> encode_value("  Tom & Jerry's")
        "\\\\u0020\\\\u0020Tom &amp; Jerry\\\\'s"
    """
    return _DEFAULT_ENCODER(value)
