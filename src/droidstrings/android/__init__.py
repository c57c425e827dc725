"""Android strings.xml codec.

Submodules:
    paths      - LanguagePathResolver (resource directory <-> language code)
    pipeline   - TransformChain, TransformStep (ordered string transformations)
    values     - Value decode/encode chains (decode_value, encode_value)
    parser     - ResourceDocumentParser (document -> entries)
    serializer - DocumentFormatter (sections -> document)
    formatter  - AndroidFormatter (facade over all of the above)

Python 3.13+.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability

from droidstrings.android.formatter import AndroidFormatter
from droidstrings.android.parser import ResourceDocumentParser
from droidstrings.android.paths import LanguagePathResolver
from droidstrings.android.pipeline import TransformChain, TransformStep
from droidstrings.android.serializer import DocumentFormatter
from droidstrings.android.values import (
    build_decoder,
    build_encoder,
    decode_value,
    encode_value,
)

__all__ = [
    # Facade
    "AndroidFormatter",
    # Components
    "LanguagePathResolver",
    "ResourceDocumentParser",
    "DocumentFormatter",
    # Value pipelines
    "TransformChain",
    "TransformStep",
    "build_decoder",
    "build_encoder",
    "decode_value",
    "encode_value",
]
