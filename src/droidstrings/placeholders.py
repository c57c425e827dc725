"""Placeholder conversion between canonical and Android printf syntax.

The canonical model writes string arguments as ``%@`` (the Apple
convention); Android uses ``%s`` and requires positional numbering
(``%1$s``) as soon as a value carries more than one argument. Both
directions are pure functions and never reorder placeholders.

Components:
    PlaceholderConverter - Protocol consumed by the value pipelines
    PrintfPlaceholders - Default converter for printf-style placeholders
    count_placeholders - Count printf placeholders in a string

Python 3.13+.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Protocol

from droidstrings.errors import PlaceholderMismatchError

__all__ = [
    "PlaceholderConverter",
    "PrintfPlaceholders",
    "count_placeholders",
]

logger = logging.getLogger(__name__)

# printf grammar: %[n$][flags][width][.precision][length]type
_FLAGS_WIDTH_PRECISION_LENGTH = r"[-+0#]?(?:\d+|\*)?(?:\.(?:\d+|\*))?(?:hh?|ll?|L|z|j|t|q)?"
_PARAMETER_FLAGS_WIDTH_PRECISION_LENGTH = r"(?:\d+\$)?" + _FLAGS_WIDTH_PRECISION_LENGTH
_PLACEHOLDER_TYPES = r"[diufFeEgGxXoscpaA]"
_PLACEHOLDER_SYNTAX = _PARAMETER_FLAGS_WIDTH_PRECISION_LENGTH + _PLACEHOLDER_TYPES

_PLACEHOLDER_PATTERN = re.compile("%" + _PLACEHOLDER_SYNTAX)
_CANONICAL_STRING_PATTERN = re.compile(f"(%{_PARAMETER_FLAGS_WIDTH_PRECISION_LENGTH})@")
_ANDROID_STRING_PATTERN = re.compile(f"(%{_PARAMETER_FLAGS_WIDTH_PRECISION_LENGTH})s")
_SINGLE_PERCENT_PATTERN = re.compile(f"([^%])%(?!%|{_PLACEHOLDER_SYNTAX})")
_NON_NUMBERED_PATTERN = re.compile(f"%({_FLAGS_WIDTH_PRECISION_LENGTH}{_PLACEHOLDER_TYPES})")


def count_placeholders(value: str) -> int:
    """Count printf placeholders (``%d``, ``%1$s``, ``%.2f``...) in a string.

    Canonical ``%@`` is not a printf type and is not counted.
    """
    return len(_PLACEHOLDER_PATTERN.findall(value))


class PlaceholderConverter(Protocol):
    """Protocol for converting placeholders between canonical and platform syntax.

    Both methods must be total over arbitrary text and must preserve the
    order and positional indices of placeholders.
    """

    def to_canonical(self, value: str) -> str:
        """Rewrite platform placeholders into canonical placeholders."""

    def to_platform(self, value: str) -> str:
        """Rewrite canonical placeholders into platform placeholders."""


@dataclass(frozen=True, slots=True)
class PrintfPlaceholders:
    """Default placeholder converter for Android string resources.

    Attributes:
        strict: Raise PlaceholderMismatchError for values that mix numbered and
            non-numbered placeholders instead of returning them unchanged.

    Example:
        >>> converter = PrintfPlaceholders()
        >>> converter.to_platform("%@ has %d items")
        '%1$s has %2$d items'
        >>> converter.to_canonical("%1$s has %2$d items")
        '%1$@ has %2$d items'
    """

    strict: bool = False

    def to_canonical(self, value: str) -> str:
        """Rewrite ``%s`` (with any parameter, flags, width) into ``%@``."""
        return _ANDROID_STRING_PATTERN.sub(r"\1@", value)

    def to_platform(self, value: str) -> str:
        """Rewrite canonical placeholders into Android printf syntax.

        Steps:
        1. ``%@`` becomes ``%s``.
        2. With at least one placeholder present, a lone ``%`` becomes ``%%``
           so Android's formatter does not treat it as a directive.
        3. With two or more placeholders, non-numbered placeholders are
           numbered positionally (``%d`` -> ``%1$d``).

        Raises:
            PlaceholderMismatchError: If strict and the value mixes numbered
                and non-numbered placeholders.
        """
        converted = _CANONICAL_STRING_PATTERN.sub(r"\1s", value)

        placeholder_count = count_placeholders(converted)
        if placeholder_count == 0:
            return converted

        converted = _SINGLE_PERCENT_PATTERN.sub(r"\1%%", converted)

        if placeholder_count < 2:
            return converted

        non_numbered_count = len(_NON_NUMBERED_PATTERN.findall(converted))
        if non_numbered_count == 0:
            return converted

        if non_numbered_count != placeholder_count:
            if self.strict:
                raise PlaceholderMismatchError(value)
            logger.warning(
                "Value mixes numbered and non-numbered placeholders, left unnumbered: %r",
                value,
            )
            return converted

        index = 0

        def _number(match: re.Match[str]) -> str:
            nonlocal index
            index += 1
            return f"%{index}${match.group(1)}"

        return _NON_NUMBERED_PATTERN.sub(_number, converted)
