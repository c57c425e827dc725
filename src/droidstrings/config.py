"""Resource layout configuration.

Provides a single frozen dataclass describing how Android lays out string
resources on disk: the base directory name that qualifiers are appended
to, the default file name, and the qualifier-to-language override table.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from droidstrings.constants import (
    BASE_DIRECTORY,
    DEFAULT_FILE_NAME,
    EXTENSION,
    LANGUAGE_OVERRIDES,
)

__all__ = ["ResourceLayout"]

_DIRECTORY_NAME_PATTERN = re.compile(r"[A-Za-z0-9_]+")


@dataclass(frozen=True, slots=True)
class ResourceLayout:
    """Immutable description of an Android resource directory layout.

    Constructing ``ResourceLayout()`` with no arguments yields the standard
    ``res/values[-qualifier]/strings.xml`` layout.

    Attributes:
        base_directory: Directory name qualifiers are appended to (default: "values").
        default_file_name: File name inside each directory (default: "strings.xml").
        extension: File extension of resource documents (default: ".xml").
        language_overrides: Exact-match qualifier overrides applied before the
            region marker is rewritten. Stored as a read-only mapping.

    Example:
        >>> layout = ResourceLayout(default_file_name="app_strings.xml")
        >>> layout.base_directory
        'values'
    """

    base_directory: str = BASE_DIRECTORY
    default_file_name: str = DEFAULT_FILE_NAME
    extension: str = EXTENSION
    language_overrides: Mapping[str, str] = field(
        default_factory=lambda: LANGUAGE_OVERRIDES, hash=False
    )

    def __post_init__(self) -> None:
        """Validate layout values and freeze the override table.

        Raises:
            ValueError: If base_directory is not a plain identifier, or if
                default_file_name does not end with extension.
        """
        if not _DIRECTORY_NAME_PATTERN.fullmatch(self.base_directory):
            msg = (
                "base_directory must be a plain directory name without separators, "
                f"got: {self.base_directory!r}"
            )
            raise ValueError(msg)
        if not self.default_file_name.endswith(self.extension):
            msg = (
                f"default_file_name {self.default_file_name!r} "
                f"does not end with extension {self.extension!r}"
            )
            raise ValueError(msg)
        if not isinstance(self.language_overrides, MappingProxyType):
            object.__setattr__(
                self, "language_overrides", MappingProxyType(dict(self.language_overrides))
            )
