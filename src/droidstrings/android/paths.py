"""Language resolution from Android resource paths.

Android selects string resources by directory qualifier: ``values`` holds the
default language, ``values-fr`` French, ``values-pt-rBR`` Brazilian
Portuguese. The qualifier is a two-letter ISO 639-1 language code,
optionally followed by a two-letter ISO 3166-1 region code prefixed with
a lowercase "r".
https://developer.android.com/guide/topics/resources/providing-resources#AlternativeResources

Python 3.13+.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from pathlib import Path, PurePath
from typing import TYPE_CHECKING

from droidstrings.config import ResourceLayout
from droidstrings.constants import REGION_MARKER
from droidstrings.locale_utils import is_known_language

if TYPE_CHECKING:
    import os

    from droidstrings.types import LanguageCode

__all__ = ["LanguagePathResolver"]

logger = logging.getLogger(__name__)

_REGION_MARKER_PATTERN = re.compile(re.escape(REGION_MARKER), re.IGNORECASE)


@dataclass(frozen=True, slots=True)
class LanguagePathResolver:
    """Map resource paths to canonical language codes and back.

    Example:
        >>> resolver = LanguagePathResolver()
        >>> resolver.resolve_language("res/values-en-rUS/strings.xml", "en")
        'en-US'
        >>> resolver.resolve_language("res/values/strings.xml", "en")
        'en'
        >>> resolver.output_path_for_language("fr")
        'values-fr'
    """

    layout: ResourceLayout = field(default_factory=ResourceLayout)
    _qualified_pattern: re.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        pattern = re.compile(
            rf"{re.escape(self.layout.base_directory)}-([a-z]{{2}}(?:-r[a-z]{{2}})?)",
            re.IGNORECASE,
        )
        object.__setattr__(self, "_qualified_pattern", pattern)

    def resolve_language(
        self, path: str | os.PathLike[str], default_language: LanguageCode | None
    ) -> LanguageCode | None:
        """Determine the language a resource path represents.

        Segments are inspected in path order and the first hit wins. The bare
        base directory resolves to default_language. A qualified directory is
        normalized through the override table, then its region marker is
        rewritten to a plain hyphen ("pt-rBR" -> "pt-BR").

        The qualifier match and the region-marker rewrite are both
        case-insensitive, so "values-EN-RUS" resolves to "EN-US". This is a
        behavior change from a case-sensitive rewrite, which leaves "EN-RUS".
        The override lookup stays an exact, case-sensitive match.

        Args:
            path: Path to a resource file or directory
            default_language: Language of the unqualified base directory

        Returns:
            Canonical language code, or None if no segment names a language.
            Callers skip files that resolve to None.
        """
        for segment in PurePath(path).parts:
            if segment == self.layout.base_directory:
                return default_language

            match = self._qualified_pattern.fullmatch(segment)
            if match:
                qualifier = match.group(1)
                language = self.layout.language_overrides.get(qualifier, qualifier)
                language = _REGION_MARKER_PATTERN.sub("-", language, count=1)
                if not is_known_language(language):
                    logger.warning(
                        "Directory %s resolves to unknown language %s", segment, language
                    )
                return language

        logger.debug("No language qualifier in path: %s", path)
        return None

    def can_handle_directory(self, path: str | os.PathLike[str]) -> bool:
        """Check whether a directory holds Android resource directories.

        Args:
            path: Directory to inspect (typically ``res/``)

        Returns:
            True if any immediate entry's name starts with the base directory name
        """
        prefix = self.layout.base_directory
        return any(entry.name.startswith(prefix) for entry in Path(path).iterdir())

    def output_path_for_language(self, language: LanguageCode) -> str:
        """Return the directory name that holds strings for language.

        The qualifier is always appended, also for the project's default
        language, so writing the default language produces ``values-en``
        rather than ``values``.
        """
        return f"{self.layout.base_directory}-{language}"
