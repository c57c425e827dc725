"""Ordered chains of pure string transformations.

Escaping for Android is a composition of steps whose order matters: running
the HTML escape after the quote escape, or the space escape before the
``@`` escape, corrupts values. A TransformChain fixes the order at
construction time and keeps each step addressable for isolated testing.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator

__all__ = [
    "TransformChain",
    "TransformStep",
]


@dataclass(frozen=True, slots=True)
class TransformStep:
    """A named pure ``str -> str`` function.

    Attributes:
        name: Identifier used to look the step up in its chain
        func: The transformation
    """

    name: str
    func: Callable[[str], str]

    def __call__(self, value: str) -> str:
        """Apply the step."""
        return self.func(value)


@dataclass(frozen=True, slots=True)
class TransformChain:
    """Immutable ordered sequence of TransformSteps.

    Example:
        >>> chain = TransformChain((
        ...     TransformStep("strip", str.strip),
        ...     TransformStep("upper", str.upper),
        ... ))
        >>> chain("  ok ")
        'OK'
        >>> chain.step_names
        ('strip', 'upper')
    """

    steps: tuple[TransformStep, ...]

    def __post_init__(self) -> None:
        """Reject duplicate step names.

        Raises:
            ValueError: If two steps share a name
        """
        names = [step.name for step in self.steps]
        duplicates = sorted({name for name in names if names.count(name) > 1})
        if duplicates:
            msg = f"Duplicate transform step names: {', '.join(duplicates)}"
            raise ValueError(msg)

    def __call__(self, value: str) -> str:
        """Apply every step in order."""
        for step in self.steps:
            value = step(value)
        return value

    def __iter__(self) -> Iterator[TransformStep]:
        return iter(self.steps)

    def __len__(self) -> int:
        return len(self.steps)

    @property
    def step_names(self) -> tuple[str, ...]:
        """Step names in execution order."""
        return tuple(step.name for step in self.steps)

    def step(self, name: str) -> TransformStep:
        """Look up a step by name.

        Raises:
            KeyError: If no step has that name
        """
        for step in self.steps:
            if step.name == name:
                return step
        raise KeyError(name)
