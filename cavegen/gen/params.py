"""User-facing parameters for random-march cave generation."""
from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class WalkerParams:
    """Movement policy shared by every walker of a generation run."""

    walk_steps: int = 20
    max_step_length: int = 1
    backtrack_probability: float = 0.2

    def __post_init__(self) -> None:
        if self.walk_steps < 0:
            raise ValueError("walk_steps must not be negative")
        if self.max_step_length < 1:
            raise ValueError("max_step_length must be at least 1")
        if not 0.0 <= self.backtrack_probability <= 1.0:
            raise ValueError("backtrack_probability must lie between 0 and 1")


@dataclass(slots=True)
class CaveGenParams:
    """Configuration bundle describing a single cave generation run."""

    width: int = 10
    height: int = 10
    seed: int | None = 0
    walker_count: int = 1
    walker: WalkerParams = field(default_factory=WalkerParams)

    def __post_init__(self) -> None:
        if self.walker_count < 0:
            raise ValueError("walker_count must not be negative")

    @property
    def dimensions(self) -> tuple[int, int]:
        """Return ``(width, height)``; non-positive values yield an empty grid."""

        return self.width, self.height


__all__ = ["CaveGenParams", "WalkerParams"]
