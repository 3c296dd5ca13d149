"""Event definitions for cave regeneration."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, ClassVar, Protocol, runtime_checkable

from cavegen.gen.params import CaveGenParams
from cavegen.grid import CaveGrid


GENERATE_CAVE = "caves.generate"
"""Event topic requesting the current cave to be replaced by a new one."""

CAVE_CLEARED = "caves.cleared"
"""Event topic emitted once the previous cave has been torn down."""

CAVE_GENERATED = "caves.generated"
"""Event topic emitted once a freshly classified :class:`CaveGrid` is available."""


@runtime_checkable
class EventBus(Protocol):
    """Protocol capturing the subset of the event bus used by caves."""

    def subscribe(self, event_type: str, callback: Callable[..., None]) -> None:
        """Register ``callback`` for ``event_type``."""

    def publish(self, event_type: str, **payload: object) -> None:
        """Publish an event to all subscribers."""


@dataclass(frozen=True, slots=True)
class GenerateCave:
    """Request a new cave; ``params`` of ``None`` keeps the system's settings."""

    params: CaveGenParams | None = None

    topic: ClassVar[str] = GENERATE_CAVE

    def publish(self, bus: EventBus) -> None:
        bus.publish(self.topic, params=self.params)


@dataclass(frozen=True, slots=True)
class CaveCleared:
    """Notification that renderers should drop everything built for ``grid``."""

    grid: CaveGrid | None

    topic: ClassVar[str] = CAVE_CLEARED

    def publish(self, bus: EventBus) -> None:
        bus.publish(self.topic, grid=self.grid)


@dataclass(frozen=True, slots=True)
class CaveGenerated:
    """Notification containing the freshly generated :class:`CaveGrid`."""

    grid: CaveGrid
    generation: int

    topic: ClassVar[str] = CAVE_GENERATED

    def publish(self, bus: EventBus) -> None:
        bus.publish(self.topic, grid=self.grid, generation=self.generation)


__all__ = [
    "EventBus",
    "GenerateCave",
    "CaveCleared",
    "CaveGenerated",
    "GENERATE_CAVE",
    "CAVE_CLEARED",
    "CAVE_GENERATED",
]
