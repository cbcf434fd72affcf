"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell; dependency arrows point inward only
    - Wall-clock reads and random tokens reach the core only through TransitionContext
    - All IO operations accessed through Protocol types
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Clock + TokenSource bundled in a frozen TransitionContext: transition functions stay
      deterministic for a fixed context, tests pass a frozen clock
    - Async in repository Protocols: implementations do IO, but the core functions
      that consume their results are never async themselves
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Protocol

from vyral.core.module_catalog import ModuleCard


class Clock(Protocol):
    """Source of timezone-aware 'now' timestamps."""
    def now(self) -> datetime: ...


class TokenSource(Protocol):
    """Source of short disambiguating tokens for generated ids."""
    def token(self) -> str: ...


@dataclass(frozen=True)
class TransitionContext:
    """The only non-deterministic inputs a transition may read."""
    clock: Clock
    tokens: TokenSource

    def now(self) -> datetime:
        return self.clock.now()


def epoch_ms(at: datetime) -> int:
    """Milliseconds since the Unix epoch, used as the id component of generated ids."""
    return int(at.timestamp() * 1000)


class NoteRepository(Protocol):
    """Contract for free-text note persistence, implemented by shell.

    Every mutating call returns the full list, newest first.
    """
    async def create(self, text: str) -> list[dict]: ...
    async def list_notes(self) -> list[dict]: ...
    async def delete(self, note_id: int) -> list[dict]: ...


class ModuleCatalogSource(Protocol):
    """Contract for the navigation module catalog, implemented by shell."""
    async def fetch_modules(self) -> list[ModuleCard]: ...
