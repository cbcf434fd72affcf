"""Transition — the (next state, xp delta) pair every domain function returns.

Invariants:
    - An ignored transition carries the input state object itself (identity, not equality)
    - An ignored transition always has xp_delta == 0 and a reason
    - An applied transition never carries a reason

Design Decisions:
    - Status + reason travel with the state: callers that only care about the
      ledger ignore them, callers that want diagnostics read them
      (no exceptions for not-found, the core stays a total function)
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

from vyral.core.domain_types import IgnoreReason, TransitionStatus

S = TypeVar("S")


@dataclass(frozen=True)
class Transition(Generic[S]):
    """Result of a single domain transition."""
    state: S
    xp_delta: int = 0
    status: TransitionStatus = TransitionStatus.APPLIED
    reason: IgnoreReason | None = None

    @property
    def applied(self) -> bool:
        return self.status == TransitionStatus.APPLIED


def applied(state: S, xp_delta: int = 0) -> Transition[S]:
    return Transition(state=state, xp_delta=xp_delta)


def ignored(state: S, reason: IgnoreReason) -> Transition[S]:
    return Transition(
        state=state, xp_delta=0,
        status=TransitionStatus.IGNORED, reason=reason,
    )
