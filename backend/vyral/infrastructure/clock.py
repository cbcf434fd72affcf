"""System Clock & Tokens — wall-clock and random sources behind the core's TransitionContext.

Invariants:
    - SystemClock.now() is always timezone-aware UTC
    - RandomTokens yields decimal strings in [0, 1000]
"""

import random
from datetime import datetime, timezone

from vyral.core.boundary_protocols import TransitionContext


class SystemClock:
    def now(self) -> datetime:
        return datetime.now(timezone.utc)


class RandomTokens:
    """Disambiguates message ids created in the same millisecond."""

    def __init__(self, rng: random.Random | None = None):
        self._rng = rng or random.Random()

    def token(self) -> str:
        return str(self._rng.randint(0, 1000))  # nosec B311


def system_context() -> TransitionContext:
    return TransitionContext(clock=SystemClock(), tokens=RandomTokens())
