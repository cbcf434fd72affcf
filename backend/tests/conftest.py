"""Root conftest — shared test configuration and deterministic transition context."""

import os
from datetime import datetime, timedelta, timezone

import pytest

from vyral.core.boundary_protocols import TransitionContext

# Ensure tests never reach a real database or the remote catalog
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("SUPABASE_URL", "")
os.environ.setdefault("SUPABASE_ANON_KEY", "")

FROZEN_NOW = datetime(2026, 1, 15, 12, 0, tzinfo=timezone.utc)


class FrozenClock:
    """Clock that only moves when a test calls advance()."""

    def __init__(self, at: datetime = FROZEN_NOW):
        self.at = at

    def now(self) -> datetime:
        return self.at

    def advance(self, **kwargs) -> None:
        self.at = self.at + timedelta(**kwargs)


class FixedTokens:
    def __init__(self, value: str = "7"):
        self.value = value

    def token(self) -> str:
        return self.value


@pytest.fixture
def clock() -> FrozenClock:
    return FrozenClock()


@pytest.fixture
def ctx(clock) -> TransitionContext:
    return TransitionContext(clock=clock, tokens=FixedTokens())
