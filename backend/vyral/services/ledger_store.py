"""Ledger Store — the single writer that owns the live RootLedger.

Invariants:
    - Exactly one dispatch runs at a time (asyncio.Lock); readers never see a
      half-applied ledger because the reference is swapped only after core returns
    - Every dispatch is logged with domain, action_type, status and xp_delta
    - Ignored actions never raise; malformed payloads raise InvalidActionError
      before the lock is taken

Design Decisions:
    - One store per app instance, created in the FastAPI lifespan and stored on
      app.state (no module-level global), injected into routes by get_ledger_store
    - In-memory only: the ledger resets on restart, notes are the only persisted data
"""

import asyncio
import logging
from typing import Any

from fastapi import Request

from vyral.core.actions import Action, UnrecognizedAction, parse_action
from vyral.core.boundary_protocols import TransitionContext
from vyral.core.domain_types import DEFAULT_STARTING_XP
from vyral.core.ledger import DispatchResult, RootLedger, dispatch, seed_ledger
from vyral.infrastructure.clock import system_context

logger = logging.getLogger(__name__)


class LedgerStore:
    """Serializes dispatches against one in-memory RootLedger."""

    def __init__(
        self,
        ctx: TransitionContext | None = None,
        starting_xp: int = DEFAULT_STARTING_XP,
        ledger: RootLedger | None = None,
    ):
        self._ctx = ctx or system_context()
        self._starting_xp = starting_xp
        self._ledger = ledger or seed_ledger(self._ctx, starting_xp)
        self._lock = asyncio.Lock()

    @property
    def ledger(self) -> RootLedger:
        return self._ledger

    async def dispatch(self, action: Action) -> DispatchResult:
        """Apply one action and swap the ledger reference when it changed."""
        async with self._lock:
            result = dispatch(self._ledger, action, self._ctx)
            self._ledger = result.ledger
        self._log(action, result)
        return result

    async def dispatch_raw(
        self, domain: str, action_type: str, payload: dict[str, Any] | None = None,
    ) -> DispatchResult:
        """Parse (domain, type, payload) then dispatch."""
        return await self.dispatch(parse_action(domain, action_type, payload))

    async def reset(self) -> RootLedger:
        """Re-seed every domain. Used by tests and admin tooling."""
        async with self._lock:
            self._ledger = seed_ledger(self._ctx, self._starting_xp)
        logger.info("Ledger re-seeded")
        return self._ledger

    def _log(self, action: Action, result: DispatchResult) -> None:
        extra = {
            "domain": action.domain,
            "action_type": action.type,
            "dispatch_status": result.status.value,
            "xp_delta": result.xp_delta,
        }
        if result.applied:
            logger.info("Ledger action applied", extra=extra)
            return
        extra["reason"] = result.reason.value if result.reason else None
        if isinstance(action, UnrecognizedAction):
            logger.warning("Ledger action unrecognized", extra=extra)
        else:
            logger.info("Ledger action ignored", extra=extra)


def get_ledger_store(request: Request) -> LedgerStore:
    """FastAPI dependency: the store created by the app lifespan."""
    store = getattr(request.app.state, "ledger_store", None)
    if store is None:
        raise RuntimeError("Ledger store not initialized")
    return store
