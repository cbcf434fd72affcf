"""Ledger Schemas — action envelope and dispatch response for the ledger API.

Invariants:
    - ActionRequest carries raw (domain, type) tags; unknown tags are NOT a
      validation error (they dispatch as an ignored no-op)
    - payload shape is checked by core.actions.parse_action, not here
"""

from typing import Any

from pydantic import BaseModel, Field


class ActionRequest(BaseModel):
    """One ledger action: {"domain": ..., "type": ..., "payload": {...}}."""
    domain: str = Field(min_length=1, max_length=32)
    type: str = Field(min_length=1, max_length=64)
    payload: dict[str, Any] = Field(default_factory=dict)


class DispatchResponse(BaseModel):
    """Outcome of one action plus the post-dispatch ledger snapshot."""
    status: str
    reason: str | None = None
    xp_delta: int = 0
    xp: int
    ledger: dict[str, Any]
