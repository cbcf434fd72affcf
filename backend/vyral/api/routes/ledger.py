"""Ledger Routes — read the live RootLedger and dispatch actions against it.

Invariants:
    - Every write goes through LedgerStore.dispatch (single writer, serialized)
    - Ignored actions answer 200 with status "ignored" and a reason, never 4xx
    - Malformed payloads for a known (domain, type) answer 400 INVALID_ACTION
    - Read routes serialize through core.ledger_snapshot only

Design Decisions:
    - One router per resource; sub-resources (lessons, stryke, core, zone) are
      read-only views so clients can poll one domain without the full snapshot
"""

import logging

from fastapi import APIRouter, Depends, Query

from vyral.core import ledger_snapshot as snapshot
from vyral.core.domain_types import ZoneTag
from vyral.core.errors import ResourceNotFoundError
from vyral.core.ledger import current_scenario
from vyral.core.lessons import lesson_progress
from vyral.core.progress_stats import compute_progress_stats
from vyral.core.social import chat_for, find_thread, find_user, search_users
from vyral.core.zone import filter_posts
from vyral.schemas.ledger import ActionRequest, DispatchResponse
from vyral.services.ledger_store import LedgerStore, get_ledger_store

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/ledger", tags=["ledger"])


@router.get("")
async def get_ledger(store: LedgerStore = Depends(get_ledger_store)):
    """Full ledger snapshot."""
    return snapshot.ledger_to_snapshot(store.ledger)


@router.post("/actions", response_model=DispatchResponse)
async def post_action(
    body: ActionRequest, store: LedgerStore = Depends(get_ledger_store),
):
    """Dispatch one action. Unknown or no-op actions come back as ignored."""
    result = await store.dispatch_raw(body.domain, body.type, body.payload)
    return DispatchResponse(
        status=result.status.value,
        reason=result.reason.value if result.reason else None,
        xp_delta=result.xp_delta,
        xp=result.ledger.xp,
        ledger=snapshot.ledger_to_snapshot(result.ledger),
    )


@router.get("/lessons")
async def get_lessons(store: LedgerStore = Depends(get_ledger_store)):
    lessons = store.ledger.lessons
    return {
        "lessons": [snapshot.lesson_to_dict(lesson) for lesson in lessons],
        "progress": lesson_progress(lessons),
    }


@router.get("/stryke")
async def get_stryke(store: LedgerStore = Depends(get_ledger_store)):
    return snapshot.stryke_to_dict(store.ledger.stryke)


@router.get("/stryke/scenario")
async def get_current_scenario(store: LedgerStore = Depends(get_ledger_store)):
    """Scenario awaiting a choice; null with arc_complete=true once the arc ends."""
    scenario = current_scenario(store.ledger)
    return {
        "arc_complete": scenario is None,
        "scenario": snapshot.scenario_to_dict(scenario) if scenario else None,
    }


@router.get("/core/users")
async def list_users(
    q: str = Query("", max_length=100),
    store: LedgerStore = Depends(get_ledger_store),
):
    users = search_users(store.ledger.core.users, q)
    return {"users": [snapshot.user_to_dict(u) for u in users]}


@router.get("/core/chats/{user_id}")
async def get_chat(user_id: str, store: LedgerStore = Depends(get_ledger_store)):
    core = store.ledger.core
    if find_user(core, user_id) is None and user_id not in core.chats:
        raise ResourceNotFoundError("User", user_id)
    return {
        "user_id": user_id,
        "messages": [snapshot.message_to_dict(m) for m in chat_for(core, user_id)],
    }


@router.get("/core/threads/{thread_id}")
async def get_thread(thread_id: str, store: LedgerStore = Depends(get_ledger_store)):
    thread = find_thread(store.ledger.core, thread_id)
    if thread is None:
        raise ResourceNotFoundError("Thread", thread_id)
    return snapshot.thread_to_dict(thread)


@router.get("/zone")
async def list_zone_posts(
    tag: ZoneTag | None = Query(None),
    store: LedgerStore = Depends(get_ledger_store),
):
    posts = filter_posts(store.ledger.zone, tag)
    return {"posts": [snapshot.post_to_dict(p) for p in posts]}


@router.get("/stats")
async def get_stats(store: LedgerStore = Depends(get_ledger_store)):
    """Growth-tree counters and milestone label."""
    return compute_progress_stats(store.ledger)
