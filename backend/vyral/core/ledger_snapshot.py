"""Ledger Snapshot — JSON-safe rendering of the RootLedger for the HTTP layer.

Invariants:
    - ledger_to_snapshot produces a JSON-safe dict (no Enums, no datetimes, no tuples)
    - Timestamps render as ISO-8601 strings; list order mirrors the ledger order
    - Read-only: nothing here builds or mutates a ledger

Design Decisions:
    - One small serializer per record type over dataclasses.asdict: asdict would leak
      Enums and datetimes, and would recurse into the scenario graph index
    - Scenario rendering lives here too so the current-scenario route and the full
      snapshot agree on shape
"""

from vyral.core.ledger import RootLedger, current_scenario
from vyral.core.lessons import Lesson, credited_xp
from vyral.core.social import CoreState, Message, Thread, ThreadUpdate, User
from vyral.core.stryke import Choice, Outcome, Scenario, StrykeState
from vyral.core.zone import ZonePost


def lesson_to_dict(lesson: Lesson) -> dict:
    return {
        "id": lesson.id,
        "category": lesson.category,
        "title": lesson.title,
        "description": lesson.description,
        "xp": lesson.xp,
        "status": lesson.status.value,
        "credited_xp": credited_xp(lesson),
    }


# ─── Stryke ──────────────────────────────────────────────────────

def choice_to_dict(choice: Choice) -> dict:
    return {
        "id": choice.id,
        "label": choice.label,
        "xp": choice.xp,
        "impact": choice.impact.as_dict(),
        "result": choice.result,
        "next": choice.next,
    }


def scenario_to_dict(scenario: Scenario) -> dict:
    return {
        "id": scenario.id,
        "title": scenario.title,
        "narrative": scenario.narrative,
        "prompt": scenario.prompt,
        "choices": [choice_to_dict(c) for c in scenario.choices],
    }


def outcome_to_dict(outcome: Outcome) -> dict:
    return {
        "scenario_id": outcome.scenario_id,
        "scenario_title": outcome.scenario_title,
        "choice_id": outcome.choice_id,
        "choice_label": outcome.choice_label,
        "result": outcome.result,
        "xp_awarded": outcome.xp_awarded,
        "stats": outcome.stats.as_dict(),
        "resolved_at": outcome.resolved_at.isoformat(),
    }


def stryke_to_dict(state: StrykeState) -> dict:
    last = state.last_outcome
    return {
        "current_scenario_id": state.current_scenario_id,
        "arc_complete": state.current_scenario_id is None,
        "stats": state.stats.as_dict(),
        "history": [outcome_to_dict(o) for o in state.history],
        "last_outcome": outcome_to_dict(last) if last else None,
    }


# ─── Core / Zone ─────────────────────────────────────────────────

def user_to_dict(user: User) -> dict:
    return {
        "id": user.id,
        "name": user.name,
        "role": user.role,
        "focus": user.focus,
        "tags": list(user.tags),
        "is_friend": user.is_friend,
        "is_blacklisted": user.is_blacklisted,
    }


def message_to_dict(message: Message) -> dict:
    return {
        "id": message.id,
        "author": message.author,
        "text": message.text,
        "created_at": message.created_at.isoformat(),
        "display_time": message.display_time,
    }


def _update_to_dict(update: ThreadUpdate) -> dict:
    return {
        "id": update.id,
        "author": update.author,
        "text": update.text,
        "created_at": update.created_at.isoformat(),
    }


def thread_to_dict(thread: Thread) -> dict:
    return {
        "id": thread.id,
        "title": thread.title,
        "summary": thread.summary,
        "contributors": list(thread.contributors),
        "updates": [_update_to_dict(u) for u in thread.updates],
    }


def core_to_dict(core: CoreState) -> dict:
    return {
        "users": [user_to_dict(u) for u in core.users],
        "chats": {
            user_id: [message_to_dict(m) for m in log]
            for user_id, log in core.chats.items()
        },
        "threads": [thread_to_dict(t) for t in core.threads],
    }


def post_to_dict(post: ZonePost) -> dict:
    return {
        "id": post.id,
        "author": post.author,
        "tag": post.tag.value,
        "message": post.message,
        "created_at": post.created_at.isoformat(),
    }


def ledger_to_snapshot(ledger: RootLedger) -> dict:
    """Serialize the full ledger. Pure, no IO."""
    scenario = current_scenario(ledger)
    return {
        "xp": ledger.xp,
        "lessons": [lesson_to_dict(lesson) for lesson in ledger.lessons],
        "stryke": {
            **stryke_to_dict(ledger.stryke),
            "current_scenario": scenario_to_dict(scenario) if scenario else None,
        },
        "core": core_to_dict(ledger.core),
        "zone": [post_to_dict(p) for p in ledger.zone],
    }
