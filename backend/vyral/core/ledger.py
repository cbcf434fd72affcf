"""Root Ledger — single state container; routes actions to domains and folds XP deltas.

Invariants:
    - xp >= 0 after every dispatch (delta added, then floored at zero)
    - Unknown action, or a domain no-op with zero delta, returns the input ledger
      object itself (identity preserved for consumers that compare by reference)
    - The next ledger is fully built before it is returned; nothing is mutated
    - Every Action variant has exactly one handler (checked at import time)

Design Decisions:
    - Explicit handler dict keyed by action class: every route visible in one place,
      adding a variant means editing this dict
    - Ledger is passed in and returned, never held globally: the shell owns the
      single writer (services/ledger_store.py)
    - dispatch() returns a DispatchResult diagnostic; apply() is the plain
      state -> state contract built on top of it
"""

from dataclasses import dataclass, replace
from typing import Any, Callable

from vyral.core.actions import (
    ACTION_VARIANTS, Action, AddZonePost, ChooseOption, CreateThread,
    RecordThreadUpdate, ResetStryke, SendMessage, ToggleBlacklist,
    ToggleFriend, ToggleLesson,
)
from vyral.core.boundary_protocols import TransitionContext
from vyral.core.domain_types import (
    DEFAULT_STARTING_XP, Domain, IgnoreReason, TransitionStatus,
)
from vyral.core import lessons as lessons_domain
from vyral.core import social as social_domain
from vyral.core import stryke as stryke_domain
from vyral.core import zone as zone_domain
from vyral.core.lessons import Lesson
from vyral.core.social import CoreState
from vyral.core.stryke import Scenario, StrykeState
from vyral.core.transition import Transition
from vyral.core.zone import ZonePost


@dataclass(frozen=True)
class RootLedger:
    """Total XP plus every domain's sub-state."""
    xp: int
    lessons: tuple[Lesson, ...]
    stryke: StrykeState
    core: CoreState
    zone: tuple[ZonePost, ...]


@dataclass(frozen=True)
class DispatchResult:
    """Outcome of one dispatch: the next ledger plus why it did (not) change."""
    ledger: RootLedger
    status: TransitionStatus
    reason: IgnoreReason | None = None
    xp_delta: int = 0

    @property
    def applied(self) -> bool:
        return self.status == TransitionStatus.APPLIED


def seed_ledger(
    ctx: TransitionContext, starting_xp: int = DEFAULT_STARTING_XP,
) -> RootLedger:
    """Every domain at its seed value."""
    return RootLedger(
        xp=max(0, starting_xp),
        lessons=lessons_domain.SEED_LESSONS,
        stryke=stryke_domain.initial_stryke_state(),
        core=social_domain.seed_core_state(ctx),
        zone=zone_domain.seed_zone_posts(ctx),
    )


# ─── Handlers: (sub-state, action, ctx) -> Transition ────────────

_Handler = Callable[[Any, Any, TransitionContext], Transition]

# Every mapping explicit: action class -> (ledger field, handler)
_HANDLERS: dict[type, tuple[Domain, _Handler]] = {
    ToggleLesson: (
        Domain.LESSONS,
        lambda s, a, ctx: lessons_domain.toggle_lesson(s, a.lesson_id),
    ),
    ChooseOption: (
        Domain.STRYKE,
        lambda s, a, ctx: stryke_domain.choose_option(
            s, a.scenario_id, a.choice_id, ctx,
        ),
    ),
    ResetStryke: (
        Domain.STRYKE,
        lambda s, a, ctx: stryke_domain.reset_stryke(s),
    ),
    SendMessage: (
        Domain.CORE,
        lambda s, a, ctx: social_domain.send_message(
            s, a.user_id, a.author, a.text, ctx,
        ),
    ),
    RecordThreadUpdate: (
        Domain.CORE,
        lambda s, a, ctx: social_domain.record_thread_update(
            s, a.thread_id, a.text, ctx,
        ),
    ),
    CreateThread: (
        Domain.CORE,
        lambda s, a, ctx: social_domain.create_thread(
            s, a.title, a.summary, a.kickoff, ctx, thread_id=a.thread_id,
        ),
    ),
    ToggleFriend: (
        Domain.CORE,
        lambda s, a, ctx: social_domain.toggle_friend(s, a.user_id),
    ),
    ToggleBlacklist: (
        Domain.CORE,
        lambda s, a, ctx: social_domain.toggle_blacklist(s, a.user_id),
    ),
    AddZonePost: (
        Domain.ZONE,
        lambda s, a, ctx: zone_domain.add_post(s, a.text, a.tag, ctx),
    ),
}

_missing = set(ACTION_VARIANTS.values()) - set(_HANDLERS)
if _missing:
    raise RuntimeError(
        f"Ledger actions without a handler: {sorted(c.__name__ for c in _missing)}"
    )


def dispatch(
    ledger: RootLedger, action: Action, ctx: TransitionContext,
) -> DispatchResult:
    """Route one action to its domain and fold the XP delta. Pure for a fixed ctx."""
    route = _HANDLERS.get(type(action))
    if route is None:
        return DispatchResult(
            ledger=ledger,
            status=TransitionStatus.IGNORED,
            reason=IgnoreReason.UNKNOWN_ACTION,
        )

    domain, handler = route
    current = getattr(ledger, domain.value)
    transition = handler(current, action, ctx)

    if transition.state is current and transition.xp_delta == 0:
        return DispatchResult(
            ledger=ledger,
            status=TransitionStatus.IGNORED,
            reason=transition.reason,
        )

    changes: dict[str, Any] = {domain.value: transition.state}
    if transition.xp_delta != 0:
        changes["xp"] = max(0, ledger.xp + transition.xp_delta)
    return DispatchResult(
        ledger=replace(ledger, **changes),
        status=TransitionStatus.APPLIED,
        xp_delta=transition.xp_delta,
    )


def apply(
    ledger: RootLedger, action: Action, ctx: TransitionContext,
) -> RootLedger:
    """state -> state' contract. Returns `ledger` itself when nothing changed."""
    return dispatch(ledger, action, ctx).ledger


def current_scenario(ledger: RootLedger) -> Scenario | None:
    """Scenario the Stryke arc is waiting on; None once the arc is complete."""
    return stryke_domain.current_scenario(ledger.stryke)
