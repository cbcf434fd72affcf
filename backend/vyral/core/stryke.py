"""Scenario Branching Engine — walks the decision graph and mutates three clamped stat axes.

Invariants:
    - Every stat axis stays within [STAT_MIN, STAT_MAX] after every transition (clamp on write)
    - A successful choice prepends exactly one Outcome to history (most-recent-first, unbounded)
    - Unknown scenario, unknown choice, or a completed arc -> same state object, zero delta
    - current_scenario_id None means the arc is complete; only reset re-opens it
    - Outcome timestamps come from the injected clock, never from the wall clock

Design Decisions:
    - Graph is immutable and indexed once at construction (O(1) lookups per choice)
    - Any scenario in the graph is addressable while the arc is open, matching how the
      history records scenario_id independently of current_scenario_id
    - No cycle guard: the shipped graph is acyclic, a cyclic content graph would loop
      until reset
"""

from dataclasses import dataclass, field
from datetime import datetime

from vyral.core.boundary_protocols import TransitionContext
from vyral.core.domain_types import (
    ChoiceId, IgnoreReason, ScenarioId, STAT_MAX, STAT_MIN,
)
from vyral.core.transition import Transition, applied, ignored


def clamp_stat(value: int) -> int:
    return max(STAT_MIN, min(STAT_MAX, value))


@dataclass(frozen=True)
class StatBlock:
    """Values for the trust / influence / stealth axes."""
    trust: int = 0
    influence: int = 0
    stealth: int = 0

    def shifted_by(self, impact: "StatBlock") -> "StatBlock":
        """Add an impact and clamp every axis."""
        return StatBlock(
            trust=clamp_stat(self.trust + impact.trust),
            influence=clamp_stat(self.influence + impact.influence),
            stealth=clamp_stat(self.stealth + impact.stealth),
        )

    def as_dict(self) -> dict[str, int]:
        return {
            "trust": self.trust,
            "influence": self.influence,
            "stealth": self.stealth,
        }


@dataclass(frozen=True)
class Choice:
    id: ChoiceId
    label: str
    xp: int
    impact: StatBlock
    result: str
    next: ScenarioId | None = None


@dataclass(frozen=True)
class Scenario:
    id: ScenarioId
    title: str
    narrative: str
    prompt: str
    choices: tuple[Choice, ...]

    def find_choice(self, choice_id: str) -> Choice | None:
        return next((c for c in self.choices if c.id == choice_id), None)


@dataclass(frozen=True)
class ScenarioGraph:
    """Fixed set of decision nodes connected by each choice's next pointer."""
    scenarios: tuple[Scenario, ...]
    root_id: ScenarioId
    _index: dict[str, Scenario] = field(
        init=False, repr=False, compare=False,
    )

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "_index", {s.id: s for s in self.scenarios},
        )

    def get(self, scenario_id: str | None) -> Scenario | None:
        if scenario_id is None:
            return None
        return self._index.get(scenario_id)

    def __contains__(self, scenario_id: object) -> bool:
        return scenario_id in self._index


@dataclass(frozen=True)
class Outcome:
    """Snapshot of one resolved choice."""
    scenario_id: ScenarioId
    scenario_title: str
    choice_id: ChoiceId
    choice_label: str
    result: str
    xp_awarded: int
    stats: StatBlock
    resolved_at: datetime


@dataclass(frozen=True)
class StrykeState:
    current_scenario_id: ScenarioId | None
    history: tuple[Outcome, ...] = ()
    stats: StatBlock = field(default_factory=StatBlock)
    last_outcome: Outcome | None = None


BASELINE_STATS = StatBlock(trust=72, influence=64, stealth=58)


def initial_stryke_state(graph: "ScenarioGraph | None" = None) -> StrykeState:
    graph = graph or STRYKE_GRAPH
    return StrykeState(
        current_scenario_id=graph.root_id,
        history=(),
        stats=BASELINE_STATS,
        last_outcome=None,
    )


def choose_option(
    state: StrykeState,
    scenario_id: str,
    choice_id: str,
    ctx: TransitionContext,
    graph: "ScenarioGraph | None" = None,
) -> Transition[StrykeState]:
    """Resolve one choice. Pure for a fixed clock; returns a new StrykeState."""
    graph = graph or STRYKE_GRAPH
    if state.current_scenario_id is None:
        return ignored(state, IgnoreReason.ARC_COMPLETE)
    scenario = graph.get(scenario_id)
    if scenario is None:
        return ignored(state, IgnoreReason.SCENARIO_NOT_FOUND)
    choice = scenario.find_choice(choice_id)
    if choice is None:
        return ignored(state, IgnoreReason.CHOICE_NOT_FOUND)

    stats = state.stats.shifted_by(choice.impact)
    outcome = Outcome(
        scenario_id=scenario.id,
        scenario_title=scenario.title,
        choice_id=choice.id,
        choice_label=choice.label,
        result=choice.result,
        xp_awarded=choice.xp,
        stats=stats,
        resolved_at=ctx.now(),
    )
    return applied(
        StrykeState(
            current_scenario_id=choice.next,
            history=(outcome,) + state.history,
            stats=stats,
            last_outcome=outcome,
        ),
        choice.xp,
    )


def reset_stryke(
    state: StrykeState, graph: "ScenarioGraph | None" = None,
) -> Transition[StrykeState]:
    """Back to the graph root with baseline stats and an empty history. No XP."""
    return applied(initial_stryke_state(graph))


def current_scenario(
    state: StrykeState, graph: "ScenarioGraph | None" = None,
) -> Scenario | None:
    """Scenario the caller should render; None once the arc is complete."""
    return (graph or STRYKE_GRAPH).get(state.current_scenario_id)


def is_arc_complete(state: StrykeState) -> bool:
    return state.current_scenario_id is None


# ─── Shipped Graph ───────────────────────────────────────────────

STRYKE_GRAPH = ScenarioGraph(
    root_id=ScenarioId("boot-sequence"),
    scenarios=(
        Scenario(
            id=ScenarioId("boot-sequence"),
            title="Boot Sequence: Neon Mentorship",
            narrative=(
                "A new collective wants to license Vyral's safe texting framework. "
                "They are underprepared but eager."
            ),
            prompt="Do you slow-walk them through mentorship or sign a rapid distribution deal?",
            choices=(
                Choice(
                    id=ChoiceId("mentor"),
                    label="Mentor them step-by-step",
                    xp=95,
                    impact=StatBlock(trust=14, influence=6, stealth=-4),
                    result=(
                        "You embed mentors with their crew and document best practices. "
                        "Trust across the grid jumps while timelines stretch."
                    ),
                    next=ScenarioId("signal-breaker"),
                ),
                Choice(
                    id=ChoiceId("fast-license"),
                    label="License instantly for scale",
                    xp=60,
                    impact=StatBlock(trust=-6, influence=12, stealth=5),
                    result=(
                        "They distribute quickly but stumble through onboarding. "
                        "Influence widens, yet trust pings fall and you patch holes."
                    ),
                    next=ScenarioId("signal-breaker"),
                ),
            ),
        ),
        Scenario(
            id=ScenarioId("signal-breaker"),
            title="Signal Breaker: Rumor Cascade",
            narrative=(
                "A viral rumor threatens to fracture alliances. You can trace the "
                "source quietly or rally the community instantly."
            ),
            prompt="Which Stryke move stabilizes the network with minimal collateral?",
            choices=(
                Choice(
                    id=ChoiceId("trace-silently"),
                    label="Trace silently with stealth tools",
                    xp=80,
                    impact=StatBlock(trust=8, influence=-2, stealth=11),
                    result=(
                        "You isolate the troll farm without public drama. "
                        "The crew sleeps easier while stealth metrics spike."
                    ),
                    next=ScenarioId("underworld-allies"),
                ),
                Choice(
                    id=ChoiceId("crowdsource"),
                    label="Crowdsource responses with community pods",
                    xp=105,
                    impact=StatBlock(trust=10, influence=14, stealth=-6),
                    result=(
                        "Pods flood the rumor with context. Influence soars as new "
                        "allies join, though the troll farm adapts."
                    ),
                    next=ScenarioId("underworld-allies"),
                ),
            ),
        ),
        Scenario(
            id=ScenarioId("underworld-allies"),
            title="Underworld Allies: Shadow Market",
            narrative=(
                "A black-market channel offers zero-day tools if you help them "
                "launder attention. Ethical alarms are blaring."
            ),
            prompt="Will you walk away, negotiate terms, or infiltrate to collect intel?",
            choices=(
                Choice(
                    id=ChoiceId("walk-away"),
                    label="Walk away, protect reputation",
                    xp=70,
                    impact=StatBlock(trust=12, influence=-4, stealth=3),
                    result=(
                        "You decline and tighten community guidelines. "
                        "Trust solidifies even if influence momentum slows."
                    ),
                    next=None,
                ),
                Choice(
                    id=ChoiceId("negotiate"),
                    label="Negotiate transparent partnership",
                    xp=120,
                    impact=StatBlock(trust=6, influence=16, stealth=-5),
                    result=(
                        "With strict guardrails, you turn an adversary into an ally. "
                        "Influence skyrockets while stealth takes a small hit."
                    ),
                    next=None,
                ),
                Choice(
                    id=ChoiceId("infiltrate"),
                    label="Infiltrate to gather intel",
                    xp=90,
                    impact=StatBlock(trust=-4, influence=8, stealth=12),
                    result=(
                        "You gather receipts and dismantle their operation. Stealth "
                        "mastery grows, though trust dips until you debrief the crew."
                    ),
                    next=None,
                ),
            ),
        ),
    ),
)
