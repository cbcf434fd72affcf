"""Progress Stats — growth-tree counters and milestone label derived from the ledger.

Invariants:
    - All inputs come from RootLedger fields (no IO, no DB)
    - Returns a flat dict of integers plus the milestone label (serializable as JSON)
    - fruit_score and tree_count are at least 1; every counter is non-negative

Design Decisions:
    - Pure function, not a method on RootLedger (ledger is state, stats are presentation)
    - Milestone thresholds checked highest-first; the first match wins
"""

from vyral.core.domain_types import LessonStatus
from vyral.core.ledger import RootLedger

MILESTONES: tuple[tuple[int, str], ...] = (
    (1800, "Neon Forest Architect"),
    (1200, "Luminary Growth Keeper"),
    (800, "Branch Weaver"),
    (400, "Seedling in Bloom"),
)
BASE_MILESTONE = "Sprouting Roots"


def milestone_label(xp: int) -> str:
    for threshold, label in MILESTONES:
        if xp >= threshold:
            return label
    return BASE_MILESTONE


def compute_progress_stats(ledger: RootLedger) -> dict:
    """Compute growth counters from the ledger. Pure, no IO."""
    completed = sum(1 for l in ledger.lessons if l.status == LessonStatus.COMPLETED)
    in_progress = sum(1 for l in ledger.lessons if l.status == LessonStatus.IN_PROGRESS)
    history = len(ledger.stryke.history)
    threads = len(ledger.core.threads)
    posts = len(ledger.zone)

    return {
        "xp": ledger.xp,
        "milestone": milestone_label(ledger.xp),
        "lessons_completed": completed,
        "lessons_in_progress": in_progress,
        "stryke_decisions": history,
        "threads": threads,
        "zone_posts": posts,
        "branch_score": completed * 2 + history + threads,
        "fruit_score": max(1, completed + posts // 2),
        "acorn_score": max(0, in_progress + ledger.xp // 250),
        "tree_count": max(1, ledger.xp // 600 + 1),
    }
