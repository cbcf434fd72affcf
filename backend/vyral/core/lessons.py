"""Lesson Progress Machine — per-lesson 3-state cycle with XP multiplier lookup.

Invariants:
    - status is always a LessonStatus member; toggling cycles
      not_started -> in_progress -> completed -> not_started
    - Credited XP is recomputed from the canonical base xp on every transition,
      so a full 3-step cycle always sums to a zero delta
    - Rounding is half-up on the multiplied value (Decimal, no float drift)
    - Unknown lesson id returns the same tuple object with a zero delta

Design Decisions:
    - Lessons held as a tuple of frozen dataclasses: a toggle builds a new tuple,
      untouched lessons are shared by reference
    - Multipliers are Decimal constants: 0.45 * 150 must be exactly 67.5 before rounding
"""

from dataclasses import dataclass, replace
from decimal import Decimal, ROUND_HALF_UP

from vyral.core.domain_types import IgnoreReason, LessonId, LessonStatus
from vyral.core.transition import Transition, applied, ignored


STATUS_MULTIPLIERS: dict[LessonStatus, Decimal] = {
    LessonStatus.NOT_STARTED: Decimal("0"),
    LessonStatus.IN_PROGRESS: Decimal("0.45"),
    LessonStatus.COMPLETED: Decimal("1"),
}

_STATUS_CYCLE: tuple[LessonStatus, ...] = tuple(LessonStatus)


@dataclass(frozen=True)
class Lesson:
    """A catalog lesson. Only status changes at runtime."""
    id: LessonId
    category: str
    title: str
    description: str
    xp: int
    status: LessonStatus = LessonStatus.NOT_STARTED


def round_half_up(value: Decimal) -> int:
    return int(value.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def xp_for_status(status: LessonStatus, xp: int) -> int:
    """XP credited for a lesson with base `xp` sitting in `status`."""
    return round_half_up(STATUS_MULTIPLIERS[status] * xp)


def credited_xp(lesson: Lesson) -> int:
    return xp_for_status(lesson.status, lesson.xp)


def next_status(status: LessonStatus) -> LessonStatus:
    index = _STATUS_CYCLE.index(status)
    return _STATUS_CYCLE[(index + 1) % len(_STATUS_CYCLE)]


def toggle_lesson(
    lessons: tuple[Lesson, ...], lesson_id: str,
) -> Transition[tuple[Lesson, ...]]:
    """Advance one lesson to its next status. Pure, returns a new tuple."""
    for index, lesson in enumerate(lessons):
        if lesson.id != lesson_id:
            continue
        advanced = replace(lesson, status=next_status(lesson.status))
        delta = credited_xp(advanced) - credited_xp(lesson)
        return applied(
            lessons[:index] + (advanced,) + lessons[index + 1:], delta,
        )
    return ignored(lessons, IgnoreReason.LESSON_NOT_FOUND)


def find_lesson(lessons: tuple[Lesson, ...], lesson_id: str) -> Lesson | None:
    return next((lesson for lesson in lessons if lesson.id == lesson_id), None)


def lesson_progress(lessons: tuple[Lesson, ...]) -> dict:
    """Earned vs. available XP overall and per category (first-appearance order)."""
    categories: dict[str, dict] = {}
    for lesson in lessons:
        bucket = categories.setdefault(
            lesson.category,
            {"category": lesson.category, "lessons": 0, "earned_xp": 0, "total_xp": 0},
        )
        bucket["lessons"] += 1
        bucket["earned_xp"] += credited_xp(lesson)
        bucket["total_xp"] += lesson.xp

    earned = sum(b["earned_xp"] for b in categories.values())
    total = sum(b["total_xp"] for b in categories.values())
    return {
        "earned_xp": earned,
        "total_xp": total,
        "ratio": earned / total if total else 0.0,
        "categories": list(categories.values()),
    }


# ─── Seed Catalog ────────────────────────────────────────────────

SEED_LESSONS: tuple[Lesson, ...] = (
    Lesson(
        id=LessonId("finance-foundations"),
        category="Finance",
        title="Emergency Fund Stack",
        description="Automate 3 months of living costs into a separate safe vault.",
        xp=120,
        status=LessonStatus.COMPLETED,
    ),
    Lesson(
        id=LessonId("finance-invest"),
        category="Finance",
        title="Micro Investing Ritual",
        description="Schedule weekly contributions into diversified index streams.",
        xp=150,
        status=LessonStatus.IN_PROGRESS,
    ),
    Lesson(
        id=LessonId("personal-boundaries"),
        category="Personal",
        title="Consent Language Refresh",
        description="Rewrite boundary statements for school, work, and relationships.",
        xp=110,
        status=LessonStatus.COMPLETED,
    ),
    Lesson(
        id=LessonId("personal-energy"),
        category="Personal",
        title="Energy Budgeting",
        description="Track what fuels and drains you for 14 days straight.",
        xp=90,
        status=LessonStatus.IN_PROGRESS,
    ),
    Lesson(
        id=LessonId("wellness-calm"),
        category="Wellness",
        title="Nightly Downshift",
        description="Pair guided breath with journaling before device curfew.",
        xp=80,
        status=LessonStatus.NOT_STARTED,
    ),
    Lesson(
        id=LessonId("career-network"),
        category="Career",
        title="Mentor Map",
        description="Design outreach map with 5 future collaborators.",
        xp=140,
        status=LessonStatus.IN_PROGRESS,
    ),
)
