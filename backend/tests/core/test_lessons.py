"""Lesson Progress Machine — status cycle, credited XP and rounding.

Tests:
    - Three toggles restore the status and sum to a zero delta
    - Half-up rounding on the in-progress multiplier
    - Unknown lesson id is a no-op that returns the same tuple
"""

import pytest

from vyral.core.domain_types import IgnoreReason, LessonId, LessonStatus, TransitionStatus
from vyral.core.lessons import (
    SEED_LESSONS, Lesson, credited_xp, find_lesson, lesson_progress,
    next_status, toggle_lesson, xp_for_status,
)


def _lesson(status: LessonStatus, xp: int = 100) -> Lesson:
    return Lesson(
        id=LessonId("l1"), category="Finance", title="T", description="D",
        xp=xp, status=status,
    )


def test_status_cycle_wraps_around():
    assert next_status(LessonStatus.NOT_STARTED) == LessonStatus.IN_PROGRESS
    assert next_status(LessonStatus.IN_PROGRESS) == LessonStatus.COMPLETED
    assert next_status(LessonStatus.COMPLETED) == LessonStatus.NOT_STARTED


@pytest.mark.parametrize("xp,expected", [(150, 68), (90, 41), (140, 63), (10, 5), (0, 0)])
def test_in_progress_credit_rounds_half_up(xp, expected):
    assert xp_for_status(LessonStatus.IN_PROGRESS, xp) == expected


def test_completed_credits_full_xp():
    assert credited_xp(_lesson(LessonStatus.COMPLETED, 120)) == 120
    assert credited_xp(_lesson(LessonStatus.NOT_STARTED, 120)) == 0


def test_completed_lesson_toggle_drops_to_not_started_with_full_refund():
    lessons = (_lesson(LessonStatus.COMPLETED, 120),)
    t = toggle_lesson(lessons, "l1")
    assert t.state[0].status == LessonStatus.NOT_STARTED
    assert t.xp_delta == -120
    assert t.status == TransitionStatus.APPLIED


@pytest.mark.parametrize("lesson", SEED_LESSONS, ids=lambda l: l.id)
def test_three_toggles_restore_status_and_net_zero_xp(lesson):
    lessons = SEED_LESSONS
    total = 0
    for _ in range(3):
        t = toggle_lesson(lessons, lesson.id)
        lessons = t.state
        total += t.xp_delta
    assert find_lesson(lessons, lesson.id).status == lesson.status
    assert total == 0


def test_not_started_to_in_progress_credits_rounded_share():
    lessons = (_lesson(LessonStatus.NOT_STARTED, 150),)
    t = toggle_lesson(lessons, "l1")
    assert t.xp_delta == 68
    t2 = toggle_lesson(t.state, "l1")
    assert t2.xp_delta == 150 - 68


def test_toggle_leaves_other_lessons_shared_by_reference():
    t = toggle_lesson(SEED_LESSONS, "wellness-calm")
    for before, after in zip(SEED_LESSONS, t.state):
        if before.id != "wellness-calm":
            assert after is before


def test_unknown_lesson_returns_same_tuple():
    t = toggle_lesson(SEED_LESSONS, "does-not-exist")
    assert t.state is SEED_LESSONS
    assert t.xp_delta == 0
    assert t.status == TransitionStatus.IGNORED
    assert t.reason == IgnoreReason.LESSON_NOT_FOUND


def test_lesson_progress_groups_by_category_in_first_seen_order():
    progress = lesson_progress(SEED_LESSONS)
    assert [c["category"] for c in progress["categories"]] == [
        "Finance", "Personal", "Wellness", "Career",
    ]
    finance = progress["categories"][0]
    assert finance["lessons"] == 2
    assert finance["earned_xp"] == 120 + 68
    assert finance["total_xp"] == 270
    assert progress["earned_xp"] == 120 + 68 + 110 + 41 + 0 + 63
    assert progress["total_xp"] == 690


def test_lesson_progress_empty_catalog():
    progress = lesson_progress(())
    assert progress["ratio"] == 0.0
    assert progress["categories"] == []
