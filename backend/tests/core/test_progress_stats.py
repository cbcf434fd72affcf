"""Progress Stats — growth counters and milestone labels, pure from RootLedger."""

from dataclasses import replace

import pytest

from vyral.core.ledger import seed_ledger
from vyral.core.progress_stats import compute_progress_stats, milestone_label


@pytest.mark.parametrize("xp,label", [
    (0, "Sprouting Roots"), (399, "Sprouting Roots"), (400, "Seedling in Bloom"),
    (800, "Branch Weaver"), (1199, "Branch Weaver"), (1200, "Luminary Growth Keeper"),
    (1800, "Neon Forest Architect"), (9999, "Neon Forest Architect"),
])
def test_milestone_thresholds(xp, label):
    assert milestone_label(xp) == label


def test_seed_ledger_stats(ctx):
    stats = compute_progress_stats(seed_ledger(ctx))
    assert stats["lessons_completed"] == 2
    assert stats["lessons_in_progress"] == 3
    assert stats["branch_score"] == 2 * 2 + 0 + 2
    assert stats["fruit_score"] == 2 + 3 // 2
    assert stats["acorn_score"] == 3 + 420 // 250
    assert stats["tree_count"] == 1
    assert stats["milestone"] == "Seedling in Bloom"


def test_empty_ledger_keeps_minimums(ctx):
    ledger = seed_ledger(ctx, starting_xp=0)
    empty = replace(ledger, lessons=(), zone=())
    stats = compute_progress_stats(empty)
    assert stats["fruit_score"] == 1
    assert stats["tree_count"] == 1
    assert stats["acorn_score"] == 0


def test_tree_count_grows_every_600_xp(ctx):
    ledger = seed_ledger(ctx, starting_xp=1250)
    assert compute_progress_stats(ledger)["tree_count"] == 3
