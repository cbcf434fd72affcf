"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - LessonId, ScenarioId, ChoiceId, UserId, ThreadId wrap str; never use bare str in domain logic
    - Stat axes are bounded STAT_MIN–STAT_MAX (inclusive)
    - All valid states encoded as Enums, no raw string matching
    - XP rewards are single source of truth (social + zone domains import them from here)

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders (API snapshots are JSON)
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

LessonId = NewType("LessonId", str)
ScenarioId = NewType("ScenarioId", str)
ChoiceId = NewType("ChoiceId", str)
UserId = NewType("UserId", str)
ThreadId = NewType("ThreadId", str)


# ─── Constants ───────────────────────────────────────────────────

STAT_MIN: int = 0
STAT_MAX: int = 100

THREAD_UPDATE_REWARD: int = 18
THREAD_CREATE_REWARD: int = 35
ZONE_POST_REWARD: int = 22

DEFAULT_STARTING_XP: int = 420

# Author label for everything the local user writes
SELF_AUTHOR: str = "You"


# ─── Enums ───────────────────────────────────────────────────────

class Domain(str, Enum):
    """The four independently-evolving partitions of the root ledger."""
    LESSONS = "lessons"
    STRYKE = "stryke"
    CORE = "core"
    ZONE = "zone"


class ActionType(str, Enum):
    """Action type tags. Paired with a Domain they identify one action variant."""
    TOGGLE_LESSON = "toggle_lesson"
    CHOOSE_OPTION = "choose_option"
    RESET = "reset"
    SEND_MESSAGE = "send_message"
    RECORD_THREAD_UPDATE = "record_thread_update"
    CREATE_THREAD = "create_thread"
    TOGGLE_FRIEND = "toggle_friend"
    TOGGLE_BLACKLIST = "toggle_blacklist"
    ADD_POST = "add_post"


class LessonStatus(str, Enum):
    """Lesson lifecycle; cycles in declaration order and wraps around."""
    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


class StatAxis(str, Enum):
    """The three bounded axes mutated by scenario choices."""
    TRUST = "trust"
    INFLUENCE = "influence"
    STEALTH = "stealth"


class ZoneTag(str, Enum):
    """Community feed tags."""
    BUILD = "Build"
    SUPPORT = "Support"
    ASK = "Ask"
    ALERT = "Alert"


class TransitionStatus(str, Enum):
    """Whether a dispatched action changed anything."""
    APPLIED = "applied"
    IGNORED = "ignored"


class IgnoreReason(str, Enum):
    """Why an action was absorbed as a no-op."""
    UNKNOWN_ACTION = "unknown_action"
    LESSON_NOT_FOUND = "lesson_not_found"
    SCENARIO_NOT_FOUND = "scenario_not_found"
    CHOICE_NOT_FOUND = "choice_not_found"
    ARC_COMPLETE = "arc_complete"
    THREAD_NOT_FOUND = "thread_not_found"
    USER_NOT_FOUND = "user_not_found"
    EMPTY_TEXT = "empty_text"
