"""Ledger Actions — tagged union, one frozen dataclass per (domain, type) pair.

Invariants:
    - Every variant exposes class-level `domain` and `type` tags
    - ACTION_VARIANTS is the single registry used by parse_action and by the
      ledger dispatcher's exhaustiveness check
    - Tags that match no variant become UnrecognizedAction (never raises)
    - A known tag with a malformed payload raises InvalidActionError; null is
      accepted only for optional text fields

Design Decisions:
    - Dataclass variants over dicts with a "type" key: payload fields are explicit and
      type-checked, no duck-typed payload lookups inside transitions
    - parse_action is pure and lives in core so any shell (HTTP, CLI, tests) builds
      actions the same way
"""

from dataclasses import dataclass, fields
from typing import Any, ClassVar, Union

from vyral.core.domain_types import ActionType, Domain, SELF_AUTHOR, ZoneTag
from vyral.core.errors import InvalidActionError


@dataclass(frozen=True)
class ToggleLesson:
    domain: ClassVar[str] = Domain.LESSONS.value
    type: ClassVar[str] = ActionType.TOGGLE_LESSON.value
    lesson_id: str


@dataclass(frozen=True)
class ChooseOption:
    domain: ClassVar[str] = Domain.STRYKE.value
    type: ClassVar[str] = ActionType.CHOOSE_OPTION.value
    scenario_id: str
    choice_id: str


@dataclass(frozen=True)
class ResetStryke:
    domain: ClassVar[str] = Domain.STRYKE.value
    type: ClassVar[str] = ActionType.RESET.value


@dataclass(frozen=True)
class SendMessage:
    domain: ClassVar[str] = Domain.CORE.value
    type: ClassVar[str] = ActionType.SEND_MESSAGE.value
    user_id: str
    text: str
    author: str = SELF_AUTHOR


@dataclass(frozen=True)
class RecordThreadUpdate:
    domain: ClassVar[str] = Domain.CORE.value
    type: ClassVar[str] = ActionType.RECORD_THREAD_UPDATE.value
    thread_id: str
    text: str


@dataclass(frozen=True)
class CreateThread:
    domain: ClassVar[str] = Domain.CORE.value
    type: ClassVar[str] = ActionType.CREATE_THREAD.value
    title: str
    summary: str
    kickoff: str | None = None
    thread_id: str | None = None


@dataclass(frozen=True)
class ToggleFriend:
    domain: ClassVar[str] = Domain.CORE.value
    type: ClassVar[str] = ActionType.TOGGLE_FRIEND.value
    user_id: str


@dataclass(frozen=True)
class ToggleBlacklist:
    domain: ClassVar[str] = Domain.CORE.value
    type: ClassVar[str] = ActionType.TOGGLE_BLACKLIST.value
    user_id: str


@dataclass(frozen=True)
class AddZonePost:
    domain: ClassVar[str] = Domain.ZONE.value
    type: ClassVar[str] = ActionType.ADD_POST.value
    text: str
    tag: ZoneTag = ZoneTag.BUILD


@dataclass(frozen=True)
class UnrecognizedAction:
    """Carries tags that matched no variant through to the dispatcher."""
    domain: str
    type: str


Action = Union[
    ToggleLesson, ChooseOption, ResetStryke,
    SendMessage, RecordThreadUpdate, CreateThread, ToggleFriend, ToggleBlacklist,
    AddZonePost, UnrecognizedAction,
]

ACTION_VARIANTS: dict[tuple[str, str], type] = {
    (cls.domain, cls.type): cls
    for cls in (
        ToggleLesson, ChooseOption, ResetStryke,
        SendMessage, RecordThreadUpdate, CreateThread, ToggleFriend, ToggleBlacklist,
        AddZonePost,
    )
}

_OPTIONAL_TEXT = str | None


def parse_action(
    domain: str, action_type: str, payload: dict[str, Any] | None = None,
) -> Action:
    """Build the variant for (domain, action_type) from a plain payload dict."""
    cls = ACTION_VARIANTS.get((domain, action_type))
    if cls is None:
        return UnrecognizedAction(domain=domain, type=action_type)

    payload = payload or {}
    known = {f.name: f for f in fields(cls)}
    unexpected = sorted(set(payload) - set(known))
    if unexpected:
        raise InvalidActionError(
            domain, action_type, f"unexpected field(s): {', '.join(unexpected)}",
        )
    for name, value in payload.items():
        field_type = known[name].type
        if field_type == _OPTIONAL_TEXT and value is None:
            continue
        if field_type in (str, _OPTIONAL_TEXT) and not isinstance(value, str):
            raise InvalidActionError(domain, action_type, f"'{name}' must be a string")

    if cls is AddZonePost and "tag" in payload:
        try:
            payload = {**payload, "tag": ZoneTag(payload["tag"])}
        except ValueError:
            raise InvalidActionError(
                domain, action_type, f"unknown tag '{payload['tag']}'",
            )

    try:
        return cls(**payload)
    except TypeError as e:
        raise InvalidActionError(domain, action_type, str(e))
