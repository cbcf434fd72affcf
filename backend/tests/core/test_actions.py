"""Ledger Actions — parse_action builds tagged variants and rejects malformed payloads."""

import pytest

from vyral.core.actions import (
    ACTION_VARIANTS, AddZonePost, ChooseOption, CreateThread, ResetStryke,
    SendMessage, ToggleLesson, UnrecognizedAction, parse_action,
)
from vyral.core.domain_types import ActionType, Domain, ZoneTag
from vyral.core.errors import InvalidActionError


def test_registry_covers_every_action_type():
    assert {t for _, t in ACTION_VARIANTS} == {a.value for a in ActionType}
    assert {d for d, _ in ACTION_VARIANTS} == {d.value for d in Domain}


def test_parse_known_variants():
    assert parse_action("lessons", "toggle_lesson", {"lesson_id": "x"}) == ToggleLesson("x")
    assert parse_action(
        "stryke", "choose_option", {"scenario_id": "s", "choice_id": "c"},
    ) == ChooseOption("s", "c")
    assert parse_action("stryke", "reset") == ResetStryke()


def test_send_message_author_defaults_to_self():
    action = parse_action("core", "send_message", {"user_id": "nova", "text": "hi"})
    assert action == SendMessage(user_id="nova", text="hi", author="You")


def test_create_thread_optional_fields():
    action = parse_action("core", "create_thread", {"title": "T", "summary": "S"})
    assert action == CreateThread(title="T", summary="S")
    assert action.kickoff is None and action.thread_id is None


def test_create_thread_accepts_null_optional_fields():
    action = parse_action("core", "create_thread", {
        "title": "T", "summary": "S", "kickoff": None, "thread_id": None,
    })
    assert action == CreateThread(title="T", summary="S")


def test_zone_tag_coerced_from_string():
    action = parse_action("zone", "add_post", {"text": "yo", "tag": "Alert"})
    assert action == AddZonePost(text="yo", tag=ZoneTag.ALERT)
    assert parse_action("zone", "add_post", {"text": "yo"}).tag == ZoneTag.BUILD


@pytest.mark.parametrize("domain,action_type", [
    ("unknown", "X"), ("lessons", "explode"), ("zone", "toggle_lesson"),
])
def test_unknown_tags_become_unrecognized_action(domain, action_type):
    action = parse_action(domain, action_type, {"anything": 1})
    assert action == UnrecognizedAction(domain=domain, type=action_type)


@pytest.mark.parametrize("domain,action_type,payload", [
    ("lessons", "toggle_lesson", {}),
    ("lessons", "toggle_lesson", {"lesson_id": "x", "extra": True}),
    ("lessons", "toggle_lesson", {"lesson_id": 42}),
    ("zone", "add_post", {"text": "hi", "tag": "Party"}),
    ("stryke", "choose_option", {"scenario_id": "s"}),
    ("core", "send_message", {"user_id": "nova", "text": None}),
    ("core", "send_message", {"user_id": None, "text": "hi"}),
    ("core", "record_thread_update", {"thread_id": "vyral-os", "text": None}),
    ("core", "create_thread", {"title": None, "summary": "s"}),
    ("zone", "add_post", {"text": None}),
    ("lessons", "toggle_lesson", {"lesson_id": None}),
])
def test_malformed_payload_raises_invalid_action(domain, action_type, payload):
    with pytest.raises(InvalidActionError) as exc_info:
        parse_action(domain, action_type, payload)
    assert exc_info.value.http_status == 400
    assert exc_info.value.code == "INVALID_ACTION"
    assert exc_info.value.context.domain == domain
