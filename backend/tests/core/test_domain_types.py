"""Domain Types — enum values and reward constants that clients depend on."""

from vyral.core.domain_types import (
    DEFAULT_STARTING_XP, Domain, LessonId, LessonStatus, STAT_MAX, STAT_MIN,
    THREAD_CREATE_REWARD, THREAD_UPDATE_REWARD, ZONE_POST_REWARD, ZoneTag,
)


def test_identity_types_wrap_str():
    assert LessonId("finance-invest") == "finance-invest"


def test_domains_serialize_to_ledger_field_names():
    assert [d.value for d in Domain] == ["lessons", "stryke", "core", "zone"]


def test_lesson_status_declaration_order_is_the_cycle():
    assert list(LessonStatus) == [
        LessonStatus.NOT_STARTED, LessonStatus.IN_PROGRESS, LessonStatus.COMPLETED,
    ]


def test_zone_tags_are_display_cased():
    assert {t.value for t in ZoneTag} == {"Build", "Support", "Ask", "Alert"}


def test_reward_constants():
    assert (THREAD_UPDATE_REWARD, THREAD_CREATE_REWARD, ZONE_POST_REWARD) == (18, 35, 22)
    assert DEFAULT_STARTING_XP == 420
    assert (STAT_MIN, STAT_MAX) == (0, 100)
