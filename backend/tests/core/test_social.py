"""Social Ledger — chats, threads and friend/blacklist flags."""

from vyral.core.domain_types import (
    IgnoreReason, THREAD_CREATE_REWARD, THREAD_UPDATE_REWARD, TransitionStatus,
)
from vyral.core.social import (
    DEFAULT_KICKOFF, chat_for, create_thread, find_thread, find_user,
    record_thread_update, search_users, seed_core_state, send_message, slugify,
    toggle_blacklist, toggle_friend,
)


def test_seed_state_shape(ctx):
    core = seed_core_state(ctx)
    assert [u.id for u in core.users] == ["nova", "cipher", "flux", "zen", "lyric"]
    assert [t.id for t in core.threads] == ["vyral-os", "lyfe-protocol"]
    assert len(chat_for(core, "nova")) == 2
    assert find_user(core, "nova").is_friend
    assert not find_user(core, "flux").is_friend


def test_seed_thread_updates_are_most_recent_first(ctx):
    for thread in seed_core_state(ctx).threads:
        stamps = [u.created_at for u in thread.updates]
        assert stamps == sorted(stamps, reverse=True)
    assert find_thread(seed_core_state(ctx), "vyral-os").updates[0].id == "update-2"


def test_message_display_time_is_clock_hh_mm(ctx, clock):
    t = send_message(seed_core_state(ctx), "nova", "You", "ping", ctx)
    message = chat_for(t.state, "nova")[-1]
    assert message.created_at == clock.now()
    assert message.display_time == clock.now().strftime("%H:%M")


def test_send_message_appends_to_existing_log(ctx, clock):
    core = seed_core_state(ctx)
    t = send_message(core, "nova", "You", "  ping  ", ctx)
    log = chat_for(t.state, "nova")
    assert len(log) == 3
    assert log[-1].text == "ping"
    assert log[-1].display_time == "12:00"
    assert log[-1].id == f"{int(clock.now().timestamp() * 1000)}-7"
    assert t.xp_delta == 0
    assert chat_for(core, "nova") != log  # input untouched


def test_send_message_opens_log_for_new_recipient(ctx):
    core = seed_core_state(ctx)
    t = send_message(core, "stranger", "You", "hello", ctx)
    assert [m.text for m in chat_for(t.state, "stranger")] == ["hello"]


def test_send_blank_message_is_noop(ctx):
    core = seed_core_state(ctx)
    t = send_message(core, "nova", "You", "   ", ctx)
    assert t.state is core
    assert t.reason == IgnoreReason.EMPTY_TEXT


def test_record_thread_update_prepends_and_rewards(ctx, clock):
    core = seed_core_state(ctx)
    t = record_thread_update(core, "vyral-os", "Merged the neon kernel", ctx)
    thread = find_thread(t.state, "vyral-os")
    assert t.xp_delta == THREAD_UPDATE_REWARD == 18
    assert thread.updates[0].text == "Merged the neon kernel"
    assert thread.updates[0].author == "You"
    assert thread.updates[0].id == f"vyral-os-{int(clock.now().timestamp() * 1000)}"
    assert len(thread.updates) == 3


def test_record_update_on_unknown_thread_is_noop(ctx):
    core = seed_core_state(ctx)
    t = record_thread_update(core, "ghost-thread", "hello", ctx)
    assert t.state is core
    assert t.xp_delta == 0
    assert t.reason == IgnoreReason.THREAD_NOT_FOUND


def test_create_thread_generates_slug_id_and_seed_update(ctx, clock):
    core = seed_core_state(ctx)
    t = create_thread(core, "Neon Garden!", "Grow it", None, ctx)
    thread = t.state.threads[0]
    ms = int(clock.now().timestamp() * 1000)
    assert thread.id == f"neon-garden--{ms}"
    assert thread.contributors == ("You",)
    assert thread.updates[0].id == f"{thread.id}-seed"
    assert thread.updates[0].text == DEFAULT_KICKOFF
    assert t.xp_delta == THREAD_CREATE_REWARD == 35
    assert len(t.state.threads) == 3


def test_create_thread_with_explicit_id_and_kickoff(ctx):
    core = seed_core_state(ctx)
    t = create_thread(core, "Board", "Plan", "First!", ctx, thread_id="board-1")
    assert find_thread(t.state, "board-1").updates[0].text == "First!"


def test_create_thread_with_blank_title_is_noop(ctx):
    core = seed_core_state(ctx)
    t = create_thread(core, "  ", "x", None, ctx)
    assert t.state is core
    assert t.status == TransitionStatus.IGNORED


def test_slugify_collapses_non_alphanumerics():
    assert slugify("Vyral OS Pulse") == "vyral-os-pulse"
    assert slugify("A & B") == "a-b"


def test_toggle_friend_flips_flag(ctx):
    core = seed_core_state(ctx)
    t = toggle_friend(core, "flux")
    assert find_user(t.state, "flux").is_friend
    assert find_user(toggle_friend(t.state, "flux").state, "flux").is_friend is False


def test_blacklist_clears_friend_and_unblacklist_does_not_restore(ctx):
    core = seed_core_state(ctx)
    blocked = toggle_blacklist(core, "nova").state
    nova = find_user(blocked, "nova")
    assert nova.is_blacklisted and not nova.is_friend

    unblocked = toggle_blacklist(blocked, "nova").state
    nova = find_user(unblocked, "nova")
    assert not nova.is_blacklisted and not nova.is_friend


def test_toggle_unknown_user_is_noop(ctx):
    core = seed_core_state(ctx)
    t = toggle_friend(core, "nobody")
    assert t.state is core
    assert t.reason == IgnoreReason.USER_NOT_FOUND
    assert toggle_blacklist(core, "nobody").state is core


def test_search_users_matches_name_role_and_tags(ctx):
    users = seed_core_state(ctx).users
    assert [u.id for u in search_users(users, "cipher")] == ["cipher"]
    assert [u.id for u in search_users(users, "finance nav")] == ["lyric"]
    assert [u.id for u in search_users(users, "breath")] == ["zen"]
    assert search_users(users, "  ") == users
