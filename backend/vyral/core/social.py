"""Social Ledger — direct-message logs, collaboration threads, friend/blacklist flags.

Invariants:
    - Chat logs are append-only (oldest-first); thread updates are prepended (most-recent-first)
    - Blacklisting a user clears is_friend in the same transition; unblacklisting
      never restores it (one-way coupling)
    - Unknown thread / unknown user / blank text -> same CoreState object, zero delta
    - Generated ids and timestamps come from the injected TransitionContext

Design Decisions:
    - Thread ids are slugified title + epoch ms with no collision check: two threads
      created with the same title in the same millisecond share an id (left as-is)
    - send_message does not check the user exists: a message opens a log on first use
    - chats held as a fresh dict per transition, never mutated in place
"""

import re
from dataclasses import dataclass, replace
from datetime import datetime, timedelta

from vyral.core.boundary_protocols import TransitionContext, epoch_ms
from vyral.core.domain_types import (
    IgnoreReason, SELF_AUTHOR, THREAD_CREATE_REWARD, THREAD_UPDATE_REWARD,
    ThreadId, UserId,
)
from vyral.core.transition import Transition, applied, ignored

DEFAULT_KICKOFF = "Kickstarting this project in the Core."

_SLUG_PATTERN = re.compile(r"[^a-z0-9]+")


@dataclass(frozen=True)
class User:
    id: UserId
    name: str
    role: str
    focus: str
    tags: tuple[str, ...] = ()
    is_friend: bool = False
    is_blacklisted: bool = False


@dataclass(frozen=True)
class Message:
    """One chat line. display_time is HH:MM of created_at in the clock's
    timezone, which is UTC for SystemClock."""

    id: str
    author: str
    text: str
    created_at: datetime
    display_time: str


@dataclass(frozen=True)
class ThreadUpdate:
    id: str
    author: str
    text: str
    created_at: datetime


@dataclass(frozen=True)
class Thread:
    id: ThreadId
    title: str
    summary: str
    contributors: tuple[str, ...]
    updates: tuple[ThreadUpdate, ...]


@dataclass(frozen=True)
class CoreState:
    users: tuple[User, ...]
    chats: dict[str, tuple[Message, ...]]
    threads: tuple[Thread, ...]


def slugify(title: str) -> str:
    return _SLUG_PATTERN.sub("-", title.lower())


def create_message(author: str, text: str, ctx: TransitionContext) -> Message:
    at = ctx.now()
    return Message(
        id=f"{epoch_ms(at)}-{ctx.tokens.token()}",
        author=author,
        text=text,
        created_at=at,
        display_time=at.strftime("%H:%M"),
    )


# ─── Transitions ─────────────────────────────────────────────────

def send_message(
    core: CoreState, user_id: str, author: str, text: str, ctx: TransitionContext,
) -> Transition[CoreState]:
    """Append a message to a user's chat log, opening the log if needed."""
    text = text.strip()
    if not text:
        return ignored(core, IgnoreReason.EMPTY_TEXT)
    message = create_message(author, text, ctx)
    chats = dict(core.chats)
    chats[user_id] = chats.get(user_id, ()) + (message,)
    return applied(replace(core, chats=chats))


def record_thread_update(
    core: CoreState, thread_id: str, text: str, ctx: TransitionContext,
) -> Transition[CoreState]:
    """Prepend an update to an existing thread. Rewards THREAD_UPDATE_REWARD."""
    text = text.strip()
    if not text:
        return ignored(core, IgnoreReason.EMPTY_TEXT)
    index = _thread_index(core, thread_id)
    if index is None:
        return ignored(core, IgnoreReason.THREAD_NOT_FOUND)

    at = ctx.now()
    thread = core.threads[index]
    update = ThreadUpdate(
        id=f"{thread.id}-{epoch_ms(at)}",
        author=SELF_AUTHOR,
        text=text,
        created_at=at,
    )
    updated = replace(thread, updates=(update,) + thread.updates)
    threads = core.threads[:index] + (updated,) + core.threads[index + 1:]
    return applied(replace(core, threads=threads), THREAD_UPDATE_REWARD)


def create_thread(
    core: CoreState,
    title: str,
    summary: str,
    kickoff: str | None,
    ctx: TransitionContext,
    thread_id: str | None = None,
) -> Transition[CoreState]:
    """Open a new collaboration thread at the head of the list. Rewards THREAD_CREATE_REWARD."""
    if not title.strip():
        return ignored(core, IgnoreReason.EMPTY_TEXT)
    at = ctx.now()
    new_id = ThreadId(thread_id or f"{slugify(title)}-{epoch_ms(at)}")
    thread = Thread(
        id=new_id,
        title=title,
        summary=summary,
        contributors=(SELF_AUTHOR,),
        updates=(
            ThreadUpdate(
                id=f"{new_id}-seed",
                author=SELF_AUTHOR,
                text=kickoff or DEFAULT_KICKOFF,
                created_at=at,
            ),
        ),
    )
    return applied(
        replace(core, threads=(thread,) + core.threads), THREAD_CREATE_REWARD,
    )


def toggle_friend(core: CoreState, user_id: str) -> Transition[CoreState]:
    return _update_user(
        core, user_id, lambda u: replace(u, is_friend=not u.is_friend),
    )


def toggle_blacklist(core: CoreState, user_id: str) -> Transition[CoreState]:
    def flip(user: User) -> User:
        blacklisted = not user.is_blacklisted
        return replace(
            user,
            is_blacklisted=blacklisted,
            is_friend=False if blacklisted else user.is_friend,
        )

    return _update_user(core, user_id, flip)


def _update_user(core: CoreState, user_id: str, change) -> Transition[CoreState]:
    for index, user in enumerate(core.users):
        if user.id == user_id:
            users = core.users[:index] + (change(user),) + core.users[index + 1:]
            return applied(replace(core, users=users))
    return ignored(core, IgnoreReason.USER_NOT_FOUND)


def _thread_index(core: CoreState, thread_id: str) -> int | None:
    for index, thread in enumerate(core.threads):
        if thread.id == thread_id:
            return index
    return None


# ─── Read Accessors ──────────────────────────────────────────────

def find_user(core: CoreState, user_id: str) -> User | None:
    return next((u for u in core.users if u.id == user_id), None)


def find_thread(core: CoreState, thread_id: str) -> Thread | None:
    index = _thread_index(core, thread_id)
    return None if index is None else core.threads[index]


def chat_for(core: CoreState, user_id: str) -> tuple[Message, ...]:
    return core.chats.get(user_id, ())


def search_users(users: tuple[User, ...], query: str) -> tuple[User, ...]:
    """Case-insensitive match on name, role or any tag. Blank query returns everyone."""
    needle = query.strip().lower()
    if not needle:
        return users
    return tuple(
        u for u in users
        if needle in u.name.lower()
        or needle in u.role.lower()
        or any(needle in tag.lower() for tag in u.tags)
    )


# ─── Seed Data ───────────────────────────────────────────────────

SEED_USERS: tuple[User, ...] = (
    User(
        id=UserId("nova"), name="Nova Ito", role="Signal Architect",
        focus="Builds encrypted storytelling stacks for remote crews.",
        tags=("Systems", "Safe Texting", "Strategy"), is_friend=True,
    ),
    User(
        id=UserId("cipher"), name="Cipher Reyes", role="Data Guardian",
        focus="Monitors consent metrics and redacts toxic flows.",
        tags=("Privacy", "Trust & Safety"), is_friend=True,
    ),
    User(
        id=UserId("flux"), name="Flux Amari", role="Community Pulse",
        focus="Keeps the Vyral network energized with mutual aid.",
        tags=("Community", "Events"),
    ),
    User(
        id=UserId("zen"), name="Zen Aire", role="Wellness Synth",
        focus="Coaches decompression habits for late-night coders.",
        tags=("Wellness", "Breathwork"),
    ),
    User(
        id=UserId("lyric"), name="Lyric Sol", role="Finance Navigator",
        focus="Designs funding trees and cash-flow rituals.",
        tags=("Finance", "Investing"),
    ),
)

_SEED_CHATS: dict[str, tuple[tuple[str, str], ...]] = {
    "nova": (
        ("Nova Ito", "Core uplink is humming. Ready to jam on the holoOS deck?"),
        (SELF_AUTHOR, "Absolutely. Let me sync the project board."),
    ),
    "cipher": (("Cipher Reyes", "Nightly blacklist sync complete. Zero flags triggered."),),
    "flux": (("Flux Amari", "Planning a build sprint in the calm zone this weekend."),),
    "zen": (("Zen Aire", "Dropping a breath protocol to keep pulses steady."),),
    "lyric": (("Lyric Sol", "Finance tree is lush, ready to branch into grants?"),),
}


def seed_core_state(ctx: TransitionContext) -> CoreState:
    """Initial users, chats and threads. Thread update ages are relative to ctx.now()."""
    now = ctx.now()

    def ago(minutes: int) -> datetime:
        return now - timedelta(minutes=minutes)

    chats = {
        user_id: tuple(create_message(author, text, ctx) for author, text in lines)
        for user_id, lines in _SEED_CHATS.items()
    }
    threads = (
        Thread(
            id=ThreadId("vyral-os"),
            title="Vyral OS Pulse",
            summary="Collaborative operating system for privacy-first communities.",
            contributors=("Nova Ito", SELF_AUTHOR, "Cipher Reyes"),
            updates=(
                ThreadUpdate(
                    id="update-2", author=SELF_AUTHOR,
                    text="Drafted the onboarding maze for new contributors.",
                    created_at=ago(45),
                ),
                ThreadUpdate(
                    id="update-1", author="Nova Ito",
                    text="Shipped the encrypted file system with neon overlays.",
                    created_at=ago(140),
                ),
            ),
        ),
        Thread(
            id=ThreadId("lyfe-protocol"),
            title="Lyfe Protocol Curriculum",
            summary="Multi-layer lesson plan covering finance, personal, and digital resilience.",
            contributors=("Lyric Sol", "Zen Aire", SELF_AUTHOR),
            updates=(
                ThreadUpdate(
                    id="update-lyfe-1", author="Lyric Sol",
                    text="Mapped the finance capsule with emergency fund rituals.",
                    created_at=ago(230),
                ),
            ),
        ),
    )
    return CoreState(users=SEED_USERS, chats=chats, threads=threads)
