"""Zone Feed — community broadcast posts, most-recent-first.

Invariants:
    - Posts are prepended, never edited or removed
    - Every accepted post rewards ZONE_POST_REWARD
    - Blank text -> same tuple object, zero delta
"""

from dataclasses import dataclass
from datetime import datetime, timedelta

from vyral.core.boundary_protocols import TransitionContext, epoch_ms
from vyral.core.domain_types import (
    IgnoreReason, SELF_AUTHOR, ZONE_POST_REWARD, ZoneTag,
)
from vyral.core.transition import Transition, applied, ignored


@dataclass(frozen=True)
class ZonePost:
    id: str
    author: str
    tag: ZoneTag
    message: str
    created_at: datetime


def add_post(
    posts: tuple[ZonePost, ...], text: str, tag: ZoneTag, ctx: TransitionContext,
) -> Transition[tuple[ZonePost, ...]]:
    text = text.strip()
    if not text:
        return ignored(posts, IgnoreReason.EMPTY_TEXT)
    at = ctx.now()
    post = ZonePost(
        id=f"post-{epoch_ms(at)}",
        author=SELF_AUTHOR,
        tag=ZoneTag(tag),
        message=text,
        created_at=at,
    )
    return applied((post,) + posts, ZONE_POST_REWARD)


def filter_posts(
    posts: tuple[ZonePost, ...], tag: ZoneTag | None = None,
) -> tuple[ZonePost, ...]:
    """Posts carrying `tag`; all posts when tag is None."""
    if tag is None:
        return posts
    return tuple(p for p in posts if p.tag == tag)


def seed_zone_posts(ctx: TransitionContext) -> tuple[ZonePost, ...]:
    now = ctx.now()
    return (
        ZonePost(
            id="post-1", author="Flux Amari", tag=ZoneTag.BUILD,
            message="Shared the neon moodboard kit for the campus hackathon.",
            created_at=now - timedelta(minutes=50),
        ),
        ZonePost(
            id="post-2", author="Zen Aire", tag=ZoneTag.SUPPORT,
            message="Mindful cooldown audio uploaded to the vault.",
            created_at=now - timedelta(minutes=15),
        ),
        ZonePost(
            id="post-3", author="Cipher Reyes", tag=ZoneTag.ALERT,
            message="Blacklist updated, two spam clusters neutralized.",
            created_at=now - timedelta(minutes=5),
        ),
    )
