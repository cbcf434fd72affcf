"""Zone Feed — posting and tag filtering."""

from vyral.core.domain_types import IgnoreReason, ZONE_POST_REWARD, ZoneTag
from vyral.core.zone import add_post, filter_posts, seed_zone_posts


def test_add_post_prepends_with_reward(ctx, clock):
    posts = seed_zone_posts(ctx)
    t = add_post(posts, " Need reviewers ", ZoneTag.ASK, ctx)
    post = t.state[0]
    assert post.message == "Need reviewers"
    assert post.tag == ZoneTag.ASK
    assert post.author == "You"
    assert post.id == f"post-{int(clock.now().timestamp() * 1000)}"
    assert t.xp_delta == ZONE_POST_REWARD == 22
    assert t.state[1:] == posts


def test_blank_post_is_noop(ctx):
    posts = seed_zone_posts(ctx)
    t = add_post(posts, "\n\t", ZoneTag.BUILD, ctx)
    assert t.state is posts
    assert t.xp_delta == 0
    assert t.reason == IgnoreReason.EMPTY_TEXT


def test_filter_posts_by_tag(ctx):
    posts = seed_zone_posts(ctx)
    assert [p.id for p in filter_posts(posts, ZoneTag.ALERT)] == ["post-3"]
    assert filter_posts(posts, ZoneTag.ASK) == ()
    assert filter_posts(posts) is posts
