"""Author extraction: turns a result's heading element into a :class:`User`."""

from __future__ import annotations

import logging

from shot_search.errors import BlockParseError
from shot_search.scraper import markup
from shot_search.scraper.models import ParsedId, User
from shot_search.scraper.patterns import (
    AUTHOR_ANCHOR_SELECTOR,
    AVATAR_SELECTOR,
    HOST,
    MINI_TOKEN,
    NORMAL_TOKEN,
    PATTERN_USER_ID,
    PRO_BADGE_SELECTOR,
    UNKNOWN_USER_ID,
)

# The id is read from the one and only capturing group.
assert PATTERN_USER_ID.groups == 1

logger = logging.getLogger(__name__)


def normalize_avatar_url(url: str) -> str:
    """Request the ``normal`` avatar size instead of ``mini``."""
    return url.replace(MINI_TOKEN, NORMAL_TOKEN)


def user_id_from_avatar(avatar_url: str) -> ParsedId:
    """Recover the numeric user id embedded in an avatar URL.

    This relies on the CDN path shape (``.../users/<id>/...``) and nothing
    else, so it is allowed to miss.  A miss yields :data:`UNKNOWN_USER_ID`
    with ``recovered=False``; callers must tolerate that sentinel.
    """
    match = PATTERN_USER_ID.search(avatar_url)
    if match is None:
        return ParsedId(UNKNOWN_USER_ID, recovered=False)
    return ParsedId(int(match.group(1)), recovered=True)


def author_anchor(heading: markup.Element) -> markup.Element:
    """Return the profile anchor inside *heading*.

    Raises:
        BlockParseError: If the heading carries no profile anchor.
    """
    anchor = markup.select_first(heading, AUTHOR_ANCHOR_SELECTOR)
    if anchor is None:
        raise BlockParseError(f"no {AUTHOR_ANCHOR_SELECTOR!r} in author heading")
    return anchor


def parse_author(heading: markup.Element, base_url: str = HOST) -> User:
    """Build a :class:`User` from the ``<h2>`` heading of a result block.

    The heading is expected to contain the profile anchor; check with
    :func:`author_anchor` first.  Every other field has a default, so once
    the anchor is there this always returns a populated user.
    """
    anchor = author_anchor(heading)

    avatar = markup.select_first(anchor, AVATAR_SELECTOR)
    avatar_url = normalize_avatar_url(markup.attr(avatar, "src")) if avatar is not None else ""

    user_id = user_id_from_avatar(avatar_url)
    if not user_id.recovered:
        logger.debug("No user id in avatar url %r, using %d", avatar_url, user_id.value)

    href = markup.attr(anchor, "href")
    return User(
        id=user_id.value,
        name=markup.text_of(anchor),
        username=href[1:],
        url=base_url + href,
        avatar_url=avatar_url,
        is_pro=markup.exists(heading, PRO_BADGE_SELECTOR),
    )
