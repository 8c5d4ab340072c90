"""Shot extraction: turns one result :class:`Block` into a :class:`Shot`."""

from __future__ import annotations

import logging
from datetime import datetime

from shot_search.errors import BlockParseError
from shot_search.scraper import markup
from shot_search.scraper.author import parse_author
from shot_search.scraper.models import Block, Shot
from shot_search.scraper.patterns import (
    AUTHOR_HEADING_SELECTOR,
    BLOCK_ID_PREFIX,
    COMMENTS_SELECTOR,
    COUNT_SEPARATOR,
    DATE_FORMAT,
    DESCRIPTION_SELECTOR,
    DESCRIPTION_TEMPLATE,
    DIGITS,
    FULL_SIZE_TOKEN,
    GIF_SELECTOR,
    IMAGE_SELECTOR,
    LIKES_SELECTOR,
    OVERLAY_SELECTOR,
    PERMALINK_SELECTOR,
    TEASER_TOKEN,
    TIMESTAMP_SELECTOR,
    TITLE_SELECTOR,
    VIEWS_SELECTOR,
)

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Field helpers
# ---------------------------------------------------------------------------

def _require(element: markup.Element, selector: str) -> markup.Element:
    found = markup.select_first(element, selector)
    if found is None:
        raise BlockParseError(f"missing {selector!r}")
    return found


def wrap_description(text: str) -> str:
    """Wrap non-empty *text* in a paragraph; empty text stays empty."""
    text = text.strip()
    if not text:
        return ""
    return DESCRIPTION_TEMPLATE.format(text)


def normalize_image_url(url: str) -> str:
    """Drop the teaser size marker so the full-size asset is requested."""
    return url.replace(TEASER_TOKEN, FULL_SIZE_TOKEN)


def parse_date(text: str | None) -> datetime | None:
    """Parse ``"March 3, 2018"``-style dates; anything else gives ``None``."""
    if not text:
        return None
    try:
        return datetime.strptime(text.strip(), DATE_FORMAT)
    except ValueError:
        logger.debug("Unparsable timestamp %r", text)
        return None


def parse_count(text: str) -> int:
    """Parse a thousands-separated count such as ``"12,345"``.

    Raises:
        BlockParseError: If what remains after removing separators is not a
            run of ASCII digits.
    """
    digits = text.replace(COUNT_SEPARATOR, "").strip()
    if not DIGITS.fullmatch(digits):
        raise BlockParseError(f"not a count: {text!r}")
    return int(digits)


def parse_block_id(element_id: str) -> int:
    digits = element_id.replace(BLOCK_ID_PREFIX, "")
    if not DIGITS.fullmatch(digits):
        raise BlockParseError(f"not a shot id: {element_id!r}")
    return int(digits)


def _count(element: markup.Element, selector: str) -> int:
    child = markup.first_child(_require(element, selector))
    if child is None:
        raise BlockParseError(f"{selector!r} has no child element")
    return parse_count(markup.text_of(child))


def _timestamp(overlay: markup.Element) -> datetime | None:
    stamp = markup.select_first(overlay, TIMESTAMP_SELECTOR)
    return parse_date(markup.text_of(stamp) if stamp is not None else None)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def build_shot(block: Block) -> Shot:
    """Build a :class:`Shot` from *block*, failing loudly.

    Raises:
        BlockParseError: If any required element or value is missing or
            malformed.  Timestamp, animation flag and author id fall back to
            defaults instead.
    """
    element = block.element
    overlay = _require(element, OVERLAY_SELECTOR)
    heading = _require(element, AUTHOR_HEADING_SELECTOR)

    return Shot(
        id=parse_block_id(block.element_id),
        title=markup.text_of(_require(overlay, TITLE_SELECTOR)),
        description=wrap_description(markup.joined_text(overlay, DESCRIPTION_SELECTOR)),
        image_url=normalize_image_url(markup.attr(_require(element, IMAGE_SELECTOR), "src")),
        views_count=_count(element, VIEWS_SELECTOR),
        likes_count=_count(element, LIKES_SELECTOR),
        comments_count=_count(element, COMMENTS_SELECTOR),
        created_at=_timestamp(overlay),
        url=block.base_url + markup.attr(_require(element, PERMALINK_SELECTOR), "href"),
        is_animated=markup.exists(element, GIF_SELECTOR),
        author=parse_author(heading, block.base_url),
    )


def parse_shot(block: Block) -> Shot | None:
    """Return the :class:`Shot` for *block*, or ``None`` if it cannot be parsed.

    A bad block is logged and skipped so that the rest of the page still
    comes through.
    """
    try:
        return build_shot(block)
    except BlockParseError as exc:
        logger.warning("Skipping block %r: %s", block.element_id, exc)
        return None
