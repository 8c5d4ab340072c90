"""Document scanning: raw search-page HTML in, ordered :class:`Shot` list out."""

from __future__ import annotations

import logging
from typing import Iterator, List

from shot_search.errors import DocumentParseError
from shot_search.scraper import markup
from shot_search.scraper.models import Block, Shot
from shot_search.scraper.patterns import BLOCK_SELECTOR, HOST
from shot_search.scraper.shot import parse_shot

logger = logging.getLogger(__name__)


def _check_document(html: object) -> None:
    if html is None:
        raise DocumentParseError("no document given")
    if not isinstance(html, (str, bytes)):
        raise DocumentParseError(f"expected str or bytes, got {type(html).__name__}")
    if not html.strip():
        raise DocumentParseError("document is empty")


def scan(html: str | bytes, base_url: str = HOST) -> Iterator[Block]:
    """Yield every result block in *html*, in document order.

    The document is parsed eagerly, so a bad input fails on the call rather
    than on first iteration.  A page with no results yields nothing.

    Raises:
        DocumentParseError: If *html* is missing, not text, or blank.
    """
    _check_document(html)
    soup = markup.parse_document(html)
    elements = markup.select_all(soup, BLOCK_SELECTOR)
    return (Block(element=element, base_url=base_url) for element in elements)


def extract_shots(html: str | bytes, base_url: str = HOST) -> List[Shot]:
    """Extract every parsable shot from a search results page.

    Blocks that fail to parse are skipped; the remaining shots keep the
    page's ranking order.

    Raises:
        DocumentParseError: If *html* is missing, not text, or blank.
    """
    shots: List[Shot] = []
    seen = 0
    for block in scan(html, base_url):
        seen += 1
        shot = parse_shot(block)
        if shot is not None:
            shots.append(shot)
    logger.debug("Parsed %d of %d result blocks", len(shots), seen)
    return shots


class ShotSearchConverter:
    """Reusable response-body converter bound to one site's base URL.

    Instances hold no state beyond *base_url* and can be shared between
    threads.
    """

    def __init__(self, base_url: str = HOST) -> None:
        self.base_url = base_url

    def __call__(self, body: str | bytes) -> List[Shot]:
        return extract_shots(body, self.base_url)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(base_url={self.base_url!r})"
