"""Scraper package: search-result HTML to typed shot records."""

from shot_search.scraper.author import parse_author
from shot_search.scraper.models import Block, ParsedId, PlaidItem, Shot, User
from shot_search.scraper.scanner import ShotSearchConverter, extract_shots, scan
from shot_search.scraper.shot import parse_shot

__all__ = [
    "scan",
    "parse_shot",
    "parse_author",
    "extract_shots",
    "ShotSearchConverter",
    "Block",
    "ParsedId",
    "PlaidItem",
    "Shot",
    "User",
]
