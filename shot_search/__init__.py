"""shot-search: typed shot records extracted from search-result HTML."""

from shot_search.errors import BlockParseError, DocumentParseError
from shot_search.scraper import Shot, User, extract_shots

__all__ = ["extract_shots", "Shot", "User", "DocumentParseError", "BlockParseError"]
