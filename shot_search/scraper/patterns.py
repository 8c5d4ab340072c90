"""Markup literals the extractor matches against.

These mirror the legacy search page exactly; changing any of them changes
which records come out.  Everything here is read-only after import.
"""

from __future__ import annotations

import re

HOST = "https://dribbble.com"

# ---------------------------------------------------------------------------
# Result blocks
# ---------------------------------------------------------------------------
BLOCK_SELECTOR = "li[id^=screenshot]"
BLOCK_ID_PREFIX = "screenshot-"

# ---------------------------------------------------------------------------
# Shot fields
# ---------------------------------------------------------------------------
OVERLAY_SELECTOR = "a.dribbble-over"
TITLE_SELECTOR = "strong"
DESCRIPTION_SELECTOR = "span.comment"
TIMESTAMP_SELECTOR = "em.timestamp"
IMAGE_SELECTOR = "img"
PERMALINK_SELECTOR = "a.dribbble-link"
GIF_SELECTOR = "div.gif-indicator"
AUTHOR_HEADING_SELECTOR = "h2"
VIEWS_SELECTOR = "li.views"
LIKES_SELECTOR = "li.fav"
COMMENTS_SELECTOR = "li.cmnt"

# Structured API descriptions arrive wrapped in a paragraph.
DESCRIPTION_TEMPLATE = "<p>{}</p>"

TEASER_TOKEN = "_teaser."
FULL_SIZE_TOKEN = "."

# "March 3, 2018"; strptime's %d also accepts single-digit days.
DATE_FORMAT = "%B %d, %Y"

COUNT_SEPARATOR = ","
DIGITS = re.compile(r"[0-9]+")

# ---------------------------------------------------------------------------
# Author fields
# ---------------------------------------------------------------------------
AUTHOR_ANCHOR_SELECTOR = "a.url"
AVATAR_SELECTOR = "img.photo"
PRO_BADGE_SELECTOR = "span.badge-pro"

MINI_TOKEN = "/mini/"
NORMAL_TOKEN = "/normal/"

# The avatar path is the only place the numeric user id shows up.
PATTERN_USER_ID = re.compile(r"users/(\d+?)/", re.DOTALL)
UNKNOWN_USER_ID = -1
