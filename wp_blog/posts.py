from __future__ import annotations

import logging
import unicodedata
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Iterator, Optional

from wp_blog.content_source import FetchResult, WordPressSource
from wp_blog.models import PostDetail, PostSummary, RouteKey

logger = logging.getLogger(__name__)

ERROR_TITLE = "Error loading post"
ERROR_CONTENT = "<p>Unable to load post content.</p>"


def title_sort_key(title: str) -> tuple[str, str, str]:
    """
    Locale-aware ordering key for post titles.

    Compares base letters case-insensitively first, then accents, then case
    (lowercase before uppercase), so "alpha" < "Alpha" < "Beta" < "beta2" < "Éclair".
    """
    folded = title.casefold()
    base = "".join(c for c in unicodedata.normalize("NFKD", folded) if not unicodedata.combining(c))
    return base, folded, title.swapcase()


def _now_iso() -> str:
    # Same shape as a JS Date ISO string: 2025-11-05T09:19:03.123Z
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class PostRepository:
    """
    Data access for the page layer: home listing, route enumeration and single posts.

    Every operation fetches the collection itself and never raises: upstream failures
    collapse into an empty list (listings, routes) or an error post (detail).
    Inside generation_pass() the three operations share one fetch.
    """

    def __init__(self, source: WordPressSource):
        self.source = source
        self._pass_result: Optional[FetchResult] = None
        self._pass_depth = 0

    @contextmanager
    def generation_pass(self) -> Iterator["PostRepository"]:
        """Share a single fetch (successful or not) between calls made inside the block."""
        self._pass_depth += 1
        try:
            yield self
        finally:
            self._pass_depth -= 1
            # Memo is kept until the outermost pass exits
            if self._pass_depth == 0:
                self._pass_result = None

    def list_summaries(self) -> list[PostSummary]:
        result = self._fetch()
        if not result.ok:
            logger.warning("Post listing unavailable, returning no posts: reason=%s", result.error)
            return []

        ordered = sorted(result.posts, key=lambda p: title_sort_key(p.title))
        summaries = [PostSummary(id=p.key, title=p.title, date=p.date) for p in ordered]
        logger.info("Built post summaries: count=%s", len(summaries))
        return summaries

    def list_route_keys(self) -> list[RouteKey]:
        result = self._fetch()
        if not result.ok:
            logger.warning("Post ids unavailable, returning no routes: reason=%s", result.error)
            return []

        keys = [RouteKey(id=p.key) for p in result.posts]
        logger.info("Built route keys: count=%s", len(keys))
        return keys

    def get_detail(self, requested_id: str) -> PostDetail:
        result = self._fetch()
        if not result.ok:
            logger.warning("Post unavailable: id=%s reason=%s", requested_id, result.error)
            return PostDetail(id=requested_id, title=ERROR_TITLE, date=_now_iso(), content=ERROR_CONTENT)

        match = next((p for p in result.posts if p.key == requested_id), None)
        if match is None:
            logger.warning("Post not found: id=%s", requested_id)
            return PostDetail(id=requested_id, title="", date="", content="")

        logger.info("Found post: id=%s", requested_id)
        return PostDetail(id=match.key, title=match.title, date=match.date, content=match.content)

    def _fetch(self) -> FetchResult:
        if self._pass_depth == 0:
            return self.source.fetch()
        if self._pass_result is None:
            self._pass_result = self.source.fetch()
        return self._pass_result
