from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

import requests

from wp_blog.http_client import HttpClient
from wp_blog.models import RemotePost

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FetchResult:
    """
    Outcome of one fetch of the post collection.

    - posts: records in upstream order (empty on failure)
    - error: human-readable reason when the upstream was unavailable
    """

    posts: tuple[RemotePost, ...] = ()
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, posts: tuple[RemotePost, ...]) -> "FetchResult":
        return cls(posts=tuple(posts))

    @classmethod
    def failure(cls, reason: str) -> "FetchResult":
        return cls(error=reason)


class WordPressSource:
    """
    Fetches the post collection from a WordPress REST endpoint returning a JSON array of
    {ID, post_title, post_date, post_content} objects.

    fetch() does not raise on upstream unavailability (network error, non-2xx status,
    undecodable or unexpected body); the failure is returned as FetchResult.failure.
    """

    def __init__(self, url: str, http: HttpClient):
        self.url = url
        self.http = http

    def fetch(self) -> FetchResult:
        logger.info("Fetching posts: url=%s", self.url)
        try:
            payload = self.http.get_json(self.url)
        except (requests.RequestException, ValueError) as e:
            return self._failed(f"request failed: {e}")

        if not isinstance(payload, list):
            return self._failed(f"expected a JSON array, got {type(payload).__name__}")

        try:
            posts = tuple(RemotePost.from_json(obj) for obj in payload)
        except ValueError as e:
            return self._failed(f"malformed post entry: {e}")

        logger.info("Fetched posts: count=%s url=%s", len(posts), self.url)
        return FetchResult.success(posts)

    def _failed(self, reason: str) -> FetchResult:
        logger.error("Error fetching posts: url=%s reason=%s", self.url, reason)
        return FetchResult.failure(reason)
