from __future__ import annotations

from typing import Any

import pytest
import requests

from wp_blog.content_source import WordPressSource
from wp_blog.http_client import HttpClient, HttpConfig
from wp_blog.posts import PostRepository

POSTS_URL = "https://wp.example.test/wp-json/blog/v1/latest-posts/1"

UPSTREAM = [
    {"ID": 3, "post_title": "Beta", "post_date": "2025-01-02 10:00:00", "post_content": "<p>b</p>"},
    {"ID": 1, "post_title": "Alpha", "post_date": "2025-01-01 09:00:00", "post_content": "<p>a</p>"},
]


def _config() -> HttpConfig:
    return HttpConfig(
        timeout_sec=1.0,
        delay_sec=0.0,
        max_retries=0,
        backoff_base_sec=0.0,
        backoff_max_sec=0.0,
        user_agent="test",
    )


class FakeHttp(HttpClient):
    """Serves a canned payload (or raises a canned error) and counts calls."""

    def __init__(self, payload: Any = None, error: Exception | None = None):
        super().__init__(_config())
        self.payload = payload
        self.error = error
        self.calls: list[str] = []

    def get_json(self, url: str) -> Any:
        self.calls.append(url)
        if self.error is not None:
            raise self.error
        return self.payload


@pytest.fixture
def http_ok() -> FakeHttp:
    return FakeHttp(payload=[dict(p) for p in UPSTREAM])


@pytest.fixture
def http_down() -> FakeHttp:
    return FakeHttp(error=requests.ConnectionError("connection refused"))


@pytest.fixture
def repo(http_ok: FakeHttp) -> PostRepository:
    return PostRepository(WordPressSource(POSTS_URL, http_ok))


@pytest.fixture
def repo_down(http_down: FakeHttp) -> PostRepository:
    return PostRepository(WordPressSource(POSTS_URL, http_down))
