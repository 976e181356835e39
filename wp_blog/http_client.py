from __future__ import annotations

import logging
import random
import time
from dataclasses import dataclass
from typing import Any, Optional

import requests

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HttpConfig:
    timeout_sec: float
    delay_sec: float
    max_retries: int
    backoff_base_sec: float
    backoff_max_sec: float
    user_agent: str


class HttpClient:
    """
    Thin HTTP client wrapper for JSON endpoints:
    - Timeout on every request
    - Optional fixed delay (+ small jitter) before each GET
    - Retry with exponential backoff
    - Logs meaningful failures
    """

    def __init__(self, config: HttpConfig, session: Optional[requests.Session] = None):
        self._cfg = config
        self._session = session or requests.Session()
        self._session.headers.update(
            {
                "User-Agent": self._cfg.user_agent,
                "Accept": "application/json",
            }
        )

    def get_json(self, url: str) -> Any:
        """
        GET an URL and return the decoded JSON body.

        Raises:
            requests.HTTPError: non-2xx responses after retries
            requests.RequestException: network errors (incl. timeouts) after retries
            ValueError: body is not valid JSON
        """
        self._rate_limit()

        resp = self._get(url)
        try:
            return resp.json()
        except ValueError as e:
            logger.error("Invalid JSON body: url=%s err=%s", url, e)
            raise ValueError(f"Invalid JSON body from {url}: {e}") from None

    def _get(self, url: str) -> requests.Response:
        last_exc: Exception | None = None
        for attempt in range(self._cfg.max_retries + 1):
            try:
                resp = self._session.get(url, timeout=self._cfg.timeout_sec)
                resp.raise_for_status()
                resp.encoding = "utf-8"
                return resp
            except requests.RequestException as e:
                last_exc = e
                if attempt >= self._cfg.max_retries:
                    logger.error("HTTP GET failed after retries: url=%s err=%s", url, e)
                    raise
                sleep_sec = self._compute_backoff(attempt)
                logger.warning(
                    "HTTP GET failed (retrying): attempt=%s url=%s sleep=%.2fs err=%s",
                    attempt + 1,
                    url,
                    sleep_sec,
                    e,
                )
                time.sleep(sleep_sec)

        # Should not reach here
        assert last_exc is not None
        raise last_exc

    def _rate_limit(self) -> None:
        if self._cfg.delay_sec <= 0:
            return
        jitter = random.uniform(0.0, 0.25)
        time.sleep(self._cfg.delay_sec + jitter)

    def _compute_backoff(self, attempt: int) -> float:
        # Exponential backoff with cap + jitter
        base = self._cfg.backoff_base_sec * (2**attempt)
        capped = min(base, self._cfg.backoff_max_sec)
        if capped <= 0:
            return 0.0
        return capped + random.uniform(0.0, 0.5)
