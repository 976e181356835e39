from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Any, Optional, Sequence

from wp_blog.content_source import WordPressSource
from wp_blog.http_client import HttpClient, HttpConfig
from wp_blog.pages import home_props, post_paths, post_props
from wp_blog.posts import PostRepository
from wp_blog.settings import load_settings

logger = logging.getLogger(__name__)


def generate(repo: PostRepository, revalidate: int) -> dict[str, Any]:
    """One generation pass: home page, path list and every listed post page."""
    with repo.generation_pass():
        home = home_props(repo, revalidate)
        paths = post_paths(repo)
        posts = {
            p["params"]["id"]: post_props(repo, p["params"]["id"], revalidate)
            for p in paths["paths"]
        }
    return {"home": home, "paths": paths, "posts": posts}


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Generate blog page props from WordPress once.")
    parser.add_argument("--out", type=Path, default=None, help="write JSON here instead of stdout")
    args = parser.parse_args(argv)

    s = load_settings()

    logging.basicConfig(
        level=s.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s - %(message)s",
    )

    http = HttpClient(
        HttpConfig(
            timeout_sec=s.request_timeout_sec,
            delay_sec=s.request_delay_sec,
            max_retries=s.max_retries,
            backoff_base_sec=s.backoff_base_sec,
            backoff_max_sec=s.backoff_max_sec,
            user_agent=s.user_agent,
        )
    )
    repo = PostRepository(WordPressSource(url=s.posts_url, http=http))

    result = generate(repo, revalidate=s.revalidate_sec)
    logger.info("Generated pages: posts=%s", len(result["posts"]))

    out = json.dumps(result, ensure_ascii=False, indent=2)
    if args.out is None:
        print(out)
    else:
        args.out.write_text(out, encoding="utf-8")
        logger.info("Wrote page props to: %s", args.out)


if __name__ == "__main__":
    main()
