from __future__ import annotations

import logging
from typing import Any

from wp_blog.posts import PostRepository

logger = logging.getLogger(__name__)


def home_props(repo: PostRepository, revalidate: int) -> dict[str, Any]:
    """Props for the home page: every post summary, sorted by title."""
    summaries = repo.list_summaries()
    return {
        "props": {"allPostsData": [s.to_dict() for s in summaries]},
        "revalidate": revalidate,
    }


def post_paths(repo: PostRepository) -> dict[str, Any]:
    """
    Detail pages to pre-render.

    An empty list is a valid answer (upstream down at build time); ids outside
    the list are not served.
    """
    keys = repo.list_route_keys()
    if not keys:
        logger.warning("No post paths to pre-render")
    return {"paths": [k.to_params() for k in keys], "fallback": False}


def post_props(repo: PostRepository, post_id: str, revalidate: int) -> dict[str, Any]:
    detail = repo.get_detail(post_id)
    post_data = {
        "id": detail.id,
        "title": detail.title,
        "date": detail.date,
        # Raw HTML, injected unescaped by the renderer
        "contentHtml": detail.content,
    }
    return {"props": {"postData": post_data}, "revalidate": revalidate}
