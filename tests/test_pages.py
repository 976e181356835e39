from __future__ import annotations

from wp_blog.pages import home_props, post_paths, post_props
from wp_blog.run_generate_once import generate


def test_home_props(repo):
    assert home_props(repo, revalidate=60) == {
        "props": {
            "allPostsData": [
                {"id": "1", "title": "Alpha", "date": "2025-01-01 09:00:00"},
                {"id": "3", "title": "Beta", "date": "2025-01-02 10:00:00"},
            ]
        },
        "revalidate": 60,
    }


def test_post_paths(repo):
    assert post_paths(repo) == {
        "paths": [{"params": {"id": "3"}}, {"params": {"id": "1"}}],
        "fallback": False,
    }


def test_post_paths_empty_when_upstream_down(repo_down):
    assert post_paths(repo_down) == {"paths": [], "fallback": False}


def test_post_props_uses_content_html_field(repo):
    props = post_props(repo, "1", revalidate=30)
    assert props["revalidate"] == 30
    assert props["props"]["postData"] == {
        "id": "1",
        "title": "Alpha",
        "date": "2025-01-01 09:00:00",
        "contentHtml": "<p>a</p>",
    }


def test_generate_renders_every_listed_post_with_one_fetch(repo, http_ok):
    out = generate(repo, revalidate=60)
    assert sorted(out["posts"]) == ["1", "3"]
    assert out["posts"]["3"]["props"]["postData"]["title"] == "Beta"
    assert len(http_ok.calls) == 1


def test_generate_upstream_down(repo_down):
    out = generate(repo_down, revalidate=60)
    assert out["home"]["props"]["allPostsData"] == []
    assert out["paths"]["paths"] == []
    assert out["posts"] == {}
