from __future__ import annotations

import pytest

from wp_blog.dates import format_post_date, to_iso_datetime


def test_to_iso_datetime_replaces_separator():
    assert to_iso_datetime("2025-11-05 09:19:03") == "2025-11-05T09:19:03"


def test_to_iso_datetime_leaves_iso_untouched():
    assert to_iso_datetime("2025-11-05T09:19:03.120Z") == "2025-11-05T09:19:03.120Z"


def test_format_post_date_wordpress_form():
    assert format_post_date("2025-11-05 09:19:03") == "November 5, 2025"


def test_format_post_date_iso_utc_form():
    assert format_post_date("2024-01-31T23:59:59.999Z") == "January 31, 2024"


def test_format_post_date_rejects_empty():
    with pytest.raises(ValueError):
        format_post_date("")
