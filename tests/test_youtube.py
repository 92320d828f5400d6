import pytest

from playlist_api.app.core.youtube import (
    extract_video_id,
    is_youtube_url,
    normalize_link,
)


def test_watch_link_is_rewritten_to_embed():
    assert normalize_link("https://www.youtube.com/watch?v=AAA") == "https://www.youtube.com/embed/AAA"


def test_watch_link_drops_extra_parameters():
    assert normalize_link("https://www.youtube.com/watch?v=dQw4w9WgXcQ&t=10s") == (
        "https://www.youtube.com/embed/dQw4w9WgXcQ"
    )


def test_short_link_drops_query():
    assert normalize_link("https://youtu.be/AAA?t=5") == "https://www.youtube.com/embed/AAA"


def test_embed_link_is_unchanged():
    link = "https://www.youtube.com/embed/dQw4w9WgXcQ"
    assert normalize_link(link) == link


def test_normalize_is_idempotent():
    once = normalize_link("https://youtu.be/xyz")
    assert normalize_link(once) == once


def test_link_without_video_id_is_kept():
    link = "https://www.youtube.com/channel/UC123"
    assert normalize_link(link) == link


def test_empty_watch_parameter_is_not_an_id():
    assert extract_video_id("https://www.youtube.com/watch?v=") is None


@pytest.mark.parametrize("value", ["", None])
def test_empty_values_pass_through(value):
    assert normalize_link(value) == value


def test_host_markers():
    assert is_youtube_url("https://www.youtube.com/watch?v=1")
    assert is_youtube_url("https://youtu.be/1")
    assert not is_youtube_url("https://example.com")
