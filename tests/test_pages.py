from playlist_api.app.core.config import settings

from tests.helpers import make_video, write_videos


def test_index_lists_videos_and_stats(client, data_file):
    write_videos(data_file, [make_video("First", likes=3), make_video("Second", favorite=True)])

    response = client.get("/")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    page = response.text
    assert f"<title>{settings.project_name}</title>" in page
    assert "First" in page and "Second" in page
    assert "https://www.youtube.com/embed/abc" in page
    assert "Likes: 3" in page
    assert "Favoritos: 1" in page


def test_favorites_page_only_shows_favorites(client, data_file):
    write_videos(data_file, [make_video("Plain"), make_video("Starred", favorite=True)])

    page = client.get("/favoritos").text

    assert "Videos Favoritos" in page
    assert "Starred" in page
    assert "Plain" not in page


def test_names_are_escaped(client, data_file):
    write_videos(data_file, [make_video("<script>alert(1)</script>")])

    page = client.get("/").text

    assert "<script>alert(1)</script>" not in page
    assert "&lt;script&gt;alert(1)&lt;/script&gt;" in page


def test_empty_states(client):
    assert "La playlist está vacía" in client.get("/").text
    assert "ningún video como favorito" in client.get("/favoritos").text


def test_script_link_is_never_rendered(client):
    response = client.post("/api/videos", data={"nombre": "x", "link": "javascript:alert(document.domain)//youtube.com"})
    assert response.status_code == 201

    page = client.get("/").text

    assert "javascript:" not in page
    assert "Link no reproducible" in page


def test_player_is_built_from_embed_id(client, data_file):
    video = make_video("Crafted")
    video.link = 'javascript:alert(1)/embed/abc"onload="x'
    write_videos(data_file, [video])

    page = client.get("/").text

    assert "javascript:" not in page
    assert '<iframe src="https://www.youtube.com/embed/abc%22onload%3D%22x"' in page


def test_plain_http_link_is_shown_as_anchor(client, data_file):
    video = make_video("Channel")
    video.link = "https://www.youtube.com/channel/UC123"
    write_videos(data_file, [video])

    page = client.get("/").text

    assert '<a href="https://www.youtube.com/channel/UC123"' in page
    assert "<iframe" not in page
