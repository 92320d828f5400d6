from playlist_api.app.core.config import settings

from tests.helpers import make_video, write_videos


def add(client, nombre="Song", link="https://www.youtube.com/watch?v=AAA"):
    return client.post("/api/videos", data={"nombre": nombre, "link": link})


def test_create_and_fetch_video(client):
    response = add(client)

    assert response.status_code == 201
    body = response.json()
    assert body["success"] is True
    assert body["message"] == "Video agregado exitosamente"
    video = body["video"]
    assert video["link"] == "https://www.youtube.com/embed/AAA"
    assert video["likes"] == 0
    assert video["favorito"] is False
    assert video["fechaAgregado"]

    fetched = client.get(f"/api/videos/{video['id']}")
    assert fetched.status_code == 200
    assert fetched.json() == video


def test_create_rejects_invalid_link(client):
    response = add(client, link="https://example.com")

    assert response.status_code == 400
    assert response.json() == {
        "success": False,
        "message": "El link proporcionado no es una URL válida de YouTube",
    }
    assert client.get("/api/videos").json() == []


def test_create_with_missing_field_is_bad_request(client):
    response = client.post("/api/videos", data={"link": "https://youtu.be/x"})
    assert response.status_code == 400
    assert response.json()["success"] is False


def test_list_videos(client, data_file):
    write_videos(data_file, [make_video("a"), make_video("b")])
    names = [video["nombre"] for video in client.get("/api/videos").json()]
    assert names == ["a", "b"]


def test_unknown_video_is_not_found(client):
    for method, path in [
        ("GET", "/api/videos/missing"),
        ("DELETE", "/api/videos/missing"),
        ("POST", "/api/videos/missing/like"),
        ("POST", "/api/videos/missing/favorito"),
    ]:
        response = client.request(method, path)
        assert response.status_code == 404, path
        assert response.json() == {"success": False, "message": "Video no encontrado"}


def test_like_and_favorite(client):
    video_id = add(client).json()["video"]["id"]

    assert client.post(f"/api/videos/{video_id}/like").json() == {"success": True, "likes": 1}
    assert client.post(f"/api/videos/{video_id}/like").json() == {"success": True, "likes": 2}
    assert client.post(f"/api/videos/{video_id}/favorito").json() == {"success": True, "favorito": True}

    stored = client.get(f"/api/videos/{video_id}").json()
    assert (stored["likes"], stored["favorito"]) == (2, True)


def test_delete_video(client):
    video_id = add(client).json()["video"]["id"]

    response = client.delete(f"/api/videos/{video_id}")

    assert response.status_code == 200
    assert response.json() == {"success": True, "message": "Video eliminado exitosamente"}
    assert client.get(f"/api/videos/{video_id}").status_code == 404


def test_stats(client, data_file):
    write_videos(data_file, [make_video("a", likes=4, favorite=True), make_video("b", likes=1)])
    assert client.get("/api/stats").json() == {"totalVideos": 2, "totalFavoritos": 1, "totalLikes": 5}


def test_top_videos(client, data_file):
    write_videos(data_file, [make_video("low", likes=1), make_video("high", likes=9), make_video("mid", likes=5)])

    names = [video["nombre"] for video in client.get("/api/videos/top/2").json()]
    assert names == ["high", "mid"]
    assert len(client.get("/api/videos/top/0").json()) == 1


def test_storage_failure_is_server_error(client, tmp_path, monkeypatch):
    directory = tmp_path / "directory"
    directory.mkdir()
    monkeypatch.setattr(settings, "data_file", str(directory))

    response = add(client)

    assert response.status_code == 500
    body = response.json()
    assert body["success"] is False
    assert body["message"].startswith("Error interno del servidor:")


def test_static_script_is_served(client):
    response = client.get("/static/js/app.js")
    assert response.status_code == 200
    assert "/api/videos" in response.text


def test_create_on_corrupt_document_keeps_file(client, data_file):
    write_videos(data_file, [make_video("kept")])
    data_file.write_text(data_file.read_text(encoding="utf-8")[:-1] + ', {"nombre": "no id"}]', encoding="utf-8")
    before = data_file.read_text(encoding="utf-8")

    response = add(client)

    assert response.status_code == 500
    assert response.json()["success"] is False
    assert data_file.read_text(encoding="utf-8") == before
