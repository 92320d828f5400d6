"""
Server-rendered pages.

``/`` lists every video together with the playlist statistics and
``/favoritos`` lists only the favorites.  Pages are plain HTML built
from the service data; all user supplied text is escaped.  The buttons
carry ``data-video-id`` attributes and are wired to the JSON API by
``/static/js/app.js``.
"""

import html
from typing import List, Optional
from urllib.parse import quote, urlsplit

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

from playlist_api.app.core.config import settings
from playlist_api.app.core.youtube import EMBED_BASE_URL
from playlist_api.app.models.video import Video
from playlist_api.app.services.video_service import PlaylistStats, VideoService

router = APIRouter()

SAFE_LINK_SCHEMES = {"http", "https"}

PAGE_TEMPLATE = """<!DOCTYPE html>
<html lang="es">
<head>
    <meta charset="utf-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1" />
    <title>{title}</title>
    <style>
        body {{ font-family: sans-serif; margin: 0 auto; max-width: 960px; padding: 1rem; }}
        nav a {{ margin-right: 1rem; }}
        .stats span {{ margin-right: 1.5rem; }}
        .videos {{ display: grid; grid-template-columns: repeat(auto-fill, minmax(280px, 1fr)); gap: 1rem; }}
        .video {{ border: 1px solid #ddd; border-radius: 6px; padding: .5rem; }}
        .video iframe {{ width: 100%; aspect-ratio: 16 / 9; border: 0; }}
        .favorito-btn.activo {{ color: #d4a000; }}
        .empty {{ color: #666; }}
    </style>
</head>
<body>
    <header>
        <h1>{title}</h1>
        <nav><a href="/">Todos</a><a href="/favoritos">Favoritos</a></nav>
    </header>
    {stats}
    <form id="agregarVideoForm">
        <input id="nombreVideo" name="nombre" placeholder="Nombre" required />
        <input id="linkVideo" name="link" placeholder="https://www.youtube.com/watch?v=..." required />
        <button id="btnGuardarVideo" type="submit">Agregar video</button>
    </form>
    <p id="mensaje" role="status"></p>
    {body}
    <script src="/static/js/app.js"></script>
</body>
</html>
"""


def render_stats(stats: Optional[PlaylistStats]) -> str:
    if stats is None:
        return ""
    return (
        '<section class="stats">'
        f"<span>Videos: {stats.total_videos}</span>"
        f"<span>Favoritos: {stats.total_favorites}</span>"
        f"<span>Likes: {stats.total_likes}</span>"
        "</section>"
    )


def render_player(video: Video, name: str) -> str:
    """Embedded player for the video, or a plain link when it has no embed id.

    The iframe source is always rebuilt from the video id, never taken from
    the stored link.  Non-embeddable links are only shown for http(s) URLs.
    """
    embed_id = video.embed_video_id
    if embed_id:
        src = html.escape(EMBED_BASE_URL + quote(embed_id, safe=""), quote=True)
        return f'<iframe src="{src}" title="{name}" allowfullscreen></iframe>'
    try:
        scheme = urlsplit(video.link).scheme.lower()
    except ValueError:
        scheme = ""
    if scheme in SAFE_LINK_SCHEMES:
        href = html.escape(video.link, quote=True)
        return f'<p class="link"><a href="{href}" target="_blank" rel="noopener noreferrer">{href}</a></p>'
    return '<p class="link empty">Link no reproducible</p>'


def render_video(video: Video) -> str:
    video_id = html.escape(video.id, quote=True)
    name = html.escape(video.name, quote=True)
    favorite_class = "favorito-btn activo" if video.favorite else "favorito-btn"
    favorite_label = "&#9733;" if video.favorite else "&#9734;"
    return (
        f'<article class="video" id="video-{video_id}">'
        f"{render_player(video, name)}"
        f"<h3>{name}</h3>"
        f'<button class="like-btn" data-video-id="{video_id}">'
        f'&#10084; <span class="like-count">{video.likes}</span></button> '
        f'<button class="{favorite_class}" data-video-id="{video_id}">{favorite_label}</button> '
        f'<button class="delete-btn" data-video-id="{video_id}" data-video-nombre="{name}">Eliminar</button>'
        "</article>"
    )


def render_page(
    title: str,
    videos: List[Video],
    stats: Optional[PlaylistStats] = None,
    favorites_only: bool = False,
) -> str:
    """Render a full HTML page for a list of videos."""
    if videos:
        body = '<section class="videos">' + "".join(render_video(v) for v in videos) + "</section>"
    elif favorites_only:
        body = '<p class="empty">Todavía no marcaste ningún video como favorito.</p>'
    else:
        body = '<p class="empty">La playlist está vacía. Agregá tu primer video.</p>'
    return PAGE_TEMPLATE.format(
        title=html.escape(title),
        stats=render_stats(stats),
        body=body,
    )


@router.get("/", response_class=HTMLResponse)
async def index() -> HTMLResponse:
    """Main page with every video and the playlist statistics."""
    videos = await VideoService.list_videos()
    stats = await VideoService.statistics()
    return HTMLResponse(content=render_page(settings.project_name, videos, stats))


@router.get("/favoritos", response_class=HTMLResponse)
async def favorites() -> HTMLResponse:
    """Page listing only the favorite videos."""
    videos = await VideoService.list_favorites()
    return HTMLResponse(content=render_page("Videos Favoritos", videos, favorites_only=True))
