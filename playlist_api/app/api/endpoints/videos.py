"""
Video endpoints.

These routes expose the playlist as JSON: listing, fetching a single
video, creating one from form fields ``nombre`` and ``link``,
deleting, liking, toggling the favorite flag and ranking by likes.

Mutating endpoints answer with a ``success`` flag plus either the
resulting data or a human readable ``message``.  Unknown ids produce a
404 and validation failures a 400, both with ``success: false``.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Form, status
from fastapi.responses import JSONResponse

from playlist_api.app.schemas.video import (
    FavoriteResponse,
    LikeResponse,
    MessageResponse,
    VideoCreatedResponse,
    VideoRead,
)
from playlist_api.app.services.video_service import VideoService

logger = logging.getLogger(__name__)

router = APIRouter()

NOT_FOUND_MESSAGE = "Video no encontrado"


def _failure(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"success": False, "message": message})


@router.get("", response_model=List[VideoRead])
async def list_videos() -> List[VideoRead]:
    """Return every video in the playlist, in insertion order."""
    videos = await VideoService.list_videos()
    return [VideoRead.from_video(video) for video in videos]


@router.get("/top/{amount}", response_model=List[VideoRead])
async def top_videos(amount: int) -> List[VideoRead]:
    """Return the most liked videos.

    ``amount`` is clamped to the range 1..100 by the service.
    """
    videos = await VideoService.top_videos(amount)
    return [VideoRead.from_video(video) for video in videos]


@router.get(
    "/{video_id}",
    response_model=VideoRead,
    responses={404: {"model": MessageResponse}},
)
async def get_video(video_id: str):
    video = await VideoService.get_video(video_id)
    if video is None:
        return _failure(status.HTTP_404_NOT_FOUND, NOT_FOUND_MESSAGE)
    return VideoRead.from_video(video)


@router.post(
    "",
    response_model=VideoCreatedResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": MessageResponse}},
)
async def create_video(
    nombre: Optional[str] = Form(None),
    link: Optional[str] = Form(None),
):
    """Add a video to the playlist.

    Missing fields are treated as empty and rejected with a 400 so the
    browser client always receives a readable message.
    """
    try:
        video = await VideoService.add_video(nombre, link)
    except ValueError as e:
        logger.error("Could not add video: %s", e)
        return _failure(status.HTTP_400_BAD_REQUEST, str(e))
    return VideoCreatedResponse(
        success=True,
        message="Video agregado exitosamente",
        video=VideoRead.from_video(video),
    )


@router.delete(
    "/{video_id}",
    response_model=MessageResponse,
    responses={404: {"model": MessageResponse}},
)
async def delete_video(video_id: str):
    deleted = await VideoService.delete_video(video_id)
    if not deleted:
        return _failure(status.HTTP_404_NOT_FOUND, NOT_FOUND_MESSAGE)
    return MessageResponse(success=True, message="Video eliminado exitosamente")


@router.post(
    "/{video_id}/like",
    response_model=LikeResponse,
    responses={404: {"model": MessageResponse}},
)
async def like_video(video_id: str):
    video = await VideoService.add_like(video_id)
    if video is None:
        return _failure(status.HTTP_404_NOT_FOUND, NOT_FOUND_MESSAGE)
    return LikeResponse(success=True, likes=video.likes)


@router.post(
    "/{video_id}/favorito",
    response_model=FavoriteResponse,
    responses={404: {"model": MessageResponse}},
)
async def toggle_favorite(video_id: str):
    video = await VideoService.toggle_favorite(video_id)
    if video is None:
        return _failure(status.HTTP_404_NOT_FOUND, NOT_FOUND_MESSAGE)
    return FavoriteResponse(success=True, favorito=video.favorite)
