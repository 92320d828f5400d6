"""
Service layer for the playlist.

``VideoService`` validates input, applies mutations (add, delete,
like, favorite toggle) and computes rankings and statistics.  It keeps
no state of its own: every call loads the collection from the
repository returned by ``get_repository``, so the file on disk is the
single source of truth.

Validation failures are reported by raising ``ValueError`` with a
message suitable for showing to the user.  Lookups of unknown ids
return ``None`` (or ``False`` for deletions); mapping those to HTTP
status codes is left to the API layer.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional

from playlist_api.app.core.storage import get_repository
from playlist_api.app.core.youtube import is_youtube_url
from playlist_api.app.models.video import Video

logger = logging.getLogger(__name__)

MIN_TOP = 1
MAX_TOP = 100


@dataclass
class PlaylistStats:
    total_videos: int
    total_favorites: int
    total_likes: int


class VideoService:
    """Service class for managing the playlist."""

    @classmethod
    async def list_videos(cls) -> List[Video]:
        logger.info("Listing all videos")
        return get_repository().find_all()

    @classmethod
    async def get_video(cls, video_id: str) -> Optional[Video]:
        logger.info("Looking up video %s", video_id)
        return get_repository().find_by_id(video_id)

    @classmethod
    async def add_video(cls, name: Optional[str], link: Optional[str]) -> Video:
        """Validate and store a new video.

        Raises ``ValueError`` if the name or link is blank or if the
        link does not point to YouTube.  Nothing is written in that
        case.
        """
        cls._validate(name, link)
        video = Video.create(name, link)
        saved = get_repository().save(video)
        logger.info("Added video %s - %s", name, saved.id)
        return saved

    @classmethod
    async def delete_video(cls, video_id: str) -> bool:
        """Delete a video.  Returns ``True`` if it existed."""
        logger.info("Deleting video %s", video_id)
        deleted = get_repository().delete_by_id(video_id)
        if deleted:
            logger.info("Deleted video %s", video_id)
        else:
            logger.warning("Video %s not found; nothing deleted", video_id)
        return deleted

    @classmethod
    async def add_like(cls, video_id: str) -> Optional[Video]:
        """Increment the like counter of a video.

        Returns the updated video or ``None`` if it does not exist.
        """
        logger.info("Adding like to video %s", video_id)
        repository = get_repository()
        video = repository.find_by_id(video_id)
        if video is None:
            logger.warning("Cannot add like, video %s not found", video_id)
            return None
        video.add_like()
        repository.save(video)
        logger.info("Video %s now has %s likes", video_id, video.likes)
        return video

    @classmethod
    async def toggle_favorite(cls, video_id: str) -> Optional[Video]:
        """Flip the favorite flag of a video.

        Returns the updated video or ``None`` if it does not exist.
        """
        logger.info("Toggling favorite for video %s", video_id)
        repository = get_repository()
        video = repository.find_by_id(video_id)
        if video is None:
            logger.warning("Cannot toggle favorite, video %s not found", video_id)
            return None
        video.toggle_favorite()
        repository.save(video)
        logger.info("Video %s favorite is now %s", video_id, video.favorite)
        return video

    @classmethod
    async def list_favorites(cls) -> List[Video]:
        logger.info("Listing favorite videos")
        return get_repository().find_favorites()

    @classmethod
    async def top_videos(cls, amount: int) -> List[Video]:
        """Return the ``amount`` most liked videos.

        ``amount`` is clamped into ``[MIN_TOP, MAX_TOP]``.
        """
        amount = max(MIN_TOP, min(amount, MAX_TOP))
        logger.info("Listing top %s videos by likes", amount)
        return get_repository().find_top_by_likes(amount)

    @classmethod
    async def statistics(cls) -> PlaylistStats:
        """Aggregate counts over the whole collection."""
        videos = get_repository().find_all()
        return PlaylistStats(
            total_videos=len(videos),
            total_favorites=sum(1 for video in videos if video.favorite),
            total_likes=sum(video.likes for video in videos),
        )

    @staticmethod
    def _validate(name: Optional[str], link: Optional[str]) -> None:
        if name is None or not name.strip():
            raise ValueError("El nombre del video no puede estar vacío")
        if link is None or not link.strip():
            raise ValueError("El link del video no puede estar vacío")
        if not is_youtube_url(link):
            raise ValueError("El link proporcionado no es una URL válida de YouTube")
