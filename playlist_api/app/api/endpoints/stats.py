"""
Statistics endpoint.

Returns the number of videos, how many of them are favorites and the
total number of likes.  Values are computed from the data file on
every request.
"""

from fastapi import APIRouter

from playlist_api.app.schemas.video import StatsRead
from playlist_api.app.services.video_service import VideoService

router = APIRouter()


@router.get("", response_model=StatsRead)
async def get_stats() -> StatsRead:
    """Return aggregate statistics for the playlist."""
    stats = await VideoService.statistics()
    return StatsRead(
        totalVideos=stats.total_videos,
        totalFavoritos=stats.total_favorites,
        totalLikes=stats.total_likes,
    )
