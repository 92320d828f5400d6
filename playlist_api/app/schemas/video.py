"""
Pydantic schemas for the playlist API.

Field names follow the JSON wire format shared with the browser
client and the data file (``nombre``, ``favorito``,
``fechaAgregado``), which is why some of them are not snake_case.
"""

from typing import Optional

from pydantic import BaseModel, Field

from playlist_api.app.models.video import Video


class VideoRead(BaseModel):
    """Schema for reading a video from the API."""

    id: str
    nombre: str
    link: str
    likes: int = Field(..., ge=0)
    favorito: bool
    fechaAgregado: Optional[str] = None

    @classmethod
    def from_video(cls, video: Video) -> "VideoRead":
        return cls(**video.to_dict())


class StatsRead(BaseModel):
    """Aggregate playlist statistics."""

    totalVideos: int
    totalFavoritos: int
    totalLikes: int


class MessageResponse(BaseModel):
    """Envelope returned by mutating endpoints and on failures."""

    success: bool
    message: str


class VideoCreatedResponse(MessageResponse):
    video: VideoRead


class LikeResponse(BaseModel):
    success: bool
    likes: int


class FavoriteResponse(BaseModel):
    success: bool
    favorito: bool
