"""
Domain model for a music video in the playlist.

A ``Video`` is stored in the JSON document using the field names of
the public API (``nombre``, ``favorito``, ``fechaAgregado``); the
conversion happens in ``to_dict``/``from_dict`` so the rest of the
code works with plain Python attribute names.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional

from playlist_api.app.core.youtube import EMBED_MARKER, normalize_link


@dataclass
class Video:
    """A single entry of the playlist."""

    id: str
    name: str
    link: str
    likes: int = 0
    favorite: bool = False
    added_at: Optional[str] = None

    @classmethod
    def create(cls, name: str, link: str) -> "Video":
        """Build a new entry with a fresh identifier and timestamp.

        The link is normalised to its embeddable form.
        """
        return cls(
            id=str(uuid.uuid4()),
            name=name,
            link=normalize_link(link),
            likes=0,
            favorite=False,
            added_at=datetime.now().isoformat(),
        )

    def add_like(self) -> None:
        self.likes += 1

    def toggle_favorite(self) -> None:
        self.favorite = not self.favorite

    @property
    def embed_video_id(self) -> Optional[str]:
        """Video identifier at the end of an embeddable link, if any."""
        if self.link and EMBED_MARKER in self.link:
            return self.link[self.link.rfind("/") + 1:]
        return None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "nombre": self.name,
            "link": self.link,
            "likes": self.likes,
            "favorito": self.favorite,
            "fechaAgregado": self.added_at,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Video":
        """Build a ``Video`` from a stored JSON object.

        Missing or null fields default to their initial values so that
        hand-edited documents still load.  An entry without a string
        ``id`` raises ``ValueError``.
        """
        video_id = data["id"]
        if not isinstance(video_id, str) or not video_id:
            raise ValueError(f"invalid video id: {video_id!r}")
        return cls(
            id=video_id,
            name=data.get("nombre") or "",
            link=data.get("link") or "",
            likes=int(data.get("likes") or 0),
            favorite=bool(data.get("favorito", False)),
            added_at=data.get("fechaAgregado"),
        )
