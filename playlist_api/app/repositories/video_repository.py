"""
Repository persisting the playlist as a JSON document.

Every operation reads the whole collection from disk, works on it in
memory and, for mutations, writes the whole collection back.  There is
no locking and no atomic file replacement: two concurrent writers can
lose each other's updates (last writer wins).

Plain reads never fail: a missing file yields an empty collection, and
an unreadable or corrupt file also yields an empty collection but is
logged as a warning.  Mutations are stricter: they raise
``StorageError`` instead of rewriting a document they could not parse,
so a corrupt file is never silently replaced.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import List, Optional

from playlist_api.app.core.storage import StorageError
from playlist_api.app.models.video import Video

logger = logging.getLogger(__name__)


class VideoRepository:
    """File-backed collection of :class:`Video` entries."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        self._initialise_file()

    def _initialise_file(self) -> None:
        """Create the parent directories and an empty document if needed."""
        if self.path.exists():
            return
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise StorageError(f"Could not initialise data file {self.path}: {exc}") from exc
        self._write_all([])
        logger.info("Created empty playlist document at %s", self.path)

    def find_all(self) -> List[Video]:
        """Return every stored video, in file order.

        Problems reading or parsing the document are logged and yield an
        empty list.
        """
        try:
            return self._load()
        except StorageError as exc:
            logger.warning("%s; treating as empty", exc)
            return []

    def _load(self) -> List[Video]:
        """Parse the document.

        A missing file is an empty collection.  An unreadable file, a
        document that is not a list or a malformed entry raises
        ``StorageError`` so that mutations never rewrite a document they
        could not parse.
        """
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                raw = json.load(f)
        except FileNotFoundError:
            logger.debug("Data file %s does not exist; treating as empty", self.path)
            return []
        except (OSError, json.JSONDecodeError) as exc:
            raise StorageError(f"Could not read data file {self.path}: {exc}") from exc
        if raw is None:
            return []
        if not isinstance(raw, list):
            raise StorageError(f"Data file {self.path} does not contain a list")
        try:
            return [Video.from_dict(item) for item in raw]
        except (KeyError, TypeError, ValueError) as exc:
            raise StorageError(f"Malformed entry in data file {self.path}: {exc!r}") from exc

    def find_by_id(self, video_id: str) -> Optional[Video]:
        for video in self.find_all():
            if video.id == video_id:
                return video
        return None

    def save(self, video: Video) -> Video:
        """Insert or replace ``video`` and rewrite the document.

        Raises ``StorageError`` if the current document cannot be parsed;
        the file is left untouched in that case.
        """
        videos = self._load()
        for index, existing in enumerate(videos):
            if existing.id == video.id:
                videos[index] = video
                break
        else:
            videos.append(video)
        self._write_all(videos)
        return video

    def delete_by_id(self, video_id: str) -> bool:
        """Remove the video with ``video_id``.

        The document is only rewritten when something was removed.
        Returns ``True`` if a video was deleted.  Raises ``StorageError``
        if the current document cannot be parsed.
        """
        videos = self._load()
        remaining = [video for video in videos if video.id != video_id]
        if len(remaining) < len(videos):
            self._write_all(remaining)
            return True
        return False

    def count(self) -> int:
        return len(self.find_all())

    def find_favorites(self) -> List[Video]:
        return [video for video in self.find_all() if video.favorite]

    def find_top_by_likes(self, limit: int) -> List[Video]:
        """Return at most ``limit`` videos ordered by likes, highest first.

        ``sorted`` is stable, so videos with equal likes keep their file
        order.
        """
        ranked = sorted(self.find_all(), key=lambda video: video.likes, reverse=True)
        return ranked[:limit]

    def delete_all(self) -> None:
        """Replace the document with an empty collection, whatever it held."""
        self._write_all([])

    def _write_all(self, videos: List[Video]) -> None:
        try:
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump([video.to_dict() for video in videos], f, indent=2, ensure_ascii=False)
        except OSError as exc:
            raise StorageError(f"Could not save videos to {self.path}: {exc}") from exc
