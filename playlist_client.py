"""Playlist API client.

A thin wrapper around the playlist JSON API built on the ``requests``
library.  It exposes one method per endpoint:

* :meth:`list_videos` – return every video.
* :meth:`get_video` – fetch a single video by its identifier.
* :meth:`add_video` – add a video from a name and a YouTube link.
* :meth:`delete_video` – remove a video.
* :meth:`like_video` – add a like to a video.
* :meth:`toggle_favorite` – flip the favorite flag of a video.
* :meth:`get_stats` – return the playlist statistics.
* :meth:`top_videos` – return the most liked videos.

Every method returns a ``(data, error)`` tuple.  On success ``error``
is ``None``; on failure ``data`` is empty and ``error`` is a dictionary
with the keys ``status_code`` and ``message``.  The client never raises
for HTTP or connection errors.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class PlaylistAPI:
    """Client for interacting with the playlist API."""

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the service, e.g. ``http://localhost:8080``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Timeout in seconds applied to every request.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helper
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, data: Dict[str, Any] | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``DELETE``).
            path: Path relative to :attr:`base_url` (e.g. ``/api/videos``).
            data: Form fields to send with the request.
        Returns:
            A tuple ``(data, error)``.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                data=data,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    message = err_json.get("message") or err_json.get("detail") or str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    # ------------------------------------------------------------------
    # Video operations
    # ------------------------------------------------------------------
    def list_videos(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        data, error = self._request("GET", "/api/videos")
        if error:
            return [], error
        return data or [], None

    def get_video(self, video_id: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", f"/api/videos/{video_id}")

    def add_video(self, nombre: str, link: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Add a video.

        Returns:
            A tuple ``(video, error)`` where ``video`` is the stored
            entry, including its normalised link.
        """
        data, error = self._request("POST", "/api/videos", data={"nombre": nombre, "link": link})
        if error:
            return None, error
        return data.get("video"), None

    def delete_video(self, video_id: str) -> Tuple[bool, Optional[Error]]:
        _, error = self._request("DELETE", f"/api/videos/{video_id}")
        return error is None, error

    def like_video(self, video_id: str) -> Tuple[Optional[int], Optional[Error]]:
        """Add a like.  Returns the new like count."""
        data, error = self._request("POST", f"/api/videos/{video_id}/like")
        if error:
            return None, error
        return data.get("likes"), None

    def toggle_favorite(self, video_id: str) -> Tuple[Optional[bool], Optional[Error]]:
        """Flip the favorite flag.  Returns the new flag value."""
        data, error = self._request("POST", f"/api/videos/{video_id}/favorito")
        if error:
            return None, error
        return data.get("favorito"), None

    # ------------------------------------------------------------------
    # Aggregates
    # ------------------------------------------------------------------
    def get_stats(self) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", "/api/stats")

    def top_videos(self, amount: int) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        data, error = self._request("GET", f"/api/videos/top/{amount}")
        if error:
            return [], error
        return data or [], None
