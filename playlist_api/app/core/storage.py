"""
JSON file storage wiring.

This module resolves the location of the playlist document
(``get_data_path``), hands out repositories bound to it
(``get_repository``) and creates the document on application start
(``init_storage``).  The whole collection lives in a single JSON file;
there is no locking, so concurrent writers can overwrite each other's
changes (last writer wins).  The service is meant for a single
interactive user.
"""

import os
from pathlib import Path

from .config import settings


class StorageError(RuntimeError):
    """Raised when the playlist document cannot be created or written."""


def get_data_path() -> str:
    """Compute the path to the JSON data file.

    If ``settings.data_file`` is an absolute path, use it directly.
    Otherwise resolve it relative to the project root.
    """
    data_file = settings.data_file
    if os.path.isabs(data_file):
        return data_file
    base_dir = Path(__file__).resolve().parent.parent.parent.parent  # project root
    return str((base_dir / data_file).resolve())


def get_repository():
    """Return a ``VideoRepository`` bound to the configured data file.

    A new repository is built on every call so that changes to
    ``settings.data_file`` take effect immediately.
    """
    from playlist_api.app.repositories.video_repository import VideoRepository

    return VideoRepository(get_data_path())


def init_storage() -> None:
    """Create the data file (an empty collection) if it does not exist."""
    get_repository()
