"""
Helpers for recognising and normalising YouTube links.

Two link shapes carry a video identifier:

* the query-parameter form ``https://www.youtube.com/watch?v=<ID>``
  (the identifier ends at the next ``&``), and
* the short-path form ``https://youtu.be/<ID>`` (the identifier ends at
  the next ``?``).

Both are rewritten to the embeddable form
``https://www.youtube.com/embed/<ID>``.  Links that are already
embeddable, or that carry no recognisable identifier, are returned
unchanged.
"""

import re
from typing import Optional

EMBED_BASE_URL = "https://www.youtube.com/embed/"
EMBED_MARKER = "/embed/"
HOST_MARKERS = ("youtube.com", "youtu.be")

_WATCH_PATTERN = re.compile(r"watch\?v=([^&]+)")
_SHORT_PATTERN = re.compile(r"youtu\.be/([^?]+)")


def is_youtube_url(link: str) -> bool:
    """Return ``True`` if the link mentions a YouTube host."""
    return any(marker in link for marker in HOST_MARKERS)


def is_embeddable(link: str) -> bool:
    return EMBED_MARKER in link


def extract_video_id(link: str) -> Optional[str]:
    """Extract the video identifier from a watch or short link.

    The query-parameter form is tried first.  Returns ``None`` when
    neither form yields a non-empty identifier.
    """
    for pattern in (_WATCH_PATTERN, _SHORT_PATTERN):
        match = pattern.search(link)
        if match:
            return match.group(1)
    return None


def normalize_link(link: Optional[str]) -> Optional[str]:
    """Rewrite a YouTube link to its embeddable form.

    Empty values and links already in embeddable form pass through
    unchanged, which makes the function idempotent.  When no video
    identifier can be extracted the original link is kept as is.
    """
    if not link:
        return link
    if is_embeddable(link):
        return link
    video_id = extract_video_id(link)
    if video_id is not None:
        return EMBED_BASE_URL + video_id
    return link
