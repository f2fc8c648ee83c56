from __future__ import annotations

"""
URL helpers for outbound links and embedded review videos.
"""

import re
from typing import Optional
from urllib.parse import parse_qs, urlparse

from .config import YOUTUBE_EMBED_BASE, YOUTUBE_HOSTS, YOUTUBE_ID_RE

_EMBED_PATH_RE = re.compile(r"^/(embed|shorts|live)/([^/?]+)")


def safe_url(raw: Optional[str]) -> Optional[str]:
    """Return ``raw`` only if it parses as an https URL with a host."""
    if not raw or not isinstance(raw, str):
        return None
    try:
        parsed = urlparse(raw)
    except ValueError:
        return None
    if parsed.scheme != "https" or not parsed.netloc:
        return None
    return raw


def extract_youtube_id(url: Optional[str]) -> Optional[str]:
    """
    Extract a YouTube video id from the common URL formats:

    - ``youtube.com/watch?v=ID``
    - ``youtube.com/embed/ID``, ``/shorts/ID``, ``/live/ID``
    - ``youtu.be/ID``

    Returns None for anything else, including ids that are not 11
    characters of ``[A-Za-z0-9_-]``.
    """
    if not url or not isinstance(url, str):
        return None
    try:
        parsed = urlparse(url)
    except ValueError:
        return None
    if parsed.scheme not in ("http", "https"):
        return None
    host = (parsed.hostname or "").replace("www.", "", 1)

    video_id: Optional[str] = None
    if host in YOUTUBE_HOSTS:
        values = parse_qs(parsed.query).get("v")
        if values and values[0]:
            video_id = values[0]
        if not video_id:
            m = _EMBED_PATH_RE.match(parsed.path)
            if m:
                video_id = m.group(2)
    elif host == "youtu.be":
        video_id = parsed.path[1:].split("/")[0] or None

    if video_id and YOUTUBE_ID_RE.fullmatch(video_id):
        return video_id
    return None


def youtube_embed_url(url: Optional[str]) -> Optional[str]:
    """Privacy-enhanced embed URL for a review video, or None."""
    video_id = extract_youtube_id(url)
    return f"{YOUTUBE_EMBED_BASE}{video_id}" if video_id else None
