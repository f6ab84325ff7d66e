"""Video-ID extraction backed by yt-dlp's YouTube URL matcher.

This module is the **only** place in the codebase that imports
``yt_dlp``.  yt-dlp keeps its ``YoutubeIE`` URL pattern current with
every URL shape the platform uses (watch pages, short links, embeds,
shorts, bare IDs), so the pattern is reused rather than re-derived.
"""

from __future__ import annotations

import re
from typing import Any

from ytmeta.exceptions import EnvironmentError, InvalidURLError

_BARE_ID = re.compile(r"[0-9A-Za-z_-]{11}")


def _load_youtube_extractor() -> Any:
    """Return yt-dlp's ``YoutubeIE`` class or raise ``EnvironmentError``."""
    try:
        from yt_dlp.extractor.youtube import YoutubeIE
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "yt-dlp is not installed. Install with: pip install yt-dlp",
        ) from exc
    return YoutubeIE


def extract_video_id(url_or_id: str) -> str:
    """Return the 11-character video ID referenced by *url_or_id*.

    Raises
    ------
    InvalidURLError
        If *url_or_id* is empty or references no single video.
    EnvironmentError
        If yt-dlp is not installed and *url_or_id* is not a bare ID.
    """
    stripped = url_or_id.strip()
    if not stripped:
        raise InvalidURLError("URL must not be empty.")
    if _BARE_ID.fullmatch(stripped):
        return stripped

    extractor = _load_youtube_extractor()
    video_id = extractor.get_temp_id(stripped)
    if not video_id:
        raise InvalidURLError(
            f"Invalid URL: {stripped}",
            hint="Expected a YouTube video URL or an 11-character video ID.",
        )
    return video_id
