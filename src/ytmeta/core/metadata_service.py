"""Core metadata extraction: player response to :class:`Video`.

Module-level functions do the pure work:

* :func:`extract` maps an already-approved :class:`PlayerResponse` onto
  the domain model.
* :func:`parse_video_info` / :func:`parse_video_page` decode a raw body,
  classify it for the retrieval path it came from, then extract.

:class:`MetadataService` orchestrates those over a
:class:`~ytmeta.core.protocols.PlayerResponseProvider` injected at
construction time, keeping the core free of transport imports.

Guarantees
----------
* Either a fully populated :class:`Video` or one typed exception; never
  a partial result.
* Only :class:`~ytmeta.exceptions.YtMetaError` subclasses escape.
* Extraction is deterministic: the same input yields equal videos.
"""

from __future__ import annotations

import datetime
import re
from collections.abc import Callable
from typing import Any

from ytmeta.core.format_catalog import build_catalog
from ytmeta.core.models import Thumbnail, Video
from ytmeta.core.playability import ensure_playable
from ytmeta.core.protocols import PlayerResponseProvider
from ytmeta.core.subtitles import build_subtitles
from ytmeta.exceptions import (
    MetadataExtractionError,
    NoFormatsAvailableError,
    NotPlayableInEmbedError,
    YtMetaError,
)
from ytmeta.schema import (
    PlayerResponse,
    decode_player_response,
    find_initial_player_response,
)
from ytmeta.utils.logging import get_logger

logger = get_logger(__name__)

DATE_FORMAT = "%Y-%m-%d"

# ASCII digits only; \d and int() also accept other Unicode digits.
_DURATION_PATTERN = re.compile(r"[+-]?[0-9]+")
_DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


# ---------------------------------------------------------------------------
# Tolerant field parsers (pure)
# ---------------------------------------------------------------------------

def parse_duration(raw: str) -> int:
    """Return *raw* as a positive number of seconds, else ``0``."""
    if not _DURATION_PATTERN.fullmatch(raw):
        return 0
    seconds = int(raw)
    return seconds if seconds > 0 else 0


def parse_publish_date(raw: str) -> datetime.date | None:
    """Return *raw* (``YYYY-MM-DD``) as a date, or ``None`` when unparsable."""
    if not _DATE_PATTERN.fullmatch(raw):
        return None
    try:
        return datetime.datetime.strptime(raw, DATE_FORMAT).date()
    except ValueError:
        return None


# ---------------------------------------------------------------------------
# Extraction
# ---------------------------------------------------------------------------

def extract(response: PlayerResponse, *, video_id: str = "") -> Video:
    """Build a :class:`Video` from an approved player response.

    The caller is expected to have classified *response* first (see
    :func:`~ytmeta.core.playability.ensure_playable`).

    Raises
    ------
    NoFormatsAvailableError
        If neither the progressive nor the adaptive format list has entries.
    """
    details = response.video_details
    microformat = response.microformat.player_microformat_renderer
    streaming = response.streaming_data
    captions = response.captions.player_captions_tracklist_renderer

    formats = build_catalog(streaming.formats, streaming.adaptive_formats)
    if not formats:
        raise NoFormatsAvailableError(
            "No formats found in the server's answer.",
            hint="The video may be a live stream that has not started or has been removed.",
        )

    subtitles = build_subtitles(captions.caption_tracks, captions.translation_languages)

    video = Video(
        id=video_id or details.video_id,
        title=details.title,
        description=details.short_description,
        author=details.author,
        duration=parse_duration(microformat.length_seconds),
        publish_date=parse_publish_date(microformat.publish_date),
        formats=formats,
        thumbnails=tuple(
            Thumbnail(url=thumb.url, width=thumb.width, height=thumb.height)
            for thumb in details.thumbnail.thumbnails
        ),
        subtitles=subtitles,
        dash_manifest_url=streaming.dash_manifest_url,
        hls_manifest_url=streaming.hls_manifest_url,
    )
    logger.debug(
        "video_extracted",
        video_id=video.id,
        formats=len(video.formats),
        subtitle_languages=len(video.subtitles),
    )
    return video


def parse_video_info(body: str | bytes | dict[str, Any], *, video_id: str = "") -> Video:
    """Decode a player-info (embed path) response and extract its video.

    Raises
    ------
    MalformedResponseError
        If *body* cannot be decoded.
    VideoUnavailableError
        If the response is not playable (any subclass).
    NoFormatsAvailableError
        If the playable response lists no formats.
    """
    response = decode_player_response(body)
    ensure_playable(response, is_full_page=False)
    return extract(response, video_id=video_id)


def parse_video_page(html: str | bytes, *, video_id: str = "") -> Video:
    """Extract the video from a full watch page.

    Raises the same exceptions as :func:`parse_video_info`, except that
    :class:`~ytmeta.exceptions.NotPlayableInEmbedError` never occurs.
    """
    response = decode_player_response(find_initial_player_response(html))
    ensure_playable(response, is_full_page=True)
    return extract(response, video_id=video_id)


# ---------------------------------------------------------------------------
# Service
# ---------------------------------------------------------------------------

class MetadataService:
    """Stateless service fetching and extracting video metadata.

    Parameters
    ----------
    provider:
        Any object satisfying the :class:`PlayerResponseProvider` protocol.
    watch_page_fallback:
        When ``True``, a video rejected as not playable in embeds is
        retried through the full watch page.
    """

    def __init__(
        self,
        provider: PlayerResponseProvider,
        *,
        watch_page_fallback: bool = True,
    ) -> None:
        self._provider: PlayerResponseProvider = provider
        self._watch_page_fallback: bool = watch_page_fallback

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def get_video(self, video_id: str) -> Video:
        """Fetch and extract metadata for *video_id*.

        Raises
        ------
        MetadataExtractionError
            If the provider fails or the response is malformed or empty.
        VideoUnavailableError
            If the video is not playable (any subclass).
        """
        body = self._fetch(self._provider.fetch_player_info, video_id)
        try:
            return parse_video_info(body, video_id=video_id)
        except NotPlayableInEmbedError:
            if not self._watch_page_fallback:
                raise
            logger.warning("embed_not_playable_using_watch_page", video_id=video_id)

        html = self._fetch(self._provider.fetch_watch_page, video_id)
        return parse_video_page(html, video_id=video_id)

    # ------------------------------------------------------------------
    # Provider delegation (safe boundary)
    # ------------------------------------------------------------------

    @staticmethod
    def _fetch(fetch: Callable[[str], str | bytes], video_id: str) -> str | bytes:
        """Call the provider and ensure only our exceptions escape."""
        try:
            return fetch(video_id)
        except YtMetaError:
            # Already one of ours; let it propagate unchanged.
            raise
        except Exception as exc:
            raise MetadataExtractionError(
                f"Unexpected provider error: {exc}",
            ) from exc
