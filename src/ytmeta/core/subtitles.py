"""Subtitle table construction from caption descriptors.

The platform advertises human-authored caption tracks plus a list of
languages it can machine-translate into.  Every rendition is reachable
from one base URL by appending query parameters, so the table is
synthesised rather than fetched:

* ``<base>&fmt=<ext>`` for each caption track's own language;
* ``<base>&fmt=<ext>&tlang=<code>`` for each translation language that
  has no human-authored track.

Only the **first** track's base URL is used.  All tracks are assumed
to share it; this is not verified.
"""

from __future__ import annotations

from collections.abc import Sequence

from ytmeta.core.models import Subtitles, SubtitlesNode
from ytmeta.schema import CaptionTrack, TranslationLanguage
from ytmeta.utils.logging import get_logger

logger = get_logger(__name__)

SUBTITLE_EXTENSIONS: tuple[str, ...] = ("srv1", "srv2", "srv3", "ttml", "vtt")
"""Format tags in the order nodes are generated; the first one is the default link."""


def _nodes_for(language_code: str, url_prefix: str, suffix: str = "") -> list[SubtitlesNode]:
    return [
        SubtitlesNode(
            language_code=language_code,
            ext=ext,
            url=f"{url_prefix}&fmt={ext}{suffix}",
        )
        for ext in SUBTITLE_EXTENSIONS
    ]


def build_subtitles(
    caption_tracks: Sequence[CaptionTrack],
    translation_languages: Sequence[TranslationLanguage],
) -> Subtitles:
    """Build the language → renditions table.

    Returns an empty :class:`Subtitles` when there are no caption
    tracks, whatever *translation_languages* holds.  Languages backed
    by a caption track are never replaced by translated renditions.
    """
    if not caption_tracks:
        return Subtitles()

    base_url = caption_tracks[0].base_url
    table: dict[str, list[SubtitlesNode]] = {}

    for track in caption_tracks:
        table.setdefault(track.language_code, []).extend(
            _nodes_for(track.language_code, base_url),
        )

    if not base_url:
        logger.debug("subtitles_without_base_url", tracks=len(caption_tracks))
        return Subtitles(table)

    translated = 0
    for language in translation_languages:
        code = language.language_code
        if table.get(code):
            continue
        table[code] = _nodes_for(code, base_url, f"&tlang={code}")
        translated += 1

    logger.debug(
        "subtitles_built",
        tracks=len(caption_tracks),
        translated=translated,
        languages=len(table),
    )
    return Subtitles(table)
