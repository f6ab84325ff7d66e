"""Core / service layer: pure business logic and data transformations.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``infra``.
* All functions must be fully typed and deterministic.
"""

from ytmeta.core.metadata_service import MetadataService, extract, parse_video_info, parse_video_page
from ytmeta.core.models import Format, FormatCollection, Subtitles, SubtitlesNode, Thumbnail, Video
from ytmeta.core.playability import Playability, PlayabilityVerdict, classify
from ytmeta.core.protocols import PlayerResponseProvider
from ytmeta.core.subtitles import SUBTITLE_EXTENSIONS, build_subtitles

__all__: list[str] = [
    "SUBTITLE_EXTENSIONS",
    "Format",
    "FormatCollection",
    "MetadataService",
    "Playability",
    "PlayabilityVerdict",
    "PlayerResponseProvider",
    "Subtitles",
    "SubtitlesNode",
    "Thumbnail",
    "Video",
    "build_subtitles",
    "classify",
    "extract",
    "parse_video_info",
    "parse_video_page",
]
