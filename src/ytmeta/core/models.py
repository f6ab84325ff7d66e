"""Domain models for ytmeta.

All models are **immutable** value objects (frozen dataclasses, plus a
read-only mapping for subtitles) with no behaviour beyond data access
and lookups.  They carry zero I/O and zero dependencies on external
packages.
"""

from __future__ import annotations

import datetime
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import overload


# ---------------------------------------------------------------------------
# Individual format descriptor
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Format:
    """A single stream format advertised in the player response.

    Only ``itag``, ``bitrate`` and ``quality_label`` carry meaning for
    this package; the remaining fields are passed through untouched for
    downstream consumers (downloaders, muxers).
    """

    itag: int
    """Platform encoding/quality profile identifier."""

    bitrate: int = 0
    """Peak bitrate in bits per second; ``0`` for some adaptive streams."""

    quality_label: str = ""
    """Human-readable quality (e.g. ``720p60``); empty for audio streams."""

    quality: str = ""
    mime_type: str = ""
    url: str = ""
    signature_cipher: str = ""
    width: int = 0
    height: int = 0
    fps: int = 0
    content_length: int = 0
    average_bitrate: int = 0
    audio_quality: str = ""
    audio_sample_rate: int = 0
    audio_channels: int = 0
    approx_duration_ms: int = 0

    @property
    def has_audio(self) -> bool:
        """``True`` for audio-only and progressive (muxed) streams."""
        return self.mime_type.startswith("audio/") or self.audio_channels > 0

    @property
    def has_video(self) -> bool:
        return self.mime_type.startswith("video/")


# ---------------------------------------------------------------------------
# Typed collection wrapper
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class FormatCollection:
    """Immutable, ordered collection of :class:`Format` entries.

    The tuple guarantees immutability.  Lookups scan in the current
    order, so the first match of a bitrate-sorted collection is the
    highest-bitrate match.
    """

    formats: tuple[Format, ...] = ()

    def __len__(self) -> int:
        return len(self.formats)

    def __bool__(self) -> bool:
        return len(self.formats) > 0

    def __iter__(self) -> Iterator[Format]:
        return iter(self.formats)

    @overload
    def __getitem__(self, index: int) -> Format: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[Format, ...]: ...

    def __getitem__(self, index: int | slice) -> Format | tuple[Format, ...]:
        return self.formats[index]

    def find_by_itag(self, itag: int) -> Format | None:
        """Return the first format with *itag*, or ``None``."""
        for fmt in self.formats:
            if fmt.itag == itag:
                return fmt
        return None

    def find_by_quality(self, quality: str) -> Format | None:
        """Return the first format whose quality label (or coarse quality) equals *quality*."""
        for fmt in self.formats:
            if fmt.quality_label == quality or fmt.quality == quality:
                return fmt
        return None

    def itags(self) -> tuple[int, ...]:
        return tuple(fmt.itag for fmt in self.formats)


# ---------------------------------------------------------------------------
# Thumbnails
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Thumbnail:
    url: str
    width: int = 0
    height: int = 0


# ---------------------------------------------------------------------------
# Subtitles
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class SubtitlesNode:
    """One downloadable rendition of a subtitle track."""

    language_code: str
    ext: str
    """Format tag, one of :data:`ytmeta.core.subtitles.SUBTITLE_EXTENSIONS`."""

    url: str
    """Fully qualified URL, query parameters included."""


class Subtitles(Mapping[str, tuple[SubtitlesNode, ...]]):
    """Read-only mapping of language code to its subtitle renditions.

    Node order within a language is the fixed extension order used when
    the table was built, which makes :meth:`get_default_link`
    deterministic.
    """

    __slots__ = ("_table",)

    def __init__(
        self,
        table: Mapping[str, Iterable[SubtitlesNode]] | None = None,
    ) -> None:
        frozen = {code: tuple(nodes) for code, nodes in (table or {}).items()}
        self._table: Mapping[str, tuple[SubtitlesNode, ...]] = MappingProxyType(frozen)

    def __getitem__(self, language_code: str) -> tuple[SubtitlesNode, ...]:
        return self._table[language_code]

    def __iter__(self) -> Iterator[str]:
        return iter(self._table)

    def __len__(self) -> int:
        return len(self._table)

    # Mapping.__eq__ disables hashing; restore it so Video stays hashable.
    def __hash__(self) -> int:
        return hash(frozenset(self._table.items()))

    def __repr__(self) -> str:
        return f"Subtitles({dict(self._table)!r})"

    @property
    def languages(self) -> tuple[str, ...]:
        return tuple(self._table)

    def get_default_link(self, language_code: str) -> str:
        """Return the URL of the first node for *language_code*, or ``""``."""
        nodes = self._table.get(language_code)
        if not nodes:
            return ""
        return nodes[0].url

    def get_link(self, language_code: str, ext: str) -> str:
        """Return the URL for *language_code* rendered as *ext*, or ``""``."""
        for node in self._table.get(language_code, ()):
            if node.ext == ext:
                return node.url
        return ""


# ---------------------------------------------------------------------------
# Video (aggregate root)
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Video:
    """Top-level metadata for a single video, built once per extraction."""

    id: str
    title: str
    description: str
    author: str

    duration: int
    """Duration in seconds, ``0`` when unavailable."""

    publish_date: datetime.date | None
    """Publication date, ``None`` when missing or unparsable."""

    formats: FormatCollection
    """Bitrate-descending catalog, never empty."""

    thumbnails: tuple[Thumbnail, ...] = ()
    subtitles: Subtitles = field(default_factory=Subtitles)
    dash_manifest_url: str = ""
    hls_manifest_url: str = ""
