"""Pure format ordering, filtering, and catalog construction.

Every function in this module is a **pure** transformation: no I/O,
no side effects, fully deterministic, and trivially unit-testable.

Ordering
--------
Catalogs are ordered by bitrate, highest first.  Python's ``sorted`` is
stable, so formats with equal bitrate keep their original relative
order: progressive formats stay ahead of adaptive formats of the same
bitrate because they are concatenated first.
"""

from __future__ import annotations

from collections.abc import Sequence

from ytmeta.core.models import Format, FormatCollection
from ytmeta.schema import RawFormat


# ---------------------------------------------------------------------------
# 1. Sort keys
# ---------------------------------------------------------------------------

def bitrate_desc_key(fmt: Format) -> int:
    """Sort key placing the highest bitrate first."""
    return -fmt.bitrate


def bitrate_asc_key(fmt: Format) -> int:
    """Sort key placing the lowest bitrate first."""
    return fmt.bitrate


def sort_by_bitrate(
    formats: Sequence[Format],
    *,
    descending: bool = True,
) -> list[Format]:
    """Stable sort of *formats* by bitrate."""
    key = bitrate_desc_key if descending else bitrate_asc_key
    return sorted(formats, key=key)


# ---------------------------------------------------------------------------
# 2. Filters
# ---------------------------------------------------------------------------

def filter_by_mime_type(
    formats: Sequence[Format],
    value: str,
) -> list[Format]:
    """Return formats whose mime type contains *value* (e.g. ``"video/mp4"``)."""
    return [fmt for fmt in formats if value in fmt.mime_type]


def filter_by_audio_channels(
    formats: Sequence[Format],
    channels: int,
) -> list[Format]:
    """Return formats carrying exactly *channels* audio channels."""
    return [fmt for fmt in formats if fmt.audio_channels == channels]


# ---------------------------------------------------------------------------
# 3. Raw → domain conversion
# ---------------------------------------------------------------------------

def to_format(raw: RawFormat) -> Format:
    """Convert one decoded response format into a :class:`Format`."""
    return Format(
        itag=raw.itag,
        bitrate=raw.bitrate,
        quality_label=raw.quality_label,
        quality=raw.quality,
        mime_type=raw.mime_type,
        url=raw.url,
        signature_cipher=raw.signature_cipher,
        width=raw.width,
        height=raw.height,
        fps=raw.fps,
        content_length=raw.content_length,
        average_bitrate=raw.average_bitrate,
        audio_quality=raw.audio_quality,
        audio_sample_rate=raw.audio_sample_rate,
        audio_channels=raw.audio_channels,
        approx_duration_ms=raw.approx_duration_ms,
    )


# ---------------------------------------------------------------------------
# Composite pipeline
# ---------------------------------------------------------------------------

def build_catalog(
    progressive: Sequence[RawFormat],
    adaptive: Sequence[RawFormat],
) -> FormatCollection:
    """Concatenate progressive then adaptive formats and sort by bitrate desc.

    Duplicates are kept.  Returns an empty collection when both inputs
    are empty; deciding whether that is an error is the caller's job.
    """
    combined = [to_format(raw) for raw in (*progressive, *adaptive)]
    return FormatCollection(formats=tuple(sort_by_bitrate(combined)))

