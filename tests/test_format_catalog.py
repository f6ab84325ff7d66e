"""Tests for the pure format catalog helpers (core/format_catalog.py).

Every test is a pure function call: no I/O, no mocking, no side
effects.  These tests exercise:

* Bitrate sort keys and their stability
* Mime-type and audio-channel filters
* Raw → domain conversion
* Catalog construction from progressive + adaptive lists
"""

from __future__ import annotations

from typing import Any

from ytmeta.core.format_catalog import (
    bitrate_asc_key,
    bitrate_desc_key,
    build_catalog,
    filter_by_audio_channels,
    filter_by_mime_type,
    sort_by_bitrate,
    to_format,
)
from ytmeta.core.models import Format
from ytmeta.schema import RawFormat


# ---------------------------------------------------------------------------
# Factory helpers
# ---------------------------------------------------------------------------

def _fmt(
    *,
    itag: int = 100,
    bitrate: int = 1_000,
    mime_type: str = 'video/mp4; codecs="avc1"',
    audio_channels: int = 0,
) -> Format:
    return Format(
        itag=itag,
        bitrate=bitrate,
        mime_type=mime_type,
        audio_channels=audio_channels,
    )


def _raw(itag: int, bitrate: int = 0, **extra: Any) -> RawFormat:
    return RawFormat.model_validate({"itag": itag, "bitrate": bitrate, **extra})


# ---------------------------------------------------------------------------
# Sort keys
# ---------------------------------------------------------------------------

class TestSortKeys:
    def test_desc_key_orders_highest_first(self) -> None:
        formats = [_fmt(itag=1, bitrate=10), _fmt(itag=2, bitrate=30), _fmt(itag=3, bitrate=20)]
        assert [f.itag for f in sorted(formats, key=bitrate_desc_key)] == [2, 3, 1]

    def test_asc_key_orders_lowest_first(self) -> None:
        formats = [_fmt(itag=1, bitrate=10), _fmt(itag=2, bitrate=30), _fmt(itag=3, bitrate=20)]
        assert [f.itag for f in sorted(formats, key=bitrate_asc_key)] == [1, 3, 2]

    def test_keys_work_with_in_place_sort(self) -> None:
        formats = [_fmt(itag=1, bitrate=5), _fmt(itag=2, bitrate=50)]
        formats.sort(key=bitrate_desc_key)
        assert [f.itag for f in formats] == [2, 1]


class TestSortByBitrate:
    def test_descending_by_default(self) -> None:
        formats = [_fmt(itag=1, bitrate=1), _fmt(itag=2, bitrate=3), _fmt(itag=3, bitrate=2)]
        assert [f.itag for f in sort_by_bitrate(formats)] == [2, 3, 1]

    def test_ascending(self) -> None:
        formats = [_fmt(itag=1, bitrate=1), _fmt(itag=2, bitrate=3), _fmt(itag=3, bitrate=2)]
        assert [f.itag for f in sort_by_bitrate(formats, descending=False)] == [1, 3, 2]

    def test_stable_for_equal_bitrates(self) -> None:
        formats = [
            _fmt(itag=1, bitrate=5),
            _fmt(itag=2, bitrate=9),
            _fmt(itag=3, bitrate=5),
            _fmt(itag=4, bitrate=5),
        ]
        assert [f.itag for f in sort_by_bitrate(formats)] == [2, 1, 3, 4]
        assert [f.itag for f in sort_by_bitrate(formats, descending=False)] == [1, 3, 4, 2]

    def test_zero_bitrate_sorted_last(self) -> None:
        formats = [_fmt(itag=1, bitrate=0), _fmt(itag=2, bitrate=7)]
        assert [f.itag for f in sort_by_bitrate(formats)] == [2, 1]

    def test_input_not_mutated(self) -> None:
        formats = [_fmt(itag=1, bitrate=1), _fmt(itag=2, bitrate=3)]
        sort_by_bitrate(formats)
        assert [f.itag for f in formats] == [1, 2]

    def test_empty_input(self) -> None:
        assert sort_by_bitrate([]) == []


# ---------------------------------------------------------------------------
# Filters
# ---------------------------------------------------------------------------

class TestFilters:
    def test_filter_by_mime_type_substring(self) -> None:
        mp4 = _fmt(itag=1, mime_type='video/mp4; codecs="avc1"')
        webm = _fmt(itag=2, mime_type='video/webm; codecs="vp9"')
        audio = _fmt(itag=3, mime_type='audio/mp4; codecs="mp4a.40.2"')
        assert filter_by_mime_type([mp4, webm, audio], "video/mp4") == [mp4]
        assert filter_by_mime_type([mp4, webm, audio], "mp4") == [mp4, audio]
        assert filter_by_mime_type([mp4, webm, audio], "audio") == [audio]

    def test_filter_by_mime_type_no_match(self) -> None:
        assert filter_by_mime_type([_fmt()], "audio/webm") == []

    def test_filter_by_audio_channels(self) -> None:
        stereo = _fmt(itag=1, audio_channels=2)
        surround = _fmt(itag=2, audio_channels=6)
        silent = _fmt(itag=3)
        assert filter_by_audio_channels([stereo, surround, silent], 2) == [stereo]
        assert filter_by_audio_channels([stereo, surround, silent], 0) == [silent]


# ---------------------------------------------------------------------------
# Raw → domain
# ---------------------------------------------------------------------------

class TestToFormat:
    def test_copies_fields(self) -> None:
        raw = _raw(
            22,
            1_200_000,
            qualityLabel="720p",
            quality="hd720",
            mimeType="video/mp4",
            url="https://v/22",
            width=1280,
            height=720,
            fps=30,
            contentLength="123",
            audioChannels=2,
        )
        fmt = to_format(raw)
        assert fmt == Format(
            itag=22,
            bitrate=1_200_000,
            quality_label="720p",
            quality="hd720",
            mime_type="video/mp4",
            url="https://v/22",
            width=1280,
            height=720,
            fps=30,
            content_length=123,
            audio_channels=2,
        )


# ---------------------------------------------------------------------------
# Catalog construction
# ---------------------------------------------------------------------------

class TestBuildCatalog:
    def test_sorted_by_bitrate_desc(self) -> None:
        col = build_catalog([_raw(18, 500)], [_raw(137, 4_000), _raw(140, 130)])
        assert col.itags() == (137, 18, 140)

    def test_progressive_ahead_of_adaptive_on_ties(self) -> None:
        col = build_catalog([_raw(18, 500), _raw(22, 500)], [_raw(135, 500), _raw(137, 900)])
        assert col.itags() == (137, 18, 22, 135)

    def test_is_stable_permutation_of_concatenation(self) -> None:
        progressive = [_raw(18, 3), _raw(22, 1)]
        adaptive = [_raw(137, 3), _raw(140, 0), _raw(251, 1), _raw(18, 3)]
        col = build_catalog(progressive, adaptive)
        concatenated = [to_format(r) for r in (*progressive, *adaptive)]
        assert sorted(col, key=lambda f: f.itag) == sorted(concatenated, key=lambda f: f.itag)
        assert col.itags() == (18, 137, 18, 22, 251, 140)
        bitrates = [f.bitrate for f in col]
        assert bitrates == sorted(bitrates, reverse=True)

    def test_duplicates_kept(self) -> None:
        col = build_catalog([_raw(18, 5)], [_raw(18, 5)])
        assert len(col) == 2

    def test_empty_inputs_give_empty_collection(self) -> None:
        assert not build_catalog([], [])
