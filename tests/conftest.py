"""Shared pytest fixtures and configuration for the ytmeta test suite.

Guidelines
----------
* No internet access in any test.
* Transport is mocked at the provider boundary.
* Core tests must be pure: no side effects.
* Tests must not depend on OS state.
"""

from __future__ import annotations

import copy
from collections.abc import Callable
from typing import Any

import pytest

VIDEO_ID = "BaW_jenozKc"

_BASE_RESPONSE: dict[str, Any] = {
    "playabilityStatus": {
        "status": "OK",
        "playableInEmbed": True,
    },
    "videoDetails": {
        "videoId": VIDEO_ID,
        "title": "youtube-dl test video",
        "shortDescription": "This is a test video for youtube-dl.",
        "author": "Philipp Hagemeister",
        "lengthSeconds": "10",
        "thumbnail": {
            "thumbnails": [
                {"url": "https://i.ytimg.com/vi/BaW_jenozKc/default.jpg", "width": 120, "height": 90},
                {"url": "https://i.ytimg.com/vi/BaW_jenozKc/hqdefault.jpg", "width": 480, "height": 360},
            ],
        },
    },
    "microformat": {
        "playerMicroformatRenderer": {
            "lengthSeconds": "10",
            "publishDate": "2012-10-02",
        },
    },
    "streamingData": {
        "formats": [
            {
                "itag": 18,
                "bitrate": 503_000,
                "quality": "medium",
                "qualityLabel": "360p",
                "mimeType": 'video/mp4; codecs="avc1.42001E, mp4a.40.2"',
                "url": "https://rr1.googlevideo.com/videoplayback?itag=18",
                "width": 640,
                "height": 360,
                "fps": 30,
                "audioChannels": 2,
                "audioSampleRate": "44100",
                "approxDurationMs": "10000",
            },
        ],
        "adaptiveFormats": [
            {
                "itag": 137,
                "bitrate": 4_400_000,
                "quality": "hd1080",
                "qualityLabel": "1080p",
                "mimeType": 'video/mp4; codecs="avc1.640028"',
                "contentLength": "2700000",
            },
            {
                "itag": 140,
                "bitrate": 130_000,
                "quality": "tiny",
                "mimeType": 'audio/mp4; codecs="mp4a.40.2"',
                "audioQuality": "AUDIO_QUALITY_MEDIUM",
                "audioChannels": 2,
            },
        ],
        "hlsManifestUrl": "",
        "dashManifestUrl": "https://manifest.googlevideo.com/api/manifest/dash/id/1",
    },
    "captions": {
        "playerCaptionsTracklistRenderer": {
            "captionTracks": [
                {"baseUrl": "https://x/caption?v=BaW_jenozKc", "languageCode": "en"},
            ],
            "translationLanguages": [
                {"languageCode": "en"},
                {"languageCode": "fr"},
            ],
        },
    },
}


@pytest.fixture
def make_response() -> Callable[..., dict[str, Any]]:
    """Return a factory producing a fresh raw player response dict.

    Keyword overrides replace whole top-level sections, e.g.
    ``make_response(captions={})``.
    """

    def _make(**sections: Any) -> dict[str, Any]:
        raw = copy.deepcopy(_BASE_RESPONSE)
        raw.update(copy.deepcopy(sections))
        return raw

    return _make


@pytest.fixture
def raw_response(make_response: Callable[..., dict[str, Any]]) -> dict[str, Any]:
    return make_response()
