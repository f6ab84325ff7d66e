"""Intermediate schema for the platform's player response.

The player response is an externally controlled, loosely typed JSON
tree that changes without notice.  The pydantic models below mirror
only the paths this package reads; everything else is ignored.  The
tree is decoded exactly once, here, so that the core layer works with
typed values only.

Tolerance rules
---------------
* Every section is optional and defaults to an empty value.
* Explicit JSON ``null`` is treated the same as an absent key.
* ``playabilityStatus.status`` is the one required leaf: a response
  without it cannot be classified and is rejected as malformed.
"""

from __future__ import annotations

import json
import re
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from ytmeta.exceptions import MalformedResponseError


class _ResponseModel(BaseModel):
    """Base model: camelCase aliases, unknown keys ignored, nulls dropped."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        if isinstance(data, Mapping):
            return {key: value for key, value in data.items() if value is not None}
        return data


# ---------------------------------------------------------------------------
# playabilityStatus
# ---------------------------------------------------------------------------

class PlayabilityStatus(_ResponseModel):
    status: str
    reason: str = ""
    playable_in_embed: bool = Field(default=False, alias="playableInEmbed")


# ---------------------------------------------------------------------------
# videoDetails
# ---------------------------------------------------------------------------

class RawThumbnail(_ResponseModel):
    url: str = ""
    width: int = 0
    height: int = 0


class ThumbnailList(_ResponseModel):
    thumbnails: list[RawThumbnail] = Field(default_factory=list)


class VideoDetails(_ResponseModel):
    video_id: str = Field(default="", alias="videoId")
    title: str = ""
    short_description: str = Field(default="", alias="shortDescription")
    author: str = ""
    thumbnail: ThumbnailList = Field(default_factory=ThumbnailList)


# ---------------------------------------------------------------------------
# microformat
# ---------------------------------------------------------------------------

class PlayerMicroformatRenderer(_ResponseModel):
    # Both fields stay raw strings; the extractor parses them tolerantly.
    length_seconds: str = Field(default="", alias="lengthSeconds")
    publish_date: str = Field(default="", alias="publishDate")

    @field_validator("length_seconds", "publish_date", mode="before")
    @classmethod
    def _stringify(cls, value: Any) -> str:
        if isinstance(value, str):
            return value
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return ""


class Microformat(_ResponseModel):
    player_microformat_renderer: PlayerMicroformatRenderer = Field(
        default_factory=PlayerMicroformatRenderer,
        alias="playerMicroformatRenderer",
    )


# ---------------------------------------------------------------------------
# streamingData
# ---------------------------------------------------------------------------

class RawFormat(_ResponseModel):
    itag: int
    bitrate: int = 0
    quality_label: str = Field(default="", alias="qualityLabel")
    quality: str = ""
    mime_type: str = Field(default="", alias="mimeType")
    url: str = ""
    signature_cipher: str = Field(default="", alias="signatureCipher")
    width: int = 0
    height: int = 0
    fps: int = 0
    content_length: int = Field(default=0, alias="contentLength")
    average_bitrate: int = Field(default=0, alias="averageBitrate")
    audio_quality: str = Field(default="", alias="audioQuality")
    audio_sample_rate: int = Field(default=0, alias="audioSampleRate")
    audio_channels: int = Field(default=0, alias="audioChannels")
    approx_duration_ms: int = Field(default=0, alias="approxDurationMs")


class StreamingData(_ResponseModel):
    formats: list[RawFormat] = Field(default_factory=list)
    adaptive_formats: list[RawFormat] = Field(default_factory=list, alias="adaptiveFormats")
    hls_manifest_url: str = Field(default="", alias="hlsManifestUrl")
    dash_manifest_url: str = Field(default="", alias="dashManifestUrl")


# ---------------------------------------------------------------------------
# captions
# ---------------------------------------------------------------------------

class CaptionTrack(_ResponseModel):
    base_url: str = Field(default="", alias="baseUrl")
    language_code: str = Field(default="", alias="languageCode")


class TranslationLanguage(_ResponseModel):
    language_code: str = Field(default="", alias="languageCode")


class PlayerCaptionsTracklistRenderer(_ResponseModel):
    caption_tracks: list[CaptionTrack] = Field(default_factory=list, alias="captionTracks")
    translation_languages: list[TranslationLanguage] = Field(
        default_factory=list,
        alias="translationLanguages",
    )


class Captions(_ResponseModel):
    player_captions_tracklist_renderer: PlayerCaptionsTracklistRenderer = Field(
        default_factory=PlayerCaptionsTracklistRenderer,
        alias="playerCaptionsTracklistRenderer",
    )


# ---------------------------------------------------------------------------
# Root
# ---------------------------------------------------------------------------

class PlayerResponse(_ResponseModel):
    """Root of the decoded player response."""

    playability_status: PlayabilityStatus = Field(alias="playabilityStatus")
    video_details: VideoDetails = Field(default_factory=VideoDetails, alias="videoDetails")
    microformat: Microformat = Field(default_factory=Microformat)
    streaming_data: StreamingData = Field(default_factory=StreamingData, alias="streamingData")
    captions: Captions = Field(default_factory=Captions)


# ---------------------------------------------------------------------------
# Decoding entry points
# ---------------------------------------------------------------------------

_INITIAL_PLAYER_RESPONSE = re.compile(r"var ytInitialPlayerResponse\s*=\s*(?=\{)")


def decode_player_response(data: Mapping[str, Any] | str | bytes) -> PlayerResponse:
    """Decode *data* (a parsed tree or raw JSON text) into a :class:`PlayerResponse`.

    Raises
    ------
    MalformedResponseError
        When *data* is not valid JSON or lacks the required structure.
    """
    try:
        if isinstance(data, (str, bytes, bytearray)):
            return PlayerResponse.model_validate_json(data)
        return PlayerResponse.model_validate(data)
    except ValidationError as exc:
        raise MalformedResponseError(
            f"Unable to parse player response JSON: {exc.error_count()} error(s), "
            f"first: {exc.errors()[0]['msg']}",
        ) from exc


def find_initial_player_response(html: str | bytes) -> dict[str, Any]:
    """Return the ``ytInitialPlayerResponse`` object embedded in a watch page.

    Raises
    ------
    MalformedResponseError
        When the page carries no such assignment or its JSON is invalid.
    """
    if isinstance(html, (bytes, bytearray)):
        html = html.decode("utf-8", errors="replace")

    match = _INITIAL_PLAYER_RESPONSE.search(html)
    if match is None:
        raise MalformedResponseError(
            "No ytInitialPlayerResponse found in the server's answer.",
            hint="The page may be a consent or error page rather than a watch page.",
        )

    try:
        payload, _ = json.JSONDecoder().raw_decode(html, match.end())
    except json.JSONDecodeError as exc:
        raise MalformedResponseError(
            f"Unable to parse ytInitialPlayerResponse: {exc.msg}",
        ) from exc

    if not isinstance(payload, dict):
        raise MalformedResponseError("ytInitialPlayerResponse is not a JSON object.")
    return payload
