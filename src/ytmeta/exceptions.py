"""Custom exception hierarchy for ytmeta.

All exceptions that cross layer boundaries must inherit from
:class:`YtMetaError`.  Raw third-party exceptions (pydantic validation
errors, JSON decode errors, transport errors) must NEVER propagate
beyond the boundary that produced them; they must be caught and
re-raised as a typed subclass defined here.

Hierarchy
---------
YtMetaError
├── InvalidURLError
├── MetadataExtractionError
│   ├── MalformedResponseError
│   └── NoFormatsAvailableError
├── VideoUnavailableError
│   ├── VideoPrivateError
│   ├── LoginRequiredError
│   ├── NotPlayableInEmbedError
│   └── PlayabilityStatusError
└── EnvironmentError
"""

from __future__ import annotations


class YtMetaError(Exception):
    """Base exception for all ytmeta errors.

    Every error condition surfaced to callers maps to a subclass of
    this exception so that consumers can handle the whole family with a
    single ``except`` clause.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- URL / identifier validation -------------------------------------------

class InvalidURLError(YtMetaError):
    """Raised when a URL or video ID cannot be recognised."""


# --- Metadata / extraction -------------------------------------------------

class MetadataExtractionError(YtMetaError):
    """Raised when metadata cannot be extracted from a player response."""


class MalformedResponseError(MetadataExtractionError):
    """Raised when the raw response does not have the expected shape."""


class NoFormatsAvailableError(MetadataExtractionError):
    """Raised when a playable response carries no stream formats."""


# --- Playability -----------------------------------------------------------

class VideoUnavailableError(YtMetaError):
    """Raised when the platform reports the video as not playable."""


class VideoPrivateError(VideoUnavailableError):
    """Raised when the video is private."""

    def __init__(self, message: str = "Video is private.", *, hint: str | None = None) -> None:
        super().__init__(message, hint=hint)


class LoginRequiredError(VideoUnavailableError):
    """Raised when the video requires a signed-in session (e.g. age gate)."""

    def __init__(
        self,
        message: str = "Login required to access this video.",
        *,
        hint: str | None = None,
    ) -> None:
        super().__init__(message, hint=hint)


class NotPlayableInEmbedError(VideoUnavailableError):
    """Raised when the video cannot be played through the embed path."""

    def __init__(
        self,
        message: str = "Video is not playable in embed.",
        *,
        hint: str | None = None,
    ) -> None:
        super().__init__(message, hint=hint)


class PlayabilityStatusError(VideoUnavailableError):
    """Raised for any other non-OK playability status.

    Both platform fields are kept verbatim for diagnostics.
    """

    def __init__(self, status: str, reason: str, *, hint: str | None = None) -> None:
        super().__init__(
            f"Cannot playback and download, status: {status}, reason: {reason}",
            hint=hint,
        )
        self.status: str = status
        self.reason: str = reason


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(YtMetaError):
    """Raised when a required runtime dependency is not available."""
