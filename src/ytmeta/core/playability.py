"""Playability classification of player responses.

The platform reports playability as a free-form ``status`` code plus a
human-readable ``reason``.  :func:`classify` folds those (together with
the embed flag and the retrieval path) into one :class:`Playability`
outcome.  It is a pure function; raising is left to
:meth:`PlayabilityVerdict.raise_for_status` so callers can inspect a
verdict without exception handling.

Classification rules, in order:

1. ``OK`` is playable, whatever the other inputs are.
2. ``LOGIN_REQUIRED`` covers two causes.  The platform only tells them
   apart in the reason text, so a reason starting with
   :data:`PRIVATE_VIDEO_REASON_PREFIX` means the video is private and
   anything else means a sign-in (age gate, members-only) is needed.
3. A response fetched through the embed path whose video is not
   playable in embeds is reported as such.
4. Everything else is a generic failure carrying status and reason.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass

from ytmeta.exceptions import (
    LoginRequiredError,
    NotPlayableInEmbedError,
    PlayabilityStatusError,
    VideoPrivateError,
)
from ytmeta.schema import PlayerResponse
from ytmeta.utils.logging import get_logger

logger = get_logger(__name__)

STATUS_OK = "OK"
STATUS_LOGIN_REQUIRED = "LOGIN_REQUIRED"
PRIVATE_VIDEO_REASON_PREFIX = "This video is private"


class Playability(enum.Enum):
    OK = "ok"
    VIDEO_PRIVATE = "video_private"
    LOGIN_REQUIRED = "login_required"
    NOT_PLAYABLE_IN_EMBED = "not_playable_in_embed"
    FAILURE = "failure"


@dataclass(frozen=True, slots=True)
class PlayabilityVerdict:
    """Outcome of :func:`classify` with the platform fields it was derived from."""

    kind: Playability
    status: str
    reason: str

    @property
    def ok(self) -> bool:
        return self.kind is Playability.OK

    def raise_for_status(self) -> None:
        """Raise the exception matching this verdict; no-op when playable.

        Raises
        ------
        VideoPrivateError
        LoginRequiredError
        NotPlayableInEmbedError
        PlayabilityStatusError
        """
        if self.kind is Playability.OK:
            return
        if self.kind is Playability.VIDEO_PRIVATE:
            raise VideoPrivateError(hint=self.reason or None)
        if self.kind is Playability.LOGIN_REQUIRED:
            raise LoginRequiredError(
                hint=self.reason or "The video may be age-restricted or members-only.",
            )
        if self.kind is Playability.NOT_PLAYABLE_IN_EMBED:
            raise NotPlayableInEmbedError(
                hint="Retry with the full watch page instead of the embed endpoint.",
            )
        raise PlayabilityStatusError(self.status, self.reason)


def classify(
    status: str,
    reason: str,
    playable_in_embed: bool,
    is_full_page: bool,
) -> PlayabilityVerdict:
    """Classify a playability status/reason pair.

    Parameters
    ----------
    status:
        Platform status code (``"OK"``, ``"LOGIN_REQUIRED"``, ``"ERROR"``, ...).
    reason:
        Free-text explanation supplied by the platform, possibly empty.
    playable_in_embed:
        The platform's embeddability flag.
    is_full_page:
        ``True`` when the response came from a full watch page, ``False``
        when it came from the embed-restricted player-info endpoint.  The
        embeddability check only applies to the latter.
    """
    if status == STATUS_OK:
        kind = Playability.OK
    elif status == STATUS_LOGIN_REQUIRED:
        if reason.startswith(PRIVATE_VIDEO_REASON_PREFIX):
            kind = Playability.VIDEO_PRIVATE
        else:
            kind = Playability.LOGIN_REQUIRED
    elif not is_full_page and not playable_in_embed:
        kind = Playability.NOT_PLAYABLE_IN_EMBED
    else:
        kind = Playability.FAILURE
    return PlayabilityVerdict(kind=kind, status=status, reason=reason)


def ensure_playable(response: PlayerResponse, *, is_full_page: bool) -> PlayabilityVerdict:
    """Classify *response* and raise unless it is playable."""
    playability = response.playability_status
    verdict = classify(
        playability.status,
        playability.reason,
        playability.playable_in_embed,
        is_full_page,
    )
    if not verdict.ok:
        logger.debug(
            "playability_rejected",
            verdict=verdict.kind.value,
            status=verdict.status,
            reason=verdict.reason,
            full_page=is_full_page,
        )
    verdict.raise_for_status()
    return verdict
