"""Public entry point wiring the infrastructure and core layers.

:class:`Client` is the composition root: it resolves the video ID,
builds a :class:`~ytmeta.core.metadata_service.MetadataService` over
the caller's transport, and applies the environment settings.  No
business logic lives here.

Usage::

    client = Client(my_provider)
    video = client.get_video("https://www.youtube.com/watch?v=BaW_jenozKc")
    fmt = video.formats.find_by_quality("medium")
    link = video.subtitles.get_default_link("en")
"""

from __future__ import annotations

from ytmeta.core.metadata_service import MetadataService
from ytmeta.core.models import Video
from ytmeta.core.protocols import PlayerResponseProvider
from ytmeta.infra.video_id import extract_video_id
from ytmeta.utils.config import Settings, get_settings


class Client:
    """Fetch typed video metadata through a caller-supplied transport.

    Parameters
    ----------
    provider:
        Any object satisfying :class:`PlayerResponseProvider`.
    settings:
        Optional explicit settings; defaults to the environment.
    """

    def __init__(
        self,
        provider: PlayerResponseProvider,
        *,
        settings: Settings | None = None,
    ) -> None:
        self.settings: Settings = settings or get_settings()
        self._service = MetadataService(
            provider,
            watch_page_fallback=self.settings.watch_page_fallback,
        )

    def get_video(self, url_or_id: str) -> Video:
        """Return metadata for the video referenced by *url_or_id*.

        Raises
        ------
        InvalidURLError
            If *url_or_id* references no video.
        MetadataExtractionError
            If the response is malformed or has no formats.
        VideoUnavailableError
            If the video is not playable (any subclass).
        """
        return self._service.get_video(extract_video_id(url_or_id))
