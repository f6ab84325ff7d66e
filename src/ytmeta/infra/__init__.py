"""Infrastructure layer: external system integration.

This layer wraps all interaction with yt-dlp.  Every raw third-party
exception must be caught here and re-raised as a
:class:`~ytmeta.exceptions.YtMetaError` subclass.

Rules
-----
* No user-facing output.
* Must expose clean, typed interfaces consumed by the upper layers.
"""

from ytmeta.infra.video_id import extract_video_id

__all__: list[str] = ["extract_video_id"]
