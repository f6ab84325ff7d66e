"""Protocols (interfaces) consumed by the core layer.

These define the contracts that transport adapters must satisfy.  Core
code depends ONLY on these protocols, never on concrete HTTP clients,
preserving the dependency inversion principle.
"""

from __future__ import annotations

from typing import Protocol


class PlayerResponseProvider(Protocol):
    """Contract for fetching raw player data.

    Any object that implements both methods satisfies this protocol
    structurally (no explicit inheritance required).  Implementations
    own retries, timeouts and authentication; the core never retries.
    """

    def fetch_player_info(self, video_id: str) -> str | bytes:
        """Return the player-response JSON from the embed-restricted endpoint.

        Raises
        ------
        YtMetaError
            Implementations should map transport failures to a
            :class:`~ytmeta.exceptions.YtMetaError` subclass; anything
            else is wrapped as ``MetadataExtractionError`` by the service.
        """
        ...  # pragma: no cover

    def fetch_watch_page(self, video_id: str) -> str | bytes:
        """Return the HTML of the full watch page for *video_id*."""
        ...  # pragma: no cover
