"""ytmeta: YouTube player-response metadata extraction.

Turns the platform's loosely-typed player response into immutable,
typed video metadata with a strict layered architecture.
"""

from ytmeta.version import __version__

__all__: list[str] = ["__version__"]
