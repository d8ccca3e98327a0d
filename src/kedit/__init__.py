"""A small full-screen terminal text editor."""

from .constants import KEDIT_VERSION as __version__

__all__ = ["__version__"]
