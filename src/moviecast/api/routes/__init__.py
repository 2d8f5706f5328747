from __future__ import annotations

from .movies import mount_movies_api

__all__ = ["mount_movies_api"]
