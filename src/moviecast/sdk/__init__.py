from __future__ import annotations

from .client import MovieCastClient

__all__ = ["MovieCastClient"]
