"""API clients for Sonarr."""

from showarr.clients.base import BaseArrClient
from showarr.clients.sonarr import SonarrClient

__all__ = ["BaseArrClient", "SonarrClient"]
