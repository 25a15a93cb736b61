"""Pydantic models for API responses."""

from showarr.models.common import Folder, Image, Profile
from showarr.models.sonarr import AddShowOptions, AddShowRequest, Season, TVShow

__all__ = [
    "AddShowOptions",
    "AddShowRequest",
    "Folder",
    "Image",
    "Profile",
    "Season",
    "TVShow",
]
