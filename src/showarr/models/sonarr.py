"""Sonarr series models."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_serializer

from showarr.models.common import ArrModel, Image


class Season(ArrModel):
    """A season of a series and whether Sonarr monitors it."""

    season_number: int = Field(alias="seasonNumber")
    monitored: bool = False


class TVShow(ArrModel):
    """A series as returned by the lookup and series endpoints.

    Lookup results have no ``id``; it is assigned once the series is added.
    """

    tvdb_id: int = Field(alias="tvdbId")
    title: str
    id: int | None = None
    title_slug: str = Field(default="", alias="titleSlug")
    year: int = 0
    images: list[Image] = Field(default_factory=list)
    seasons: list[Season] = Field(default_factory=list)
    monitored: bool = False
    overview: str | None = None
    status: str | None = None
    network: str | None = None
    path: str | None = None
    remote_poster: str | None = Field(default=None, alias="remotePoster")
    quality_profile_id: int | None = Field(default=None, alias="qualityProfileId")
    season_folder: bool | None = Field(default=None, alias="seasonFolder")


class AddShowOptions(BaseModel):
    """Options applied by Sonarr right after a series is added."""

    model_config = ConfigDict(populate_by_name=True)

    search_for_missing_episodes: bool = Field(
        default=True, alias="searchForMissingEpisodes"
    )


class AddShowRequest(BaseModel):
    """Body of a POST to the series endpoint."""

    model_config = ConfigDict(populate_by_name=True)

    title: str
    title_slug: str = Field(alias="titleSlug")
    images: list[Image]
    tvdb_id: int = Field(alias="tvdbId")
    root_folder_path: str = Field(alias="rootFolderPath")
    monitored: bool = True
    year: int
    seasons: list[Season]
    quality_profile_id: int = Field(alias="qualityProfileId")
    season_folder: bool = Field(default=True, alias="seasonFolder")
    add_options: AddShowOptions = Field(default_factory=AddShowOptions, alias="addOptions")

    @field_serializer("images")
    def _serialize_images(self, images: list[Image]) -> list[dict[str, Any]]:
        # Keys the lookup did not send stay out of the body.
        return [i.model_dump(mode="json", by_alias=True, exclude_unset=True) for i in images]
