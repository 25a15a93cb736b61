"""Models for Sonarr resources that are not specific to a series."""

from pydantic import BaseModel, ConfigDict, Field


class ArrModel(BaseModel):
    """Base for records returned by the API.

    Records are immutable, accept both the camelCase wire name and the Python
    attribute name, and keep any fields they do not declare so they can be
    sent back unchanged.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="allow")


class Image(ArrModel):
    """A poster, banner or fanart reference."""

    cover_type: str = Field(alias="coverType")
    url: str = ""
    remote_url: str | None = Field(default=None, alias="remoteUrl")


class Folder(ArrModel):
    """A root folder new series can be placed under."""

    path: str
    id: int | None = None
    free_space: int | None = Field(default=None, alias="freeSpace")


class Profile(ArrModel):
    """A quality profile."""

    id: int
    name: str
