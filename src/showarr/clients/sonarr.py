"""Sonarr API client."""

from __future__ import annotations

import logging
from collections.abc import Sequence

import httpx

from showarr.clients.base import BaseArrClient
from showarr.models.common import Folder, Profile
from showarr.models.sonarr import AddShowOptions, AddShowRequest, Season, TVShow
from showarr.seasons import find_show, monitor_seasons, reset_seasons

logger = logging.getLogger(__name__)


class SonarrClient(BaseArrClient):
    """Client for interacting with the Sonarr API.

    Example:
        config = ClientConfig(hostname="localhost", port=8989, api_key="...")
        with SonarrClient(config) as client:
            matches = client.search_tv_shows("Breaking Bad")
            folders = client.get_folders()
            profiles = client.get_profiles()
            show = client.add_tv_show(
                matches[0], [1, 2], profiles[0].id, folders[0].path
            )
    """

    def search_tv_shows(self, term: str) -> list[TVShow]:
        """Search the series catalog for new series to add.

        Args:
            term: Search term, e.g. a title or ``tvdb:<id>``

        Returns:
            Matching series in the order Sonarr returned them, at most
            ``max_results`` of them
        """
        shows = self._request("GET", "series/lookup", list[TVShow], params={"term": term})
        if len(shows) > self.max_results:
            shows = shows[: self.max_results]
        return shows

    def get_folders(self) -> list[Folder]:
        """Fetch the configured root folders.

        Returns:
            List of Folder models
        """
        return self._request("GET", "rootfolder", list[Folder])

    def get_profiles(self, path: str = "profile") -> list[Profile]:
        """Fetch quality profiles.

        Args:
            path: Profile endpoint, "profile" on Sonarr v2 or "qualityprofile"
                on later versions

        Returns:
            List of Profile models
        """
        return self._request("GET", path, list[Profile])

    def get_tv_shows(self) -> list[TVShow]:
        """Fetch all series in the library.

        Returns:
            List of TVShow models
        """
        return self._request("GET", "series", list[TVShow])

    def add_tv_show(
        self,
        show: TVShow,
        seasons: Sequence[Season | int],
        quality_profile_id: int,
        root_folder_path: str,
    ) -> TVShow:
        """Add a series to Sonarr, or monitor more seasons of one already there.

        The library is searched by TVDB ID. When the series already exists,
        the requested seasons are switched to monitored and the rest are left
        as they are, then the series is updated. Otherwise the series is added
        with only the requested seasons monitored and a search for missing
        episodes is started.

        Requested seasons the series does not have are ignored.

        Args:
            show: The series to add, usually a search result
            seasons: Seasons (or season numbers) to monitor
            quality_profile_id: Quality profile for a newly added series
            root_folder_path: Root folder for a newly added series

        Returns:
            The series as stored by Sonarr

        Raises:
            httpx.HTTPError: On transport failures
            pydantic.ValidationError: If a response does not match the expected shape
        """
        try:
            existing = find_show(self.get_tv_shows(), show.tvdb_id)

            if existing is not None:
                logger.debug("Series %s already in library, updating", show.tvdb_id)
                updated = existing.model_copy(
                    update={"seasons": monitor_seasons(existing.seasons, seasons)}
                )
                return self._request(
                    "PUT",
                    "series",
                    TVShow,
                    json=updated.model_dump(mode="json", by_alias=True, exclude_unset=True),
                )

            request = AddShowRequest(
                title=show.title,
                title_slug=show.title_slug,
                images=show.images,
                tvdb_id=show.tvdb_id,
                root_folder_path=root_folder_path,
                monitored=True,
                year=show.year,
                seasons=monitor_seasons(reset_seasons(show.seasons), seasons),
                quality_profile_id=quality_profile_id,
                season_folder=True,
                add_options=AddShowOptions(search_for_missing_episodes=True),
            )
            logger.debug("Adding series %s (%s)", show.title, show.tvdb_id)
            return self._request(
                "POST", "series", TVShow, json=request.model_dump(mode="json", by_alias=True)
            )
        except (httpx.HTTPError, ValueError) as e:
            logger.error("Failed to add series %s (%s): %s", show.title, show.tvdb_id, e)
            raise
