"""Season monitoring helpers used when adding a series to Sonarr.

These functions never modify their inputs. Season and TVShow records are
frozen, so every change produces a new record.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from showarr.models.sonarr import Season, TVShow

SeasonSelection = Iterable[Season | int]


def _season_numbers(requested: SeasonSelection) -> set[int]:
    """Collect season numbers from Season records or bare integers."""
    return {s.season_number if isinstance(s, Season) else int(s) for s in requested}


def monitor_seasons(seasons: Sequence[Season], requested: SeasonSelection) -> list[Season]:
    """Mark the requested seasons as monitored.

    Seasons not listed in ``requested`` keep their current flag. Requested
    numbers that match no season are ignored.

    Args:
        seasons: The seasons of a series, in order
        requested: Seasons (or season numbers) to monitor

    Returns:
        A new list of seasons in the same order
    """
    numbers = _season_numbers(requested)
    return [
        s.model_copy(update={"monitored": True}) if s.season_number in numbers else s
        for s in seasons
    ]


def reset_seasons(seasons: Sequence[Season]) -> list[Season]:
    """Return copies of ``seasons`` with monitoring turned off."""
    return [s.model_copy(update={"monitored": False}) for s in seasons]


def find_show(shows: Iterable[TVShow], tvdb_id: int) -> TVShow | None:
    """Find the first series with the given TVDB ID.

    Args:
        shows: Series to search, typically the whole Sonarr library
        tvdb_id: TVDB ID to match

    Returns:
        The first matching series, or None
    """
    for show in shows:
        if show.tvdb_id == tvdb_id:
            return show
    return None
