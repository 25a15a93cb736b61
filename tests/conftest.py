"""Shared fixtures for showarr tests."""

from typing import Any

import pytest

from showarr.config import ClientConfig

API_KEY = "0123456789abcdef0123456789abcdef"
BASE_URL = "http://sonarr:8989/api"


@pytest.fixture
def api_key() -> str:
    """A well-formed Sonarr API key."""
    return API_KEY


@pytest.fixture
def client_config() -> ClientConfig:
    """Config pointing at http://sonarr:8989/api."""
    return ClientConfig(hostname="sonarr", port=8989, api_key=API_KEY, max_results=5)


@pytest.fixture
def sample_lookup_response() -> list[dict[str, Any]]:
    """Lookup results as returned by series/lookup (no internal IDs)."""
    return [
        {
            "title": "Breaking Bad",
            "titleSlug": "breaking-bad",
            "tvdbId": 81189,
            "year": 2008,
            "overview": "A chemistry teacher turns to crime.",
            "remotePoster": "https://artworks.thetvdb.com/banners/posters/81189-10.jpg",
            "images": [
                {
                    "coverType": "poster",
                    "url": "https://artworks.thetvdb.com/banners/posters/81189-10.jpg",
                },
                {
                    "coverType": "fanart",
                    "url": "https://artworks.thetvdb.com/banners/fanart/original/81189-21.jpg",
                },
            ],
            "seasons": [
                {"seasonNumber": 0, "monitored": False},
                {"seasonNumber": 1, "monitored": True},
                {"seasonNumber": 2, "monitored": True},
            ],
        },
        {
            "title": "Better Call Saul",
            "titleSlug": "better-call-saul",
            "tvdbId": 273181,
            "year": 2015,
            "images": [],
            "seasons": [{"seasonNumber": 1, "monitored": True}],
        },
        {
            "title": "El Camino",
            "titleSlug": "el-camino",
            "tvdbId": 999001,
            "year": 2019,
            "images": [],
            "seasons": [],
        },
    ]


@pytest.fixture
def sample_series_response() -> list[dict[str, Any]]:
    """Library entries as returned by GET series."""
    return [
        {
            "id": 1,
            "title": "The Expanse",
            "titleSlug": "the-expanse",
            "tvdbId": 280619,
            "year": 2015,
            "monitored": True,
            "path": "/tv/The Expanse",
            "qualityProfileId": 4,
            "seasonFolder": True,
            "tags": [2],
            "images": [{"coverType": "poster", "url": "/MediaCover/1/poster.jpg"}],
            "seasons": [
                {
                    "seasonNumber": 1,
                    "monitored": False,
                    "statistics": {"episodeCount": 10, "episodeFileCount": 10},
                },
                {
                    "seasonNumber": 2,
                    "monitored": False,
                    "statistics": {"episodeCount": 13, "episodeFileCount": 0},
                },
            ],
        },
        {
            "id": 2,
            "title": "Severance",
            "titleSlug": "severance",
            "tvdbId": 371980,
            "year": 2022,
            "monitored": True,
            "path": "/tv/Severance",
            "seasons": [{"seasonNumber": 1, "monitored": True}],
        },
    ]
