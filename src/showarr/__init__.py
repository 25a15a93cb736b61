"""showarr - Search and add TV shows through the Sonarr API.

A small synchronous Python client for Sonarr: look up series, list root
folders, quality profiles and the library, and add series with a chosen set
of monitored seasons.

Quick Start
-----------
Connect and search::

    from showarr import ClientConfig, SonarrClient

    config = ClientConfig(
        hostname="localhost",
        port=8989,
        api_key="0123456789abcdef0123456789abcdef",
    )
    with SonarrClient(config) as client:
        shows = client.search_tv_shows("The Expanse")

Add a series with seasons 1 and 2 monitored::

    folder = client.get_folders()[0]
    profile = client.get_profiles()[0]
    added = client.add_tv_show(shows[0], [1, 2], profile.id, folder.path)

If the series is already in the library, the requested seasons are switched
to monitored on the existing entry instead.

CLI Usage
---------
::

    showarr search "The Expanse"
    showarr add 280619 --season 1 --season 2 --profile 1 --folder /tv

Classes
-------
SonarrClient
    Client for the Sonarr API.
ClientConfig
    Connection settings (host, port, API key, credentials).
"""

from showarr.clients.sonarr import SonarrClient
from showarr.config import ClientConfig, ConfigurationError, InvalidAPIKey, InvalidConfiguration
from showarr.models import Folder, Profile, Season, TVShow

__version__ = "0.1.0"

__all__ = [
    "ClientConfig",
    "ConfigurationError",
    "Folder",
    "InvalidAPIKey",
    "InvalidConfiguration",
    "Profile",
    "Season",
    "SonarrClient",
    "TVShow",
    "__version__",
]
