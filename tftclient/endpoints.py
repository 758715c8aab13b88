"""Function-style access to the TFT endpoints.

Each function takes the API key explicitly, opens a short-lived
:class:`RiotAPIClient` and performs exactly one request. Regions are
required here; the client-side defaults never apply.
"""

import warnings
from typing import Any, Dict, List, Optional

import requests

from .api.config import DEFAULT_MATCH_COUNT
from .api.regions import RoutingRegion
from .api.riot_api import RiotAPIClient
from .api.validation import require_string
from .data.match_normalizer import MatchResult


def _client(api_key: str, session: Optional[requests.Session]) -> RiotAPIClient:
    # The key is always explicit here; the environment is never consulted
    return RiotAPIClient(require_string("api_key", api_key), session=session)


def get_account_by_riot_id(game_name: str, tag_line: str, region: Any, api_key: str,
                           session: Optional[requests.Session] = None) -> Dict[str, Any]:
    """Fetch a Riot account from its game name and tag line.

    Riot IDs are written "GameName#TagLine" (e.g. "Wander#HENRO"); the two
    parts are passed separately here.
    """
    with _client(api_key, session) as client:
        return client.get_account_by_riot_id(game_name, tag_line, RoutingRegion.parse(region, 'region'))


def get_account_by_puuid(puuid: str, region: Any, api_key: str,
                         session: Optional[requests.Session] = None) -> Dict[str, Any]:
    """Fetch a Riot account from its PUUID."""
    with _client(api_key, session) as client:
        return client.get_account_by_puuid(puuid, RoutingRegion.parse(region, 'region'))


def get_region_by_puuid(puuid: str, routing_region: Any, game: Any, api_key: str,
                        session: Optional[requests.Session] = None) -> Dict[str, Any]:
    """Fetch the active shard of a player for "lol" or "tft"."""
    with _client(api_key, session) as client:
        return client.get_region_by_puuid(puuid, RoutingRegion.parse(routing_region), game)


def get_summoner_by_puuid(puuid: str, region: Any, api_key: str,
                          session: Optional[requests.Session] = None) -> Dict[str, Any]:
    """Fetch a TFT summoner from its PUUID on a platform region such as "na1"."""
    with _client(api_key, session) as client:
        return client.get_summoner_by_puuid(puuid, region)


def get_match_ids_by_puuid(puuid: str, routing_region: Any, api_key: str,
                           start: int = 0, count: int = DEFAULT_MATCH_COUNT,
                           start_time: Optional[int] = None, end_time: Optional[int] = None,
                           session: Optional[requests.Session] = None) -> List[str]:
    """Fetch one page of TFT match IDs for a player."""
    with _client(api_key, session) as client:
        return client.get_match_ids_by_puuid(
            puuid, RoutingRegion.parse(routing_region), start=start, count=count,
            start_time=start_time, end_time=end_time,
        )


def get_match_data_by_id(match_id: str, routing_region: Any, api_key: str, raw: bool = False,
                         session: Optional[requests.Session] = None) -> MatchResult:
    """Fetch a TFT match as normalized tables, or the raw document if ``raw``."""
    with _client(api_key, session) as client:
        return client.get_match_data_by_id(match_id, RoutingRegion.parse(routing_region), raw=raw)


def fetch_account_data(game_name: str, tag_line: str, api_key: str,
                       session: Optional[requests.Session] = None) -> Dict[str, Any]:
    """Fetch a Riot account through the americas cluster.

    Deprecated: use :func:`get_account_by_riot_id`, which takes the region.
    """
    warnings.warn(
        "fetch_account_data() is deprecated, use get_account_by_riot_id()",
        DeprecationWarning,
        stacklevel=2,
    )
    return get_account_by_riot_id(game_name, tag_line, RoutingRegion.AMERICAS, api_key, session=session)
