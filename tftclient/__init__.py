"""Teamfight Tactics API Client Package.

A synchronous client for the Riot Games Account-V1, TFT Summoner-V1 and
TFT Match-V1 endpoints, with match documents flattened into related tables.
"""

__version__ = "1.0.0"
__author__ = "TFT API Development Team"

from .api import (
    Config, setup_logging, RiotAPIClient, RiotAPIError, ValidationError, ApiRequestError,
    RoutingRegion, PlatformRegion, Game,
)
from .data import NormalizedMatch, RawMatch, normalize_match, PlayerLookup, PlayerProfile
from .endpoints import (
    get_account_by_riot_id, get_account_by_puuid, get_region_by_puuid, get_summoner_by_puuid,
    get_match_ids_by_puuid, get_match_data_by_id, fetch_account_data,
)

__all__ = [
    'Config', 'setup_logging', 'RiotAPIClient', 'RiotAPIError', 'ValidationError', 'ApiRequestError',
    'RoutingRegion', 'PlatformRegion', 'Game',
    'NormalizedMatch', 'RawMatch', 'normalize_match', 'PlayerLookup', 'PlayerProfile',
    'get_account_by_riot_id', 'get_account_by_puuid', 'get_region_by_puuid', 'get_summoner_by_puuid',
    'get_match_ids_by_puuid', 'get_match_data_by_id', 'fetch_account_data',
]
