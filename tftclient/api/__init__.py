"""API module for Riot Games TFT API integration.

This module provides input validation, request building and response
classification for the Account-V1, TFT Summoner-V1 and TFT Match-V1 APIs.
"""

from .config import Config, setup_logging
from .errors import RiotAPIError, ValidationError, ApiRequestError
from .regions import RoutingRegion, PlatformRegion, Game
from .riot_api import RiotAPIClient, classify_response

__all__ = [
    'Config', 'setup_logging', 'RiotAPIError', 'ValidationError', 'ApiRequestError',
    'RoutingRegion', 'PlatformRegion', 'Game', 'RiotAPIClient', 'classify_response',
]
