"""Configuration module for the TFT API client.

This module handles optional environment-based configuration, API key
sanity checks, endpoint constants and logging setup.
"""

import os
import re
import logging
from pathlib import Path
from typing import Optional, Dict
from dotenv import load_dotenv

from .. import __version__

# Load environment variables
load_dotenv()


class Config:
    """Environment-backed configuration for the API client.

    Explicit arguments passed to the client always win over these values.
    A client built from a ``Config`` uses its routing region and match count
    whenever a call leaves them out.

    Attributes:
        api_key (str): Validated API key for Riot API access
        request_timeout (Optional[float]): Transport timeout in seconds, None for no timeout
        default_routing_region (str): Routing cluster used when a caller omits one
        default_match_count (int): Default page size for match ID listings
    """

    def __init__(self, api_key: Optional[str] = None) -> None:
        """Initialize configuration from the environment.

        Args:
            api_key: Overrides ``RIOT_API_KEY`` / ``TFT_API_KEY`` when given

        Raises:
            ValueError: If no valid API key is found or validation fails
        """
        self.riot_api_key = os.getenv('RIOT_API_KEY')
        self.tft_api_key = os.getenv('TFT_API_KEY')

        timeout = os.getenv('REQUEST_TIMEOUT')
        self.request_timeout = float(timeout) if timeout else None

        self.default_routing_region = os.getenv('DEFAULT_ROUTING_REGION', 'americas').lower()
        self.default_match_count = int(os.getenv('DEFAULT_MATCH_COUNT', '20'))
        self.min_api_key_length = int(os.getenv('MIN_API_KEY_LENGTH', '20'))

        self.api_key = api_key or self.riot_api_key or self.tft_api_key

        if not self.api_key:
            raise ValueError(
                "No valid API key found. Please set RIOT_API_KEY or TFT_API_KEY in your .env file"
            )

        self._validate_api_key()

        # Don't log the actual API key
        logging.getLogger(__name__).info("Configuration loaded successfully")

    def _validate_api_key(self) -> None:
        """Validate API key format.

        Raises:
            ValueError: If API key format is invalid
        """
        if not isinstance(self.api_key, str):
            raise ValueError("API key must be a string")

        if len(self.api_key) < self.min_api_key_length:
            raise ValueError(f"API key appears too short to be valid (minimum {self.min_api_key_length} characters)")

        if self.api_key.lower() in ['your_api_key_here', 'fake_key', 'test_key']:
            raise ValueError("Please set a real API key")

    @property
    def headers(self) -> Dict[str, str]:
        """Return headers for API requests.

        Returns:
            Dictionary containing request headers with API key
        """
        return build_headers(self.api_key)


def build_headers(api_key: str) -> Dict[str, str]:
    """Headers sent with every Riot API request."""
    return {
        API_KEY_HEADER: api_key,
        "User-Agent": USER_AGENT,
        "Accept": "application/json"
    }


API_KEY_HEADER = "X-Riot-Token"
USER_AGENT = f"tftclient/{__version__}"

# API host, filled with a routing region or platform code
API_HOST_TEMPLATE = "https://{host}.api.riotgames.com"

# Endpoint path prefixes
ACCOUNT_BY_RIOT_ID_PATH = "/riot/account/v1/accounts/by-riot-id"
ACCOUNT_BY_PUUID_PATH = "/riot/account/v1/accounts/by-puuid"
REGION_BY_GAME_PATH = "/riot/account/v1/region/by-game"
SUMMONER_BY_PUUID_PATH = "/tft/summoner/v1/summoners/by-puuid"
MATCHES_BY_PUUID_PATH = "/tft/match/v1/matches/by-puuid"
MATCHES_PATH = "/tft/match/v1/matches"

# Pagination limits for match ID listings (Riot keeps the 1000 most recent IDs)
MATCH_IDS_MAX_START = 999
MATCH_IDS_MIN_COUNT = 1
MATCH_IDS_MAX_COUNT = 200
DEFAULT_MATCH_COUNT = 20

# Logging configuration
LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO').upper()
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

_API_KEY_PATTERN = re.compile(r'RGAPI-[0-9A-Za-z-]+')


class SensitiveDataFilter(logging.Filter):
    """Mask anything that looks like a Riot API key in log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        if isinstance(record.msg, str) and 'RGAPI-' in record.msg:
            record.msg = _API_KEY_PATTERN.sub('[API KEY FILTERED]', record.msg)
        if record.args:
            if isinstance(record.args, dict):
                record.args = {k: _mask(v) for k, v in record.args.items()}
            else:
                record.args = tuple(_mask(arg) for arg in record.args)
        return True


def _mask(value):
    if isinstance(value, str) and 'RGAPI-' in value:
        return _API_KEY_PATTERN.sub('[API KEY FILTERED]', value)
    return value


def setup_logging(level: str = LOG_LEVEL, log_file: Optional[str] = None) -> logging.Logger:
    """Setup logging configuration.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        log_file: Optional path of a file to append logs to

    Returns:
        Configured logger instance
    """
    valid_levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
    if level.upper() not in valid_levels:
        level = 'INFO'

    handlers = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(Path(log_file), mode='a', encoding='utf-8'))

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        handlers=handlers
    )

    # Apply filter to all handlers
    logger = logging.getLogger()
    for handler in logger.handlers:
        handler.addFilter(SensitiveDataFilter())

    return logging.getLogger(__name__)
