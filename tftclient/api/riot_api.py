"""Riot API client for Teamfight Tactics data retrieval.

This module provides a synchronous client for the Account-V1, TFT
Summoner-V1 and TFT Match-V1 endpoints. Every call validates its inputs,
issues a single GET request and translates non-200 answers into
:class:`ApiRequestError`. There is no retry, caching or rate limiting.
"""

import logging
from typing import Optional, Dict, List, Any

import requests

from .config import Config, MATCH_IDS_MAX_START, MATCH_IDS_MIN_COUNT, MATCH_IDS_MAX_COUNT, DEFAULT_MATCH_COUNT
from .errors import ApiRequestError
from .regions import RoutingRegion, PlatformRegion, Game
from .requests_builder import (
    RequestDescriptor, account_by_riot_id_request, account_by_puuid_request,
    region_by_puuid_request, summoner_by_puuid_request, match_ids_by_puuid_request,
    match_by_id_request,
)
from .validation import require_string, require_int, optional_int, require_bool
from ..data.match_normalizer import MatchResult, build_match_result

UNKNOWN_ERROR_MESSAGE = "Unknown API error."


def _error_message(response: requests.Response) -> str:
    """Resolve the message of a failed response from the Riot error envelope."""
    try:
        error_details = response.json()
    except ValueError:
        # Body isn't JSON (e.g. an HTML error page)
        return f"Could not parse error response body. Status: {response.status_code}"

    if isinstance(error_details, dict):
        status = error_details.get('status')
        if isinstance(status, dict) and status.get('message') is not None:
            return str(status['message'])
    return UNKNOWN_ERROR_MESSAGE


def classify_response(response: requests.Response) -> Any:
    """Return the parsed body of a 200 response or raise ApiRequestError.

    Args:
        response: Response returned by the transport

    Returns:
        Parsed JSON body

    Raises:
        ApiRequestError: For any status other than 200
    """
    if response.status_code == 200:
        return response.json()
    raise ApiRequestError(response.status_code, _error_message(response), url=response.url)


def _with_shard_alias(data: Any) -> Any:
    """Expose the active shard under both ``region`` and ``activeShard``."""
    if isinstance(data, dict):
        if 'region' in data and 'activeShard' not in data:
            data['activeShard'] = data['region']
        elif 'activeShard' in data and 'region' not in data:
            data['region'] = data['activeShard']
    return data


class RiotAPIClient:
    """Client for the Riot Games TFT endpoints.

    The client holds no per-call state; it only keeps its API key, the
    HTTP session and the transport timeout, so one instance may be shared.

    Attributes:
        config (Optional[Config]): Configuration instance, if one was used
        default_routing_region: Routing region used when a call omits one
        default_match_count (int): Page size used when a call omits one
        logger (logging.Logger): Logger for this client
        session (requests.Session): HTTP session for requests
    """

    def __init__(self, api_key: Optional[str] = None, config: Optional[Config] = None,
                 session: Optional[requests.Session] = None) -> None:
        """Initialize the Riot API client.

        Args:
            api_key: Riot API key; read from the environment via Config if omitted
            config: Configuration instance supplying the key, timeout and the
                routing region and page size used when a call omits them
            session: HTTP session to use (a new one is created if None)

        Raises:
            ValidationError: If the API key is not a non-empty string
            ValueError: If no key is given and the environment has none
        """
        if api_key is None:
            config = config or Config()
            api_key = config.api_key
        self.config = config
        self.api_key = require_string('api_key', api_key)
        self.timeout = config.request_timeout if config else None
        self.default_routing_region = config.default_routing_region if config else RoutingRegion.AMERICAS
        self.default_match_count = config.default_match_count if config else DEFAULT_MATCH_COUNT
        self.logger = logging.getLogger(__name__)

        self._owns_session = session is None
        self.session = session if session is not None else requests.Session()

    def __enter__(self) -> "RiotAPIClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        """Close the HTTP session if this client created it."""
        if self._owns_session:
            self.session.close()

    def _routing(self, value: Any, name: str = 'routing_region') -> RoutingRegion:
        if value is None:
            value = self.default_routing_region
        return RoutingRegion.parse(value, name)

    def _perform(self, request: RequestDescriptor) -> Any:
        """
        Send a request descriptor through the session and classify the answer.

        Transport errors (``requests.RequestException``) propagate unchanged.
        """
        self.logger.debug(f"{request.method} {request.url} params={request.params}")
        response = self.session.request(
            request.method,
            request.url,
            headers=dict(request.headers),
            params=request.params,
            timeout=self.timeout,
        )
        try:
            return classify_response(response)
        except ApiRequestError as e:
            self.logger.warning(f"{request.method} {request.url} failed: {e}")
            raise

    def get_account_by_riot_id(self, game_name: str, tag_line: str,
                               region: Any = None) -> Dict[str, Any]:
        """
        Get account information using Riot ID (game name + tag line).

        Args:
            game_name: The part of the Riot ID before '#'
            tag_line: The part of the Riot ID after '#'
            region: Routing region (americas, asia, europe); the client default if None

        Returns:
            Account dictionary with puuid, gameName and tagLine
        """
        require_string('game_name', game_name)
        require_string('tag_line', tag_line)
        routing = self._routing(region, 'region')

        data = self._perform(account_by_riot_id_request(game_name, tag_line, routing, self.api_key))
        self.logger.info(f"Retrieved account for {game_name}#{tag_line}")
        return data

    def get_account_by_puuid(self, puuid: str, region: Any = None) -> Dict[str, Any]:
        """
        Get account information using a PUUID.

        Args:
            puuid: The player's PUUID
            region: Routing region (americas, asia, europe); the client default if None

        Returns:
            Account dictionary with puuid, gameName and tagLine
        """
        require_string('puuid', puuid)
        routing = self._routing(region, 'region')

        data = self._perform(account_by_puuid_request(puuid, routing, self.api_key))
        self.logger.info(f"Retrieved account for PUUID: {puuid[:20]}...")
        return data

    def get_region_by_puuid(self, puuid: str, routing_region: Any = None,
                            game: Any = Game.TFT) -> Dict[str, Any]:
        """
        Get the active shard a player's data lives on for one game.

        Args:
            puuid: The player's PUUID
            routing_region: Routing region (americas, asia, europe); the client default if None
            game: "lol" or "tft"

        Returns:
            Dictionary with puuid, game and region; ``activeShard`` mirrors ``region``
        """
        game = Game.parse(game)
        require_string('puuid', puuid)
        routing = self._routing(routing_region)

        data = self._perform(region_by_puuid_request(game, puuid, routing, self.api_key))
        self.logger.info(f"Retrieved {game.value} shard for PUUID: {puuid[:20]}...")
        return _with_shard_alias(data)

    def get_summoner_by_puuid(self, puuid: str, region: Any) -> Dict[str, Any]:
        """
        Get TFT summoner information using a PUUID.

        Args:
            puuid: The player's PUUID
            region: Platform region the summoner lives on (e.g. "na1"), not a routing region

        Returns:
            Summoner dictionary with puuid, profileIconId, revisionDate and summonerLevel
        """
        require_string('puuid', puuid)
        platform = PlatformRegion.parse(region)

        data = self._perform(summoner_by_puuid_request(puuid, platform, self.api_key))
        self.logger.info(f"Retrieved summoner on {platform.value} for PUUID: {puuid[:20]}...")
        return data

    def get_match_ids_by_puuid(self, puuid: str, routing_region: Any = None,
                               start: int = 0, count: Optional[int] = None,
                               start_time: Optional[int] = None,
                               end_time: Optional[int] = None) -> List[str]:
        """
        Get TFT match IDs for a player, most recent first.

        Args:
            puuid: The player's PUUID
            routing_region: Routing region (americas, asia, europe); the client default if None
            start: Index of the first ID to return (0-999)
            count: Number of IDs to return (1-200); the client default if None
            start_time: Epoch seconds lower bound, omitted if None
            end_time: Epoch seconds upper bound, omitted if None

        Returns:
            List of match IDs
        """
        require_string('puuid', puuid)
        routing = self._routing(routing_region)
        optional_int('start_time', start_time)
        optional_int('end_time', end_time)
        if count is None:
            count = self.default_match_count
        require_int('start', start, lower=0, upper=MATCH_IDS_MAX_START)
        require_int('count', count, lower=MATCH_IDS_MIN_COUNT, upper=MATCH_IDS_MAX_COUNT)

        request = match_ids_by_puuid_request(
            puuid, routing, self.api_key, start, count, start_time=start_time, end_time=end_time
        )
        data = self._perform(request)
        self.logger.info(f"Retrieved {len(data)} match IDs for PUUID: {puuid[:20]}...")
        return data

    def get_match_data_by_id(self, match_id: str, routing_region: Any = None,
                             raw: bool = False) -> MatchResult:
        """
        Get a TFT match by ID.

        Args:
            match_id: The match ID (e.g. "NA1_5000000000")
            routing_region: Routing region (americas, asia, europe); the client default if None
            raw: Return the nested document untouched instead of normalized tables

        Returns:
            NormalizedMatch by default, RawMatch when ``raw`` is True
        """
        require_string('match_id', match_id)
        routing = self._routing(routing_region)
        require_bool('raw', raw)

        document = self._perform(match_by_id_request(match_id, routing, self.api_key))
        self.logger.info(f"Retrieved match {match_id}")
        return build_match_result(document, raw=raw)
