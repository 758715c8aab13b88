"""Build request descriptors for the supported endpoint families.

Builders are pure: they take already validated parameters and return a
:class:`RequestDescriptor` which is handed to the transport as-is.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional
from urllib.parse import quote

from .config import (
    API_HOST_TEMPLATE, API_KEY_HEADER, ACCOUNT_BY_RIOT_ID_PATH, ACCOUNT_BY_PUUID_PATH,
    REGION_BY_GAME_PATH, SUMMONER_BY_PUUID_PATH, MATCHES_BY_PUUID_PATH, MATCHES_PATH,
    build_headers,
)
from .regions import RoutingRegion, PlatformRegion, Game


@dataclass(frozen=True)
class RequestDescriptor:
    """A single GET request: method, URL, headers and query parameters.

    The headers carry the API key, so they are left out of ``repr``.
    """

    method: str
    url: str
    headers: Mapping[str, str] = field(repr=False)
    params: Optional[Mapping[str, Any]] = None

    @property
    def redacted_headers(self) -> Dict[str, str]:
        """Headers with the API key masked, safe to log."""
        return {
            name: ('[REDACTED]' if name == API_KEY_HEADER else value)
            for name, value in self.headers.items()
        }


def _url(host: str, path: str, *segments: str) -> str:
    base = API_HOST_TEMPLATE.format(host=host) + path
    if not segments:
        return base
    return base + "/" + "/".join(quote(segment, safe='') for segment in segments)


def _get(url: str, api_key: str, params: Optional[Dict[str, Any]] = None) -> RequestDescriptor:
    return RequestDescriptor(method="GET", url=url, headers=build_headers(api_key), params=params)


def account_by_riot_id_request(game_name: str, tag_line: str, region: RoutingRegion,
                               api_key: str) -> RequestDescriptor:
    url = _url(region.value, ACCOUNT_BY_RIOT_ID_PATH, game_name, tag_line)
    return _get(url, api_key)


def account_by_puuid_request(puuid: str, region: RoutingRegion, api_key: str) -> RequestDescriptor:
    url = _url(region.value, ACCOUNT_BY_PUUID_PATH, puuid)
    return _get(url, api_key)


def region_by_puuid_request(game: Game, puuid: str, region: RoutingRegion,
                            api_key: str) -> RequestDescriptor:
    url = _url(region.value, REGION_BY_GAME_PATH, game.value, "by-puuid", puuid)
    return _get(url, api_key)


def summoner_by_puuid_request(puuid: str, platform: PlatformRegion, api_key: str) -> RequestDescriptor:
    url = _url(platform.value, SUMMONER_BY_PUUID_PATH, puuid)
    return _get(url, api_key)


def match_ids_by_puuid_request(puuid: str, region: RoutingRegion, api_key: str,
                               start: int, count: int,
                               start_time: Optional[int] = None,
                               end_time: Optional[int] = None) -> RequestDescriptor:
    """Build the match ID listing request.

    Query parameters that were not supplied are omitted rather than sent
    empty.
    """
    url = _url(region.value, MATCHES_BY_PUUID_PATH, puuid, "ids")
    params = {
        "start": start,
        "startTime": start_time,
        "endTime": end_time,
        "count": count,
    }
    params = {key: value for key, value in params.items() if value is not None}
    return _get(url, api_key, params)


def match_by_id_request(match_id: str, region: RoutingRegion, api_key: str) -> RequestDescriptor:
    url = _url(region.value, MATCHES_PATH, match_id)
    return _get(url, api_key)
