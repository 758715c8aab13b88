"""Closed enumerations for routing regions, platform regions and games."""

from enum import Enum
from typing import Any

from .validation import require_choice


class RoutingRegion(Enum):
    """Regional routing clusters used by the Account-V1 and TFT Match-V1 APIs.

    Account data is replicated globally, so any cluster answers any PUUID;
    the choice only affects latency.
    """

    AMERICAS = "americas"
    ASIA = "asia"
    EUROPE = "europe"

    @classmethod
    def parse(cls, value: Any, name: str = "routing_region") -> "RoutingRegion":
        """Return the member matching ``value`` (case-insensitive)."""
        if isinstance(value, cls):
            return value
        return cls(require_choice(name, value, ROUTING_REGION_CODES))


class PlatformRegion(Enum):
    """Game server shards holding summoner data.

    Distinct from :class:`RoutingRegion`; obtained from the region lookup
    endpoint.
    """

    BR1 = "br1"    # Brazil
    EUN1 = "eun1"  # Europe Nordic & East
    EUW1 = "euw1"  # Europe West
    JP1 = "jp1"    # Japan
    KR = "kr"      # Korea
    LA1 = "la1"    # Latin America North
    LA2 = "la2"    # Latin America South
    ME1 = "me1"    # Middle East
    NA1 = "na1"    # North America
    OC1 = "oc1"    # Oceania
    RU = "ru"      # Russia
    SG2 = "sg2"    # Singapore
    TR1 = "tr1"    # Turkey
    TW2 = "tw2"    # Taiwan
    VN2 = "vn2"    # Vietnam

    @classmethod
    def parse(cls, value: Any, name: str = "region") -> "PlatformRegion":
        """Return the member matching ``value`` (case-insensitive)."""
        if isinstance(value, cls):
            return value
        return cls(require_choice(name, value, PLATFORM_REGION_CODES))


class Game(Enum):
    """Games supported by the active-shard lookup."""

    LOL = "lol"
    TFT = "tft"

    @classmethod
    def parse(cls, value: Any, name: str = "game") -> "Game":
        """Return the member matching ``value`` ("lol" or "tft", case-insensitive)."""
        if isinstance(value, cls):
            return value
        return cls(require_choice(name, value, GAME_CODES))


ROUTING_REGION_CODES = frozenset(member.value for member in RoutingRegion)
PLATFORM_REGION_CODES = frozenset(member.value for member in PlatformRegion)
GAME_CODES = frozenset(member.value for member in Game)
