"""TFT player lookup.

Chains the account, region and summoner endpoints to go from a Riot ID to
the player's summoner profile on their active TFT shard.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, TYPE_CHECKING

from ..api.regions import Game, RoutingRegion
from ..utils.formatters import parse_riot_id

if TYPE_CHECKING:
    from ..api.riot_api import RiotAPIClient


@dataclass(frozen=True)
class PlayerProfile:
    """Account, active shard and summoner record of one player."""

    account: Dict[str, Any]
    shard: str
    summoner: Dict[str, Any]

    @property
    def puuid(self) -> str:
        return self.account['puuid']

    @property
    def riot_id(self) -> str:
        return f"{self.account.get('gameName')}#{self.account.get('tagLine')}"


class PlayerLookup:
    """Look up TFT players through a RiotAPIClient."""

    def __init__(self, api_client: Optional["RiotAPIClient"] = None,
                 routing_region: Any = RoutingRegion.AMERICAS):
        """Initialize the lookup service.

        Args:
            api_client: Client to use (built from the environment if None)
            routing_region: Routing region for account and match requests
        """
        if api_client is None:
            from ..api.riot_api import RiotAPIClient
            api_client = RiotAPIClient()
        self.api_client = api_client
        self.routing_region = RoutingRegion.parse(routing_region)
        self.logger = logging.getLogger(__name__)

    def lookup(self, game_name: str, tag_line: str) -> PlayerProfile:
        """Resolve a Riot ID to account, active TFT shard and summoner.

        Errors from any step propagate unchanged.
        """
        self.logger.info(f"Starting lookup for: {game_name}#{tag_line}")

        account = self.api_client.get_account_by_riot_id(game_name, tag_line, self.routing_region)
        puuid = account['puuid']

        shard_info = self.api_client.get_region_by_puuid(puuid, self.routing_region, Game.TFT)
        shard = shard_info['region']

        summoner = self.api_client.get_summoner_by_puuid(puuid, shard)

        return PlayerProfile(account=account, shard=shard, summoner=summoner)

    def lookup_by_riot_id(self, riot_id: str) -> PlayerProfile:
        """Same as :meth:`lookup` for a "GameName#TagLine" string."""
        game_name, tag_line = parse_riot_id(riot_id)
        return self.lookup(game_name, tag_line)

    def recent_match_ids(self, puuid: str, count: int = 20) -> List[str]:
        """Most recent match IDs of a player."""
        return self.api_client.get_match_ids_by_puuid(puuid, self.routing_region, count=count)
