import unittest

from tftclient.api.errors import ApiRequestError, ValidationError
from tftclient.api.riot_api import RiotAPIClient
from tftclient.data.lookup_account import PlayerLookup
from tftclient.data.match_normalizer import NormalizedMatch, normalize_match
from tftclient.utils.formatters import OutputFormatter, format_riot_id, parse_riot_id

from fake_transport import API_KEY, PUUID, StubSession, load_fixture


def _routed_handler(url, params):
    if "/accounts/by-riot-id/" in url:
        return 200, load_fixture("account.json")
    if "/region/by-game/" in url:
        return 200, load_fixture("region.json")
    if "/tft/summoner/" in url:
        return 200, load_fixture("summoner.json")
    if url.endswith("/ids"):
        return 200, load_fixture("match_ids.json")[:params["count"]]
    return 404, load_fixture("not_found.json")


class PlayerLookupTests(unittest.TestCase):
    def setUp(self) -> None:
        self.session = StubSession(_routed_handler)
        self.lookup = PlayerLookup(RiotAPIClient(API_KEY, session=self.session))

    def test_lookup_chains_account_shard_and_summoner(self) -> None:
        profile = self.lookup.lookup("Wander", "HENRO")

        self.assertEqual(profile.puuid, PUUID)
        self.assertEqual(profile.riot_id, "Wander#HENRO")
        self.assertEqual(profile.shard, "na1")
        self.assertEqual(profile.summoner["profileIconId"], 4270)

        urls = [call["url"] for call in self.session.calls]
        self.assertEqual(len(urls), 3)
        self.assertTrue(urls[2].startswith("https://na1.api.riotgames.com/"))

    def test_lookup_by_riot_id(self) -> None:
        profile = self.lookup.lookup_by_riot_id("Wander#HENRO")
        self.assertEqual(profile.account["gameName"], "Wander")

    def test_recent_match_ids(self) -> None:
        ids = self.lookup.recent_match_ids(PUUID, count=5)
        self.assertEqual(ids, load_fixture("match_ids.json")[:5])

    def test_errors_propagate(self) -> None:
        session = StubSession(lambda url, params: (404, load_fixture("not_found.json")))
        lookup = PlayerLookup(RiotAPIClient(API_KEY, session=session))
        with self.assertRaises(ApiRequestError):
            lookup.lookup("NonExistentName", "XYZ")
        self.assertEqual(len(session.calls), 1)

    def test_rejects_unknown_routing_region(self) -> None:
        with self.assertRaises(ValidationError):
            PlayerLookup(RiotAPIClient(API_KEY, session=self.session), routing_region="na1")


class RiotIdTests(unittest.TestCase):
    def test_parse(self) -> None:
        self.assertEqual(parse_riot_id("Wander#HENRO"), ("Wander", "HENRO"))
        self.assertEqual(parse_riot_id(" Big Wander # NA1 "), ("Big Wander", "NA1"))

    def test_parse_rejects_bad_shape(self) -> None:
        for value in ("Wander", "#HENRO", "Wander#", None):
            with self.subTest(value=value):
                with self.assertRaises(ValidationError):
                    parse_riot_id(value)

    def test_format(self) -> None:
        self.assertEqual(format_riot_id("Wander", "HENRO"), "Wander#HENRO")


class OutputFormatterTests(unittest.TestCase):
    def test_account_info(self) -> None:
        text = OutputFormatter.format_account_info(load_fixture("account.json"))
        self.assertIn("Riot ID: Wander#HENRO", text)
        self.assertIn(PUUID, text)

    def test_summoner_info(self) -> None:
        text = OutputFormatter.format_summoner_info(load_fixture("summoner.json"))
        self.assertIn("Profile Icon ID: 4270", text)
        self.assertIn("Summoner Level: 312", text)
        self.assertIn("UTC", text)

    def test_match_summary_sorted_by_placement(self) -> None:
        text = OutputFormatter.format_match_summary(normalize_match(load_fixture("match.json")))
        lines = text.splitlines()
        self.assertEqual(lines[0], "MATCH NA1_5390000000")
        self.assertIn("Length: 33:51", lines[2])
        self.assertTrue(lines[3].startswith("  #1 Level 9 | 2 units | 2 traits"))
        self.assertTrue(lines[5].startswith("  #8 Level 3 | 0 units | 0 traits"))

    def test_match_summary_without_match_data(self) -> None:
        self.assertEqual(OutputFormatter.format_match_summary(NormalizedMatch()), "No match data")

    def test_match_summary_participant_without_placement(self) -> None:
        document = load_fixture("match.json")
        del document["info"]["participants"][0]["placement"]

        lines = OutputFormatter.format_match_summary(normalize_match(document)).splitlines()

        self.assertEqual(len(lines), 6)
        self.assertTrue(lines[3].startswith("  #2 Level"))
        self.assertTrue(lines[5].startswith("  #? Level 9 | 2 units | 2 traits"))


if __name__ == "__main__":
    unittest.main()
