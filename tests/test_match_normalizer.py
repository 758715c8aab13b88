import copy
import unittest

import pandas as pd

from tftclient.data.match_normalizer import (
    MATCH_COLUMNS, NormalizedMatch, RawMatch, build_match_result, collapse_item_names, normalize_match,
)

from fake_transport import PUUID, load_fixture


class NormalizeMatchTests(unittest.TestCase):
    def setUp(self) -> None:
        self.document = load_fixture("match.json")
        self.result = normalize_match(self.document)

    def test_tables_are_dataframes(self) -> None:
        for name, table in self.result.as_dict().items():
            with self.subTest(table=name):
                self.assertIsInstance(table, pd.DataFrame)

    def test_single_match_row(self) -> None:
        self.assertEqual(len(self.result.matches), 1)
        self.assertEqual(list(self.result.matches.columns), [column for column, _, _ in MATCH_COLUMNS])
        row = self.result.matches.iloc[0]
        self.assertEqual(row["match_id"], "NA1_5390000000")
        self.assertEqual(row["data_version"], "6")
        self.assertEqual(row["game_id"], 5390000000)
        self.assertEqual(row["tft_set_core_name"], "TFTSet15")
        self.assertEqual(row["queue_id"], 1100)
        self.assertEqual(self.result.match_id, "NA1_5390000000")

    def test_foreign_keys_match_the_match_row(self) -> None:
        match_id = self.result.match_id
        for table in (self.result.participants, self.result.traits, self.result.units):
            self.assertTrue((table["match_id"] == match_id).all())

        participant_ids = set(self.result.participants["puuid"])
        for table in (self.result.traits, self.result.units):
            self.assertTrue(table["puuid"].isin(participant_ids).all())

    def test_participants_drop_nested_collections(self) -> None:
        participants = self.result.participants
        self.assertEqual(participants["placement"].tolist(), [1, 2, 8])
        for nested in ("companion", "traits", "units", "missions"):
            self.assertNotIn(nested, participants.columns)
        first = participants.iloc[0]
        self.assertEqual(first["puuid"], PUUID)
        self.assertEqual(first["riotIdGameName"], "Wander")
        self.assertEqual(first["gold_left"], 3)

    def test_row_counts_follow_list_lengths(self) -> None:
        participants = self.document["info"]["participants"]
        self.assertEqual(len(self.result.traits), sum(len(p["traits"]) for p in participants))
        self.assertEqual(len(self.result.units), sum(len(p["units"]) for p in participants))

    def test_participant_without_traits_or_units_adds_no_rows(self) -> None:
        afk = self.document["info"]["participants"][2]["puuid"]
        self.assertTrue(self.result.traits_for(afk).empty)
        self.assertTrue(self.result.units_for(afk).empty)

    def test_missing_trait_and_unit_lists(self) -> None:
        document = copy.deepcopy(self.document)
        for participant in document["info"]["participants"]:
            participant.pop("traits")
            participant.pop("units")

        result = normalize_match(document)

        self.assertEqual(len(result.participants), 3)
        self.assertTrue(result.traits.empty)
        self.assertTrue(result.units.empty)
        # Empty tables keep their key columns
        self.assertEqual(list(result.units.columns), ["match_id", "puuid"])
        self.assertTrue(result.units_for(PUUID).empty)

    def test_no_participants(self) -> None:
        document = copy.deepcopy(self.document)
        document["info"]["participants"] = []

        result = normalize_match(document)

        self.assertEqual(len(result.matches), 1)
        self.assertTrue(result.participants.empty)
        self.assertTrue(result.traits_for(PUUID).empty)

    def test_item_names_collapsed(self) -> None:
        units = self.result.units_for(PUUID)
        self.assertEqual(
            units["itemNames"].tolist(),
            ["TFT_Item_InfinityEdge,TFT_Item_GuinsoosRageblade,TFT_Item_LastWhisper", ""],
        )

        # Unit with no itemNames key at all still gets the field
        yasuo = self.result.units.iloc[2]
        self.assertEqual(yasuo["character_id"], "TFT15_Yasuo")
        self.assertEqual(yasuo["itemNames"], "")

    def test_source_document_untouched(self) -> None:
        self.assertEqual(self.document, load_fixture("match.json"))

    def test_as_dict(self) -> None:
        tables = self.result.as_dict()
        self.assertEqual(list(tables), ["matches", "participants", "traits", "units"])
        self.assertIs(tables["units"], self.result.units)


class EmptyNormalizedMatchTests(unittest.TestCase):
    def test_defaults_are_empty_frames(self) -> None:
        match = NormalizedMatch()
        self.assertTrue(match.matches.empty)
        self.assertIsNone(match.match_id)
        self.assertTrue(match.units_for(PUUID).empty)
        self.assertTrue(match.traits_for(PUUID).empty)


class CollapseItemNamesTests(unittest.TestCase):
    def test_joins_with_comma(self) -> None:
        self.assertEqual(collapse_item_names(["A", "B", "C"]), "A,B,C")

    def test_empty(self) -> None:
        self.assertEqual(collapse_item_names([]), "")
        self.assertEqual(collapse_item_names(None), "")


class BuildMatchResultTests(unittest.TestCase):
    def test_raw_returns_document_as_is(self) -> None:
        document = load_fixture("match.json")
        result = build_match_result(document, raw=True)
        self.assertIsInstance(result, RawMatch)
        self.assertIs(result.document, document)

    def test_default_normalizes(self) -> None:
        self.assertIsInstance(build_match_result(load_fixture("match.json")), NormalizedMatch)


if __name__ == "__main__":
    unittest.main()
