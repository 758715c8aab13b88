"""Module for flattening TFT match documents into related tables."""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Union

import pandas as pd

logger = logging.getLogger(__name__)

# Nested participant collections left out of the participants table
PARTICIPANT_NESTED_FIELDS = ("companion", "traits", "units", "missions")

ITEM_SEPARATOR = ","

# (column, section, source key) for the single matches row
MATCH_COLUMNS = (
    ("match_id", "metadata", "match_id"),
    ("data_version", "metadata", "data_version"),
    ("game_id", "info", "gameId"),
    ("game_datetime", "info", "game_datetime"),
    ("game_length", "info", "game_length"),
    ("game_version", "info", "game_version"),
    ("tft_set_number", "info", "tft_set_number"),
    ("tft_set_core_name", "info", "tft_set_core_name"),
    ("tft_game_type", "info", "tft_game_type"),
    ("queue_id", "info", "queue_id"),
)

# Foreign keys carried by every trait and unit row
KEY_COLUMNS = ["match_id", "puuid"]

Row = Dict[str, Any]


@dataclass(frozen=True, eq=False)
class NormalizedMatch:
    """A match split into four DataFrames linked by ``match_id`` and ``puuid``.

    Tables are independently sized; rows relate only through the foreign
    keys, never through position.
    """

    matches: pd.DataFrame = field(default_factory=pd.DataFrame)
    participants: pd.DataFrame = field(default_factory=pd.DataFrame)
    traits: pd.DataFrame = field(default_factory=pd.DataFrame)
    units: pd.DataFrame = field(default_factory=pd.DataFrame)

    @property
    def match_id(self) -> Any:
        if self.matches.empty:
            return None
        return self.matches["match_id"].iloc[0]

    def as_dict(self) -> Dict[str, pd.DataFrame]:
        """Return the four tables keyed by name."""
        return {
            'matches': self.matches,
            'participants': self.participants,
            'traits': self.traits,
            'units': self.units,
        }

    def units_for(self, puuid: str) -> pd.DataFrame:
        """Units fielded by one participant."""
        return _rows_for(self.units, puuid)

    def traits_for(self, puuid: str) -> pd.DataFrame:
        """Traits active for one participant."""
        return _rows_for(self.traits, puuid)


def _rows_for(table: pd.DataFrame, puuid: str) -> pd.DataFrame:
    if 'puuid' not in table.columns:
        return table.iloc[0:0]
    return table[table['puuid'] == puuid]


@dataclass(frozen=True)
class RawMatch:
    """The match document exactly as returned by the API."""

    document: Dict[str, Any]


MatchResult = Union[NormalizedMatch, RawMatch]


def collapse_item_names(item_names: Any) -> str:
    """Join a unit's item names into one comma-separated string.

    ``["A", "B", "C"]`` becomes ``"A,B,C"``; no items give ``""``.
    """
    if not item_names:
        return ""
    if isinstance(item_names, str):
        return item_names
    return ITEM_SEPARATOR.join(str(name) for name in item_names)


def _match_row(metadata: Dict[str, Any], info: Dict[str, Any]) -> Row:
    sections = {'metadata': metadata, 'info': info}
    return {column: sections[section].get(key) for column, section, key in MATCH_COLUMNS}


def _participant_row(participant: Dict[str, Any], match_id: Any) -> Row:
    row = {key: value for key, value in participant.items()
           if key not in PARTICIPANT_NESTED_FIELDS}
    row['match_id'] = match_id
    return row


def _trait_rows(participant: Dict[str, Any], match_id: Any) -> List[Row]:
    rows = []
    for trait in participant.get('traits') or []:
        row = dict(trait)
        row['match_id'] = match_id
        row['puuid'] = participant.get('puuid')
        rows.append(row)
    return rows


def _unit_rows(participant: Dict[str, Any], match_id: Any) -> List[Row]:
    rows = []
    for unit in participant.get('units') or []:
        row = dict(unit)
        row['itemNames'] = collapse_item_names(unit.get('itemNames'))
        row['match_id'] = match_id
        row['puuid'] = participant.get('puuid')
        rows.append(row)
    return rows


def _frame(rows: List[Row]) -> pd.DataFrame:
    # An empty table still carries its key columns so puuid filters work
    if not rows:
        return pd.DataFrame(columns=KEY_COLUMNS)
    return pd.DataFrame(rows)


def normalize_match(document: Dict[str, Any]) -> NormalizedMatch:
    """
    Flatten a TFT match document into matches, participants, traits and units.

    Args:
        document: Parsed match JSON with ``metadata`` and ``info`` sections

    Returns:
        NormalizedMatch of DataFrames with ``match_id`` injected into every
        row and ``puuid`` injected into every trait and unit row. Lists
        such as ``itemNames`` are collapsed to strings before the frames
        are built.
    """
    metadata = document.get('metadata') or {}
    info = document.get('info') or {}
    match_id = metadata.get('match_id')

    participants = info.get('participants') or []

    participant_rows = []
    trait_rows = []
    unit_rows = []
    for participant in participants:
        participant_rows.append(_participant_row(participant, match_id))
        # Participants without traits or units contribute no rows
        trait_rows.extend(_trait_rows(participant, match_id))
        unit_rows.extend(_unit_rows(participant, match_id))

    logger.debug(
        f"Normalized match {match_id}: {len(participant_rows)} participants, "
        f"{len(trait_rows)} traits, {len(unit_rows)} units"
    )

    return NormalizedMatch(
        matches=pd.DataFrame(
            [_match_row(metadata, info)], columns=[column for column, _, _ in MATCH_COLUMNS]
        ),
        participants=_frame(participant_rows),
        traits=_frame(trait_rows),
        units=_frame(unit_rows),
    )


def build_match_result(document: Dict[str, Any], raw: bool = False) -> MatchResult:
    """Return ``RawMatch`` when ``raw`` is set, otherwise normalize the document."""
    if raw:
        return RawMatch(document=document)
    return normalize_match(document)
