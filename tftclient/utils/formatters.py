"""Formatting utilities for displaying TFT data."""

from datetime import datetime, timezone
from typing import Any, Dict, Tuple

import pandas as pd

from ..api.errors import ValidationError


def parse_riot_id(riot_id: str) -> Tuple[str, str]:
    """Parse 'gameName#tagLine' into (game_name, tag_line)."""
    if not isinstance(riot_id, str) or "#" not in riot_id:
        raise ValidationError("riot_id must be in 'gameName#tagLine' format", "riot_id")
    game_name, tag_line = riot_id.split("#", 1)
    game_name = game_name.strip()
    tag_line = tag_line.strip()
    if not game_name or not tag_line:
        raise ValidationError("riot_id must be in 'gameName#tagLine' format", "riot_id")
    return game_name, tag_line


def format_riot_id(game_name: str, tag_line: str) -> str:
    return f"{game_name}#{tag_line}"


class OutputFormatter:
    """Handles formatting of API records for console output."""

    @staticmethod
    def format_account_info(account: Dict[str, Any]) -> str:
        """
        Format account information for display.

        Args:
            account: Account data from Riot API

        Returns:
            Formatted account information string
        """
        return "\n".join([
            "=" * 50,
            "ACCOUNT INFORMATION",
            "=" * 50,
            f"Riot ID: {format_riot_id(account.get('gameName', 'N/A'), account.get('tagLine', 'N/A'))}",
            f"PUUID: {account.get('puuid', 'N/A')}"
        ])

    @staticmethod
    def format_summoner_info(summoner: Dict[str, Any]) -> str:
        """
        Format TFT summoner information for display.

        ``revisionDate`` is epoch milliseconds.
        """
        revision = summoner.get('revisionDate')
        if isinstance(revision, (int, float)):
            revision = datetime.fromtimestamp(revision / 1000, timezone.utc).strftime('%Y-%m-%d %H:%M UTC')

        return "\n".join([
            "SUMMONER",
            "=" * 50,
            f"Summoner Level: {summoner.get('summonerLevel', 'N/A')}",
            f"Profile Icon ID: {summoner.get('profileIconId', 'N/A')}",
            f"Last Modified: {revision or 'N/A'}"
        ])

    @staticmethod
    def format_match_summary(match) -> str:
        """
        Format a normalized match as a placement table.

        Args:
            match: NormalizedMatch returned by get_match_data_by_id

        Returns:
            Formatted match summary string
        """
        if match.matches.empty:
            return "No match data"

        info = match.matches.iloc[0]
        length = info.get('game_length')
        minutes, seconds = divmod(int(length) if pd.notna(length) else 0, 60)

        lines = [
            f"MATCH {info.get('match_id')}",
            "=" * 50,
            f"Set: {_cell(info.get('tft_set_core_name'), 'N/A')} | Queue: {_cell(info.get('queue_id'), 'N/A')} | Length: {minutes}:{seconds:02d}",
        ]

        standings = match.participants
        if 'placement' in standings.columns:
            standings = standings.sort_values('placement', na_position='last', kind='stable')

        for _, participant in standings.iterrows():
            puuid = participant.get('puuid')
            if not isinstance(puuid, str):
                puuid = ''
            lines.append(
                f"  #{_cell(participant.get('placement'))} "
                f"Level {_cell(participant.get('level'))} | "
                f"{len(match.units_for(puuid))} units | "
                f"{len(match.traits_for(puuid))} traits | "
                f"{puuid[:12]}..."
            )

        return "\n".join(lines)


def _cell(value: Any, missing: str = '?') -> Any:
    """Display a DataFrame cell, treating NaN as missing."""
    if value is None or (isinstance(value, float) and pd.isna(value)):
        return missing
    # Integer columns with gaps come back as floats
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value
