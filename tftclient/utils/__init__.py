"""Utilities module for the TFT API client.

This module provides Riot ID helpers and display formatting.
"""

from .formatters import OutputFormatter, parse_riot_id, format_riot_id

__all__ = ['OutputFormatter', 'parse_riot_id', 'format_riot_id']
