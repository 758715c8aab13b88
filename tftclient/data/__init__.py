"""Data processing module for TFT API data.

This module handles match normalization and player lookups.
"""

from .match_normalizer import NormalizedMatch, RawMatch, normalize_match, build_match_result
from .lookup_account import PlayerLookup, PlayerProfile

__all__ = ['NormalizedMatch', 'RawMatch', 'normalize_match', 'build_match_result',
           'PlayerLookup', 'PlayerProfile']
