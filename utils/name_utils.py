"""
Name utilities for resolving player identifiers to display names.
"""

from typing import Dict, Iterable, Optional

from models.player import Player

UNKNOWN_PLAYER = "???"


class NameUtils:
    """Utilities for building and querying the player name lookup."""

    @staticmethod
    def build_name_map(players: Iterable[Player]) -> Dict[str, str]:
        """Map every player id to its display name."""
        name_map = {}
        for player in players:
            name_map[player.id] = player.display_name
        return name_map

    @staticmethod
    def resolve(name_map: Dict[str, str], player_id: Optional[str]) -> str:
        """
        Look up a display name.

        Unknown ids are expected while the export is still being written,
        so they resolve to UNKNOWN_PLAYER instead of raising.
        """
        if not player_id:
            return UNKNOWN_PLAYER
        return name_map.get(player_id) or UNKNOWN_PLAYER
