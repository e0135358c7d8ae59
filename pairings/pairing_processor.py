"""
Pairing processor: picks the current round and builds the table rows.
"""

import logging
from typing import Dict, List, Sequence

from models.tournament import Tournament, Round, PageRow
from models.exceptions import MissingDataError
from utils.name_utils import NameUtils

logger = logging.getLogger(__name__)


def select_latest_round(rounds: Sequence[Round]) -> Round:
    """
    Return the round with the highest number.

    Numbers are compared as integers. Among rounds sharing the highest
    number the first one in input order wins.
    """
    if not rounds:
        raise MissingDataError("Cannot select the latest round from an empty round list")
    # sorted() is stable, so equal numbers keep their input order
    return sorted(rounds, key=lambda r: int(r.number), reverse=True)[0]


class PairingProcessor:
    """Turns a parsed tournament into the rows of the pairings table."""

    def __init__(self, tournament: Tournament):
        self.tournament = tournament
        self.name_map: Dict[str, str] = NameUtils.build_name_map(tournament.players)
        self.unresolved_ids: List[str] = []

    def latest_round(self) -> Round:
        return select_latest_round(self.tournament.rounds)

    def build_rows(self) -> List[PageRow]:
        """Rows for every match of the latest round, in source order."""
        current_round = self.latest_round()
        self.unresolved_ids = []
        logger.info(f"Latest round is {current_round.number} with {len(current_round.matches)} matches")

        rows = []
        for match in current_round.matches:
            rows.append(PageRow(
                table_label=str(match.table_number),
                player1_name=self._resolve(match.player1_id),
                player2_name=self._resolve(match.player2_id)
            ))

        if self.unresolved_ids:
            logger.warning(f"Unknown player ids in round {current_round.number}: {', '.join(self.unresolved_ids)}")
        return rows

    def _resolve(self, player_id: str) -> str:
        if player_id not in self.name_map:
            self.unresolved_ids.append(player_id or '<missing>')
        return NameUtils.resolve(self.name_map, player_id)
