"""
Loader for the tournament-management XML export.
"""

import logging
import xml.etree.ElementTree as ET
from typing import List, Optional

from models.player import Player
from models.tournament import Tournament, Round, Match
from models.exceptions import SourceUnavailableError, StructuralIncompletenessError
from parsing.normalizer import child_list, child_text, attribute

logger = logging.getLogger(__name__)

MIN_CONTENT_LENGTH = 10


class TournamentParser:
    """Reads the export file and turns it into a Tournament."""

    def __init__(self, min_content_length: int = MIN_CONTENT_LENGTH):
        self.min_content_length = min_content_length

    def read_source(self, source_file: str) -> str:
        """
        Read the export as UTF-8 text.

        Raises SourceUnavailableError when the file does not exist or its
        stripped content is shorter than `min_content_length`. Other I/O
        errors propagate.
        """
        try:
            with open(source_file, 'r', encoding='utf-8') as f:
                content = f.read().strip()
        except FileNotFoundError:
            raise SourceUnavailableError(f"Source file not found: {source_file}")

        if len(content) < self.min_content_length:
            raise SourceUnavailableError(
                f"Source file {source_file} is empty or too short ({len(content)} characters)"
            )
        return content

    def parse(self, content: str) -> Tournament:
        """Parse export content. Raises StructuralIncompletenessError on missing data."""
        try:
            root = ET.fromstring(content)
        except ET.ParseError as e:
            raise StructuralIncompletenessError(f"Export is not well-formed XML: {e}")

        if root.tag != 'tournament':
            raise StructuralIncompletenessError(f"Unexpected root element <{root.tag}>")

        player_elements = child_list(root, 'players/player')
        if not player_elements:
            raise StructuralIncompletenessError("Export contains no players")

        pod_elements = child_list(root, 'pods/pod')
        if not pod_elements:
            raise StructuralIncompletenessError("Export contains no pods")

        players = self._parse_players(player_elements)
        if not players:
            raise StructuralIncompletenessError("Export contains no players with an identifier")

        rounds = []
        for pod in pod_elements:
            rounds.extend(self._parse_rounds(child_list(pod, 'rounds/round')))
        if not rounds:
            raise StructuralIncompletenessError("Export contains no rounds")

        name = child_text(root.find('data'), 'name')
        return Tournament(name=name, players=players, rounds=rounds)

    def load(self, source_file: str) -> Tournament:
        """Read and parse the export file in one step."""
        return self.parse(self.read_source(source_file))

    def _parse_players(self, elements: List[ET.Element]) -> List[Player]:
        players = []
        for element in elements:
            player_id = attribute(element, 'userid')
            if not player_id:
                logger.warning("Skipping player without userid")
                continue
            players.append(Player(
                id=player_id,
                first_name=child_text(element, 'firstname'),
                last_name=child_text(element, 'lastname')
            ))
        return players

    def _parse_rounds(self, elements: List[ET.Element]) -> List[Round]:
        rounds = []
        for element in elements:
            number = self._parse_round_number(element.get('number'))
            if number is None:
                logger.warning(f"Skipping round with invalid number: {element.get('number')!r}")
                continue
            matches = [self._parse_match(m) for m in child_list(element, 'matches/match')]
            rounds.append(Round(number=number, matches=matches))
        return rounds

    @staticmethod
    def _parse_round_number(value: Optional[str]) -> Optional[int]:
        if value is None:
            return None
        try:
            return int(value.strip())
        except ValueError:
            return None

    @staticmethod
    def _parse_match(element: ET.Element) -> Match:
        # Table number is an attribute in current exports, a child element in older ones
        table_number = attribute(element, 'tablenumber') or child_text(element, 'tablenumber')
        return Match(
            table_number=table_number,
            player1_id=attribute(element.find('player1'), 'userid'),
            player2_id=attribute(element.find('player2'), 'userid')
        )
