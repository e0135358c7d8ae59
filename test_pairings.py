#!/usr/bin/env python3
"""
Tests for round selection, name resolution and row building.
"""

import unittest

from models.player import Player
from models.tournament import Tournament, Round, Match, PageRow
from models.exceptions import MissingDataError
from pairings.pairing_processor import PairingProcessor, select_latest_round
from utils.name_utils import NameUtils, UNKNOWN_PLAYER


class TestSelectLatestRound(unittest.TestCase):
    """Test cases for select_latest_round."""

    def test_single_round(self):
        only = Round(number=1)
        self.assertIs(select_latest_round([only]), only)

    def test_unsorted_rounds(self):
        rounds = [Round(number=n) for n in (3, 1, 7, 2)]
        self.assertEqual(select_latest_round(rounds).number, 7)

    def test_numeric_not_lexicographic(self):
        rounds = [Round(number=9), Round(number=10)]
        self.assertEqual(select_latest_round(rounds).number, 10)

    def test_string_numbers_compared_numerically(self):
        rounds = [Round(number="9"), Round(number="10")]
        self.assertEqual(select_latest_round(rounds).number, "10")

    def test_tie_is_deterministic(self):
        first = Round(number=4, matches=[Match("1", "a", "b")])
        second = Round(number=4, matches=[Match("2", "c", "d")])
        rounds = [Round(number=2), first, second]

        self.assertIs(select_latest_round(rounds), first)
        self.assertIs(select_latest_round(rounds), first)

    def test_empty(self):
        with self.assertRaises(MissingDataError):
            select_latest_round([])


class TestNameUtils(unittest.TestCase):
    """Test cases for player name resolution."""

    def setUp(self):
        self.players = [
            Player(id="1", first_name="Anna", last_name="Kowalska"),
            Player(id="2", first_name="Jan", last_name="Nowak"),
        ]

    def test_build_name_map(self):
        name_map = NameUtils.build_name_map(self.players)
        self.assertEqual(name_map, {"1": "Anna Kowalska", "2": "Jan Nowak"})

    def test_resolve_known_and_unknown(self):
        name_map = NameUtils.build_name_map(self.players)
        self.assertEqual(NameUtils.resolve(name_map, "2"), "Jan Nowak")
        self.assertEqual(NameUtils.resolve(name_map, "99"), UNKNOWN_PLAYER)
        self.assertEqual(NameUtils.resolve(name_map, ""), UNKNOWN_PLAYER)
        self.assertEqual(NameUtils.resolve(name_map, None), UNKNOWN_PLAYER)
        self.assertEqual(UNKNOWN_PLAYER, "???")

    def test_empty_roster(self):
        self.assertEqual(NameUtils.build_name_map([]), {})

    def test_name_map_uses_display_name(self):
        player = Player(id="3", first_name=None, last_name="Kowalska")
        self.assertEqual(player.display_name, " Kowalska")
        self.assertEqual(NameUtils.build_name_map([player]), {"3": " Kowalska"})


class TestPairingProcessor(unittest.TestCase):
    """Test cases for PairingProcessor."""

    def _tournament(self, rounds):
        return Tournament(
            name="Puchar",
            players=[
                Player(id="1", first_name="Anna", last_name="Kowalska"),
                Player(id="2", first_name="Jan", last_name="Nowak"),
            ],
            rounds=rounds
        )

    def test_rows_for_latest_round(self):
        tournament = self._tournament([
            Round(number=1, matches=[Match("9", "2", "1")]),
            Round(number=2, matches=[Match("5", "1", "2"), Match("6", "2", "1")]),
        ])
        rows = PairingProcessor(tournament).build_rows()

        self.assertEqual(rows, [
            PageRow("5", "Anna Kowalska", "Jan Nowak"),
            PageRow("6", "Jan Nowak", "Anna Kowalska"),
        ])

    def test_unknown_ids_become_placeholder(self):
        tournament = self._tournament([Round(number=1, matches=[Match("3", "1", "42"), Match("4", "", "2")])])
        processor = PairingProcessor(tournament)
        rows = processor.build_rows()

        self.assertEqual(rows[0], PageRow("3", "Anna Kowalska", "???"))
        self.assertEqual(rows[1], PageRow("4", "???", "Jan Nowak"))
        self.assertEqual(processor.unresolved_ids, ["42", "<missing>"])

    def test_unresolved_ids_reset_between_calls(self):
        tournament = self._tournament([Round(number=1, matches=[Match("3", "1", "42")])])
        processor = PairingProcessor(tournament)
        processor.build_rows()
        processor.build_rows()
        self.assertEqual(processor.unresolved_ids, ["42"])

    def test_round_without_matches(self):
        rows = PairingProcessor(self._tournament([Round(number=1)])).build_rows()
        self.assertEqual(rows, [])

    def test_no_rounds(self):
        with self.assertRaises(MissingDataError):
            PairingProcessor(self._tournament([])).build_rows()


if __name__ == '__main__':
    unittest.main(verbosity=2)
