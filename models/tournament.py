"""
Tournament, round and match models for the pairings publisher.
"""

from dataclasses import dataclass, field
from typing import List

from .player import Player


@dataclass
class Match:
    """A single pairing of two players at a table."""
    table_number: str
    player1_id: str
    player2_id: str


@dataclass
class Round:
    """One numbered stage of a tournament."""
    number: int
    matches: List[Match] = field(default_factory=list)


@dataclass
class Tournament:
    """Tournament data read from the export file."""
    name: str
    players: List[Player] = field(default_factory=list)
    rounds: List[Round] = field(default_factory=list)


@dataclass(frozen=True)
class PageRow:
    """One row of the pairings table, ready for rendering."""
    table_label: str
    player1_name: str
    player2_name: str


@dataclass
class PublishConfig:
    """Connection settings for the FTP publisher."""
    host: str
    user: str = ""
    password: str = ""
    destination_dir: str = ""
    remote_name: str = "index.html"
    port: int = 21
    timeout: float = 30.0
