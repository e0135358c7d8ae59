"""
Player data model for the pairings publisher.
"""

from dataclasses import dataclass


@dataclass
class Player:
    """A registered tournament player."""
    id: str
    first_name: str
    last_name: str

    @property
    def display_name(self) -> str:
        return f"{self.first_name or ''} {self.last_name or ''}"
