"""
Models package for the pairings publisher.

This package contains the data models, dataclasses and exceptions used throughout the system.
"""

from .player import Player
from .tournament import Tournament, Round, Match, PageRow, PublishConfig
from .exceptions import (
    PairingsError,
    SourceUnavailableError,
    StructuralIncompletenessError,
    MissingDataError,
    PublishError,
)

__all__ = [
    'Player', 'Tournament', 'Round', 'Match', 'PageRow', 'PublishConfig',
    'PairingsError', 'SourceUnavailableError', 'StructuralIncompletenessError',
    'MissingDataError', 'PublishError'
]
