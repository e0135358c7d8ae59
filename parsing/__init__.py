"""
Parsing package for the tournament XML export.
"""

from .normalizer import child_list, child_text, attribute
from .tournament_parser import TournamentParser, MIN_CONTENT_LENGTH

__all__ = ['child_list', 'child_text', 'attribute', 'TournamentParser', 'MIN_CONTENT_LENGTH']
