"""
Utility functions package for the pairings publisher.
"""

from .name_utils import NameUtils, UNKNOWN_PLAYER
from .text_utils import TextUtils

__all__ = ['NameUtils', 'TextUtils', 'UNKNOWN_PLAYER']
