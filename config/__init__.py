"""
Configuration package for the pairings publisher.
"""

from .config_manager import ConfigManager

__all__ = ['ConfigManager']
