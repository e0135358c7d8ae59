"""
Pairings package: round selection and row building.
"""

from .pairing_processor import PairingProcessor, select_latest_round

__all__ = ['PairingProcessor', 'select_latest_round']
