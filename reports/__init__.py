"""
Reports package: HTML page rendering.
"""

from .page_renderer import PageRenderer, WAITING_PAGE

__all__ = ['PageRenderer', 'WAITING_PAGE']
