"""
Text processing utilities for the pairings publisher.
"""

import html
import re


class TextUtils:
    """Utilities for text cleanup and HTML escaping."""

    @staticmethod
    def clean_text(text) -> str:
        """Collapse whitespace runs and strip; None becomes an empty string."""
        if text is None:
            return ""
        return re.sub(r'\s+', ' ', str(text)).strip()

    @staticmethod
    def escape_html(text) -> str:
        """Escape markup characters, quotes included, for element and attribute content."""
        return html.escape(TextUtils.clean_text(text), quote=True)
