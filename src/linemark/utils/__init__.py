"""Utility modules for linemark.

Provides:
- text: escape_text, escape_code, escape_html for HTML output
- logger: get_logger for logging
"""

from linemark.utils.logger import get_logger
from linemark.utils.text import escape_code, escape_html, escape_text

__all__ = [
    "escape_code",
    "escape_html",
    "escape_text",
    "get_logger",
]
