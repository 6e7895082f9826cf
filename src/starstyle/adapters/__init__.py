"""
Adapter Layer

Web framework integrations.
"""

from .fasthtml import register_stylesheet, stylesheet_link, stylesheet_tag

__all__ = [
    "register_stylesheet",
    "stylesheet_link",
    "stylesheet_tag",
]
