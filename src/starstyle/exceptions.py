"""
StarStyle exceptions.

Prop filtering never raises: a dropped property is an expected outcome.
These exceptions cover configuration defects and malformed style input.
"""


class StarStyleError(Exception):
    """Base exception for StarStyle errors"""
    pass


class PropTableError(StarStyleError):
    """Raised at import time when the static prop tables are inconsistent"""
    pass


class StyleCompileError(StarStyleError):
    """Raised when a style object cannot be compiled to CSS"""
    pass
