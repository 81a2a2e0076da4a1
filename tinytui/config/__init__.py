"""
Configuration for tinytui.
"""

from .settings import TuiSettings

__all__ = [
    "TuiSettings",
]
