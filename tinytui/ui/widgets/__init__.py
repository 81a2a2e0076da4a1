"""
Interactive reusable pieces.
"""

from .menu import (
    MenuItem,
    MenuExitReason,
    MenuSelectionResult,
    MenuSession,
    show_menu,
)
from .spinner import (
    SPINNER_FRAMES,
    Spinner,
    spinner,
)

__all__ = [
    "MenuItem",
    "MenuExitReason",
    "MenuSelectionResult",
    "MenuSession",
    "show_menu",
    "SPINNER_FRAMES",
    "Spinner",
    "spinner",
]
