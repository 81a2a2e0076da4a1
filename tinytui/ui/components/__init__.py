"""
Reusable visual building blocks.

Non-interactive components for rendering UI elements.
"""

from .box import (
    BOX_TL,
    BOX_TR,
    BOX_BL,
    BOX_BR,
    BOX_H,
    BOX_V,
    BOX_T_DOWN,
    BOX_T_UP,
    prepare_content_lines,
    show_box,
    show_box_row,
)

__all__ = [
    "BOX_TL",
    "BOX_TR",
    "BOX_BL",
    "BOX_BR",
    "BOX_H",
    "BOX_V",
    "BOX_T_DOWN",
    "BOX_T_UP",
    "prepare_content_lines",
    "show_box",
    "show_box_row",
]
