"""
tinytui - ANSI/VT100 escape helpers and two small interactive widgets.

Import from submodules directly:
    from tinytui.ui import show_menu, MenuItem, probe_size
    from tinytui.config import TuiSettings
"""

__version__ = "1.0.0"
