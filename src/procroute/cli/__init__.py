"""procroute CLI display module.

- display.py: Rich UI components (route table, error panel)

Commands live in procroute.main.
"""

from .display import build_route_table, render_error

__all__ = [
    "build_route_table",
    "render_error",
]
