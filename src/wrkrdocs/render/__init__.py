"""Navigation renderers for wide and narrow viewports."""

from wrkrdocs.render.drawer import CollapsibleDrawer, DrawerState, render_drawer
from wrkrdocs.render.sidebar import PersistentPanel, render_sidebar

__all__ = [
    "CollapsibleDrawer",
    "DrawerState",
    "PersistentPanel",
    "render_drawer",
    "render_sidebar",
]
