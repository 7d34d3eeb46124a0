"""Collapsible navigation drawer for narrow viewports.

One open/closed state controls the whole menu. Selecting a link navigates
and closes the drawer in a single transition.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from enum import Enum

from wrkrdocs.core.matching import ActiveNode, resolve_active
from wrkrdocs.core.navigation import NavItem
from wrkrdocs.core.site import DEFAULT_SITE, SiteConfig
from wrkrdocs.render.templates import get_environment

logger = logging.getLogger(__name__)

MENU_QUERY_PARAM = "menu"


class DrawerState(Enum):
    """Open/closed state of the drawer."""

    CLOSED = "closed"
    OPEN = "open"

    @property
    def is_open(self) -> bool:
        return self is DrawerState.OPEN

    def toggle(self) -> DrawerState:
        """Flip between open and closed."""
        return DrawerState.CLOSED if self.is_open else DrawerState.OPEN

    def navigate(self) -> DrawerState:
        """Close as part of selecting a link."""
        return DrawerState.CLOSED

    @classmethod
    def from_query(cls, value: str | None) -> DrawerState:
        """Read state from the ``menu`` query parameter (``?menu=open``)."""
        return cls.OPEN if value == cls.OPEN.value else cls.CLOSED


def toggle_href(current_path: str, state: DrawerState, site: SiteConfig = DEFAULT_SITE) -> str:
    """Build the href of the toggle control for server-rendered pages.

    The link points back at the current page with the flipped state.
    """
    href = site.link(current_path)
    if state.toggle().is_open:
        return f"{href}?{MENU_QUERY_PARAM}={DrawerState.OPEN.value}"
    return href


def render_drawer(
    tree: Sequence[NavItem],
    current_path: str,
    state: DrawerState = DrawerState.CLOSED,
    site: SiteConfig = DEFAULT_SITE,
) -> str:
    """Render the drawer markup.

    Only the header bar is rendered while closed.

    Args:
        tree: Navigation tree
        current_path: Route path supplied by the router
        state: Drawer state
        site: Site settings used to prefix link hrefs

    Returns:
        HTML fragment
    """
    template = get_environment().get_template("drawer.html")
    return template.render(
        nodes=resolve_active(tree, current_path),
        site=site,
        state=state,
        toggle_href=toggle_href(current_path, state, site),
    )


class CollapsibleDrawer:
    """Narrow-viewport navigation owning its own open/closed state.

    State is per instance and starts closed; it is never persisted.
    """

    def __init__(self, tree: Sequence[NavItem], site: SiteConfig = DEFAULT_SITE) -> None:
        self.tree = tree
        self.site = site
        self._state = DrawerState.CLOSED

    @property
    def state(self) -> DrawerState:
        return self._state

    def toggle(self) -> DrawerState:
        """Handle a click on the toggle control."""
        self._state = self._state.toggle()
        logger.debug(f"Drawer toggled {self._state.value}")
        return self._state

    def select(self, href: str) -> str:
        """Handle a click on a menu link.

        Closes the drawer and returns the link target in one step.

        Args:
            href: Route path of the selected item

        Returns:
            Base-path-prefixed href to navigate to
        """
        self._state = self._state.navigate()
        return self.site.link(href)

    def nodes(self, current_path: str) -> list[ActiveNode]:
        """Return the active flags this drawer renders for a path."""
        return resolve_active(self.tree, current_path)

    def render(self, current_path: str) -> str:
        return render_drawer(self.tree, current_path, self._state, self.site)
