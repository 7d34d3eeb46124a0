"""Persistent navigation panel for wide viewports.

Every section is always expanded. Headings highlight when a direct child is
active; leaves highlight when they match the current path.
"""

from collections.abc import Sequence

from wrkrdocs.core.matching import ActiveNode, resolve_active
from wrkrdocs.core.navigation import NavItem
from wrkrdocs.core.site import DEFAULT_SITE, SiteConfig
from wrkrdocs.core.structured_data import WRKR_APPLICATION
from wrkrdocs.render.templates import get_environment


def render_sidebar(
    tree: Sequence[NavItem],
    current_path: str,
    site: SiteConfig = DEFAULT_SITE,
) -> str:
    """Render the persistent panel markup.

    Args:
        tree: Navigation tree
        current_path: Route path supplied by the router
        site: Site settings used to prefix link hrefs

    Returns:
        HTML fragment
    """
    template = get_environment().get_template("sidebar.html")
    return template.render(
        nodes=resolve_active(tree, current_path),
        site=site,
        repository_url=WRKR_APPLICATION.repository_url,
    )


class PersistentPanel:
    """Wide-viewport navigation bound to one tree and site."""

    def __init__(self, tree: Sequence[NavItem], site: SiteConfig = DEFAULT_SITE) -> None:
        self.tree = tree
        self.site = site

    def nodes(self, current_path: str) -> list[ActiveNode]:
        """Return the active flags this panel renders for a path."""
        return resolve_active(self.tree, current_path)

    def render(self, current_path: str) -> str:
        return render_sidebar(self.tree, current_path, self.site)
