"""Full page shell: metadata head, drawer, sidebar and content area."""

from collections.abc import Sequence
from typing import Any

from markupsafe import Markup

from wrkrdocs.core.metadata import PageMetadata
from wrkrdocs.core.navigation import NavItem
from wrkrdocs.core.site import SiteConfig
from wrkrdocs.render.drawer import DrawerState, render_drawer
from wrkrdocs.render.sidebar import render_sidebar
from wrkrdocs.render.templates import get_environment


def render_page(
    tree: Sequence[NavItem],
    site: SiteConfig,
    current_path: str,
    meta: PageMetadata,
    *,
    state: DrawerState = DrawerState.CLOSED,
    descriptors: Sequence[dict[str, Any]] = (),
) -> str:
    """Render an HTML page for a route.

    Both navigation variants are emitted; the stylesheet shows one of them
    depending on viewport width.

    Args:
        tree: Navigation tree
        site: Site deployment settings
        current_path: Route path of the page
        meta: Page metadata for the head
        state: Drawer state
        descriptors: JSON-LD descriptors embedded as scripts

    Returns:
        HTML document
    """
    template = get_environment().get_template("layout.html")
    return template.render(
        site=site,
        meta=meta,
        current_path=current_path,
        descriptors=list(descriptors),
        drawer=Markup(render_drawer(tree, current_path, state, site)),
        sidebar=Markup(render_sidebar(tree, current_path, site)),
    )
