"""aiohttp preview server for wrkrdocs.

Application factory and route registration. Pages are served under the
configured base path, mirroring the static deployment.
"""

import logging
from collections.abc import Sequence

from aiohttp import web

from wrkrdocs.api.navigation import create_navigation_routes
from wrkrdocs.api.pages import create_pages_routes
from wrkrdocs.app_keys import navigation_key, site_key, static_dir_key, verbose_key
from wrkrdocs.assets import get_static_dir
from wrkrdocs.config import Config
from wrkrdocs.core.metadata import build_page_metadata, find_page_info, page_descriptors
from wrkrdocs.core.navigation import NAVIGATION, NavItem
from wrkrdocs.core.site import normalize_path
from wrkrdocs.render.drawer import MENU_QUERY_PARAM, DrawerState
from wrkrdocs.render.page import render_page

logger = logging.getLogger(__name__)

STATIC_FILES = ("favicon.svg", "styles.css")


async def render_shell(request: web.Request) -> web.Response:
    """Render the HTML page for a route.

    The drawer state comes from the ``menu`` query parameter, so every
    navigation link lands on a page with the drawer closed.
    """
    site = request.app[site_key]
    tree = request.app[navigation_key]
    current_path = normalize_path(request.match_info["path"])

    info = find_page_info(tree, current_path)
    if info is None:
        raise web.HTTPNotFound(text=f"No page for route {current_path}")

    state = DrawerState.from_query(request.query.get(MENU_QUERY_PARAM))
    meta = build_page_metadata(site, current_path, info.title, info.description)
    html = render_page(
        tree,
        site,
        current_path,
        meta,
        state=state,
        descriptors=page_descriptors(current_path),
    )
    if request.app[verbose_key]:
        logger.info(f"Rendered {current_path} (drawer {state.value})")
    return web.Response(text=html, content_type="text/html")


def create_app(
    config: Config,
    tree: Sequence[NavItem] = NAVIGATION,
    *,
    verbose: bool = False,
) -> web.Application:
    """Create aiohttp application.

    Args:
        config: Application configuration
        tree: Navigation tree to serve
        verbose: Log every rendered page

    Returns:
        Configured aiohttp application
    """
    app = web.Application()

    app[site_key] = config.site
    app[navigation_key] = tuple(tree)
    app[verbose_key] = verbose

    # API routes (must be registered first to take precedence over pages)
    app.router.add_routes(create_pages_routes())
    app.router.add_routes(create_navigation_routes())

    base_path = config.site.base_path
    static_dir = get_static_dir()
    app[static_dir_key] = static_dir
    for name in STATIC_FILES:
        app.router.add_get(f"{base_path}/{name}", _static_handler(name))

    if base_path:
        app.router.add_get(base_path, _redirect_to_root)

    # Pages - must be last to catch all remaining routes
    app.router.add_get(f"{base_path}/{{path:.*}}", render_shell)

    return app


def _static_handler(name: str):
    async def handler(request: web.Request) -> web.FileResponse:
        static_path = request.app[static_dir_key] / name
        if not static_path.exists():
            raise web.HTTPNotFound()
        return web.FileResponse(static_path)

    return handler


async def _redirect_to_root(request: web.Request) -> web.Response:
    """Redirect the bare base path to the site root."""
    site = request.app[site_key]
    raise web.HTTPFound(site.link("/"))


def run_server(config: Config, *, verbose: bool = False) -> None:
    """Run the server.

    Args:
        config: Application configuration
        verbose: Log every rendered page
    """
    app = create_app(config, verbose=verbose)
    logger.info(f"Serving {config.site.root_url} preview at {config.site.link('/')}")
    web.run_app(app, host=config.server.host, port=config.server.port)
