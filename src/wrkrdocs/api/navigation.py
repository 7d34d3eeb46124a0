"""Navigation API endpoints.

Provides the navigation tree with active flags and the route index.
"""

from aiohttp import web

from wrkrdocs.app_keys import navigation_key
from wrkrdocs.core.matching import resolve_active
from wrkrdocs.core.navigation import aliased_hrefs, route_index
from wrkrdocs.core.site import normalize_path


def create_navigation_routes() -> list[web.RouteDef]:
    return [
        web.get("/api/navigation", get_navigation),
        web.get("/api/routes", get_routes),
    ]


async def get_navigation(request: web.Request) -> web.Response:
    tree = request.app[navigation_key]
    path = request.query.get("path")
    if path is None:
        return web.json_response({"items": [item.to_dict() for item in tree]})

    current_path = normalize_path(path)
    nodes = resolve_active(tree, current_path)
    return web.json_response(
        {"path": current_path, "items": [node.to_dict() for node in nodes]},
    )


async def get_routes(request: web.Request) -> web.Response:
    tree = request.app[navigation_key]
    return web.json_response(
        {"routes": route_index(tree), "aliases": aliased_hrefs(tree)},
    )
