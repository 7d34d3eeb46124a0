"""Pages API endpoint.

Returns page metadata, breadcrumbs and structured data as JSON.
"""

import json
import logging
from hashlib import md5

from aiohttp import web

from wrkrdocs.app_keys import navigation_key, site_key
from wrkrdocs.core.matching import find_sections
from wrkrdocs.core.metadata import build_page_metadata, find_page_info, page_descriptors
from wrkrdocs.core.site import normalize_path

logger = logging.getLogger(__name__)


def create_pages_routes() -> list[web.RouteDef]:
    return [
        web.get("/api/pages/{path:.*}", get_page),
    ]


async def get_page(request: web.Request) -> web.Response:
    path = request.match_info["path"]
    site = request.app[site_key]
    tree = request.app[navigation_key]

    current_path = normalize_path(path)
    info = find_page_info(tree, current_path)
    if info is None:
        logger.debug(f"No page for route {current_path}")
        return web.json_response(
            {"error": "Page not found", "path": current_path},
            status=404,
        )

    meta = build_page_metadata(site, current_path, info.title, info.description)
    breadcrumbs = [
        {"title": section.title, "href": section.href}
        for section in find_sections(tree, current_path)
    ]

    response_data = {
        "meta": meta.to_dict(),
        "breadcrumbs": breadcrumbs,
        "structuredData": page_descriptors(current_path),
    }

    etag = _compute_etag(json.dumps(response_data, sort_keys=True))
    if request.headers.get("If-None-Match") == etag:
        return web.Response(status=304)

    return web.json_response(
        response_data,
        headers={"ETag": etag, "Cache-Control": "private, max-age=60"},
    )


def _compute_etag(content: str) -> str:
    # First 16 hex chars (64 bits) are enough for cache invalidation
    content_hash = md5(content.encode("utf-8"), usedforsecurity=False).hexdigest()[:16]
    return f'"{content_hash}"'
