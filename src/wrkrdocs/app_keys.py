"""Application keys for type-safe app configuration access."""

from pathlib import Path

from aiohttp import web

from wrkrdocs.core.site import SiteConfig

site_key = web.AppKey("site", SiteConfig)
navigation_key = web.AppKey("navigation", tuple)
static_dir_key = web.AppKey("static_dir", Path)
verbose_key = web.AppKey("verbose", bool)
