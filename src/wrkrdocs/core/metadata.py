"""Per-page metadata: title, description, canonical URL and Open Graph."""

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

from wrkrdocs.core.matching import is_active
from wrkrdocs.core.navigation import NavItem, iter_items
from wrkrdocs.core.site import SiteConfig, normalize_path
from wrkrdocs.core.structured_data import (
    HOME_FAQ,
    WRKR_APPLICATION,
    faq_page,
    software_application,
)

SITE_NAME = "Wrkr"
SITE_TITLE = "Wrkr | AI-DSPM Discovery with Deterministic Proof"
SITE_DESCRIPTION = (
    "Wrkr evaluates AI dev tool configurations across GitHub repos/orgs against "
    "policy. Posture-scored, compliance-ready, deterministic by default."
)
OG_IMAGE = "/og.svg"


@dataclass(frozen=True)
class PageInfo:
    """Authored title and description for a page."""

    title: str
    description: str


# Pages with authored metadata; other routes derive it from the navigation
PAGES: dict[str, PageInfo] = {
    "/": PageInfo(
        title=SITE_TITLE,
        description=(
            "Wrkr evaluates your AI dev tool configurations across your GitHub "
            "repo/org against policy. Posture-scored, compliance-ready."
        ),
    ),
    "/docs/": PageInfo(
        title="Wrkr Documentation",
        description="Command-first, deterministic documentation for Wrkr AI-DSPM workflows.",
    ),
    "/llms/": PageInfo(
        title="LLM Context | Wrkr",
        description=(
            "Machine-readable and human-readable context for assistants and "
            "evaluators about Wrkr OSS."
        ),
    ),
}


@dataclass(frozen=True)
class PageMetadata:
    """Metadata emitted in a page head."""

    title: str
    description: str
    canonical: str
    open_graph: dict[str, Any] = field(default_factory=dict)
    icons: dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "title": self.title,
            "description": self.description,
            "canonical": self.canonical,
            "openGraph": self.open_graph,
            "icons": self.icons,
        }


def find_page_info(tree: Sequence[NavItem], path: str) -> PageInfo | None:
    """Look up authored or navigation-derived info for a route path.

    Returns:
        PageInfo, or None when the route is neither authored nor in the tree
    """
    normalized = normalize_path(path)
    for known, info in PAGES.items():
        if is_active(normalized, known):
            return info

    for item in iter_items(tree):
        if is_active(normalized, item.href):
            return PageInfo(title=f"{item.title} | {SITE_NAME}", description=SITE_DESCRIPTION)
    return None


def build_page_metadata(
    site: SiteConfig,
    path: str,
    title: str | None = None,
    description: str | None = None,
) -> PageMetadata:
    """Build metadata for a page.

    Args:
        site: Site deployment settings
        path: Route path of the page
        title: Page title (default: site title)
        description: Page description (default: site description)

    Returns:
        PageMetadata with canonical URL and base-path-correct icon links
    """
    effective_title = title or SITE_TITLE
    effective_description = description or SITE_DESCRIPTION
    canonical = site.canonical_url(path)

    return PageMetadata(
        title=effective_title,
        description=effective_description,
        canonical=canonical,
        open_graph={
            "title": effective_title,
            "description": effective_description,
            "url": canonical,
            "siteName": SITE_NAME,
            "type": "website",
            "images": [
                {
                    "url": site.canonical_url(OG_IMAGE),
                    "width": 1200,
                    "height": 630,
                    "alt": SITE_NAME,
                },
            ],
        },
        icons={
            "icon": site.link("/favicon.svg"),
            "shortcut": site.link("/favicon.ico"),
            "apple": site.link("/favicon.svg"),
        },
    )


def page_descriptors(path: str) -> list[dict[str, Any]]:
    """Return the JSON-LD descriptors embedded in a page.

    Only the home page carries descriptors.
    """
    if not is_active(normalize_path(path), "/"):
        return []
    return [software_application(WRKR_APPLICATION), faq_page(HOME_FAQ)]
