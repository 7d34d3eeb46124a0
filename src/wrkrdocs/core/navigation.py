"""Navigation tree for the documentation site.

The tree is static configuration: an ordered tuple of sections, each holding
leaf items. Renderers and the server receive it explicitly and only read it.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from typing import TypedDict

logger = logging.getLogger(__name__)


class NavItemDict(TypedDict, total=False):
    """Dictionary representation of a navigation item."""

    title: str
    href: str
    children: list[NavItemDict]


class RouteDict(TypedDict):
    """Dictionary representation of a route index entry."""

    title: str
    href: str


@dataclass(frozen=True)
class NavItem:
    """Navigation item with children for UI tree.

    Hrefs are site-root-relative and never include the deployment base path.
    The same href may appear in more than one section.
    """

    title: str
    href: str
    children: tuple[NavItem, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if not self.title:
            raise ValueError(f"Navigation item title must not be empty: {self.href!r}")
        if not self.href.startswith("/"):
            raise ValueError(f"Navigation href must start with '/': {self.href!r}")

    def to_dict(self) -> NavItemDict:
        """Convert to dictionary for JSON serialization."""
        result: NavItemDict = {"title": self.title, "href": self.href}
        if self.children:
            result["children"] = [child.to_dict() for child in self.children]
        return result


NavigationTree = tuple[NavItem, ...]


def section(title: str, href: str, *children: tuple[str, str]) -> NavItem:
    """Build a section from (title, href) leaf pairs."""
    return NavItem(
        title=title,
        href=href,
        children=tuple(NavItem(title=t, href=h) for t, h in children),
    )


NAVIGATION: NavigationTree = (
    section(
        "Start Here",
        "/docs",
        ("Adopt In One PR", "/docs/adopt_in_one_pr"),
        ("Quickstart", "/docs/examples/quickstart"),
        ("Integration Checklist", "/docs/integration_checklist"),
        ("FAQ", "/docs/faq"),
    ),
    section(
        "Intent Guides",
        "/docs/intent/scan-org-repos-for-ai-agents-configs",
        ("Scan Org Repos", "/docs/intent/scan-org-repos-for-ai-agents-configs"),
        ("Detect Headless Risk", "/docs/intent/detect-headless-agent-risk"),
        ("Generate Evidence", "/docs/intent/generate-compliance-evidence-from-scans"),
        ("Gate Regressions", "/docs/intent/gate-on-drift-and-regressions"),
    ),
    section(
        "Technical Foundations",
        "/docs/architecture",
        ("Docs Map", "/docs"),
        ("Architecture", "/docs/architecture"),
        ("Mental Model", "/docs/concepts/mental_model"),
        ("Policy Authoring", "/docs/policy_authoring"),
        ("Failure Taxonomy", "/docs/failure_taxonomy_exit_codes"),
        ("Threat Model", "/docs/threat_model"),
    ),
    section(
        "Trust and Contracts",
        "/docs/trust/deterministic-guarantees",
        ("Deterministic Guarantees", "/docs/trust/deterministic-guarantees"),
        ("Coverage Matrix", "/docs/trust/detection-coverage-matrix"),
        ("Proof Verification", "/docs/trust/proof-chain-verification"),
        ("Contracts and Schemas", "/docs/trust/contracts-and-schemas"),
        ("Compatibility Matrix", "/docs/contracts/compatibility_matrix"),
        ("Security and Privacy", "/docs/trust/security-and-privacy"),
        ("Release Integrity", "/docs/trust/release-integrity"),
        ("Manifest Spec", "/docs/specs/wrkr-manifest"),
    ),
    section(
        "Command Reference",
        "/docs/commands/index",
        ("index", "/docs/commands/index"),
        ("root", "/docs/commands/root"),
        ("scan", "/docs/commands/scan"),
        ("report", "/docs/commands/report"),
        ("score", "/docs/commands/score"),
        ("verify", "/docs/commands/verify"),
        ("evidence", "/docs/commands/evidence"),
        ("regress", "/docs/commands/regress"),
        ("fix", "/docs/commands/fix"),
    ),
    section(
        "Positioning",
        "/docs/positioning",
        ("Positioning", "/docs/positioning"),
        ("Evidence Templates", "/docs/evidence_templates"),
        ("Operator Playbooks", "/docs/examples/operator-playbooks"),
    ),
    section(
        "Docs Hub",
        "/docs",
        ("Docs Home", "/docs"),
        ("LLM Context", "/llms"),
        ("llms.txt", "/llms.txt"),
        ("llms-full.txt", "/llms-full.txt"),
        ("AI Sitemap", "/ai-sitemap.xml"),
    ),
)


def iter_items(tree: Sequence[NavItem]) -> Iterator[NavItem]:
    """Yield every node of the tree depth-first, in display order."""
    for item in tree:
        yield item
        yield from iter_items(item.children)


def iter_leaves(tree: Sequence[NavItem]) -> Iterator[NavItem]:
    """Yield every node without children, in display order."""
    for item in iter_items(tree):
        if not item.children:
            yield item


def route_index(tree: Sequence[NavItem]) -> list[RouteDict]:
    """Build the authoritative route list for discovery resources.

    Each href is listed once, in first-seen order, with the title of its
    first occurrence. Sections contribute their own href as well.

    Args:
        tree: Navigation tree

    Returns:
        List of {"title", "href"} entries
    """
    seen: set[str] = set()
    routes: list[RouteDict] = []
    for item in iter_items(tree):
        if item.href in seen:
            continue
        seen.add(item.href)
        routes.append({"title": item.title, "href": item.href})
    return routes


def aliased_hrefs(tree: Sequence[NavItem]) -> dict[str, list[str]]:
    """Find leaf hrefs that appear more than once.

    Aliasing is permitted; this is informational only.

    Returns:
        Mapping of href to the titles it appears under, in display order
    """
    titles_by_href: dict[str, list[str]] = {}
    for item in iter_leaves(tree):
        titles_by_href.setdefault(item.href, []).append(item.title)

    aliases = {href: titles for href, titles in titles_by_href.items() if len(titles) > 1}
    for href, titles in aliases.items():
        logger.debug(f"Aliased href {href} appears as: {', '.join(titles)}")
    return aliases
