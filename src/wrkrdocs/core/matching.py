"""Active route matching.

A navigation item is active when the current route path equals its href up
to exactly one trailing slash. Every matching item is active, so an href
listed in two sections highlights in both.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import TypedDict

from wrkrdocs.core.navigation import NavItem


class ActiveNodeDict(TypedDict, total=False):
    """Dictionary representation of an active node."""

    title: str
    href: str
    active: bool
    hasActiveChild: bool
    children: list[ActiveNodeDict]


@dataclass(frozen=True)
class ActiveNode:
    """Navigation item with its active flags for one current path."""

    item: NavItem
    active: bool
    has_active_child: bool
    children: tuple[ActiveNode, ...] = field(default_factory=tuple)

    def to_dict(self) -> ActiveNodeDict:
        """Convert to dictionary for JSON serialization."""
        result: ActiveNodeDict = {
            "title": self.item.title,
            "href": self.item.href,
            "active": self.active,
            "hasActiveChild": self.has_active_child,
        }
        if self.children:
            result["children"] = [child.to_dict() for child in self.children]
        return result


def is_active(current_path: str, href: str) -> bool:
    """Check whether two route paths are equal up to one trailing slash.

    No prefix matching and no case folding: "/docs" does not match
    "/docs/faq", and "/docs//" does not match "/docs".
    """
    return (
        current_path == href
        or current_path == f"{href}/"
        or f"{current_path}/" == href
    )


def section_has_active_child(current_path: str, section: NavItem) -> bool:
    """Check whether any direct child of a section is active."""
    return any(is_active(current_path, child.href) for child in section.children)


def has_active_descendant(current_path: str, node: NavItem) -> bool:
    """Check whether any node below the given one is active, at any depth."""
    return any(
        is_active(current_path, child.href) or has_active_descendant(current_path, child)
        for child in node.children
    )


def resolve_active(tree: Sequence[NavItem], current_path: str) -> list[ActiveNode]:
    """Compute active flags for every node of the tree.

    Args:
        tree: Navigation tree
        current_path: Route path supplied by the router

    Returns:
        List of ActiveNode trees mirroring the navigation tree
    """
    return [_resolve_node(item, current_path) for item in tree]


def find_sections(tree: Sequence[NavItem], current_path: str) -> list[NavItem]:
    """Find top-level sections with an active node below them."""
    return [item for item in tree if has_active_descendant(current_path, item)]


def _resolve_node(item: NavItem, current_path: str) -> ActiveNode:
    """Recursively build ActiveNode from navigation item."""
    return ActiveNode(
        item=item,
        active=is_active(current_path, item.href),
        has_active_child=section_has_active_child(current_path, item),
        children=tuple(_resolve_node(child, current_path) for child in item.children),
    )
