"""Shared test fixtures."""

import pytest
from wrkrdocs.config import Config, ServerConfig
from wrkrdocs.core.navigation import NavItem, NavigationTree, section
from wrkrdocs.core.site import SiteConfig


@pytest.fixture
def site() -> SiteConfig:
    """Site deployed under the /wrkr sub-path."""
    return SiteConfig(origin="https://clyra-ai.github.io", base_path="/wrkr")


@pytest.fixture
def test_config(site: SiteConfig) -> Config:
    """Create a test configuration deployed under /wrkr."""
    return Config(server=ServerConfig(), site=site)


@pytest.fixture
def sample_tree() -> NavigationTree:
    """Small tree with an aliased href and one nested level below a leaf."""
    return (
        section(
            "Start Here",
            "/docs",
            ("Quickstart", "/docs/quickstart"),
            ("FAQ", "/docs/faq"),
        ),
        NavItem(
            title="Reference",
            href="/docs/commands",
            children=(
                NavItem(
                    title="Commands",
                    href="/docs/commands/index",
                    children=(
                        NavItem(title="scan", href="/docs/commands/scan"),
                        NavItem(title="report", href="/docs/commands/report"),
                    ),
                ),
            ),
        ),
        section(
            "Docs Hub",
            "/docs",
            ("Docs Home", "/docs"),
            ("FAQ Again", "/docs/faq"),
        ),
    )
