"""Tests for the collapsible navigation drawer."""

import pytest
from wrkrdocs.core.navigation import NAVIGATION, NavigationTree
from wrkrdocs.core.site import SiteConfig
from wrkrdocs.render.drawer import (
    CollapsibleDrawer,
    DrawerState,
    render_drawer,
    toggle_href,
)
from wrkrdocs.render.sidebar import PersistentPanel


class TestDrawerState:
    """Tests for DrawerState transitions."""

    def test__toggle__flips(self) -> None:
        assert DrawerState.CLOSED.toggle() is DrawerState.OPEN
        assert DrawerState.OPEN.toggle() is DrawerState.CLOSED

    @pytest.mark.parametrize("state", list(DrawerState))
    def test__navigate__always_closes(self, state: DrawerState) -> None:
        assert state.navigate() is DrawerState.CLOSED

    @pytest.mark.parametrize(
        ("value", "expected"),
        [("open", DrawerState.OPEN), ("closed", DrawerState.CLOSED), (None, DrawerState.CLOSED), ("x", DrawerState.CLOSED)],
    )
    def test__from_query(self, value: str | None, expected: DrawerState) -> None:
        assert DrawerState.from_query(value) is expected


class TestCollapsibleDrawer:
    """Tests for CollapsibleDrawer."""

    def test__new_drawer__starts_closed(self, sample_tree: NavigationTree) -> None:
        assert CollapsibleDrawer(sample_tree).state is DrawerState.CLOSED

    def test__toggle_then_select__open_then_closed(self, sample_tree: NavigationTree, site: SiteConfig) -> None:
        """Selecting a link navigates and closes in one transition."""
        drawer = CollapsibleDrawer(sample_tree, site)

        assert drawer.toggle() is DrawerState.OPEN
        target = drawer.select("/docs/faq")

        assert target == "/wrkr/docs/faq"
        assert drawer.state is DrawerState.CLOSED

    def test__toggle_twice__closed(self, sample_tree: NavigationTree) -> None:
        drawer = CollapsibleDrawer(sample_tree)

        drawer.toggle()
        drawer.toggle()

        assert drawer.state is DrawerState.CLOSED

    def test__select_while_closed__stays_closed(self, sample_tree: NavigationTree) -> None:
        drawer = CollapsibleDrawer(sample_tree)

        drawer.select("/docs")

        assert drawer.state is DrawerState.CLOSED

    def test__instances__do_not_share_state(self, sample_tree: NavigationTree) -> None:
        first = CollapsibleDrawer(sample_tree)
        second = CollapsibleDrawer(sample_tree)

        first.toggle()

        assert first.state is DrawerState.OPEN
        assert second.state is DrawerState.CLOSED

    def test__render__follows_state(self, sample_tree: NavigationTree) -> None:
        drawer = CollapsibleDrawer(sample_tree)

        assert "drawer-menu" not in drawer.render("/docs")
        drawer.toggle()
        assert "drawer-menu" in drawer.render("/docs")


class TestRenderDrawer:
    """Tests for render_drawer()."""

    def test__closed__only_header(self, sample_tree: NavigationTree) -> None:
        html = render_drawer(sample_tree, "/docs/faq", DrawerState.CLOSED)

        assert 'data-state="closed"' in html
        assert 'aria-expanded="false"' in html
        assert ">Menu</a>" in html
        assert "Quickstart" not in html

    def test__open__every_section(self, sample_tree: NavigationTree) -> None:
        html = render_drawer(sample_tree, "/docs/faq", DrawerState.OPEN)

        assert 'data-state="open"' in html
        assert 'aria-expanded="true"' in html
        assert ">Close</a>" in html
        for item in sample_tree:
            assert item.title in html

    def test__open__links_close_menu(self, sample_tree: NavigationTree, site: SiteConfig) -> None:
        """Leaf links carry no menu parameter, so following one closes the drawer."""
        html = render_drawer(sample_tree, "/", DrawerState.OPEN, site)

        assert 'href="/wrkr/docs/faq" class="nav-link" data-active="false" data-closes-menu="true"' in html
        assert "menu=open" not in html

    def test__aliased_href__both_marked(self, sample_tree: NavigationTree) -> None:
        html = render_drawer(sample_tree, "/docs/faq/", DrawerState.OPEN)

        assert html.count('aria-current="page"') == 2


class TestToggleHref:
    """Tests for toggle_href()."""

    def test__closed__links_to_open(self, site: SiteConfig) -> None:
        assert toggle_href("/docs/faq", DrawerState.CLOSED, site) == "/wrkr/docs/faq?menu=open"

    def test__open__links_to_closed(self, site: SiteConfig) -> None:
        assert toggle_href("/docs/faq", DrawerState.OPEN, site) == "/wrkr/docs/faq"


class TestRendererConsistency:
    """Both variants compute the same active flags."""

    @pytest.mark.parametrize(
        "current_path",
        ["/docs", "/docs/", "/docs/faq", "/docs/commands/scan/", "/llms", "/nope"],
    )
    def test__same_flags_for_same_input(self, current_path: str) -> None:
        panel = PersistentPanel(NAVIGATION)
        drawer = CollapsibleDrawer(NAVIGATION)

        assert panel.nodes(current_path) == drawer.nodes(current_path)

    def test__same_marked_links_in_markup(self, sample_tree: NavigationTree) -> None:
        panel_html = PersistentPanel(sample_tree).render("/docs/faq")
        drawer_html = render_drawer(sample_tree, "/docs/faq", DrawerState.OPEN)

        assert panel_html.count('aria-current="page"') == drawer_html.count('aria-current="page"')
        assert panel_html.count('data-has-active-child="true"') == drawer_html.count(
            'data-has-active-child="true"'
        )
