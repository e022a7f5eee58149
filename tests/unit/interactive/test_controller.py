"""Unit tests for the Interactive Outline Controller."""

import pytest

from jsonlens.interactive.controller import COLLAPSED_MARKER, EXPANDED_MARKER, OutlineController
from jsonlens.interactive.rendered import RenderedOutline

ALL_IDS = ["root", "root.a", "root.a.b", "root.a.b.c", "root.d", "root.d.0", "root.d.1"]


@pytest.fixture
def controller(level_doc):
    return OutlineController(RenderedOutline.from_value(level_doc))


class TestInitialState:
    def test_everything_shown(self, controller):
        """A fresh view shows every node at the deepest level."""
        assert controller.shown_ids() == ALL_IDS
        assert controller.state.current_level == 3
        assert controller.state.max_level == 3
        assert controller.state.notice is None

    def test_markers(self, controller):
        """Containers show the expanded marker; leaves have none."""
        assert controller.state.marker("root") == EXPANDED_MARKER
        assert controller.state.marker("root.a.b.c") is None


class TestLevelStepping:
    def test_collapse_one_level_repeatedly(self, controller):
        """Each step hides the children of the new current level."""
        controller.collapse_one_level()
        assert controller.state.current_level == 2
        assert controller.shown_ids() == [i for i in ALL_IDS if i != "root.a.b.c"]
        assert controller.state.marker("root.a.b") == COLLAPSED_MARKER

        controller.collapse_one_level()
        assert controller.state.current_level == 1
        assert controller.shown_ids() == ["root", "root.a", "root.d"]

        controller.collapse_one_level()
        assert controller.state.current_level == 0
        assert controller.shown_ids() == ["root"]

    def test_collapse_at_zero_is_noop(self, controller):
        """Collapsing below level 0 changes nothing."""
        controller.collapse_all()
        controller.collapse_one_level()
        controller.collapse_one_level()
        before = controller.state.snapshot()
        controller.collapse_one_level()
        assert controller.state.snapshot() == before
        assert controller.state.current_level == 0

    def test_expand_one_level(self, controller):
        """Expanding opens every container up to the new level."""
        for _ in range(3):
            controller.collapse_one_level()
        controller.expand_one_level()
        assert controller.state.current_level == 1
        assert controller.shown_ids() == [i for i in ALL_IDS if i != "root.a.b.c"]

    def test_expand_at_max_is_noop(self, controller):
        """Expanding past max_level changes nothing."""
        before = controller.state.snapshot()
        controller.expand_one_level()
        assert controller.state.snapshot() == before

    def test_collapse_all_keeps_root_open(self, controller):
        """collapse_all leaves only depth-0 containers open."""
        controller.collapse_all()
        assert controller.state.current_level == 0
        assert controller.shown_ids() == ["root", "root.a", "root.d"]

    def test_collapse_all_is_idempotent(self, controller):
        """Collapsing everything twice equals doing it once."""
        controller.collapse_all()
        once = controller.state.snapshot()
        controller.collapse_all()
        assert controller.state.snapshot() == once

    def test_expand_all_restores(self, controller):
        """expand_all after collapse_all restores the initial view."""
        controller.collapse_all()
        controller.expand_all()
        assert controller.state.current_level == 3
        assert controller.shown_ids() == ALL_IDS

    def test_levels_stay_in_range(self, controller):
        """current_level never leaves 0..max_level."""
        for _ in range(10):
            controller.expand_one_level()
        assert controller.state.current_level == controller.state.max_level
        for _ in range(10):
            controller.collapse_one_level()
        assert controller.state.current_level == 0


class TestToggle:
    def test_toggle_container(self, controller):
        """Toggling a container hides and restores its body."""
        controller.toggle("root.d")
        assert "root.d.0" not in controller.shown_ids()
        assert "root.d" in controller.shown_ids()
        controller.toggle("root.d")
        assert controller.shown_ids() == ALL_IDS

    def test_toggle_leaf_or_unknown_is_ignored(self, controller):
        """Toggling a leaf or unknown id is a no-op."""
        before = controller.state.snapshot()
        controller.toggle("root.a.b.c")
        controller.toggle("nope")
        assert controller.state.snapshot() == before


class TestSearch:
    def test_case_insensitive_match(self, controller):
        """Search ignores case and reveals the match's ancestors."""
        matches = controller.search("C")
        assert matches == ["root.a.b.c"]
        assert controller.shown_ids() == ["root", "root.a", "root.a.b", "root.a.b.c"]
        assert controller.state.highlighted == {"root.a.b.c"}

    def test_matches_text_and_path(self, controller):
        """Search matches both paths and rendered text."""
        assert controller.search("1") == ["root.a.b.c", "root.d.0", "root.d.1"]

    def test_search_reopens_collapsed_ancestors(self, controller):
        """Ancestors of a match are force-expanded."""
        controller.collapse_all()
        controller.search("c")
        assert "root.a.b.c" in controller.shown_ids()
        assert controller.state.expanded["root.a.b"]

    def test_no_matches(self, controller):
        """A failed search shows only the root and a notice."""
        assert controller.search("zzz") == []
        assert controller.state.notice == 'No matches found for "zzz"'
        assert controller.shown_ids() == ["root"]

    def test_term_is_trimmed(self, controller):
        """The search term is trimmed and lower-cased."""
        controller.search("  ZZZ  ")
        assert controller.state.notice == 'No matches found for "zzz"'

    def test_empty_term_restores_full_view(self, controller):
        """An empty term clears the search."""
        controller.search("zzz")
        assert controller.search("   ") == []
        assert controller.state.notice is None
        assert controller.state.highlighted == set()
        assert controller.shown_ids() == ALL_IDS

    def test_new_search_replaces_highlight(self, controller):
        """Each search starts from a clean highlight set."""
        controller.search("c")
        controller.search("d")
        assert "root.a.b.c" not in controller.state.highlighted
        assert "root.d" in controller.state.highlighted

    def test_root_never_hidden(self, controller):
        """The root stays visible during a search."""
        controller.search("d.1")
        assert controller.shown_ids()[0] == "root"
