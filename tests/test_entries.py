"""Tests for sidebar entry model."""

import pytest
from shelfnav.core.entries import AutoSection, LinkEntry, ResolvedTree, SectionEntry


class TestToDict:
    """Tests for to_dict() on resolved entries."""

    def test__link__minimal_dict(self) -> None:
        """Convert link to dict."""
        link = LinkEntry(label="Topics", target="graphs/topics")

        assert link.to_dict() == {"type": "link", "label": "Topics", "slug": "graphs/topics"}

    def test__section__nested_dict(self) -> None:
        """Convert section with nested children to dict."""
        section = SectionEntry(
            label="Graphs",
            children=(
                LinkEntry(label="Topics", target="graphs/topics"),
                SectionEntry(label="Trees", collapsed=True),
            ),
        )

        assert section.to_dict() == {
            "type": "group",
            "label": "Graphs",
            "collapsed": False,
            "items": [
                {"type": "link", "label": "Topics", "slug": "graphs/topics"},
                {"type": "group", "label": "Trees", "collapsed": True, "items": []},
            ],
        }

    def test__unresolved_section__raises_error(self) -> None:
        """Refuse to serialize sections holding auto sections."""
        section = SectionEntry(label="CS", children=(AutoSection(label="Graphs", directory="graphs"),))

        with pytest.raises(TypeError, match="unresolved"):
            section.to_dict()

    def test__tree__list_of_dicts(self) -> None:
        """Convert tree to list of item dicts."""
        tree = ResolvedTree(items=(LinkEntry(label="Intro", target="intro"),))

        assert tree.to_dict() == [{"type": "link", "label": "Intro", "slug": "intro"}]


class TestFindSection:
    """Tests for ResolvedTree.find_section()."""

    @pytest.fixture
    def tree(self) -> ResolvedTree:
        return ResolvedTree(
            items=(
                LinkEntry(label="Intro", target="intro"),
                SectionEntry(
                    label="Graphs",
                    children=(SectionEntry(label="Trees", children=(LinkEntry(label="BST", target="graphs/bst"),)),),
                ),
            )
        )

    def test__top_level__found(self, tree: ResolvedTree) -> None:
        """Find a top-level section."""
        section = tree.find_section(["Graphs"])

        assert section is not None
        assert section.label == "Graphs"

    def test__nested__found(self, tree: ResolvedTree) -> None:
        """Find a nested section by label path."""
        section = tree.find_section(["Graphs", "Trees"])

        assert section is not None
        assert section.children == (LinkEntry(label="BST", target="graphs/bst"),)

    @pytest.mark.parametrize("labels", [[], ["Intro"], ["Missing"], ["Graphs", "Missing"]])
    def test__missing_or_link__returns_none(self, tree: ResolvedTree, labels: list[str]) -> None:
        """Return None for empty paths, links and unknown labels."""
        assert tree.find_section(labels) is None
