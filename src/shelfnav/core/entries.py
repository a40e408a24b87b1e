"""Sidebar entry model.

A sidebar is an ordered sequence of entries. Links point at one page,
sections group authored entries, and auto sections are groups whose
children are derived from a content directory at build time.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Literal, TypedDict

from shelfnav.core.types import DirectoryPath, PagePath


class LinkDict(TypedDict):
    """Dictionary representation of a link entry."""

    type: Literal["link"]
    label: str
    slug: str


class SectionDict(TypedDict):
    """Dictionary representation of a section entry."""

    type: Literal["group"]
    label: str
    collapsed: bool
    items: list[LinkDict | SectionDict]


@dataclass(frozen=True)
class LinkEntry:
    """Leaf entry pointing at one content page."""

    label: str
    target: PagePath

    def to_dict(self) -> LinkDict:
        """Convert to dictionary for JSON serialization."""
        return {"type": "link", "label": self.label, "slug": self.target}


@dataclass(frozen=True)
class SectionEntry:
    """Manually authored group of entries."""

    label: str
    children: tuple[NavigationEntry, ...] = ()
    collapsed: bool = False

    def to_dict(self) -> SectionDict:
        """Convert to dictionary for JSON serialization.

        Only valid on resolved sections, whose children contain no
        auto sections.
        """
        items: list[LinkDict | SectionDict] = []
        for child in self.children:
            if isinstance(child, AutoSection):
                raise TypeError(f'Section "{self.label}" has unresolved auto sections')
            items.append(child.to_dict())
        return {
            "type": "group",
            "label": self.label,
            "collapsed": self.collapsed,
            "items": items,
        }


@dataclass(frozen=True)
class AutoSection:
    """Group whose children are derived from a content directory."""

    label: str
    directory: DirectoryPath
    collapsed: bool = False


NavigationEntry = LinkEntry | SectionEntry | AutoSection

# Top-level sidebar as authored
NavigationConfig = Sequence[NavigationEntry]


@dataclass(frozen=True)
class ResolvedTree:
    """Sidebar with every auto section replaced by a plain section."""

    items: tuple[LinkEntry | SectionEntry, ...] = field(default_factory=tuple)

    def to_dict(self) -> list[LinkDict | SectionDict]:
        """Convert to list of dictionaries for JSON serialization."""
        return [item.to_dict() for item in self.items]

    def find_section(self, labels: Sequence[str]) -> SectionEntry | None:
        """Find a section by its label path.

        Args:
            labels: Labels from the top level down, e.g. ["Graphs", "Trees"]

        Returns:
            Matching SectionEntry, None if any label is missing or
            names a link
        """
        if not labels:
            return None

        entries: Sequence[NavigationEntry] = self.items
        section: SectionEntry | None = None
        for label in labels:
            section = next(
                (
                    entry
                    for entry in entries
                    if isinstance(entry, SectionEntry) and entry.label == label
                ),
                None,
            )
            if section is None:
                return None
            entries = section.children
        return section
