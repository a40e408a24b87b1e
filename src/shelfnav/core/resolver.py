"""Navigation tree resolver.

Turns an authored sidebar into a resolved tree: every auto section is
replaced by a plain section whose links come from the content index.
Links and sections are copied structurally, recursing into children.

Resolution is a pure function of the sidebar and the content index and
either returns a complete tree or raises ConfigError.
"""

import enum
import logging
from collections.abc import Sequence

from shelfnav.core.content import ContentIndex, UnknownDirectoryError
from shelfnav.core.entries import (
    AutoSection,
    LinkEntry,
    NavigationConfig,
    NavigationEntry,
    ResolvedTree,
    SectionEntry,
)
from shelfnav.core.errors import (
    ConfigError,
    DanglingReferenceError,
    DuplicateLabelError,
    EmptyAutoSectionError,
)

logger = logging.getLogger(__name__)


class EmptySectionPolicy(enum.Enum):
    """What to do with an auto section that lists no pages."""

    ERROR = "error"
    HIDE = "hide"


def resolve(
    config: NavigationConfig,
    content_index: ContentIndex,
    *,
    empty_sections: EmptySectionPolicy = EmptySectionPolicy.ERROR,
) -> ResolvedTree:
    """Resolve a sidebar against a content index.

    Args:
        config: Top-level sidebar entries as authored
        content_index: Page lookups for link targets and auto sections
        empty_sections: Policy for auto sections without pages

    Returns:
        ResolvedTree with auto sections expanded, in authored order

    Raises:
        DanglingReferenceError: If a link target or directory doesn't exist
        DuplicateLabelError: If two siblings share a label
        EmptyAutoSectionError: If an auto section is empty and the policy is ERROR
    """
    resolver = _Resolver(content_index, empty_sections)
    items = resolver.resolve_entries(config, parent=None)
    logger.info(
        f"Resolved sidebar: {len(items)} top-level entries, "
        f"{resolver.auto_sections} auto-generated sections"
    )
    return ResolvedTree(items=tuple(items))


class _Resolver:
    """Single top-down pass over the sidebar."""

    def __init__(self, content_index: ContentIndex, empty_sections: EmptySectionPolicy) -> None:
        self._index = content_index
        self._empty_sections = empty_sections
        self.auto_sections = 0

    def resolve_entries(
        self,
        entries: Sequence[NavigationEntry],
        parent: str | None,
    ) -> list[LinkEntry | SectionEntry]:
        _check_labels([entry.label for entry in entries], parent)

        resolved: list[LinkEntry | SectionEntry] = []
        for entry in entries:
            item = self._resolve_entry(entry, parent)
            if item is not None:
                resolved.append(item)
        return resolved

    def _resolve_entry(
        self,
        entry: NavigationEntry,
        parent: str | None,
    ) -> LinkEntry | SectionEntry | None:
        if isinstance(entry, LinkEntry):
            if not self._index.exists(entry.target):
                raise DanglingReferenceError(entry.label, entry.target)
            return entry

        if isinstance(entry, SectionEntry):
            children = self.resolve_entries(entry.children, _join(parent, entry.label))
            return SectionEntry(
                label=entry.label,
                children=tuple(children),
                collapsed=entry.collapsed,
            )

        if isinstance(entry, AutoSection):
            return self._resolve_auto_section(entry, parent)

        raise ConfigError(f"Unknown sidebar entry type: {type(entry).__name__}")

    def _resolve_auto_section(
        self,
        entry: AutoSection,
        parent: str | None,
    ) -> SectionEntry | None:
        try:
            pages = self._index.list(entry.directory)
        except UnknownDirectoryError as e:
            raise DanglingReferenceError(entry.label, entry.directory, kind="directory") from e

        if not pages:
            if self._empty_sections is EmptySectionPolicy.ERROR:
                raise EmptyAutoSectionError(entry.label, entry.directory)
            logger.warning(f'Hiding empty auto-generated section "{entry.label}" ({entry.directory})')
            return None

        children = tuple(LinkEntry(label=page.label, target=page.slug) for page in pages)
        _check_labels([child.label for child in children], _join(parent, entry.label))

        self.auto_sections += 1
        logger.debug(f'Auto-generated "{entry.label}" from {entry.directory}: {len(children)} pages')
        return SectionEntry(label=entry.label, children=children, collapsed=entry.collapsed)


def _check_labels(labels: list[str], parent: str | None) -> None:
    """Ensure sibling labels are non-empty and unique."""
    seen: set[str] = set()
    for label in labels:
        if not label or not label.strip():
            where = f'in "{parent}"' if parent else "at top level"
            raise ConfigError(f"Empty label {where}: labels must be non-empty", label=label)
        if label in seen:
            raise DuplicateLabelError(label, parent)
        seen.add(label)


def _join(parent: str | None, label: str) -> str:
    return f"{parent} > {label}" if parent else label
