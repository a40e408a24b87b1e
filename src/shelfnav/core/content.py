"""Content index over a Markdown content root.

Provides the page lookups the resolver needs: which slugs exist and which
pages live under a directory, in a deterministic order.

Ordering rule for listed pages:
    1. Pages with ``sidebar.order`` in front matter, ascending by order
    2. All other pages
    Ties are broken by slug, so rebuilds are reproducible.
"""

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

import yaml

from shelfnav.core.types import DirectoryPath, PagePath

logger = logging.getLogger(__name__)

CONTENT_SUFFIXES = (".md", ".mdx", ".mdoc")

_FRONT_MATTER_RE = re.compile(r"\A---[ \t]*\r?\n(?:(.*?)\r?\n)?---[ \t]*(?:\r?\n|\Z)", re.DOTALL)
_H1_RE = re.compile(r"^#[ \t]+(.+?)[ \t]*#*[ \t]*$", re.MULTILINE)
_SLUG_STRIP_RE = re.compile(r"[^\w\-.]")
_WHITESPACE_RE = re.compile(r"\s+")


class ContentError(ValueError):
    """A content file cannot be indexed."""


class UnknownDirectoryError(LookupError):
    """Directory does not exist under the content root."""

    def __init__(self, directory: str) -> None:
        super().__init__(f"Unknown content directory: {directory}")
        self.directory = directory


@dataclass(frozen=True)
class ContentPage:
    """Content page as seen by the sidebar."""

    label: str
    slug: PagePath
    order: int | None = None


class ContentIndex(Protocol):
    """Page lookups required to resolve a sidebar."""

    def list(self, directory: DirectoryPath) -> list[ContentPage]:
        """List pages under a directory in sidebar order.

        Raises:
            UnknownDirectoryError: If the directory does not exist
        """
        ...

    def exists(self, path: PagePath) -> bool:
        """Check whether a page slug exists."""
        ...


def slugify(path: str) -> str:
    """Normalize a content path to its slug form.

    Each segment is lowercased, whitespace runs become hyphens and
    characters other than word characters, hyphens and dots are dropped.

    Args:
        path: Relative content path (e.g., "Web Development/Intro")

    Returns:
        Slug (e.g., "web-development/intro")
    """
    segments = []
    for segment in path.strip("/").split("/"):
        if not segment:
            continue
        segment = _WHITESPACE_RE.sub("-", segment.strip().lower())
        segments.append(_SLUG_STRIP_RE.sub("", segment))
    return "/".join(segments)


@dataclass(frozen=True)
class _IndexedPage:
    page: ContentPage
    listed: bool


class FileContentIndex:
    """Content index built from Markdown files under a root directory.

    The root is scanned once on construction; the index is read-only
    afterwards.
    """

    __slots__ = ("_directories", "_pages", "_root")

    def __init__(self, root: Path) -> None:
        """Scan the content root.

        Args:
            root: Content root directory

        Raises:
            ContentError: If a content file has malformed front matter
        """
        self._root = root
        self._pages: dict[str, _IndexedPage] = {}
        self._directories: set[str] = set()
        if root.is_dir():
            self._directories.add("")
            self._scan(root)
        logger.debug(
            f"Indexed {len(self._pages)} pages in {len(self._directories)} directories under {root}"
        )

    @property
    def root(self) -> Path:
        """Content root directory."""
        return self._root

    def list(self, directory: DirectoryPath) -> list[ContentPage]:
        """List pages at or below a directory.

        Hidden and draft pages are not listed.

        Args:
            directory: Directory relative to the content root

        Returns:
            Pages in sidebar order

        Raises:
            UnknownDirectoryError: If the directory does not exist
        """
        prefix = slugify(directory)
        if prefix not in self._directories:
            raise UnknownDirectoryError(directory)

        pages = [
            indexed.page
            for slug, indexed in self._pages.items()
            if indexed.listed and _is_under(slug, prefix)
        ]
        return sorted(pages, key=_sort_key)

    def exists(self, path: PagePath) -> bool:
        """Check whether a page slug exists.

        Args:
            path: Page slug, with or without surrounding slashes. Must already
                  be in slug form; no case or whitespace folding is applied.

        Returns:
            True if a page has exactly this slug
        """
        return path.strip("/") in self._pages

    def _scan(self, directory: Path) -> None:
        for entry in sorted(directory.iterdir(), key=lambda p: p.name):
            if entry.name.startswith((".", "_")):
                continue
            if entry.is_dir():
                self._directories.add(slugify(entry.relative_to(self._root).as_posix()))
                self._scan(entry)
            elif entry.suffix in CONTENT_SUFFIXES:
                self._add_page(entry)

    def _add_page(self, source_path: Path) -> None:
        parts = source_path.relative_to(self._root).with_suffix("").parts
        if parts[-1] == "index":
            parts = parts[:-1]
        slug = slugify("/".join(parts)) or "index"

        if slug in self._pages:
            raise ContentError(f"Duplicate page slug {slug!r}: {source_path}")

        try:
            text = source_path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise ContentError(f"Cannot decode {source_path}: {e}") from e
        meta, body = _split_front_matter(text, source_path)
        sidebar = meta.get("sidebar") or {}
        if not isinstance(sidebar, dict):
            raise ContentError(f"sidebar front matter must be a mapping: {source_path}")

        order = sidebar.get("order")
        if order is not None and (isinstance(order, bool) or not isinstance(order, int)):
            raise ContentError(f"sidebar.order must be an integer: {source_path}")

        label = sidebar.get("label") or meta.get("title") or _extract_h1(body)
        if not label:
            label = _titleize(parts[-1] if parts else "index")

        hidden = sidebar.get("hidden", False)
        if not isinstance(hidden, bool):
            raise ContentError(f"sidebar.hidden must be a boolean: {source_path}")

        draft = meta.get("draft", False)
        if not isinstance(draft, bool):
            raise ContentError(f"draft must be a boolean: {source_path}")

        listed = not hidden and not draft
        self._pages[slug] = _IndexedPage(
            page=ContentPage(label=str(label), slug=PagePath(slug), order=order),
            listed=listed,
        )


def _split_front_matter(text: str, source_path: Path) -> tuple[dict, str]:
    """Split YAML front matter from the document body."""
    match = _FRONT_MATTER_RE.match(text)
    if not match:
        return {}, text

    try:
        data = yaml.safe_load(match.group(1) or "") or {}
    except yaml.YAMLError as e:
        raise ContentError(f"Invalid front matter in {source_path}: {e}") from e
    if not isinstance(data, dict):
        raise ContentError(f"Front matter must be a mapping: {source_path}")
    return data, text[match.end() :]


def _extract_h1(body: str) -> str | None:
    match = _H1_RE.search(body)
    return match.group(1) if match else None


def _titleize(stem: str) -> str:
    return stem.replace("-", " ").replace("_", " ").strip().title() or "Index"


def _is_under(slug: str, prefix: str) -> bool:
    if not prefix:
        return True
    return slug == prefix or slug.startswith(f"{prefix}/")


def _sort_key(page: ContentPage) -> tuple[bool, int, str]:
    return (page.order is None, page.order or 0, page.slug)
