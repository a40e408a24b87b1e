"""Shared test fixtures."""

from pathlib import Path

import pytest
from shelfnav.core.content import ContentPage, UnknownDirectoryError
from shelfnav.core.types import DirectoryPath, PagePath


class StaticContentIndex:
    """In-memory content index keyed by directory."""

    def __init__(
        self,
        directories: dict[str, list[tuple[str, str]]],
        extra_pages: list[str] | None = None,
    ) -> None:
        self._directories = {
            directory: [ContentPage(label=label, slug=PagePath(slug)) for label, slug in pages]
            for directory, pages in directories.items()
        }
        self._slugs = {page.slug for pages in self._directories.values() for page in pages}
        self._slugs.update(extra_pages or [])

    def list(self, directory: DirectoryPath) -> list[ContentPage]:
        if directory not in self._directories:
            raise UnknownDirectoryError(directory)
        return list(self._directories[directory])

    def exists(self, path: PagePath) -> bool:
        return path in self._slugs


@pytest.fixture
def content_dir(tmp_path: Path) -> Path:
    """Create a content root shaped like a small notes site."""
    docs = tmp_path / "src" / "content" / "docs"

    topics = docs / "topics"
    topics.mkdir(parents=True)
    (topics / "topics.md").write_text("---\ntitle: Topics\n---\n\nAll topics.")

    graphs = docs / "graphs"
    graphs.mkdir()
    (graphs / "topics.md").write_text(
        "---\ntitle: Topics\nsidebar:\n  order: 1\n---\n\nGraph topics."
    )
    (graphs / "representation.md").write_text(
        "---\ntitle: Representation\nsidebar:\n  order: 2\n---\n\nAdjacency lists."
    )

    backend = docs / "backend"
    backend.mkdir()
    (backend / "caching.md").write_text("---\ntitle: Caching\n---\n\nNotes.")
    (backend / "queues.mdx").write_text("---\ntitle: Queues\n---\n\nNotes.")

    web_dev = docs / "web development"
    web_dev.mkdir()
    (web_dev / "css-layout.md").write_text("# CSS Layout\n\nFlexbox.")

    return docs


@pytest.fixture
def config_file(tmp_path: Path, content_dir: Path) -> Path:
    """Write a shelfnav.toml next to the content root."""
    path = tmp_path / "shelfnav.toml"
    path.write_text("""
[site]
title = "Techshelf"
custom_css = ["./src/tailwind.css"]

[site.social]
github = "https://github.com/example/techshelf"

[[sidebar]]
label = "Topics"
[[sidebar.items]]
label = "Topics"
slug = "topics/topics"

[[sidebar]]
label = "Graphs"
autogenerate = { directory = "graphs" }

[[sidebar]]
label = "Backend notes"
autogenerate = { directory = "backend" }
collapsed = true

[[sidebar]]
label = "Web Development"
autogenerate = { directory = "web development" }
collapsed = true
""")
    return path
