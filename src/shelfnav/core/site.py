"""Site manifest handed to the renderer.

Combines the pass-through site metadata with the resolved sidebar.
Built once per site build from a Config.
"""

from dataclasses import dataclass
from typing import TypedDict

from shelfnav.config import Config
from shelfnav.core.content import ContentIndex, FileContentIndex
from shelfnav.core.entries import LinkDict, ResolvedTree, SectionDict
from shelfnav.core.resolver import resolve


class SiteManifestDict(TypedDict):
    """Dictionary representation of a site manifest."""

    title: str
    social: dict[str, str]
    customCss: list[str]
    sidebar: list[LinkDict | SectionDict]


@dataclass(frozen=True)
class SiteManifest:
    """Site metadata and resolved sidebar."""

    title: str
    social: dict[str, str]
    custom_css: list[str]
    sidebar: ResolvedTree

    def to_dict(self) -> SiteManifestDict:
        """Convert to dictionary for JSON serialization."""
        return {
            "title": self.title,
            "social": dict(self.social),
            "customCss": list(self.custom_css),
            "sidebar": self.sidebar.to_dict(),
        }


def build_site(config: Config, content_index: ContentIndex | None = None) -> SiteManifest:
    """Build the site manifest from configuration.

    Args:
        config: Application configuration
        content_index: Content index to resolve against. Defaults to a
                       FileContentIndex over config.content.root.

    Returns:
        SiteManifest with the resolved sidebar

    Raises:
        ConfigError: If the sidebar cannot be resolved
        ContentError: If a content file cannot be indexed
    """
    if content_index is None:
        content_index = FileContentIndex(config.content.root)

    sidebar = resolve(
        config.sidebar,
        content_index,
        empty_sections=config.navigation.empty_sections,
    )
    return SiteManifest(
        title=config.site.title,
        social=config.site.social,
        custom_css=config.site.custom_css,
        sidebar=sidebar,
    )
