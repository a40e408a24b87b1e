"""Configuration management for shelfnav.

Supports TOML configuration format with auto-discovery.
"""

import tomllib
from dataclasses import dataclass, field, replace
from pathlib import Path

from shelfnav.core.entries import AutoSection, LinkEntry, NavigationEntry, SectionEntry
from shelfnav.core.resolver import EmptySectionPolicy
from shelfnav.core.types import DirectoryPath, PagePath

CONFIG_FILENAME = "shelfnav.toml"


@dataclass
class SiteConfig:
    """Site metadata passed through to the renderer."""

    title: str = ""
    social: dict[str, str] = field(default_factory=dict)
    custom_css: list[str] = field(default_factory=list)


@dataclass
class ContentConfig:
    """Content configuration."""

    root: Path = field(default_factory=lambda: Path("src/content/docs"))


@dataclass
class NavigationSettings:
    """Sidebar resolution settings."""

    empty_sections: EmptySectionPolicy = EmptySectionPolicy.ERROR


@dataclass
class ServerConfig:
    """Server configuration."""

    host: str = "127.0.0.1"
    port: int = 8080


@dataclass
class Config:
    """Application configuration."""

    site: SiteConfig
    content: ContentConfig
    navigation: NavigationSettings
    server: ServerConfig
    sidebar: tuple[NavigationEntry, ...] = ()
    config_path: Path | None = None

    @classmethod
    def load(cls, config_path: Path | None = None) -> "Config":
        """Load configuration from file.

        If config_path is provided, loads from that file.
        Otherwise, searches for shelfnav.toml in current directory and parents.

        Args:
            config_path: Optional explicit path to config file

        Returns:
            Config instance with defaults for missing sections

        Raises:
            FileNotFoundError: If explicit config_path doesn't exist
            ValueError: If configuration is invalid
        """
        if config_path is not None:
            if not config_path.exists():
                raise FileNotFoundError(f"Configuration file not found: {config_path}")
            return cls._load_from_file(config_path)

        discovered_path = cls._discover_config()
        if discovered_path is None:
            return cls._default()

        return cls._load_from_file(discovered_path)

    @classmethod
    def _discover_config(cls) -> Path | None:
        """Search for config file in current directory and parents.

        Returns:
            Path to config file or None if not found
        """
        current = Path.cwd()
        while True:
            candidate = current / CONFIG_FILENAME
            if candidate.exists():
                return candidate
            parent = current.parent
            if parent == current:
                return None
            current = parent

    @classmethod
    def _default(cls) -> "Config":
        """Create config with all defaults."""
        return cls(
            site=SiteConfig(),
            content=ContentConfig(),
            navigation=NavigationSettings(),
            server=ServerConfig(),
        )

    @classmethod
    def _load_from_file(cls, path: Path) -> "Config":
        """Load configuration from a specific file.

        Args:
            path: Path to TOML configuration file

        Returns:
            Config instance

        Raises:
            ValueError: If configuration is invalid
        """
        with path.open("rb") as f:
            try:
                data = tomllib.load(f)
            except tomllib.TOMLDecodeError as e:
                raise ValueError(f"Invalid TOML in {path}: {e}") from e

        config_dir = path.parent

        return cls(
            site=cls._parse_site(data.get("site")),
            content=cls._parse_content(data.get("content"), config_dir),
            navigation=cls._parse_navigation(data.get("navigation")),
            server=cls._parse_server(data.get("server")),
            sidebar=parse_sidebar(data.get("sidebar", []), "sidebar"),
            config_path=path,
        )

    @classmethod
    def _parse_site(cls, data: object) -> SiteConfig:
        """Parse site configuration section.

        Args:
            data: Raw site section data

        Returns:
            SiteConfig instance
        """
        if data is None:
            return SiteConfig()

        if not isinstance(data, dict):
            raise ValueError("site section must be a dictionary")

        title = data.get("title", "")
        if not isinstance(title, str):
            raise ValueError("site.title must be a string")

        social_raw = data.get("social", {})
        if not isinstance(social_raw, dict):
            raise ValueError("site.social must be a dictionary")
        social: dict[str, str] = {}
        for name, url in social_raw.items():
            if not isinstance(url, str):
                raise ValueError(f"site.social.{name} must be a string")
            social[name] = url

        custom_css_raw = data.get("custom_css", [])
        if not isinstance(custom_css_raw, list):
            raise ValueError("site.custom_css must be a list")
        custom_css: list[str] = []
        for item in custom_css_raw:
            if not isinstance(item, str):
                raise ValueError("site.custom_css items must be strings")
            custom_css.append(item)

        return SiteConfig(title=title, social=social, custom_css=custom_css)

    @classmethod
    def _parse_content(cls, data: object, config_dir: Path) -> ContentConfig:
        """Parse content configuration section.

        Args:
            data: Raw content section data
            config_dir: Directory containing config file (for relative paths)

        Returns:
            ContentConfig instance
        """
        if data is None:
            return ContentConfig(root=config_dir / ContentConfig().root)

        if not isinstance(data, dict):
            raise ValueError("content section must be a dictionary")

        root = data.get("root", "src/content/docs")
        if not isinstance(root, str):
            raise ValueError("content.root must be a string")

        return ContentConfig(root=config_dir / root)

    @classmethod
    def _parse_navigation(cls, data: object) -> NavigationSettings:
        """Parse navigation configuration section."""
        if data is None:
            return NavigationSettings()

        if not isinstance(data, dict):
            raise ValueError("navigation section must be a dictionary")

        empty_sections = data.get("empty_sections", EmptySectionPolicy.ERROR.value)
        try:
            policy = EmptySectionPolicy(empty_sections)
        except ValueError:
            choices = ", ".join(p.value for p in EmptySectionPolicy)
            raise ValueError(f"navigation.empty_sections must be one of: {choices}") from None

        return NavigationSettings(empty_sections=policy)

    @classmethod
    def _parse_server(cls, data: object) -> ServerConfig:
        """Parse server configuration section.

        Args:
            data: Raw server section data

        Returns:
            ServerConfig instance
        """
        if data is None:
            return ServerConfig()

        if not isinstance(data, dict):
            raise ValueError("server section must be a dictionary")

        host = data.get("host", "127.0.0.1")
        if not isinstance(host, str):
            raise ValueError("server.host must be a string")

        port = data.get("port", 8080)
        if isinstance(port, bool) or not isinstance(port, int):
            raise ValueError("server.port must be an integer")

        return ServerConfig(host=host, port=port)

    def with_overrides(
        self,
        *,
        host: str | None = None,
        port: int | None = None,
        content_root: Path | None = None,
        empty_sections: EmptySectionPolicy | None = None,
    ) -> "Config":
        """Create a new Config with CLI overrides applied.

        Only non-None values override the existing config. The original
        Config is not modified.

        Args:
            host: Override server.host
            port: Override server.port
            content_root: Override content.root
            empty_sections: Override navigation.empty_sections

        Returns:
            New Config instance with overrides applied
        """
        server = self.server
        if host is not None or port is not None:
            server = replace(
                self.server,
                host=host if host is not None else self.server.host,
                port=port if port is not None else self.server.port,
            )

        content = self.content
        if content_root is not None:
            content = replace(self.content, root=content_root)

        navigation = self.navigation
        if empty_sections is not None:
            navigation = replace(self.navigation, empty_sections=empty_sections)

        return replace(self, server=server, content=content, navigation=navigation)


def parse_sidebar(data: object, key: str) -> tuple[NavigationEntry, ...]:
    """Parse a list of sidebar items.

    Each item is a table with a non-empty ``label`` and exactly one of
    ``slug`` (link), ``items`` (group) or ``autogenerate`` (auto group).

    Args:
        data: Raw list of sidebar items
        key: Dotted key of the list, used in error messages

    Returns:
        Tuple of sidebar entries in authored order

    Raises:
        ValueError: If an item is malformed
    """
    if not isinstance(data, list):
        raise ValueError(f"{key} must be a list")

    return tuple(_parse_sidebar_item(item, f"{key}[{i}]") for i, item in enumerate(data))


def _parse_sidebar_item(data: object, key: str) -> NavigationEntry:
    if not isinstance(data, dict):
        raise ValueError(f"{key} must be a dictionary")

    label = data.get("label")
    if not isinstance(label, str) or not label.strip():
        raise ValueError(f"{key}.label must be a non-empty string")

    kinds = [name for name in ("slug", "items", "autogenerate") if name in data]
    if len(kinds) != 1:
        raise ValueError(f"{key} must have exactly one of: slug, items, autogenerate")

    collapsed = data.get("collapsed", False)
    if not isinstance(collapsed, bool):
        raise ValueError(f"{key}.collapsed must be a boolean")

    if kinds[0] == "slug":
        if "collapsed" in data:
            raise ValueError(f"{key}.collapsed is only valid on groups")
        slug = data["slug"]
        if not isinstance(slug, str):
            raise ValueError(f"{key}.slug must be a string")
        return LinkEntry(label=label, target=PagePath(slug.strip("/")))

    if kinds[0] == "items":
        children = parse_sidebar(data["items"], f"{key}.items")
        return SectionEntry(label=label, children=children, collapsed=collapsed)

    autogenerate = data["autogenerate"]
    if not isinstance(autogenerate, dict):
        raise ValueError(f"{key}.autogenerate must be a dictionary")
    directory = autogenerate.get("directory")
    if not isinstance(directory, str):
        raise ValueError(f"{key}.autogenerate.directory must be a string")
    return AutoSection(label=label, directory=DirectoryPath(directory), collapsed=collapsed)
