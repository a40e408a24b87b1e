"""Tests for navigation API endpoints."""

from pathlib import Path

import pytest
from shelfnav.config import Config
from shelfnav.server import create_app


@pytest.fixture
def client(config_file: Path, aiohttp_client):
    """Create test client with configured app."""
    app = create_app(Config.load(config_file))
    return aiohttp_client(app)


class TestGetNavigation:
    """Tests for GET /api/navigation."""

    @pytest.mark.asyncio
    async def test__configured_sidebar__returns_full_tree(self, client) -> None:
        """Return the resolved sidebar."""
        test_client = await client
        response = await test_client.get("/api/navigation")

        assert response.status == 200
        data = await response.json()
        assert [item["label"] for item in data["items"]] == [
            "Topics",
            "Graphs",
            "Backend notes",
            "Web Development",
        ]
        assert data["items"][2]["collapsed"] is True


class TestGetNavigationSubtree:
    """Tests for GET /api/navigation/{path}."""

    @pytest.mark.asyncio
    async def test__section_label__returns_children(self, client) -> None:
        """Return the items of the addressed section."""
        test_client = await client
        response = await test_client.get("/api/navigation/Graphs")

        assert response.status == 200
        data = await response.json()
        assert data["items"] == [
            {"type": "link", "label": "Topics", "slug": "graphs/topics"},
            {"type": "link", "label": "Representation", "slug": "graphs/representation"},
        ]

    @pytest.mark.asyncio
    async def test__encoded_label__decoded(self, client) -> None:
        """Accept percent-encoded labels."""
        test_client = await client
        response = await test_client.get("/api/navigation/Web%20Development")

        assert response.status == 200
        data = await response.json()
        assert data["items"][0]["slug"] == "web-development/css-layout"

    @pytest.mark.asyncio
    async def test__unknown_section__returns_404(self, client) -> None:
        """Return 404 for labels not in the sidebar."""
        test_client = await client
        response = await test_client.get("/api/navigation/Frontend")

        assert response.status == 404
        data = await response.json()
        assert data == {"error": "Section not found", "path": "Frontend"}


class TestLabelWithSlash:
    """Tests for sections whose label contains the path separator."""

    @pytest.fixture
    def slash_client(self, tmp_path: Path, content_dir: Path, aiohttp_client):
        config_file = tmp_path / "shelfnav.toml"
        config_file.write_text("""
[[sidebar]]
label = "Input/Output"
autogenerate = { directory = "backend" }
""")
        return aiohttp_client(create_app(Config.load(config_file)))

    @pytest.mark.asyncio
    async def test__subtree__not_addressable(self, slash_client) -> None:
        """Treat "/" in the path as a separator between labels."""
        test_client = await slash_client
        response = await test_client.get("/api/navigation/Input/Output")

        assert response.status == 404

    @pytest.mark.asyncio
    async def test__full_tree__includes_section(self, slash_client) -> None:
        """Expose the section through the full tree."""
        test_client = await slash_client
        response = await test_client.get("/api/navigation")

        data = await response.json()
        assert data["items"][0]["label"] == "Input/Output"
        assert len(data["items"][0]["items"]) == 2
