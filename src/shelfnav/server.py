"""aiohttp server for shelfnav.

Application factory and route registration for serving the resolved
sidebar to a renderer.
"""

import logging

from aiohttp import web

from shelfnav.api.config import create_config_routes
from shelfnav.api.navigation import create_navigation_routes
from shelfnav.app_keys import manifest_key
from shelfnav.config import Config
from shelfnav.core.site import SiteManifest, build_site

logger = logging.getLogger(__name__)


def create_app(config: Config, manifest: SiteManifest | None = None) -> web.Application:
    """Create aiohttp application.

    The sidebar is resolved once here unless a manifest is given, so
    configuration errors abort startup instead of surfacing per request.

    Args:
        config: Application configuration
        manifest: Already built site manifest, skips resolution when set

    Returns:
        Configured aiohttp application

    Raises:
        ConfigError: If the sidebar cannot be resolved
    """
    app = web.Application()
    app[manifest_key] = manifest if manifest is not None else build_site(config)

    app.router.add_routes(create_config_routes())
    app.router.add_routes(create_navigation_routes())

    return app


def run_server(config: Config, manifest: SiteManifest | None = None) -> None:
    """Run the server.

    Args:
        config: Application configuration
        manifest: Already built site manifest, resolved from config if None
    """
    app = create_app(config, manifest)
    logger.info(f"Serving navigation for {config.content.root}")
    web.run_app(app, host=config.server.host, port=config.server.port)
