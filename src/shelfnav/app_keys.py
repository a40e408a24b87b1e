"""Application keys for type-safe app configuration access."""

from aiohttp import web

from shelfnav.core.site import SiteManifest

manifest_key = web.AppKey("manifest", SiteManifest)
