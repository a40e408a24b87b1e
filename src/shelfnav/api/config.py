"""Site config API endpoint."""

from aiohttp import web

from shelfnav.app_keys import manifest_key


def create_config_routes() -> list[web.RouteDef]:
    return [web.get("/api/config", get_config)]


async def get_config(request: web.Request) -> web.Response:
    manifest = request.app[manifest_key]
    return web.json_response(
        {
            "title": manifest.title,
            "social": manifest.social,
            "customCss": manifest.custom_css,
        }
    )
