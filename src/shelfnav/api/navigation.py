"""Navigation API endpoints.

Provides the full resolved sidebar and section subtree endpoints.
Sections are addressed by their labels joined with "/". A label that
itself contains "/" cannot be addressed this way; such sections are only
reachable through the full tree.
"""

from aiohttp import web

from shelfnav.app_keys import manifest_key


def create_navigation_routes() -> list[web.RouteDef]:
    return [
        web.get("/api/navigation", get_navigation),
        web.get("/api/navigation/{path:.*}", get_navigation_subtree),
    ]


async def get_navigation(request: web.Request) -> web.Response:
    manifest = request.app[manifest_key]
    return web.json_response({"items": manifest.sidebar.to_dict()})


async def get_navigation_subtree(request: web.Request) -> web.Response:
    path = request.match_info["path"]
    manifest = request.app[manifest_key]

    labels = [label for label in path.split("/") if label]
    section = manifest.sidebar.find_section(labels)
    if section is None:
        return web.json_response(
            {"error": "Section not found", "path": path},
            status=404,
        )

    return web.json_response({"items": section.to_dict()["items"]})
