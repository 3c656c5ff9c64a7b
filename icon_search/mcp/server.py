"""icon_search.mcp.server

MCP (Model Context Protocol) server for Icon Search Service.

Transports:
- stdio (default; `--stdio`)
- HTTP/SSE (`--sse`, or MCP_TRANSPORT=sse): GET /sse opens a session, POST
  /messages/ delivers client messages. Mounted on the FastAPI app in
  icon_search.main, so it shares the REST API port (PORT / API_PORT).

Tools:
- get_icon_libraries
- search_icons
- get_library_icons
- get_icon_details
- get_icon_usage_examples

Not-found conditions are answered with descriptive text, never as errors.
"""

from __future__ import annotations

import argparse
import json
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any

import anyio
import mcp.types as types
from mcp.server.lowlevel import NotificationOptions, Server
from mcp.server.sse import SseServerTransport
from mcp.server.stdio import stdio_server

from icon_search.config.settings import settings
from icon_search.core.usage import icon_usage, usage_examples
from icon_search.repository.catalog import get_catalog
from icon_search.utils.logger import get_logger, redirect_to_stderr

if TYPE_CHECKING:
    from fastapi import FastAPI

logger = get_logger(__name__)


SERVER_NAME = "icon-search-mcp"


server = Server(
    SERVER_NAME,
    version=settings.service_version,
    instructions=(
        "Icon lookup tools for the react-icons family of libraries. "
        "Use get_icon_libraries to discover library prefixes, search_icons to find icons "
        "(prefix a query with 'fa:' to search one library), then get_icon_details for import snippets."
    ),
)


@server.list_tools()
async def list_tools(_: types.ListToolsRequest) -> types.ListToolsResult:
    return types.ListToolsResult(
        tools=[
            types.Tool(
                name="get_icon_libraries",
                description="Get information about all icon libraries available in react-icons",
                inputSchema={"type": "object", "properties": {}},
            ),
            types.Tool(
                name="search_icons",
                description=(
                    "Search for icons by name across all icon libraries or within a specific library. "
                    "Matching is case-insensitive substring matching on icon names."
                ),
                inputSchema={
                    "type": "object",
                    "properties": {
                        "query": {
                            "type": "string",
                            "description": (
                                "The search query. Can be a simple term like 'arrow' "
                                "or library-specific like 'fa:user'"
                            ),
                        },
                        "limit": {
                            "type": "integer",
                            "minimum": 1,
                            "maximum": settings.search_result_cap,
                            "default": settings.default_search_limit,
                        },
                    },
                    "required": ["query"],
                },
            ),
            types.Tool(
                name="get_library_icons",
                description="Get all icons from a specific icon library",
                inputSchema={
                    "type": "object",
                    "properties": {
                        "library_prefix": {
                            "type": "string",
                            "description": "The library prefix (e.g., 'fa' for Font Awesome, 'md' for Material Design)",
                        },
                        "limit": {
                            "type": "integer",
                            "minimum": 1,
                            "default": settings.default_library_icon_limit,
                        },
                    },
                    "required": ["library_prefix"],
                },
            ),
            types.Tool(
                name="get_icon_details",
                description="Get detailed information about a specific icon, including import snippets",
                inputSchema={
                    "type": "object",
                    "properties": {
                        "library_prefix": {
                            "type": "string",
                            "description": "The library prefix (e.g., 'fa' for Font Awesome)",
                        },
                        "icon_name": {
                            "type": "string",
                            "description": "The exact name of the icon (e.g., 'FaUser')",
                        },
                    },
                    "required": ["library_prefix", "icon_name"],
                },
            ),
            types.Tool(
                name="get_icon_usage_examples",
                description="Get code examples for using react-icons in different contexts",
                inputSchema={
                    "type": "object",
                    "properties": {
                        "library_prefix": {
                            "type": "string",
                            "description": "The library prefix to get specific examples for (optional)",
                        },
                    },
                },
            ),
        ]
    )


def _text_and_structured(payload: dict[str, Any]):
    text = json.dumps(payload, ensure_ascii=False, indent=2)
    return ([types.TextContent(type="text", text=text)], payload)


@server.call_tool()
async def call_tool(name: str, arguments: dict | None):
    args = arguments or {}
    catalog = get_catalog()

    if name == "get_icon_libraries":
        logger.info("Fetching icon libraries information")
        libraries = catalog.list_libraries()
        payload = {
            "libraries": [lib.model_dump(mode="json") for lib in libraries],
            "library_count": len(libraries),
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
        return _text_and_structured(payload)

    if name == "search_icons":
        query = str(args.get("query") or "").strip()
        limit = int(args.get("limit") or settings.default_search_limit)
        if not query:
            return _text_and_structured(
                {"query": query, "results": [], "total_count": 0, "message": "query must not be blank"}
            )
        logger.info(f"Searching for icons matching: {query}")

        results = catalog.search(query, limit=limit)
        payload: dict[str, Any] = {
            "query": query,
            "results": [icon.model_dump(mode="json") for icon in results],
            "total_count": len(results),
        }
        if not results:
            payload["message"] = (
                f"No icons found matching '{query}'. "
                "Try a different search term or check the library prefix."
            )
        return _text_and_structured(payload)

    if name == "get_library_icons":
        prefix = str(args.get("library_prefix") or "").strip()
        limit = int(args.get("limit") or settings.default_library_icon_limit)
        logger.info(f"Fetching icons from library: {prefix}")

        library = catalog.get_library(prefix)
        if library is None:
            available = ", ".join(lib.prefix for lib in catalog.list_libraries())
            return _text_and_structured(
                {
                    "library_prefix": prefix,
                    "message": f"Library with prefix '{prefix}' not found. Available prefixes: {available}",
                }
            )

        icons = catalog.list_icons(prefix)
        payload = {
            "library": library.model_dump(mode="json"),
            "total_icons": len(icons),
            "icons": [icon.model_dump(mode="json") for icon in icons[:limit]],
        }
        return _text_and_structured(payload)

    if name == "get_icon_details":
        prefix = str(args.get("library_prefix") or "").strip()
        icon_name = str(args.get("icon_name") or "").strip()
        logger.info(f"Fetching details for icon: {prefix}/{icon_name}")

        icon = catalog.get_icon_details(prefix, icon_name)
        if icon is None:
            return _text_and_structured(
                {
                    "library_prefix": prefix,
                    "icon_name": icon_name,
                    "message": f"Icon '{icon_name}' not found in library '{prefix}'.",
                }
            )

        library = catalog.get_library(prefix)
        payload = {
            "icon": icon.model_dump(mode="json"),
            "library": library.model_dump(mode="json") if library else None,
            "usage": icon_usage(prefix, icon_name),
        }
        return _text_and_structured(payload)

    if name == "get_icon_usage_examples":
        prefix = str(args.get("library_prefix") or "").strip() or None
        logger.info(f"Generating usage examples{f' for {prefix}' if prefix else ''}")
        return _text_and_structured({"examples": usage_examples(catalog, prefix)})

    raise ValueError(f"Unknown tool: {name}")


def _initialization_options():
    return server.create_initialization_options(
        notification_options=NotificationOptions(
            prompts_changed=False,
            resources_changed=False,
            tools_changed=False,
        ),
        experimental_capabilities={},
    )


async def _run() -> None:
    async with stdio_server() as (read_stream, write_stream):
        await server.run(read_stream, write_stream, _initialization_options())


# ---------------------------------------------------------------------------
# HTTP/SSE transport
# ---------------------------------------------------------------------------

SSE_PATH = "/sse"
MESSAGES_PATH = "/messages/"

sse_transport = SseServerTransport(MESSAGES_PATH)


class SseEndpoint:
    """ASGI app behind GET /sse: one MCP session per open event stream.

    The stream's first event tells the client where to POST its messages
    (``/messages/?session_id=...``); ``sse_transport.handle_post_message``
    routes them back to this session.
    """

    async def __call__(self, scope, receive, send) -> None:
        logger.info("MCP client connected over SSE")
        async with sse_transport.connect_sse(scope, receive, send) as (read_stream, write_stream):
            await server.run(read_stream, write_stream, _initialization_options())
        logger.info("MCP client disconnected from SSE")


def mount_sse(app: "FastAPI") -> None:
    """Serve this MCP server on `app` at GET /sse and POST /messages/"""
    app.add_route(SSE_PATH, SseEndpoint(), methods=["GET"])
    app.mount(MESSAGES_PATH, app=sse_transport.handle_post_message)


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Icon Search MCP server")
    transport = p.add_mutually_exclusive_group()
    transport.add_argument(
        "--stdio",
        dest="transport",
        action="store_const",
        const="stdio",
        help="Serve MCP over stdin/stdout",
    )
    transport.add_argument(
        "--sse",
        dest="transport",
        action="store_const",
        const="sse",
        help="Serve MCP over HTTP/SSE together with the REST API",
    )
    p.add_argument("--host", default=None, help="HTTP bind address (default: API_HOST)")
    p.add_argument("--port", type=int, default=None, help="HTTP port (default: PORT / API_PORT)")
    return p.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = _parse_args(argv)
    transport = args.transport or settings.mcp_transport

    if transport == "stdio":
        redirect_to_stderr()
        logger.info(f"Starting {SERVER_NAME} {settings.service_version} over stdio")
        anyio.run(_run)
        return

    if transport != "sse":
        raise SystemExit(f"Unknown MCP transport '{transport}' (expected stdio or sse)")

    import uvicorn

    host = args.host or settings.api_host
    port = args.port or settings.api_port
    logger.info(f"Starting {SERVER_NAME} {settings.service_version} over HTTP/SSE on {host}:{port}{SSE_PATH}")
    uvicorn.run("icon_search.main:app", host=host, port=port)


if __name__ == "__main__":
    main()
