from __future__ import annotations

import logging
from typing import Any, Callable

from fastmcp import FastMCP

from ..api import ApiFunction, call_api, get_api_functions

logger = logging.getLogger(__name__)

INSTRUCTIONS = (
    "Event Desk exposes a small in-memory calendar of one-hour events. "
    "Call login first; pass the returned token to write and admin tools."
)


def as_tool(api_function: ApiFunction) -> Callable[..., Any]:
    """Wrap a registered function so MCP calls share the registry lock."""

    def tool(**kwargs: Any) -> Any:
        return call_api(api_function.name, **kwargs)

    signature = api_function.signature
    tool.__name__ = api_function.name
    tool.__doc__ = api_function.description
    tool.__signature__ = signature  # type: ignore[attr-defined]
    tool.__annotations__ = {
        name: param.annotation
        for name, param in signature.parameters.items()
        if param.annotation is not param.empty
    }
    if signature.return_annotation is not signature.empty:
        tool.__annotations__["return"] = signature.return_annotation
    return tool


def build_mcp_server() -> FastMCP:
    server = FastMCP(name="event-desk", instructions=INSTRUCTIONS)
    for api_function in get_api_functions():
        logger.debug("Registering MCP tool: %s", api_function.name)
        server.tool(
            as_tool(api_function),
            name=api_function.name,
            description=api_function.description,
            tags=set(api_function.tags),
        )
    return server


def run_mcp_server(host: str = "127.0.0.1", port: int = 8765) -> None:
    import asyncio

    server = build_mcp_server()
    logger.info("Serving Event Desk MCP tools on %s:%s", host, port)
    asyncio.run(server.run_streamable_http_async(host=host, port=port))
