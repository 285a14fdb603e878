"""
SVGL MCP server
- Registers every SVGL tool with FastMCP, using the declared input schema as-is
- Forwards each call to the ToolDispatcher (one upstream GET per call)
- Runs over stdio; logs go to stderr
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Dict, Optional

from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from fastmcp.tools import Tool
from fastmcp.tools.tool import ToolResult
from mcp.types import TextContent
from pydantic import PrivateAttr

from svgl_mcp.core.config import SERVICE_NAME, VERSION
from svgl_mcp.core.logging_setup import setup_logging
from svgl_mcp.tools import ToolDefinition, ToolDispatcher

logger = logging.getLogger(__name__)


class SvglTool(Tool):
    _dispatcher: ToolDispatcher = PrivateAttr()

    @classmethod
    def from_definition(cls, definition: ToolDefinition, dispatcher: ToolDispatcher) -> "SvglTool":
        tool = cls(
            name=definition.name,
            description=definition.description,
            parameters=definition.input_schema,
        )
        tool._dispatcher = dispatcher
        return tool

    async def run(self, arguments: Dict[str, Any]) -> ToolResult:
        # dispatch blocks on requests, keep the event loop free
        result = await asyncio.to_thread(self._dispatcher.call_tool, self.name, arguments)
        if result.is_error:
            raise ToolError(result.first_text)
        return ToolResult(content=[TextContent(type="text", text=result.first_text)])


def build_server(dispatcher: Optional[ToolDispatcher] = None) -> FastMCP:
    dispatcher = dispatcher or ToolDispatcher()
    server = FastMCP(name=SERVICE_NAME, version=VERSION)
    for definition in dispatcher.list_tools():
        server.add_tool(SvglTool.from_definition(definition, dispatcher))
    return server


mcp = build_server()


def main() -> None:
    setup_logging()
    logger.info("%s %s running on stdio", SERVICE_NAME, VERSION)
    try:
        mcp.run(transport="stdio")
    except KeyboardInterrupt:
        logger.info("Interrupted, stdio transport closed")
    logger.info("%s stopped", SERVICE_NAME)


if __name__ == "__main__":
    main()
