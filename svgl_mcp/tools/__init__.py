import logging

import requests

from svgl_mcp.core.errors import SvglError, UnknownToolError
from svgl_mcp.core.svgl_api import SvglAPI

from . import get_all_svgs, get_categories, get_svg_code, get_svgs_by_category, search_svgs
from .loader import load_tools
from .tool_schema import ToolCallResult, ToolDefinition

logger = logging.getLogger(__name__)

TOOL_MODULES = (
    get_all_svgs,
    get_svgs_by_category,
    get_svg_code,
    search_svgs,
    get_categories,
)

TOOL_RUNNERS, TOOL_DEFINITIONS = load_tools(TOOL_MODULES)


class ToolDispatcher:
    def __init__(self, api=None) -> None:
        self.api = api or SvglAPI()

    def list_tools(self) -> tuple:
        return TOOL_DEFINITIONS

    def call_tool(self, tool_name: str, args: dict | None = None) -> ToolCallResult:
        if args is None:
            args = {}

        try:
            runner = TOOL_RUNNERS.get(tool_name)
            if runner is None:
                raise UnknownToolError(tool_name)
            logger.debug("Calling tool %s with %s", tool_name, args)
            return ToolCallResult.text(runner(args, self.api))
        except (SvglError, requests.RequestException) as e:
            logger.warning("Tool %s failed (%s): %s", tool_name, type(e).__name__, e)
            return ToolCallResult.error(str(e))
        except Exception as e:
            logger.exception("Tool %s raised %s", tool_name, type(e).__name__)
            return ToolCallResult.error(str(e))


def list_tools() -> tuple:
    return TOOL_DEFINITIONS


__all__ = [
    "TOOL_DEFINITIONS",
    "ToolCallResult",
    "ToolDefinition",
    "ToolDispatcher",
    "list_tools",
]
