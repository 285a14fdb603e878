from svgl_mcp.core.io_utils import dump_json

TOOL_NAME = "get_categories"

TOOL_SPEC = {
    "name": "get_categories",
    "description": "Get the list of all available categories with their SVG counts",
    "inputSchema": {"type": "object", "properties": {}},
}

def run(args: dict, api) -> str:
    return dump_json(api.fetch(f"{api.base}/categories"))
