from svgl_mcp.core.errors import require
from svgl_mcp.core.io_utils import dump_json, encode_component

TOOL_NAME = "search_svgs"

TOOL_SPEC = {
    "name": "search_svgs",
    "description": "Search for SVG logos by title/name",
    "inputSchema": {
        "type": "object",
        "properties": {
            "query": {
                "type": "string",
                "description": "Search query to match against SVG titles",
            },
        },
        "required": ["query"],
    },
}

def run(args: dict, api) -> str:
    query = str(require(args, "query"))
    return dump_json(api.fetch(f"{api.base}?search={encode_component(query)}"))
