from svgl_mcp.core.errors import require
from svgl_mcp.core.io_utils import dump_json

TOOL_NAME = "get_svgs_by_category"

TOOL_SPEC = {
    "name": "get_svgs_by_category",
    "description": (
        "Get SVG logos filtered by a specific category "
        "(e.g., 'software', 'framework', 'library', 'ai', 'database', etc.)"
    ),
    "inputSchema": {
        "type": "object",
        "properties": {
            "category": {
                "type": "string",
                "description": "The category to filter by (lowercase, e.g., 'software', 'framework', 'library')",
            },
        },
        "required": ["category"],
    },
}

def run(args: dict, api) -> str:
    category = str(require(args, "category")).lower()
    return dump_json(api.fetch(f"{api.base}/category/{category}"))
