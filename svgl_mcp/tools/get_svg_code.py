from svgl_mcp.core.errors import require

TOOL_NAME = "get_svg_code"

TOOL_SPEC = {
    "name": "get_svg_code",
    "description": "Get the SVG code for a specific logo by filename",
    "inputSchema": {
        "type": "object",
        "properties": {
            "filename": {
                "type": "string",
                "description": "The SVG filename (e.g., 'adobe.svg', 'react.svg')",
            },
            "optimize": {
                "type": "boolean",
                "description": "Whether to optimize the SVG using svgo (default: true)",
                "default": True,
            },
        },
        "required": ["filename"],
    },
}

def run(args: dict, api) -> str:
    filename = require(args, "filename")
    url = f"{api.base}/svg/{filename}"
    # only an explicit false disables svgo upstream
    if args.get("optimize") is False:
        url += "?no-optimize"
    return api.fetch(url)
