from svgl_mcp.core.io_utils import dump_json, format_number

TOOL_NAME = "get_all_svgs"

TOOL_SPEC = {
    "name": "get_all_svgs",
    "description": "Get all SVG logos from the SVGL library. Optionally limit the number of results.",
    "inputSchema": {
        "type": "object",
        "properties": {
            "limit": {
                "type": "number",
                "description": "Optional limit on the number of SVGs to return",
                "minimum": 1,
            },
        },
    },
}

def run(args: dict, api) -> str:
    limit = args.get("limit")
    # upstream owns range checks on limit
    url = f"{api.base}?limit={format_number(limit)}" if limit else api.base
    return dump_json(api.fetch(url))
