from svgl_mcp.core.config import VERSION as __version__
