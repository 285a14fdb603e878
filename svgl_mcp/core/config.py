import os

def env(key: str, default: str | None = None) -> str | None:
    v = os.getenv(key)
    if v is None or v.strip() == "":
        return default
    return v.strip()

# --- SVGL upstream ---
API_BASE_URL = "https://api.svgl.app"

# --- Server identity ---
SERVICE_NAME = "svgl-mcp-server"
VERSION = "1.0.0"

# --- Logging (stderr only, stdout is the MCP channel) ---
LOG_LEVEL = env("SVGL_MCP_LOG_LEVEL", "INFO")
