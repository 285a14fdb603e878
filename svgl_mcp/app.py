from datetime import datetime, timezone

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from svgl_mcp.core.config import API_BASE_URL, SERVICE_NAME, VERSION
from svgl_mcp.server import mcp
from svgl_mcp.tools import list_tools

def utc_iso() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="seconds").replace("+00:00", "Z")

# -----------------------------
# MCP over streamable HTTP
# -----------------------------
mcp_app = mcp.http_app(path="/sse")

# -----------------------------
# FastAPI (health + CORS)
# -----------------------------
app = FastAPI(title=SERVICE_NAME, version=VERSION, lifespan=mcp_app.lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.get("/")
def root():
    return {
        "ok": True,
        "message": "SVGL MCP server alive",
        "service": SERVICE_NAME,
        "version": VERSION,
        "ts": utc_iso(),
        "upstream": API_BASE_URL,
        "tools": [t.name for t in list_tools()],
        "mcp_sse": "/sse/",
    }

@app.get("/health")
def health():
    return {"ok": True, "ts": utc_iso(), "service": SERVICE_NAME, "version": VERSION}

# Mount MCP endpoint (gives /sse/)
app.mount("/", mcp_app)
