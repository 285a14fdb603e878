from __future__ import annotations


class SvglError(Exception):
    pass


class ToolArgumentError(SvglError):
    """A required tool argument is missing."""


class UnknownToolError(SvglError):
    def __init__(self, tool_name: str) -> None:
        super().__init__(f"Unknown tool: {tool_name}")
        self.tool_name = tool_name


class ApiError(SvglError):
    """The SVGL API answered with a non-success status."""

    def __init__(self, status: int, status_text: str) -> None:
        super().__init__(f"API request failed: {status} {status_text}")
        self.status = status
        self.status_text = status_text


def require(args: dict, param: str):
    v = args.get(param)
    if v is None or v == "":
        raise ToolArgumentError(f"{param} parameter is required")
    return v
