from .tool_schema import ToolDefinition

def load_tools(modules):
    """
    Build the tool registry from an explicit, ordered list of tool modules.
    Each tool module must expose:
      - TOOL_NAME (str)
      - TOOL_SPEC (dict)  (MCP-style tool schema, TOOL_SPEC["name"] == TOOL_NAME)
      - run(args: dict, api) -> str
    Returns (runners, definitions): a name -> run dict and an ordered tuple.
    """
    runners = {}
    definitions = []

    for m in modules:
        tool_name = getattr(m, "TOOL_NAME", None)
        tool_spec = getattr(m, "TOOL_SPEC", None)
        runner = getattr(m, "run", None)

        if not tool_name or not tool_spec or not callable(runner):
            raise ValueError(f"Tool module {m.__name__} must define TOOL_NAME, TOOL_SPEC and run()")
        if tool_spec.get("name") != tool_name:
            raise ValueError(f"Tool module {m.__name__}: TOOL_SPEC name {tool_spec.get('name')!r} != {tool_name!r}")
        if tool_name in runners:
            raise ValueError(f"Duplicate tool name: {tool_name}")

        runners[tool_name] = runner
        definitions.append(ToolDefinition.from_spec(tool_spec))

    return runners, tuple(definitions)
