from svgl_mcp.server import main

main()
