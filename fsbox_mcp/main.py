# fsbox_mcp/main.py
from fastmcp import FastMCP
from fsbox.di import build_container
from fsbox.logging import configure_logging
from fsbox_mcp.tools.files import register_file_tools

def create_app() -> FastMCP:
    """
    Build DI container, create FastMCP host, and register tools.
    Keep the server (protocol) separate from the file manager logic.
    """
    container = build_container()
    configure_logging(container.settings.LOG_LEVEL)

    mcp = FastMCP(container.settings.MCP_SERVER_NAME)

    # Register tools (thin adapters)
    register_file_tools(mcp, container.fs_service)

    return mcp


if __name__ == "__main__":
    app = create_app()
    # stdio transport: client (agent/IDE) launches this process and speaks JSON-RPC on stdin/stdout
    app.run(transport="stdio")
