"""MCP server for reflectfile-mcp."""

import asyncio
import json
import os

from mcp.server import Server
from mcp.types import Tool, TextContent

from .tools.reflect_file import reflect_file
from .tools.reflect_source import reflect_source
from .tools.reflect_folder import reflect_folder


STRATEGY_SCHEMA = {
    "type": "string",
    "description": "How names are qualified: 'resolved' uses a name-resolution pass, 'lexical' tracks the enclosing namespace while walking.",
    "enum": ["lexical", "resolved"],
}

KIND_SCHEMA = {
    "type": "string",
    "description": "Optional filter by declaration kind",
    "enum": ["class", "trait", "interface", "enum", "function", "const"],
}


# Create server
server = Server("reflectfile-mcp")


@server.list_tools()
async def list_tools() -> list[Tool]:
    """List all available tools."""
    return [
        Tool(
            name="reflect_file",
            description="List the fully qualified names of the classes, traits, interfaces, enums, functions and constants a PHP file declares. The file is parsed, never executed.",
            inputSchema={
                "type": "object",
                "properties": {
                    "path": {
                        "type": "string",
                        "description": "Path to the PHP file (absolute or relative, supports ~ for home directory)"
                    },
                    "strategy": STRATEGY_SCHEMA,
                    "kind": KIND_SCHEMA,
                },
                "required": ["path"]
            }
        ),
        Tool(
            name="reflect_source",
            description="List the fully qualified names declared by a PHP source string. The source must start with <?php.",
            inputSchema={
                "type": "object",
                "properties": {
                    "source": {
                        "type": "string",
                        "description": "PHP source code"
                    },
                    "strategy": STRATEGY_SCHEMA,
                    "kind": KIND_SCHEMA,
                },
                "required": ["source"]
            }
        ),
        Tool(
            name="reflect_folder",
            description="Walk a local folder and list the declared names of every PHP file in it. Vendor and build directories are skipped.",
            inputSchema={
                "type": "object",
                "properties": {
                    "path": {
                        "type": "string",
                        "description": "Path to local folder (absolute or relative, supports ~ for home directory)"
                    },
                    "strategy": STRATEGY_SCHEMA,
                    "max_files": {
                        "type": "integer",
                        "description": "Maximum number of files to reflect",
                        "default": 500
                    }
                },
                "required": ["path"]
            }
        ),
    ]


@server.call_tool()
async def call_tool(name: str, arguments: dict) -> list[TextContent]:
    """Handle tool calls."""
    strategy = arguments.get("strategy") or os.environ.get("REFLECTION_STRATEGY")

    try:
        if name == "reflect_file":
            result = reflect_file(
                path=arguments["path"],
                strategy=strategy,
                kind=arguments.get("kind"),
            )
        elif name == "reflect_source":
            result = reflect_source(
                source=arguments["source"],
                strategy=strategy,
                kind=arguments.get("kind"),
            )
        elif name == "reflect_folder":
            result = reflect_folder(
                path=arguments["path"],
                strategy=strategy,
                max_files=arguments.get("max_files", 500),
            )
        else:
            result = {"error": f"Unknown tool: {name}"}

        return [TextContent(type="text", text=json.dumps(result, indent=2))]

    except Exception as e:
        return [TextContent(type="text", text=json.dumps({"error": str(e)}, indent=2))]


async def run_server():
    """Run the MCP server."""
    from mcp.server.stdio import stdio_server

    async with stdio_server() as (read_stream, write_stream):
        await server.run(
            read_stream,
            write_stream,
            server.create_initialization_options()
        )


def main():
    """Main entry point."""
    asyncio.run(run_server())


if __name__ == "__main__":
    main()
