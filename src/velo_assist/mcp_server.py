"""MCP server that exposes Velo analysis and code actions to assistants.

This server wraps the `velo` CLI tool, providing structured access to
Velo type discovery and selection code actions through the Model Context
Protocol.
"""

import json
import subprocess
from typing import Any

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import Tool, TextContent


# Initialize MCP server
app = Server("velo")


@app.list_tools()
async def list_tools() -> list[Tool]:
    """Declare available tools."""
    return [
        Tool(
            name="velo_analyze",
            description=(
                "Analyze a Dart file that uses Velo state management. Returns the "
                "Velo/state type bindings, imports, context.read/watch usages and, "
                "optionally, the fields of a state class and the methods of a Velo class."
            ),
            inputSchema={
                "type": "object",
                "properties": {
                    "file": {
                        "type": "string",
                        "description": "Path to the Dart file (e.g., 'lib/counter/counter_page.dart')",
                    },
                    "state": {
                        "type": "string",
                        "description": "State class whose fields to list (e.g., 'CounterState')",
                    },
                    "velo": {
                        "type": "string",
                        "description": "Velo class whose methods to list (e.g., 'CounterNotifier')",
                    },
                },
                "required": ["file"],
            },
        ),
        Tool(
            name="velo_code_actions",
            description=(
                "Propose code actions for a selection in a Dart file: wrapping the "
                "selected widget in VeloBuilder, VeloListener, VeloConsumer or Provider, "
                "and converting between builder, consumer and multi-provider shapes. "
                "Returns each action's label and replacement text."
            ),
            inputSchema={
                "type": "object",
                "properties": {
                    "file": {
                        "type": "string",
                        "description": "Path to the Dart file",
                    },
                    "start": {
                        "type": "string",
                        "description": "Selection start as zero-based 'line:character' (e.g., '12:4')",
                    },
                    "end": {
                        "type": "string",
                        "description": "Selection end as zero-based 'line:character' (e.g., '14:5')",
                    },
                },
                "required": ["file", "start", "end"],
            },
        ),
    ]


@app.call_tool()
async def call_tool(name: str, arguments: Any) -> list[TextContent]:
    """Handle tool calls by routing to appropriate CLI commands."""
    if name == "velo_analyze":
        command = ["velo", "analyze", arguments["file"], "--json"]
        if arguments.get("state"):
            command.extend(["--state", arguments["state"]])
        if arguments.get("velo"):
            command.extend(["--velo", arguments["velo"]])
        return await _run_cli(command)
    elif name == "velo_code_actions":
        return await _run_cli(
            ["velo", "actions", arguments["file"], arguments["start"], arguments["end"], "--json"]
        )

    raise ValueError(f"Unknown tool: {name}")


async def _run_cli(command: list[str]) -> list[TextContent]:
    """Run a velo CLI command and return its JSON output as text.

    Args:
        command: Full command line, starting with "velo"

    Returns:
        List containing a single TextContent with JSON results or an error
    """
    try:
        result = subprocess.run(
            command,
            capture_output=True,
            text=True,
            check=True,
        )

        # Parse JSON output from CLI
        data = json.loads(result.stdout)

        return [
            TextContent(
                type="text",
                text=json.dumps(data, indent=2),
            )
        ]

    except subprocess.CalledProcessError as e:
        error_msg = e.stderr.strip() if e.stderr else str(e)
        return [
            TextContent(
                type="text",
                text=f"Error running velo {command[1]}: {error_msg}",
            )
        ]
    except json.JSONDecodeError as e:
        return [
            TextContent(
                type="text",
                text=f"Error parsing velo output: {e}",
            )
        ]
    except Exception as e:
        return [
            TextContent(
                type="text",
                text=f"Unexpected error: {e}",
            )
        ]


async def main():
    """Run the MCP server."""
    async with stdio_server() as (read_stream, write_stream):
        await app.run(read_stream, write_stream, app.create_initialization_options())


if __name__ == "__main__":
    import asyncio

    asyncio.run(main())
