"""MCP Server for browsing symbol catalogues grouped by section."""

import asyncio
import json
from typing import Any, Optional

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import Tool, TextContent

from .tools.list_catalogues import list_catalogues as do_list_catalogues
from .tools.get_sections import get_sections as do_get_sections
from .tools.get_section import get_section as do_get_section, get_section_batch as do_get_section_batch
from .tools.search_symbols import search_symbols as do_search_symbols
from .tools.import_catalogue import import_catalogue as do_import_catalogue
from .storage.catalogue_store import CatalogueStore


# Create MCP server
server = Server("symbolpicker-mcp")


@server.list_tools()
async def list_tools() -> list[Tool]:
    """List available tools."""
    return [
        Tool(
            name="list_catalogues",
            description="""List all available symbol catalogues.

Returns catalogue names and whether each one is bundled with the server
or stored in the user catalogue directory.""",
            inputSchema={
                "type": "object",
                "properties": {},
            },
        ),
        Tool(
            name="get_sections",
            description="""Get the sections of a catalogue.

Returns section names in catalogue order with identifier counts. Use this
to see how a catalogue is grouped before loading individual sections.""",
            inputSchema={
                "type": "object",
                "properties": {
                    "catalogue": {
                        "type": "string",
                        "description": "Catalogue name (e.g. 'SFSymbols')",
                    },
                    "include_identifiers": {
                        "type": "boolean",
                        "description": "Include every section's identifiers",
                        "default": False,
                    },
                },
                "required": ["catalogue"],
            },
        ),
        Tool(
            name="get_section",
            description="""Get the identifiers of one section.

An empty section name selects identifiers listed before the first header.""",
            inputSchema={
                "type": "object",
                "properties": {
                    "catalogue": {
                        "type": "string",
                        "description": "Catalogue name (e.g. 'SFSymbols')",
                    },
                    "section": {
                        "type": "string",
                        "description": "Section name from get_sections",
                    },
                },
                "required": ["catalogue", "section"],
            },
        ),
        Tool(
            name="get_section_batch",
            description="""Get the identifiers of several sections at once.""",
            inputSchema={
                "type": "object",
                "properties": {
                    "catalogue": {
                        "type": "string",
                        "description": "Catalogue name (e.g. 'SFSymbols')",
                    },
                    "sections": {
                        "type": "array",
                        "items": {"type": "string"},
                        "description": "List of section names to retrieve",
                    },
                },
                "required": ["catalogue", "sections"],
            },
        ),
        Tool(
            name="search_symbols",
            description="""Search a catalogue for identifiers containing a query.

Matching is case-insensitive. Exact matches rank first, then prefix
matches, then other substring matches. Each result names its section
and every section listing the same identifier.""",
            inputSchema={
                "type": "object",
                "properties": {
                    "catalogue": {
                        "type": "string",
                        "description": "Catalogue name (e.g. 'SFSymbols')",
                    },
                    "query": {
                        "type": "string",
                        "description": "Substring to look for",
                    },
                    "max_results": {
                        "type": "integer",
                        "description": "Maximum number of results to return",
                        "default": 50,
                    },
                    "section": {
                        "type": "string",
                        "description": "Only search within this section",
                    },
                },
                "required": ["catalogue", "query"],
            },
        ),
        Tool(
            name="import_catalogue",
            description="""Download a plain-text catalogue and store it under a name.

Lines starting with '## ' open a section; other non-blank lines are
identifiers. Blocked in local-only mode (SYMBOLPICKER_LOCAL_ONLY=true).""",
            inputSchema={
                "type": "object",
                "properties": {
                    "url": {
                        "type": "string",
                        "description": "URL of the catalogue text file",
                    },
                    "filename": {
                        "type": "string",
                        "description": "Catalogue name to store it under",
                    },
                },
                "required": ["url", "filename"],
            },
        ),
        Tool(
            name="delete_catalogue",
            description="""Delete a user catalogue.

Bundled catalogues cannot be deleted. This is irreversible.""",
            inputSchema={
                "type": "object",
                "properties": {
                    "catalogue": {
                        "type": "string",
                        "description": "Catalogue name",
                    },
                },
                "required": ["catalogue"],
            },
        ),
    ]


@server.call_tool()
async def call_tool(name: str, arguments: dict[str, Any]) -> list[TextContent]:
    """Handle tool calls."""
    try:
        if name == "list_catalogues":
            result = do_list_catalogues()
        elif name == "get_sections":
            result = do_get_sections(
                catalogue=arguments["catalogue"],
                include_identifiers=arguments.get("include_identifiers", False),
            )
        elif name == "get_section":
            result = do_get_section(
                catalogue=arguments["catalogue"],
                section=arguments["section"],
            )
        elif name == "get_section_batch":
            result = do_get_section_batch(
                catalogue=arguments["catalogue"],
                sections=arguments["sections"],
            )
        elif name == "search_symbols":
            result = do_search_symbols(
                catalogue=arguments["catalogue"],
                query=arguments["query"],
                max_results=arguments.get("max_results", 50),
                section=arguments.get("section"),
            )
        elif name == "import_catalogue":
            result = await do_import_catalogue(
                url=arguments["url"],
                filename=arguments["filename"],
            )
        elif name == "delete_catalogue":
            result = _handle_delete_catalogue(arguments["catalogue"])
        else:
            result = {"error": f"Unknown tool: {name}"}

        return [TextContent(type="text", text=json.dumps(result, indent=2))]

    except Exception as e:
        error_result = {"error": str(e)}
        return [TextContent(type="text", text=json.dumps(error_result, indent=2))]


def _handle_delete_catalogue(catalogue: str, catalogue_dir: Optional[str] = None) -> dict:
    """Handle delete_catalogue tool call."""
    store = CatalogueStore(catalogue_dir)

    deleted = store.delete(catalogue)
    if deleted:
        return {"success": True, "message": f"Catalogue deleted: {catalogue}"}
    else:
        return {"success": False, "error": f"No user catalogue named {catalogue}"}


async def run_server():
    """Run the MCP server."""
    async with stdio_server() as (read_stream, write_stream):
        await server.run(
            read_stream,
            write_stream,
            server.create_initialization_options(),
        )


def main():
    """Entry point for the MCP server."""
    asyncio.run(run_server())


if __name__ == "__main__":
    main()
