"""JSON Explorer - MCP Server for navigating and searching JSON files."""

import json
import logging
from typing import Annotated, Optional

from fastmcp import FastMCP, Context
from fastmcp.exceptions import ToolError
from pydantic import Field

# Core logic imports
from json_explorer.config import settings
from json_explorer.errors import ExplorerError
from json_explorer.service import explore_json, query_json

# Logs go to stderr; stdout belongs to the stdio transport
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s [%(name)s] %(levelname)s: %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S'
)

log = logging.getLogger("json_explorer.mcp_server")

# Initialize MCP server
mcp = FastMCP("json-explorer")

# Get enabled tools from configuration
enabled_tools = settings.get_enabled_mcp_tools()
log.info(f"Enabled MCP tools: {', '.join(enabled_tools)}")


def _to_text(result) -> str:
    return json.dumps(result, indent=2, ensure_ascii=False)


# Conditionally register tools based on configuration
if "json-explore" in enabled_tools:
    @mcp.tool(name="json-explore")
    async def json_explore(
        filepath: str,
        jsonpath: Optional[str] = None,
        verbosity: Annotated[int, Field(ge=0, le=5)] = settings.DEFAULT_VERBOSITY,
        list_display_limit: Optional[int] = None,
        object_display_limit: Optional[int] = None,
        char_display_limit: Optional[int] = None,
        ctx: Context = None
    ) -> str:
        """
        Explore a JSON file.

        Args:
            filepath: Path to the JSON file
            jsonpath: Dot/bracket path inside the document (e.g. 'items[2].name'); empty = root
            verbosity: 0 keys only, 1 key types, 2 counts, 3 counts + sizes,
                4 expand small objects (default), 5 raw value
            list_display_limit: Lists up to this many items are expanded at level 1 (default 5)
            object_display_limit: Objects up to this many keys are expanded at level 4 (default 6)
            char_display_limit: Values whose JSON text fits this many chars are expanded (default 200)

        Returns:
            The rendered value as indented JSON text
        """
        if ctx:
            await ctx.info(f"Exploring {filepath} at '{jsonpath or ''}' (verbosity {verbosity})")

        try:
            rendered = explore_json(
                filepath,
                jsonpath,
                verbosity,
                list_display_limit,
                object_display_limit,
                char_display_limit,
            )
        except ExplorerError as e:
            log.warning(f"json-explore failed: {e}")
            raise ToolError(str(e)) from e

        return _to_text(rendered)


if "json-query" in enabled_tools:
    @mcp.tool(name="json-query")
    async def json_query(
        filepath: str,
        query: str,
        limit: Annotated[int, Field(ge=settings.QUERY_MIN_LIMIT)] = settings.QUERY_DEFAULT_LIMIT,
        case_sensitive: bool = False,
        ctx: Context = None
    ) -> str:
        """
        Query for matching keys or values inside a JSON file; the query can be case sensitive.

        Args:
            filepath: Path to the JSON file
            query: Keywords to look for in keys and string values (fuzzy, camelCase/snake_case aware)
            limit: Maximum number of paths to return (default 20, min 10)
            case_sensitive: Also report hits whose value contains the query verbatim as 'exactMatch'

        Returns:
            Indented JSON text: {"results": [{"path", "score"}], "exactMatch"?: [...]}
        """
        if ctx:
            await ctx.info(f"Querying {filepath} for: {query[:50]}")

        try:
            result = query_json(filepath, query, limit, case_sensitive)
        except ExplorerError as e:
            log.warning(f"json-query failed: {e}")
            raise ToolError(str(e)) from e

        if ctx:
            await ctx.info(f"Found {len(result['results'])} results")

        return _to_text(result)


def main():
    transport = settings.MCP_TRANSPORT
    log.info(f"JSON explorer starting (env: {settings.ENV})")

    if transport == "http":
        port = settings.MCP_PORT
        log.info(f"Starting MCP server with HTTP Streamable transport on port {port}")
        log.info(f"MCP endpoint will be available at: http://{settings.MCP_HOST}:{port}/mcp")
        mcp.run(transport="http", host=settings.MCP_HOST, port=port)
    else:
        log.info("Starting MCP server with stdio transport")
        mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
