"""
Codebase Index MCP server.

Exposes scanning, querying and status checks of project indexes as MCP
tools. The index store lives in the server's lifespan context, so every
tool call of one server process shares it.
"""

import json
import logging
import sys
from contextlib import asynccontextmanager
from dataclasses import dataclass
from typing import Any, AsyncIterator, Dict, Optional

from mcp.server.fastmcp import Context, FastMCP

from .config import get_config
from .indexing import IndexStore, get_index_store
from .services import IndexService
from .utils import handle_mcp_tool_errors

logger = logging.getLogger(__name__)


@dataclass
class CodebaseIndexContext:
    store: IndexStore
    service: IndexService


@asynccontextmanager
async def indexer_lifespan(_server: FastMCP) -> AsyncIterator[CodebaseIndexContext]:
    store = get_index_store()
    context = CodebaseIndexContext(store=store, service=IndexService(store, get_config()))
    try:
        yield context
    finally:
        logger.info(f"Shutting down with {len(store)} project index(es) in memory")


mcp = FastMCP("CodebaseIndex", lifespan=indexer_lifespan)


def _service(ctx: Context) -> IndexService:
    return ctx.request_context.lifespan_context.service


@mcp.resource("config://codebase-index")
def get_config_resource() -> str:
    """Effective indexer configuration."""
    return json.dumps(get_config().to_dict(), indent=2)


@mcp.tool()
@handle_mcp_tool_errors
async def scan_project(project_path: str, ctx: Context) -> Dict[str, Any]:
    """
    Scan a project directory and (re)build its in-memory index.

    Use when:
    - Linking a project for the first time
    - Files were added, removed or edited and results look stale

    Args:
        project_path: Directory to index. Surrounding quotes and whitespace are ignored.

    Returns:
        fileCount, totalLines, languages and indexedAt of the new index
    """
    return await _service(ctx).scan(project_path)


@mcp.tool()
@handle_mcp_tool_errors
async def query_index(
    query: str, project_path: str, ctx: Context, max_files: Optional[int] = None
) -> Dict[str, Any]:
    """
    Find the files most relevant to a natural-language query.

    Files are ranked by keyword matches against their path, declared
    symbols, imports and the start of their content. The project must
    have been scanned with scan_project first.

    Args:
        query: Free-text description of what you are looking for
        project_path: A previously scanned project directory
        max_files: Maximum number of files to return (default 12)

    Returns:
        query, totalIndexed, found and the ranked files with relevanceScore
    """
    return _service(ctx).query(query, project_path, max_files)


@mcp.tool()
@handle_mcp_tool_errors
def index_status(project_path: str, ctx: Context) -> Dict[str, Any]:
    """Check whether a project is indexed and summarise its index."""
    return _service(ctx).status(project_path)


@mcp.tool()
@handle_mcp_tool_errors
def unlink_project(project_path: str, ctx: Context) -> Dict[str, Any]:
    """Drop a project's index from memory."""
    return _service(ctx).unlink(project_path)


def main():
    config = get_config()
    # stdout carries the MCP stdio transport
    logging.basicConfig(level=config.log_level, stream=sys.stderr)
    mcp.run()


if __name__ == '__main__':
    main()
