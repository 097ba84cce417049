"""
Utility modules for the codebase index.

This package contains shared utilities:
- error_handler: Decorator-based error handling for MCP entry points
- file utilities: Ignore rules and file walking
"""

from .error_handler import handle_mcp_tool_errors
from .file_filter import BUILTIN_EXCLUDES, FileFilter
from .file_walker import ALLOWED_EXTENSIONS, FileWalker

__all__ = [
    'handle_mcp_tool_errors',
    'BUILTIN_EXCLUDES',
    'FileFilter',
    'ALLOWED_EXTENSIONS',
    'FileWalker',
]
