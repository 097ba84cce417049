"""
Decorator-based error handling for MCP entry points.

Tools never raise into the MCP transport. Errors the caller can act on
(IndexerError) become ``{"error": message}``; anything else is logged with
its traceback and reported the same way so the server keeps running.
"""

import inspect
import functools
import logging
from typing import Any, Callable, Dict

from ..errors import IndexerError

logger = logging.getLogger(__name__)


def _error_response(func_name: str, exc: Exception) -> Dict[str, Any]:
    if isinstance(exc, IndexerError):
        logger.info(f"{func_name}: {exc}")
    else:
        logger.error(f"Unexpected error in {func_name}: {exc}", exc_info=True)
    return {"error": str(exc)}


def handle_mcp_tool_errors(func: Callable) -> Callable:
    """Wrap a sync or async MCP tool so failures become error dicts."""
    if inspect.iscoroutinefunction(func):
        @functools.wraps(func)
        async def async_wrapper(*args, **kwargs) -> Dict[str, Any]:
            try:
                return await func(*args, **kwargs)
            except Exception as e:
                return _error_response(func.__name__, e)

        return async_wrapper

    @functools.wraps(func)
    def wrapper(*args, **kwargs) -> Dict[str, Any]:
        try:
            return func(*args, **kwargs)
        except Exception as e:
            return _error_response(func.__name__, e)

    return wrapper
