"""Service layer consumed by the MCP tools."""

from .index_service import IndexService, IndexStatus, ProjectState

__all__ = ['IndexService', 'IndexStatus', 'ProjectState']
