"""
Codebase Index

In-process indexing and keyword relevance ranking of project source files,
served to chat and voice assistants over MCP.
"""

__version__ = "0.1.0"
