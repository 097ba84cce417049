"""
Configuration Management for Codebase Index

Provides sensible defaults with optional environment variable overrides.
The defaults bound scan cost for an interactive tool: a project index never
holds more than 500 files and never reads a file larger than 200 KB.
"""

import os
from typing import Any, Dict, Optional


class IndexerConfig:
    """Scanner and query engine configuration"""

    # Default values
    DEFAULT_MAX_FILES = 500  # Hard cap on indexed files per project
    DEFAULT_MAX_FILE_SIZE = 200_000  # Bytes; larger files are skipped
    DEFAULT_READ_CONCURRENCY = 32  # Simultaneous file reads during a scan
    DEFAULT_MAX_RESULTS = 12  # Query result count when the caller gives none
    DEFAULT_LOG_LEVEL = "ERROR"

    def __init__(self):
        # Load from environment variables with fallback to defaults
        self.max_files = self._get_int_env("CODEBASE_INDEX_MAX_FILES", self.DEFAULT_MAX_FILES)
        self.max_file_size = self._get_int_env(
            "CODEBASE_INDEX_MAX_FILE_SIZE", self.DEFAULT_MAX_FILE_SIZE
        )
        self.read_concurrency = self._get_int_env(
            "CODEBASE_INDEX_READ_CONCURRENCY", self.DEFAULT_READ_CONCURRENCY
        )
        self.max_results = self._get_int_env(
            "CODEBASE_INDEX_MAX_RESULTS", self.DEFAULT_MAX_RESULTS
        )
        self.log_level = os.environ.get("CODEBASE_INDEX_LOG_LEVEL", self.DEFAULT_LOG_LEVEL).upper()

        # Validate configuration
        self._validate_config()

    def _get_int_env(self, key: str, default: int) -> int:
        """Get integer from environment variable with fallback"""
        try:
            value = os.environ.get(key)
            if value is not None:
                return int(value)
        except (ValueError, TypeError):
            pass
        return default

    def _validate_config(self):
        """Validate configuration values"""
        if self.max_files <= 0:
            raise ValueError("max_files must be positive")
        if self.max_file_size <= 0:
            raise ValueError("max_file_size must be positive")
        if self.read_concurrency <= 0:
            raise ValueError("read_concurrency must be positive")
        if self.max_results <= 0:
            raise ValueError("max_results must be positive")
        if self.log_level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level: {self.log_level}")

    def to_dict(self) -> Dict[str, Any]:
        """Effective configuration as plain data"""
        return {
            "max_files": self.max_files,
            "max_file_size": self.max_file_size,
            "read_concurrency": self.read_concurrency,
            "max_results": self.max_results,
            "log_level": self.log_level,
        }

    def __repr__(self) -> str:
        return (
            f"IndexerConfig("
            f"max_files={self.max_files}, "
            f"max_file_size={self.max_file_size}, "
            f"read_concurrency={self.read_concurrency}, "
            f"max_results={self.max_results}, "
            f"log_level={self.log_level!r})"
        )


# Global configuration instance
_config: Optional[IndexerConfig] = None


def get_config() -> IndexerConfig:
    """Get global indexer configuration instance"""
    global _config
    if _config is None:
        _config = IndexerConfig()
    return _config


def reset_config():
    """Reset configuration (mainly for testing)"""
    global _config
    _config = None


# Environment documentation
CONFIG_DOCS = """
Codebase Index Configuration Environment Variables:

- CODEBASE_INDEX_MAX_FILES: Maximum files kept per project index (default: 500)
- CODEBASE_INDEX_MAX_FILE_SIZE: Files larger than this many bytes are skipped (default: 200000)
- CODEBASE_INDEX_READ_CONCURRENCY: Concurrent file reads during a scan (default: 32)
- CODEBASE_INDEX_MAX_RESULTS: Default number of query results (default: 12)
- CODEBASE_INDEX_LOG_LEVEL: Server log level written to stderr (default: ERROR)

Example usage:
    export CODEBASE_INDEX_MAX_FILES=1000
    export CODEBASE_INDEX_LOG_LEVEL=INFO
"""
