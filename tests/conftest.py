"""Pytest configuration and shared fixtures.

Provides small on-disk projects and a mock MCP context.
"""

import os
import sys
import pytest
from pathlib import Path
from unittest.mock import Mock

# Add src to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from codebase_index.config import IndexerConfig, reset_config
from codebase_index.indexing import IndexStore, reset_index_store
from codebase_index.services import IndexService


@pytest.fixture(autouse=True)
def _reset_globals():
    """Keep process-wide singletons from leaking between tests."""
    reset_config()
    reset_index_store()
    yield
    reset_config()
    reset_index_store()


@pytest.fixture
def sample_project(tmp_path):
    """Create a small mixed-language project."""
    project_path = tmp_path / "sample"
    project_path.mkdir()

    (project_path / "auth").mkdir()
    (project_path / "auth" / "config.ts").write_text('''
import { createClient } from "@supabase/supabase-js";

export function login(user: string, password: string) {
    return createClient().auth.signIn({ user, password });
}

export const SESSION_TTL = 3600;
''')

    (project_path / "main.py").write_text('''
"""Main module for the application."""

from typing import List

def main() -> int:
    print("Hello, World!")
    return 0

class ApplicationManager:
    def start(self) -> bool:
        return True
''')

    (project_path / "app.js").write_text('''
const express = require('express');
import path from 'path';

function createApp() {
    return express();
}

class Server {}

module.exports = { createApp, Server };
''')

    (project_path / "README.md").write_text('''
# Sample Project

Shows login and config handling.
''')

    # Should never be indexed
    (project_path / "node_modules" / "left-pad").mkdir(parents=True)
    (project_path / "node_modules" / "left-pad" / "index.js").write_text("module.exports = 1;\n")
    (project_path / "logo.png").write_bytes(b"\x89PNG\r\n")
    (project_path / "bundle.min.js").write_text("function a(){}\n")

    yield project_path


@pytest.fixture
def empty_project(tmp_path):
    """Create an empty directory."""
    project_path = tmp_path / "empty"
    project_path.mkdir()
    yield project_path


@pytest.fixture
def indexer_config():
    return IndexerConfig()


@pytest.fixture
def store():
    return IndexStore()


@pytest.fixture
def service(store, indexer_config):
    return IndexService(store, indexer_config)


@pytest.fixture
def mock_mcp_context(service):
    """Create a mock MCP context whose lifespan context carries the service."""
    context = Mock()
    context.request_context.lifespan_context.service = service
    context.request_context.lifespan_context.store = service.store
    return context


# Pytest configuration
def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )
