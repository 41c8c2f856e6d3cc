"""Shared pytest fixtures for docschema-core tests.

This module provides common fixtures used across unit, integration,
and contract tests.
"""

from __future__ import annotations

import sys

import pytest
import structlog

from docschema_core import PythonTypeModel, SchemaCompiler
from testing.fixtures.type_models import FakeTypeModel


@pytest.fixture(autouse=True)
def configure_structlog_for_tests() -> None:
    """Configure structlog to output to stdout for test capture.

    Error logging in the exception hierarchy goes through structlog; routing
    it to stdout lets capsys assert on what was logged.
    """
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
        cache_logger_on_first_use=False,  # Important for test isolation
    )


@pytest.fixture
def python_model() -> PythonTypeModel:
    """Return a type model over Python annotations."""
    return PythonTypeModel()


@pytest.fixture
def fake_model() -> FakeTypeModel:
    """Return a type model answering from scripted FakeType records."""
    return FakeTypeModel()


@pytest.fixture
def compiler(python_model: PythonTypeModel) -> SchemaCompiler:
    """Return a compiler over Python annotations."""
    return SchemaCompiler(python_model)


@pytest.fixture
def fake_compiler(fake_model: FakeTypeModel) -> SchemaCompiler:
    """Return a compiler over scripted fake types."""
    return SchemaCompiler(fake_model)
