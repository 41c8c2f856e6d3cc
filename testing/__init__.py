"""Shared testing infrastructure for docschema.

This package provides reusable test doubles for testing the schema
compiler independently of Python's typing introspection.

Modules:
    fixtures: Scripted TypeModel and type descriptor factories

Usage:
    In your test module:
        from testing.fixtures.type_models import FakeTypeModel, fake_struct, prop, string
"""

from __future__ import annotations
