"""Shared test fixtures for docschema packages.

Exports:
    FakeTypeModel: TypeModel answering from scripted FakeType records
    FakeType: Scripted type descriptor
"""

from __future__ import annotations

from testing.fixtures.type_models import FakeType, FakeTypeModel

__all__ = ["FakeType", "FakeTypeModel"]
