"""Exceptions raised while loading a floorplan document."""
from __future__ import annotations
from typing import Optional


class FloorplanError(Exception):
    """Base class for every floorplan loading failure."""

    def __init__(self, message: str, path: Optional[str] = None):
        self.message = message
        self.path = path
        super().__init__(f"{path}: {message}" if path else message)


class FloorplanTypeError(FloorplanError, TypeError):
    """A JSON scalar is not of the expected kind (number, string)."""


class ParseError(FloorplanError, ValueError):
    """A colour string is not valid hexadecimal, or the JSON text is malformed."""


class SchemaError(FloorplanError, ValueError):
    """A node has a missing/unknown ``type`` or lacks a required field."""


class InvariantError(FloorplanError, AssertionError):
    """Dispatch met an element the loader can never produce."""
