"""Schematic grid model and error types."""

from .errors import SchematicError, MalformedSchematicError, ConfigError
from .model import Schematic, PLACEHOLDER

__all__ = [
    "Schematic",
    "PLACEHOLDER",
    "SchematicError",
    "MalformedSchematicError",
    "ConfigError",
]
