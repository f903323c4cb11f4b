"""Exceptions raised for invalid schematics and configuration."""


class SchematicError(Exception):
    """Base class for errors reported by the gear scanner."""


class MalformedSchematicError(SchematicError):
    """The input grid is empty or not rectangular."""


class ConfigError(SchematicError):
    """A configuration file could not be read or contains invalid values."""
