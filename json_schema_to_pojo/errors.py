"""
Exceptions raised while mapping schemas to a type model.
"""

from __future__ import annotations

from typing import Any


class JsonSchemaToPojoError(Exception):
    """Base class for all generation errors."""

    pass


class SchemaResolutionError(JsonSchemaToPojoError):
    """Raised when a schema document or fragment cannot be reached or parsed.

    This can happen when:
    - The URI has an invalid syntax or an unsupported scheme
    - The document cannot be read (missing file, HTTP error)
    - The document is not valid JSON
    - A fragment segment does not exist in the document

    Resolution errors are terminal for the current run.
    """

    def __init__(self, message: str, uri: str, referrer: str | None = None):
        self.uri = uri
        self.referrer = referrer
        if referrer:
            message = f"{message} (uri: {uri}, referenced from: {referrer})"
        else:
            message = f"{message} (uri: {uri})"
        super().__init__(message)


class ConfigurationError(JsonSchemaToPojoError):
    """Raised when an enumerated configuration option holds an unknown value."""

    def __init__(self, message: str, value: Any):
        self.value = value
        super().__init__(message)
