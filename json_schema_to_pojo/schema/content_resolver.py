"""
Loads schema documents by URI.
"""

from __future__ import annotations

import json
import logging
from decimal import Decimal
from typing import Any
from urllib.parse import urlsplit
from urllib.request import url2pathname

import httpx

from ..errors import SchemaResolutionError

logger = logging.getLogger(__name__)


def parse_json(text: str) -> Any:
    """Parse JSON keeping the exact text of fractional numbers."""
    return json.loads(text, parse_float=Decimal)


class ContentResolver:
    """Reads the JSON content of a document from a file or HTTP(S) URI.

    Documents can also be registered in memory; registered content wins
    over anything reachable at the same URI.
    """

    def __init__(self, timeout: float = 10.0):
        self.timeout = timeout
        self._registered: dict[str, Any] = {}

    def register(self, uri: str, content: Any) -> None:
        self._registered[uri] = content

    def resolve(self, uri: str, referrer: str | None = None) -> Any:
        """
        Load the document at the given URI.

        Args:
            uri: Absolute document URI (no fragment)
            referrer: URI of the schema that referenced this document

        Returns:
            Parsed JSON content

        Raises:
            SchemaResolutionError: If the document cannot be read or parsed
        """
        if uri in self._registered:
            return self._registered[uri]

        scheme = urlsplit(uri).scheme
        if scheme == "file":
            text = self._read_file(uri, referrer)
        elif scheme in ("http", "https"):
            text = self._read_http(uri, referrer)
        else:
            raise SchemaResolutionError(f"Unsupported URI scheme '{scheme}'", uri, referrer)

        try:
            return parse_json(text)
        except json.JSONDecodeError as e:
            raise SchemaResolutionError(f"Schema document is not valid JSON: {e}", uri, referrer) from e

    def _read_file(self, uri: str, referrer: str | None) -> str:
        path = url2pathname(urlsplit(uri).path)
        logger.debug("Reading schema document %s", path)
        try:
            with open(path, encoding="utf-8") as f:
                return f.read()
        except OSError as e:
            raise SchemaResolutionError(f"Cannot read schema document: {e.strerror}", uri, referrer) from e

    def _read_http(self, uri: str, referrer: str | None) -> str:
        logger.debug("Fetching schema document %s", uri)
        try:
            response = httpx.get(uri, timeout=self.timeout, follow_redirects=True)
            response.raise_for_status()
        except httpx.HTTPError as e:
            raise SchemaResolutionError(f"Cannot fetch schema document: {e}", uri, referrer) from e
        return response.text
