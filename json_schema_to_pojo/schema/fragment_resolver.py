"""
Resolves JSON-pointer style fragments inside a document.
"""

from __future__ import annotations

import re
from typing import Any
from urllib.parse import quote, unquote

from ..errors import SchemaResolutionError


def escape_segment(segment: str) -> str:
    """Escape a property name for use as a pointer segment."""
    return quote(segment.replace("~", "~0").replace("/", "~1"), safe="").replace(".", "%2E")


def _unescape_segment(segment: str) -> str:
    return unquote(segment).replace("~1", "/").replace("~0", "~")


class FragmentResolver:
    """Walks fragment segments from the root content of a document."""

    def resolve(self, tree: Any, path: str, delimiters: str, uri: str = "") -> Any:
        """
        Resolve a fragment against a JSON tree.

        Args:
            tree: Root content of the document
            path: Fragment, e.g. "#/definitions/address"
            delimiters: Characters separating segments (e.g. "#/.")
            uri: URI being resolved, for error messages

        Returns:
            The addressed JSON value

        Raises:
            SchemaResolutionError: If a segment is not present
        """
        pattern = "[" + re.escape(delimiters) + "]"
        segments = [s for s in re.split(pattern, path) if s]

        for raw in segments:
            segment = _unescape_segment(raw)
            if isinstance(tree, list):
                try:
                    tree = tree[int(segment)]
                except (ValueError, IndexError) as e:
                    raise SchemaResolutionError(f"Path not present: {segment}", uri) from e
            elif isinstance(tree, dict) and segment in tree:
                tree = tree[segment]
            else:
                raise SchemaResolutionError(f"Path not present: {segment}", uri)

        return tree
