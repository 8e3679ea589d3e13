"""
Schema store module.

Resolves schema documents and references into a memoized graph of
Schema nodes, one instance per canonical URI.
"""

from __future__ import annotations

from .content_resolver import ContentResolver, parse_json
from .fragment_resolver import FragmentResolver, escape_segment
from .store import Schema, SchemaStore, normalize_uri, to_uri

__all__ = [
    "ContentResolver",
    "FragmentResolver",
    "Schema",
    "SchemaStore",
    "escape_segment",
    "normalize_uri",
    "parse_json",
    "to_uri",
]
