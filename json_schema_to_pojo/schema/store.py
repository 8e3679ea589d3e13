"""
Schema store: resolves and memoizes schema nodes by canonical URI.

One store is created per generation run. For any canonical URI the store
hands out a single Schema instance, so types bound to a schema are shared
by every reference that reaches it.
"""

from __future__ import annotations

import logging
import posixpath
import re
import threading
import weakref
from pathlib import Path
from typing import Any
from urllib.parse import quote, unquote, urljoin, urlsplit, urlunsplit

from ..errors import SchemaResolutionError
from ..model import JType
from .content_resolver import ContentResolver
from .fragment_resolver import FragmentResolver

logger = logging.getLogger(__name__)

DEFAULT_FRAGMENT_DELIMITERS = "#/."

FRAGMENT_SAFE = "/~!$&'()*+,;=:@"

# An escaped dot is part of a segment name, never a delimiter
ESCAPED_DOT = re.compile("%2E", re.IGNORECASE)


def to_uri(location: str | Path) -> str:
    """Turn a filesystem path (or URI string) into a URI string."""
    if isinstance(location, Path):
        return location.absolute().as_uri()
    if not urlsplit(location).scheme:
        return Path(location).absolute().as_uri()
    return location


def normalize_fragment(fragment: str) -> str:
    """Percent-encode a fragment canonically, so "a b" and "a%20b" give one key."""
    return "%2E".join(quote(unquote(part), safe=FRAGMENT_SAFE) for part in ESCAPED_DOT.split(fragment))


def normalize_uri(uri: str) -> str:
    """
    Canonicalise a URI: resolve "." and ".." path segments, encode the
    fragment canonically and drop an empty fragment.

    Raises:
        SchemaResolutionError: If the URI cannot be parsed
    """
    try:
        parts = urlsplit(uri)
    except ValueError as e:
        raise SchemaResolutionError(f"Invalid URI syntax: {e}", uri) from e

    path = parts.path
    if path:
        normalized = posixpath.normpath(path)
        if normalized.startswith("//"):
            normalized = "/" + normalized.lstrip("/")
        if normalized == ".":
            normalized = ""
        if path.endswith("/") and not normalized.endswith("/"):
            normalized += "/"
        path = normalized

    return urlunsplit((parts.scheme, parts.netloc, path, parts.query, normalize_fragment(parts.fragment)))


def remove_fragment(uri: str) -> str:
    parts = urlsplit(uri)
    return urlunsplit((parts.scheme, parts.netloc, parts.path, parts.query, ""))


class Schema:
    """A schema node: canonical id, raw content and the type bound to it.

    The parent is the document the node was resolved from. It is held as a
    weak reference; the store owns every node.
    """

    def __init__(self, id: str | None, content: Any, parent: Schema | None):
        self.id = id
        self.content = content
        self._parent = weakref.ref(parent) if parent is not None else None
        self._java_type: JType | None = None
        self._lock = threading.Lock()

    @property
    def parent(self) -> Schema | None:
        return self._parent() if self._parent is not None else None

    @property
    def root(self) -> Schema:
        """The schema of the enclosing document."""
        schema = self
        while schema.parent is not None:
            schema = schema.parent
        return schema

    @property
    def fragment(self) -> str:
        return urlsplit(self.id).fragment if self.id else ""

    @property
    def java_type(self) -> JType | None:
        return self._java_type

    @property
    def is_generated(self) -> bool:
        return self._java_type is not None

    def set_java_type_if_empty(self, java_type: JType) -> JType:
        """
        Bind a type to this schema unless one is already bound.

        Returns:
            The type bound after the call: the given one if the schema was
            unbound, otherwise the one bound first
        """
        with self._lock:
            if self._java_type is None:
                self._java_type = java_type
            return self._java_type

    def __repr__(self) -> str:
        return f"Schema({self.id})"


class SchemaStore:
    """Run-scoped cache of schema nodes keyed by canonical URI."""

    def __init__(self, content_resolver: ContentResolver | None = None, fragment_resolver: FragmentResolver | None = None):
        self.content_resolver = content_resolver or ContentResolver()
        self.fragment_resolver = fragment_resolver or FragmentResolver()
        self._schemas: dict[str, Schema] = {}
        self._lock = threading.RLock()

    def register(self, uri: str | Path, content: Any) -> str:
        """Make an in-memory document available at a URI; returns the canonical URI."""
        canonical = normalize_uri(remove_fragment(to_uri(uri)))
        self.content_resolver.register(canonical, content)
        return canonical

    def create(self, uri: str | Path, ref_fragment_path_delimiters: str = DEFAULT_FRAGMENT_DELIMITERS, referrer: str | None = None) -> Schema:
        """
        Resolve an absolute URI (with optional fragment) to its Schema.

        Args:
            uri: Absolute URI or filesystem path
            ref_fragment_path_delimiters: Characters separating fragment segments
            referrer: URI of the referencing schema, for error messages

        Returns:
            The unique Schema for the canonical form of the URI
        """
        normalized_id = normalize_uri(to_uri(uri))

        with self._lock:
            if normalized_id in self._schemas:
                return self._schemas[normalized_id]

            base_id = remove_fragment(normalized_id)
            if base_id not in self._schemas:
                logger.debug("Loading schema %s", base_id)
                content = self.content_resolver.resolve(base_id, referrer)
                self._schemas[base_id] = Schema(base_id, content, None)

            base_schema = self._schemas[base_id]
            fragment = urlsplit(normalized_id).fragment
            if fragment:
                content = self.fragment_resolver.resolve(base_schema.content, "#" + fragment, ref_fragment_path_delimiters, normalized_id)
                self._schemas[normalized_id] = Schema(normalized_id, content, base_schema)

            return self._schemas[normalized_id]

    def create_relative(self, parent: Schema | None, path: str, ref_fragment_path_delimiters: str = DEFAULT_FRAGMENT_DELIMITERS) -> Schema:
        """
        Resolve a reference relative to an existing schema.

        "#" resolves to the root of the parent's document; fragments
        ("#/definitions/foo") resolve inside it; other paths ("other.json",
        "../common.json#/bar") resolve against the parent's URI.
        """
        if path != "#":
            path = path.rstrip("#?&/") or "#"

        if parent is not None and parent.id:
            id = urljoin(parent.id, path)
        else:
            id = path
        id = normalize_uri(id)

        if parent is not None and (not parent.id or not remove_fragment(id)):
            return self._create_in_document(parent.root, id, path, ref_fragment_path_delimiters)

        return self.create(id, ref_fragment_path_delimiters, referrer=parent.id if parent is not None else None)

    def _create_in_document(self, document: Schema, id: str, path: str, delimiters: str) -> Schema:
        """Resolve a fragment against a document that has no URI of its own."""
        with self._lock:
            if id in self._schemas:
                return self._schemas[id]
            if path == "#":
                return document
            content = self.fragment_resolver.resolve(document.content, path, delimiters, id)
            schema = Schema(id, content, document)
            self._schemas[id] = schema
            return schema

    def clear(self) -> None:
        with self._lock:
            self._schemas.clear()
