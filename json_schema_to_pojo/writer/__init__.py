"""
Writer module: renders the type model as Java source with Jinja2 templates.
"""

from __future__ import annotations

from .java_writer import ImportScope, JavaWriter

__all__ = ["ImportScope", "JavaWriter"]
