# schema/__init__.py
"""
Read-only access to the committed schema document (compiled elsewhere).
"""

from .errors import SchemaError, SchemaNotFound, SchemaUnreadable
from .static import dump_json, etag_for, load_document, schema_path

__all__ = [
    "SchemaError",
    "SchemaNotFound",
    "SchemaUnreadable",
    "dump_json",
    "etag_for",
    "load_document",
    "schema_path",
]
