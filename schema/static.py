# ==============================================
# schema/static.py  — committed schema document
# ==============================================
from __future__ import annotations

import hashlib
import json
import logging
import os
from typing import Any, Dict

import yaml

from .errors import SchemaNotFound, SchemaUnreadable

log = logging.getLogger(__name__)


def schema_path(static_dir: str, filename: str) -> str:
    """Absolute path of ``filename`` inside ``static_dir``.

    The filename must stay inside the directory; anything resolving outside
    it is treated as absent.
    """
    root = os.path.abspath(static_dir)
    path = os.path.abspath(os.path.join(root, filename))
    if os.path.commonpath([root, path]) != root:
        raise SchemaNotFound(f"{filename!r} is outside {root}")
    return path


def load_document(path: str) -> Dict[str, Any]:
    """Parse the document at ``path`` (YAML or JSON) into a mapping.

    Only reads; the grammar of the document is the compiler's business.
    """
    if not os.path.isfile(path):
        raise SchemaNotFound(f"No schema document at {path}")

    try:
        with open(path, "r", encoding="utf-8") as fh:
            doc = yaml.safe_load(fh)
    except (yaml.YAMLError, UnicodeDecodeError) as e:
        log.warning("schema document %s does not parse: %s", path, e)
        raise SchemaUnreadable(str(e)) from e

    if not isinstance(doc, dict):
        raise SchemaUnreadable(
            f"Expected a mapping at the top of {os.path.basename(path)}, got {type(doc).__name__}"
        )
    return doc


def dump_json(document: Dict[str, Any]) -> str:
    """Compact JSON text of ``document``, in the compiler's key order.

    YAML timestamp values become ISO strings. Mappings JSON cannot express
    (non-string keys such as dates, alias cycles) raise ``SchemaUnreadable``.
    """
    try:
        return json.dumps(document, ensure_ascii=False, separators=(",", ":"), default=str)
    except (TypeError, ValueError) as e:
        log.warning("schema document has no JSON form: %s", e)
        raise SchemaUnreadable(str(e)) from e


def etag_for(payload: str) -> str:
    return hashlib.sha256(payload.encode("utf-8")).hexdigest()
