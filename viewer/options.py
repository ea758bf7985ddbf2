# ==================================================
# viewer/options.py  — SwaggerUIBundle configuration
# ==================================================
from __future__ import annotations

from typing import Any, Dict, List, Optional

DOM_ID = "#swagger-ui"


def build_config(
    url: Optional[str] = None,
    urls: Optional[List[Dict[str, str]]] = None,
    **extra: Any,
) -> Dict[str, Any]:
    """Return the object passed to ``SwaggerUIBundle``.

    Exactly one of ``url`` (single document) or ``urls`` (a list of
    ``{"url": ..., "name": ...}`` entries for the top-bar selector) is required.
    Any other Swagger UI option (``deepLinking``, ``docExpansion``, ...) passes
    through untouched. ``dom_id`` always points at the page's mount point.
    """
    if url and urls:
        raise ValueError("Pass either 'url' or 'urls', not both")
    if not url and not urls:
        raise ValueError("Swagger UI needs a schema document: pass 'url' or 'urls'")

    config: Dict[str, Any] = dict(extra)
    config["dom_id"] = DOM_ID
    if url:
        config["url"] = url
    else:
        if not isinstance(urls, (list, tuple)):
            raise ValueError(f"'urls' must be a list of {{'url', 'name'}} entries, got {type(urls).__name__}")
        for entry in urls:
            if not isinstance(entry, dict) or not entry.get("url"):
                raise ValueError(f"'urls' entry without a url: {entry!r}")
        config["urls"] = [dict(entry) for entry in urls]
    return config
