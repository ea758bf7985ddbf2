# ==================================================
# viewer/page.py  — static Swagger UI HTML document
# ==================================================
from __future__ import annotations

import json
from typing import Any, Dict

from markupsafe import escape

DEFAULT_CDN = "https://cdn.jsdelivr.net/npm/swagger-ui-dist"

_TEMPLATE = """<!doctype html>
<html lang="en">
  <head>
    <meta charset="utf-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1" />
    <meta name="description" content="{title}" />
    <title>{title}</title>
    <link rel="stylesheet" href="{asset_root}/swagger-ui.css" />
  </head>
  <body>
    <div id="swagger-ui"></div>
    <script src="{asset_root}/swagger-ui-bundle.js" crossorigin="anonymous"></script>
    <script>
      window.onload = () => {{
        window.ui = SwaggerUIBundle({config})
      }}
    </script>
  </body>
</html>
"""


def _script_json(config: Dict[str, Any]) -> str:
    # sorted keys keep the page byte-identical across runs;
    # "</" would otherwise close the inline <script> early
    text = json.dumps(config, ensure_ascii=False, sort_keys=True, separators=(", ", ": "))
    return text.replace("</", "<\\/")


def asset_root(version: str = "", cdn: str = DEFAULT_CDN) -> str:
    root = cdn.rstrip("/")
    return f"{root}@{version}" if version else root


def render_page(
    config: Dict[str, Any],
    title: str = "SwaggerUI",
    version: str = "",
    cdn: str = DEFAULT_CDN,
) -> str:
    """Render the viewer page for an already-built ``SwaggerUIBundle`` config."""
    return _TEMPLATE.format(
        title=escape(title),
        asset_root=escape(asset_root(version, cdn)),
        config=_script_json(config),
    )
