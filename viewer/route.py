# viewer/route.py — Flask view factory for the documentation page

from typing import Any, Callable, Optional

from flask import Response

from .options import build_config
from .page import DEFAULT_CDN, render_page


def swagger_ui(
    url: Optional[str] = None,
    title: str = "SwaggerUI",
    version: str = "",
    cdn: str = DEFAULT_CDN,
    **options: Any,
) -> Callable[[], Response]:
    """Build a view that always answers with the same Swagger UI page.

    The page is rendered here, once; the returned view ignores the request
    entirely. Bind it with ``app.get("/")(swagger_ui(url="/openapi.yaml"))``.
    """
    html = render_page(build_config(url=url, **options), title=title, version=version, cdn=cdn)
    body = html.encode("utf-8")

    def swagger_ui_page() -> Response:
        return Response(body, status=200, mimetype="text/html")

    return swagger_ui_page
