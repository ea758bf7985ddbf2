# viewer/__init__.py
"""
Swagger UI page rendering and the Flask view that serves it.
"""

from .options import build_config
from .page import render_page
from .route import swagger_ui

__all__ = ["build_config", "render_page", "swagger_ui"]
