# config.py — Environment-driven configuration for the docs server

import os

# --- Paths ---
# Static assets (the compiled schema document) live next to this file by default.
ROOT_DIR = os.path.dirname(os.path.abspath(__file__))
STATIC_DIR = os.path.abspath(
    os.path.join(ROOT_DIR, os.getenv("DOCS_STATIC_DIR", "public"))
)

# Written by the external schema compiler, served as-is.
SCHEMA_FILE = os.getenv("DOCS_SCHEMA_FILE", "openapi.yaml")
SCHEMA_URL = os.getenv("DOCS_SCHEMA_URL", f"/{SCHEMA_FILE}")

# --- Viewer ---
TITLE = os.getenv("DOCS_TITLE", "SwaggerUI")
# Empty means "latest" on the CDN.
SWAGGER_UI_VERSION = os.getenv("SWAGGER_UI_VERSION", "")
SWAGGER_UI_CDN = os.getenv(
    "SWAGGER_UI_CDN", "https://cdn.jsdelivr.net/npm/swagger-ui-dist"
).rstrip("/")

# --- Dev server ---
HOST = os.getenv("DOCS_HOST", "0.0.0.0")
PORT = int(os.getenv("DOCS_PORT", "8000"))


# --- Response wrapper ---
def wrap(data=None, error=None, detail=None):
    """
    Envelope for the JSON endpoints (health, errors).
    - Errors carry a short message plus optional detail.
    """
    if error:
        body = {"error": error}
        if detail is not None:
            body["detail"] = detail
        return body
    return data if data is not None else {}
