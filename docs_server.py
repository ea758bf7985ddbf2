# docs_server.py — Swagger UI at /, static /openapi.yaml, JSON rendition at /openapi.json

import logging
import mimetypes
import os
from typing import Optional, Tuple

from flask import Flask, Response, jsonify, request
from flask_cors import CORS

import config
from config import wrap
from schema import SchemaNotFound, SchemaUnreadable, dump_json, etag_for, load_document, schema_path
from viewer import swagger_ui

# Not every platform's mime table knows YAML.
mimetypes.add_type("application/yaml", ".yaml")
mimetypes.add_type("application/yaml", ".yml")


def create_app(
    static_dir: Optional[str] = None,
    schema_file: Optional[str] = None,
    schema_url: Optional[str] = None,
    title: Optional[str] = None,
    version: Optional[str] = None,
    cdn: Optional[str] = None,
) -> Flask:
    """Application factory. Arguments override the environment-driven config."""
    static_dir = os.path.abspath(static_dir or config.STATIC_DIR)
    if schema_file is None:
        schema_file = config.SCHEMA_FILE
        schema_url = schema_url or config.SCHEMA_URL
    else:
        schema_url = schema_url or f"/{schema_file}"

    # The static layer serves the compiled document at /<filename>.
    app = Flask(__name__, static_folder=static_dir, static_url_path="")
    CORS(app)
    # Flask's handler only emits at the logger's level; root defaults to WARNING.
    app.logger.setLevel(logging.INFO)

    if not _schema_present(static_dir, schema_file):
        app.logger.warning(
            "Schema document %s not found in %s; the viewer will show a load error until the compiler writes it",
            schema_file, static_dir,
        )
    else:
        app.logger.info("Serving %s from %s", schema_file, static_dir)

    # -------- Documentation viewer --------
    app.get("/")(swagger_ui(
        url=schema_url,
        title=title or config.TITLE,
        version=config.SWAGGER_UI_VERSION if version is None else version,
        cdn=cdn or config.SWAGGER_UI_CDN,
    ))

    # -------- JSON rendition of the committed document --------
    @app.route("/openapi.json", methods=["GET", "HEAD"])
    def openapi_json() -> Response:
        try:
            payload = dump_json(load_document(schema_path(static_dir, schema_file)))
        except SchemaNotFound as e:
            return jsonify(wrap(error="Missing schema document", detail=str(e))), 404
        except SchemaUnreadable as e:
            return jsonify(wrap(error="Schema document is not readable", detail=str(e))), 500

        etag = etag_for(payload)

        inm = request.headers.get("If-None-Match")
        if inm and inm.strip('"') == etag:
            resp = Response(status=304)
        else:
            resp = Response(payload, status=200, mimetype="application/json")

        resp.headers["ETag"] = f'"{etag}"'
        resp.headers["Cache-Control"] = "no-store, max-age=0, must-revalidate"
        resp.headers["X-OpenAPI-Source"] = "static"
        return resp

    # -------- Health --------
    @app.get("/_healthz")
    def healthz() -> Tuple[Response, int]:
        return jsonify(wrap({"ok": True, "schema": _schema_present(static_dir, schema_file)})), 200

    return app


def _schema_present(static_dir: str, schema_file: str) -> bool:
    try:
        return os.path.isfile(schema_path(static_dir, schema_file))
    except SchemaNotFound:
        return False


app = create_app()


if __name__ == "__main__":
    app.run(host=config.HOST, port=config.PORT, debug=True)
