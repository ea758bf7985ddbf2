"""
Unit tests for the Swagger UI page renderer.
"""

import json
import re

import pytest
from flask import Flask

from viewer import build_config, render_page, swagger_ui


def _config_from(html):
    m = re.search(r"SwaggerUIBundle\((.*)\)\n", html)
    return json.loads(m.group(1).replace("<\\/", "</"))


class TestBuildConfig:

    def test_single_url(self):
        assert build_config(url="/openapi.yaml") == {"dom_id": "#swagger-ui", "url": "/openapi.yaml"}

    def test_url_list(self):
        urls = [{"url": "/v1.yaml", "name": "v1"}, {"url": "/v2.yaml", "name": "v2"}]
        config = build_config(urls=urls)
        assert config["urls"] == urls
        assert "url" not in config

    def test_extra_options_pass_through(self):
        config = build_config(url="/openapi.yaml", deepLinking=True, docExpansion="none")
        assert config["deepLinking"] is True
        assert config["docExpansion"] == "none"

    def test_dom_id_is_fixed(self):
        assert build_config(url="/a.yaml", dom_id="#other")["dom_id"] == "#swagger-ui"

    @pytest.mark.parametrize("kwargs", [
        {},
        {"url": ""},
        {"urls": []},
        {"url": "/a.yaml", "urls": [{"url": "/b.yaml", "name": "b"}]},
        {"urls": [{"name": "no url"}]},
        {"urls": ["/a.yaml"]},
        {"urls": "/a.yaml"},
        {"urls": {"url": "/a.yaml"}},
    ])
    def test_rejects_bad_document_selection(self, kwargs):
        with pytest.raises(ValueError):
            build_config(**kwargs)


class TestRenderPage:

    def test_embeds_config(self):
        html = render_page(build_config(url="/openapi.yaml"))
        assert _config_from(html) == {"dom_id": "#swagger-ui", "url": "/openapi.yaml"}
        assert "window.ui = SwaggerUIBundle(" in html

    def test_deterministic(self):
        a = render_page(build_config(url="/x.yaml", b=1, a=2))
        b = render_page(build_config(a=2, b=1, url="/x.yaml"))
        assert a == b

    def test_script_close_is_escaped(self):
        html = render_page(build_config(url="/x.yaml", footer="</script><script>alert(1)"))
        assert "</script><script>alert(1)" not in html
        assert _config_from(html)["footer"] == "</script><script>alert(1)"

    def test_cdn_and_version(self):
        html = render_page(build_config(url="/x.yaml"), version="5.0.0", cdn="https://unpkg.com/swagger-ui-dist/")
        assert 'href="https://unpkg.com/swagger-ui-dist@5.0.0/swagger-ui.css"' in html
        assert 'src="https://unpkg.com/swagger-ui-dist@5.0.0/swagger-ui-bundle.js"' in html

    def test_default_title(self):
        assert "<title>SwaggerUI</title>" in render_page(build_config(url="/x.yaml"))


class TestSwaggerUiView:

    def test_binds_as_one_liner(self):
        app = Flask(__name__)
        app.get("/")(swagger_ui(url="/openapi.yaml"))
        resp = app.test_client().get("/")
        assert resp.status_code == 200
        assert '"url": "/openapi.yaml"' in resp.get_data(as_text=True)

    def test_bad_options_fail_at_bind_time(self):
        with pytest.raises(ValueError):
            swagger_ui()
