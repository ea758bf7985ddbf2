"""
Pytest fixtures for the docs server test suite.
"""

import shutil
from pathlib import Path

import pytest

from docs_server import create_app

PUBLIC = Path(__file__).resolve().parent.parent / "public"


@pytest.fixture
def static_dir(tmp_path):
    """A private copy of the committed static assets."""
    target = tmp_path / "public"
    shutil.copytree(PUBLIC, target)
    return target


@pytest.fixture
def app(static_dir):
    app = create_app(static_dir=str(static_dir), version="5.17.14")
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    """Flask test client."""
    return app.test_client()
