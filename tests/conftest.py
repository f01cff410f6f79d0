"""Shared fixtures for imagehost tests."""

import pytest

from imagehost.frontend import create_app as create_frontend_app
from imagehost.upload import create_app as create_upload_app


@pytest.fixture
def upload_folder(tmp_path):
    """Empty storage root for one test.

    Returns:
        Path of a directory that does not exist yet.
    """
    return tmp_path / "uploads"


@pytest.fixture
def app(upload_folder):
    """Upload service backed by local storage under tmp_path."""
    return create_upload_app({
        "TESTING": True,
        "UPLOAD_FOLDER": str(upload_folder),
        "USE_OBJECT_STORAGE": None,
        "OBJECT_STORE_LOCATION": None,
    })


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def frontend_app():
    return create_frontend_app({
        "TESTING": True,
        "UPLOAD_SERVICE_URL": "http://upload.test",
    })


@pytest.fixture
def frontend_client(frontend_app):
    return frontend_app.test_client()


@pytest.fixture
def aws_credentials(monkeypatch):
    """Fake AWS credentials so boto3 never reaches a real account."""
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setenv("AWS_SECURITY_TOKEN", "testing")
    monkeypatch.setenv("AWS_SESSION_TOKEN", "testing")
    monkeypatch.setenv("AWS_DEFAULT_REGION", "us-east-1")
