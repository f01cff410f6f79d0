"""Browser-facing upload page that forwards images to the upload service."""
from .app import create_app  # noqa: F401
