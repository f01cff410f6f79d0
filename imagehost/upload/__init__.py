"""Upload intake service: stores one image per request and returns its URL."""
from .app import create_app  # noqa: F401
