import math
import os


def get_max_content_length():
    """Request body limit in bytes from MAX_UPLOAD_MB, or None for no limit."""
    limit = os.environ.get("MAX_UPLOAD_MB")
    if not limit:
        return None
    try:
        megabytes = float(limit)
    except ValueError:
        raise ValueError(
            f"MAX_UPLOAD_MB must be a number of megabytes, got {limit!r}"
        ) from None
    if not (megabytes > 0 and math.isfinite(megabytes)):
        raise ValueError(
            f"MAX_UPLOAD_MB must be a positive finite number, got {limit!r}"
        )
    return int(megabytes * 1024 * 1024)


class Config:
    UPLOAD_FOLDER = os.path.abspath(os.environ.get("UPLOAD_FOLDER", "uploads"))
    UPLOAD_URL_PREFIX = os.environ.get("UPLOAD_URL_PREFIX", "uploads").strip("/")
    UPLOAD_FIELD = "image"
    MAX_CONTENT_LENGTH = get_max_content_length()

    # Object storage is used only when both are set
    USE_OBJECT_STORAGE = os.environ.get("USE_OBJECT_STORAGE")
    OBJECT_STORE_LOCATION = os.environ.get("OBJECT_STORE_LOCATION")

    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
    PORT = int(os.environ.get("PORT", 3001))
