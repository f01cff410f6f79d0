import os


class Config:
    UPLOAD_SERVICE_URL = os.environ.get(
        "UPLOAD_SERVICE_URL", "http://localhost:3001"
    )
    SERVICE_TIMEOUT = float(os.environ.get("SERVICE_TIMEOUT", 10))
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
    PORT = int(os.environ.get("PORT", 3000))
