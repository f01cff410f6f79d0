import requests
from flask import current_app


class ServiceClient:
    """HTTP-only client for inter-service communication."""

    @staticmethod
    def post(service, path, **kwargs):
        url = _get_service_url(service)
        kwargs.setdefault("timeout", current_app.config["SERVICE_TIMEOUT"])
        resp = requests.post(f"{url}{path}", **kwargs)
        resp.raise_for_status()
        return resp.json()


def _get_service_url(service):
    if service == "upload":
        return current_app.config["UPLOAD_SERVICE_URL"].rstrip("/")
    raise ValueError(f"Unknown service: {service}")
