import logging
import secrets
from datetime import datetime, timezone

import requests
from flask import Blueprint, jsonify, render_template, request

from .service_client import ServiceClient

logger = logging.getLogger(__name__)

frontend_bp = Blueprint("frontend", __name__, template_folder="templates")


@frontend_bp.route("/")
def index():
    return render_template("index.html")


@frontend_bp.route("/images", methods=["POST"])
def upload_images():
    images = [
        f for f in request.files.getlist("images")
        if f.filename and (f.mimetype or "").startswith("image/")
    ]
    if not images:
        return jsonify({"error": "Please select valid image files"}), 400

    uploaded = []
    for image in images:
        files = {"image": (image.filename, image.stream, image.content_type)}
        try:
            result = ServiceClient.post("upload", "/upload", files=files)
        except requests.RequestException:
            logger.exception("Forwarding %r to the upload service failed", image.filename)
            return jsonify({
                "error": "Upload service unavailable",
                "images": uploaded,
            }), 502

        uploaded.append({
            "id": secrets.token_hex(6),
            "name": image.filename,
            "url": result["imageUrl"],
            "uploadTime": datetime.now(timezone.utc).isoformat(),
        })

    count = len(uploaded)
    plural = "s" if count > 1 else ""
    return jsonify({
        "images": uploaded,
        "message": f"Successfully uploaded {count} image{plural}",
    })
