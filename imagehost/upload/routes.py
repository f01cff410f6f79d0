import logging

from flask import Blueprint, current_app, jsonify, request, send_from_directory

from .exceptions import NoFileSupplied
from .storage import get_storage

logger = logging.getLogger(__name__)

upload_bp = Blueprint("upload", __name__)
files_bp = Blueprint("files", __name__)


@upload_bp.route("/upload", methods=["POST"])
def upload_image():
    field = current_app.config["UPLOAD_FIELD"]
    image = request.files.get(field)
    # Browsers send an empty part when the file picker was left blank
    if image is None or not image.filename:
        logger.warning("Upload from %s carried no %r file", request.remote_addr, field)
        raise NoFileSupplied()

    storage = get_storage()
    filename = storage.save(image)
    image_url = storage.get_url(filename)
    logger.info("Stored %r as %s", image.filename, filename)
    return jsonify({"imageUrl": image_url})


@files_bp.route("/<path:filename>", methods=["GET"])
def uploaded_file(filename):
    return send_from_directory(current_app.config["UPLOAD_FOLDER"], filename)
