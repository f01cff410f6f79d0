import logging
import os

from flask import Flask, jsonify
from flask_cors import CORS

from .config import Config
from .exceptions import UploadError
from .routes import files_bp, upload_bp
from .storage import create_storage


def create_app(test_config=None):
    app = Flask(__name__)
    app.config.from_object(Config)
    if test_config:
        app.config.update(test_config)
    # send_from_directory resolves relative paths against the package, not cwd
    app.config["UPLOAD_FOLDER"] = os.path.abspath(app.config["UPLOAD_FOLDER"])

    logging.basicConfig(
        level=app.config["LOG_LEVEL"],
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    CORS(app)
    app.extensions["storage"] = create_storage(app.config)

    app.register_blueprint(upload_bp)
    app.register_blueprint(
        files_bp, url_prefix=f"/{app.config['UPLOAD_URL_PREFIX']}"
    )

    @app.errorhandler(UploadError)
    def handle_upload_error(error):
        return jsonify(error.to_dict()), error.status_code

    @app.route("/")
    def index():
        return "Image Upload API is running!"

    @app.route("/health")
    def health():
        return jsonify({"status": "healthy"})

    return app
