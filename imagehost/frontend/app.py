import logging

from flask import Flask, jsonify

from .config import Config
from .routes import frontend_bp


def create_app(test_config=None):
    app = Flask(__name__)
    app.config.from_object(Config)
    if test_config:
        app.config.update(test_config)

    logging.basicConfig(
        level=app.config["LOG_LEVEL"],
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app.register_blueprint(frontend_bp)

    @app.route("/health")
    def health():
        return jsonify({"status": "healthy"})

    return app
