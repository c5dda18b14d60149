import logging
from typing import Optional

from flask import Flask, jsonify
from flask_cors import CORS
from werkzeug.exceptions import HTTPException

from .client import GitHubClient
from .config import ProxyConfig
from .routes import bp

logger = logging.getLogger("github-proxy")


def configure_logging(config: ProxyConfig) -> None:
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def create_app(config: Optional[ProxyConfig] = None, client: Optional[GitHubClient] = None) -> Flask:
    """
    Build the proxy application.

    ``config`` defaults to ``ProxyConfig.from_env()``; ``client`` defaults to a
    GitHubClient with one requests session per thread for that config.
    """
    config = config or ProxyConfig.from_env()

    app = Flask(__name__)
    app.config["PROXY_CONFIG"] = config
    app.extensions["github_client"] = client or GitHubClient(config)

    # Literal "*" when any origin is allowed, the echoed origin otherwise
    CORS(app, origins=list(config.cors_origins), send_wildcard="*" in config.cors_origins)
    app.register_blueprint(bp)

    if not config.github_token:
        logger.warning("GITHUB_TOKEN is not set; GitHub requests will be unauthenticated")

    @app.errorhandler(Exception)
    def handle_unexpected_error(e):
        if isinstance(e, HTTPException):
            return e
        logger.exception("Unhandled error: %s", e)
        return jsonify({
            "error": "Server error",
            "message": str(e) if config.development else "Something went wrong",
        }), 500

    return app
