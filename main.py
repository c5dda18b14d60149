import logging

from github_proxy import ProxyConfig, create_app
from github_proxy.app import configure_logging

# ----------------------
# Configuration
# ----------------------
config = ProxyConfig.from_env()

# Logging
configure_logging(config)
logger = logging.getLogger("github-proxy")

# ----------------------
# App Setup
# ----------------------
app = create_app(config)

if __name__ == "__main__":
    logger.info("GitHub API proxy server running on port %s!", config.port)
    app.run(host="0.0.0.0", port=config.port, debug=config.development)
