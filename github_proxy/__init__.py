from .app import create_app
from .config import ProxyConfig

__version__ = "1.0.0"

__all__ = ["create_app", "ProxyConfig", "__version__"]
