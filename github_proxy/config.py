import os
from dataclasses import dataclass

from dotenv import find_dotenv, load_dotenv

DEFAULT_API_URL = "https://api.github.com"
DEFAULT_USER_AGENT = "GitHub-Profile-Viewer"


@dataclass(frozen=True)
class ProxyConfig:
    port: int = 3000
    github_token: str = ""
    api_url: str = DEFAULT_API_URL
    graphql_url: str = f"{DEFAULT_API_URL}/graphql"
    user_agent: str = DEFAULT_USER_AGENT
    timeout: float = 15.0
    cors_origins: tuple = ("*",)
    environment: str = "production"
    log_level: str = "INFO"

    @property
    def development(self) -> bool:
        return self.environment.lower() == "development"

    @classmethod
    def from_env(cls, load_dotenv_file: bool = True) -> "ProxyConfig":
        """Build the config from the process environment (and .env, if present)."""
        if load_dotenv_file:
            load_dotenv(find_dotenv(usecwd=True))

        api_url = os.getenv("GITHUB_API_URL", DEFAULT_API_URL).rstrip("/")
        origins = os.getenv("CORS_ORIGINS", "*")

        return cls(
            port=int(os.getenv("PORT", "3000")),
            github_token=os.getenv("GITHUB_TOKEN", ""),
            api_url=api_url,
            graphql_url=os.getenv("GITHUB_GRAPHQL_URL", f"{api_url}/graphql"),
            user_agent=os.getenv("GITHUB_USER_AGENT", DEFAULT_USER_AGENT),
            timeout=float(os.getenv("GITHUB_TIMEOUT", "15")),
            cors_origins=tuple(o.strip() for o in origins.split(",") if o.strip()) or ("*",),
            environment=os.getenv("APP_ENV", "production"),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )
