import logging
import threading
from typing import Any, Dict, Optional

import requests

from .config import ProxyConfig

logger = logging.getLogger(__name__)


class UpstreamError(Exception):
    """GitHub answered with a non-success status."""

    def __init__(self, status: int, details: Any):
        super().__init__(f"GitHub API error: {status}")
        self.status = status
        self.details = details


class GraphQLError(Exception):
    """GitHub answered a GraphQL query with a non-empty errors list."""

    def __init__(self, message: str, errors: list):
        super().__init__(message)
        self.errors = errors


def _error_details(resp: requests.Response) -> Any:
    # Unparseable error bodies are reported as an empty object
    try:
        return resp.json()
    except ValueError:
        return {}


class GitHubClient:
    def __init__(self, config: ProxyConfig, session: Optional[requests.Session] = None):
        self.config = config
        self._session = session
        self._local = threading.local()

    @property
    def session(self) -> requests.Session:
        """The injected session, or one session per server thread."""
        if self._session is not None:
            return self._session
        session = getattr(self._local, "session", None)
        if session is None:
            session = self._local.session = requests.Session()
        return session

    def _headers(self, scheme: str) -> Dict[str, str]:
        headers = {"User-Agent": self.config.user_agent}
        if self.config.github_token:
            headers["Authorization"] = f"{scheme} {self.config.github_token}"
        return headers

    def _check(self, resp: requests.Response) -> None:
        if not resp.ok:
            logger.error("GitHub API error: %s - %s", resp.status_code, resp.reason)
            raise UpstreamError(resp.status_code, _error_details(resp))

    def rest_get(self, path: str, params=None) -> Any:
        """GET <api_url>/<path> and return the decoded JSON body."""
        url = f"{self.config.api_url}/{path.lstrip('/')}"
        logger.info("Proxying request to: %s", url)
        resp = self.session.get(
            url,
            headers=self._headers("token"),
            params=params or None,
            timeout=self.config.timeout,
        )
        self._check(resp)
        return resp.json()

    def graphql(self, query: str, variables: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """
        POST a query to the GraphQL endpoint and return the whole payload.

        Raises GraphQLError carrying the first message when the payload has
        a non-empty ``errors`` list.
        """
        body: Dict[str, Any] = {"query": query}
        if variables:
            body["variables"] = variables

        headers = self._headers("bearer")
        headers["Content-Type"] = "application/json"

        resp = self.session.post(
            self.config.graphql_url,
            headers=headers,
            json=body,
            timeout=self.config.timeout,
        )
        self._check(resp)

        payload = resp.json()
        errors = payload.get("errors") if isinstance(payload, dict) else None
        if errors:
            logger.error("GraphQL error: %s", errors)
            first = errors[0]
            message = first.get("message") if isinstance(first, dict) else str(first)
            raise GraphQLError(message or "Unknown GraphQL error", errors)
        return payload
