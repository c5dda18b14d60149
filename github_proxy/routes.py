import logging
import re
from dataclasses import dataclass
from typing import Any, Callable, Optional, Tuple

import requests
from flask import Blueprint, current_app, jsonify, request

from .client import GitHubClient, GraphQLError, UpstreamError
from .queries import (
    CONTRIBUTIONS_QUERY,
    DETAILED_ACTIVITY_QUERY,
    PINNED_QUERY,
    TOP_LANGUAGES_QUERY,
)
from .shaping import aggregate_languages, dig, flatten_contributions

logger = logging.getLogger(__name__)

LIVENESS_MESSAGE = "GitHub Proxy Server is Running! 🚀"

bp = Blueprint("github", __name__)


# ----------------------
# Route table
# ----------------------
@dataclass(frozen=True)
class UserRoute:
    """A username-scoped GraphQL endpoint: /api/github/users/<username>/<segment>."""

    segment: str
    label: str
    query: str
    data_path: Tuple[str, ...]
    not_found: str
    shape: Optional[Callable[[Any], Any]] = None

    @property
    def failure(self) -> str:
        return f"Failed to fetch {self.label}"


# Checked in this order before the generic pass-through; the first match wins.
USER_ROUTES = (
    UserRoute(
        segment="detailed-activity",
        label="detailed activity",
        query=DETAILED_ACTIVITY_QUERY,
        data_path=("data", "user", "contributionsCollection"),
        not_found="Detailed activity data not found",
    ),
    UserRoute(
        segment="top-languages",
        label="top languages",
        query=TOP_LANGUAGES_QUERY,
        data_path=("data", "user", "repositories", "nodes"),
        not_found="Repository language data not found",
        shape=aggregate_languages,
    ),
    UserRoute(
        segment="pinned",
        label="pinned repositories",
        query=PINNED_QUERY,
        data_path=("data", "user", "pinnedItems", "nodes"),
        not_found="Pinned repositories not found",
    ),
    UserRoute(
        segment="contributions",
        label="contribution data",
        query=CONTRIBUTIONS_QUERY,
        data_path=("data", "user", "contributionsCollection", "contributionCalendar"),
        not_found="Contribution data not found",
        shape=flatten_contributions,
    ),
)

RESERVED_SEGMENTS = tuple(route.segment for route in USER_ROUTES)

_USER_PATH = re.compile(r"^users/(?P<username>[^/]+)/(?P<segment>[^/]+)/?$")


def match_user_route(github_path: str) -> Tuple[Optional[UserRoute], Optional[str]]:
    """Return (route, username) when the path is exactly a username-scoped route."""
    match = _USER_PATH.match(github_path)
    if match:
        for route in USER_ROUTES:
            if route.segment == match.group("segment"):
                return route, match.group("username")
    return None, None


def reserved_segment(github_path: str) -> Optional[str]:
    for segment in RESERVED_SEGMENTS:
        if f"/{segment}" in f"/{github_path}":
            return segment
    return None


# ----------------------
# Helpers
# ----------------------
def get_client() -> GitHubClient:
    return current_app.extensions["github_client"]


def invalid_endpoint(segment: str):
    return jsonify({
        "error": "Invalid endpoint",
        "message": (
            "This endpoint requires a username. "
            f"Use /api/github/users/:username/{segment} instead."
        ),
    }), 400


def fetch_user_data(route: UserRoute, username: str):
    logger.info("Fetching %s for user: %s", route.label, username)

    try:
        payload = get_client().graphql(route.query, {"login": username})
    except UpstreamError as e:
        return jsonify({"error": str(e), "details": e.details}), e.status
    except GraphQLError as e:
        return jsonify({"error": route.failure, "message": str(e)}), 500
    except (requests.RequestException, ValueError) as e:
        logger.exception("Error fetching %s: %s", route.label, e)
        return jsonify({"error": route.failure, "message": str(e)}), 500

    data = dig(payload, *route.data_path)
    if data is None:
        return jsonify({"error": route.not_found, "rawResponse": payload}), 404

    if route.shape is None:
        return jsonify(data)

    try:
        return jsonify(route.shape(data))
    except (AttributeError, KeyError, TypeError) as e:
        logger.exception("Malformed %s payload: %s", route.label, e)
        return jsonify({"error": route.failure, "message": str(e)}), 500


def pass_through(github_path: str):
    try:
        data = get_client().rest_get(github_path, params=request.args.to_dict(flat=False))
    except UpstreamError as e:
        return jsonify({"error": str(e), "details": e.details}), e.status
    except (requests.RequestException, ValueError) as e:
        logger.exception("Error proxying GitHub request: %s", e)
        return jsonify({"error": "Failed to fetch data from GitHub", "message": str(e)}), 500
    return jsonify(data)


# ----------------------
# Endpoints
# ----------------------
@bp.get("/")
def health_check():
    return LIVENESS_MESSAGE


@bp.get("/api/github/", defaults={"github_path": ""})
@bp.get("/api/github/<path:github_path>")
def github_api(github_path):
    route, username = match_user_route(github_path)
    if route is not None:
        return fetch_user_data(route, username)

    segment = reserved_segment(github_path)
    if segment is not None:
        return invalid_endpoint(segment)

    return pass_through(github_path)


@bp.get("/detailed-activity")
def detailed_activity_without_user():
    return invalid_endpoint("detailed-activity")
