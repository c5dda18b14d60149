import pytest

from github_proxy import ProxyConfig, create_app
from github_proxy.client import GitHubClient

_NO_JSON = object()


class FakeResponse:
    def __init__(self, status_code=200, body=None, reason="OK"):
        self.status_code = status_code
        self.reason = reason
        self._body = body

    @property
    def ok(self):
        return self.status_code < 400

    def json(self):
        if self._body is _NO_JSON:
            raise ValueError("Expecting value: line 1 column 1 (char 0)")
        return self._body


class FakeSession:
    """Records outbound calls and answers them with queued responses."""

    def __init__(self):
        self.calls = []
        self.responses = []

    def queue(self, response=None, error=None):
        self.responses.append((response, error))

    def _answer(self):
        response, error = self.responses.pop(0)
        if error is not None:
            raise error
        return response

    def get(self, url, **kwargs):
        self.calls.append(("GET", url, kwargs))
        return self._answer()

    def post(self, url, **kwargs):
        self.calls.append(("POST", url, kwargs))
        return self._answer()


@pytest.fixture
def no_json():
    return _NO_JSON


@pytest.fixture
def config():
    return ProxyConfig(github_token="secret-token", environment="production")


@pytest.fixture
def session():
    return FakeSession()


@pytest.fixture
def github_client(config, session):
    return GitHubClient(config, session=session)


@pytest.fixture
def app(config, github_client):
    app = create_app(config, client=github_client)
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def fake_response():
    return FakeResponse
