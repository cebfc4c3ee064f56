from __future__ import annotations

import pytest

from src.rollbook.rollbook.main import create_app


class FlaskSession:
    """``requests.Session`` look-alike that routes calls into a Flask test client."""

    def __init__(self, app, base_url: str = "http://testserver"):
        self._app = app
        self._base_url = base_url
        self.sent: list[tuple[str, str, dict]] = []

    def request(self, method, url, *, params=None, json=None, headers=None, timeout=None):
        path = url[len(self._base_url) :]
        self.sent.append((method, path, dict(headers or {})))
        # one client per call, the gateway issues requests from worker threads
        resp = self._app.test_client().open(path, method=method, query_string=params, json=json, headers=headers)
        return _Response(resp.status_code, resp.get_json(silent=True))


class _Response:
    def __init__(self, status_code: int, body):
        self.status_code = status_code
        self._body = body

    def json(self):
        if self._body is None:
            raise ValueError("no JSON body")
        return self._body


@pytest.fixture
def app(container):
    return create_app(container=container, settings_module="config.testing")


@pytest.fixture
def flask_session(app):
    return FlaskSession(app)
