import pytest
import requests


def make_workout_record(**overrides):
    base = {
        "id": 1,
        "title": "растяжка спины",
        "duration": 30,
        "calories": 120,
        "exercises": [
            {"name": "кошка", "duration": 10, "video_url": "https://videos.example/cat.mp4"},
        ],
    }
    base.update(overrides)
    return base


class FakeResponse:
    def __init__(self, status_code=200, payload=None, reason="OK", url="", invalid_json=False):
        self.status_code = status_code
        self._payload = payload
        self.reason = reason
        self.url = url
        self._invalid_json = invalid_json

    @property
    def ok(self):
        return self.status_code < 400

    def json(self):
        if self._invalid_json:
            raise ValueError("Expecting value: line 1 column 1 (char 0)")
        return self._payload

    def raise_for_status(self):
        if not self.ok:
            raise requests.HTTPError(f"{self.status_code} Error: {self.reason} for url: {self.url}", response=self)


class FakeSession:
    """Answers GET requests from a url -> response (or exception) table."""

    def __init__(self, routes=None):
        self.routes = routes or {}
        self.calls = []

    def get(self, url, timeout=None):
        self.calls.append((url, timeout))
        result = self.routes.get(url)
        if result is None:
            raise requests.ConnectionError(f"No route to {url}")
        if isinstance(result, Exception):
            raise result
        result.url = result.url or url
        return result


@pytest.fixture
def fake_session():
    return FakeSession()
