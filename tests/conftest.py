import json

import pytest

from challenge.config import Identity, Settings


class FakeClient:
    """Stands in for HttpClient: records every POST and replays queued responses."""

    def __init__(self, responses):
        self.responses = list(responses)
        self.calls = []
        self.base = "https://api.test/hiring"

    def url_for(self, path):
        return f"{self.base}/{path.lstrip('/')}"

    def post_json(self, url, payload, token=None, accept=None):
        self.calls.append({"url": url, "payload": payload, "token": token, "accept": accept})
        return self.responses.pop(0)


def json_response(data, status=200):
    return status, "application/json", json.dumps(data)


@pytest.fixture
def make_settings():
    def _make(reg_no="AB23"):
        return Settings(
            base_url="https://api.test/hiring",
            identity=Identity(name="John Doe", reg_no=reg_no, email="john@example.com"),
            timeout_sec=30,
        )
    return _make
