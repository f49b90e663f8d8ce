import requests

from webhook import notify_webhook


class FakeResponse:
    def __init__(self, status_code):
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")


def test_posts_json(monkeypatch):
    calls = []

    def fake_post(url, json=None, timeout=None):
        calls.append((url, json, timeout))
        return FakeResponse(200)

    monkeypatch.setattr("webhook.requests.post", fake_post)
    assert notify_webhook("https://hooks.example/x", {"applicantEmail": "jane@x.edu"}, timeout=3)
    assert calls == [("https://hooks.example/x", {"applicantEmail": "jane@x.edu"}, 3)]


def test_http_error_is_logged_not_raised(monkeypatch, caplog):
    monkeypatch.setattr("webhook.requests.post", lambda *a, **kw: FakeResponse(500))
    assert notify_webhook("https://hooks.example/x", {"applicantEmail": "jane@x.edu"}) is False
    assert "Webhook call failed" in caplog.text


def test_connection_error_is_swallowed(monkeypatch):
    def boom(*args, **kwargs):
        raise requests.ConnectionError("refused")

    monkeypatch.setattr("webhook.requests.post", boom)
    assert notify_webhook("https://hooks.example/x", {}) is False
