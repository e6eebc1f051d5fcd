from unittest.mock import patch

import pytest
import requests

from common.middleware import ExceptionHandlingMiddleware


@pytest.fixture
def middleware():
    return ExceptionHandlingMiddleware(lambda req: None)


def test_reports_to_webhook(rf, settings, middleware):
    settings.WEBHOOK_URL = "https://hooks.example.com/errors"
    req = rf.get("/grid-entries", HTTP_X_TEST="yes")

    with patch("common.middleware.requests.post") as post:
        assert middleware.process_exception(req, RuntimeError("boom")) is None

    post.assert_called_once()
    args, kwargs = post.call_args
    assert args[0] == "https://hooks.example.com/errors"
    embeds = kwargs["json"]["embeds"]
    assert embeds[0]["title"] == "GET /grid-entries"
    assert embeds[0]["description"] == "boom"
    assert {"name": "X-Test", "value": "yes"} in embeds[1]["fields"]


def test_headers_split_across_embeds(rf, settings, middleware):
    settings.WEBHOOK_URL = "https://hooks.example.com/errors"
    headers = {f"HTTP_X_H{i}": str(i) for i in range(30)}
    req = rf.get("/", **headers)

    with patch("common.middleware.requests.post") as post:
        middleware.process_exception(req, RuntimeError("boom"))

    embeds = post.call_args.kwargs["json"]["embeds"]
    assert len(embeds) == 3
    assert len(embeds[1]["fields"]) == 25


def test_webhook_failure_is_logged_not_raised(rf, settings, middleware, caplog):
    settings.WEBHOOK_URL = "https://hooks.example.com/errors"

    with patch("common.middleware.requests.post", side_effect=requests.ConnectionError("refused")):
        middleware.process_exception(rf.get("/"), RuntimeError("boom"))

    assert "Failed to report error to webhook" in caplog.text


def test_no_webhook_configured(rf, settings, middleware, caplog):
    settings.WEBHOOK_URL = None

    with patch("common.middleware.requests.post") as post:
        middleware.process_exception(rf.get("/"), RuntimeError("boom"))

    post.assert_not_called()
    assert "Unhandled error on GET /" in caplog.text
