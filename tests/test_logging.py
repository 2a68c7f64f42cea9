import json
import logging
from wishlist_api.common.constants import request_id_ctx
from wishlist_api.common.logging_setup import JSONFormatter, sanitize_message_text


def make_record(msg, **extra):
    record = logging.LogRecord("wishlist_api.user", logging.INFO, __file__, 10, msg, None, None)
    for k, v in extra.items():
        setattr(record, k, v)
    return record


def test_sanitize_message_text():

    out = sanitize_message_text('login failed password=hunter2 for {"token": "abc.def"}')
    assert "hunter2" not in out
    assert "abc.def" not in out
    assert "[REDACTED]" in out


def test_json_formatter_redacts_sensitive_extras():

    record = make_record("user.created", user_id=7, password="plain", api_key="k-1")
    data = json.loads(JSONFormatter().format(record))

    assert data["message"] == "user.created"
    assert data["logger"] == "wishlist_api.user"
    assert data["user_id"] == 7
    assert data["password"] == "[REDACTED]"
    assert data["api_key"] == "[REDACTED]"


def test_json_formatter_includes_request_id():

    token = request_id_ctx.set("req-42")
    try:
        data = json.loads(JSONFormatter().format(make_record("wishlist.item.added")))
    finally:
        request_id_ctx.reset(token)

    assert data["request_id"] == "req-42"
