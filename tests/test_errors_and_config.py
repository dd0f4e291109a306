"""
Tests for the error taxonomy, body decoding and settings
"""
import asyncio
from unittest.mock import AsyncMock, MagicMock

import pytest
from starlette.requests import ClientDisconnect

from posts_api.app.api.endpoints.posts import read_submitted_post, resolve_post_id
from posts_api.app.core.config import Settings
from posts_api.app.core.errors import (
    ClientInputError,
    InvalidPostIDError,
    MalformedBodyError,
    MethodNotAllowedError,
    PostNotFoundError,
    ServerIOError,
)


@pytest.mark.parametrize(
    "error, status_code, message",
    [
        (InvalidPostIDError, 400, "Invalid post ID"),
        (MalformedBodyError, 400, "Error parsing request body"),
        (PostNotFoundError, 404, "Post not found"),
        (MethodNotAllowedError, 405, "Method not allowed"),
        (ServerIOError, 500, "Error reading request body"),
    ],
)
def test_error_status_and_message(error, status_code, message):
    exc = error()
    assert exc.status_code == status_code
    assert exc.message == message
    assert str(exc) == message


def test_client_input_errors_share_base():
    assert issubclass(InvalidPostIDError, ClientInputError)
    assert issubclass(MalformedBodyError, ClientInputError)


def test_custom_message():
    assert str(PostNotFoundError("Post 3 not found")) == "Post 3 not found"


class TestResolvePostId:
    """Parsing of the id path segment"""

    @pytest.mark.parametrize("raw, expected", [("0", 0), ("17", 17), ("-4", -4), ("+8", 8), ("007", 7)])
    def test_valid(self, raw, expected):
        assert resolve_post_id(raw) == expected

    @pytest.mark.parametrize("raw", ["", "abc", "1.5", " 1", "1_000", "1/2", "0x10", "9223372036854775808"])
    def test_invalid(self, raw):
        with pytest.raises(InvalidPostIDError):
            resolve_post_id(raw)


def make_request(body=None, side_effect=None):
    request = MagicMock()
    request.body = AsyncMock(return_value=body, side_effect=side_effect)
    return request


class TestReadSubmittedPost:
    """Request body decoding"""

    def test_decodes_post(self):
        post = asyncio.run(read_submitted_post(make_request(b'{"id": 3, "body": "hi", "extra": true}')))
        assert post.id == 3
        assert post.body == "hi"

    def test_read_failure_is_server_error(self):
        request = make_request(side_effect=ClientDisconnect())
        with pytest.raises(ServerIOError):
            asyncio.run(read_submitted_post(request))

    def test_invalid_utf8_replaced(self):
        post = asyncio.run(read_submitted_post(make_request(b'{"body": "a\xffb"}')))
        assert post.body == "a\ufffdb"

    def test_invalid_utf8_outside_string_is_malformed(self):
        with pytest.raises(MalformedBodyError):
            asyncio.run(read_submitted_post(make_request(b"\xff")))

    def test_null_fields_keep_zero_values(self):
        post = asyncio.run(read_submitted_post(make_request(b'{"id": null, "body": null}')))
        assert post.id == 0
        assert post.body == ""

    def test_field_names_case_insensitive(self):
        post = asyncio.run(read_submitted_post(make_request(b'{"ID": 4, "Body": "abc"}')))
        assert post.id == 4
        assert post.body == "abc"

    def test_last_matching_key_wins(self):
        post = asyncio.run(read_submitted_post(make_request(b'{"body": "first", "BODY": "second"}')))
        assert post.body == "second"

    def test_null_after_value_keeps_value(self):
        post = asyncio.run(read_submitted_post(make_request(b'{"body": "kept", "Body": null}')))
        assert post.body == "kept"

    def test_string_id_is_malformed(self):
        with pytest.raises(MalformedBodyError):
            asyncio.run(read_submitted_post(make_request(b'{"id": "3"}')))


class TestSettings:
    """Environment-driven settings"""

    def test_defaults(self, monkeypatch):
        for name in ("PROJECT_NAME", "API_VERSION", "DEBUG", "LOG_LEVEL", "LOG_FILE", "HOST", "PORT"):
            monkeypatch.delenv(name, raising=False)
        settings = Settings()
        assert settings.project_name == "Posts API"
        assert settings.debug is False
        assert settings.log_level == "INFO"
        assert settings.log_file is None
        assert settings.host == "0.0.0.0"
        assert settings.port == 8080

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("PORT", "9090")
        monkeypatch.setenv("DEBUG", "yes")
        monkeypatch.setenv("LOG_FILE", "posts.log")
        settings = Settings()
        assert settings.port == 9090
        assert settings.debug is True
        assert settings.log_file == "posts.log"
