"""Tests for the blocking Translate client."""

from __future__ import annotations

import json
from typing import Any

import httpx
import pytest

from yandex_translate.auth import ApiKey, IAMToken
from yandex_translate.client.sync_client import YandexTranslateClient
from yandex_translate.config import API_BASE_URL
from yandex_translate.exceptions import (
    ApiError,
    ConfigError,
    JsonError,
    RequestFailedError,
)
from yandex_translate.models import ClientConfig, TranslateRequest
from yandex_translate.output import OutputManager, set_output


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


class _Recorder:
    """MockTransport handler that records requests and replies with a canned response."""

    def __init__(
        self,
        json_data: Any = None,
        status_code: int = 200,
        content: bytes | None = None,
    ) -> None:
        self.requests: list[httpx.Request] = []
        self._json = json_data
        self._status = status_code
        self._content = content

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self._content is not None:
            return httpx.Response(self._status, content=self._content)
        return httpx.Response(self._status, json=self._json)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


class _BrokenStream(httpx.SyncByteStream):
    """Body stream that drops the connection after the first chunk."""

    def __iter__(self):
        yield b"partial"
        raise httpx.ReadError("connection reset while reading body")


def _make_client(handler, auth=None, **kwargs: Any) -> YandexTranslateClient:
    return YandexTranslateClient(
        auth or ApiKey("k"),
        transport=httpx.MockTransport(handler),
        **kwargs,
    )


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------


class TestConstruction:
    def test_defaults(self) -> None:
        with YandexTranslateClient(ApiKey("k")) as client:
            assert client.base_url == API_BASE_URL
            assert client.auth == ApiKey("k")
            assert client.config == ClientConfig()

    def test_with_api_key(self) -> None:
        with YandexTranslateClient.with_api_key("key") as client:
            assert isinstance(client.auth, ApiKey)
            assert client.auth.value == "key"

    def test_with_iam_token(self) -> None:
        with YandexTranslateClient.with_iam_token("token") as client:
            assert isinstance(client.auth, IAMToken)

    def test_with_api_key_forwards_config(self) -> None:
        with YandexTranslateClient.with_api_key("key", {"timeout": 3}) as client:
            assert client.config.timeout == 3

    def test_with_base_url_chains(self) -> None:
        client = YandexTranslateClient.with_api_key("key").with_base_url("https://mock.test")
        with client:
            assert client.base_url == "https://mock.test"

    def test_empty_api_key_raises_config_error(self) -> None:
        with pytest.raises(ConfigError):
            YandexTranslateClient.with_api_key("")

    def test_non_auth_method_raises_config_error(self) -> None:
        with pytest.raises(ConfigError, match="auth must be"):
            YandexTranslateClient("raw-key")  # type: ignore[arg-type]

    def test_invalid_config_raises_config_error(self) -> None:
        with pytest.raises(ConfigError):
            YandexTranslateClient(ApiKey("k"), {"timeout": 0})

    def test_close_closes_transport(self) -> None:
        client = YandexTranslateClient(ApiKey("k"))
        client.close()
        assert client._client.is_closed

    def test_context_manager_closes(self) -> None:
        with YandexTranslateClient(ApiKey("k")) as client:
            pass
        assert client._client.is_closed


# ---------------------------------------------------------------------------
# translate -- request side
# ---------------------------------------------------------------------------


class TestTranslateRequestSide:
    def test_posts_to_default_endpoint(self, hello_request, hello_response_body) -> None:
        recorder = _Recorder(hello_response_body)
        with _make_client(recorder) as client:
            client.translate(hello_request)
        assert recorder.last.method == "POST"
        assert str(recorder.last.url) == f"{API_BASE_URL}/translate"

    def test_with_base_url_redirects_requests(self, hello_request, hello_response_body) -> None:
        recorder = _Recorder(hello_response_body)
        with _make_client(recorder).with_base_url("https://mock.test") as client:
            client.translate(hello_request)
        assert str(recorder.last.url) == "https://mock.test/translate"

    def test_api_key_header(self, hello_request, hello_response_body) -> None:
        recorder = _Recorder(hello_response_body)
        with _make_client(recorder, ApiKey("k")) as client:
            client.translate(hello_request)
        assert recorder.last.headers.get_list("Authorization") == ["Api-Key k"]

    def test_iam_token_header(self, hello_request, hello_response_body) -> None:
        recorder = _Recorder(hello_response_body)
        with _make_client(recorder, IAMToken("t")) as client:
            client.translate(hello_request)
        assert recorder.last.headers["Authorization"] == "Bearer t"

    def test_json_body(self, hello_request, hello_response_body) -> None:
        recorder = _Recorder(hello_response_body)
        with _make_client(recorder) as client:
            client.translate(hello_request)
        assert recorder.last.headers["Content-Type"] == "application/json"
        body = json.loads(recorder.last.content)
        assert body == {"folderId": "f1", "texts": ["Hello"], "targetLanguageCode": "ru"}
        assert "sourceLanguageCode" not in body

    def test_configured_headers_sent(self, hello_request, hello_response_body) -> None:
        recorder = _Recorder(hello_response_body)
        config = ClientConfig(headers={"x-data-logging-enabled": "false"})
        with _make_client(recorder, config=config) as client:
            client.translate(hello_request)
        assert recorder.last.headers["x-data-logging-enabled"] == "false"

    def test_mapping_request_accepted(self, hello_response_body) -> None:
        recorder = _Recorder(hello_response_body)
        with _make_client(recorder) as client:
            client.translate(
                {"folder_id": "f1", "texts": ["Hello"], "target_language_code": "ru"}
            )
        assert json.loads(recorder.last.content)["folderId"] == "f1"

    def test_one_request_per_call(self, hello_request, hello_response_body) -> None:
        recorder = _Recorder(hello_response_body)
        with _make_client(recorder) as client:
            client.translate(hello_request)
            client.translate(hello_request)
        assert len(recorder.requests) == 2

    def test_empty_texts_still_sent(self) -> None:
        recorder = _Recorder({"translations": []})
        with _make_client(recorder) as client:
            resp = client.translate(
                TranslateRequest(folder_id="f1", texts=[], target_language_code="ru")
            )
        assert len(recorder.requests) == 1
        assert len(resp) == 0


# ---------------------------------------------------------------------------
# translate -- response side
# ---------------------------------------------------------------------------


class TestTranslateResponseSide:
    def test_end_to_end(self, hello_request, hello_response_body) -> None:
        with _make_client(_Recorder(hello_response_body)) as client:
            resp = client.translate(hello_request)
        assert len(resp.translations) == 1
        assert resp.translations[0].text == "Привет"
        assert resp.translations[0].detected_language_code == "en"

    def test_order_preserved(self) -> None:
        body = {"translations": [{"text": "один"}, {"text": "два"}, {"text": "три"}]}
        request = TranslateRequest(
            folder_id="f1",
            texts=["one", "two", "three"],
            target_language_code="ru",
            source_language_code="en",
        )
        with _make_client(_Recorder(body)) as client:
            resp = client.translate(request)
        assert resp.texts() == ["один", "два", "три"]
        assert all(t.detected_language_code is None for t in resp.translations)

    def test_api_error(self, hello_request) -> None:
        with _make_client(_Recorder(status_code=400, content=b"bad folder")) as client:
            with pytest.raises(ApiError) as exc_info:
                client.translate(hello_request)
        assert exc_info.value.status_code == 400
        assert "400" in str(exc_info.value)
        assert "bad folder" in str(exc_info.value)

    def test_auth_failure_is_api_error(self, hello_request) -> None:
        body = b'{"code": 16, "message": "Unknown api key"}'
        with _make_client(_Recorder(status_code=401, content=body)) as client:
            with pytest.raises(ApiError) as exc_info:
                client.translate(hello_request)
        assert exc_info.value.body == body.decode()

    def test_malformed_json(self, hello_request) -> None:
        with _make_client(_Recorder(content=b"<html>oops</html>")) as client:
            with pytest.raises(JsonError):
                client.translate(hello_request)

    def test_transport_error(self, hello_request) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        with _make_client(handler) as client:
            with pytest.raises(RequestFailedError) as exc_info:
                client.translate(hello_request)
        assert isinstance(exc_info.value.cause, httpx.ConnectError)
        assert isinstance(exc_info.value.__cause__, httpx.ConnectError)

    def test_timeout_is_request_failed(self, hello_request) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("timed out", request=request)

        with _make_client(handler) as client:
            with pytest.raises(RequestFailedError, match="timed out"):
                client.translate(hello_request)

    def test_unsupported_scheme_is_request_failed(self, hello_request) -> None:
        with YandexTranslateClient(ApiKey("k")).with_base_url("ftp://mock.test") as client:
            with pytest.raises(RequestFailedError):
                client.translate(hello_request)

    def test_malformed_base_url_is_request_failed(self, hello_request) -> None:
        with _make_client(_Recorder({})).with_base_url("https://host:notaport") as client:
            with pytest.raises(RequestFailedError):
                client.translate(hello_request)

    def test_unreadable_error_body_uses_placeholder(self, hello_request) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(503, stream=_BrokenStream())

        with _make_client(handler) as client:
            with pytest.raises(ApiError) as exc_info:
                client.translate(hello_request)
        assert exc_info.value.status_code == 503
        assert exc_info.value.body == "Unknown error"

    def test_unreadable_success_body_is_request_failed(self, hello_request) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, stream=_BrokenStream())

        with _make_client(handler) as client:
            with pytest.raises(RequestFailedError) as exc_info:
                client.translate(hello_request)
        assert isinstance(exc_info.value.cause, httpx.ReadError)

    def test_invalid_mapping_is_json_error(self) -> None:
        recorder = _Recorder({})
        with _make_client(recorder) as client:
            with pytest.raises(JsonError):
                client.translate({"texts": ["Hello"]})
        assert recorder.requests == []


# ---------------------------------------------------------------------------
# Diagnostics
# ---------------------------------------------------------------------------


class TestDebugTrace:
    def test_verbose_trace_omits_credential(
        self, capfd, hello_request, hello_response_body
    ) -> None:
        set_output(OutputManager(no_color=True, verbose=True))
        with _make_client(_Recorder(hello_response_body), ApiKey("super-secret")) as client:
            client.translate(hello_request)
        err = capfd.readouterr().err
        assert "POST https://translate.api.cloud.yandex.net/translate/v2/translate" in err
        assert "HTTP 200" in err
        assert "super-secret" not in err

    def test_silent_by_default(self, capfd, hello_request, hello_response_body) -> None:
        with _make_client(_Recorder(hello_response_body)) as client:
            client.translate(hello_request)
        assert capfd.readouterr().err == ""
