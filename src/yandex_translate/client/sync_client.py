"""Blocking Translate client.

This module provides :class:`YandexTranslateClient`, which wraps
:class:`httpx.Client`.  ``translate`` occupies the calling thread for the
whole round-trip.  The underlying httpx client is safe to share between
threads, and this class adds no locking of its own.

See Also:
    :class:`~yandex_translate.client.async_client.AsyncYandexTranslateClient`
    for the asyncio equivalent.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Optional, Union

import httpx

from yandex_translate.auth import ApiKey, AuthMethod, IAMToken
from yandex_translate.client import _core
from yandex_translate.config import API_BASE_URL, build_client_kwargs, resolve_config
from yandex_translate.exceptions import ConfigError, RequestFailedError
from yandex_translate.models import ClientConfig, TranslateResponse
from yandex_translate.output import get_output


class YandexTranslateClient:
    """Blocking client for the Translate v2 API.

    The httpx client is created in the constructor, so the instance is
    usable straight away.  Use it as a context manager (or call
    :meth:`close`) to release pooled connections.

    Args:
        auth: :class:`~yandex_translate.auth.ApiKey` or
            :class:`~yandex_translate.auth.IAMToken`.
        config: Transport settings; a :class:`~yandex_translate.models.ClientConfig`,
            a mapping of its fields, or ``None`` for defaults.
        base_url: API root; ``/translate`` is appended to it.
        transport: Optional custom httpx transport (e.g. :class:`httpx.MockTransport`).

    Raises:
        ConfigError: If *auth* is not an ``AuthMethod`` or *config* is invalid.
        RequestFailedError: If the httpx client cannot be created.

    Example::

        with YandexTranslateClient.with_api_key("AQVN...") as client:
            response = client.translate(
                TranslateRequest(folder_id="b1g...", texts=["Hello"], target_language_code="ru")
            )
            print(response.translations[0].text)
    """

    def __init__(
        self,
        auth: AuthMethod,
        config: Union[ClientConfig, Mapping[str, Any], None] = None,
        *,
        base_url: str = API_BASE_URL,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        if not isinstance(auth, AuthMethod):
            raise ConfigError(f"auth must be ApiKey or IAMToken, got {type(auth).__name__}")
        self._auth = auth
        self._config = resolve_config(config)
        self._base_url = base_url
        try:
            self._client = httpx.Client(**build_client_kwargs(self._config, transport))
        except (OSError, ValueError) as exc:
            raise RequestFailedError(f"Failed to create HTTP client: {exc}", cause=exc) from exc

    @classmethod
    def with_api_key(cls, api_key: str, *args: Any, **kwargs: Any) -> YandexTranslateClient:
        """Create a client authenticated with a Yandex Cloud API key.

        Extra arguments are forwarded to the constructor.
        """
        return cls(ApiKey(api_key), *args, **kwargs)

    @classmethod
    def with_iam_token(cls, iam_token: str, *args: Any, **kwargs: Any) -> YandexTranslateClient:
        """Create a client authenticated with an IAM token.

        Extra arguments are forwarded to the constructor.
        """
        return cls(IAMToken(iam_token), *args, **kwargs)

    def with_base_url(self, base_url: str) -> YandexTranslateClient:
        """Point the client at *base_url* and return it, for chaining.

        Useful for proxies and local mocks.  The URL is not validated here;
        a malformed one surfaces as :class:`RequestFailedError` on the next
        :meth:`translate`.
        """
        self._base_url = base_url
        return self

    @property
    def auth(self) -> AuthMethod:
        return self._auth

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def config(self) -> ClientConfig:
        return self._config

    # ------------------------------------------------------------------ #
    # Context manager
    # ------------------------------------------------------------------ #

    def __enter__(self) -> YandexTranslateClient:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying httpx client and its connection pool."""
        self._client.close()

    # ------------------------------------------------------------------ #
    # API
    # ------------------------------------------------------------------ #

    def translate(self, request: _core.RequestLike) -> TranslateResponse:
        """Translate ``request.texts`` with a single ``POST /translate``.

        Args:
            request: A :class:`~yandex_translate.models.TranslateRequest`, or
                a mapping with the same fields.

        Returns:
            One translation per input text, in input order.

        Raises:
            RequestFailedError: The HTTP exchange failed (connection, TLS,
                timeout, malformed URL).
            ApiError: The service returned a non-2xx status; the body text
                is kept on the exception.
            JsonError: The payload could not be encoded or the response
                body could not be decoded.
        """
        translate_request = _core.coerce_request(request)
        http_request = _core.build_request(
            self._client, self._auth, self._base_url, translate_request,
        )

        output = get_output()
        output.debug(f"POST {http_request.url} ({len(translate_request.texts)} texts)")

        try:
            response = self._client.send(http_request, stream=True)
        except httpx.HTTPError as exc:
            raise _core.request_failed(exc) from exc

        try:
            output.debug(f"HTTP {response.status_code} {response.reason_phrase}")
            try:
                response.read()
            except httpx.HTTPError as exc:
                if response.is_success:
                    raise _core.request_failed(exc) from exc
                # Unread error bodies fall back to the placeholder text.
                output.debug(f"Failed to read error body: {exc}")
            return _core.parse_response(response)
        finally:
            response.close()
