"""Asyncio Translate client -- mirrors :class:`~yandex_translate.client.sync_client.YandexTranslateClient`.

This module provides :class:`AsyncYandexTranslateClient`, the non-blocking
counterpart of the blocking client.  It wraps :class:`httpx.AsyncClient`;
``translate`` is a coroutine that suspends while the request is in flight,
so independent calls can be awaited concurrently (e.g. with
:func:`asyncio.gather`) and may complete in any order.

Request building and response interpretation are shared with the blocking
client through :mod:`yandex_translate.client._core`.
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


class AsyncYandexTranslateClient:
    """Asynchronous client for the Translate v2 API.

    Takes the same arguments as
    :class:`~yandex_translate.client.sync_client.YandexTranslateClient`,
    except that *transport* must be an :class:`httpx.AsyncBaseTransport`.
    Use it as an async context manager (or await :meth:`aclose`) to
    release pooled connections.

    Example::

        async with AsyncYandexTranslateClient.with_iam_token(token) as client:
            response = await client.translate(request)
    """

    def __init__(
        self,
        auth: AuthMethod,
        config: Union[ClientConfig, Mapping[str, Any], None] = None,
        *,
        base_url: str = API_BASE_URL,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        if not isinstance(auth, AuthMethod):
            raise ConfigError(f"auth must be ApiKey or IAMToken, got {type(auth).__name__}")
        self._auth = auth
        self._config = resolve_config(config)
        self._base_url = base_url
        try:
            self._client = httpx.AsyncClient(**build_client_kwargs(self._config, transport))
        except (OSError, ValueError) as exc:
            raise RequestFailedError(f"Failed to create HTTP client: {exc}", cause=exc) from exc

    @classmethod
    def with_api_key(cls, api_key: str, *args: Any, **kwargs: Any) -> AsyncYandexTranslateClient:
        """Create a client authenticated with a Yandex Cloud API key."""
        return cls(ApiKey(api_key), *args, **kwargs)

    @classmethod
    def with_iam_token(
        cls, iam_token: str, *args: Any, **kwargs: Any
    ) -> AsyncYandexTranslateClient:
        """Create a client authenticated with an IAM token."""
        return cls(IAMToken(iam_token), *args, **kwargs)

    def with_base_url(self, base_url: str) -> AsyncYandexTranslateClient:
        """Point the client at *base_url* and return it, for chaining."""
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
    # Async context manager
    # ------------------------------------------------------------------ #

    async def __aenter__(self) -> AsyncYandexTranslateClient:
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying httpx client and its connection pool."""
        await self._client.aclose()

    # ------------------------------------------------------------------ #
    # API
    # ------------------------------------------------------------------ #

    async def translate(self, request: _core.RequestLike) -> TranslateResponse:
        """Translate ``request.texts`` with a single ``POST /translate``.

        Behaves identically to
        :meth:`~yandex_translate.client.sync_client.YandexTranslateClient.translate`
        but is non-blocking.

        Raises:
            RequestFailedError: The HTTP exchange failed.
            ApiError: The service returned a non-2xx status.
            JsonError: The payload or the response body could not be encoded/decoded.
        """
        translate_request = _core.coerce_request(request)
        http_request = _core.build_request(
            self._client, self._auth, self._base_url, translate_request,
        )

        output = get_output()
        output.debug(f"POST {http_request.url} ({len(translate_request.texts)} texts)")

        try:
            response = await self._client.send(http_request, stream=True)
        except httpx.HTTPError as exc:
            raise _core.request_failed(exc) from exc

        try:
            output.debug(f"HTTP {response.status_code} {response.reason_phrase}")
            try:
                await response.aread()
            except httpx.HTTPError as exc:
                if response.is_success:
                    raise _core.request_failed(exc) from exc
                # Unread error bodies fall back to the placeholder text.
                output.debug(f"Failed to read error body: {exc}")
            return _core.parse_response(response)
        finally:
            await response.aclose()
