"""Transport-agnostic request building and response interpretation.

Both :class:`~yandex_translate.client.sync_client.YandexTranslateClient`
and :class:`~yandex_translate.client.async_client.AsyncYandexTranslateClient`
run the same pipeline; only the send step differs::

    coerce_request -> build_request -> <send> -> parse_response

Everything here is synchronous and free of I/O.  :func:`build_request`
uses ``build_request`` on the httpx client, which :class:`httpx.Client`
and :class:`httpx.AsyncClient` both provide, so the client's default
headers and timeout are merged the same way for either variant.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Union

import httpx
from pydantic import ValidationError

from yandex_translate.auth import AuthMethod
from yandex_translate.config import TRANSLATE_PATH, join_url
from yandex_translate.exceptions import ApiError, JsonError, RequestFailedError
from yandex_translate.models import TranslateRequest, TranslateResponse

UNKNOWN_ERROR_BODY = "Unknown error"

RequestLike = Union[TranslateRequest, Mapping[str, Any]]


def coerce_request(request: RequestLike) -> TranslateRequest:
    """Return *request* as a :class:`TranslateRequest`.

    Mappings may use either the Python names (``folder_id``) or the wire
    names (``folderId``).

    Raises:
        JsonError: If *request* cannot be turned into a valid payload.
    """
    if isinstance(request, TranslateRequest):
        return request
    if isinstance(request, Mapping):
        try:
            return TranslateRequest.model_validate(dict(request))
        except ValidationError as exc:
            raise JsonError(f"Invalid translate request: {exc}") from exc
    raise JsonError(
        f"request must be a TranslateRequest or a mapping, got {type(request).__name__}"
    )


def build_request(
    http_client: Union[httpx.Client, httpx.AsyncClient],
    auth: AuthMethod,
    base_url: str,
    request: TranslateRequest,
) -> httpx.Request:
    """Build the ``POST {base_url}/translate`` request.

    Exactly one ``Authorization`` header is attached; it takes precedence
    over any header of the same name configured on the client.

    Raises:
        JsonError: If the payload cannot be JSON-encoded.
        RequestFailedError: If the target URL cannot be parsed.
    """
    url = join_url(base_url, TRANSLATE_PATH)
    headers = {
        "Content-Type": "application/json",
        "Accept": "application/json",
        **auth.headers(),
    }

    try:
        payload = request.to_payload()
    except ValueError as exc:
        raise JsonError(f"Failed to encode translate request: {exc}") from exc

    try:
        return http_client.build_request("POST", url, headers=headers, json=payload)
    except httpx.InvalidURL as exc:
        raise RequestFailedError(f"HTTP request failed: {exc}", cause=exc) from exc
    except (TypeError, ValueError) as exc:
        raise JsonError(f"Failed to encode translate request: {exc}") from exc


def request_failed(exc: Exception) -> RequestFailedError:
    """Wrap a transport exception raised while sending."""
    return RequestFailedError(f"HTTP request failed: {exc}", cause=exc)


def read_error_body(response: httpx.Response) -> str:
    """Return the body of an error response as text, or a placeholder if it cannot be read.

    The clients send with ``stream=True`` and read the body themselves; if
    that read failed the response has no content and the placeholder is
    returned.
    """
    try:
        return response.text
    except (httpx.ResponseNotRead, LookupError, UnicodeDecodeError):
        return UNKNOWN_ERROR_BODY


def parse_response(response: httpx.Response) -> TranslateResponse:
    """Validate the status of *response* and decode its body.

    Raises:
        ApiError: On any non-2xx status, carrying the status and body text.
        JsonError: If a 2xx body is not a valid translate response.
    """
    if not response.is_success:
        raise ApiError(
            response.status_code,
            read_error_body(response),
            reason=response.reason_phrase,
        )

    try:
        return TranslateResponse.model_validate_json(response.content)
    except ValidationError as exc:
        raise JsonError(f"Failed to decode translate response: {exc}") from exc
