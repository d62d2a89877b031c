"""yandex_translate -- thin client for the Yandex Cloud Translate v2 API.

The package builds an authenticated ``POST /translate`` request, sends it
with :mod:`httpx`, and decodes the reply into Pydantic models.  A blocking
and an asyncio client are provided with identical surfaces.

Typical usage::

    from yandex_translate import TranslateRequest
    from yandex_translate.client import YandexTranslateClient

    client = YandexTranslateClient.with_api_key("AQVN...")
    resp = client.translate(
        TranslateRequest(folder_id="b1g...", texts=["Hello"], target_language_code="ru")
    )

Modules:
    auth: ``ApiKey`` / ``IAMToken`` credentials.
    client: Blocking and asyncio clients.
    config: Endpoint constants and transport settings plumbing.
    exceptions: Error taxonomy.
    models: Pydantic wire and configuration models.
    output: stderr diagnostics with Rich support.
"""

from yandex_translate.auth import ApiKey, AuthMethod, IAMToken
from yandex_translate.config import API_BASE_URL
from yandex_translate.exceptions import (
    ApiError,
    ConfigError,
    JsonError,
    RequestFailedError,
    YandexTranslateError,
)
from yandex_translate.models import (
    ClientConfig,
    TranslateRequest,
    TranslateResponse,
    Translation,
)

__version__ = "0.1.0"

__all__ = [
    "API_BASE_URL",
    "ApiError",
    "ApiKey",
    "AuthMethod",
    "ClientConfig",
    "ConfigError",
    "IAMToken",
    "JsonError",
    "RequestFailedError",
    "TranslateRequest",
    "TranslateResponse",
    "Translation",
    "YandexTranslateError",
]
