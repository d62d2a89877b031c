"""HTTP clients for the Translate API.

Two execution models are offered as separate modules; import the one that
matches your application:

:class:`YandexTranslateClient` (:mod:`~yandex_translate.client.sync_client`)
    blocking client backed by :class:`httpx.Client`.
:class:`AsyncYandexTranslateClient` (:mod:`~yandex_translate.client.async_client`)
    asyncio client backed by :class:`httpx.AsyncClient`.

Both share request building and response handling with
:mod:`yandex_translate.client._core` and expose the same surface:
``with_api_key``, ``with_iam_token``, ``with_base_url`` and ``translate``.

Example::

    from yandex_translate.client import YandexTranslateClient

    with YandexTranslateClient.with_api_key(key) as client:
        resp = client.translate(request)
"""

from yandex_translate.client.async_client import AsyncYandexTranslateClient
from yandex_translate.client.sync_client import YandexTranslateClient

__all__ = ["YandexTranslateClient", "AsyncYandexTranslateClient"]
