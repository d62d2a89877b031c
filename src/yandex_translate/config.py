"""Client configuration plumbing shared by both client variants.

* **Endpoint** -- :data:`API_BASE_URL` is the canonical Translate v2
  endpoint; clients append :data:`TRANSLATE_PATH` via :func:`join_url`.
* **Settings resolution** -- :func:`resolve_config` turns ``None``, a
  mapping, or a :class:`~yandex_translate.models.ClientConfig` into a
  validated ``ClientConfig``, reporting problems as
  :class:`~yandex_translate.exceptions.ConfigError`.
* **Transport kwargs** -- :func:`build_client_kwargs` maps a
  ``ClientConfig`` onto the keyword arguments accepted by both
  :class:`httpx.Client` and :class:`httpx.AsyncClient`.

There is no environment-variable or file-based contract: credentials and
settings are supplied by the embedding application.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Optional, Union

import httpx
from pydantic import ValidationError

from yandex_translate.exceptions import ConfigError
from yandex_translate.models import ClientConfig

API_BASE_URL = "https://translate.api.cloud.yandex.net/translate/v2"
TRANSLATE_PATH = "/translate"


def join_url(base_url: str, path: str) -> str:
    """Append *path* to *base_url* without doubling the slash between them."""
    return f"{base_url.rstrip('/')}{path}"


def resolve_config(
    config: Union[ClientConfig, Mapping[str, Any], None],
) -> ClientConfig:
    """Return a validated :class:`ClientConfig`.

    Args:
        config: ``None`` for defaults, an existing ``ClientConfig``, or a
            mapping of field values.

    Raises:
        ConfigError: If the mapping fails validation or *config* has an
            unsupported type.
    """
    if config is None:
        return ClientConfig()
    if isinstance(config, ClientConfig):
        return config
    if isinstance(config, Mapping):
        try:
            return ClientConfig.model_validate(dict(config))
        except ValidationError as exc:
            raise ConfigError(f"Invalid client configuration: {exc}") from exc
    raise ConfigError(
        f"config must be a ClientConfig or a mapping, got {type(config).__name__}"
    )


def build_client_kwargs(
    config: ClientConfig,
    transport: Optional[Union[httpx.BaseTransport, httpx.AsyncBaseTransport]] = None,
) -> dict[str, Any]:
    """Map *config* onto httpx client keyword arguments.

    Args:
        config: Resolved transport settings.
        transport: Optional custom transport (e.g. :class:`httpx.MockTransport`).
            When given, ``verify`` and ``proxy`` are left to the transport.

    Returns:
        A dict suitable for ``httpx.Client(**kwargs)`` or
        ``httpx.AsyncClient(**kwargs)``.
    """
    kwargs: dict[str, Any] = {
        "timeout": config.timeout,
        "headers": dict(config.headers),
    }
    if transport is not None:
        kwargs["transport"] = transport
    else:
        kwargs["verify"] = config.verify_ssl
        if config.proxy:
            kwargs["proxy"] = config.proxy
    return kwargs
