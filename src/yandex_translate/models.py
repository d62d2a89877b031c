"""Pydantic models shared by both client variants.

This is the single source of truth for data shapes in the project.  The
models fall into two groups:

**Wire models** -- the JSON contract of ``POST /translate``:
    :class:`TranslateRequest`, :class:`Translation`, and
    :class:`TranslateResponse`.  Python attributes are snake_case; the
    JSON form is lower-camel-case (``folderId``, ``targetLanguageCode``,
    ``detectedLanguageCode``) through an alias generator.

**Configuration models** -- transport settings for a client:
    :class:`ClientConfig`.

All models use Pydantic v2.  Wire models accept either the Python name or
the JSON alias on construction.
"""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

DEFAULT_TIMEOUT = 30.0


# --- Wire models ---


class TranslateRequest(BaseModel):
    """Request body for a translation operation.

    Each element of :attr:`texts` is translated independently and the
    results come back in the same order.  An empty ``texts`` list is
    accepted and sent as-is.

    Example::

        TranslateRequest(
            folder_id="b1gvmob95yysaplct532",
            texts=["Hello", "World"],
            target_language_code="ru",
        )
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    folder_id: str = Field(
        min_length=1, description="Cloud folder the request is billed and authorised under"
    )
    texts: list[str] = Field(description="Texts to translate, in order")
    target_language_code: str = Field(
        min_length=1, description="ISO 639-1 target language code, e.g. 'ru'"
    )
    source_language_code: Optional[str] = Field(
        default=None,
        description="ISO 639-1 source language code; auto-detected per text when omitted",
    )

    def to_payload(self) -> dict[str, Any]:
        """Return the JSON body for the request.

        ``sourceLanguageCode`` is left out entirely when it is not set
        rather than being sent as ``null``.
        """
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class Translation(BaseModel):
    """Translation of a single input text.

    ``detected_language_code`` is only filled in when the request did not
    name a source language.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    text: str
    detected_language_code: Optional[str] = None


class TranslateResponse(BaseModel):
    """Response body of ``POST /translate``.

    Holds one :class:`Translation` per input text, index-aligned with
    :attr:`TranslateRequest.texts`.
    """

    translations: list[Translation]

    def __len__(self) -> int:
        return len(self.translations)

    def texts(self) -> list[str]:
        """Return only the translated strings, in request order."""
        return [t.text for t in self.translations]


# --- Configuration models ---


class ClientConfig(BaseModel):
    """Transport settings applied to every request a client makes."""

    timeout: float = Field(
        default=DEFAULT_TIMEOUT, gt=0, description="Request timeout in seconds"
    )
    verify_ssl: bool = Field(default=True, description="Verify SSL certificates")
    headers: dict[str, str] = Field(
        default_factory=dict,
        description="Extra static headers, e.g. x-data-logging-enabled",
    )
    proxy: Optional[str] = Field(default=None, description="Proxy URL for all requests")
