"""Exception hierarchy for yandex_translate.

All exceptions inherit from :class:`YandexTranslateError`, so callers can
catch a single type around :meth:`translate` and still branch on the
concrete failure when they need to.

Subclass hierarchy::

    YandexTranslateError
    +-- RequestFailedError  (transport could not complete the exchange)
    +-- JsonError           (payload/response could not be encoded/decoded)
    +-- ApiError            (service answered with a non-2xx status)
    +-- ConfigError         (invalid client configuration)

Nothing in the library retries.  Every exception is terminal for the
call that raised it.
"""

from __future__ import annotations

from typing import Optional


class YandexTranslateError(Exception):
    """Base exception for all yandex_translate errors.

    Args:
        message: Human-readable error description.
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class RequestFailedError(YandexTranslateError):
    """Raised when the HTTP exchange itself fails (DNS, connect, TLS, timeout, bad URL).

    The original transport exception is chained via ``__cause__`` and also
    kept on :attr:`cause` for callers that want the httpx diagnostic.
    """

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.cause = cause


class JsonError(YandexTranslateError):
    """Raised when a request payload cannot be encoded or a response body cannot be decoded."""


class ApiError(YandexTranslateError):
    """Raised when the service responds with a non-success HTTP status.

    The raw body is preserved because it is where the service explains
    quota, permission and validation failures.

    Args:
        status_code: HTTP status returned by the service.
        body: Response body text, or a placeholder if it could not be read.
        reason: Optional reason phrase (e.g. ``"Bad Request"``).
    """

    def __init__(self, status_code: int, body: str, reason: str = ""):
        status = f"{status_code} {reason}".rstrip()
        super().__init__(f"API returned status {status}: {body}")
        self.status_code = status_code
        self.body = body
        self.reason = reason


class ConfigError(YandexTranslateError):
    """Raised for invalid client configuration (empty credentials, bad transport settings)."""
