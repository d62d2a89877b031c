"""Authentication methods for the Translate API.

The service accepts exactly two credential kinds, so :class:`AuthMethod`
is a closed base class with two concrete variants:

- :class:`ApiKey` -- a static service-account API key, sent as
  ``Authorization: Api-Key <key>``.
- :class:`IAMToken` -- a short-lived IAM token, sent as
  ``Authorization: Bearer <token>``.

Both are immutable once constructed.  A client holds a single instance and
asks it for the header to attach to every request.

Example::

    auth = ApiKey("AQVN...")
    assert auth.headers() == {"Authorization": "Api-Key AQVN..."}
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from yandex_translate.exceptions import ConfigError

AUTHORIZATION_HEADER = "Authorization"


class AuthMethod(ABC):
    """Abstract base for the two supported credential kinds.

    Subclasses provide :attr:`scheme`, the word placed before the credential
    in the ``Authorization`` header.

    Args:
        value: The raw credential.  Must be a non-empty string.

    Raises:
        ConfigError: If *value* is not a string or is blank.
    """

    __slots__ = ("_value",)

    def __init__(self, value: str):
        if not isinstance(value, str):
            raise ConfigError(
                f"{type(self).__name__} credential must be a string, got {type(value).__name__}"
            )
        if not value.strip():
            raise ConfigError(f"{type(self).__name__} credential must not be empty")
        object.__setattr__(self, "_value", value)

    @property
    @abstractmethod
    def scheme(self) -> str:
        """Return the ``Authorization`` scheme, e.g. ``"Api-Key"`` or ``"Bearer"``."""
        ...

    @property
    def value(self) -> str:
        """The raw credential."""
        return self._value

    def header_value(self) -> str:
        """Return the full ``Authorization`` header value."""
        return f"{self.scheme} {self._value}"

    def headers(self) -> dict[str, str]:
        """Return the single header this credential contributes to a request."""
        return {AUTHORIZATION_HEADER: self.header_value()}

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._value == other._value  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._value))

    def __repr__(self) -> str:
        return f"{type(self).__name__}('***')"


class ApiKey(AuthMethod):
    """Authenticate with a Yandex Cloud API key (``Api-Key`` scheme)."""

    __slots__ = ()

    @property
    def scheme(self) -> str:
        return "Api-Key"


class IAMToken(AuthMethod):
    """Authenticate with an IAM bearer token (``Bearer`` scheme)."""

    __slots__ = ()

    @property
    def scheme(self) -> str:
        return "Bearer"
