# src/models/errors.py

"""Exception types shared across the storefront."""


class StorefrontError(Exception):
    """Base class for recoverable storefront failures."""


class NetworkError(StorefrontError):
    """The catalog request failed or returned data we cannot parse."""

    def __init__(self, message: str, url: str = "") -> None:
        super().__init__(message)
        self.url = url


class MalformedPersistedState(StorefrontError):
    """A persisted value is not the JSON shape we expect."""

    def __init__(self, key: str, reason: str) -> None:
        super().__init__(f"Malformed value for '{key}': {reason}")
        self.key = key
        self.reason = reason
