"""Errors raised by the issue services and the service factory."""

from collections.abc import Sequence


class GitIssuerError(Exception):
    """Base class for errors the API maps to a response."""


class UnsupportedProviderError(GitIssuerError):
    """Raised when a provider name is not registered in the factory."""

    def __init__(self, provider_name: str, valid_provider_names: Sequence[str]):
        self.provider_name = provider_name
        self.valid_provider_names = list(valid_provider_names)
        super().__init__(f"Provider '{provider_name}' is not supported.")


class GitError(GitIssuerError):
    """Raised when a provider answers with a non-success status code.

    Args:
        message: Short description of the failure
        details: Raw response body returned by the provider
        provider: Provider display name (e.g. "GitHub")
    """

    def __init__(self, message: str, details: str, provider: str):
        self.message = message
        self.details = details
        self.provider = provider
        super().__init__(message)
