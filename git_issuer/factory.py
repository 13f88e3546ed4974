"""Resolves provider names to issue services."""

import logging
from collections.abc import Callable, Mapping

from .config import Settings
from .exceptions import UnsupportedProviderError
from .services.github_service import GitHubService
from .services.gitlab_service import GitLabService
from .services.protocols import GitService

logger = logging.getLogger(__name__)

ServiceConstructor = Callable[[Settings], GitService]

DEFAULT_PROVIDERS: Mapping[str, ServiceConstructor] = {
    "github": GitHubService.from_settings,
    "gitlab": GitLabService.from_settings,
}


class GitServiceFactory:
    """Builds the issue service for a provider name.

    Adding a provider means implementing GitServiceBase and registering
    its tag here (or passing a custom registry).
    """

    def __init__(self, settings: Settings, providers: Mapping[str, ServiceConstructor] | None = None):
        """Initialize factory.

        Args:
            settings: Application settings holding tokens and API roots
            providers: Lower-case provider tag -> service constructor
        """
        self.settings = settings
        self.providers = dict(providers if providers is not None else DEFAULT_PROVIDERS)

    def get_service(self, provider_name: str) -> GitService:
        """Return a service for the provider (case-insensitive).

        Raises:
            UnsupportedProviderError: If the provider is not registered
        """
        constructor = self.providers.get(provider_name.lower())
        if constructor is None:
            raise UnsupportedProviderError(provider_name, self.get_valid_provider_names())
        logger.debug(f"Creating {provider_name.lower()} service")
        return constructor(self.settings)

    def get_valid_provider_names(self) -> list[str]:
        return list(self.providers)
