"""Shared test fixtures and configuration."""

import pytest

from git_issuer.config import Settings

ENV_VARS = (
    "GITHUB_TOKEN",
    "GITLAB_TOKEN",
    "GITHUB_API_URL",
    "GITLAB_API_URL",
    "GITHUB_API_VERSION",
    "USER_AGENT",
    "HTTP_TIMEOUT",
    "LOG_LEVEL",
)


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Remove configuration variables that may leak in from the shell."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def settings(clean_env: pytest.MonkeyPatch) -> Settings:
    """Settings with both provider tokens configured."""
    return Settings(
        _env_file=None,  # type: ignore[call-arg]
        GITHUB_TOKEN="github_test_token",
        GITLAB_TOKEN="gitlab_test_token",
    )
