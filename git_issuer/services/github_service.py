"""GitHub REST API issue service."""

from typing import Any

from ..config import Settings
from ..models import GitHubIssueResponse
from .base import GitServiceBase


class GitHubService(GitServiceBase[GitHubIssueResponse]):
    provider_name = "GitHub"
    response_model = GitHubIssueResponse

    def __init__(
        self,
        token: str,
        api_url: str = "https://api.github.com/",
        timeout: float = 10.0,
        user_agent: str = "GitIssuer",
        api_version: str = "2022-11-28",
    ):
        super().__init__(token, api_url, timeout)
        self.user_agent = user_agent
        self.api_version = api_version

    @classmethod
    def from_settings(cls, settings: Settings) -> "GitHubService":
        if not settings.GITHUB_TOKEN:
            raise RuntimeError("GITHUB_TOKEN is not set")
        return cls(
            token=settings.GITHUB_TOKEN,
            api_url=settings.GITHUB_API_URL,
            timeout=settings.HTTP_TIMEOUT,
            user_agent=settings.USER_AGENT,
            api_version=settings.GITHUB_API_VERSION,
        )

    def _create_add_issue_body(self, title: str, description: str | None) -> dict[str, Any]:
        # GitHub calls the description "body"
        return {"title": title, "body": description}

    def _create_modify_issue_body(self, title: str | None, description: str | None) -> dict[str, Any]:
        return {"title": title, "body": description}

    def _create_close_issue_body(self) -> dict[str, Any]:
        return {"state": "closed"}

    def _add_custom_headers(self, headers: dict[str, str]) -> None:
        headers["Accept"] = "application/vnd.github+json"
        headers["User-Agent"] = self.user_agent
        headers["X-GitHub-Api-Version"] = self.api_version

    def _get_modify_issue_method(self) -> str:
        return "PATCH"

    def _build_issues_endpoint(self, owner: str, repo: str) -> str:
        return f"repos/{owner}/{repo}/issues"

    def _get_issue_url(self, response: GitHubIssueResponse) -> str:
        return response.html_url
