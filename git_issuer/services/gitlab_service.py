"""GitLab API v4 issue service."""

from typing import Any
from urllib.parse import quote

from ..config import Settings
from ..models import GitLabIssueResponse
from .base import GitServiceBase


class GitLabService(GitServiceBase[GitLabIssueResponse]):
    provider_name = "GitLab"
    response_model = GitLabIssueResponse

    def __init__(self, token: str, api_url: str = "https://gitlab.com/api/v4/", timeout: float = 10.0):
        super().__init__(token, api_url, timeout)

    @classmethod
    def from_settings(cls, settings: Settings) -> "GitLabService":
        if not settings.GITLAB_TOKEN:
            raise RuntimeError("GITLAB_TOKEN is not set")
        return cls(
            token=settings.GITLAB_TOKEN,
            api_url=settings.GITLAB_API_URL,
            timeout=settings.HTTP_TIMEOUT,
        )

    def _create_add_issue_body(self, title: str, description: str | None) -> dict[str, Any]:
        return {"title": title, "description": description}

    def _create_modify_issue_body(self, title: str | None, description: str | None) -> dict[str, Any]:
        return {"title": title, "description": description}

    def _create_close_issue_body(self) -> dict[str, Any]:
        return {"state_event": "close"}

    def _add_custom_headers(self, headers: dict[str, str]) -> None:
        pass  # Bearer token is enough

    def _get_modify_issue_method(self) -> str:
        return "PUT"

    def _build_issues_endpoint(self, owner: str, repo: str) -> str:
        # Projects are addressed by their URL-encoded full path
        project = quote(f"{owner}/{repo}", safe="")
        return f"projects/{project}/issues"

    def _get_issue_url(self, response: GitLabIssueResponse) -> str:
        return response.web_url
