"""Shared request/response lifecycle for provider issue services."""

import logging
from abc import ABC, abstractmethod
from typing import Any, ClassVar, Generic, TypeVar, cast

import httpx
from pydantic import BaseModel

from ..exceptions import GitError

logger = logging.getLogger(__name__)

TResponse = TypeVar("TResponse", bound=BaseModel)


class GitServiceBase(ABC, Generic[TResponse]):
    """Implements add/modify/close on top of provider hooks.

    Subclasses describe the provider (endpoints, bodies, headers, HTTP method
    used for updates, response shape); this class owns the HTTP call, JSON
    handling and error translation.
    """

    provider_name: ClassVar[str]
    response_model: ClassVar[type[BaseModel]]

    def __init__(self, token: str, api_url: str, timeout: float = 10.0):
        """Initialize service.

        Args:
            token: Personal access token sent as a Bearer token
            api_url: Provider API root, relative endpoints are joined under it
            timeout: Request timeout in seconds
        """
        self.token = token
        self.api_url = api_url
        self.timeout = timeout

    async def add_issue(self, owner: str, repo: str, title: str, description: str | None) -> str:
        body = self._create_add_issue_body(title, description)
        endpoint = self._build_issues_endpoint(owner, repo)
        return await self._send_issue_request(endpoint, body, "POST")

    async def modify_issue(
        self,
        owner: str,
        repo: str,
        issue_id: int,
        title: str | None = None,
        description: str | None = None,
    ) -> str:
        body = self._create_modify_issue_body(title, description)
        endpoint = f"{self._build_issues_endpoint(owner, repo)}/{issue_id}"
        return await self._send_issue_request(endpoint, body, self._get_modify_issue_method())

    async def close_issue(self, owner: str, repo: str, issue_id: int) -> str:
        body = self._create_close_issue_body()
        endpoint = f"{self._build_issues_endpoint(owner, repo)}/{issue_id}"
        return await self._send_issue_request(endpoint, body, self._get_modify_issue_method())

    async def _send_issue_request(self, endpoint: str, body: dict[str, Any], method: str) -> str:
        """Send one request to the provider and return the affected issue URL.

        Args:
            endpoint: Path relative to the API root (e.g. "repos/owner/repo/issues")
            body: JSON-serializable request body
            method: POST, PATCH or PUT

        Returns:
            URL of the affected issue

        Raises:
            ValueError: If method is not POST, PATCH or PUT
            GitError: If the provider returns a non-success status code
            httpx.HTTPError: On transport failures
            json.JSONDecodeError: If a success response is not JSON
        """
        headers = {"Authorization": f"Bearer {self.token}"}
        self._add_custom_headers(headers)

        logger.info(f"{method} {self.provider_name} {endpoint}")

        try:
            async with httpx.AsyncClient(
                base_url=self.api_url, headers=headers, timeout=self.timeout
            ) as client:
                match method.upper():
                    case "POST":
                        resp = await client.post(endpoint, json=body)
                    case "PATCH":
                        resp = await client.patch(endpoint, json=body)
                    case "PUT":
                        resp = await client.put(endpoint, json=body)
                    case _:
                        raise ValueError(
                            f"Invalid HTTP method '{method}'. Only POST, PATCH and PUT are supported."
                        )
        except httpx.HTTPError as e:
            logger.error(f"{self.provider_name} request failed: {e}")
            raise

        if resp.is_success:
            data = cast(TResponse, self.response_model.model_validate(resp.json()))
            return self._get_issue_url(data)

        # Error bodies are passed on verbatim, never parsed
        error_body = resp.text
        logger.warning(f"{self.provider_name} responded with {resp.status_code}")
        raise GitError(
            f"{self.provider_name} API responded with a non-success status code.",
            error_body,
            self.provider_name,
        )

    @abstractmethod
    def _create_add_issue_body(self, title: str, description: str | None) -> dict[str, Any]: ...

    @abstractmethod
    def _create_modify_issue_body(
        self, title: str | None, description: str | None
    ) -> dict[str, Any]: ...

    @abstractmethod
    def _create_close_issue_body(self) -> dict[str, Any]: ...

    @abstractmethod
    def _add_custom_headers(self, headers: dict[str, str]) -> None:
        """Add provider specific headers in place."""

    @abstractmethod
    def _get_modify_issue_method(self) -> str:
        """HTTP method used to modify and close issues."""

    @abstractmethod
    def _build_issues_endpoint(self, owner: str, repo: str) -> str:
        """Relative path of the repository's issue collection."""

    @abstractmethod
    def _get_issue_url(self, response: TResponse) -> str: ...
