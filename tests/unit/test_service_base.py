"""Unit tests for the shared issue service lifecycle."""

import json
from typing import Any
from unittest.mock import AsyncMock, patch

import httpx
import pytest
from pydantic import BaseModel, ValidationError

from git_issuer.exceptions import GitError
from git_issuer.services.base import GitServiceBase
from tests.fixtures.provider_responses import make_response, mock_async_client


class FakeIssueResponse(BaseModel):
    link: str


class FakeService(GitServiceBase[FakeIssueResponse]):
    """Minimal provider used to exercise the base class."""

    provider_name = "Fake"
    response_model = FakeIssueResponse

    def __init__(self, token: str = "T", method: str = "PUT"):
        super().__init__(token, "https://git.example.com/api/", timeout=5.0)
        self.method = method

    def _create_add_issue_body(self, title: str, description: str | None) -> dict[str, Any]:
        return {"name": title, "text": description}

    def _create_modify_issue_body(self, title: str | None, description: str | None) -> dict[str, Any]:
        return {"new_name": title, "new_text": description}

    def _create_close_issue_body(self) -> dict[str, Any]:
        return {"closed": True}

    def _add_custom_headers(self, headers: dict[str, str]) -> None:
        headers["X-Fake"] = "1"

    def _get_modify_issue_method(self) -> str:
        return self.method

    def _build_issues_endpoint(self, owner: str, repo: str) -> str:
        return f"{owner}/{repo}/issues"

    def _get_issue_url(self, response: FakeIssueResponse) -> str:
        return response.link


CLIENT_PATH = "git_issuer.services.base.httpx.AsyncClient"


class TestOperations:
    """Tests that the public operations wire hooks into the request."""

    @pytest.mark.asyncio
    async def test_add_issue_posts_to_collection(self) -> None:
        """Test add_issue uses the add body, the collection endpoint and POST."""
        service = FakeService()

        with patch.object(service, "_send_issue_request", new_callable=AsyncMock) as send:
            send.return_value = "https://git.example.com/o/r/1"
            result = await service.add_issue("o", "r", "title", "text")

        assert result == "https://git.example.com/o/r/1"
        send.assert_called_once_with("o/r/issues", {"name": "title", "text": "text"}, "POST")

    @pytest.mark.asyncio
    async def test_modify_issue_targets_issue(self) -> None:
        """Test modify_issue appends the issue id and uses the modify method."""
        service = FakeService(method="PATCH")

        with patch.object(service, "_send_issue_request", new_callable=AsyncMock) as send:
            send.return_value = "url"
            await service.modify_issue("o", "r", 12, "title", None)

        send.assert_called_once_with("o/r/issues/12", {"new_name": "title", "new_text": None}, "PATCH")

    @pytest.mark.asyncio
    async def test_close_issue_targets_issue(self) -> None:
        """Test close_issue sends the close body with the modify method."""
        service = FakeService(method="PUT")

        with patch.object(service, "_send_issue_request", new_callable=AsyncMock) as send:
            send.return_value = "url"
            await service.close_issue("o", "r", 3)

        send.assert_called_once_with("o/r/issues/3", {"closed": True}, "PUT")


class TestSendIssueRequest:
    """Tests for the HTTP request/response handling."""

    @pytest.mark.asyncio
    async def test_success_returns_extracted_url(self) -> None:
        """Test a 2xx response is parsed into the response model."""
        response = make_response(201, {"link": "https://git.example.com/o/r/1", "extra": 1})
        client = mock_async_client(response)

        with patch(CLIENT_PATH, return_value=client):
            result = await FakeService().add_issue("o", "r", "title", "text")

        assert result == "https://git.example.com/o/r/1"

    @pytest.mark.asyncio
    async def test_client_configuration_and_headers(self) -> None:
        """Test the client gets the API root, timeout, bearer token and custom headers."""
        client = mock_async_client(make_response(200, {"link": "url"}))

        with patch(CLIENT_PATH, return_value=client) as client_cls:
            await FakeService(token="T").close_issue("o", "r", 1)

        kwargs = client_cls.call_args.kwargs
        assert kwargs["base_url"] == "https://git.example.com/api/"
        assert kwargs["timeout"] == 5.0
        assert kwargs["headers"] == {"Authorization": "Bearer T", "X-Fake": "1"}

    @pytest.mark.asyncio
    @pytest.mark.parametrize("method", ["POST", "PATCH", "PUT"])
    async def test_dispatches_exactly_one_method(self, method: str) -> None:
        """Test only the requested HTTP verb is called, once."""
        client = mock_async_client(make_response(200, {"link": "url"}))
        session = client.__aenter__.return_value

        with patch(CLIENT_PATH, return_value=client):
            await FakeService()._send_issue_request("o/r/issues", {"a": 1}, method)

        calls = {"POST": session.post, "PATCH": session.patch, "PUT": session.put}
        for verb, mock in calls.items():
            if verb == method:
                mock.assert_called_once_with("o/r/issues", json={"a": 1})
            else:
                mock.assert_not_called()

    @pytest.mark.asyncio
    async def test_invalid_method_raises_value_error(self) -> None:
        """Test a hook returning an unsupported method fails fast."""
        client = mock_async_client(make_response(200, {"link": "url"}))
        session = client.__aenter__.return_value

        with patch(CLIENT_PATH, return_value=client):
            with pytest.raises(ValueError, match="Only POST, PATCH and PUT are supported"):
                await FakeService(method="DELETE").close_issue("o", "r", 1)

        session.post.assert_not_called()
        session.patch.assert_not_called()
        session.put.assert_not_called()

    @pytest.mark.asyncio
    async def test_non_success_raises_git_error_with_raw_body(self) -> None:
        """Test error bodies are kept verbatim and never parsed."""
        raw_body = '{ "message" : "Not Found" }'
        response = make_response(404, text=raw_body)
        client = mock_async_client(response)

        with patch(CLIENT_PATH, return_value=client):
            with pytest.raises(GitError) as exc_info:
                await FakeService().modify_issue("o", "r", 99, "t", "d")

        assert exc_info.value.details == raw_body
        assert exc_info.value.provider == "Fake"
        assert str(exc_info.value) == "Fake API responded with a non-success status code."
        response.json.assert_not_called()

    @pytest.mark.asyncio
    async def test_missing_url_field_is_validation_error(self) -> None:
        """Test a success payload without the URL field is not accepted."""
        client = mock_async_client(make_response(200, {"id": 1}))

        with patch(CLIENT_PATH, return_value=client):
            with pytest.raises(ValidationError):
                await FakeService().add_issue("o", "r", "t", "d")

    @pytest.mark.asyncio
    async def test_malformed_success_body_propagates_decode_error(self) -> None:
        """Test a 2xx response that is not JSON fails with the decode error."""
        response = make_response(201, text="<html>oops</html>")
        response.json.side_effect = json.JSONDecodeError("Expecting value", "<html>oops</html>", 0)
        client = mock_async_client(response)

        with patch(CLIENT_PATH, return_value=client):
            with pytest.raises(json.JSONDecodeError):
                await FakeService().add_issue("o", "r", "t", "d")

    @pytest.mark.asyncio
    async def test_transport_error_propagates(self) -> None:
        """Test network failures are re-raised unchanged."""
        client = mock_async_client(make_response(200, {"link": "url"}))
        client.__aenter__.return_value.post.side_effect = httpx.ConnectError("connection refused")

        with patch(CLIENT_PATH, return_value=client):
            with pytest.raises(httpx.ConnectError):
                await FakeService().add_issue("o", "r", "t", "d")
