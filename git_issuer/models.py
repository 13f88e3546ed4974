"""Request/response models for the API and the provider payloads we read."""

from pydantic import BaseModel, ConfigDict


class AddIssueRequest(BaseModel):
    title: str
    description: str | None = None


class ModifyIssueRequest(BaseModel):
    """Absent fields are forwarded to the provider as null."""

    title: str | None = None
    description: str | None = None


class SuccessResponse(BaseModel):
    url: str  # URL of the affected issue


class ErrorResponse(BaseModel):
    error: str
    details: str | None = None


class GitHubIssueResponse(BaseModel):
    """Subset of GitHub's issue object."""

    model_config = ConfigDict(extra="ignore")

    html_url: str


class GitLabIssueResponse(BaseModel):
    """Subset of GitLab's issue object."""

    model_config = ConfigDict(extra="ignore")

    web_url: str
