from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Configuration via environment variables.

    Only the providers that are actually used need a token, e.g.
    GITHUB_TOKEN=github_pat_... without GITLAB_TOKEN serves GitHub requests only.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # GitHub configuration
    GITHUB_TOKEN: str | None = Field(default=None, description="GitHub personal access token")
    GITHUB_API_URL: str = Field(default="https://api.github.com/", description="GitHub REST API root")
    GITHUB_API_VERSION: str = Field(default="2022-11-28", description="X-GitHub-Api-Version header value")
    USER_AGENT: str = Field(default="GitIssuer", description="User-Agent sent to GitHub")

    # GitLab configuration
    GITLAB_TOKEN: str | None = Field(default=None, description="GitLab personal access token")
    GITLAB_API_URL: str = Field(
        default="https://gitlab.com/api/v4/",
        description="GitLab API v4 root, override for self-hosted instances",
    )

    # Outbound HTTP
    HTTP_TIMEOUT: float = Field(default=10.0, description="Provider request timeout in seconds")

    # Server
    HOST: str = Field(default="0.0.0.0", description="HTTP server bind address")
    PORT: int = Field(default=8000, description="HTTP server port")
    LOG_LEVEL: str = Field(default="INFO", description="Logging level")

    @field_validator("GITHUB_API_URL", "GITLAB_API_URL")
    @classmethod
    def ensure_trailing_slash(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("API URL must not be empty")
        # Relative issue endpoints are joined under the API root
        return v if v.endswith("/") else f"{v}/"


def get_settings() -> Settings:
    """Factory function to get settings instance.

    This allows for lazy initialization and easier testing.
    """
    return Settings()
