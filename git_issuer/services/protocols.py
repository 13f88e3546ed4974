"""Protocols (interfaces) for dependency inversion."""

from typing import Protocol


class GitService(Protocol):
    """Protocol for provider issue services."""

    async def add_issue(self, owner: str, repo: str, title: str, description: str | None) -> str:
        """Create an issue.

        Returns:
            URL of the created issue
        """
        ...

    async def modify_issue(
        self,
        owner: str,
        repo: str,
        issue_id: int,
        title: str | None = None,
        description: str | None = None,
    ) -> str:
        """Update title and description of an issue.

        Returns:
            URL of the modified issue
        """
        ...

    async def close_issue(self, owner: str, repo: str, issue_id: int) -> str:
        """Close an issue.

        Returns:
            URL of the closed issue
        """
        ...
