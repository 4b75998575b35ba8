"""Core client contract definitions and factory placeholder."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping
from datetime import datetime
from typing import Any

__all__ = ["IssueTrackerClient", "UnexpectedResponseError", "get_client"]


class UnexpectedResponseError(Exception):
    """Raised when the API answers with a status code other than the one the operation expects.

    Attributes:
        status_code: The status code that was actually received.
        body:        The raw response body, left undecoded for diagnostics.
    """

    def __init__(self, status_code: int, body: str) -> None:
        super().__init__(f"Unexpected response {status_code}: {body}")
        self.status_code = status_code
        self.body = body


class IssueTrackerClient(ABC):
    """Issues, issue comments and repository labels."""

    # ------------------------------------------------------------------
    # Issues
    # ------------------------------------------------------------------
    @abstractmethod
    def create(
        self,
        user: str,
        repo: str,
        title: str,
        body: str | None = None,
        assignee: str | None = None,
        milestone: int | None = None,
        labels: Mapping[Any, str] | Iterable[str] | None = None,
        ) -> Any:
        """Create an issue."""
        """Args:
            user:      Owner of the repository
            repo:      Name of the repository
            title:     Title of the new issue
            body:      Optional body text
            assignee:  Login of the user to assign
            milestone: Milestone number to attach
            labels:    Label names; a mapping contributes only its values

        Returns:
            The decoded issue created by the API

        Raises:
            UnexpectedResponseError: If the API does not answer 201

        """
        raise NotImplementedError

    @abstractmethod
    def edit(
        self,
        user: str,
        repo: str,
        issue_id: int,
        state: str | None = None,
        title: str | None = None,
        body: str | None = None,
        assignee: str | None = None,
        milestone: int | None = None,
        labels: Mapping[Any, str] | Iterable[str] | None = None,
        ) -> Any:
        """Update an issue."""
        """Notes on usage:
            Only the fields passed with a non-None value are sent, leaving the rest of the issue unchanged.

        Raises:
            UnexpectedResponseError: If the API does not answer 200

        """
        raise NotImplementedError

    @abstractmethod
    def get(self, user: str, repo: str, issue_id: int) -> Any:
        """Get an issue."""
        raise NotImplementedError

    @abstractmethod
    def get_list(
        self,
        filter: str | None = None,
        state: str | None = None,
        labels: str | None = None,
        sort: str | None = None,
        direction: str | None = None,
        since: datetime | None = None,
        page: int = 0,
        limit: int = 0,
        ) -> Any:
        """List the authenticated user's issues."""
        raise NotImplementedError

    @abstractmethod
    def get_list_by_repository(
        self,
        user: str,
        repo: str,
        milestone: str | int | None = None,
        state: str | None = None,
        assignee: str | None = None,
        mentioned: str | None = None,
        labels: str | None = None,
        sort: str | None = None,
        direction: str | None = None,
        since: datetime | None = None,
        page: int = 0,
        limit: int = 0,
        ) -> Any:
        """List the issues of a repository."""
        """Notes on usage:
            Filters left as None (or empty) are not sent at all. ``since`` goes out as an RFC 3339 timestamp.
        """
        raise NotImplementedError

    # ------------------------------------------------------------------
    # Comments
    # ------------------------------------------------------------------
    @abstractmethod
    def create_comment(self, user: str, repo: str, issue_id: int, body: str) -> Any:
        """Create a comment on an issue."""
        raise NotImplementedError

    @abstractmethod
    def edit_comment(self, user: str, repo: str, comment_id: int, body: str) -> Any:
        """Update a comment."""
        raise NotImplementedError

    @abstractmethod
    def delete_comment(self, user: str, repo: str, comment_id: int) -> None:
        """Delete a comment."""
        raise NotImplementedError

    @abstractmethod
    def get_comment(self, user: str, repo: str, comment_id: int) -> Any:
        """Get a comment."""
        raise NotImplementedError

    @abstractmethod
    def get_comments(self, user: str, repo: str, issue_id: int, page: int = 0, limit: int = 0) -> Any:
        """Get the comments on an issue."""
        raise NotImplementedError

    # ------------------------------------------------------------------
    # Labels
    # ------------------------------------------------------------------
    @abstractmethod
    def create_label(self, user: str, repo: str, name: str, color: str) -> Any:
        """Create a label."""
        raise NotImplementedError

    @abstractmethod
    def edit_label(self, user: str, repo: str, label: str, name: str, color: str) -> Any:
        """Update a label."""
        raise NotImplementedError

    @abstractmethod
    def delete_label(self, user: str, repo: str, label: str) -> None:
        """Delete a label."""
        raise NotImplementedError

    @abstractmethod
    def get_label(self, user: str, repo: str, name: str) -> Any:
        """Get a label."""
        raise NotImplementedError

    @abstractmethod
    def get_labels(self, user: str, repo: str) -> Any:
        """Get the labels of a repository."""
        raise NotImplementedError


def get_client(*, interactive: bool = False) -> IssueTrackerClient:
    """Create instance of client."""
    """
    Args:
        interactive: When True, the implementation can prompt the user for missing credentials and wait for input.
                     When False, the implementation should rely solely on environment variables.

    Returns:
        A concrete IssueTrackerClient instance.

    Raises:
        NotImplementedError: Until replaced by a concrete factory.

    """
    raise NotImplementedError
