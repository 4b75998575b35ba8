"""
Authentication
--------------
The client supports two credential modes:

1. When get_client(interactive = True)
    User is prompted for a token at runtime if no credentials are found in the environment.
2. When get_client(interactive = False) - Default
        GITHUB_API_URL   https://api.github.com (optional, this is the default)
        GITHUB_TOKEN     <token from https://github.com/settings/tokens>
    or, for basic auth,
        GITHUB_USERNAME  octocat
        GITHUB_PASSWORD  <password>
    Optionally GITHUB_TIMEOUT sets the request timeout in seconds.

Dependencies:
    uv add requests

"""
#to avoid having to consider forward declarations, the below line must be first line in the file
from __future__ import annotations

import os
from collections.abc import Iterable, Mapping
from datetime import datetime
from getpass import getpass
from typing import Any

from github_client_impl.api import DEFAULT_API_URL, ApiHelper
from github_client_impl.transport import RequestsTransport
from issue_tracker_interface.client import IssueTrackerClient
from issue_tracker_interface.issue import IssueCreate, IssueFilters, IssueUpdate
from issue_tracker_interface.transport import Transport

# ---------------------------------------------------------------------------
# Client implementation
# ---------------------------------------------------------------------------

class GitHubIssues(IssueTrackerClient):
    """
    Args:
        transport: Transport every request is sent through
        base_url:  GitHub API root URL (e.g. 'https://api.github.com')
        apply_user_list_filters: Send get_list()'s filters instead of only its pagination

    Notes on usage:
        Owner, repository and label names are placed into the request path exactly as given.
        Callers are responsible for passing valid names, nothing is escaped here.
    """

    def __init__(
        self,
        transport: Transport,
        base_url: str = DEFAULT_API_URL,
        *,
        apply_user_list_filters: bool = False,
    ) -> None:
        self._api = ApiHelper(transport, base_url)
        self._apply_user_list_filters = apply_user_list_filters

    @staticmethod
    def _repo_path(user: str, repo: str, suffix: str = "") -> str:
        return f"/repos/{user}/{repo}{suffix}"

    # ------------------------------------------------------------------
    # Issues
    # ------------------------------------------------------------------

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
        """Create an issue. Unset fields are still sent, as null."""
        issue = IssueCreate(title=title, body=body, assignee=assignee, milestone=milestone, labels=labels)
        url = self._api.fetch_url(self._repo_path(user, repo, "/issues"))
        return self._api.request("post", url, 201, issue.to_payload())

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
        """
        Args:
            issue_id: The issue number
            state:    'open' or 'closed'

        Notes on usage:
            Fields left as "None" are not sent to the API and remain unchanged.
            Calling with no optional field sends an empty object.

        Returns:
            The decoded issue after the update
        """
        update = IssueUpdate(
            state=state,
            title=title,
            body=body,
            assignee=assignee,
            milestone=milestone,
            labels=labels,
        )
        url = self._api.fetch_url(self._repo_path(user, repo, f"/issues/{int(issue_id)}"))
        return self._api.request("patch", url, 200, update.set_fields())

    def get(self, user: str, repo: str, issue_id: int) -> Any:
        url = self._api.fetch_url(self._repo_path(user, repo, f"/issues/{int(issue_id)}"))
        return self._api.request("get", url, 200)

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
        """
        Notes on usage:
            By default only page and limit reach the request, the filters are accepted and dropped.
            Build the client with apply_user_list_filters=True to send them as well.
        """
        url = self._api.fetch_url("/issues", page, limit)

        if self._apply_user_list_filters:
            filters = IssueFilters(
                filter=filter,
                state=state,
                labels=labels,
                sort=sort,
                direction=direction,
                since=since,
            )
            for name, value in filters.query_params().items():
                url.set_var(name, value)

        return self._api.request("get", url, 200)

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
        """
        Args:
            milestone: Milestone number, 'none' or '*'
            assignee:  Login, 'none' or '*'
            labels:    Comma separated label names (e.g. 'bug,ui,@high')
            since:     Only issues updated at or after this time

        Returns:
            The decoded list of issues
        """
        url = self._api.fetch_url(self._repo_path(user, repo, "/issues"), page, limit)

        filters = IssueFilters(
            milestone=milestone,
            state=state,
            assignee=assignee,
            mentioned=mentioned,
            labels=labels,
            sort=sort,
            direction=direction,
            since=since,
        )
        for name, value in filters.query_params().items():
            url.set_var(name, value)

        return self._api.request("get", url, 200)

    # ------------------------------------------------------------------
    # Comments
    # ------------------------------------------------------------------

    def create_comment(self, user: str, repo: str, issue_id: int, body: str) -> Any:
        url = self._api.fetch_url(self._repo_path(user, repo, f"/issues/{int(issue_id)}/comments"))
        return self._api.request("post", url, 201, {"body": body})

    def edit_comment(self, user: str, repo: str, comment_id: int, body: str) -> Any:
        url = self._api.fetch_url(self._repo_path(user, repo, f"/issues/comments/{int(comment_id)}"))
        return self._api.request("patch", url, 200, {"body": body})

    def delete_comment(self, user: str, repo: str, comment_id: int) -> None:
        url = self._api.fetch_url(self._repo_path(user, repo, f"/issues/comments/{int(comment_id)}"))
        self._api.request("delete", url, 204)

    def get_comment(self, user: str, repo: str, comment_id: int) -> Any:
        url = self._api.fetch_url(self._repo_path(user, repo, f"/issues/comments/{int(comment_id)}"))
        return self._api.request("get", url, 200)

    def get_comments(self, user: str, repo: str, issue_id: int, page: int = 0, limit: int = 0) -> Any:
        url = self._api.fetch_url(self._repo_path(user, repo, f"/issues/{int(issue_id)}/comments"), page, limit)
        return self._api.request("get", url, 200)

    # ------------------------------------------------------------------
    # Labels
    # ------------------------------------------------------------------

    def create_label(self, user: str, repo: str, name: str, color: str) -> Any:
        """Create a label. color is a hex string without the leading '#', e.g. 'ff0000'."""
        url = self._api.fetch_url(self._repo_path(user, repo, "/labels"))
        return self._api.request("post", url, 201, {"name": name, "color": color})

    def edit_label(self, user: str, repo: str, label: str, name: str, color: str) -> Any:
        """Rename and/or recolor the label currently called ``label``."""
        url = self._api.fetch_url(self._repo_path(user, repo, f"/labels/{label}"))
        return self._api.request("patch", url, 200, {"name": name, "color": color})

    def delete_label(self, user: str, repo: str, label: str) -> None:
        url = self._api.fetch_url(self._repo_path(user, repo, f"/labels/{label}"))
        self._api.request("delete", url, 204)

    def get_label(self, user: str, repo: str, name: str) -> Any:
        url = self._api.fetch_url(self._repo_path(user, repo, f"/labels/{name}"))
        return self._api.request("get", url, 200)

    def get_labels(self, user: str, repo: str) -> Any:
        url = self._api.fetch_url(self._repo_path(user, repo, "/labels"))
        return self._api.request("get", url, 200)


# ---------------------------------------------------------------------------
# Get client
# ---------------------------------------------------------------------------

def get_client(*, interactive: bool = False) -> GitHubIssues:
    """Return a configured GitHubIssues client.

    Reads credentials from environment variables. If "interactive = True" and
    no credentials are set, the user will be prompted for a token.

    Environment variables:
        GITHUB_API_URL:   API root URL, defaults to https://api.github.com.
        GITHUB_TOKEN:     Personal access token.
        GITHUB_USERNAME:  Login for basic auth, used when no token is set.
        GITHUB_PASSWORD:  Password for basic auth.
        GITHUB_TIMEOUT:   Request timeout in seconds.
    """
    base_url = os.environ.get("GITHUB_API_URL", "") or DEFAULT_API_URL
    token = os.environ.get("GITHUB_TOKEN", "")
    username = os.environ.get("GITHUB_USERNAME", "")
    password = os.environ.get("GITHUB_PASSWORD", "")
    timeout_value = os.environ.get("GITHUB_TIMEOUT", "")

    has_basic_auth = bool(username and password)
    if not token and not has_basic_auth:
        if interactive:
            token = getpass("GitHub token: ").strip()
            if not token:
                raise EnvironmentError("No GitHub token entered.")
        else:
            #collects the missing fields and raises an error alerting to the missing values
            missing = [name for name, val in [
                ("GITHUB_TOKEN", token),
                ("GITHUB_USERNAME", username),
                ("GITHUB_PASSWORD", password),
            ] if not val]
            raise EnvironmentError(
                f"Missing required environment variables: {', '.join(missing)}. "
                "Set GITHUB_TOKEN (or GITHUB_USERNAME and GITHUB_PASSWORD) or call get_client(interactive=True)."
            )

    try:
        timeout = float(timeout_value) if timeout_value else None
    except ValueError:
        raise EnvironmentError(f"GITHUB_TIMEOUT must be a number of seconds, got {timeout_value!r}") from None

    transport = RequestsTransport(
        token=token or None,
        username=username or None,
        password=password or None,
        timeout=timeout,
    )
    return GitHubIssues(transport, base_url)
