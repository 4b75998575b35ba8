"""GitHub implementation of the issue tracker client."""

from github_client_impl.api import ApiHelper, GitHubError, RequestUrl
from github_client_impl.github_issues import GitHubIssues, get_client
from github_client_impl.transport import RequestsTransport

__all__ = ["ApiHelper", "GitHubError", "GitHubIssues", "RequestUrl", "RequestsTransport", "get_client"]
