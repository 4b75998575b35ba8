"""Request building and response validation shared by every GitHub endpoint."""

from __future__ import annotations

import json
import logging
from typing import Any
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

from issue_tracker_interface.client import UnexpectedResponseError
from issue_tracker_interface.transport import Response, Transport

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "https://api.github.com"


class GitHubError(UnexpectedResponseError):
    """Raised when the GitHub API returns an unexpected response."""


# ---------------------------------------------------------------------------
# Request URL
# ---------------------------------------------------------------------------

class RequestUrl:
    """A request target whose query parameters can be added one by one.

    Args:
        url: Absolute URL, optionally already carrying a query string.
    """

    def __init__(self, url: str) -> None:
        scheme, netloc, path, query, fragment = urlsplit(url)
        self._parts = (scheme, netloc, path, fragment)
        #dict keeps insertion order, so parameters render in the order they were set
        self._query: dict[str, str] = dict(parse_qsl(query, keep_blank_values=True))

    def set_var(self, name: str, value: Any) -> None:
        self._query[name] = str(value)

    def get_var(self, name: str) -> str | None:
        return self._query.get(name)

    @property
    def query(self) -> dict[str, str]:
        return dict(self._query)

    def __str__(self) -> str:
        scheme, netloc, path, fragment = self._parts
        return urlunsplit((scheme, netloc, path, urlencode(self._query), fragment))

    def __repr__(self) -> str:
        return f"<RequestUrl {self}>"


# ---------------------------------------------------------------------------
# Shared helper
# ---------------------------------------------------------------------------

class ApiHelper:
    """
    Args:
        transport: Transport used to send every request
        base_url:  API root URL (e.g. 'https://api.github.com')
    """

    def __init__(self, transport: Transport, base_url: str = DEFAULT_API_URL) -> None:
        self.transport = transport
        self._base_url = base_url.rstrip("/")

    def fetch_url(self, path: str, page: int = 0, limit: int = 0) -> RequestUrl:
        """Return the full request URL for an API path.

        ``page`` and ``limit`` are only added when greater than zero.
        """
        url = RequestUrl(f"{self._base_url}{path}")
        if page > 0:
            url.set_var("page", int(page))
        if limit > 0:
            url.set_var("limit", int(limit))
        return url

    def request(self, method: str, url: RequestUrl | str, expected_code: int, payload: Any = None) -> Any:
        """Send one request and validate it against the expected status code.

        Args:
            method:        One of 'get', 'post', 'patch', 'delete'
            url:           Request target from fetch_url (or a plain string)
            expected_code: The only status code treated as success
            payload:       Body for post/patch, JSON encoded before it is handed to the transport

        Raises:
            GitHubError: If the status code differs from expected_code.
        """
        target = str(url)
        logger.debug("%s %s", method.upper(), target)

        send = getattr(self.transport, method)
        if method in ("post", "patch"):
            response = send(target, json.dumps(payload))
        else:
            response = send(target)

        return self.process_response(response, expected_code)

    @staticmethod
    def process_response(response: Response, expected_code: int = 200) -> Any:
        """Return the decoded body of a response, or None when the body is empty.

        Raises:
            GitHubError: If the status code differs from expected_code.
            json.JSONDecodeError: If the body is not valid JSON.
        """
        if response.status_code != expected_code:
            logger.warning("Expected status %s, got %s", expected_code, response.status_code)
            raise GitHubError(response.status_code, response.body)

        # DELETE answers 204 No Content
        if not response.body:
            return None
        return json.loads(response.body)
