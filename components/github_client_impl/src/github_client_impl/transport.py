"""Transport implementation backed by a requests Session."""

from __future__ import annotations

import requests
from requests.auth import HTTPBasicAuth

from issue_tracker_interface.transport import Response, Transport


class RequestsTransport(Transport):
    """
    Args:
        token:    Personal access token, sent in the Authorization header
        username: Login for basic auth, used when no token is given
        password: Password for basic auth
        timeout:  Seconds to wait for the server, None waits forever
        session:  An existing Session to send requests through
    """

    def __init__(
        self,
        *,
        token: str | None = None,
        username: str | None = None,
        password: str | None = None,
        timeout: float | None = None,
        session: requests.Session | None = None,
    ) -> None:
        self._timeout = timeout
        self._session = session if session is not None else requests.Session()
        self._session.headers.update({"Accept": "application/vnd.github+json", "Content-Type": "application/json"})
        if token:
            self._session.headers["Authorization"] = f"token {token}"
        elif username:
            self._session.auth = HTTPBasicAuth(username, password or "")

    # ------------------------------------------------------------------
    # Transport contract
    # ------------------------------------------------------------------

    def get(self, url: str) -> Response:
        return self._wrap(self._session.get(url, timeout=self._timeout))

    def post(self, url: str, data: str) -> Response:
        return self._wrap(self._session.post(url, data=data, timeout=self._timeout))

    def patch(self, url: str, data: str) -> Response:
        return self._wrap(self._session.patch(url, data=data, timeout=self._timeout))

    def delete(self, url: str) -> Response:
        return self._wrap(self._session.delete(url, timeout=self._timeout))

    @staticmethod
    def _wrap(response: requests.Response) -> Response:
        return Response(
            status_code=response.status_code,
            body=response.text,
        )
