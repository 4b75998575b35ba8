"""Transport contract - the HTTP collaborator every client call goes through."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

__all__ = ["Response", "Transport"]


@dataclass(frozen=True)
class Response:
    """Status code and raw body of a single HTTP exchange."""

    status_code: int
    body: str = ""


class Transport(ABC):
    """Sends one request per call and hands back the raw response.

    Implementations own connections, authentication and timeouts. Network
    failures are raised as-is, they are never turned into a Response.
    """

    @abstractmethod
    def get(self, url: str) -> Response:
        """Send a GET request."""
        raise NotImplementedError

    @abstractmethod
    def post(self, url: str, data: str) -> Response:
        """Send a POST request with an already encoded body."""
        raise NotImplementedError

    @abstractmethod
    def patch(self, url: str, data: str) -> Response:
        """Send a PATCH request with an already encoded body."""
        raise NotImplementedError

    @abstractmethod
    def delete(self, url: str) -> Response:
        """Send a DELETE request."""
        raise NotImplementedError
