"""Issue contract - request records for issue and label payloads."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, fields as dataclass_fields
from datetime import datetime, timezone
from typing import Any


def normalize_labels(labels: Mapping[Any, str] | Iterable[str] | None) -> list[str] | None:
    """Return labels as a plain ordered list.

    A mapping contributes its values in iteration order and its keys are dropped,
    so ``{"a": "bug", "b": "ui"}`` and ``["bug", "ui"]`` serialize the same way.
    A single string is one label name, not a sequence of characters.
    """
    if labels is None:
        return None
    if isinstance(labels, str):
        return [labels]
    if isinstance(labels, Mapping):
        return list(labels.values())
    return list(labels)


def format_rfc3339(value: datetime) -> str:
    """Format a datetime as an RFC 3339 timestamp. Naive datetimes are taken as UTC."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.isoformat(timespec="seconds")


def _is_present(value: Any) -> bool:
    if isinstance(value, datetime):
        return True
    # "0" is treated as unset, the same as 0
    if isinstance(value, str):
        return value not in ("", "0")
    return bool(value)


@dataclass
class IssueCreate:
    """
    Body for creating an issue. Every key is always sent, unset ones as null.
    """

    title: str
    body: str | None = None
    assignee: str | None = None
    milestone: int | None = None
    labels: Mapping[Any, str] | Iterable[str] | None = None

    def to_payload(self) -> dict:
        return {
            "title": self.title,
            "assignee": self.assignee,
            "milestone": self.milestone,
            "labels": normalize_labels(self.labels),
            "body": self.body,
        }


@dataclass
#dataclass so that a partial update only carries what the caller passed in
class IssueUpdate:
    """
    All fields default to None. During an update, only fields explicitly set to a non-None value are sent.
    """

    state: str | None = None
    title: str | None = None
    body: str | None = None
    assignee: str | None = None
    milestone: int | None = None
    labels: Mapping[Any, str] | Iterable[str] | None = None

    def set_fields(self) -> dict:
        """Return a dict containing only the fields explicitly set to non-None values (the only ones to be updated)
            """
        changed = {f.name: getattr(self, f.name) for f in dataclass_fields(self) if getattr(self, f.name) is not None}
        if "labels" in changed:
            changed["labels"] = normalize_labels(changed["labels"])
        return changed


@dataclass
class IssueFilters:
    """Optional filters for the issue listing endpoints.

    ``filter`` only applies to the authenticated user's listing, while ``milestone``,
    ``assignee`` and ``mentioned`` only apply to a repository listing.
    """

    filter: str | None = None
    milestone: str | int | None = None
    state: str | None = None
    assignee: str | None = None
    mentioned: str | None = None
    labels: str | Iterable[str] | None = None
    sort: str | None = None
    direction: str | None = None
    since: datetime | None = None

    def query_params(self) -> dict[str, Any]:
        """Return the filters that were supplied, ready to be set on a request URL.

        Missing or empty filters are left out entirely rather than sent empty.
        """
        params: dict[str, Any] = {}
        for f in dataclass_fields(self):
            value = getattr(self, f.name)
            if not _is_present(value):
                continue
            if f.name == "since":
                value = format_rfc3339(value)
            elif f.name == "labels" and not isinstance(value, str):
                value = ",".join(normalize_labels(value))
            params[f.name] = value
        return params
