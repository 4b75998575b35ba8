"""Contracts shared by issue tracker client implementations."""

from issue_tracker_interface.client import IssueTrackerClient, UnexpectedResponseError
from issue_tracker_interface.issue import IssueCreate, IssueFilters, IssueUpdate, normalize_labels
from issue_tracker_interface.transport import Response, Transport

__all__ = [
    "IssueCreate",
    "IssueFilters",
    "IssueTrackerClient",
    "IssueUpdate",
    "Response",
    "Transport",
    "UnexpectedResponseError",
    "normalize_labels",
]
