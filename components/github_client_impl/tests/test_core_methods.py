"""Unit tests for GitHubIssues endpoint methods.

Every test runs against a mocked Transport, so no HTTP request leaves the process.
"""

#Run with "python -m pytest components/github_client_impl/tests -v"

import json
from datetime import datetime, timezone
from unittest.mock import MagicMock
from urllib.parse import parse_qsl, urlsplit

import pytest

from github_client_impl.api import GitHubError
from github_client_impl.github_issues import GitHubIssues
from issue_tracker_interface.client import UnexpectedResponseError
from issue_tracker_interface.transport import Response, Transport

API = "https://api.github.com"


#Fixture for mock tests
@pytest.fixture
def transport():
    """Returns a Transport mock; each test sets the response it needs."""
    return MagicMock(spec=Transport)


@pytest.fixture
def issues(transport):
    return GitHubIssues(transport, API)


def sent_url(verb_mock):
    """Return the URL passed to the last call of a transport verb."""
    return verb_mock.call_args[0][0]


def sent_body(verb_mock):
    """Return the decoded body passed to the last post/patch call."""
    return json.loads(verb_mock.call_args[0][1])


def sent_query(verb_mock):
    return dict(parse_qsl(urlsplit(sent_url(verb_mock)).query))

#--------------------------- issues --------------------------

def test_create_sends_full_shape(issues, transport):
    # Setup
    transport.post.return_value = Response(201, '{"number": 7, "title": "Broken build"}')

    # Act: only title and labels are given
    result = issues.create("acme", "widget", "Broken build", labels={"a": "bug"})

    # Assert: unset fields are sent as null, labels as a plain list
    assert sent_url(transport.post) == f"{API}/repos/acme/widget/issues"
    assert sent_body(transport.post) == {
        "title": "Broken build",
        "assignee": None,
        "milestone": None,
        "labels": ["bug"],
        "body": None,
    }
    assert result == {"number": 7, "title": "Broken build"}


def test_create_with_single_label_string(issues, transport):
    transport.post.return_value = Response(201, "{}")

    issues.create("acme", "widget", "T", labels="bug")

    assert sent_body(transport.post)["labels"] == ["bug"]


def test_create_raises_when_not_201(issues, transport):
    # a 200 is still wrong for a create
    transport.post.return_value = Response(200, "{}")

    with pytest.raises(GitHubError) as exc_info:
        issues.create("acme", "widget", "Broken build")

    assert exc_info.value.status_code == 200


def test_edit_sends_only_state(issues, transport):
    transport.patch.return_value = Response(200, '{"number": 42, "state": "closed"}')

    result = issues.edit("acme", "widget", 42, state="closed")

    assert sent_url(transport.patch) == f"{API}/repos/acme/widget/issues/42"
    assert transport.patch.call_args[0][1] == '{"state": "closed"}'
    assert result["state"] == "closed"


def test_edit_with_no_fields_sends_empty_object(issues, transport):
    transport.patch.return_value = Response(200, "{}")

    issues.edit("acme", "widget", 42)

    assert sent_body(transport.patch) == {}


def test_edit_normalizes_labels_and_coerces_issue_id(issues, transport):
    transport.patch.return_value = Response(200, "{}")

    issues.edit("acme", "widget", "42", title="New title", labels={"k": "bug", "j": "ui"})

    assert sent_url(transport.patch) == f"{API}/repos/acme/widget/issues/42"
    assert sent_body(transport.patch) == {"title": "New title", "labels": ["bug", "ui"]}


def test_edit_with_single_label_string(issues, transport):
    transport.patch.return_value = Response(200, "{}")

    issues.edit("acme", "widget", 42, labels="bug")

    assert sent_body(transport.patch) == {"labels": ["bug"]}


def test_get_issue(issues, transport):
    transport.get.return_value = Response(200, '{"number": 42}')

    assert issues.get("acme", "widget", 42) == {"number": 42}
    assert sent_url(transport.get) == f"{API}/repos/acme/widget/issues/42"


def test_get_issue_not_found_raises_with_body(issues, transport):
    transport.get.return_value = Response(404, '{"message": "Not Found"}')

    with pytest.raises(UnexpectedResponseError) as exc_info:
        issues.get("acme", "widget", 999)

    assert exc_info.value.status_code == 404
    assert exc_info.value.body == '{"message": "Not Found"}'

#--------------------------- listing --------------------------

def test_get_list_ignores_filters_by_default(issues, transport):
    transport.get.return_value = Response(200, "[]")

    # Act: every filter is passed, but only pagination should reach the URL
    result = issues.get_list(
        filter="assigned",
        state="open",
        labels="bug",
        sort="updated",
        direction="asc",
        since=datetime(2012, 1, 1, tzinfo=timezone.utc),
        page=3,
    )

    assert sent_url(transport.get) == f"{API}/issues?page=3"
    assert result == []


def test_get_list_without_pagination_has_no_query(issues, transport):
    transport.get.return_value = Response(200, "[]")

    issues.get_list()

    assert sent_url(transport.get) == f"{API}/issues"


def test_get_list_applies_filters_when_enabled(transport):
    # Setup: opt in to sending the user listing filters
    client = GitHubIssues(transport, API, apply_user_list_filters=True)
    transport.get.return_value = Response(200, "[]")

    client.get_list(filter="mentioned", state="closed", since=datetime(2012, 1, 1), limit=5)

    assert sent_query(transport.get) == {
        "limit": "5",
        "filter": "mentioned",
        "state": "closed",
        "since": "2012-01-01T00:00:00+00:00",
    }


def test_get_list_by_repository_without_filters(issues, transport):
    transport.get.return_value = Response(200, "[]")

    issues.get_list_by_repository("acme", "widget")

    assert sent_url(transport.get) == f"{API}/repos/acme/widget/issues"


def test_get_list_by_repository_sends_all_filters(issues, transport):
    transport.get.return_value = Response(200, '[{"number": 1}]')

    result = issues.get_list_by_repository(
        "acme",
        "widget",
        milestone="*",
        state="open",
        assignee="none",
        mentioned="octocat",
        labels="bug,ui,@high",
        sort="comments",
        direction="desc",
        since=datetime(2012, 1, 1, 10, 0, 0, tzinfo=timezone.utc),
        page=2,
        limit=50,
    )

    assert urlsplit(sent_url(transport.get)).path == "/repos/acme/widget/issues"
    assert sent_query(transport.get) == {
        "page": "2",
        "limit": "50",
        "milestone": "*",
        "state": "open",
        "assignee": "none",
        "mentioned": "octocat",
        "labels": "bug,ui,@high",
        "sort": "comments",
        "direction": "desc",
        "since": "2012-01-01T10:00:00+00:00",
    }
    assert result == [{"number": 1}]


def test_get_list_by_repository_skips_zero_filters(issues, transport):
    transport.get.return_value = Response(200, "[]")

    issues.get_list_by_repository("acme", "widget", milestone=0, state="0")

    assert sent_url(transport.get) == f"{API}/repos/acme/widget/issues"


def test_get_list_by_repository_skips_missing_filters(issues, transport):
    transport.get.return_value = Response(200, "[]")

    issues.get_list_by_repository("acme", "widget", state="closed", labels="")

    assert sent_query(transport.get) == {"state": "closed"}

#--------------------------- comments --------------------------

def test_create_comment(issues, transport):
    transport.post.return_value = Response(201, '{"id": 5, "body": "Looks good"}')

    result = issues.create_comment("acme", "widget", 42, "Looks good")

    assert sent_url(transport.post) == f"{API}/repos/acme/widget/issues/42/comments"
    assert sent_body(transport.post) == {"body": "Looks good"}
    assert result["id"] == 5


def test_edit_comment(issues, transport):
    transport.patch.return_value = Response(200, '{"id": 5, "body": "Edited"}')

    issues.edit_comment("acme", "widget", 5, "Edited")

    assert sent_url(transport.patch) == f"{API}/repos/acme/widget/issues/comments/5"
    assert sent_body(transport.patch) == {"body": "Edited"}


def test_delete_comment_returns_none(issues, transport):
    transport.delete.return_value = Response(204, "")

    assert issues.delete_comment("acme", "widget", 5) is None
    assert sent_url(transport.delete) == f"{API}/repos/acme/widget/issues/comments/5"


def test_get_comment(issues, transport):
    transport.get.return_value = Response(200, '{"id": 5}')

    assert issues.get_comment("acme", "widget", 5) == {"id": 5}
    assert sent_url(transport.get) == f"{API}/repos/acme/widget/issues/comments/5"


def test_get_comments_with_pagination(issues, transport):
    transport.get.return_value = Response(200, "[]")

    issues.get_comments("acme", "widget", 42, page=2, limit=10)

    assert sent_url(transport.get) == f"{API}/repos/acme/widget/issues/42/comments?page=2&limit=10"


def test_get_comments_with_only_limit(issues, transport):
    transport.get.return_value = Response(200, "[]")

    issues.get_comments("acme", "widget", 42, limit=10)

    assert sent_url(transport.get) == f"{API}/repos/acme/widget/issues/42/comments?limit=10"

#--------------------------- labels --------------------------

def test_create_label(issues, transport):
    transport.post.return_value = Response(201, '{"name": "bug", "color": "ff0000", "id": 1}')

    result = issues.create_label("acme", "widget", "bug", "ff0000")

    assert sent_url(transport.post) == f"{API}/repos/acme/widget/labels"
    assert sent_body(transport.post) == {"name": "bug", "color": "ff0000"}
    assert result == {"name": "bug", "color": "ff0000", "id": 1}


def test_create_label_validation_failure(issues, transport):
    transport.post.return_value = Response(422, '{"message": "Validation Failed"}')

    with pytest.raises(GitHubError) as exc_info:
        issues.create_label("acme", "widget", "bug", "ff0000")

    assert exc_info.value.status_code == 422
    assert exc_info.value.body == '{"message": "Validation Failed"}'


def test_edit_label(issues, transport):
    transport.patch.return_value = Response(200, '{"name": "defect", "color": "00ff00"}')

    issues.edit_label("acme", "widget", "bug", "defect", "00ff00")

    assert sent_url(transport.patch) == f"{API}/repos/acme/widget/labels/bug"
    assert sent_body(transport.patch) == {"name": "defect", "color": "00ff00"}


def test_delete_label(issues, transport):
    transport.delete.return_value = Response(204, "")

    assert issues.delete_label("acme", "widget", "bug") is None
    assert sent_url(transport.delete) == f"{API}/repos/acme/widget/labels/bug"


def test_delete_label_raises_on_unexpected_status(issues, transport):
    # 200 is not the documented 204
    transport.delete.return_value = Response(200, "")

    with pytest.raises(GitHubError):
        issues.delete_label("acme", "widget", "bug")


def test_get_label(issues, transport):
    transport.get.return_value = Response(200, '{"name": "bug"}')

    assert issues.get_label("acme", "widget", "bug") == {"name": "bug"}
    assert sent_url(transport.get) == f"{API}/repos/acme/widget/labels/bug"


def test_get_labels(issues, transport):
    transport.get.return_value = Response(200, '[{"name": "bug"}, {"name": "ui"}]')

    assert issues.get_labels("acme", "widget") == [{"name": "bug"}, {"name": "ui"}]
    assert sent_url(transport.get) == f"{API}/repos/acme/widget/labels"


def test_label_names_are_not_escaped(issues, transport):
    # path segments go in exactly as the caller passed them
    transport.get.return_value = Response(200, "{}")

    issues.get_label("acme", "widget", "needs review")

    assert sent_url(transport.get) == f"{API}/repos/acme/widget/labels/needs review"

#--------------------------- base url --------------------------

def test_custom_base_url_trailing_slash(transport):
    client = GitHubIssues(transport, "https://github.example.com/api/v3/")
    transport.get.return_value = Response(200, "[]")

    client.get_labels("acme", "widget")

    assert sent_url(transport.get) == "https://github.example.com/api/v3/repos/acme/widget/labels"
