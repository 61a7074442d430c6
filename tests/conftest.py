"""Test configuration and fixtures."""

from collections.abc import Callable

import pytest

from label_policy.github_client.models import (
    GitHubIssue,
    GitHubLabel,
    GitHubMilestone,
    GitHubPullRequestRef,
    GitHubUser,
)
from label_policy.policy.config import PolicyConfig


class FakeTracker:
    """In-memory issue tracker recording every write."""

    def __init__(
        self,
        issues: list[GitHubIssue] | None = None,
        list_error: BaseException | None = None,
        label_errors: dict[int, Exception] | None = None,
        comment_errors: dict[int, Exception] | None = None,
    ) -> None:
        self.issues = issues or []
        self.list_error = list_error
        self.label_errors = label_errors or {}
        self.comment_errors = comment_errors or {}
        self.list_calls: list[tuple[str, str]] = []
        self.label_calls: list[tuple[str, str, int, list[str]]] = []
        self.comment_calls: list[tuple[str, str, int, str]] = []

    def list_open_issues(self, owner: str, repo: str) -> list[GitHubIssue]:
        self.list_calls.append((owner, repo))
        if self.list_error:
            raise self.list_error
        return list(self.issues)

    def add_labels(
        self, owner: str, repo: str, issue_number: int, labels: list[str]
    ) -> None:
        self.label_calls.append((owner, repo, issue_number, labels))
        if issue_number in self.label_errors:
            raise self.label_errors[issue_number]

    def create_comment(self, owner: str, repo: str, issue_number: int, body: str) -> None:
        self.comment_calls.append((owner, repo, issue_number, body))
        if issue_number in self.comment_errors:
            raise self.comment_errors[issue_number]


@pytest.fixture
def make_issue() -> Callable[..., GitHubIssue]:
    """Build issue snapshots from plain label names and logins."""

    def _make(
        number: int,
        labels: list[str] | None = None,
        milestone: bool = False,
        pull_request: bool = False,
        assignees: list[str] | None = None,
        title: str | None = None,
    ) -> GitHubIssue:
        return GitHubIssue(
            number=number,
            title=title if title is not None else f"issue{number}",
            labels=[GitHubLabel(name=name) for name in labels or []],
            milestone=GitHubMilestone(number=1, title="v1.0") if milestone else None,
            pull_request=GitHubPullRequestRef() if pull_request else None,
            assignees=[GitHubUser(login=login) for login in assignees or []],
        )

    return _make


@pytest.fixture
def policy_config() -> PolicyConfig:
    """Comment-only policy requiring a ``prefix/`` label."""
    return PolicyConfig(
        repo_owner="test-org",
        repo_name="test-repo",
        label_prefix="prefix",
        label_separator="/",
    )


@pytest.fixture
def tracker_factory() -> type[FakeTracker]:
    """Provide the in-memory tracker class for building test doubles."""
    return FakeTracker
