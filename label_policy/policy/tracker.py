"""Issue tracker capability used by the remediation workflow."""

from typing import Protocol

from ..github_client.models import GitHubIssue


class IssueTracker(Protocol):
    """List/label/comment operations on a repository's issue tracker.

    ``GitHubClient`` is the production implementation. Open issue listings
    include pull requests, marked through ``GitHubIssue.pull_request``.
    """

    def list_open_issues(self, owner: str, repo: str) -> list[GitHubIssue]: ...

    def add_labels(
        self, owner: str, repo: str, issue_number: int, labels: list[str]
    ) -> None: ...

    def create_comment(
        self, owner: str, repo: str, issue_number: int, body: str
    ) -> None: ...
