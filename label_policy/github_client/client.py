"""GitHub API client using PyGitHub."""

import logging
import os
import time
from collections.abc import Callable

from github import Github
from github.GithubException import RateLimitExceededException, UnknownObjectException
from github.Issue import Issue
from github.Label import Label
from github.NamedUser import NamedUser
from github.Repository import Repository
from rich.console import Console
from rich.markup import escape

from .models import (
    GitHubIssue,
    GitHubLabel,
    GitHubMilestone,
    GitHubPullRequestRef,
    GitHubUser,
)

console = Console()
logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 15
RATE_LIMIT_RETRIES = 3
RATE_LIMIT_WAIT = 60


class GitHubClient:
    """GitHub issue tracker with rate limiting and authentication.

    Implements the list/label/comment capability the remediation workflow
    needs, converting PyGitHub objects into our frozen models.
    """

    def __init__(self, token: str | None = None, timeout: int = DEFAULT_TIMEOUT):
        """Initialize GitHub client with authentication.

        Args:
            token: GitHub personal access token. If None, reads from
                GITHUB_TOKEN env var.
            timeout: HTTP timeout in seconds applied to every API call.
        """
        self.token = token or os.getenv("GITHUB_TOKEN")
        if not self.token:
            raise ValueError(
                "GitHub token is required. Set GITHUB_TOKEN environment variable."
            )

        self.github = Github(self.token, timeout=timeout)

    def _check_rate_limit(self) -> None:
        """Check rate limit and sleep if necessary."""
        try:
            rate_limit = self.github.get_rate_limit()
            remaining = rate_limit.rate.remaining
            logger.debug(f"GitHub API rate limit: {remaining} requests remaining")

            if remaining < 10:
                reset_time = rate_limit.rate.reset.timestamp()
                sleep_time = reset_time - time.time() + 1
                console.print(
                    f"Rate limit low, sleeping for {sleep_time:.1f} seconds..."
                )
                time.sleep(sleep_time)

        except Exception as e:
            # Not fatal: the request itself reports a hard rate limit
            logger.debug(f"Rate limit check failed: {e}")

    def _convert_user(self, github_user: NamedUser) -> GitHubUser:
        """Convert PyGitHub user to our model."""
        return GitHubUser(login=github_user.login, id=github_user.id)

    def _convert_label(self, github_label: Label) -> GitHubLabel:
        """Convert PyGitHub label to our model."""
        return GitHubLabel(
            name=github_label.name,
            color=github_label.color,
            description=github_label.description,
        )

    def _convert_issue(self, github_issue: Issue) -> GitHubIssue:
        """Convert PyGitHub issue to our model."""
        milestone = None
        if github_issue.milestone is not None:
            milestone = GitHubMilestone(
                number=github_issue.milestone.number,
                title=github_issue.milestone.title,
            )

        pull_request = None
        if github_issue.pull_request is not None:
            pull_request = GitHubPullRequestRef(
                url=github_issue.pull_request.url,
            )

        return GitHubIssue(
            number=github_issue.number,
            title=github_issue.title or "",
            html_url=github_issue.html_url,
            labels=[self._convert_label(label) for label in github_issue.labels],
            milestone=milestone,
            pull_request=pull_request,
            assignees=[self._convert_user(user) for user in github_issue.assignees],
        )

    def get_repository(self, owner: str, repo: str) -> Repository:
        """Get repository object."""
        try:
            return self.github.get_repo(f"{owner}/{repo}")
        except UnknownObjectException:
            raise ValueError(f"Repository {owner}/{repo} not found")

    def _get_issue(self, owner: str, repo: str, issue_number: int) -> Issue:
        try:
            return self.get_repository(owner, repo).get_issue(issue_number)
        except UnknownObjectException:
            raise ValueError(f"Issue #{issue_number} not found in {owner}/{repo}")

    def _retry_on_rate_limit(self, action: Callable[[], None], operation: str) -> None:
        """Run a write, waiting out hard rate limits a bounded number of times."""
        for attempt in range(RATE_LIMIT_RETRIES + 1):
            self._check_rate_limit()
            try:
                action()
                return
            except RateLimitExceededException:
                if attempt == RATE_LIMIT_RETRIES:
                    raise
                console.print(f"Rate limit exceeded during {operation}, waiting...")
                time.sleep(RATE_LIMIT_WAIT)

    def list_open_issues(self, owner: str, repo: str) -> list[GitHubIssue]:
        """List every open issue in a repository.

        Pull requests come back from the same endpoint and are kept, marked
        through ``GitHubIssue.pull_request``. Pagination is handled by
        PyGitHub's PaginatedList.

        Args:
            owner: Repository owner (user or organization)
            repo: Repository name

        Returns:
            List of GitHubIssue objects in API order
        """
        self._check_rate_limit()

        repository = self.get_repository(owner, repo)
        issues = [
            self._convert_issue(github_issue)
            for github_issue in repository.get_issues(state="open")
        ]
        console.print(
            f"Fetched {len(issues)} open issue(s) from {escape(f'{owner}/{repo}')}"
        )
        return issues

    def add_labels(
        self, owner: str, repo: str, issue_number: int, labels: list[str]
    ) -> None:
        """Add labels to an issue, keeping the labels it already has.

        Args:
            owner: Repository owner
            repo: Repository name
            issue_number: Issue number
            labels: Label names to add

        Raises:
            ValueError: If repository or issue not found
            RateLimitExceededException: If the rate limit persists after retries
            GithubException: For other API errors
        """

        def _add() -> None:
            self._get_issue(owner, repo, issue_number).add_to_labels(*labels)

        self._retry_on_rate_limit(_add, "label update")
        console.print(f"Added labels to issue #{issue_number}: {escape(str(labels))}")

    def create_comment(self, owner: str, repo: str, issue_number: int, body: str) -> None:
        """Add a comment to an issue.

        Args:
            owner: Repository owner
            repo: Repository name
            issue_number: Issue number
            body: Comment text in markdown

        Raises:
            ValueError: If repository or issue not found
            RateLimitExceededException: If the rate limit persists after retries
            GithubException: For other API errors
        """

        def _comment() -> None:
            self._get_issue(owner, repo, issue_number).create_comment(body)

        self._retry_on_rate_limit(_comment, "comment creation")
        console.print(f"Added comment to issue #{issue_number}")
