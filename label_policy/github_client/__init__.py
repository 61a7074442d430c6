"""GitHub client package for API interaction."""

from .client import GitHubClient
from .models import (
    GitHubIssue,
    GitHubLabel,
    GitHubMilestone,
    GitHubPullRequestRef,
    GitHubUser,
)

__all__ = [
    "GitHubClient",
    "GitHubUser",
    "GitHubLabel",
    "GitHubMilestone",
    "GitHubPullRequestRef",
    "GitHubIssue",
]
