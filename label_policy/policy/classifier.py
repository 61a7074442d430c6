"""Selection of open issues that violate the label policy."""

from collections.abc import Iterable, Sequence

from ..github_client.models import GitHubIssue, GitHubLabel
from .config import PolicyConfig


def labels_contain_prefix(
    labels: Iterable[GitHubLabel], prefix: str, separator: str
) -> bool:
    """Return True if any label name starts with ``prefix + separator``.

    Plain, case-sensitive prefix match. A label equal to ``prefix`` alone
    does not match.
    """
    required = f"{prefix}{separator}"
    return any(label.name.startswith(required) for label in labels)


def _assignees_allowed(issue: GitHubIssue, allowed: frozenset[str]) -> bool:
    # An unassigned issue is trivially within any set
    return all(login in allowed for login in issue.assignee_logins)


def needs_remediation(issue: GitHubIssue, config: PolicyConfig) -> bool:
    """Decide whether a single issue is flagged under the policy.

    Checks run in order and the first exclusion wins:

    1. pull requests are never in scope;
    2. with ``only_milestone``, issues without a milestone are exempt;
    3. with a non-empty ``assignees`` set, issues assigned to anyone
       outside the set are exempt;
    4. issues carrying a label under the required prefix satisfy the policy.

    Args:
        issue: Issue snapshot to evaluate
        config: Policy configuration

    Returns:
        True if the issue lacks a label under the required prefix and is
        not exempted by an earlier check
    """
    if issue.is_pull_request:
        return False

    if config.only_milestone and issue.milestone is None:
        return False

    if config.assignees and not _assignees_allowed(issue, config.assignees):
        return False

    return not labels_contain_prefix(
        issue.labels, config.label_prefix, config.label_separator
    )


def select_issues(
    issues: Sequence[GitHubIssue], config: PolicyConfig
) -> list[GitHubIssue]:
    """Return the issues requiring remediation, preserving input order."""
    return [issue for issue in issues if needs_remediation(issue, config)]
