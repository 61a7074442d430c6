"""Text posted to, and reported about, policy-violating issues."""

from ..github_client.models import GitHubIssue
from .config import PolicyConfig


def missing_prefix_message(issue: GitHubIssue, config: PolicyConfig) -> str:
    """Diagnostic line reported for a flagged issue."""
    message = (
        f"Issue #{issue.number} does not have the required label prefix: "
        f'"{config.required_prefix}"'
    )
    if issue.html_url:
        message += f" ({issue.html_url})"
    return message


def build_comment(config: PolicyConfig) -> str:
    """Generate the comment explaining the policy violation.

    Args:
        config: Policy configuration; ``add_label`` selects the wording

    Returns:
        Markdown comment text ready for posting to GitHub
    """
    if config.add_label:
        return (
            f"Added default label `{config.default_label}`. "
            "Please consider re-labeling this issue appropriately."
        )

    return (
        f'No label with prefix "{config.required_prefix}" found. '
        "Please add the appropriate label."
    )
