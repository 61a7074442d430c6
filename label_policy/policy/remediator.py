"""Remediation workflow for issues that violate the label policy."""

import logging

from pydantic import BaseModel, Field

from .classifier import select_issues
from .comments import build_comment, missing_prefix_message
from .config import PolicyConfig
from .errors import CommentError, IssueFetchError, LabelError
from .tracker import IssueTracker

logger = logging.getLogger(__name__)


class RemediationResult(BaseModel):
    """Outcome of one completed remediation pass."""

    flagged: list[int] = Field(
        default_factory=list, description="Issue numbers violating the policy"
    )
    labeled: list[int] = Field(
        default_factory=list, description="Issue numbers the default label was added to"
    )
    commented: list[int] = Field(
        default_factory=list, description="Issue numbers a comment was posted on"
    )


def run(tracker: IssueTracker, config: PolicyConfig) -> RemediationResult:
    """Fetch open issues, select the violating ones and remediate them in order.

    The pass stops at the first fatal error. Issues remediated before the
    failure stay remediated; later issues are picked up by the next run.

    Args:
        tracker: Issue tracker to read from and write to
        config: Policy configuration for this run

    Returns:
        RemediationResult describing what was done

    Raises:
        IssueFetchError: If listing open issues fails
        LabelError: If adding the default label fails and strict_labels is set
        CommentError: If posting a comment fails
    """
    try:
        issues = tracker.list_open_issues(config.repo_owner, config.repo_name)
    except Exception as e:
        raise IssueFetchError(f"error getting issues: {e}") from e

    flagged = select_issues(issues, config)
    logger.info(
        f"{len(flagged)} of {len(issues)} open issue(s) in {config.repository} "
        f"lack a '{config.required_prefix}' label"
    )

    result = RemediationResult()
    for issue in flagged:
        logger.warning(missing_prefix_message(issue, config))
        result.flagged.append(issue.number)

        if config.dry_run:
            continue

        if config.add_label:
            try:
                tracker.add_labels(
                    config.repo_owner,
                    config.repo_name,
                    issue.number,
                    [config.default_label],
                )
                result.labeled.append(issue.number)
            except Exception as e:
                if config.strict_labels:
                    raise LabelError(
                        f"error adding label: {e}", issue_number=issue.number
                    ) from e
                logger.warning(
                    f"Could not add label '{config.default_label}' "
                    f"to issue #{issue.number}: {e}"
                )

        comment = build_comment(config)
        try:
            tracker.create_comment(
                config.repo_owner, config.repo_name, issue.number, comment
            )
        except Exception as e:
            raise CommentError(
                f"error adding comment: {e}", issue_number=issue.number
            ) from e
        result.commented.append(issue.number)

    return result
