"""Label policy classification and remediation."""

from .classifier import labels_contain_prefix, needs_remediation, select_issues
from .config import PolicyConfig
from .errors import CommentError, IssueFetchError, LabelError, RemediationError
from .remediator import RemediationResult, run
from .tracker import IssueTracker

__all__ = [
    "CommentError",
    "IssueFetchError",
    "IssueTracker",
    "LabelError",
    "PolicyConfig",
    "RemediationError",
    "RemediationResult",
    "labels_contain_prefix",
    "needs_remediation",
    "run",
    "select_issues",
]
