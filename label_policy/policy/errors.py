"""Errors that abort a remediation run."""


class RemediationError(Exception):
    """Base class for fatal remediation errors."""


class IssueFetchError(RemediationError):
    """Listing the repository's open issues failed."""


class CommentError(RemediationError):
    """Posting a remediation comment failed."""

    def __init__(self, message: str, issue_number: int):
        super().__init__(message)
        self.issue_number = issue_number


class LabelError(RemediationError):
    """Applying the default label failed while strict label checking is on."""

    def __init__(self, message: str, issue_number: int):
        super().__init__(message)
        self.issue_number = issue_number
