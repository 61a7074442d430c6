"""Pydantic models for the GitHub issue data the label policy reads.

Fields follow GitHub's REST API v3 issue listing response.
API Reference: https://docs.github.com/en/rest/issues/issues#list-repository-issues

Models are frozen: an issue is a snapshot taken at fetch time and is never
re-fetched or mutated during a run.
"""

from pydantic import BaseModel, ConfigDict, Field


class GitHubUser(BaseModel):
    """GitHub user account (issue assignee).

    API Reference: https://docs.github.com/en/rest/users/users
    """

    model_config = ConfigDict(frozen=True)

    login: str = Field(..., description="GitHub username/login (string)")
    id: int | None = Field(None, description="Unique user identifier (integer)")


class GitHubLabel(BaseModel):
    """GitHub label attached to an issue.

    API Reference: https://docs.github.com/en/rest/issues/labels
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Name of the label (string)")
    color: str | None = Field(
        None, description="Hexadecimal color code without leading # (string)"
    )
    description: str | None = Field(
        None, description="Short description of the label (string, max 100 characters)"
    )


class GitHubMilestone(BaseModel):
    """Milestone an issue is grouped under.

    API Reference: https://docs.github.com/en/rest/issues/milestones
    """

    model_config = ConfigDict(frozen=True)

    number: int = Field(..., description="Milestone number within the repository")
    title: str = Field(..., description="Milestone title (string)")


class GitHubPullRequestRef(BaseModel):
    """Pull request marker present on issue records that are really pull requests.

    The issues listing endpoint returns pull requests alongside issues; the
    ``pull_request`` key is the only thing telling them apart.
    """

    model_config = ConfigDict(frozen=True)

    url: str | None = Field(None, description="API URL of the pull request")


class GitHubIssue(BaseModel):
    """GitHub issue (or pull request) as returned by the issues listing.

    API Reference: https://docs.github.com/en/rest/issues/issues
    """

    model_config = ConfigDict(frozen=True)

    number: int = Field(..., description="Issue number within the repository (integer)")
    title: str = Field("", description="Short description/title of the issue (string)")
    html_url: str | None = Field(None, description="Browser URL of the issue")
    labels: list[GitHubLabel] = Field(
        default_factory=list, description="Ordered labels attached to the issue"
    )
    milestone: GitHubMilestone | None = Field(
        None, description="Milestone the issue belongs to, if any"
    )
    pull_request: GitHubPullRequestRef | None = Field(
        None, description="Set when the record is a pull request, not an issue"
    )
    assignees: list[GitHubUser] = Field(
        default_factory=list, description="Accounts assigned to the issue"
    )

    @property
    def is_pull_request(self) -> bool:
        return self.pull_request is not None

    @property
    def assignee_logins(self) -> list[str]:
        return [assignee.login for assignee in self.assignees]
