"""Run configuration for the label policy."""

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class PolicyConfig(BaseModel):
    """Immutable label policy configuration, built once per run.

    ``label_prefix`` and ``label_separator`` together name the required
    label namespace: prefix ``type`` with separator ``/`` requires some label
    starting with ``type/``.
    """

    model_config = ConfigDict(frozen=True)

    repo_owner: str = Field(..., min_length=1, description="Repository owner")
    repo_name: str = Field(..., min_length=1, description="Repository name")
    label_prefix: str = Field("type", description="Required label prefix")
    label_separator: str = Field("/", description="Separator following the prefix")
    only_milestone: bool = Field(
        False, description="Exempt issues that have no milestone"
    )
    assignees: frozenset[str] = Field(
        default_factory=frozenset,
        description="Only flag issues whose assignees all belong to this set",
    )
    add_label: bool = Field(
        False, description="Apply default_label before commenting"
    )
    default_label: str = Field(
        "type/unknown", description="Label applied when add_label is set"
    )
    dry_run: bool = Field(False, description="Report flagged issues only")
    strict_labels: bool = Field(
        False, description="Abort the run when applying the default label fails"
    )

    @field_validator("assignees", mode="before")
    @classmethod
    def _normalize_assignees(cls, value: object) -> object:
        # Each value may itself be a comma-separated list of logins
        if value is None:
            return frozenset()
        if isinstance(value, str):
            value = [value]
        if not isinstance(value, (list, tuple, set, frozenset)):
            return value
        logins: set[object] = set()
        for item in value:
            if isinstance(item, str):
                logins.update(part.strip() for part in item.split(",") if part.strip())
            else:
                logins.add(item)
        return frozenset(logins)

    @model_validator(mode="after")
    def _check_default_label(self) -> "PolicyConfig":
        if self.add_label and not self.default_label:
            raise ValueError("default_label is required when add_label is enabled")
        return self

    @property
    def required_prefix(self) -> str:
        """Prefix a label name must start with to satisfy the policy."""
        return f"{self.label_prefix}{self.label_separator}"

    @property
    def repository(self) -> str:
        return f"{self.repo_owner}/{self.repo_name}"
