"""Standardized CLI option definitions for consistent shorthand mappings.

Every option can also be supplied through an environment variable so the
command runs unattended from CI or a scheduled job.
"""

import typer

# Repository options
OWNER_OPTION = typer.Option(
    None,
    "--owner",
    "-o",
    envvar="LABEL_POLICY_REPO_OWNER",
    help="Repository owner (user or organization)",
)

REPO_OPTION = typer.Option(
    None, "--repo", "-r", envvar="LABEL_POLICY_REPO_NAME", help="Repository name"
)

# Policy options
LABEL_PREFIX_OPTION = typer.Option(
    "type",
    "--label-prefix",
    "-p",
    envvar="LABEL_POLICY_LABEL_PREFIX",
    help="Prefix every issue must carry a label under",
)

LABEL_SEPARATOR_OPTION = typer.Option(
    "/",
    "--label-separator",
    envvar="LABEL_POLICY_LABEL_SEPARATOR",
    help="Separator between the prefix and the rest of the label",
)

ONLY_MILESTONE_OPTION = typer.Option(
    False,
    "--only-milestone",
    envvar="LABEL_POLICY_ONLY_MILESTONE",
    help="Only check issues that belong to a milestone",
)

ASSIGNEES_OPTION = typer.Option(
    None,
    "--assignee",
    "-a",
    envvar="LABEL_POLICY_ASSIGNEES",
    help=(
        "Only check issues whose assignees are all in this list "
        "(can be used multiple times or comma-separated)"
    ),
)

# Remediation options
ADD_LABEL_OPTION = typer.Option(
    False,
    "--add-label/--no-add-label",
    envvar="LABEL_POLICY_ADD_LABEL",
    help="Apply the default label before commenting",
)

DEFAULT_LABEL_OPTION = typer.Option(
    "type/unknown",
    "--default-label",
    envvar="LABEL_POLICY_DEFAULT_LABEL",
    help="Label applied when --add-label is set",
)

STRICT_LABELS_OPTION = typer.Option(
    False,
    "--strict-labels",
    envvar="LABEL_POLICY_STRICT_LABELS",
    help="Abort the run if the default label cannot be applied",
)

# Behavior options
DRY_RUN_OPTION = typer.Option(
    False,
    "--dry-run",
    "-d",
    envvar="LABEL_POLICY_DRY_RUN",
    help="Report violating issues without labeling or commenting",
)

VERBOSE_OPTION = typer.Option(False, "--verbose", "-v", help="Enable debug logging")

# Authentication options
TOKEN_OPTION = typer.Option(
    None,
    "--token",
    "-t",
    envvar="GITHUB_TOKEN",
    help="GitHub API token (defaults to GITHUB_TOKEN env var)",
    show_envvar=False,
)

TIMEOUT_OPTION = typer.Option(
    15,
    "--timeout",
    envvar="LABEL_POLICY_TIMEOUT",
    help="HTTP timeout in seconds for GitHub API calls",
)
