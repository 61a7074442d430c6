"""CLI command for enforcing the label policy on open issues."""

import logging

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from ..github_client.client import GitHubClient
from ..policy.config import PolicyConfig
from ..policy.errors import RemediationError
from ..policy.remediator import RemediationResult, run
from .options import (
    ADD_LABEL_OPTION,
    ASSIGNEES_OPTION,
    DEFAULT_LABEL_OPTION,
    DRY_RUN_OPTION,
    LABEL_PREFIX_OPTION,
    LABEL_SEPARATOR_OPTION,
    ONLY_MILESTONE_OPTION,
    OWNER_OPTION,
    REPO_OPTION,
    STRICT_LABELS_OPTION,
    TIMEOUT_OPTION,
    TOKEN_OPTION,
    VERBOSE_OPTION,
)

console = Console()


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(show_path=False)],
    )


def _print_summary(result: RemediationResult, dry_run: bool) -> None:
    if not result.flagged:
        console.print("✅ [green]All open issues satisfy the label policy[/green]")
        return

    if dry_run:
        console.print(
            f"📋 [blue]Dry run: {len(result.flagged)} issue(s) would be "
            f"remediated[/blue]"
        )
        return

    console.print(
        f"📊 [blue]Flagged {len(result.flagged)}, labeled {len(result.labeled)}, "
        f"commented {len(result.commented)}[/blue]"
    )


def enforce(
    owner: str | None = OWNER_OPTION,
    repo: str | None = REPO_OPTION,
    label_prefix: str = LABEL_PREFIX_OPTION,
    label_separator: str = LABEL_SEPARATOR_OPTION,
    only_milestone: bool = ONLY_MILESTONE_OPTION,
    assignees: list[str] | None = ASSIGNEES_OPTION,
    add_label: bool = ADD_LABEL_OPTION,
    default_label: str = DEFAULT_LABEL_OPTION,
    strict_labels: bool = STRICT_LABELS_OPTION,
    dry_run: bool = DRY_RUN_OPTION,
    token: str | None = TOKEN_OPTION,
    timeout: int = TIMEOUT_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """Flag open issues missing a label under the required prefix.

    Every open issue (pull requests excluded) must carry a label starting with
    PREFIX + SEPARATOR. Violating issues get an explanatory comment, and with
    --add-label the default label is applied first.

    Examples:
        # Preview which issues violate the policy
        label-policy enforce --owner myorg --repo myrepo --dry-run

        # Require "kind/" labels, auto-labeling violators with kind/triage
        label-policy enforce -o myorg -r myrepo -p kind \
            --add-label --default-label kind/triage

        # Only check milestoned issues assigned to the core team
        label-policy enforce -o myorg -r myrepo --only-milestone \
            -a alice -a bob
    """
    _configure_logging(verbose)

    if not owner:
        console.print("❌ [red]Error: --owner is required[/red]")
        raise typer.Exit(1)

    if not repo:
        console.print("❌ [red]Error: --repo is required[/red]")
        raise typer.Exit(1)

    try:
        config = PolicyConfig(
            repo_owner=owner,
            repo_name=repo,
            label_prefix=label_prefix,
            label_separator=label_separator,
            only_milestone=only_milestone,
            assignees=assignees or [],
            add_label=add_label,
            default_label=default_label,
            dry_run=dry_run,
            strict_labels=strict_labels,
        )
    except ValidationError as e:
        console.print(
            f"❌ [red]Error: invalid configuration: {escape(str(e))}[/red]"
        )
        raise typer.Exit(1)

    console.print(
        f"🔍 [blue]Checking open issues in {escape(config.repository)} for a "
        f"'{escape(config.required_prefix)}' label[/blue]"
    )
    if dry_run:
        console.print(
            "⚠️  [yellow]Dry run enabled - no labels or comments will be "
            "posted[/yellow]"
        )

    try:
        client = GitHubClient(token=token, timeout=timeout)
        result = run(client, config)
    except KeyboardInterrupt:
        console.print("\n❌ [yellow]Operation cancelled by user[/yellow]")
        raise typer.Exit(1)
    except (RemediationError, ValueError) as e:
        console.print(f"❌ [red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    _print_summary(result, dry_run)
