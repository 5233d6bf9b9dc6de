"""CLI for merge-config."""

import sys

import click
import structlog

from merge_config.config.logging import configure_logging
from merge_config.config.settings import get_settings
from merge_config.core.exceptions import TargetLabelError
from merge_config.labels.resolver import LabelResolver
from merge_config.loading.loader import read_and_validate_config

logger = structlog.get_logger(__name__)


def _load_or_exit(config_path: str | None):
    """Load the configuration, printing every error and exiting if invalid."""
    path = config_path or get_settings().config_path
    result = read_and_validate_config(path)
    if not result.ok:
        click.echo(f"Invalid merge configuration: {path}", err=True)
        for error in result.errors:
            click.echo(f"  - {error}", err=True)
        sys.exit(1)
    return result.config


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
def cli(verbose: bool) -> None:
    """merge-config: Validate merge configurations and resolve target labels."""
    settings = get_settings()
    log_level = "DEBUG" if verbose else settings.log_level
    configure_logging(log_level=log_level, log_format=settings.log_format)


@cli.command()
@click.argument("config_path", required=False)
def check(config_path: str | None) -> None:
    """Validate a merge configuration file."""
    config = _load_or_exit(config_path)

    click.echo("Configuration is valid")
    click.echo(f"  Project root:   {config.project_root}")
    click.echo(f"  Repository:     {config.repository.user}/{config.repository.name}")
    click.echo(f"  Target labels:  {len(config.labels)}")
    if config.github_api_merge is False:
        click.echo("  Merge strategy: autosquash (local)")
    else:
        click.echo(f"  Merge strategy: github api ({config.github_api_merge.default.value})")


@cli.command()
@click.argument("config_path", required=False)
@click.option("--label", "-l", "labels", multiple=True, help="Label attached to the pull request")
@click.option("--target-branch", "-b", required=True, help="Target branch selected in the Github UI")
def targets(config_path: str | None, labels: tuple[str, ...], target_branch: str) -> None:
    """Resolve the branches a pull request with the given labels merges into."""
    resolver = LabelResolver(_load_or_exit(config_path))

    categories = resolver.classify(labels)
    click.echo(f"CLA signed:     {'yes' if categories.cla_signed else 'no'}")
    click.echo(f"Merge ready:    {'yes' if categories.merge_ready else 'no'}")
    click.echo(f"Fixup message:  {'yes' if categories.commit_message_fixup else 'no'}")

    method = resolver.resolve_merge_method(labels)
    if method is not None:
        click.echo(f"Merge method:   {method.value}")

    try:
        match = resolver.match_target_label(labels)
        branches = resolver.branches_for(match.target_label, target_branch)
    except TargetLabelError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if match.shadowed:
        logger.warning(
            "Multiple target labels match the pull request, using the first one",
            selected=str(match.target_label.pattern),
            ignored=[str(label.pattern) for label in match.shadowed],
        )

    if not branches:
        click.echo(f"Target label {match.matched_label!r} resolves to no branches", err=True)
        sys.exit(1)

    click.echo(f"Target label:   {match.matched_label}")
    click.echo("Branches:")
    for branch in branches:
        click.echo(f"  - {branch}")


if __name__ == "__main__":
    cli()
