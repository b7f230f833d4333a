"""excov CLI entry point."""

from __future__ import annotations

import json
import logging
import time
from pathlib import Path

import click

from excov import __version__

logger = logging.getLogger(__name__)

DEFAULT_CONFIG = Path("excov.yaml")

EXIT_MISSING = 1
EXIT_ERROR = 2


def _fail(message: str) -> click.ClickException:
    exc = click.ClickException(message)
    exc.exit_code = EXIT_ERROR
    return exc


@click.group()
@click.version_option(version=__version__)
@click.option("--config", "-c", type=click.Path(), default=None, help="Config file path")
@click.option("--log-level", default=None, help="Log level (overrides config)")
@click.option("--json-logs", is_flag=True, help="JSON log output")
@click.pass_context
def main(
    ctx: click.Context,
    config: str | None,
    log_level: str | None,
    json_logs: bool,
) -> None:
    """excov - find example configurations that have no tests."""
    from pydantic import ValidationError

    from excov.config.loader import load_config
    from excov.logging_config import setup_logging

    config_path = Path(config) if config else DEFAULT_CONFIG
    try:
        cfg = load_config(config_path)
    except (ValueError, ValidationError) as e:
        raise _fail(f"Invalid config {config_path}: {e}") from e

    setup_logging(
        level=log_level or cfg.logging.level,
        json_output=json_logs or cfg.logging.json_output,
    )
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path
    ctx.obj["config"] = cfg


@main.command()
@click.option("--examples-dir", "-e", type=click.Path(), default=None, help="Examples directory")
@click.option("--tests-dir", "-t", type=click.Path(), default=None, help="Tests directory")
@click.option("--filter", "-f", "name_filter", default=None, help="Substring selecting test file names")
@click.option("--workers", "-w", type=click.IntRange(min=1), default=None, help="Parallel file scanners")
@click.option("--keep-going", is_flag=True, help="Skip unreadable test files instead of failing")
@click.option(
    "--format", "fmt", type=click.Choice(["text", "json"]), default="text", help="Report format",
)
@click.pass_context
def check(
    ctx: click.Context,
    examples_dir: str | None,
    tests_dir: str | None,
    name_filter: str | None,
    workers: int | None,
    keep_going: bool,
    fmt: str,
) -> None:
    """Report examples that no test file references."""
    from excov.errors import ExcovError
    from excov.validation.reporter import format_report
    from excov.validation.validator import validate_examples

    cfg = ctx.obj["config"]
    if workers is not None:
        cfg.scan.workers = workers
    if keep_going:
        cfg.scan.fail_fast = False

    logger.info("========== Examples check starting ==========")
    start = time.time()
    try:
        result = validate_examples(cfg, examples_dir, tests_dir, name_filter)
    except ExcovError as e:
        raise _fail(str(e)) from e
    logger.info("========== Examples check completed (%.1fs) ==========", time.time() - start)

    click.echo(format_report(result, fmt))
    if result.missing:
        ctx.exit(EXIT_MISSING)


@main.command()
def schema() -> None:
    """Print the examples validation data source schema."""
    from excov.provider import PROVIDER_TYPE_NAME, CoverageProvider

    provider = CoverageProvider(version=__version__)
    out = {}
    for factory in provider.data_sources():
        data_source = factory()
        out[data_source.type_name(PROVIDER_TYPE_NAME)] = data_source.schema()
    click.echo(json.dumps(out, indent=2))


@main.command("config")
@click.pass_context
def show_config(ctx: click.Context) -> None:
    """Show the effective configuration."""
    import yaml

    cfg = ctx.obj["config"]
    click.echo(f"# excov v{__version__}")
    click.echo(f"# config: {ctx.obj['config_path']}")
    click.echo(yaml.safe_dump(cfg.model_dump(), sort_keys=False).rstrip())
