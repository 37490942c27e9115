"""Add-in Validator - command line entry point."""

import logging
import os
import sys

import click
import structlog
from dotenv import load_dotenv
from rich.panel import Panel

from . import __version__
from .config import DEFAULT_ENDPOINT, ServiceConfig
from .reporting import make_console
from .schemas import ValidationOutcome
from .tools import ValidationServiceClient
from .validator import validate_manifest_sync

EXIT_CODES = {
    ValidationOutcome.PASSED.value: 0,
    ValidationOutcome.FAILED.value: 1,
}
EXIT_ERROR = 2


def configure_logging(verbose: bool) -> None:
    """Structured JSON logs on stderr; the report itself goes to stdout."""
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.INFO if verbose else logging.WARNING
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


@click.group()
@click.version_option(version=__version__)
def cli():
    """Add-in Validator - check add-in manifests against the validation service."""
    pass


@cli.command()
@click.argument("manifest", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--endpoint",
    default=None,
    help="Validation service URI (default: $ADDIN_VALIDATOR_ENDPOINT or the public service)",
)
@click.option("--no-color", is_flag=True, help="Disable colored output")
@click.option("--verbose", is_flag=True, help="Enable verbose logging")
def validate(manifest: str, endpoint: str | None, no_color: bool, verbose: bool):
    """Validate MANIFEST and print the service's report."""
    load_dotenv()
    configure_logging(verbose)

    config = ServiceConfig(
        endpoint=endpoint or os.getenv("ADDIN_VALIDATOR_ENDPOINT", DEFAULT_ENDPOINT)
    )
    console = make_console(no_color=no_color)

    result = validate_manifest_sync(
        manifest,
        service=ValidationServiceClient(config),
        console=console,
    )
    sys.exit(EXIT_CODES.get(result, EXIT_ERROR))


@cli.command()
def version():
    """Show version information."""
    make_console().print(
        Panel(
            "[bold]Add-in Validator[/bold]\n"
            f"Version: {__version__}\n"
            f"Service: {DEFAULT_ENDPOINT}",
            border_style="cyan",
        )
    )


def run():
    """Console script entry point."""
    try:
        cli.main(standalone_mode=False)
    except click.ClickException as e:
        e.show()
        sys.exit(e.exit_code)
    except (click.exceptions.Abort, KeyboardInterrupt):
        make_console().print("\n[yellow]Interrupted by user[/yellow]")
        sys.exit(130)


if __name__ == "__main__":
    run()
