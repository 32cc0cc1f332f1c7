"""Command-line entry for the provisioner."""

import logging
import sys

import click
import clicycle

from config import Config, get_config
from provisioner import __version__
from provisioner.cli.display.steps import display_status, display_step, display_summary
from provisioner.cli.themes import get_provisioning_theme
from provisioner.core import Provisioner
from provisioner.errors import PipelineAbortedError

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_run_log_handler: logging.FileHandler | None = None


def configure_logging(config: Config, verbose: bool = False):
    """Log warnings to the console and the whole run to a file in the temp dir."""
    global _run_log_handler

    level = config.runtime.console_level(verbose)
    logging.basicConfig(level=level, format=LOG_FORMAT)

    root = logging.getLogger()
    if _run_log_handler is not None:
        root.removeHandler(_run_log_handler)
        _run_log_handler.close()

    config.paths.temp_dir.mkdir(parents=True, exist_ok=True)
    file_handler = logging.FileHandler(config.log_file, encoding="utf-8")
    file_handler.setLevel(config.runtime.file_level(verbose))
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT))

    root.addHandler(file_handler)
    _run_log_handler = file_handler
    # The file handler needs INFO records even when the console shows only warnings
    root.setLevel(min(root.level, file_handler.level))
    for handler in root.handlers:
        if handler is not file_handler:
            handler.setLevel(level)


def _initialize_cli():
    """Configure theme and print the header."""
    clicycle.configure(app_name="tilewm-setup", width=80, theme=get_provisioning_theme())
    clicycle.header("SETUP", "Provision a tiling window manager desktop.")


def _run_pipeline(config: Config, dry_run: bool):
    if dry_run:
        clicycle.info("Dry run: presence checks only, nothing will be installed.")

    provisioner = Provisioner(config)
    try:
        report = provisioner.run(dry_run=dry_run, on_report=display_step)
    except PipelineAbortedError as e:
        if e.report is not None:
            display_summary(e.report)
        clicycle.error(str(e))
        clicycle.info(f"Log file: {config.log_file}")
        sys.exit(1)

    display_summary(report)
    clicycle.info(f"Log file: {config.log_file}")


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="tilewm-setup")
@click.option("--dry-run", is_flag=True, help="Show which steps would run without running them")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
@click.pass_context
def cli(ctx: click.Context, dry_run: bool, verbose: bool):
    """Install Chocolatey, Git, Rust, build tools, a browser, komorebi and yasb, then apply the theme."""
    config = get_config()
    configure_logging(config, verbose)
    _initialize_cli()

    if ctx.invoked_subcommand is None:
        _run_pipeline(config, dry_run)


@cli.command()
def status():
    """Show every step and whether it is already satisfied."""
    display_status(Provisioner(get_config()).status())
