from pathlib import Path

import click

from vec2.cli.calc import calc
from vec2.cli.demo import demo
from vec2.logging_config import DEFAULT_LOG_DIR, configure_logging


@click.group()
@click.option(
    "--log-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=DEFAULT_LOG_DIR,
    help="Directory for debug.log and info.log.",
)
def cli(log_dir: Path) -> None:
    """Two-dimensional vector arithmetic."""
    configure_logging(log_dir)


cli.add_command(demo)
cli.add_command(calc)
