import logging

import click

from vec2.cli.common import Vec2Param
from vec2.demo import OPERATIONS
from vec2.vec import Vec2

LOGGER = logging.getLogger(__name__)


@click.command(context_settings={"ignore_unknown_options": True})
@click.argument("operation", type=click.Choice(list(OPERATIONS)))
@click.argument("v1", type=Vec2Param())
@click.argument("v2", type=Vec2Param())
def calc(operation: str, v1: Vec2, v2: Vec2) -> None:
    """Apply a single OPERATION to V1 and V2.

    Vectors look like '3,4' or '(3, 4)'. Negative components such as '-3,4' work as-is.
    """
    result = OPERATIONS[operation](v1, v2)
    LOGGER.info("%s %s %s = %s", v1, operation, v2, result)
    click.echo(str(result))
