import click

from vec2.cli.common import Vec2Param
from vec2.demo import DEMO_OPERANDS, run_demo
from vec2.vec import Vec2


@click.command()
@click.option(
    "--v1",
    type=Vec2Param(),
    default=str(DEMO_OPERANDS[0]),
    show_default=True,
    help="Left-hand operand.",
)
@click.option(
    "--v2",
    type=Vec2Param(),
    default=str(DEMO_OPERANDS[1]),
    show_default=True,
    help="Right-hand operand.",
)
def demo(v1: Vec2, v2: Vec2) -> None:
    """Add, subtract and multiply two vectors, printing one result per line."""
    run_demo(v1, v2, echo=click.echo)
