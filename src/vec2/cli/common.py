import click

from vec2.exceptions import InvalidVectorError
from vec2.vec import Vec2


class Vec2Param(click.ParamType):
    name = "vector"

    def convert(
        self,
        value: str | Vec2,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> Vec2:
        if isinstance(value, Vec2):
            return value

        try:
            return Vec2.parse(value)
        except InvalidVectorError as e:
            msg = f"{e}. Expected two numbers, e.g. '3,4' or '(3, 4)'."
            raise click.BadParameter(msg, ctx=ctx, param=param) from e
