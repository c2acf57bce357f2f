import logging
from collections.abc import Callable, Mapping

from vec2.vec import Vec2

LOGGER = logging.getLogger(__name__)

type BinaryOperation = Callable[[Vec2, Vec2], Vec2]

DEMO_OPERANDS = (Vec2(3, 4), Vec2(6, 14))

# order matters: this is the order the results are printed in
OPERATIONS: Mapping[str, BinaryOperation] = {
    "add": Vec2.add,
    "subtract": Vec2.subtract,
    "multiply": Vec2.multiply,
}


def demo_results(
    v1: Vec2 = DEMO_OPERANDS[0],
    v2: Vec2 = DEMO_OPERANDS[1],
    operations: Mapping[str, BinaryOperation] = OPERATIONS,
) -> list[Vec2]:
    results = []
    for name, operation in operations.items():
        result = operation(v1, v2)
        LOGGER.debug("%s %s %s = %s", v1, name, v2, result)
        results.append(result)
    return results


def demo_lines(
    v1: Vec2 = DEMO_OPERANDS[0],
    v2: Vec2 = DEMO_OPERANDS[1],
    operations: Mapping[str, BinaryOperation] = OPERATIONS,
) -> list[str]:
    return [str(result) for result in demo_results(v1, v2, operations)]


def run_demo(
    v1: Vec2 = DEMO_OPERANDS[0],
    v2: Vec2 = DEMO_OPERANDS[1],
    echo: Callable[[str], object] = print,
) -> list[Vec2]:
    """Print one `(x, y)` line per operation and return the results."""
    LOGGER.info("Running demo with %s and %s", v1, v2)
    results = demo_results(v1, v2)
    for result in results:
        echo(str(result))
    return results
