import functools
import logging
from typing import Any, Callable

logger = logging.getLogger(__name__)


def pipe(value: Any, *stages: Callable[[Any], Any]) -> Any:
    """
    Thread ``value`` through ``stages`` from left to right.

    ``pipe(x, f, g)`` is ``g(f(x))``. With no stages the value is returned as is.
    """
    logger.debug("pipe: applying %d stage(s)", len(stages))
    return functools.reduce(lambda acc, stage: stage(acc), stages, value)


def compose(*stages: Callable[[Any], Any]) -> Callable[[Any], Any]:
    """Build a single reusable stage that applies ``stages`` left to right."""
    logger.debug("compose: building stage from %d stage(s)", len(stages))

    def composed(value: Any) -> Any:
        return functools.reduce(lambda acc, stage: stage(acc), stages, value)

    return composed
