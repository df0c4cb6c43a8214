"""
Data-last, curry-capable operations.

Every public operation takes its configuration first and the color value last.
Decorating the eager implementation with ``data_last(n)`` gives it both
calling forms:

>>> @data_last(1)
... def scale(factor, value):
...     return value * factor
>>> scale(2, 21)
42
>>> double = scale(2)
>>> double(21)
42

The number of configuration arguments is declared up front, so the choice
between the two forms is a plain count of positional arguments.
"""
import functools
from typing import Callable, Optional


def data_last(n_config: int, validate: Optional[Callable[..., None]] = None):
    """
    Make ``func(*config, value)`` callable as ``func(*config)(value)`` too.

    Args:
        n_config: Number of configuration arguments preceding the value
        validate: Optional check run on the configuration arguments as soon
            as they are supplied, so a bad stage fails when it is built
            rather than when the pipeline runs

    Returns:
        Decorator
    """
    def decorator(func):
        @functools.wraps(func)
        def wrapper(*args):
            if len(args) == n_config:
                if validate is not None:
                    validate(*args)
                stage = functools.partial(func, *args)
                functools.update_wrapper(stage, func)
                return stage
            if len(args) == n_config + 1:
                if validate is not None:
                    validate(*args[:n_config])
                return func(*args)
            raise TypeError(
                f"{func.__name__}() takes {n_config} configuration argument(s) "
                f"and an optional value, got {len(args)} argument(s)"
            )
        wrapper.n_config = n_config
        return wrapper
    return decorator
