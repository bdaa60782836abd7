from functools import wraps
from typing import Callable

_unset = object()


def run_once(func: Callable) -> Callable:
    """
    Cache the result of the first call of ``func``, e.g. the provider settings read from the stack config.

    ``reset()`` on the returned function drops the cached result. The undecorated function stays available as
    ``__wrapped__``.

    :param func: The decorated function
    """
    result = _unset

    @wraps(func)
    def wrapper(*args, **kwargs):
        nonlocal result

        if result is _unset:
            result = func(*args, **kwargs)

        return result

    def reset() -> None:
        nonlocal result
        result = _unset

    wrapper.reset = reset

    return wrapper
