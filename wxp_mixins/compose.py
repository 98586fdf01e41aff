"""
Function helpers for the merge engine.

``compose`` follows the redux convention: functions run right to left, the
last one receives the original call arguments and every earlier one receives
the previous return value as its only argument.
"""

from __future__ import annotations

import inspect
import types
from typing import Any, Callable


def identity(arg: Any) -> Any:
    """Return ``arg`` unchanged."""
    return arg


def noop(*args: Any, **kwargs: Any) -> None:
    """Accept anything, do nothing."""
    return None


def compose(*funcs: Callable[..., Any]) -> Callable[..., Any]:
    """Compose functions from right to left.

    Args:
        *funcs: Functions to compose.

    Returns:
        ``identity`` for no functions, the function itself for one, and
        otherwise a callable evaluating ``f1(f2(...fN(*args, **kwargs)))``.

    Example:
        >>> compose(str, lambda x: x + 1)(1)
        '2'
    """
    if len(funcs) == 0:
        return identity

    if len(funcs) == 1:
        return funcs[0]

    last = funcs[-1]
    rest = funcs[:-1]

    def composed(*args: Any, **kwargs: Any) -> Any:
        result = last(*args, **kwargs)
        for func in reversed(rest):
            result = func(result)
        return result

    return composed


def bind(func: Callable[..., Any], instance: Any) -> Callable[..., Any]:
    """Bind a plain function to ``instance`` as its ``self``.

    Bound methods, builtins and callable objects are returned unchanged, as
    is everything when ``instance`` is None.
    """
    if instance is None or not inspect.isfunction(func):
        return func
    return types.MethodType(func, instance)
