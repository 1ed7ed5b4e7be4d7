import functools
import inspect
from typing import Any, Callable, Generic, Tuple, TypeVar

from .immutable import Immutable

A = TypeVar('A')
B = TypeVar('B')


def identity(v: A) -> A:
    """
    The identity function. Just gives back its argument

    Example:
        >>> identity('value')
        'value'

    Args:
        v: The value to get back

    Return:
        `v`
    """
    return v


class Always(Generic[A], Immutable):
    value: A

    def __call__(self, *args, **kwargs) -> A:
        return self.value


def always(value: A) -> Callable[..., A]:
    """
    Get a function that ignores its arguments and returns `value`

    Example:
        >>> f = always(0)
        >>> f('ignored')
        0

    Args:
        value: The value to return

    Return:
        function that always returns `value`
    """
    return Always(value)


class Composition(Immutable):
    functions: Tuple[Callable, ...]

    def __call__(self, *args, **kwargs):
        first, *rest = reversed(self.functions)
        result = first(*args, **kwargs)
        for f in rest:
            result = f(result)
        return result


def compose(
    f: Callable[[Any], Any],
    g: Callable[[Any], Any],
    *functions: Callable[[Any], Any]
) -> Callable[[Any], Any]:
    """
    Compose functions from left to right

    Example:
        >>> f = lambda v: v * 2
        >>> g = compose(str, f)
        >>> g(3)
        "6"

    Args:
        f: the outermost function in the composition
        g: the function to be composed with f
        functions: functions to be composed with `f` \
            and `g` from left to right

    Return:
        `f` composed with `g` composed with `functions` from left to right
    """
    return Composition((f, g) + functions)


class Curry:
    _f: Callable

    def __init__(self, f: Callable):
        functools.wraps(f)(self)
        self._f = f  # type: ignore

    def __repr__(self):
        return repr(self._f)

    def __call__(self, *args, **kwargs):
        signature = inspect.signature(self._f)
        bound = signature.bind_partial(*args, **kwargs)
        bound.apply_defaults()
        if set(signature.parameters) - set(bound.arguments) == set():
            return self._f(*args, **kwargs)
        return Curry(functools.partial(self._f, *args, **kwargs))


def curry(f: Callable) -> Callable:
    """
    Get a version of ``f`` that can be partially applied. All `MList`
    operations that need the pure lift of an effect are curried this
    way, so the lift can be bound once

    Example:
        >>> from mlist import trampoline
        >>> to_tuple_ = to_tuple(trampoline.value)
        >>> to_tuple_(from_iterable(trampoline.value, range(3))).run()
        (0, 1, 2)

    Args:
        f: The function to curry
    Returns:
        Curried version of ``f``
    """
    @functools.wraps(f)
    def decorator(*args, **kwargs):
        return Curry(f)(*args, **kwargs)

    return decorator


__all__ = ['curry', 'always', 'compose', 'identity']
