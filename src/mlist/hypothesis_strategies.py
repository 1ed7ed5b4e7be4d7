from typing import Callable, Optional, Tuple, TypeVar, Union

from . import io, maybe, trampoline
from .mlist import Cons, MList, Nil, from_iterable
from .protocols import Value

try:
    from hypothesis.strategies import (
        booleans,
        builds,
        composite,
        floats,
        integers,
        just,
        lists,
        one_of,
        text,
        SearchStrategy
    )
except ImportError:
    raise ImportError(
        'Could not import hypothesis. To use mlist.hypothesis_strategies, '
        'install mlist with \n\n\tpip install mlist[test]'
    )

A = TypeVar('A')


def _everything(allow_nan: bool = False) -> Tuple[SearchStrategy[int],
                                                  SearchStrategy[bool],
                                                  SearchStrategy[str],
                                                  SearchStrategy[float]]:
    return integers(), booleans(), text(), floats(allow_nan=allow_nan)


def anything(allow_nan: bool = False
             ) -> SearchStrategy[Union[int, bool, str, float]]:
    """
    Create a search strategy that produces one of int, bool, str or floats.

    Args:
        allow_nan: whether to allow nan values
    Return:
        Search strategy that produces ints, bools, str or floats
    """
    return one_of(*_everything(allow_nan))


def unaries(return_strategy: SearchStrategy[A]
            ) -> SearchStrategy[Callable[[object], A]]:
    """
    Create a search strategy that produces functions of 1 argument

    Example:
        >>> f = unaries(integers()).example()
        >>> f(None)
        2

    Args:
        return_strategy: strategy used to draw return values
    Return:
        Search strategy that produces callables of 1 argument
    """
    @composite
    def _(draw):
        a: A = draw(return_strategy)
        return lambda _: a

    return _()


def maybes(value_strategy: SearchStrategy[A]
           ) -> SearchStrategy[maybe.Maybe[A]]:
    """
    Create a search strategy that produces `mlist.maybe.Maybe` values

    Example:
        >>> maybes(integers()).example()
        Just(1)

    Args:
        value_strategy: search strategy to draw values from
    Return:
        search strategy that produces `mlist.maybe.Maybe` values
    """
    justs = builds(maybe.Just, value_strategy)
    nothings = just(maybe.Nothing())
    return one_of(justs, nothings)


def trampolines(value_strategy: SearchStrategy[A]
                ) -> SearchStrategy[trampoline.Trampoline[A]]:
    """
    Create a strategy that produces `mlist.trampoline.Trampoline` instances

    Example:
        >>> trampolines(integers()).example()
        Call(thunk=<function ... at 0x1083d2d40>)

    Args:
        value_strategy: strategy used to draw result values
    Return:
        search strategy that produces `mlist.trampoline.Trampoline` instances
    """
    dones = builds(trampoline.Done, value_strategy)

    @composite
    def call(draw):
        t = draw(trampolines(value_strategy))
        return trampoline.Call(lambda: t)

    @composite
    def and_then(draw):
        t = draw(trampolines(value_strategy))
        cont = lambda _: t  # noqa
        return trampoline.AndThen(draw(trampolines(value_strategy)), cont)

    return one_of(dones, call(), and_then())


def ios(value_strategy: SearchStrategy[A]) -> SearchStrategy[io.IO[A]]:
    """
    Create a strategy that produces `mlist.io.IO` actions

    Example:
        >>> ios(integers()).example().run()
        0

    Args:
        value_strategy: strategy used to draw result values
    Return:
        search strategy that produces `mlist.io.IO` actions
    """
    values = builds(io.value, value_strategy)

    @composite
    def and_then(draw):
        action = draw(ios(value_strategy))
        cont = draw(unaries(ios(value_strategy)))
        return action.and_then(cont)

    return one_of(values, and_then())


def mlists(elements: SearchStrategy[A],
           value: Value = trampoline.value,
           min_size: int = 0,
           max_size: Optional[int] = None) -> SearchStrategy[MList[A]]:
    """
    Create a search strategy that produces finite `MList` instances
    whose tails are lifted with `value`

    Example:
        >>> xs = mlists(integers()).example()
        >>> to_tuple(trampoline.value, xs).run()
        (0, 3)

    Args:
        elements: strategy used to draw elements of the list
        value: pure lift of the effect type of the tails
        min_size: minimum length of the lists
        max_size: maximum length of the lists
    Return:
        search strategy that produces `MList` instances
    """
    return lists(
        elements, min_size=min_size, max_size=max_size
    ).map(from_iterable(value))


def conses(elements: SearchStrategy[A],
           value: Value = trampoline.value,
           max_size: Optional[int] = None) -> SearchStrategy[Cons[A]]:
    """
    Create a search strategy that produces non-empty `MList` instances

    Args:
        elements: strategy used to draw elements of the list
        value: pure lift of the effect type of the tails
        max_size: maximum length of the lists
    Return:
        search strategy that produces `Cons` instances
    """
    return mlists(elements, value, min_size=1, max_size=max_size)


def nils() -> SearchStrategy[Nil]:
    """
    Create a search strategy that produces `Nil`

    Return:
        search strategy that produces `Nil()`
    """
    return just(Nil())


__all__ = [
    'anything',
    'unaries',
    'maybes',
    'trampolines',
    'ios',
    'mlists',
    'conses',
    'nils'
]
