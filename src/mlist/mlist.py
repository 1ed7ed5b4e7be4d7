from abc import ABC, abstractmethod
from functools import reduce
from typing import (Any, Callable, Generic, Iterable, Optional, Tuple,
                    TypeVar, Union)

from .functions import curry
from .immutable import Immutable
from .maybe import Just, Maybe, Nothing
from .protocols import Effect, Value

A = TypeVar('A')
B = TypeVar('B')
C = TypeVar('C')
S = TypeVar('S')


class EmptyMListError(IndexError):
    """
    Raised when an operation that needs at least one element
    (`head`, `tail`, `last`, `init`, `cycle`) is given `Nil`
    """
    pass


class MList_(Immutable, ABC):
    """
    Abstract super class of `MList` nodes. Use `Nil` and `Cons` instead.

    An `MList` is a list whose tail is produced by an effect: the head
    of a `Cons` node is an ordinary value, and its ``tail`` is a nullary
    function returning an effect that produces the next node when run.
    This makes it possible to describe infinite or I/O driven sequences,
    e.g a stream of sensor readings, and consume them one element at a
    time:

    Example:
        >>> from mlist import io
        >>> @io.io
        ... def read_sensor() -> float:
        ...     return adc.read(0)
        >>> def readings() -> io.IO[MList[float]]:
        ...     return read_sensor().map(lambda r: Cons(r, readings))
        >>> readings().and_then(
        ...     lambda rs: to_tuple(io.value, take(io.value, 3, rs))
        ... ).run()
        (0.41, 0.42, 0.40)

    Nodes hold no cache: traversing the same node twice runs its tail
    effects twice. Use `memoize` when that is not wanted.
    """
    @abstractmethod
    def __bool__(self) -> bool:
        raise NotImplementedError()


class Nil(MList_):
    """
    The empty `MList`
    """
    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return 'Nil()'


class Cons(MList_, Generic[A]):
    """
    An `MList` node with an element
    """
    head: A
    """
    The element of this node
    """
    tail: Callable[[], Effect['MList[A]']]
    """
    Nullary function returning the effect that produces the next node
    """

    def __bool__(self) -> bool:
        return True

    def __repr__(self) -> str:
        return f'Cons({repr(self.head)}, ...)'


MList = Union[Nil, Cons[A]]
"""
Type-alias for `Union[Nil, Cons[TypeVar('A')]]`
"""


def _resolved(value: Value,
              xs: 'MList[A]') -> Callable[[], Effect['MList[A]']]:
    return lambda: value(xs)


def nil() -> Nil:
    """
    Create the empty `MList`

    Example:
        >>> nil()
        Nil()

    Return:
        `Nil()`
    """
    return Nil()


@curry
def cons(head: A, tail: Callable[[], Effect[MList[A]]]) -> Cons[A]:
    """
    Create an `MList` node from an element and a nullary function
    producing the effect of the rest of the list

    Example:
        >>> from mlist import trampoline
        >>> xs = cons(1, lambda: trampoline.value(nil()))
        >>> to_tuple(trampoline.value, xs).run()
        (1,)

    Args:
        head: the first element
        tail: function returning the effect of the remaining nodes
    Return:
        `Cons(head, tail)`
    """
    return Cons(head, tail)


@curry
def from_iterable(value: Value, iterable: Iterable[A]) -> MList[A]:
    """
    Lift a finite iterable into an `MList` whose tails are all
    trivial effects created with `value`

    Example:
        >>> from mlist import trampoline
        >>> xs = from_iterable(trampoline.value, [1, 2, 3])
        >>> head(xs)
        1

    Args:
        value: pure lift of the effect type of the tails
        iterable: the (finite) elements of the list
    Return:
        `MList` with the elements of `iterable`
    """
    xs: MList[A] = Nil()
    for x in reversed(tuple(iterable)):
        xs = Cons(x, _resolved(value, xs))
    return xs


@curry
def to_tuple(value: Value, xs: MList[A]) -> Effect[Tuple[A, ...]]:
    """
    Run all the tail effects of `xs` and collect the elements.
    Does not terminate if `xs` is infinite; use `take` or `take_while`
    first

    Example:
        >>> from mlist import trampoline
        >>> xs = from_iterable(trampoline.value, range(3))
        >>> to_tuple(trampoline.value, xs).run()
        (0, 1, 2)

    Args:
        value: pure lift of the effect type of the tails
        xs: the list to materialize
    Return:
        effect producing the elements of `xs` in order
    """
    return _foldl(value, lambda acc, x: value((x, acc)), None,
                  xs).map(_unwind)


def _unwind(stack: Optional[Tuple[A, Any]]) -> Tuple[A, ...]:
    items = []
    while stack is not None:
        x, stack = stack
        items.append(x)
    return tuple(reversed(items))


@curry
def append(xs: MList[A], ys: MList[A]) -> MList[A]:
    """
    Concatenate two `MList`. The tail effects of `xs` run before
    `ys` is reached

    Example:
        >>> from mlist import trampoline
        >>> xs = from_iterable(trampoline.value, [1, 2])
        >>> ys = from_iterable(trampoline.value, [3])
        >>> to_tuple(trampoline.value, append(xs, ys)).run()
        (1, 2, 3)

    Args:
        xs: the first list
        ys: the list to continue with when `xs` is exhausted
    Return:
        `xs` followed by `ys`
    """
    return _concat(xs, lambda: ys)


def _concat(xs: MList[A], rest: Callable[[], MList[A]]) -> MList[A]:
    if not xs:
        return rest()
    return Cons(
        xs.head, lambda: xs.tail().map(lambda ys: _concat(ys, rest))
    )


@curry
def show(value: Value, xs: MList[A]) -> Effect[str]:
    """
    Render the elements of `xs` with `repr`, separated by ``', '`` like
    the `repr` of a Python list (``[1, 2, 3]``, not ``[1,2,3]``).
    Strict: runs all tail effects of `xs`

    Example:
        >>> from mlist import trampoline
        >>> show(trampoline.value, from_iterable(trampoline.value, 'ab')).run()
        "['a', 'b']"

    Args:
        value: pure lift of the effect type of the tails
        xs: the list to render
    Return:
        effect producing the rendered list
    """
    return to_tuple(value, xs).map(
        lambda items: '[' + ', '.join(repr(x) for x in items) + ']'
    )


class _MemoizedTail:
    def __init__(self, value: Value, tail: Callable[[], Effect[MList]]):
        self._value = value
        self._tail = tail
        self._done = False
        self._node: MList = Nil()

    def _store(self, ys: MList) -> MList:
        if not self._done:
            self._node = memoize(self._value, ys)
            self._done = True
        return self._node

    def _resolve(self, _: None) -> Effect[MList]:
        if self._done:
            return self._value(self._node)
        return self._tail().map(self._store)

    def __call__(self) -> Effect[MList]:
        # the cache is consulted when the effect runs, not when it is built
        return self._value(None).and_then(self._resolve)


@curry
def memoize(value: Value, xs: MList[A]) -> MList[A]:
    """
    Wrap `xs` so that each of its tail effects runs at most once.
    The first traversal runs the effects; later traversals reuse the
    resolved nodes through `value`

    Example:
        >>> from mlist import io
        >>> xs = memoize(io.value, readings_from_sensor)
        >>> first = to_tuple(io.value, take(io.value, 2, xs)).run()
        >>> second = to_tuple(io.value, take(io.value, 2, xs)).run()
        >>> first == second
        True

    Args:
        value: pure lift of the effect type of the tails
        xs: the list to memoize
    Return:
        `xs` with cached tails
    """
    if not xs:
        return xs
    return Cons(xs.head, _MemoizedTail(value, xs.tail))


def is_empty(xs: MList[A]) -> bool:
    """
    Test whether `xs` is `Nil`. Runs no effects

    Example:
        >>> is_empty(nil())
        True

    Args:
        xs: the list to test
    Return:
        `True` if `xs` is `Nil`, `False` otherwise
    """
    return not xs


def head(xs: MList[A]) -> A:
    """
    Get the first element of `xs`. Runs no effects

    Example:
        >>> from mlist import trampoline
        >>> head(iterate(lambda n: trampoline.value(n + 1), 0))
        0

    Args:
        xs: the list
    Return:
        the first element
    Raises:
        EmptyMListError: if `xs` is `Nil`
    """
    if not xs:
        raise EmptyMListError('head of empty MList')
    return xs.head


def tail(xs: MList[A]) -> Effect[MList[A]]:
    """
    Get the effect producing the rest of `xs`. Running the effect
    advances one step

    Args:
        xs: the list
    Return:
        effect producing the node after the head of `xs`
    Raises:
        EmptyMListError: if `xs` is `Nil`
    """
    if not xs:
        raise EmptyMListError('tail of empty MList')
    return xs.tail()


def maybe_head(xs: MList[A]) -> Maybe[A]:
    """
    Get the first element of `xs` if there is one

    Example:
        >>> maybe_head(nil())
        Nothing()

    Args:
        xs: the list
    Return:
        `Just` the first element, or `Nothing` if `xs` is `Nil`
    """
    if not xs:
        return Nothing()
    return Just(xs.head)


@curry
def last(value: Value, xs: MList[A]) -> Effect[A]:
    """
    Get the last element of `xs`. Runs every tail effect, so it does
    not terminate if `xs` is infinite

    Example:
        >>> from mlist import trampoline
        >>> last(trampoline.value, from_iterable(trampoline.value, 'abc')).run()
        'c'

    Args:
        value: pure lift of the effect type of the tails
        xs: the list
    Return:
        effect producing the last element
    Raises:
        EmptyMListError: if `xs` is `Nil`
    """
    if not xs:
        raise EmptyMListError('last of empty MList')
    return _last(value, xs)


def _last(value: Value, xs: Cons[A]) -> Effect[A]:
    return xs.tail().and_then(
        lambda ys: _last(value, ys) if ys else value(xs.head)
    )


@curry
def maybe_last(value: Value, xs: MList[A]) -> Effect[Maybe[A]]:
    """
    Get the last element of `xs` if there is one

    Example:
        >>> from mlist import trampoline
        >>> maybe_last(trampoline.value, nil()).run()
        Nothing()

    Args:
        value: pure lift of the effect type of the tails
        xs: the list
    Return:
        effect producing `Just` the last element, or `Nothing`
    """
    if not xs:
        return value(Nothing())
    return _last(value, xs).map(Just)


def init(xs: MList[A]) -> Effect[MList[A]]:
    """
    Get all elements of `xs` except the last. Each node of the result
    is produced one step behind `xs`: it is only known to be part of
    the result once the following node of `xs` has been produced

    Example:
        >>> from mlist import trampoline
        >>> xs = from_iterable(trampoline.value, [1, 2, 3])
        >>> init(xs).and_then(to_tuple(trampoline.value)).run()
        (1, 2)

    Args:
        xs: the list
    Return:
        effect producing `xs` without its last element
    Raises:
        EmptyMListError: if `xs` is `Nil`
    """
    if not xs:
        raise EmptyMListError('init of empty MList')
    return _init(xs)


def _init(xs: Cons[A]) -> Effect[MList[A]]:
    return xs.tail().map(
        lambda ys: Cons(xs.head, lambda: _init(ys)) if ys else Nil()
    )


@curry
def length(value: Value, xs: MList[A]) -> Effect[int]:
    """
    Count the elements of `xs`. Does not terminate if `xs` is infinite

    Example:
        >>> from mlist import trampoline
        >>> length(trampoline.value, from_iterable(trampoline.value, 'abc')).run()
        3

    Args:
        value: pure lift of the effect type of the tails
        xs: the list
    Return:
        effect producing the number of elements
    """
    return _foldl(value, lambda n, _: value(n + 1), 0, xs)


@curry
def map_m(value: Value, f: Callable[[A], Effect[B]],
          xs: MList[A]) -> Effect[MList[B]]:
    """
    Map an effectful function over `xs`. `f` is run on the head right
    away; for every later element it runs when that element is demanded

    Example:
        >>> from mlist import io
        >>> xs = from_iterable(io.value, [1, 2])
        >>> map_m(io.value, lambda x: io.value(x * 2), xs).and_then(
        ...     to_tuple(io.value)
        ... ).run()
        (2, 4)

    Args:
        value: pure lift of the effect type of the tails
        f: effectful function to apply to each element
        xs: the list to map over
    Return:
        effect producing the mapped list
    """
    return _map_m(value, f, xs)


def _map_m(value: Value, f: Callable[[A], Effect[B]],
           xs: MList[A]) -> Effect[MList[B]]:
    if not xs:
        return value(Nil())
    return f(xs.head).map(
        lambda y: Cons(
            y, lambda: xs.tail().and_then(lambda ys: _map_m(value, f, ys))
        )
    )


@curry
def map_(f: Callable[[A], B], xs: MList[A]) -> MList[B]:
    """
    Map a pure function over `xs`

    Example:
        >>> from mlist import trampoline
        >>> head(map_(str, from_iterable(trampoline.value, [1, 2])))
        '1'

    Args:
        f: function to apply to each element
        xs: the list to map over
    Return:
        the mapped list
    """
    return _map(f, xs)


def _map(f: Callable[[A], B], xs: MList[A]) -> MList[B]:
    if not xs:
        return Nil()
    return Cons(f(xs.head), lambda: xs.tail().map(lambda ys: _map(f, ys)))


@curry
def filter_(value: Value, p: Callable[[A], bool],
            xs: MList[A]) -> Effect[MList[A]]:
    """
    Keep the elements of `xs` that satisfy `p`. Tail effects are run
    until the next element satisfying `p` is found, so filtering an
    infinite list with no further matches does not terminate

    Example:
        >>> from mlist import trampoline
        >>> xs = from_iterable(trampoline.value, range(5))
        >>> filter_(trampoline.value, lambda x: x % 2 == 0, xs).and_then(
        ...     to_tuple(trampoline.value)
        ... ).run()
        (0, 2, 4)

    Args:
        value: pure lift of the effect type of the tails
        p: predicate to keep elements by
        xs: the list to filter
    Return:
        effect producing the filtered list
    """
    return _filter(value, p, xs)


def _filter(value: Value, p: Callable[[A], bool],
            xs: MList[A]) -> Effect[MList[A]]:
    if not xs:
        return value(Nil())

    def rest() -> Effect[MList[A]]:
        return xs.tail().and_then(lambda ys: _filter(value, p, ys))

    if p(xs.head):
        return value(Cons(xs.head, rest))
    return rest()


@curry
def foldl(value: Value, f: Callable[[B, A], Effect[B]], acc: B,
          xs: MList[A]) -> Effect[B]:
    """
    Fold `xs` from the left, running `f` and the tail effects in
    element order. Does not terminate if `xs` is infinite

    Example:
        >>> from mlist import trampoline
        >>> xs = from_iterable(trampoline.value, [1, 2, 3])
        >>> foldl(trampoline.value, lambda a, x: trampoline.value(a - x), 0,
        ...       xs).run()
        -6

    Args:
        value: pure lift of the effect type of the tails
        f: effectful function combining the accumulator with an element
        acc: the initial accumulator
        xs: the list to fold
    Return:
        effect producing the final accumulator
    """
    return _foldl(value, f, acc, xs)


def _foldl(value: Value, f: Callable[[B, A], Effect[B]], acc: B,
           xs: MList[A]) -> Effect[B]:
    if not xs:
        return value(acc)
    return f(acc, xs.head).and_then(
        lambda acc_: xs.tail().and_then(
            lambda ys: _foldl(value, f, acc_, ys)
        )
    )


@curry
def foldr(value: Value, f: Callable[[A, B], Effect[B]], acc: B,
          xs: MList[A]) -> Effect[B]:
    """
    Fold `xs` from the right. All tail effects run first, in element
    order; then `f` is applied from the last element to the first.
    Does not terminate if `xs` is infinite

    Example:
        >>> from mlist import trampoline
        >>> xs = from_iterable(trampoline.value, [1, 2, 3])
        >>> foldr(trampoline.value, lambda x, a: trampoline.value(x - a), 0,
        ...       xs).run()
        2

    Args:
        value: pure lift of the effect type of the tails
        f: effectful function combining an element with the accumulator
        acc: the initial accumulator
        xs: the list to fold
    Return:
        effect producing the final accumulator
    """
    return _foldr(value, f, acc, xs)


def _foldr(value: Value, f: Callable[[A, B], Effect[B]], acc: B,
           xs: MList[A]) -> Effect[B]:
    if not xs:
        return value(acc)
    return xs.tail().and_then(
        lambda ys: _foldr(value, f, acc, ys)
    ).and_then(lambda b: f(xs.head, b))


@curry
def unfold(f: Callable[[S], Effect[Maybe[Tuple[A, S]]]],
           seed: S) -> Effect[MList[A]]:
    """
    Build an `MList` from a seed. `f` is run once per element, when
    that element is demanded, and ends the list by producing `Nothing`

    Example:
        >>> from mlist import trampoline
        >>> from mlist.maybe import Just, Nothing
        >>> def count_to_3(n):
        ...     return trampoline.value(Nothing() if n > 3 else Just((n, n + 1)))
        >>> unfold(count_to_3, 0).and_then(to_tuple(trampoline.value)).run()
        (0, 1, 2, 3)

    Args:
        f: effectful step producing `Just` an element and the next seed, \
            or `Nothing` to stop
        seed: the initial seed
    Return:
        effect producing the unfolded list
    """
    return _unfold(f, seed)


def _unfold(f: Callable[[S], Effect[Maybe[Tuple[A, S]]]],
            seed: S) -> Effect[MList[A]]:
    def step(m: Maybe[Tuple[A, S]]) -> MList[A]:
        if not m:
            return Nil()
        x, seed_ = m.get
        return Cons(x, lambda: _unfold(f, seed_))

    return f(seed).map(step)


@curry
def map_accum(value: Value, f: Callable[[B, A], Effect[Tuple[B, C]]],
              acc: B, xs: MList[A]) -> Effect[Tuple[B, MList[C]]]:
    """
    Map `f` over `xs` while threading an accumulator through it.
    Strict: the whole of `xs` is consumed before the result is produced,
    so it does not terminate if `xs` is infinite

    Example:
        >>> from mlist import trampoline
        >>> def running_sum(acc, x):
        ...     return trampoline.value((acc + x, acc + x))
        >>> xs = from_iterable(trampoline.value, [1, 2, 3])
        >>> total, sums = map_accum(trampoline.value, running_sum, 0, xs).run()
        >>> total
        6
        >>> to_tuple(trampoline.value, sums).run()
        (1, 3, 6)

    Args:
        value: pure lift of the effect type of the tails
        f: effectful function producing the next accumulator and \
            an output element
        acc: the initial accumulator
        xs: the list to map over
    Return:
        effect producing the final accumulator and the output list
    """
    return _map_accum(value, f, acc, xs)


def _map_accum(value: Value, f: Callable[[B, A], Effect[Tuple[B, C]]],
               acc: B, xs: MList[A]) -> Effect[Tuple[B, MList[C]]]:
    if not xs:
        return value((acc, Nil()))

    def rest(acc_y: Tuple[B, C]) -> Effect[Tuple[B, MList[C]]]:
        acc_, y = acc_y
        return xs.tail().and_then(
            lambda ys: _map_accum(value, f, acc_, ys)
        ).map(
            lambda acc_ys: (acc_ys[0], Cons(y, _resolved(value, acc_ys[1])))
        )

    return f(acc, xs.head).and_then(rest)


@curry
def reverse(value: Value, xs: MList[A]) -> Effect[MList[A]]:
    """
    Reverse `xs`. Strict: does not terminate if `xs` is infinite

    Example:
        >>> from mlist import trampoline
        >>> xs = from_iterable(trampoline.value, [1, 2, 3])
        >>> reverse(trampoline.value, xs).and_then(
        ...     to_tuple(trampoline.value)
        ... ).run()
        (3, 2, 1)

    Args:
        value: pure lift of the effect type of the tails
        xs: the list to reverse
    Return:
        effect producing the reversed list, whose tails are all trivial
    """
    return _reverse(value, Nil(), xs)


def _reverse(value: Value, acc: MList[A], xs: MList[A]) -> Effect[MList[A]]:
    if not xs:
        return value(acc)
    return xs.tail().and_then(
        lambda ys: _reverse(value, Cons(xs.head, _resolved(value, acc)), ys)
    )


@curry
def iterate(f: Callable[[A], Effect[A]], x: A) -> MList[A]:
    """
    Create the infinite list ``x, f(x), f(f(x)), ...``

    Example:
        >>> from mlist import trampoline
        >>> naturals = iterate(lambda n: trampoline.value(n + 1), 0)
        >>> to_tuple(trampoline.value, take(trampoline.value, 3, naturals)).run()
        (0, 1, 2)

    Args:
        f: effectful function producing the next element from the previous
        x: the first element
    Return:
        infinite list of repeated applications of `f` to `x`
    """
    return _iterate(f, x)


def _iterate(f: Callable[[A], Effect[A]], x: A) -> MList[A]:
    return Cons(x, lambda: f(x).map(lambda y: _iterate(f, y)))


def repeat(m: Effect[A]) -> Effect[MList[A]]:
    """
    Create an infinite list whose elements are produced by running `m`,
    once per element

    Example:
        >>> from mlist import io
        >>> import random
        >>> samples = repeat(io.from_callable(random.random))

    Args:
        m: effect producing an element
    Return:
        effect producing the infinite list
    """
    return m.map(lambda x: Cons(x, lambda: repeat(m)))


@curry
def replicate(value: Value, n: int, m: Effect[A]) -> Effect[MList[A]]:
    """
    Create a list of `n` elements, each produced by running `m`

    Example:
        >>> from mlist import trampoline
        >>> replicate(trampoline.value, 2, trampoline.value('a')).and_then(
        ...     to_tuple(trampoline.value)
        ... ).run()
        ('a', 'a')

    Args:
        value: pure lift of the effect type of the tails
        n: number of elements
        m: effect producing an element
    Return:
        effect producing the list, which is empty if `n` <= 0
    """
    return _replicate(value, n, m)


def _replicate(value: Value, n: int, m: Effect[A]) -> Effect[MList[A]]:
    if n <= 0:
        return value(Nil())
    return m.map(lambda x: Cons(x, lambda: _replicate(value, n - 1, m)))


def cycle(xs: MList[A]) -> MList[A]:
    """
    Repeat `xs` infinitely. The tail effects of `xs` are run again on
    every repetition

    Example:
        >>> from mlist import trampoline
        >>> abab = cycle(from_iterable(trampoline.value, 'ab'))
        >>> to_tuple(trampoline.value, take(trampoline.value, 4, abab)).run()
        ('a', 'b', 'a', 'b')

    Args:
        xs: the list to repeat
    Return:
        infinite repetition of `xs`
    Raises:
        EmptyMListError: if `xs` is `Nil`
    """
    if not xs:
        raise EmptyMListError('cycle of empty MList')
    return _concat(xs, lambda: cycle(xs))


@curry
def take(value: Value, n: int, xs: MList[A]) -> MList[A]:
    """
    Take the first `n` elements of `xs`. No tail effect of `xs` beyond
    the `n`-th element is run

    Example:
        >>> from mlist import trampoline
        >>> xs = from_iterable(trampoline.value, [1, 2, 3])
        >>> to_tuple(trampoline.value, take(trampoline.value, 2, xs)).run()
        (1, 2)

    Args:
        value: pure lift of the effect type of the tails
        n: the number of elements to take
        xs: the list to take from
    Return:
        list of at most `n` elements
    """
    return _take(value, n, xs)


def _take(value: Value, n: int, xs: MList[A]) -> MList[A]:
    if n <= 0 or not xs:
        return Nil()
    if n == 1:
        return Cons(xs.head, _resolved(value, Nil()))
    return Cons(
        xs.head, lambda: xs.tail().map(lambda ys: _take(value, n - 1, ys))
    )


@curry
def take_while(p: Callable[[A], bool], xs: MList[A]) -> MList[A]:
    """
    Take elements from `xs` as long as they satisfy `p`

    Example:
        >>> from mlist import trampoline
        >>> naturals = iterate(lambda n: trampoline.value(n + 1), 0)
        >>> to_tuple(trampoline.value,
        ...          take_while(lambda n: n < 3, naturals)).run()
        (0, 1, 2)

    Args:
        p: predicate elements must satisfy
        xs: the list to take from
    Return:
        the longest prefix of `xs` whose elements satisfy `p`
    """
    return _take_while(p, xs)


def _take_while(p: Callable[[A], bool], xs: MList[A]) -> MList[A]:
    if not xs or not p(xs.head):
        return Nil()
    return Cons(
        xs.head, lambda: xs.tail().map(lambda ys: _take_while(p, ys))
    )


@curry
def drop(value: Value, n: int, xs: MList[A]) -> Effect[MList[A]]:
    """
    Drop the first `n` elements of `xs`. The tail effects of the
    dropped elements are run

    Example:
        >>> from mlist import trampoline
        >>> xs = from_iterable(trampoline.value, [1, 2, 3])
        >>> drop(trampoline.value, 2, xs).and_then(
        ...     to_tuple(trampoline.value)
        ... ).run()
        (3,)

    Args:
        value: pure lift of the effect type of the tails
        n: the number of elements to drop
        xs: the list to drop from
    Return:
        effect producing the remaining list; `xs` itself if `n` <= 0
    """
    return _drop(value, n, xs)


def _drop(value: Value, n: int, xs: MList[A]) -> Effect[MList[A]]:
    if n <= 0 or not xs:
        return value(xs)
    return xs.tail().and_then(lambda ys: _drop(value, n - 1, ys))


@curry
def drop_while(value: Value, p: Callable[[A], bool],
               xs: MList[A]) -> Effect[MList[A]]:
    """
    Drop elements from `xs` as long as they satisfy `p`

    Example:
        >>> from mlist import trampoline
        >>> xs = from_iterable(trampoline.value, [1, 2, 3, 1])
        >>> drop_while(trampoline.value, lambda x: x < 2, xs).and_then(
        ...     to_tuple(trampoline.value)
        ... ).run()
        (2, 3, 1)

    Args:
        value: pure lift of the effect type of the tails
        p: predicate of the elements to drop
        xs: the list to drop from
    Return:
        effect producing the list starting at the first element \
            that does not satisfy `p`
    """
    return _drop_while(value, p, xs)


def _drop_while(value: Value, p: Callable[[A], bool],
                xs: MList[A]) -> Effect[MList[A]]:
    if not xs or not p(xs.head):
        return value(xs)
    return xs.tail().and_then(lambda ys: _drop_while(value, p, ys))


@curry
def elem(value: Value, x: A, xs: MList[A]) -> Effect[bool]:
    """
    Test whether `x` is an element of `xs`. Stops running tail effects
    as soon as `x` is found; if `xs` is infinite and does not contain
    `x`, it does not terminate

    Example:
        >>> from mlist import trampoline
        >>> naturals = iterate(lambda n: trampoline.value(n + 1), 0)
        >>> elem(trampoline.value, 5, naturals).run()
        True

    Args:
        value: pure lift of the effect type of the tails
        x: the element to search for
        xs: the list to search
    Return:
        effect producing whether `x` was found
    """
    return _elem(value, x, xs)


def _elem(value: Value, x: A, xs: MList[A]) -> Effect[bool]:
    if not xs:
        return value(False)
    if xs.head == x:
        return value(True)
    return xs.tail().and_then(lambda ys: _elem(value, x, ys))


@curry
def not_elem(value: Value, x: A, xs: MList[A]) -> Effect[bool]:
    """
    The negation of `elem`

    Args:
        value: pure lift of the effect type of the tails
        x: the element to search for
        xs: the list to search
    Return:
        effect producing whether `x` was not found
    """
    return _elem(value, x, xs).map(lambda found: not found)


def zip_with(f: Callable[..., C], xs: MList[Any], ys: MList[Any],
             *more: MList[Any]) -> MList[C]:
    """
    Combine the elements of two or more lists with `f`. The result ends
    as soon as one of the lists ends. When the next element of the
    result is demanded, the tail effects of all lists are run, in
    argument order

    Example:
        >>> from mlist import trampoline
        >>> xs = from_iterable(trampoline.value, [1, 2, 3])
        >>> ys = from_iterable(trampoline.value, [10, 20])
        >>> to_tuple(trampoline.value,
        ...          zip_with(lambda x, y: x + y, xs, ys)).run()
        (11, 22)

    Args:
        f: function taking one element from each list
        xs: the first list
        ys: the second list
        more: further lists
    Return:
        list of the results of `f`
    """
    return _zip_with(f, (xs, ys) + more)


def _zip_with(f: Callable[..., C], xss: Tuple[MList[Any], ...]) -> MList[C]:
    if not all(xss):
        return Nil()
    return Cons(
        f(*(xs.head for xs in xss)),
        lambda: _next_nodes(xss).map(lambda yss: _zip_with(f, yss))
    )


def _next_nodes(xss: Tuple[Cons[Any], ...]) -> Effect[Tuple[MList[Any], ...]]:
    def combine(nodes: Effect[Tuple[MList[Any], ...]],
                xs: Cons[Any]) -> Effect[Tuple[MList[Any], ...]]:
        return nodes.and_then(
            lambda yss: xs.tail().map(lambda ys: yss + (ys, ))
        )

    first, *rest = xss
    return reduce(combine, rest, first.tail().map(lambda ys: (ys, )))


def _tupled(*elements: Any) -> Tuple[Any, ...]:
    return elements


def zip_(xs: MList[Any], ys: MList[Any],
         *more: MList[Any]) -> MList[Tuple[Any, ...]]:
    """
    Pair up the elements of two or more lists. The result is as long as
    the shortest list

    Example:
        >>> from mlist import trampoline
        >>> xs = from_iterable(trampoline.value, [1, 2, 3])
        >>> ys = from_iterable(trampoline.value, 'abcde')
        >>> to_tuple(trampoline.value, zip_(xs, ys)).run()
        ((1, 'a'), (2, 'b'), (3, 'c'))

    Args:
        xs: the first list
        ys: the second list
        more: further lists
    Return:
        list of tuples with one element from each list
    """
    return _zip_with(_tupled, (xs, ys) + more)


@curry
def unzip(value: Value, xs: MList[Tuple[Any, ...]],
          arity: int = 2) -> Effect[Tuple[MList[Any], ...]]:
    """
    Split a list of tuples into one list per tuple position. Strict:
    all of `xs` is consumed, and the resulting lists have trivial tails

    Example:
        >>> from mlist import trampoline
        >>> pairs = from_iterable(trampoline.value, [(1, 'a'), (2, 'b')])
        >>> numbers, letters = unzip(trampoline.value, pairs).run()
        >>> to_tuple(trampoline.value, letters).run()
        ('a', 'b')

    Args:
        value: pure lift of the effect type of the tails
        xs: list of tuples
        arity: length of the tuples in `xs`
    Return:
        effect producing `arity` lists
    Raises:
        ValueError: when run, if an element of `xs` is not a tuple \
            of length `arity`
    """
    def combine(item: Tuple[Any, ...], columns: Tuple[MList[Any], ...]
                ) -> Effect[Tuple[MList[Any], ...]]:
        if len(item) != arity:
            raise ValueError(
                f'expected a tuple of length {arity}, got {repr(item)}'
            )
        return value(
            tuple(
                Cons(x, _resolved(value, column))
                for x, column in zip(item, columns)
            )
        )

    return _foldr(value, combine, (Nil(), ) * arity, xs)


__all__ = [
    'EmptyMListError',
    'MList',
    'Nil',
    'Cons',
    'nil',
    'cons',
    'from_iterable',
    'to_tuple',
    'append',
    'show',
    'memoize',
    'is_empty',
    'head',
    'tail',
    'maybe_head',
    'last',
    'maybe_last',
    'init',
    'length',
    'map_m',
    'map_',
    'filter_',
    'foldl',
    'foldr',
    'unfold',
    'map_accum',
    'reverse',
    'iterate',
    'repeat',
    'replicate',
    'cycle',
    'take',
    'take_while',
    'drop',
    'drop_while',
    'elem',
    'not_elem',
    'zip_with',
    'zip_',
    'unzip',
]
