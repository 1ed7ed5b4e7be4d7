import sys
from contextlib import contextmanager

from mlist import Cons, Nil, io


@contextmanager
def recursion_limit(n):
    limit = sys.getrecursionlimit()
    sys.setrecursionlimit(n)
    try:
        yield
    finally:
        sys.setrecursionlimit(limit)


def recording(items, log):
    """
    `MList` of `items` with `IO` tails that append the index of the
    node they produce to `log` when run
    """
    def node(i):
        if i == len(items):
            return Nil()

        def step():
            log.append(i + 1)
            return node(i + 1)

        return Cons(items[i], lambda: io.from_callable(step))

    return node(0)


def counting_successor(log):
    """
    Effectful successor function that appends every number it
    produces to `log`
    """
    def succ(n):
        def run():
            log.append(n + 1)
            return n + 1

        return io.from_callable(run)

    return succ
