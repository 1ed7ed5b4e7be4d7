from __future__ import annotations

import sys
from functools import wraps
from typing import Callable, Generic, TypeVar

from .immutable import Immutable
from .monad import Monad
from .trampoline import Call, Done, Trampoline

A = TypeVar('A')
B = TypeVar('B')


class IO(Monad, Immutable, Generic[A]):
    """
    Represents world changing actions, such as reading the next
    value from a sensor. Nothing happens until `IO.run` is called,
    which makes `IO` a natural effect for the tails of an `MList`
    whose elements come from the outside world.
    """
    run_io: Callable[[], Trampoline[A]]

    def and_then(self, f: Callable[[A], IO[B]]) -> IO[B]:
        """
        Chain together functions producing world changing actions.

        Example:
            >>> get_line().and_then(put_line).run()
            hello  # typed by the user
            hello

        Args:
            f: function to compose with this action
        Return:
            new `IO` action that runs this action and then the \
                action produced by `f`
        """
        def run() -> Trampoline[B]:
            def thunk() -> Trampoline[B]:
                t = self.run_io()  # type: ignore
                return t.and_then(
                    lambda a: Call(lambda: f(a).run_io())  # type: ignore
                )

            return Call(thunk)

        return IO(run)

    def map(self, f: Callable[[A], B]) -> IO[B]:
        """
        Map `f` over the result of this action

        Example:
            >>> value('hello').map(str.upper).run()
            'HELLO'

        Args:
            f: function to map over this `IO` action
        Return:
            new `IO` action producing the result of `f`
        """
        return IO(lambda: Call(lambda: self.run_io().map(f)))  # type: ignore

    def run(self) -> A:
        """
        Perform the action

        Return:
            the result of the action
        """
        return self.run_io().run()


def value(a: A) -> IO[A]:
    """
    Create an `IO` action that simply produces `a` when run.
    Pure lift for sequences whose tails are `IO` actions

    Example:
        >>> value(1).run()
        1

    Args:
        a: The value to wrap in `IO`
    Return:
        `IO` action producing `a`
    """
    return IO(lambda: Done(a))


def from_callable(f: Callable[[], A]) -> IO[A]:
    """
    Create an `IO` action that calls `f` every time it is run

    Example:
        >>> import random
        >>> sample = from_callable(random.random)
        >>> sample.run()
        0.7245314

    Args:
        f: nullary function to call
    Return:
        `IO` action with the result of calling `f`
    """
    return IO(lambda: Done(f()))


def io(f: Callable[..., A]) -> Callable[..., IO[A]]:
    """
    Decorator that turns a side-effecting function into one that returns
    an `IO` action. The decorated function is not called until the
    action is run

    Example:
        >>> @io
        ... def read_sensor(channel: int) -> float:
        ...     return adc.read(channel)
        >>> reading = read_sensor(0)  # nothing has been read yet
        >>> reading.run()
        0.42

    Args:
        f: The function to wrap
    Return:
        `f` returning `IO` actions
    """
    @wraps(f)
    def decorator(*args, **kwargs) -> IO[A]:
        return from_callable(lambda: f(*args, **kwargs))

    return decorator


def put_line(line: str = '', file=sys.stdout) -> IO[None]:
    """
    Print a line to standard out

    Example:
        >>> put_line('hello').run()
        hello

    Args:
        line: The line to print
        file: The file to print to (`sys.stdout` by default)
    Return:
        `IO` action that prints `line` when run
    """
    def run() -> Trampoline[None]:
        print(line, file=file)
        return Done(None)

    return IO(run)


def get_line(prompt: str = '') -> IO[str]:
    """
    Create an `IO` action that reads a line from standard input
    when run

    Example:
        >>> get_line('name: ').run()
        name: Guido
        'Guido'

    Args:
        prompt: The message to display to the user
    Return:
        `IO` action with the line read from standard in
    """
    def run() -> Trampoline[str]:
        line = input(prompt)
        return Done(line)

    return IO(run)


__all__ = ['IO', 'value', 'from_callable', 'io', 'put_line', 'get_line']
