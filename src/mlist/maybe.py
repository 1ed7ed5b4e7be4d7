from abc import ABC, abstractmethod
from typing import Any, Callable, Generic, Optional, TypeVar, Union

from .immutable import Immutable
from .monad import Monad

A = TypeVar('A', covariant=True)
B = TypeVar('B')


class Maybe_(Immutable, Monad, ABC):
    """
    Abstract super class for optional values. Should not be instantiated
    directly. Use `Just` and `Nothing` instead.

    `Maybe` is the result type of the step function given to
    `mlist.unfold`, and can itself be used as the effect of an `MList`:
    a tail that produces `Nothing` ends every traversal with `Nothing`.
    `Maybe` is eager and not stack safe, so strict traversals over long
    sequences should use `mlist.trampoline` or `mlist.io` instead.
    """
    @abstractmethod
    def and_then(self, f: Callable) -> Any:
        """
        Chain together computations that may produce no value

        Example:
            >>> f = lambda i: Just(1 / i) if i != 0 else Nothing()
            >>> Just(2).and_then(f)
            Just(0.5)
            >>> Just(0).and_then(f)
            Nothing()

        Args:
            f: the function to call
        Return:
            result of `f` if this is a `Just`, `Nothing` otherwise
        """
        raise NotImplementedError()

    @abstractmethod
    def map(self, f: Callable) -> Any:
        raise NotImplementedError()

    @abstractmethod
    def or_else(self, default: Any) -> Any:
        """
        Get the wrapped value, or `default` if there is none

        Example:
            >>> Just(1).or_else(2)
            1
            >>> Nothing().or_else(2)
            2

        Args:
            default: Value to return if this is `Nothing`
        Return:
            wrapped value if this is `Just`, `default` otherwise
        """
        raise NotImplementedError()

    @abstractmethod
    def __bool__(self) -> bool:
        raise NotImplementedError()


class Just(Maybe_, Generic[A]):
    """
    Represents a present value
    """
    get: A

    def and_then(self, f: Callable[[A], 'Maybe[B]']) -> 'Maybe[B]':
        return f(self.get)

    def map(self, f: Callable[[A], B]) -> 'Maybe[B]':
        return Just(f(self.get))

    def or_else(self, default: B) -> Union[A, B]:
        return self.get

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Just):
            return False
        return other.get == self.get

    def __repr__(self):
        return f'Just({repr(self.get)})'

    def __bool__(self):
        return True


class Nothing(Maybe_):
    """
    Represents an absent value
    """
    def and_then(self, f: Callable[[A], 'Maybe[B]']) -> 'Maybe[B]':
        return self

    def map(self, f: Callable[[Any], B]) -> 'Maybe[B]':
        return self

    def or_else(self, default: B) -> B:
        return default

    def __eq__(self, other: Any) -> bool:
        return isinstance(other, Nothing)

    def __repr__(self) -> str:
        return 'Nothing()'

    def __bool__(self) -> bool:
        return False


Maybe = Union[Nothing, Just[A]]
"""
Type-alias for `Union[Nothing, Just[TypeVar('A')]]`
"""


def from_optional(optional: Optional[B]) -> 'Maybe[B]':
    """
    Convert a possible None value to `Maybe`. Useful for writing
    `unfold` steps in terms of functions that return `None` when done

    Example:
        >>> from_optional('value')
        Just('value')
        >>> from_optional(None)
        Nothing()

    Args:
        optional: optional value to convert to `Maybe`
    Return:
        `Just(optional)` if `optional` is not `None`, `Nothing` otherwise
    """
    if optional is None:
        return Nothing()
    return Just(optional)


__all__ = ['Maybe', 'Just', 'Nothing', 'from_optional']
