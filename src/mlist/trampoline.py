from abc import ABC, abstractmethod
from typing import Callable, Generic, TypeVar, cast

from .immutable import Immutable
from .monad import Monad

A = TypeVar('A')
B = TypeVar('B')
C = TypeVar('C')


class Trampoline(Immutable, Generic[A], Monad, ABC):
    """
    Pure, stack safe effect. This is the trivial effect used when
    lifting ordinary data into an `MList` (see `mlist.from_iterable`):
    strict traversals build long chains of ``and_then`` calls, and
    `Trampoline.run` interprets those chains in a loop instead of
    recursing on the Python stack.
    """
    @abstractmethod
    def _resume(self) -> 'Trampoline[A]':
        pass

    @abstractmethod
    def _handle_cont(
        self, cont: Callable[[A], 'Trampoline[B]']
    ) -> 'Trampoline[B]':
        pass

    @property
    def _is_done(self) -> bool:
        return isinstance(self, Done)

    def and_then(self, f: Callable[[A], 'Trampoline[B]']) -> 'Trampoline[B]':
        """
        Sequence this trampoline with the one produced by ``f``

        Example:
            >>> Done(1).and_then(lambda a: Done(a + 1)).run()
            2

        Args:
            f: function from the result of this trampoline to the next
        Return:
            New trampoline that runs ``f`` on the result of this one
        """
        return AndThen(self, f)

    def map(self, f: Callable[[A], B]) -> 'Trampoline[B]':
        """
        Map ``f`` over the result of this trampoline

        Example:
            >>> Done(1).map(str).run()
            '1'

        Args:
            f: function to apply to the result
        Return:
            New trampoline producing the result of ``f``
        """
        return self.and_then(lambda a: Done(f(a)))

    def run(self) -> A:
        """
        Interpret this structure of trampolines to produce its result

        Return:
            result of interpreting this trampoline
        """
        trampoline = self
        while not trampoline._is_done:
            trampoline = trampoline._resume()

        return cast(Done[A], trampoline).a


class Done(Trampoline[A]):
    """
    A finished computation
    """
    a: A

    def _resume(self) -> Trampoline[A]:
        return self

    def _handle_cont(self,
                     cont: Callable[[A], Trampoline[B]]) -> Trampoline[B]:
        return cont(self.a)


class Call(Trampoline[A]):
    """
    A suspended computation
    """
    thunk: Callable[[], Trampoline[A]]

    def _handle_cont(self,
                     cont: Callable[[A], Trampoline[B]]) -> Trampoline[B]:
        return self.thunk().and_then(cont)  # type: ignore

    def _resume(self) -> Trampoline[A]:
        return self.thunk()  # type: ignore


class AndThen(Generic[A, B], Trampoline[B]):
    """
    Bind reified as data, so that left nested binds are re-associated
    during `Trampoline.run` rather than interpreted recursively.
    """
    sub: Trampoline[A]
    cont: Callable[[A], Trampoline[B]]

    def _handle_cont(self,
                     cont: Callable[[B], Trampoline[C]]) -> Trampoline[C]:
        return self.sub.and_then(self.cont).and_then(cont)  # type: ignore

    def _resume(self) -> Trampoline[B]:
        return self.sub._handle_cont(self.cont)  # type: ignore

    def and_then(  # type: ignore
        self, f: Callable[[B], Trampoline[C]]
    ) -> Trampoline[C]:
        return AndThen(
            self.sub,
            lambda x: Call(lambda: self.cont(x).and_then(f))  # type: ignore
        )


def value(a: A) -> Trampoline[A]:
    """
    Lift `a` into a finished `Trampoline`. This is the pure lift to pass
    as ``value`` to the `MList` operations when the sequence carries no
    real side effects

    Example:
        >>> value(1).run()
        1

    Args:
        a: the value to lift
    Return:
        `Done(a)`
    """
    return Done(a)


def defer(f: Callable[[], A]) -> Trampoline[A]:
    """
    Suspend the computation of ``f`` until the trampoline is run

    Example:
        >>> t = defer(lambda: print('ran'))
        >>> t.run()
        ran

    Args:
        f: nullary function to suspend
    Return:
        `Trampoline` that calls ``f`` when run
    """
    return Call(lambda: Done(f()))


__all__ = ['Trampoline', 'Done', 'Call', 'AndThen', 'value', 'defer']
