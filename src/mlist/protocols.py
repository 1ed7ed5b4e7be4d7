from typing import Callable, TypeVar

from typing_extensions import Protocol

A = TypeVar('A', covariant=True)
B = TypeVar('B')


class Effect(Protocol[A]):
    """
    Structural type of the effects an `MList` tail can produce.
    `Trampoline`, `IO` and `Maybe` all satisfy it, as does any
    third party monad with ``map`` and ``and_then`` methods.
    """
    def map(self, f: Callable[[A], B]) -> 'Effect[B]':
        pass

    def and_then(self, f: Callable[[A], 'Effect[B]']) -> 'Effect[B]':
        pass


Value = Callable[[B], Effect[B]]
"""
Pure lift of an effect type, e.g `mlist.trampoline.value`
"""

__all__ = ['Effect', 'Value']
