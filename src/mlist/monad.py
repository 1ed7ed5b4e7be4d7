from abc import ABC, abstractmethod
from typing import Any, Callable


class Functor(ABC):
    @abstractmethod
    def map(self, f: Callable[[Any], Any]) -> 'Functor':
        """
        Map function ``f`` over the value produced by this functor

        Args:
            f: The function to apply to the produced value
        Return:
            New functor that produces the result of applying ``f``
        """
        pass


class Monad(Functor, ABC):
    """
    Base class for the effect types bundled with `mlist`.

    The tail of an `MList` node may be any object that supports ``map``
    and ``and_then`` (see `mlist.protocols.Effect`); subclassing `Monad`
    is only a convenience.
    """
    @abstractmethod
    def and_then(self, f: Callable[[Any], Any]) -> 'Monad':
        """
        Sequence this effect with the effect produced by ``f``

        Args:
            f: Function from the result of this effect to the next effect
        Return:
            Effect that runs this effect, then the effect returned by ``f``
        """
        pass


__all__ = ['Functor', 'Monad']
