from dataclasses import dataclass


class Immutable:
    """
    Super class that turns subclasses into frozen dataclasses.
    Every node type and effect type in `mlist` derives from it, so
    a node can be shared freely between traversals.

    Example:
        >>> class Cell(Immutable):
        ...     head: int
        >>> class Pair(Cell):
        ...     second: int
        >>> p = Pair(1, 2)
        >>> p.head = 3
        dataclasses.FrozenInstanceError: cannot assign to field 'head'

    """

    def __init_subclass__(cls,
                          init: bool = True,
                          repr: bool = True,
                          eq: bool = True,
                          order: bool = False) -> None:
        super().__init_subclass__()
        if not hasattr(cls, '__annotations__'):
            cls.__annotations__ = {}
        dataclass(frozen=True, init=init, repr=repr, eq=eq, order=order)(cls)


__all__ = ['Immutable']
