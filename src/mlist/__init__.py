from . import io, logging, maybe, trampoline  # noqa
from .functions import *  # noqa
from .immutable import Immutable  # noqa
from .maybe import Just, Maybe, Nothing  # noqa
from .mlist import *  # noqa
from .protocols import Effect  # noqa

try:
    from . import hypothesis_strategies  # noqa
except ImportError:
    pass
