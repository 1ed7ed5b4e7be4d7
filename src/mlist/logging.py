import logging
from types import TracebackType
from typing import Optional, Tuple, Type, Union

from .immutable import Immutable
from .io import IO, from_callable


ExcInfo = Tuple[Type[BaseException], BaseException, TracebackType]


class Logger(Immutable):
    """
    Wrapper around built-in `logging.Logger` class that
    calls logging methods as `IO` effects. Because the log calls are
    deferred, they can be sequenced into an `MList` and run in
    element order:

    Example:
        >>> from mlist import io, map_m, to_tuple, from_iterable
        >>> logger = get_logger('sensors')
        >>> def log_reading(r):
        ...     return logger.info(f'reading: {r}').map(lambda _: r)
        >>> readings = from_iterable(io.value, [1, 2])
        >>> map_m(io.value, log_reading, readings).and_then(
        ...     to_tuple(io.value)
        ... ).run()
        INFO:sensors:reading: 1
        INFO:sensors:reading: 2
        (1, 2)
    """
    logger: logging.Logger

    def _log(self,
             level: int,
             msg: str,
             stack_info: bool,
             exc_info: Union[bool, ExcInfo]) -> IO[None]:
        return from_callable(
            lambda: self.logger.log(
                level, msg, stack_info=stack_info, exc_info=exc_info
            )
        )

    def debug(
        self,
        msg: str,
        stack_info: bool = False,
        exc_info: Union[bool, ExcInfo] = False
    ) -> IO[None]:
        """
        Create an effect that calls built-in `logging.Logger.debug`

        Example:
            >>> get_logger('foo').debug('hello!').run()
            DEBUG:foo:hello!

        Args:
            msg: the log message
            stack_info: whether to include stack information in the \
                log message
            exc_info: whether to include exception info in the log message

        Return:
            `IO` action that logs `msg` with level `DEBUG`
        """
        return self._log(logging.DEBUG, msg, stack_info, exc_info)

    def info(
        self,
        msg: str,
        stack_info: bool = False,
        exc_info: Union[bool, ExcInfo] = False
    ) -> IO[None]:
        """
        Create an effect that calls built-in `logging.Logger.info`

        Args:
            msg: the log message
            stack_info: whether to include stack information in the \
                log message
            exc_info: whether to include exception info in the log message

        Return:
            `IO` action that logs `msg` with level `INFO`
        """
        return self._log(logging.INFO, msg, stack_info, exc_info)

    def warning(
        self,
        msg: str,
        stack_info: bool = False,
        exc_info: Union[bool, ExcInfo] = False
    ) -> IO[None]:
        """
        Create an effect that calls built-in `logging.Logger.warning`

        Args:
            msg: the log message
            stack_info: whether to include stack information in the \
                log message
            exc_info: whether to include exception info in the log message

        Return:
            `IO` action that logs `msg` with level `WARNING`
        """
        return self._log(logging.WARNING, msg, stack_info, exc_info)

    def error(
        self,
        msg: str,
        stack_info: bool = False,
        exc_info: Union[bool, ExcInfo] = False
    ) -> IO[None]:
        """
        Create an effect that calls built-in `logging.Logger.error`

        Args:
            msg: the log message
            stack_info: whether to include stack information in the \
                log message
            exc_info: whether to include exception info in the log message

        Return:
            `IO` action that logs `msg` with level `ERROR`
        """
        return self._log(logging.ERROR, msg, stack_info, exc_info)

    def critical(
        self,
        msg: str,
        stack_info: bool = False,
        exc_info: Union[bool, ExcInfo] = False
    ) -> IO[None]:
        """
        Create an effect that calls built-in `logging.Logger.critical`

        Args:
            msg: the log message
            stack_info: whether to include stack information in the \
                log message
            exc_info: whether to include exception info in the log message

        Return:
            `IO` action that logs `msg` with level `CRITICAL`
        """
        return self._log(logging.CRITICAL, msg, stack_info, exc_info)

    def exception(
        self,
        msg: str,
        stack_info: bool = False,
        exc_info: Union[bool, ExcInfo] = True
    ) -> IO[None]:
        """
        Create an effect that calls built-in `logging.Logger.exception`,
        i.e logs `msg` with level `ERROR` and exception information

        Args:
            msg: the log message
            stack_info: whether to include stack information in the \
                log message
            exc_info: whether to include exception info in the log message

        Return:
            `IO` action that logs `msg` with level `ERROR`
        """
        return self._log(logging.ERROR, msg, stack_info, exc_info)


def get_logger(name: Optional[str] = None) -> Logger:
    """
    Create a `Logger` wrapping the built-in logger called `name`

    Example:
        >>> get_logger('foo').info('hello!').run()
        INFO:foo:hello!

    Args:
        name: name of the logger, the root logger if `None`
    Return:
        `Logger` wrapping `logging.getLogger(name)`
    """
    return Logger(logging.getLogger(name))


__all__ = ['Logger', 'get_logger']
