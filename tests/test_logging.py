import logging
from unittest.mock import Mock

import pytest

from mlist import from_iterable, io, map_m, to_tuple
from mlist.logging import Logger, get_logger


@pytest.mark.parametrize(
    'method,level',
    [
        ('debug', logging.DEBUG),
        ('info', logging.INFO),
        ('warning', logging.WARNING),
        ('error', logging.ERROR),
        ('critical', logging.CRITICAL),
    ]
)
def test_log_methods(method, level):
    logger = Mock()
    action = getattr(Logger(logger), method)('hello!')
    logger.log.assert_not_called()
    action.run()
    logger.log.assert_called_once_with(
        level, 'hello!', stack_info=False, exc_info=False
    )


def test_exception():
    logger = Mock()
    Logger(logger).exception('failed').run()
    logger.log.assert_called_once_with(
        logging.ERROR, 'failed', stack_info=False, exc_info=True
    )


def test_get_logger():
    assert get_logger('mlist.test').logger is logging.getLogger('mlist.test')
    assert get_logger().logger is logging.getLogger()


def test_log_lines_follow_element_order(caplog):
    logger = get_logger('mlist.test')

    def log_element(x):
        return logger.info(f'element {x}').map(lambda _: x)

    xs = from_iterable(io.value, [1, 2, 3])
    with caplog.at_level(logging.INFO, logger='mlist.test'):
        result = map_m(io.value, log_element, xs).and_then(
            to_tuple(io.value)
        ).run()
    assert result == (1, 2, 3)
    assert [r.getMessage() for r in caplog.records] == [
        'element 1', 'element 2', 'element 3'
    ]
