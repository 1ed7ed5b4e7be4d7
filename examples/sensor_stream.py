import logging
import random

from mlist import Cons, MList, foldl, io, iterate, map_m, take, to_tuple, zip_
from mlist.logging import get_logger

logger = get_logger('sensor_stream')


@io.io
def read_temperature() -> float:
    return round(random.gauss(21.0, 2.0), 2)


def temperatures() -> io.IO[MList[float]]:
    return read_temperature().map(lambda t: Cons(t, temperatures))


def log_reading(reading):
    index, temperature = reading
    return logger.info(f'reading {index}: {temperature}').map(
        lambda _: temperature
    )


def average_of_first(n: int) -> io.IO[float]:
    indices = iterate(lambda i: io.value(i + 1), 1)
    return temperatures().and_then(
        lambda ts: map_m(
            io.value, log_reading, take(io.value, n, zip_(indices, ts))
        )
    ).and_then(
        foldl(io.value, lambda acc, t: io.value(acc + t), 0.0)
    ).map(lambda total: total / n)


if __name__ == '__main__':
    logging.basicConfig(level=logging.INFO)
    average_of_first(5).and_then(
        lambda average: io.put_line(f'average: {average:.2f}')
    ).run()
    temperatures().and_then(
        lambda ts: to_tuple(io.value, take(io.value, 3, ts))
    ).and_then(
        lambda first_three: io.put_line(f'first three: {first_three}')
    ).run()
