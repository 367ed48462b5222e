import sys
from typing import Callable, TypeVar

from loguru import logger

T = TypeVar("T")


def checked_new(factory: Callable[..., T], *args) -> T:
    try:
        return factory(*args)
    except MemoryError:
        # Running out of memory is not recoverable.
        logger.error(f"Allocation failed while creating {getattr(factory, '__name__', factory)}")
        sys.exit(1)
