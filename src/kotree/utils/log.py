import sys

from loguru import logger


def configure_logger(is_logging: bool = False) -> None:
    logger.remove()
    logger.add(sys.stdout, filter=lambda _: is_logging)

    # If a message higher than ERROR is logged while is_logging is False, log it to stderr regardless of the logging flag
    logger.add(sys.stderr, level="ERROR", filter=lambda _: not is_logging)
