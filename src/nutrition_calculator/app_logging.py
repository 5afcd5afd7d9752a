"""Logging configuration helpers."""

import logging

from nutrition_calculator.config import parse_log_level

PACKAGE_LOGGER = "nutrition_calculator"
HANDLER_NAME = "nutrition_calculator.stream"


def configure_logging(level: int | str | None = logging.INFO) -> None:
    """Attach the package stream handler once and apply ``level``.

    Handlers installed by other tooling are left alone; only the package's
    own named handler counts towards idempotency.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level if isinstance(level, int) else parse_log_level(level))
    if any(handler.get_name() == HANDLER_NAME for handler in logger.handlers):
        return
    handler = logging.StreamHandler()
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(logging.Formatter("%(levelname)s: %(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
