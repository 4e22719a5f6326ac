"""Logging setup for the command line and Streamlit front-ends.

Library modules only create module-level loggers; handlers are installed
here, by whatever process drives the simulation.
"""

import logging
from typing import Union

from rich.logging import RichHandler

LOG_FORMAT = "%(name)s  %(message)s"


def configure_logging(level: Union[int, str] = logging.INFO) -> None:
    logger = logging.getLogger()
    logger.setLevel(level)
    handler = RichHandler(show_path=False, show_time=True)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.handlers.clear()
    logger.addHandler(handler)
