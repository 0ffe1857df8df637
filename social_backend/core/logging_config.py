"""
Logging configuration for the application.

``setup_logging`` attaches a console handler to the root logger the first
time it is called; later calls are no-ops so repeated ``create_application``
calls (tests, reloads) do not duplicate output.
"""

# Standard library imports
import logging


def setup_logging(level: str = "INFO") -> None:
    """
    Configure the root logger

    Args:
        level: Logging level name (e.g. "DEBUG", "INFO"), case insensitive
    """
    root_logger = logging.getLogger()
    if root_logger.handlers:
        return

    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)
