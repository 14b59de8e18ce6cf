"""Logging configuration for vidplay."""

import sys

from loguru import logger

# Silence loguru's stock DEBUG sink until the CLI decides on verbosity
logger.remove()

# Quiet mode: level and message only, so warnings sit cleanly between shell output
_quiet_format = "<level>{level: <7}</level> | {message}"
# Verbose mode: timestamped, for following play/pause/flag transitions
_verbose_format = "<dim>{time:HH:mm:ss}</dim> | <level>{level: <7}</level> | {message}"


def configure_logging(verbose: bool = False) -> None:
    """Route vidplay logs to stderr at the requested verbosity.

    Args:
        verbose: If True, show DEBUG level (state transitions) with timestamps.
            If False, only warnings and errors reach stderr so that command
            output stays readable in the interactive shell.
    """
    # Called once per CLI instance; drop whatever sink an earlier call added
    logger.remove()
    if verbose:
        logger.add(sys.stderr, format=_verbose_format, level="DEBUG")
        return
    # Catalogue load messages are INFO and stay hidden here
    logger.add(sys.stderr, format=_quiet_format, level="WARNING")


# Modules import the shared logger from here rather than from loguru
__all__ = ["logger", "configure_logging"]
