"""Logging configuration for git-branch-manager"""

import logging

from rich.console import Console
from rich.logging import RichHandler

PACKAGE_PREFIX = "branch_manager."
LOGGER_PREFIX = "gbm."


def setup_logging(verbose: bool = False, debug: bool = False) -> None:
    """
    Configure logging for the application.

    Log records go to stderr so they never mix with listings and prompts
    on stdout.

    Args:
        verbose: If True, show INFO level messages
        debug: If True, show DEBUG level messages with timestamps and paths
    """
    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Remove existing handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = RichHandler(
        console=Console(stderr=True),
        show_level=True,
        show_time=debug,
        show_path=debug,
        rich_tracebacks=debug,
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("[%(name)s] %(message)s"))
    root_logger.addHandler(handler)

    # GitPython logs every command at DEBUG; keep it quiet unless asked
    logging.getLogger("git").setLevel(logging.DEBUG if debug else logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for the specified module.

    Args:
        name: Name of the module (typically __name__)

    Returns:
        Logger instance
    """
    # "branch_manager.git" must not become "git", which is GitPython's logger
    if name.startswith(PACKAGE_PREFIX):
        name = LOGGER_PREFIX + name[len(PACKAGE_PREFIX) :]

    return logging.getLogger(name)
