"""
Logging setup for gorun.

gorun prints to the same terminal as the Go program it runs, so the console
sink stays at WARNING unless GORUN_LOG_LEVEL says otherwise. GORUN_QUIET=1
removes the console sink entirely. GORUN_FILE_LOGGING=1 adds a rotating
debug log under ~/.gorun/logs.
"""

import os
import sys
from pathlib import Path

from loguru import logger

LOG_DIR = Path.home() / ".gorun" / "logs"
LOG_FILE = "gorun.log"

CONSOLE_FORMAT = "<level>{level: <8}</level> | <cyan>{name}</cyan> - <level>{message}</level>"

_configured = False


def _env_flag(name: str) -> bool:
    return os.getenv(name, "").lower() in ("1", "true", "yes")


def setup_logging(level=None, quiet=None, enable_file_logging=None, force=False):
    """
    Configure the loguru logger once per process.

    Args:
        level: Console level. Defaults to GORUN_LOG_LEVEL, then WARNING.
        quiet: Drop the console sink. Defaults to GORUN_QUIET.
        enable_file_logging: Add the debug log file. Defaults to GORUN_FILE_LOGGING.
        force: Reconfigure even if already configured.
    """
    global _configured

    if _configured and not force:
        return
    _configured = True

    logger.remove()

    if quiet is None:
        quiet = _env_flag("GORUN_QUIET")
    if not quiet:
        logger.add(
            sys.stderr,
            level=(level or os.getenv("GORUN_LOG_LEVEL", "WARNING")).upper(),
            format=CONSOLE_FORMAT,
            colorize=True,
        )

    if enable_file_logging is None:
        enable_file_logging = _env_flag("GORUN_FILE_LOGGING")
    if enable_file_logging:
        LOG_DIR.mkdir(parents=True, exist_ok=True)
        logger.add(
            LOG_DIR / LOG_FILE,
            level="DEBUG",
            rotation="10 MB",
            retention="1 day",
            compression="gz",
            catch=True,
        )


setup_logging()
