"""
Thin wrappers over the `go` command.
"""

import shutil
import subprocess
from pathlib import Path
from typing import List, Optional, TextIO

from gorun.config import GorunSettings, get_settings
from gorun.exceptions import ToolchainCommandError, ToolchainMissingError
from gorun.logging_config import logger
from .output_filter import GoTestOutputFilter


def resolve_go(settings: GorunSettings) -> str:
    """Full path of the go binary, or ToolchainMissingError."""
    go = shutil.which(settings.go_binary)
    if not go:
        raise ToolchainMissingError(settings.go_binary)
    return go


def _run(command: List[str], stdout=None) -> None:
    logger.debug(f"Running: {' '.join(command)}")
    result = subprocess.run(command, stdout=stdout)
    if result.returncode != 0:
        logger.debug(f"Command exited with status {result.returncode}")
        raise ToolchainCommandError(result.returncode, command)


def go_run(file_path: Path, settings: Optional[GorunSettings] = None) -> None:
    """
    Execute `go run <file>` with stdout and stderr inherited.

    Raises:
        ToolchainMissingError: go is not on PATH.
        ToolchainCommandError: go run exited with a nonzero status.
    """
    settings = settings or get_settings()
    go = resolve_go(settings)
    _run([go, "run", str(file_path)])


def go_test(package: str, settings: Optional[GorunSettings] = None, sink: Optional[TextIO] = None) -> None:
    """
    Execute `go test <flags> <package>`.

    Stdout goes through GoTestOutputFilter; stderr is inherited. The filter
    is drained completely before this returns, even when go test fails.

    Raises:
        ToolchainMissingError: go is not on PATH.
        ToolchainCommandError: go test exited with a nonzero status.
    """
    settings = settings or get_settings()
    go = resolve_go(settings)

    with GoTestOutputFilter(sink=sink, prefix=settings.suppress_prefix) as output:
        _run([go, "test", *settings.test_flags, package], stdout=output)
