"""
Run a func of a Go source file as if it were that file's main func.
"""

from pathlib import Path
from typing import Optional, Union

from gorun.config import GorunSettings, get_settings
from gorun.exceptions import EmptyArgumentError, FunctionNotFoundError
from gorun.logging_config import logger
from gorun.syntax import GoSourceFile, swap_simple_funcs
from .toolchain import go_run


def convert(file_path: Union[str, Path], fn: str) -> GoSourceFile:
    """
    Convert the source code so that it can be executed with `go run`.

    The package becomes "main" and fn trades names with main.
    """
    source = GoSourceFile.parse(file_path)

    if not source.contains_function(fn):
        raise FunctionNotFoundError(f"file '{file_path}' has no func '{fn}'")

    source.rename_package("main")
    swap_simple_funcs(source, fn, "main", strict=False)
    return source


def run_as_program(file_path: Union[str, Path], fn: str, settings: Optional[GorunSettings] = None) -> None:
    """
    Execute func fn in file_path using `go run`.

    The converted source lives in a fresh temp directory that is removed
    on every exit path.
    """
    if not file_path:
        raise EmptyArgumentError("file")
    if not fn:
        raise EmptyArgumentError("fn")

    settings = settings or get_settings()
    source = convert(file_path, fn)

    with source.temp_source(filename=settings.program_filename, prefix=settings.temp_prefix) as main_file:
        logger.debug(f"Running func '{fn}' of {file_path} as {main_file}")
        go_run(main_file, settings)
