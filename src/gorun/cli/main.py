"""
gorun command line entry points.

    gorun FILE FUNC         run FUNC as the main func of FILE (go run)
    gorun-test FILE FUNC    run FUNC inside FILE's package (go test)
"""

from typing import Callable

import typer

from gorun.exceptions import GorunError
from gorun.logging_config import logger
from gorun.runner import run_as_program, run_as_test
from .output import print_error

GO_EXTENSION = ".go"

app = typer.Typer(add_completion=False, help="Run any func in any file as main func")
harness_app = typer.Typer(add_completion=False, help="Run any func in any file inside its package via go test")


def with_go_extension(file: str) -> str:
    """The .go extension can be omitted on the command line."""
    if file and not file.endswith(GO_EXTENSION):
        return file + GO_EXTENSION
    return file


def _execute(runner: Callable[[str, str], None], go_file_path: str, func_name: str) -> None:
    try:
        runner(with_go_extension(go_file_path), func_name)
    except GorunError as e:
        logger.debug(f"{runner.__name__} failed: {e!r}")
        print_error(e)
        raise typer.Exit(code=1)


@app.command()
def run(
    go_file_path: str = typer.Argument(..., help="Path to go file to run"),
    func_name: str = typer.Argument(..., help="Name of func to run"),
):
    """Run FUNC_NAME of GO_FILE_PATH as its main func."""
    _execute(run_as_program, go_file_path, func_name)


@harness_app.command()
def run_test(
    go_file_path: str = typer.Argument(..., help="Path to go file in the current go module"),
    func_name: str = typer.Argument(..., help="Name of func to run"),
):
    """Run FUNC_NAME of GO_FILE_PATH through go test, inside its package."""
    _execute(run_as_test, go_file_path, func_name)


def main():
    app()


def main_test():
    harness_app()


if __name__ == "__main__":
    main()
