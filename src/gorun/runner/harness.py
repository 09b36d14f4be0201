"""
Run a func of a Go source file through `go test`, inside its own package.

A throwaway *_test.go file is written next to the source; its TestMain calls
the func. Because the func runs inside its package, it may use unexported
identifiers from other files of the package.
"""

import os
import secrets
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional, Union

from gorun.config import GorunSettings, get_settings
from gorun.exceptions import (
    EmptyArgumentError,
    FunctionNotFoundError,
    GoModuleNotFoundError,
    OutsideModuleError,
    SignatureError,
)
from gorun.logging_config import logger
from gorun.syntax import GoSourceFile
from .module_locator import find_toward_root, is_descendant_of
from .toolchain import go_test

TEMP_ATTEMPTS = 100

# Does not work if the package already declares func TestMain
HARNESS_TEMPLATE = """package {package}

import (
	"testing"
)

func TestMain(m *testing.M) {{
	{fn}()
}}
"""


def build_harness(package: str, fn: str) -> str:
    """Test source whose TestMain calls fn."""
    return HARNESS_TEMPLATE.format(package=package, fn=fn)


@contextmanager
def working_directory(path: Union[str, Path]) -> Iterator[Path]:
    """Chdir into path and always chdir back. Not safe across threads."""
    previous = os.getcwd()
    os.chdir(path)
    try:
        yield Path(path)
    finally:
        os.chdir(previous)


def harness_name(prefix: str, suffix: str) -> str:
    """
    Random harness file name such as "gorun482913_test.go".

    Only digits go between prefix and suffix, so the name never gains a
    "_<goos>" or "_<goarch>" part that would exclude it from the build.
    """
    return f"{prefix}{secrets.randbelow(10 ** 9)}{suffix}"


@contextmanager
def temp_test_file(directory: Path, content: str, suffix: str, prefix: str) -> Iterator[Path]:
    """Write content to a new *_test.go file in directory; remove it afterwards."""
    for _ in range(TEMP_ATTEMPTS):
        path = Path(directory) / harness_name(prefix, suffix)
        try:
            f = open(path, "x", encoding="utf-8")
        except FileExistsError:
            continue
        break
    else:
        raise FileExistsError(f"no unused test file name in {directory}")

    try:
        with f:
            f.write(content)
        logger.debug(f"Wrote test harness {path}")
        yield path
    finally:
        try:
            path.unlink()
        except FileNotFoundError:
            pass


def package_path(module_dir: Path, source_dir: Path) -> str:
    """Relative package path from the module root, e.g. "./cmd/tool"."""
    return "./" + os.path.relpath(source_dir, module_dir)


def run_as_test(file_path: Union[str, Path], fn: str, settings: Optional[GorunSettings] = None) -> None:
    """
    Execute func fn in file_path using `go test`.

    Must be called from inside a go module, and file_path must belong to
    that module. The working directory is restored on every exit path.
    """
    if not file_path:
        raise EmptyArgumentError("file")
    if not fn:
        raise EmptyArgumentError("fn")

    settings = settings or get_settings()
    abs_file_path = Path(os.path.abspath(file_path))

    # Head to root dir and look for the go.mod file;
    # if it's found, the root of the go module is there
    try:
        mod_file = find_toward_root(".", settings.manifest_file)
    except GoModuleNotFoundError as e:
        raise GoModuleNotFoundError("run_as_test() must be called in go module dir") from e
    mod_dir = mod_file.parent

    if not is_descendant_of(abs_file_path, mod_dir):
        raise OutsideModuleError(str(file_path), str(mod_dir))

    source = GoSourceFile.parse(file_path)

    decl = source.find_function(fn)
    if decl is None:
        raise FunctionNotFoundError(f"file '{file_path}' has no func '{fn}'")
    # Return values are not checked here, only arguments
    if decl.params:
        raise SignatureError(f"func '{fn}' must have no args")

    source_dir = abs_file_path.parent
    harness = build_harness(source.package_name, fn)

    with temp_test_file(source_dir, harness, settings.test_file_suffix, settings.temp_prefix):
        package = package_path(mod_dir, source_dir)
        with working_directory(mod_dir):
            logger.debug(f"Running func '{fn}' of package {package} in {mod_dir}")
            go_test(package, settings)
