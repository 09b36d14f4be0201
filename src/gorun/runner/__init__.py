"""
Runner package: turn a func of a Go source file into something the go
toolchain can execute, run it, and clean up afterwards.
"""

from .program import convert, run_as_program
from .harness import run_as_test, build_harness
from .module_locator import find_toward_root, is_descendant_of
from .output_filter import GoTestOutputFilter
from .toolchain import go_run, go_test

__all__ = [
    "convert",
    "run_as_program",
    "run_as_test",
    "build_harness",
    "find_toward_root",
    "is_descendant_of",
    "GoTestOutputFilter",
    "go_run",
    "go_test",
]
