"""
gorun - run any func in any Go file as main func.
"""

__version__ = "0.1.0"

from gorun.exceptions import GorunError
from gorun.syntax import GoSourceFile, structurally_equal, swap_simple_funcs
from gorun.runner import run_as_program, run_as_test

__all__ = [
    "__version__",
    "GorunError",
    "GoSourceFile",
    "structurally_equal",
    "swap_simple_funcs",
    "run_as_program",
    "run_as_test",
]
