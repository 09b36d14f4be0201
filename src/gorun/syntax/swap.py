"""
Swap the names of two top-level funcs in a GoSourceFile.
"""

from gorun.exceptions import FunctionNotFoundError, SignatureError
from gorun.logging_config import logger
from .source_file import GoSourceFile


def swap_simple_funcs(source: GoSourceFile, fn1: str, fn2: str, strict: bool) -> None:
    """
    Swap the func name of fn1 and the one of fn2.

    Funcs must not have arguments or return values. Every check runs before
    anything is renamed, so a failed swap leaves the source untouched.

    If strict is True, fn1 and fn2 must both be present; otherwise
    FunctionNotFoundError is raised. If strict is False, only the present
    func is renamed, and nothing happens when neither is present.

    Raises:
        FunctionNotFoundError: strict is True and either func is missing.
        SignatureError: Either present func has arguments or return values.
    """
    if strict:
        if not source.contains_function(fn1) or not source.contains_function(fn2):
            raise FunctionNotFoundError(f"func '{fn1}' or func '{fn2}' is not found")

    def has_args_or_returns(fn: str) -> bool:
        decl = source.find_function(fn)
        if decl is None:
            return False
        return decl.has_args_or_returns()

    if has_args_or_returns(fn1) or has_args_or_returns(fn2):
        raise SignatureError(f"func '{fn1}' and '{fn2}' must not have arguments and return values")

    if fn1 == fn2:
        return

    renamed = 0
    for decl in source.declarations:
        if not decl.is_function:
            continue
        if decl.name == fn1:
            decl.name = fn2
            renamed += 1
        elif decl.name == fn2:
            decl.name = fn1
            renamed += 1

    logger.debug(f"Swapped func '{fn1}' and '{fn2}' ({renamed} declarations renamed)")
