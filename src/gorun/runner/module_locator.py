"""
Locate the go module that encloses a directory.
"""

import os
from pathlib import Path
from typing import Union

from gorun.exceptions import EmptyArgumentError, GoModuleNotFoundError
from gorun.logging_config import logger

PathLike = Union[str, Path]


def find_toward_root(base_dir: PathLike, file: str) -> Path:
    """
    Head from base_dir toward the filesystem root looking for a regular file.

    Directories named like ``file`` do not count. The filesystem root itself
    is not searched.

    Args:
        base_dir: Directory to start from (relative paths are made absolute)
        file: File name to look for, e.g. "go.mod"

    Returns:
        Absolute path of the first match

    Raises:
        EmptyArgumentError: If file is empty.
        GoModuleNotFoundError: If base_dir is not a directory or nothing is found.
    """
    if not file:
        raise EmptyArgumentError("file")
    if base_dir == "" or not Path(base_dir).is_dir():
        raise GoModuleNotFoundError(f"dir '{base_dir}' is not found")

    directory = Path(os.path.abspath(base_dir))
    while directory != directory.parent:
        candidate = directory / file
        if candidate.is_file():
            logger.debug(f"Found {file} at {candidate}")
            return candidate
        directory = directory.parent

    raise GoModuleNotFoundError(f"file '{file}' is not found")


def is_descendant_of(candidate: PathLike, root: PathLike) -> bool:
    """
    True if candidate lies under root (or is root).

    Both paths are made absolute and resolved before comparing.
    """
    candidate_str = str(Path(candidate).resolve())
    root_str = str(Path(root).resolve())
    if candidate_str == root_str:
        return True
    return candidate_str.startswith(root_str.rstrip(os.sep) + os.sep)
