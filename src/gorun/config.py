"""Settings loading and auto-discovery."""
from pathlib import Path
from typing import Any, Dict, List, Optional
import os

try:  # Python 3.11+
    import tomllib
except ImportError:  # pragma: no cover - fallback for older environments
    import tomli as tomllib

from pydantic import BaseModel, Field, ValidationError

from gorun.exceptions import ConfigError
from gorun.logging_config import logger


class GorunSettings(BaseModel):
    """
    Settings for locating the go toolchain and shaping temp artifacts.
    """
    go_binary: str = "go"
    manifest_file: str = "go.mod"
    program_filename: str = "main.go"
    temp_prefix: str = "gorun"
    test_file_suffix: str = "_test.go"
    test_flags: List[str] = Field(default_factory=lambda: ["-v"])
    # Lines of `go test` output starting with this are dropped.
    # Heuristic: it targets the package summary line ("ok  \tpkg\t0.01s").
    suppress_prefix: str = "ok"


# Environment variable -> settings field
ENV_OVERRIDES = {
    "GORUN_GO": "go_binary",
    "GORUN_SUPPRESS_PREFIX": "suppress_prefix",
}


def config_paths() -> List[Path]:
    """
    Candidate config files in priority order.

    1. GORUN_CONFIG environment variable
    2. ./gorun.toml (project config)
    3. ~/.config/gorun/config.toml (user config)
    """
    paths = []

    env_config = os.environ.get("GORUN_CONFIG")
    if env_config:
        paths.append(Path(env_config))

    paths.append(Path("gorun.toml"))
    paths.append(Path.home() / ".config" / "gorun" / "config.toml")
    return paths


def load_config() -> Optional[Dict[str, Any]]:
    """
    Load the first config file found.

    Returns:
        Configuration dict or None if no config found
    """
    for path in config_paths():
        if path.exists():
            try:
                with open(path, "rb") as f:
                    data = tomllib.load(f)
            except tomllib.TOMLDecodeError as e:
                raise ConfigError(f"Invalid config file '{path}': {e}") from e
            logger.debug(f"Loaded config from {path}")
            # Settings may live at top level or under a [gorun] table
            return data.get("gorun", data)

    return None


def get_settings(overrides: Optional[Dict[str, Any]] = None) -> GorunSettings:
    """
    Build settings from defaults, config file, environment and explicit overrides.

    Raises:
        ConfigError: If a value has the wrong type.
    """
    values: Dict[str, Any] = dict(load_config() or {})

    for env_name, field in ENV_OVERRIDES.items():
        env_value = os.environ.get(env_name)
        if env_value:
            values[field] = env_value

    if overrides:
        values.update(overrides)

    try:
        return GorunSettings(**values)
    except ValidationError as e:
        raise ConfigError(f"Invalid gorun settings: {e}") from e
