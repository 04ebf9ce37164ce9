import dataclasses
import os
import tomllib
from typing import Any, Dict, Optional

from .exceptions import ConfigError
from .models import CompileOptions

CONFIG_NAME = "stak.toml"


def _read_manifest(path: str) -> Dict[str, Any]:
    if not os.path.isfile(path):
        raise ConfigError(f"Config Error: {path} not found")
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Config Error: {path} is not valid TOML: {e}") from e


def load_config(path: str, base: Optional[CompileOptions] = None) -> CompileOptions:
    """Overlay the `[compiler]` table of a stak.toml onto `base` (defaults to the environment)."""
    manifest = _read_manifest(path)
    opts = dataclasses.replace(base) if base is not None else CompileOptions.from_env()

    section = manifest.get("compiler", {})
    if not isinstance(section, dict):
        raise ConfigError("Config Error: [compiler] must be a table")

    for key, value in section.items():
        if key == "strict":
            if not isinstance(value, bool):
                raise ConfigError("Config Error: compiler.strict must be a boolean")
            opts.strict = value
        elif key == "log_level":
            if not isinstance(value, str):
                raise ConfigError("Config Error: compiler.log_level must be a string")
            opts.log_level = value.upper()
        else:
            raise ConfigError(f"Config Error: unknown key compiler.{key}")
    return opts


def find_config(start_dir: str) -> Optional[str]:
    """Return the nearest stak.toml at or above `start_dir`, if any."""
    current = os.path.abspath(start_dir)
    while True:
        candidate = os.path.join(current, CONFIG_NAME)
        if os.path.isfile(candidate):
            return candidate
        parent = os.path.dirname(current)
        if parent == current:
            return None
        current = parent
