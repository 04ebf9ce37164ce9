import logging
import os
from dataclasses import dataclass

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass
class CompileOptions:
    strict: bool = False
    log_level: str = "WARNING"

    @classmethod
    def strict_mode(cls) -> "CompileOptions":
        return cls(strict=True)

    @classmethod
    def lenient(cls) -> "CompileOptions":
        return cls(strict=False)

    @classmethod
    def from_env(cls) -> "CompileOptions":
        opts = cls()
        raw = os.environ.get("STAK_STRICT")
        if raw is not None:
            opts.strict = raw.strip().lower() in _TRUTHY
        level = os.environ.get("STAK_LOG_LEVEL")
        if level:
            opts.log_level = level.strip().upper()
        return opts

    @property
    def log_level_value(self) -> int:
        value = logging.getLevelName(self.log_level.upper())
        return value if isinstance(value, int) else logging.WARNING
