import os
from dataclasses import dataclass

# Number of characters the display can hold
MAX_DIGITS = 20

# Shown in place of a number after a division by zero or similar
ERROR_MARKER = "-- error --"

_TRUTHY = ("1", "true", "yes", "on")
_FALSY = ("0", "false", "no", "off", "")
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class CalculatorConfig:
    max_digits: int = MAX_DIGITS
    error_marker: str = ERROR_MARKER
    # True keeps the old behaviour of never showing a zero result on '='
    suppress_zero_result: bool = False
    log_level: str = "WARNING"

    def __post_init__(self):
        if self.max_digits < 2:
            raise ValueError(f"max_digits must be at least 2, got {self.max_digits}")
        if len(self.error_marker) > self.max_digits:
            raise ValueError(f"error_marker {self.error_marker!r} is longer than max_digits={self.max_digits}")
        self.log_level = self.log_level.upper()
        if self.log_level not in _LOG_LEVELS:
            raise ValueError(f"Unknown log level: {self.log_level}")

    @classmethod
    def from_env(cls) -> "CalculatorConfig":
        """Build a config from CALC_* environment variables, falling back to defaults."""
        max_digits = os.getenv("CALC_MAX_DIGITS")
        try:
            digits = int(max_digits) if max_digits else MAX_DIGITS
        except ValueError:
            raise ValueError(f"CALC_MAX_DIGITS must be an integer, got {max_digits!r}")

        return cls(
            max_digits=digits,
            suppress_zero_result=_parse_bool("CALC_SUPPRESS_ZERO_RESULT"),
            log_level=os.getenv("CALC_LOG_LEVEL", "WARNING"),
        )


def _parse_bool(name: str) -> bool:
    raw = os.getenv(name, "").strip().lower()
    if raw in _TRUTHY:
        return True
    if raw in _FALSY:
        return False
    raise ValueError(f"{name} must be a boolean, got {raw!r}")
