from dataclasses import dataclass
from enum import Enum

from columnize.errors import ConfigurationError

# ——— Defaults ———————————————————————————————————————
DEFAULT_DELIMITER = "  "  # 2 spaces


class Justification(Enum):
    AUTO = "auto"    # right if the field parses as a number, left otherwise
    LEFT = "left"
    RIGHT = "right"


class Strategy(Enum):
    EXTENTS = "extents"        # merge word positions across lines
    WHITESPACE = "whitespace"  # split on whitespace, nth word is nth column


@dataclass(frozen=True)
class Settings:
    header_lines: int = 0
    footer_lines: int = 0
    delimiter: str = DEFAULT_DELIMITER
    justification: Justification = Justification.AUTO
    strategy: Strategy = Strategy.EXTENTS

    def __post_init__(self):
        for name in ("header_lines", "footer_lines"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ConfigurationError(f"{name} must be an integer, got {value!r}")
            if value < 0:
                raise ConfigurationError(f"{name} cannot be negative: {value}")
        if not isinstance(self.justification, Justification):
            raise ConfigurationError(f"unknown justification: {self.justification!r}")
        if not isinstance(self.strategy, Strategy):
            raise ConfigurationError(f"unknown strategy: {self.strategy!r}")
