from __future__ import annotations
import re
from dataclasses import dataclass
from typing import Optional

DEFAULT_ROWS = 20
DEFAULT_COLS = 30
DEFAULT_MINES = 25

# At most 18 digits, no leading zeros
_INT_RE = re.compile(r'\s*[+-]?(?:0|[1-9]\d{0,17})\s*')
_LEADING_INT_RE = re.compile(r'\s*([+-]?\d{1,18})(?!\d)')


class ConfigError(ValueError):
    """Startup parameters that cannot describe a playable field."""


def parse_int(value, min_value: Optional[int] = None, max_value: Optional[int] = None) -> Optional[int]:
    # Strict integer parsing: whitespace and a sign are fine; "1.5", "007" or "" are not
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, int):
        n = value
    elif isinstance(value, str) and _INT_RE.fullmatch(value):
        n = int(value)
    else:
        return None
    if min_value is not None and n < min_value:
        return None
    if max_value is not None and n > max_value:
        return None
    return n


def _loose_int(value) -> int:
    # Used only to echo a rejected value back in an error message
    n = parse_int(value)
    if n is not None:
        return n
    m = _LEADING_INT_RE.match(value) if isinstance(value, str) else None
    return int(m.group(1)) if m else 0


@dataclass
class GameConfig:
    rows: int = DEFAULT_ROWS
    cols: int = DEFAULT_COLS
    mines: int = DEFAULT_MINES
    seed: Optional[int] = None

    @property
    def max_mines(self) -> int:
        return self.rows * self.cols - 1

    @classmethod
    def from_options(cls, rows=DEFAULT_ROWS, cols=DEFAULT_COLS, mines=DEFAULT_MINES, seed=None) -> 'GameConfig':
        n_cols = parse_int(cols, min_value=1)
        if n_cols is None:
            raise ConfigError("Wrong number of columns")
        n_rows = parse_int(rows, min_value=1)
        if n_rows is None:
            raise ConfigError("Wrong number of rows")
        max_mines = n_rows * n_cols - 1
        n_mines = parse_int(mines, min_value=1, max_value=max_mines)
        if n_mines is None:
            raise ConfigError(
                f"Wrong number of mines {_loose_int(mines)}, it should be in range from 1 to {max_mines}")
        return cls(rows=n_rows, cols=n_cols, mines=n_mines, seed=seed)
