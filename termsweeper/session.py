from __future__ import annotations
import logging
import re
from typing import Callable, Optional, Tuple, Union

from .engine import GridEngine

TITLE = '=== Minesweeper Game ==='
HINT = 'If you want close app, then type "quit" or press "Ctrl+C"'
PROMPT = 'Make a turn, please. Input Row and Column. For example: 2,4'
WRONG_INPUT = '[WARNING] Wrong input, try again'
ALREADY_OPENED = '[NOTE] This cell is already opened'
FAREWELL = 'Buy!'
WIN_TEXT = 'You Win!'
LOSE_TEXT = 'Game Over!'

QUIT = 'quit'

_NUMBER_RE = re.compile(r'(?:(?<!\d)[+-])?\d+(?:\.\d*)?')
_MAX_DIGITS = 9

logger = logging.getLogger(__name__)

Turn = Union[str, Tuple[int, int]]


def parse_turn(text: str, rows: int, cols: int) -> Optional[Turn]:
    """Turn a typed command into ``'quit'``, a 0-based ``(row, col)`` or ``None``.

    The player types 1-based numbers with any separator, e.g. ``2,4`` or ``2 4``.
    Zero and out-of-range values are rejected the same way as unparseable text.
    """
    if text.strip().lower() == QUIT:
        return QUIT
    numbers = _NUMBER_RE.findall(text)
    if len(numbers) < 2:
        return None
    row_text, col_text = numbers[0], numbers[1]
    # "1.5,2" is a typo, not row 1
    if '.' in row_text or '.' in col_text:
        return None
    if len(row_text.lstrip('+-')) > _MAX_DIGITS or len(col_text.lstrip('+-')) > _MAX_DIGITS:
        return None
    row, col = int(row_text), int(col_text)
    if not (1 <= row <= rows and 1 <= col <= cols):
        return None
    return row - 1, col - 1


class GameSession:
    def __init__(self, engine: GridEngine, ask: Optional[Callable[[str], str]] = None,
                 write: Optional[Callable[[str], None]] = None):
        self.engine = engine
        self.ask = ask if ask is not None else input
        self.write = write if write is not None else print
        self.turns = 0

    def next_turn(self) -> Turn:
        # Keep asking until the player gives a usable cell or quits
        while True:
            try:
                text = self.ask(PROMPT + '\n> ')
            except (EOFError, KeyboardInterrupt):
                self.write('')
                return QUIT
            turn = parse_turn(text, self.engine.rows, self.engine.cols)
            if turn is None:
                self.write(WRONG_INPUT)
                continue
            if turn != QUIT and turn in self.engine.opened_cells:
                self.write(ALREADY_OPENED)
                continue
            return turn

    def run(self) -> str:
        self.write(TITLE)
        self.write(self.engine.render())
        self.write('')
        self.write(HINT)
        while not self.engine.game_over:
            turn = self.next_turn()
            if turn == QUIT:
                logger.info("player quit after %d turns", self.turns)
                self.write(FAREWELL)
                return QUIT
            row, col = turn
            self.engine.reveal(row, col)
            self.turns += 1
            self.write(self.engine.render())
        self.write(WIN_TEXT if self.engine.won else LOSE_TEXT)
        return self.engine.outcome()
