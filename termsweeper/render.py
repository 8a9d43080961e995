from __future__ import annotations
from typing import AbstractSet, Sequence, Tuple

MASK = '_'
MINE_MARK = 'X'

# Field layout:
#   - every column is digits(cols) + 2 wide, right-justified
#   - the row header column is digits(rows) + 1 wide and holds "N|"
#   - the header is a line of 1-based column numbers underlined with "_"


def render_field(grid: Sequence[Sequence[int]], opened_cells: AbstractSet[Tuple[int, int]],
                 rows: int, cols: int, game_over: bool) -> str:
    col_width = len(str(cols)) + 2
    row_header_width = len(str(rows)) + 1

    numbers_line = ''.join(str(c + 1).rjust(col_width) for c in range(cols))
    lines = [
        ' ' * row_header_width + numbers_line,
        ' ' * row_header_width + '_' * len(numbers_line),
    ]
    for r in range(rows):
        row = [f"{r + 1}|".rjust(row_header_width)]
        for c in range(cols):
            value = int(grid[r][c])
            if game_over:
                text = MINE_MARK if value == -1 else str(value)
            elif (r, c) in opened_cells:
                text = str(value)
            else:
                text = MASK
            row.append(text.rjust(col_width))
        lines.append(''.join(row))
    return '\n'.join(lines)
