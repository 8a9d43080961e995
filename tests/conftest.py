import numpy as np
import pytest

from termsweeper.engine import GridEngine


class FixedLayout:
    """Stands in for a numpy Generator and always picks the given cells."""

    def __init__(self, cells, cols):
        self.flat = np.array([r * cols + c for r, c in cells])

    def choice(self, n, size=None, replace=True):
        assert size == len(self.flat)
        assert not replace
        assert all(0 <= i < n for i in self.flat)
        return self.flat


@pytest.fixture
def make_engine():
    def _make(rows, cols, mine_cells):
        engine = GridEngine()
        engine.initialize(rows, cols, len(mine_cells), rng=FixedLayout(mine_cells, cols))
        return engine
    return _make


@pytest.fixture
def corner_engine(make_engine):
    # 3x3 field, mines in opposite corners:
    #   [[-1, 1, 0],
    #    [ 1, 2, 1],
    #    [ 0, 1, -1]]
    return make_engine(3, 3, [(0, 0), (2, 2)])
