from __future__ import annotations
import argparse
import logging
import sys

import numpy as np

from termsweeper.config import ConfigError, GameConfig, DEFAULT_COLS, DEFAULT_MINES, DEFAULT_ROWS
from termsweeper.engine import GridEngine
from termsweeper.session import GameSession


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='termsweeper', description='Play minesweeper in the terminal')
    # Raw strings, validated by GameConfig
    parser.add_argument('-r', '--rows', type=str, default=str(DEFAULT_ROWS), help='Number of rows of field')
    parser.add_argument('-c', '--cols', type=str, default=str(DEFAULT_COLS), help='Number of cols of field')
    parser.add_argument('-m', '--mines', type=str, default=str(DEFAULT_MINES), help='Number of mines < (cols x rows)')
    parser.add_argument('--seed', type=int, default=-1, help='RNG seed for the mine layout; <0 uses OS entropy (random every run)')
    parser.add_argument('-v', '--verbose', action='store_true', help='Debug logging on stderr')
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='[%(name)s] %(levelname)s: %(message)s',
        stream=sys.stderr,
    )

    try:
        config = GameConfig.from_options(args.rows, args.cols, args.mines,
                                         seed=(None if args.seed < 0 else args.seed))
    except ConfigError as e:
        print(f"[ERROR] {e}")
        return 1

    engine = GridEngine()
    engine.initialize(config.rows, config.cols, config.mines, rng=np.random.default_rng(config.seed))
    GameSession(engine).run()
    return 0


if __name__ == '__main__':
    sys.exit(main())
