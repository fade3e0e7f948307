# -*- coding: utf-8 -*-
"""
コマンドラインから数独を解くためのモジュールです。

使い方::

    sudone 3 -f puzzle.sud            # 解いて標準出力に表示
    sudone 3 -f puzzle.sud -o out.sud # 解いた盤面をファイルにも書き出す
    sudone 3 --no-solve < puzzle.sud  # 読み込んで表示するだけ

終了コード
----------
0 : 正常終了
1 : 引数が不正
2 : 盤面データが不正
3 : 解が存在しない
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from typing import List, Optional

from .config import (
    EXIT_INVALID_ARG, EXIT_INVALID_DATA, EXIT_SUCCESS, EXIT_UNSOLVABLE,
    MAX_BLOCK_SIZE, PROGRAM_NAME,
)
from .errors import InvalidDataError
from .io.sud_format import load_grid, load_grid_file, write_grid_file
from .logging_utils import get_logger
from .postprocess.render import print_grid
from .resolution.engine import solve_grid
from .types import SolveStats

logger = get_logger()


class _ArgumentParser(argparse.ArgumentParser):
    """引数エラー時に EXIT_INVALID_ARG で終了する ArgumentParser。"""

    def error(self, message: str):
        self.print_usage(sys.stderr)
        self.exit(EXIT_INVALID_ARG, f"{self.prog}: error: {message}\n")


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog=PROGRAM_NAME,
        description="Solve an N^2 x N^2 Sudoku grid stored in the .sud binary format.",
    )
    parser.add_argument("n", type=int, help="block size N (the grid side is N*N)")
    parser.add_argument("-f", "--file", help="grid file to read (default: standard input)")
    parser.add_argument("-o", "--output", help="write the resulting grid to this .sud file")
    parser.add_argument("--no-solve", action="store_true", help="only load and print the grid")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logger.setLevel(logging.DEBUG)

    if not 1 <= args.n <= MAX_BLOCK_SIZE:
        parser.print_usage(sys.stderr)
        print(f"{PROGRAM_NAME}: error: N must be between 1 and {MAX_BLOCK_SIZE}", file=sys.stderr)
        return EXIT_INVALID_ARG

    try:
        if args.file:
            grid = load_grid_file(args.file, args.n)
        else:
            grid = load_grid(sys.stdin.buffer, args.n)
    except FileNotFoundError as e:
        print(f"{PROGRAM_NAME}: error: {e}", file=sys.stderr)
        return EXIT_INVALID_ARG
    except InvalidDataError as e:
        print(f"{PROGRAM_NAME}: invalid data: {e}", file=sys.stderr)
        return EXIT_INVALID_DATA

    status = EXIT_SUCCESS
    if not args.no_solve:
        stats = SolveStats()
        start = time.perf_counter()
        solved = solve_grid(grid, stats)
        logger.info(
            "Solved=%s in %.3fs (sweeps=%d, backtracking=%s)",
            solved,
            time.perf_counter() - start,
            stats.sweeps,
            stats.used_backtracking,
        )
        if not solved:
            status = EXIT_UNSOLVABLE

    print_grid(grid, sys.stdout)

    if args.output:
        write_grid_file(grid, args.output)
        logger.info("Grid written to %s", args.output)

    return status


if __name__ == "__main__":
    sys.exit(main())
