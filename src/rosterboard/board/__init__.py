"""Rotating status board over a rolling availability window."""

from rosterboard.board.status_board import (
    Board,
    BoardCell,
    BoardConfig,
    BoardRow,
    build_board,
    page_for_elapsed,
    paginate,
)

__all__ = [
    "Board",
    "BoardCell",
    "BoardConfig",
    "BoardRow",
    "build_board",
    "page_for_elapsed",
    "paginate",
]
