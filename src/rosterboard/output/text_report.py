"""Plain-text output of availability results.

This module creates text reports showing:
- Ranked worker summaries with status and reason
- Per-day verdict strips for a period
- Board pages grouped by region, plus extended leave
"""

from datetime import date
from pathlib import Path
from typing import Iterable, Union

from rosterboard.board.status_board import Board, BoardCell, BoardRow
from rosterboard.domain.models import DayStatus, WorkerPeriodSummary

DAY_SYMBOLS = {
    DayStatus.AVAILABLE: "A",
    DayStatus.NOT_AVAILABLE: "x",
    DayStatus.NOT_SCHEDULED: ".",
}


class TextReportGenerator:
    """Generates human-readable availability reports.

    Example:
        >>> generator = TextReportGenerator()
        >>> print(generator.summaries_to_string(ranked, week_start))
    """

    def __init__(self, name_width: int = 20):
        self.name_width = name_width

    def summaries_to_string(
        self,
        summaries: Iterable[WorkerPeriodSummary],
        period_start: date,
    ) -> str:
        """Render ranked summaries with a per-day strip."""
        summaries = list(summaries)
        lines = []

        lines.append("=" * 80)
        lines.append(f"WORKER AVAILABILITY - from {period_start}")
        lines.append("=" * 80)
        lines.append(f"{'#':>3} {'Name':<{self.name_width}} {'Status':<12} {'Days':<9} Reason")
        lines.append("-" * 80)

        for i, summary in enumerate(summaries, 1):
            name = (summary.worker.name or summary.worker.id)[: self.name_width]
            if summary.worker.is_subcontractor:
                name = f"{name[: self.name_width - 4]} (S)"
            strip = "".join(DAY_SYMBOLS[d.status] for d in summary.days) or "-"
            lines.append(
                f"{i:>3} {name:<{self.name_width}} {summary.status.value:<12} "
                f"{strip:<9} {summary.reason or ''}".rstrip()
            )

        lines.append("")
        lines.append(f"Total: {len(summaries)} workers")
        return "\n".join(lines) + "\n"

    def board_to_string(self, board: Board, page: int = 0) -> str:
        """Render one page of a board."""
        days = board.pages[page] if board.pages else ()
        lines = []

        lines.append("=" * 80)
        lines.append(
            f"AVAILABILITY BOARD - page {page + 1} of {len(board.pages)}"
            + (f" ({days[0]} to {days[-1]})" if days else "")
        )
        lines.append("=" * 80)

        for region, rows in board.groups.items():
            lines.append("")
            lines.append(f"{region} ({len(rows)})")
            lines.append("-" * 80)
            for row in rows:
                lines.append(self._row_line(row, days))

        if board.extended_leave:
            lines.append("")
            lines.append(f"On extended leave ({len(board.extended_leave)})")
            lines.append("-" * 80)
            for row in board.extended_leave:
                name = (row.worker.name or row.worker.id)[: self.name_width]
                lines.append(f"  {name:<{self.name_width}} {row.summary.reason or ''}".rstrip())

        return "\n".join(lines) + "\n"

    def generate(
        self,
        board: Board,
        output_path: Union[str, Path],
    ) -> str:
        """Render every board page and save to file.

        Returns:
            The generated text content.
        """
        content = "\n".join(
            self.board_to_string(board, page) for page in range(len(board.pages))
        )
        Path(output_path).write_text(content)
        return content

    def _row_line(self, row: BoardRow, days: Iterable[date]) -> str:
        name = (row.worker.name or row.worker.id)[: self.name_width]
        cells = "".join(self._cell_symbol(c) for c in row.cells_for(days))
        return f"  {name:<{self.name_width}} {cells}"

    @staticmethod
    def _cell_symbol(cell: BoardCell) -> str:
        if cell.verdict is None:
            return "S"
        symbol = DAY_SYMBOLS[cell.verdict.status]
        # Booked days show their load decile instead.
        if cell.verdict.is_available and cell.assigned_hours > 0:
            return str(min(9, cell.load.percent // 10))
        return symbol
