"""PDF generation for the availability board.

This module creates printable PDF boards showing:
- One page per board page, workers grouped by region
- Day cells colored by availability and assigned-hours load
- Workers on extended leave listed after the grid
"""

from io import BytesIO
from pathlib import Path
from typing import Union

from rosterboard.availability.load import AVAILABLE_COLOR, BOOKED_COLOR, PARTIAL_COLOR
from rosterboard.board.status_board import Board, BoardCell, BoardRow

# Color definitions (RGB tuples, 0-1 scale)
COLORS = {
    "not_scheduled": (0.95, 0.95, 0.95),  # Light gray
    "leave": BOOKED_COLOR,
    "subcontractor": (0.6, 0.75, 0.9),  # Light blue
    "header": (0.85, 0.85, 0.85),
}


class BoardPDFGenerator:
    """Generates printable PDF availability boards.

    Example:
        >>> generator = BoardPDFGenerator()
        >>> generator.generate(board, "board.pdf")
    """

    def __init__(
        self,
        page_width: float = 792,  # Letter landscape width (11")
        page_height: float = 612,  # Letter landscape height (8.5")
        margin: float = 36,  # 0.5 inch margins
        row_height: float = 14,
    ):
        self.page_width = page_width
        self.page_height = page_height
        self.margin = margin
        self.row_height = row_height

    def generate(self, board: Board, output_path: Union[str, Path]) -> None:
        """Generate the board PDF and save to file."""
        try:
            from reportlab.lib.pagesizes import landscape, letter
            from reportlab.pdfgen import canvas
        except ImportError:
            raise ImportError(
                "reportlab is required for PDF generation. "
                "Install with: pip install reportlab"
            )

        c = canvas.Canvas(str(output_path), pagesize=landscape(letter))
        self._draw_board(c, board)
        c.save()

    def generate_to_buffer(self, board: Board) -> BytesIO:
        """Generate the board PDF and return as bytes buffer."""
        try:
            from reportlab.lib.pagesizes import landscape, letter
            from reportlab.pdfgen import canvas
        except ImportError:
            raise ImportError(
                "reportlab is required for PDF generation. "
                "Install with: pip install reportlab"
            )

        buffer = BytesIO()
        c = canvas.Canvas(buffer, pagesize=landscape(letter))
        self._draw_board(c, board)
        c.save()
        buffer.seek(0)
        return buffer

    def _draw_board(self, c, board: Board) -> None:
        for page_index in range(len(board.pages)):
            self._draw_page(c, board, page_index)
        if board.extended_leave:
            self._draw_leave_page(c, board)

    def _draw_page(self, c, board: Board, page_index: int) -> None:
        """Draw one board page, continuing onto new sheets when rows overflow."""
        days = board.pages[page_index]
        name_width = 110
        grid_left = self.margin + name_width
        grid_width = self.page_width - self.margin - grid_left
        cell_width = grid_width / max(1, len(days))
        top = self.page_height - self.margin - 50

        self._draw_header(c, board, page_index)
        self._draw_day_axis(c, days, grid_left, top, cell_width)
        y = top - 18

        for region, rows in board.groups.items():
            if y < self.margin + 2 * self.row_height:
                c.showPage()
                self._draw_header(c, board, page_index)
                self._draw_day_axis(c, days, grid_left, top, cell_width)
                y = top - 18

            c.setFillColorRGB(0, 0, 0)
            c.setFont("Helvetica-Bold", 9)
            c.drawString(self.margin, y, f"{region} ({len(rows)})")
            y -= self.row_height

            for row in rows:
                if y < self.margin + self.row_height:
                    c.showPage()
                    self._draw_header(c, board, page_index)
                    self._draw_day_axis(c, days, grid_left, top, cell_width)
                    y = top - 18
                self._draw_row(c, row, days, grid_left, cell_width, y)
                y -= self.row_height

        self._draw_legend(c, self.margin, self.margin - 20)
        c.showPage()

    def _draw_header(self, c, board: Board, page_index: int) -> None:
        days = board.pages[page_index]
        c.setFillColorRGB(0, 0, 0)
        c.setFont("Helvetica-Bold", 16)
        title = "Worker Availability"
        if days:
            title += f" - {days[0].strftime('%b %d')} to {days[-1].strftime('%b %d, %Y')}"
        c.drawString(self.margin, self.page_height - self.margin - 20, title)

        c.setFont("Helvetica", 10)
        c.drawString(
            self.margin,
            self.page_height - self.margin - 35,
            f"Page {page_index + 1} of {len(board.pages)}  |  "
            f"Workers shown: {len(board.rows)}",
        )

    def _draw_day_axis(self, c, days, x: float, y: float, cell_width: float) -> None:
        c.setFont("Helvetica", 6)
        c.setFillColorRGB(0, 0, 0)
        for i, d in enumerate(days):
            cx = x + i * cell_width + cell_width / 2
            c.drawCentredString(cx, y + 6, d.strftime("%a")[:2])
            c.drawCentredString(cx, y, str(d.day))

    def _draw_row(
        self,
        c,
        row: BoardRow,
        days,
        x: float,
        cell_width: float,
        y: float,
    ) -> None:
        name = row.worker.name or row.worker.id
        c.setFillColorRGB(0, 0, 0)
        c.setFont("Helvetica", 8)
        c.drawString(self.margin + 8, y + 3, name[:20])

        for i, cell in enumerate(row.cells_for(days)):
            c.setFillColorRGB(*self._cell_color(cell))
            c.rect(x + i * cell_width, y, cell_width - 1, self.row_height - 2, fill=1, stroke=0)

    @staticmethod
    def _cell_color(cell: BoardCell) -> tuple:
        if cell.verdict is None:
            return COLORS["subcontractor"]
        if not cell.verdict.is_scheduled:
            return COLORS["not_scheduled"]
        if not cell.verdict.is_available:
            return COLORS["leave"]
        return cell.load.color

    def _draw_leave_page(self, c, board: Board) -> None:
        c.setFillColorRGB(0, 0, 0)
        c.setFont("Helvetica-Bold", 16)
        c.drawString(self.margin, self.page_height - self.margin - 20, "On Extended Leave")

        y = self.page_height - self.margin - 50
        c.setFont("Helvetica", 10)
        for row in board.extended_leave:
            if y < self.margin:
                c.showPage()
                c.setFont("Helvetica", 10)
                y = self.page_height - self.margin - 20
            leave = row.summary.leave_ranges[0] if row.summary.leave_ranges else None
            text = row.worker.name or row.worker.id
            if leave is not None:
                text += f"  {leave.start_date} to {leave.end_date}"
            if row.summary.reason:
                text += f"  ({row.summary.reason})"
            c.drawString(self.margin + 20, y, text)
            y -= 15
        c.showPage()

    def _draw_legend(self, c, x: float, y: float) -> None:
        """Draw legend for colors."""
        c.setFont("Helvetica-Bold", 8)
        c.setFillColorRGB(0, 0, 0)
        c.drawString(x, y, "Legend:")

        items = [
            (AVAILABLE_COLOR, "Available"),
            (PARTIAL_COLOR, "Half booked"),
            (BOOKED_COLOR, "Booked / leave"),
            (COLORS["not_scheduled"], "Not scheduled"),
            (COLORS["subcontractor"], "Subcontractor"),
        ]

        c.setFont("Helvetica", 7)
        current_x = x + 45
        for color, label in items:
            c.setFillColorRGB(*color)
            c.rect(current_x, y - 2, 12, 10, fill=1, stroke=1)
            c.setFillColorRGB(0, 0, 0)
            c.drawString(current_x + 15, y, label)
            current_x += 85
