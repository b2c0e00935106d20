'''
    File Name: reports_view.py
    Version: 2.0.0
    Date: 18/10/2026
    Author: Pablo Bartolomé Molina
'''
import logging
from PyQt6.QtWidgets import QWidget, QVBoxLayout, QLabel, QSizePolicy, QTableWidget, QTableWidgetItem, QHeaderView
from PyQt6.QtCore import Qt

from matplotlib.figure import Figure
from matplotlib.patches import Wedge
from matplotlib.backends.backend_qtagg import FigureCanvasQTAgg as FigureCanvas

from engine.aggregator import category_percent
from engine.formatting import format_percent, format_yen
from engine.segmenter import conic_gradient
from models.category import category_info

logger = logging.getLogger(__name__)

# Donut ring thickness as a fraction of the radius
RING_WIDTH = 0.35


class ReportsView(QWidget):
    """Category breakdown for the month on screen.

    Shows a donut built from the book's segments (a neutral ring when the
    month is empty), the month total in the hole, and one row per category
    with its share and total.
    """

    def __init__(self, parent=None, book=None):
        super().__init__(parent)
        self.book = book

        self._figure = Figure(figsize=(4, 4), dpi=100)
        self._canvas = FigureCanvas(self._figure)
        self._canvas.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        self._ax = self._figure.add_subplot(111)

        self.setup_ui()

        try:
            self.refresh()
        except Exception:
            logger.exception("Failed to initialize ReportsView")

    def setup_ui(self) -> None:
        """Build the UI: title, donut canvas, category table and status label."""
        main_layout = QVBoxLayout()

        title = QLabel("カテゴリ別")
        title.setAlignment(Qt.AlignmentFlag.AlignCenter)
        title.setStyleSheet("font-weight: bold; font-size: 14px;")
        main_layout.addWidget(title)

        main_layout.addWidget(self._canvas)

        self._table = QTableWidget(0, 3)
        self._table.setHorizontalHeaderLabels(["Category", "Share", "Amount"])
        self._table.horizontalHeader().setSectionResizeMode(QHeaderView.ResizeMode.Stretch)
        self._table.verticalHeader().setVisible(False)
        self._table.setEditTriggers(QTableWidget.EditTrigger.NoEditTriggers)
        main_layout.addWidget(self._table)

        self._stats_label = QLabel("")
        self._stats_label.setStyleSheet("padding: 5px; background-color: #f0f0f0; border-radius: 3px;")
        main_layout.addWidget(self._stats_label)

        self.setLayout(main_layout)

    def refresh(self) -> None:
        """Recompute from the book and redraw."""
        if self.book is None:
            logger.debug("No book available for ReportsView")
            self._populate_table([], 0)
            self.plot_segments([], 0)
            return
        total = self.book.monthly_total()
        self._populate_table(self.book.category_totals(), total)
        self.plot_segments(self.book.segments(), total)

    def _populate_table(self, totals, month_total: int) -> None:
        self._table.setRowCount(0)
        for category, total in totals:
            row = self._table.rowCount()
            self._table.insertRow(row)
            self._table.setItem(row, 0, QTableWidgetItem(category_info(category).label))
            self._table.setItem(row, 1, QTableWidgetItem(format_percent(category_percent(total, month_total))))
            amount_item = QTableWidgetItem(format_yen(total))
            amount_item.setTextAlignment(Qt.AlignmentFlag.AlignRight | Qt.AlignmentFlag.AlignVCenter)
            self._table.setItem(row, 2, amount_item)

        if month_total == 0:
            self._stats_label.setText("No transactions this month")
        else:
            self._stats_label.setText(f"Total: {format_yen(month_total)}")

    def plot_segments(self, segments, month_total: int) -> None:
        """Draw segments as wedges, clockwise from 12 o'clock."""
        self._ax.clear()
        self._ax.set_xlim(-1.1, 1.1)
        self._ax.set_ylim(-1.1, 1.1)
        self._ax.set_aspect("equal")
        self._ax.axis("off")

        for seg in segments:
            if seg.sweep_degrees <= 0:
                continue
            # matplotlib angles run counter-clockwise from 3 o'clock
            wedge = Wedge(
                (0, 0), 1.0,
                90 - seg.end_degrees, 90 - seg.start_degrees,
                width=RING_WIDTH, facecolor=seg.color_hex, edgecolor="white",
            )
            self._ax.add_patch(wedge)

        self._ax.text(0, 0, format_yen(month_total), ha="center", va="center", fontsize=14, fontweight="bold")
        logger.debug("Plotted %s", conic_gradient(segments))
        self._canvas.draw()

    @property
    def wedge_count(self) -> int:
        return sum(1 for p in self._ax.patches if isinstance(p, Wedge))
