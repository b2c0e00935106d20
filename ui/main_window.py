'''
    File Name: main_window.py
    Version: 3.0.0
    Date: 18/10/2026
    Author: Pablo Bartolomé Molina
'''
from datetime import date as Date
from pathlib import Path
import logging
from typing import List, Optional

from PyQt6 import QtWidgets, QtCore
from config import APP_NAME, APP_VERSION, STYLESHEET_PATH, WEEKDAY_LABELS, ensure_data_dir

# Local UI components
from .transaction_form import TransactionForm
from .reports_view import ReportsView
from database.kv_store import KeyValueStore
from database.transaction_repository import TransactionRepository
from engine.aggregator import daily_total
from engine.book import ExpenseBook
from engine.formatting import compact_day_total, format_yen, month_title
from models.category import category_info
from models.transaction import Transaction

logger = logging.getLogger(__name__)

TX_ID_ROLE = QtCore.Qt.ItemDataRole.UserRole
TODAY_STYLE = "background-color: #1e293b; color: white; font-weight: bold;"


def open_default_book() -> ExpenseBook:
    """Open the book backed by the configured SQLite file."""
    kv = KeyValueStore()
    kv.ensure_database()
    return ExpenseBook.open(TransactionRepository(kv))


class MainWindow(QtWidgets.QMainWindow):
    def __init__(self, *args, book: Optional[ExpenseBook] = None, **kwargs):
        super().__init__(*args, **kwargs)

        # Ensure runtime data dir exists (safe)
        try:
            ensure_data_dir()
        except Exception:
            logger.exception("Failed ensuring data directory")

        self.setWindowTitle(f"{APP_NAME} — {APP_VERSION}")
        self.status = self.statusBar()
        self.status.showMessage("Ready")

        # Book may be injected by the app or tests
        self.book = book if book is not None else open_default_book()

        # Apply stylesheet if present (non-fatal)
        try:
            self._apply_stylesheet()
        except Exception:
            logger.exception("Failed to apply stylesheet")

        central_widget = QtWidgets.QWidget()
        self.setCentralWidget(central_widget)

        main_layout = QtWidgets.QVBoxLayout()
        main_layout.setSpacing(10)
        main_layout.setContentsMargins(10, 10, 10, 10)

        # Header: month total (opens breakdown) and month navigation
        header = QtWidgets.QHBoxLayout()
        self.total_button = QtWidgets.QPushButton()
        self.total_button.setStyleSheet("font-size: 22px; font-weight: bold; text-align: left;")
        self.total_button.setToolTip("TOTAL SPENDING")
        header.addWidget(self.total_button)
        header.addStretch(1)

        self.prev_button = QtWidgets.QPushButton("<")
        self.month_label = QtWidgets.QLabel()
        self.month_label.setAlignment(QtCore.Qt.AlignmentFlag.AlignCenter)
        self.next_button = QtWidgets.QPushButton(">")
        header.addWidget(self.prev_button)
        header.addWidget(self.month_label)
        header.addWidget(self.next_button)
        main_layout.addLayout(header)

        # Calendar grid: weekday header on row 0, days below
        self.calendar_grid = QtWidgets.QGridLayout()
        self.calendar_grid.setSpacing(4)
        for col, label in enumerate(WEEKDAY_LABELS):
            lbl = QtWidgets.QLabel(label)
            lbl.setAlignment(QtCore.Qt.AlignmentFlag.AlignCenter)
            if col == 0:
                lbl.setStyleSheet("color: #fb7185;")
            self.calendar_grid.addWidget(lbl, 0, col)
        main_layout.addLayout(self.calendar_grid)
        self.day_buttons: List[QtWidgets.QPushButton] = []

        # History of the month, newest first
        self.history_list = QtWidgets.QListWidget()
        main_layout.addWidget(self.history_list, 1)

        central_widget.setLayout(main_layout)

        self.total_button.clicked.connect(self.on_total_clicked)
        self.prev_button.clicked.connect(self.on_prev_month_clicked)
        self.next_button.clicked.connect(self.on_next_month_clicked)
        self.history_list.itemClicked.connect(self.on_history_item_clicked)

        # Restore/Set initial window size (remember last state with QSettings)
        try:
            settings = QtCore.QSettings("pbm", APP_NAME)
            geom = settings.value("geometry", None)
            if isinstance(geom, (bytes, bytearray)):
                geom = QtCore.QByteArray(bytes(geom))
            if isinstance(geom, QtCore.QByteArray) and not geom.isEmpty():
                self.restoreGeometry(geom)
            else:
                self.resize(480, 800)
                self.setMinimumSize(400, 600)
        except Exception:
            logger.exception("Failed to restore/set window geometry")

        self.refresh()

    def _apply_stylesheet(self) -> None:
        """Load and apply a stylesheet if the file exists; otherwise skip quietly."""
        path = Path(STYLESHEET_PATH)
        if path.exists():
            try:
                with path.open("r", encoding="utf-8") as f:
                    self.setStyleSheet(f.read())
                logger.debug("Applied stylesheet: %s", path)
            except Exception:
                logger.exception("Error reading/applying stylesheet")
        else:
            logger.debug("Stylesheet not found at %s; skipping", path)

    def show_error(self, title: str, message: str, exc: Optional[Exception] = None) -> None:
        """Log and present a critical message box to the user."""
        if exc:
            logger.exception("%s: %s", title, message)
        else:
            logger.error("%s: %s", title, message)
        QtWidgets.QMessageBox.critical(self, title, message)

    # --- Rendering ---
    def refresh(self) -> None:
        """Recompute every derived view from the book and redraw."""
        state = self.book.state
        summary = state.summary()
        self.total_button.setText(format_yen(summary.total))
        self.month_label.setText(month_title(state.cursor))
        self._populate_calendar(state.days_in_month(), summary.daily)
        self._populate_history(summary.transactions)

    def _populate_calendar(self, days, totals) -> None:
        for btn in self.day_buttons:
            self.calendar_grid.removeWidget(btn)
            btn.deleteLater()
        self.day_buttons = []

        today = Date.today()
        for index, day in enumerate(days):
            if day is None:
                continue
            total = daily_total(totals, day)
            text = str(day.day)
            if total > 0:
                text += f"\n{compact_day_total(total)}"
            btn = QtWidgets.QPushButton(text)
            btn.setMinimumHeight(48)
            btn.setProperty("day", day.isoformat())
            if day == today:
                btn.setStyleSheet(TODAY_STYLE)
            btn.clicked.connect(lambda _checked, d=day: self.open_entry_dialog(day=d))
            # row 0 holds the weekday labels
            self.calendar_grid.addWidget(btn, index // 7 + 1, index % 7)
            self.day_buttons.append(btn)

    def _populate_history(self, transactions: List[Transaction]) -> None:
        self.history_list.clear()
        if not transactions:
            placeholder = QtWidgets.QListWidgetItem("No data")
            placeholder.setFlags(QtCore.Qt.ItemFlag.NoItemFlags)
            self.history_list.addItem(placeholder)
            return

        for t in transactions:
            detail = f"{t.date} • {t.memo}" if t.memo else t.date
            item = QtWidgets.QListWidgetItem(
                f"{category_info(t.category).label}    {detail}    {format_yen(t.amount)}"
            )
            item.setData(TX_ID_ROLE, t.id)
            self.history_list.addItem(item)

    # --- Handlers ---
    def on_prev_month_clicked(self) -> None:
        self.book.previous_month()
        self.refresh()

    def on_next_month_clicked(self) -> None:
        self.book.next_month()
        self.refresh()

    def on_history_item_clicked(self, item: QtWidgets.QListWidgetItem) -> None:
        tx_id = item.data(TX_ID_ROLE)
        if tx_id is None:
            return
        tx = self.book.store.get(int(tx_id))
        if tx is None:
            logger.warning("Clicked transaction id=%s no longer exists", tx_id)
            return
        self.open_entry_dialog(transaction=tx)

    def open_entry_dialog(self, day: Optional[Date] = None, transaction: Optional[Transaction] = None) -> bool:
        """Open the keypad dialog; returns True if a transaction was saved."""
        dlg = TransactionForm(self, book=self.book, day=day, transaction=transaction)
        if not dlg.exec():
            return False
        saved = dlg.get_transaction()
        self.status.showMessage("Transaction updated" if transaction else "Transaction added")
        logger.debug("Saved %r", saved)
        self.refresh()
        return True

    def on_total_clicked(self) -> None:
        """Show the category breakdown for the month on screen."""
        try:
            dialog = QtWidgets.QDialog(self)
            dialog.setWindowTitle(month_title(self.book.cursor))
            dialog.resize(420, 640)

            reports_view = ReportsView(parent=dialog, book=self.book)

            layout = QtWidgets.QVBoxLayout()
            layout.addWidget(reports_view)
            dialog.setLayout(layout)

            dialog.exec()
        except Exception:
            logger.exception("Failed creating/displaying breakdown view")
            self.show_error("Error", "Unable to open breakdown view")

    def closeEvent(self, event):
        try:
            settings = QtCore.QSettings("pbm", APP_NAME)
            settings.setValue("geometry", self.saveGeometry())
        except Exception:
            logger.exception("Failed to save window geometry")
        super().closeEvent(event)
