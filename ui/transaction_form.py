'''
    File Name: transaction_form.py
    Version: 2.0.0
    Date: 18/10/2026
    Author: Pablo Bartolomé Molina
'''
import logging
from datetime import date as Date
from typing import Dict, Optional

from PyQt6.QtWidgets import (
    QDialog,
    QVBoxLayout,
    QHBoxLayout,
    QGridLayout,
    QLabel,
    QLineEdit,
    QPushButton,
    QButtonGroup,
)
from PyQt6.QtCore import Qt

import config
from engine import expression
from models.category import CATEGORIES, Category, default_category
from models.transaction import Transaction, date_key, parse_date_key

logger = logging.getLogger(__name__)

SAVE_KEY = "✓"
KEYPAD_ROWS = [
    ["7", "8", "9", expression.DELETE_KEY],
    ["4", "5", "6", "+"],
    ["1", "2", "3", "-"],
    [expression.CLEAR_KEY, "0", expression.EQUALS_KEY, SAVE_KEY],
]


class TransactionForm(QDialog):
    """Keypad dialog to create or edit a transaction.

    Usage:
        dlg = TransactionForm(parent, book=book, day=date)
        if dlg.exec():
            tx = dlg.get_transaction()

    Passing `transaction` opens the dialog in edit mode; saving then keeps
    the transaction's id. A rejected amount (zero, negative or not a
    number) leaves the dialog open.
    """

    def __init__(self, parent=None, book=None, day: Optional[Date] = None,
                 transaction: Optional[Transaction] = None):
        super().__init__(parent)
        self.book = book
        self._transaction = transaction
        self._editing_id = transaction.id if transaction else None
        self._day = parse_date_key(transaction.date) if transaction else (day or Date.today())
        self._input = str(transaction.amount) if transaction else expression.clear()
        self._category = transaction.category if transaction else default_category()

        self.setWindowTitle("Transaction")
        self.setup_ui()

        if transaction:
            self.memo.setText(transaction.memo)

    def setup_ui(self) -> None:
        layout = QVBoxLayout()

        # Header: date, or edit mode marker
        header = config.EDIT_MODE_TITLE if self.is_editing else date_key(self._day)
        self.title_label = QLabel(header)
        self.title_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self.title_label)

        # Amount display
        self.amount_display = QLabel()
        self.amount_display.setAlignment(Qt.AlignmentFlag.AlignRight)
        self.amount_display.setStyleSheet("font-size: 28px; font-weight: bold;")
        layout.addWidget(self.amount_display)

        # Category selector
        cat_layout = QHBoxLayout()
        self.category_group = QButtonGroup(self)
        self.category_group.setExclusive(True)
        self.category_buttons: Dict[Category, QPushButton] = {}
        for info in CATEGORIES:
            btn = QPushButton(info.label)
            btn.setCheckable(True)
            btn.setStyleSheet(f"QPushButton:checked {{ background-color: {info.hex}; color: white; }}")
            btn.clicked.connect(lambda _checked, c=info.category: self.select_category(c))
            self.category_group.addButton(btn)
            self.category_buttons[info.category] = btn
            cat_layout.addWidget(btn)
        layout.addLayout(cat_layout)

        # Memo
        self.memo = QLineEdit()
        self.memo.setPlaceholderText("メモ")
        layout.addWidget(self.memo)

        # Keypad
        pad = QGridLayout()
        self.key_buttons: Dict[str, QPushButton] = {}
        for r, row in enumerate(KEYPAD_ROWS):
            for c, key in enumerate(row):
                btn = QPushButton(key)
                btn.setMinimumHeight(44)
                if key == SAVE_KEY:
                    btn.clicked.connect(self.save_transaction)
                else:
                    btn.clicked.connect(lambda _checked, k=key: self.press_key(k))
                pad.addWidget(btn, r, c)
                self.key_buttons[key] = btn
        layout.addLayout(pad)

        self.setLayout(layout)

        self.select_category(self._category)
        self._refresh_display()

    @property
    def is_editing(self) -> bool:
        return self._editing_id is not None

    @property
    def current_input(self) -> str:
        return self._input

    @property
    def selected_category(self) -> Category:
        return self._category

    def select_category(self, category) -> None:
        self._category = Category.parse(category)
        self.category_buttons[self._category].setChecked(True)

    def press_key(self, key: str) -> None:
        self._input = expression.press(self._input, key)
        self._refresh_display()

    def _refresh_display(self) -> None:
        self.amount_display.setText(self._input)

    def save_transaction(self) -> None:
        """Persist through the book and accept; stay open if the amount is rejected."""
        memo = self.memo.text()
        if self.book is None:
            logger.debug("No book attached; nothing saved")
            return

        if self.is_editing:
            tx = self.book.update(self._editing_id, self._day, self._input, self._category, memo)
        else:
            tx = self.book.create(self._day, self._input, self._category, memo)

        if tx is None:
            logger.debug("Amount %r rejected; dialog stays open", self._input)
            return

        # store last transaction and close dialog as accepted
        self._transaction = tx
        self.accept()

    def get_transaction(self) -> Optional[Transaction]:
        return self._transaction
