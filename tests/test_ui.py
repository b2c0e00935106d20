'''
    File Name: test_ui.py
    Version: 2.0.0
    Date: 18/10/2026
    Author: Pablo Bartolomé Molina
'''

import unittest
from datetime import date
from unittest.mock import MagicMock, patch
import sys

from PyQt6.QtWidgets import QApplication

import config
from engine.book import ExpenseBook
from engine.month import MonthCursor
from engine.store import TransactionStore
from models.category import Category
from ui.reports_view import ReportsView
from ui.transaction_form import TransactionForm

from fakes import FakeRepository, TickingClock


def _make_book(cursor=MonthCursor(2024, 3)):
    clock = TickingClock()
    repo = FakeRepository()
    book = ExpenseBook(TransactionStore.open(repo, clock=clock), cursor)
    return book, repo, clock


class TestReportsView(unittest.TestCase):
    """Test suite for the category breakdown view."""

    @classmethod
    def setUpClass(cls):
        """Initialize QApplication for all tests."""
        if not QApplication.instance():
            cls.app = QApplication(sys.argv)
        else:
            cls.app = QApplication.instance()

    def setUp(self):
        self.book, _, clock = _make_book()
        self.book.create(date(2024, 3, 1), 1000, "food")
        clock.now += 1
        self.book.create(date(2024, 3, 1), 500, "daily")
        clock.now += 1
        self.book.create(date(2024, 3, 2), 2000, "food")

    def test_table_lists_every_category_by_total(self):
        widget = ReportsView(book=self.book)
        self.assertEqual(widget._table.rowCount(), 4)
        self.assertEqual(widget._table.item(0, 0).text(), "食費")
        self.assertEqual(widget._table.item(0, 1).text(), "85.7%")
        self.assertEqual(widget._table.item(0, 2).text(), "¥3,000")
        self.assertEqual(widget._table.item(1, 0).text(), "雑費")
        self.assertEqual(widget._table.item(3, 1).text(), "0.0%")
        self.assertIn("¥3,500", widget._stats_label.text())
        widget.deleteLater()

    def test_zero_width_segments_are_not_drawn(self):
        widget = ReportsView(book=self.book)
        self.assertEqual(widget.wedge_count, 2)
        widget.deleteLater()

    def test_empty_month_draws_neutral_ring(self):
        self.book.next_month()
        widget = ReportsView(book=self.book)
        self.assertEqual(widget.wedge_count, 1)
        self.assertEqual(widget._ax.patches[0].get_facecolor()[:3], (226 / 255, 232 / 255, 240 / 255))
        self.assertIn("No transactions", widget._stats_label.text())
        widget.deleteLater()

    def test_without_book(self):
        widget = ReportsView(book=None)
        self.assertEqual(widget._table.rowCount(), 0)
        self.assertIn("No transactions", widget._stats_label.text())
        widget.deleteLater()

    def test_refresh_picks_up_new_transactions(self):
        widget = ReportsView(book=self.book)
        self.book.create(date(2024, 3, 3), 6500, "medical")
        widget.refresh()
        self.assertEqual(widget._table.item(0, 0).text(), "医療")
        self.assertEqual(widget.wedge_count, 3)
        widget.deleteLater()


class TestTransactionForm(unittest.TestCase):
    """Test suite for the keypad entry dialog."""

    @classmethod
    def setUpClass(cls):
        """Initialize QApplication for all tests."""
        if not QApplication.instance():
            cls.app = QApplication(sys.argv)
        else:
            cls.app = QApplication.instance()

    def setUp(self):
        self.book, self.repo, self.clock = _make_book()

    def _press(self, form, keys):
        for key in keys:
            form.key_buttons[key].click()

    def test_new_form_defaults(self):
        form = TransactionForm(book=self.book, day=date(2024, 3, 5))
        self.assertEqual(form.title_label.text(), "2024/3/5")
        self.assertEqual(form.amount_display.text(), "0")
        self.assertIs(form.selected_category, Category.FOOD)
        self.assertTrue(form.category_buttons[Category.FOOD].isChecked())
        self.assertFalse(form.is_editing)
        form.deleteLater()

    def test_keypad_updates_display(self):
        form = TransactionForm(book=self.book, day=date(2024, 3, 5))
        self._press(form, ["1", "2", "+", "8", "-"])
        self.assertEqual(form.amount_display.text(), "12+8-")
        self._press(form, ["="])
        self.assertEqual(form.amount_display.text(), "20")
        self._press(form, ["DEL", "DEL"])
        self.assertEqual(form.amount_display.text(), "0")
        self._press(form, ["5", "C"])
        self.assertEqual(form.current_input, "0")
        form.deleteLater()

    def test_save_creates_transaction(self):
        form = TransactionForm(book=self.book, day=date(2024, 3, 5))
        self._press(form, ["1", "2", "0", "0", "+", "3", "0", "0"])
        form.category_buttons[Category.ENTERTAINMENT].click()
        form.memo.setText("movie")
        with patch.object(form, "accept") as mock_accept:
            form.key_buttons["✓"].click()
            mock_accept.assert_called_once()

        tx = form.get_transaction()
        self.assertEqual(tx.amount, 1500)
        self.assertEqual(tx.date, "2024/3/5")
        self.assertIs(tx.category, Category.ENTERTAINMENT)
        self.assertEqual(tx.memo, "movie")
        self.assertEqual(len(self.repo.saved), 1)
        form.deleteLater()

    def test_zero_amount_keeps_dialog_open(self):
        form = TransactionForm(book=self.book, day=date(2024, 3, 5))
        with patch.object(form, "accept") as mock_accept:
            form.save_transaction()
            mock_accept.assert_not_called()
        self.assertIsNone(form.get_transaction())
        self.assertEqual(self.repo.saved, [])
        form.deleteLater()

    def test_edit_mode_updates_in_place(self):
        original = self.book.create(date(2024, 3, 1), 1000, "food", "lunch")
        form = TransactionForm(book=self.book, transaction=original)
        self.assertEqual(form.title_label.text(), config.EDIT_MODE_TITLE)
        self.assertEqual(form.amount_display.text(), "1000")
        self.assertEqual(form.memo.text(), "lunch")

        self._press(form, ["DEL", "DEL", "DEL", "DEL", "7", "5", "0"])
        form.select_category("medical")
        with patch.object(form, "accept"):
            form.save_transaction()

        updated = form.get_transaction()
        self.assertEqual(updated.id, original.id)
        self.assertEqual(updated.amount, 750)
        self.assertIs(updated.category, Category.MEDICAL)
        self.assertEqual(len(self.book.store), 1)
        form.deleteLater()

    def test_save_without_book_does_nothing(self):
        form = TransactionForm(book=None, day=date(2024, 3, 5))
        form.accept = MagicMock()
        self._press(form, ["5"])
        form.save_transaction()
        form.accept.assert_not_called()
        form.deleteLater()


if __name__ == "__main__":
    unittest.main()
