'''
    File Name: config.py
    Version: 2.0.0
    Date: 18/10/2026
    Author: Pablo Bartolomé Molina
'''

from pathlib import Path
import logging
import os

# Project paths & files
BASE_DIR = Path(__file__).resolve().parent
DATA_DIR = Path(os.getenv("EXPENSE_CALENDAR_DATA_DIR", BASE_DIR / "data"))
DB_FILENAME = "expense_calendar.db"
DATABASE_PATH = DATA_DIR / DB_FILENAME   # Path object

# Key under which the whole transaction list is stored as one JSON blob
STORAGE_KEY = "kakeibo_v4_data"

# App metadata
APP_NAME = "Expense Calendar"
APP_VERSION = "2.0.0"

# UI / formatting
CURRENCY_SYMBOL = "¥"
DATE_KEY_FORMAT = "{year}/{month}/{day}"   # no zero padding, e.g. 2024/3/1
STYLESHEET_PATH = BASE_DIR / "resources" / "styles.qss"
WEEKDAY_LABELS = ["日", "月", "火", "水", "木", "金", "土"]   # Sunday first
EDIT_MODE_TITLE = "編集モード"

# Day totals at or above this are shown in tens of thousands ("1.2m")
COMPACT_TOTAL_THRESHOLD = 10000

# Category registry: (id, label, hex). Order is the tie-break order for
# the category breakdown.
CATEGORY_REGISTRY = [
    ("food", "食費", "#f97316"),
    ("entertainment", "娯楽", "#a855f7"),
    ("daily", "雑費", "#3b82f6"),
    ("medical", "医療", "#f43f5e"),
]
DEFAULT_CATEGORY = "food"

# Donut colour when the month has no spending
NEUTRAL_SEGMENT_HEX = "#e2e8f0"

# Logging (simple default; modules can call logging.basicConfig(**config))
LOGGING_CONFIG = {
    "level": logging.INFO,
    "format": "%(asctime)s - %(levelname)s - %(name)s - %(message)s",
}

# Helpers
def ensure_data_dir():
    """
    Ensure the data directory exists. The database file itself is created
    by the key-value store (see `database.kv_store.KeyValueStore`).
    """
    DATA_DIR.mkdir(parents=True, exist_ok=True)
