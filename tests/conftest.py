import os
import tempfile

# Widgets are created in tests; no display is needed.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
os.environ.setdefault("MPLBACKEND", "QtAgg")
# Keep ensure_data_dir() out of the source tree (read when config is imported)
os.environ.setdefault("EXPENSE_CALENDAR_DATA_DIR", tempfile.mkdtemp(prefix="expense-calendar-"))
