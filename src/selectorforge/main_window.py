from __future__ import annotations

import logging
from pathlib import Path

from PySide6.QtCore import Qt
from PySide6.QtGui import QBrush, QColor
from PySide6.QtWidgets import (
    QApplication,
    QCheckBox,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QListWidget,
    QListWidgetItem,
    QMainWindow,
    QPlainTextEdit,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from .browser_check import check_selectors_in_browser
from .models import (
    SELECTOR_CATEGORIES,
    LocatorValidation,
    SelectorCategory,
    SelectorForgeError,
    SelectorResultSet,
)
from .selector_rules import NO_TEST_IDS_FOUND
from .synthesizer import synthesize
from .ui_state import compute_workspace_button_state
from .validation import validate_markup

LOG_DIR = Path.home() / ".selectorforge"

MARKUP_PLACEHOLDER = """<div class="user-profile">
  <h1 id="username">John Doe</h1>
  <button class="btn-primary">Edit Profile</button>
</div>"""

CATEGORY_TITLES: dict[SelectorCategory, str] = {
    "xpath": "XPath Selectors",
    "css": "CSS Selectors",
    "test_id": "Data-TestId Selectors",
}


class SelectorWindow(QMainWindow):
    def __init__(self) -> None:
        super().__init__()
        self.logger = self._build_logger()
        self.setWindowTitle("selectorforge")
        self.resize(1280, 820)

        self.current_result: SelectorResultSet | None = None

        self.markup_input = QPlainTextEdit()
        self.markup_input.setPlaceholderText(MARKUP_PLACEHOLDER)
        self.markup_input.textChanged.connect(self._refresh_buttons)

        self.generate_button = QPushButton("Generate Selectors")
        self.generate_button.clicked.connect(self._generate)
        self.browser_check_toggle = QCheckBox("Check matches in headless Chromium")
        self.copy_button = QPushButton("Copy")
        self.copy_button.clicked.connect(self._copy_selected)
        self.clear_button = QPushButton("Clear")
        self.clear_button.clicked.connect(self._clear)
        self.status_label = QLabel("Paste your HTML and generate selectors.")
        self.status_label.setWordWrap(True)

        self.result_lists: dict[SelectorCategory, QListWidget] = {}
        results_row = QHBoxLayout()
        for category in SELECTOR_CATEGORIES:
            list_widget = QListWidget()
            list_widget.itemDoubleClicked.connect(self._copy_item)
            list_widget.itemSelectionChanged.connect(self._refresh_buttons)
            self.result_lists[category] = list_widget
            box = QGroupBox(CATEGORY_TITLES[category])
            box_layout = QVBoxLayout(box)
            box_layout.addWidget(list_widget)
            results_row.addWidget(box)

        actions_row = QHBoxLayout()
        actions_row.addWidget(self.generate_button)
        actions_row.addWidget(self.browser_check_toggle)
        actions_row.addStretch(1)
        actions_row.addWidget(self.copy_button)
        actions_row.addWidget(self.clear_button)

        root = QWidget()
        layout = QVBoxLayout(root)
        layout.addWidget(QLabel("Paste your HTML here"))
        layout.addWidget(self.markup_input, 1)
        layout.addLayout(actions_row)
        layout.addLayout(results_row, 2)
        layout.addWidget(self.status_label)
        self.setCentralWidget(root)

        self._refresh_buttons()

    def _generate(self) -> None:
        markup = self.markup_input.toPlainText()
        check = validate_markup(markup)
        if not check.ok:
            self._set_status(check.message)
            return

        try:
            result = synthesize(markup)
        except SelectorForgeError as exc:
            self._handle_ui_exception("Failed to analyze HTML. Please check your input.", exc)
            return

        self.current_result = result
        self._populate(result, [])
        summary = f"Generated {len(result.xpath)} XPath and {len(result.css)} CSS selectors."
        if result.truncated:
            summary += f" Only the first {result.inspected_count} elements were inspected."
        self.logger.info(summary)

        if self.browser_check_toggle.isChecked():
            try:
                checks = check_selectors_in_browser(markup, result)
            except Exception as exc:
                self._handle_ui_exception("Browser check failed.", exc)
                return
            self._populate(result, checks)
            unique = sum(1 for item in checks if item.unique)
            summary += f" {unique}/{len(checks)} unique in browser."

        self._set_status(summary)

    def _populate(self, result: SelectorResultSet, checks: list[LocatorValidation]) -> None:
        by_selector = {(item.category, item.selector): item for item in checks}
        for category, list_widget in self.result_lists.items():
            list_widget.clear()
            for selector in result.selectors(category):
                item = QListWidgetItem(selector)
                item.setData(Qt.ItemDataRole.UserRole, selector)
                check = by_selector.get((category, selector))
                if check is not None:
                    item.setToolTip(check.message)
                    if not check.unique:
                        item.setForeground(QBrush(QColor("#b45309")))
                if selector == NO_TEST_IDS_FOUND:
                    item.setFlags(item.flags() & ~Qt.ItemFlag.ItemIsSelectable)
                list_widget.addItem(item)
        self._refresh_buttons()

    def _selected_selectors(self) -> list[str]:
        selected: list[str] = []
        for list_widget in self.result_lists.values():
            for item in list_widget.selectedItems():
                selected.append(str(item.data(Qt.ItemDataRole.UserRole)))
        return selected

    def _copy_selected(self) -> None:
        selected = self._selected_selectors()
        if not selected:
            self._set_status("Select a selector to copy.")
            return
        self._copy("\n".join(selected))

    def _copy_item(self, item: QListWidgetItem) -> None:
        value = str(item.data(Qt.ItemDataRole.UserRole))
        if value == NO_TEST_IDS_FOUND:
            return
        self._copy(value)

    def _copy(self, value: str) -> None:
        QApplication.clipboard().setText(value)
        self._set_status("Copied to clipboard!")

    def _clear(self) -> None:
        self.markup_input.clear()
        self.current_result = None
        for list_widget in self.result_lists.values():
            list_widget.clear()
        self._set_status("Cleared.")
        self._refresh_buttons()

    def _refresh_buttons(self) -> None:
        state = compute_workspace_button_state(
            has_markup=bool(self.markup_input.toPlainText().strip()),
            has_results=self.current_result is not None,
            has_selection=bool(self._selected_selectors()),
        )
        self.generate_button.setEnabled(state.can_generate)
        self.copy_button.setEnabled(state.can_copy)
        self.clear_button.setEnabled(state.can_clear)

    def _set_status(self, message: str) -> None:
        self.status_label.setText(message.strip() or "-")

    def _handle_ui_exception(self, user_message: str, exc: Exception) -> None:
        self.logger.exception("%s: %s", user_message, exc)
        self._set_status(f"{user_message} {exc}")

    @staticmethod
    def _build_logger() -> logging.Logger:
        logger = logging.getLogger("selectorforge.ui")
        if logger.handlers:
            return logger

        logger.setLevel(logging.INFO)
        logger.propagate = False
        try:
            LOG_DIR.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(LOG_DIR / "ui.log", encoding="utf-8")
            file_handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(message)s"))
            logger.addHandler(file_handler)
        except OSError:
            stream_handler = logging.StreamHandler()
            stream_handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(message)s"))
            logger.addHandler(stream_handler)
        return logger
