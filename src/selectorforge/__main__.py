from __future__ import annotations

import sys


def main() -> int:
    if sys.version_info < (3, 10):
        raise SystemExit(
            "selectorforge requires Python 3.10+. "
            f"Current interpreter: {sys.executable} (Python {sys.version.split()[0]})"
        )
    try:
        from PySide6.QtGui import QColor, QPalette
        from PySide6.QtWidgets import QApplication
        from .main_window import SelectorWindow
    except ModuleNotFoundError as exc:
        if exc.name == "PySide6":
            raise SystemExit(
                "PySide6 is not installed in this interpreter. "
                "Activate the project venv and run `pip install -e .`."
            ) from exc
        raise

    def _apply_light_palette(app: QApplication) -> None:
        palette = QPalette()
        palette.setColor(QPalette.ColorRole.Window, QColor("#f3f5f9"))
        palette.setColor(QPalette.ColorRole.WindowText, QColor("#0f172a"))
        palette.setColor(QPalette.ColorRole.Base, QColor("#ffffff"))
        palette.setColor(QPalette.ColorRole.Text, QColor("#0f172a"))
        palette.setColor(QPalette.ColorRole.Highlight, QColor("#0284c7"))
        palette.setColor(QPalette.ColorRole.HighlightedText, QColor("#ffffff"))
        app.setPalette(palette)

    app = QApplication(sys.argv)
    app.setStyle("Fusion")
    _apply_light_palette(app)
    window = SelectorWindow()
    window.show()
    return app.exec()


if __name__ == "__main__":
    raise SystemExit(main())
