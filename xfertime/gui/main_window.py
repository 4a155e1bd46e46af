"""Main application window for Xfer Time.

Hosts the download and upload calculator panels side by side. Each panel
owns its own scenario; the window only handles theming, menus and the
status bar.
"""

import logging

from PyQt6.QtCore import QByteArray
from PyQt6.QtGui import QActionGroup, QColor, QKeySequence, QPalette
from PyQt6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QLabel,
    QStatusBar, QApplication, QMessageBox,
)

from xfertime.core.scenario import Direction
from xfertime.core.settings import Settings
from xfertime.gui.themes import (
    get_stylesheet, get_palette, get_theme_names, set_current as set_theme,
    active_key, classification_label,
)
from xfertime.gui.widgets.calculator_panel import CalculatorPanel

logger = logging.getLogger(__name__)


def apply_app_theme(app: QApplication, theme_key: str):
    """Install the stylesheet and palette for `theme_key` on the application."""
    set_theme(theme_key)
    app.setStyleSheet(get_stylesheet(theme_key))

    p = get_palette(theme_key)
    palette = QPalette()
    palette.setColor(QPalette.ColorRole.Window, QColor(p["bg"]))
    palette.setColor(QPalette.ColorRole.WindowText, QColor(p["text"]))
    palette.setColor(QPalette.ColorRole.Base, QColor(p["bg_input"]))
    palette.setColor(QPalette.ColorRole.AlternateBase, QColor(p["bg_alt"]))
    palette.setColor(QPalette.ColorRole.Text, QColor(p["text"]))
    palette.setColor(QPalette.ColorRole.Button, QColor(p["bg_hover"]))
    palette.setColor(QPalette.ColorRole.ButtonText, QColor(p["text"]))
    palette.setColor(QPalette.ColorRole.Highlight, QColor(p["accent"]))
    palette.setColor(QPalette.ColorRole.HighlightedText, QColor("#ffffff"))
    palette.setColor(QPalette.ColorRole.ToolTipBase, QColor(p["bg_card"]))
    palette.setColor(QPalette.ColorRole.ToolTipText, QColor(p["text"]))
    app.setPalette(palette)


class MainWindow(QMainWindow):
    """Xfer Time main window."""

    def __init__(self, settings: Settings = None):
        super().__init__()

        self._settings = settings or Settings()
        self._panels = {}

        self.setWindowTitle("Xfer Time")
        self.setMinimumSize(900, 620)
        self.resize(1120, 680)

        self._setup_menu_bar()
        self._setup_ui()
        self._setup_status_bar()
        self._restore_geometry()

    # ------------------------------------------------------------------ #
    #  Menu Bar
    # ------------------------------------------------------------------ #

    def _setup_menu_bar(self):
        menubar = self.menuBar()

        file_menu = menubar.addMenu("&File")
        exit_action = file_menu.addAction("E&xit")
        exit_action.setShortcut(QKeySequence("Ctrl+Q"))
        exit_action.triggered.connect(self.close)

        view_menu = menubar.addMenu("&View")
        theme_menu = view_menu.addMenu("&Theme")
        self._theme_group = QActionGroup(self)
        self._theme_group.setExclusive(True)
        for key, name in get_theme_names():
            action = theme_menu.addAction(name)
            action.setCheckable(True)
            action.setChecked(key == active_key())
            action.triggered.connect(lambda _checked=False, k=key: self._on_theme_changed(k))
            self._theme_group.addAction(action)

        help_menu = menubar.addMenu("&Help")
        about_action = help_menu.addAction("&About Xfer Time")
        about_action.triggered.connect(self._on_about)

    # ------------------------------------------------------------------ #
    #  UI Setup
    # ------------------------------------------------------------------ #

    def _setup_ui(self):
        central = QWidget()
        self.setCentralWidget(central)
        main_layout = QVBoxLayout(central)
        main_layout.setContentsMargins(32, 28, 32, 28)
        main_layout.setSpacing(24)

        title = QLabel("Transfer Time Calculator")
        title.setObjectName("pageTitle")
        main_layout.addWidget(title)

        subtitle = QLabel(
            "Calculate download and upload times for any file size and internet connection speed"
        )
        subtitle.setObjectName("pageSubtitle")
        subtitle.setWordWrap(True)
        main_layout.addWidget(subtitle)

        panels_layout = QHBoxLayout()
        panels_layout.setSpacing(24)
        for direction in Direction:
            panel = CalculatorPanel(direction)
            panel.estimate_changed.connect(
                lambda estimate, d=direction: self._on_estimate_changed(d, estimate)
            )
            panels_layout.addWidget(panel, 1)
            self._panels[direction] = panel
        main_layout.addLayout(panels_layout, 1)

    def _setup_status_bar(self):
        sb = QStatusBar()
        self.setStatusBar(sb)
        self._status_label = QLabel("Ready")
        sb.addWidget(self._status_label, 1)

    def _restore_geometry(self):
        geometry = self._settings.get("window_geometry", "")
        if geometry:
            self.restoreGeometry(QByteArray.fromHex(geometry.encode()))

    def panel(self, direction: Direction) -> CalculatorPanel:
        return self._panels[direction]

    # ------------------------------------------------------------------ #
    #  Handlers
    # ------------------------------------------------------------------ #

    def _on_estimate_changed(self, direction: Direction, estimate):
        if estimate is None:
            self._status_label.setText(f"{direction.display_name}: invalid input")
            return
        self._status_label.setText(
            f"{direction.display_name}: {estimate.formatted} "
            f"({classification_label(estimate.classification)})"
        )

    def _on_theme_changed(self, theme_key: str):
        logger.info(f"Switching theme to {theme_key}")
        app = QApplication.instance()
        if app:
            apply_app_theme(app, theme_key)
        else:
            set_theme(theme_key)
        self._settings.set("theme", active_key())
        for panel in self._panels.values():
            panel.apply_theme()

    def _on_about(self):
        QMessageBox.about(
            self, "About Xfer Time",
            "Xfer Time v1.0\n\n"
            "Estimates download and upload times for a file size and connection speed.\n\n"
            "Built with Python and PyQt6."
        )

    # ------------------------------------------------------------------ #
    #  Shutdown
    # ------------------------------------------------------------------ #

    def closeEvent(self, event):
        self._settings.set("window_geometry", self.saveGeometry().toHex().data().decode())
        self._settings.close()
        event.accept()
