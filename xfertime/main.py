#!/usr/bin/env python3
"""Xfer Time - entry point.

With SIZE and SPEED arguments it prints an estimate and exits, otherwise
it starts the desktop calculator. Handles both normal Python execution
and frozen PyInstaller bundles.
"""

import sys
import json
import logging
import argparse
import traceback
from pathlib import Path

LOG_DIR = Path.home() / ".xfertime" / "logs"


def _is_frozen() -> bool:
    return getattr(sys, 'frozen', False) and hasattr(sys, '_MEIPASS')


def _app_root() -> Path:
    """Return the application root directory."""
    if _is_frozen():
        return Path(sys._MEIPASS)
    return Path(__file__).parent.parent


def _crash_dialog(title: str, message: str):
    """Show a crash dialog. Works even if Qt isn't fully loaded."""
    try:
        LOG_DIR.mkdir(parents=True, exist_ok=True)
        (LOG_DIR / "crash.log").write_text(f"{title}\n\n{message}", encoding="utf-8")
    except OSError as e:
        print(f"Could not write crash log: {e}", file=sys.stderr)

    try:
        from PyQt6.QtWidgets import QApplication, QMessageBox
        app = QApplication.instance()
        if app is None:
            app = QApplication(sys.argv)
        QMessageBox.critical(None, title, message)
        return
    except Exception:
        pass

    print(f"FATAL: {title}\n{message}", file=sys.stderr)


def setup_logging(console: bool = True):
    LOG_DIR.mkdir(parents=True, exist_ok=True)

    handlers = [logging.FileHandler(LOG_DIR / "xfertime.log", encoding="utf-8")]
    if console and not _is_frozen():
        handlers.append(logging.StreamHandler(sys.stdout))

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=handlers,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="xfertime",
        description="Estimate file transfer time. Starts the calculator window "
                    "when no file size is given.",
    )
    parser.add_argument("size", nargs="?", help="file size, e.g. 100MB or '2.5 GB'")
    parser.add_argument("speed", nargs="?", help="connection speed, e.g. 100Mbps")
    parser.add_argument("--preset", help="use a named speed preset instead of SPEED "
                                         "(Dial-up, DSL, Cable, Fiber, 5G)")
    parser.add_argument("--json", action="store_true", help="print the estimate as JSON")
    return parser


def run_cli(args: argparse.Namespace, out=None, err=None) -> int:
    """Print one estimate. Returns the process exit status."""
    from xfertime.core.estimator import calculate
    from xfertime.core.exceptions import EstimatorError
    from xfertime.core.presets import get_preset
    from xfertime.core.units import SIZE_UNITS, SPEED_UNITS, parse_quantity

    out = out or sys.stdout
    err = err or sys.stderr
    logger = logging.getLogger("xfertime")

    try:
        file_size, size_unit = parse_quantity(args.size, SIZE_UNITS)
        if args.preset:
            preset = get_preset(args.preset)
            speed, speed_unit = preset.speed, preset.unit
        else:
            speed, speed_unit = parse_quantity(args.speed, SPEED_UNITS)
        estimate = calculate(file_size, size_unit, speed, speed_unit)
    except EstimatorError as e:
        logger.debug(f"CLI estimate failed: {e}")
        print(f"xfertime: error: {e}", file=err)
        return 2

    if args.json:
        print(json.dumps(estimate.as_dict()), file=out)
    else:
        print(f"{estimate.formatted} ({estimate.classification.display_name})", file=out)
    return 0


def run_gui() -> int:
    logger = logging.getLogger("xfertime")
    logger.info("Starting Xfer Time...")

    if not _is_frozen():
        sys.path.insert(0, str(_app_root()))

    try:
        from PyQt6.QtWidgets import QApplication
        from PyQt6.QtGui import QFont
        from PyQt6.QtCore import Qt
    except ImportError as e:
        logger.error(f"PyQt6 import failed: {e}")
        _crash_dialog(
            "Xfer Time - Missing Dependency",
            f"Failed to load PyQt6:\n{e}\n\nReinstall the application."
        )
        return 1

    from xfertime.core.settings import Settings
    from xfertime.gui.main_window import MainWindow, apply_app_theme

    QApplication.setHighDpiScaleFactorRoundingPolicy(
        Qt.HighDpiScaleFactorRoundingPolicy.PassThrough
    )

    app = QApplication(sys.argv[:1])
    app.setApplicationName("Xfer Time")
    app.setApplicationVersion("1.0.0")
    app.setOrganizationName("Xfer")

    settings = Settings()
    apply_app_theme(app, settings.get("theme", "dark"))

    default_font = QFont("Segoe UI", 10)
    default_font.setStyleHint(QFont.StyleHint.SansSerif)
    app.setFont(default_font)

    window = MainWindow(settings)
    window.show()

    logger.info("Xfer Time is ready.")
    return app.exec()


def _run(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.size is None:
        if args.speed or args.preset or args.json:
            parser.error("SIZE is required")
        setup_logging()
        sys.exit(run_gui())

    if args.speed and args.preset:
        parser.error("give either SPEED or --preset, not both")
    if not args.speed and not args.preset:
        parser.error("SPEED or --preset is required")

    setup_logging(console=False)
    sys.exit(run_cli(args))


def main(argv=None):
    """Console entry point. Uncaught errors end in the crash dialog and crash.log."""
    try:
        _run(argv)
    except SystemExit:
        raise
    except Exception:
        tb = traceback.format_exc()
        _crash_dialog("Xfer Time - Fatal Error", tb)
        sys.exit(1)


if __name__ == "__main__":
    main()
