import sys
import os
import argparse
import logging

# Add editor/src to path so imports work when running directly
if __name__ == "__main__":
    # Get the directory containing this file (editor/src)
    current_dir = os.path.dirname(os.path.abspath(__file__))
    # Add it to the Python path
    if current_dir not in sys.path:
        sys.path.insert(0, current_dir)

# PyQt5 import/s
from PyQt5 import QtWidgets
from PyQt5.QtWidgets import QMainWindow, QFileDialog
from PyQt5.QtCore import Qt, QTimer
from PyQt5.QtGui import QPalette, QColor

# Component imports
from components.programs import create_program
from models.events import CursorMoved
from models.rotation import RotationState

# Utility imports
from utils.logger import setup_logging, set_main_window, loggerRaise

from constants import (
    APP_NAME, DEFAULT_WINDOW_WIDTH, DEFAULT_WINDOW_HEIGHT,
    CONFIG_DIR_NAME, CONFIG_FILE_NAME, DEMO_NAMES,
    DEMO_LINE, DEMO_RECTANGLE, DEMO_CREATOR, DEMO_POLYGON,
)

# Mixin imports
from window.config_mixin import ConfigMixin
from window.ui_setup_mixin import UISetupMixin

logger = logging.getLogger(__name__)


class DemoWindow(ConfigMixin, UISetupMixin, QMainWindow):
    def __init__(self, demo=None, config_dir=None):
        super().__init__()
        self.resize(DEFAULT_WINDOW_WIDTH, DEFAULT_WINDOW_HEIGHT)

        self.config_dir = config_dir or os.path.join(os.path.expanduser("~"), CONFIG_DIR_NAME)
        self.config_file = os.path.join(self.config_dir, CONFIG_FILE_NAME)
        self._load_config()

        self.current_demo = demo if demo in DEMO_NAMES else self.last_demo
        self.program = create_program(self.current_demo)
        self.rotation = RotationState(step=self.program.rotation_step,
                                      tick_interval_ms=self.tick_interval_ms)

        # Rotation ticks; runs only while playing
        self.rotation_timer = QTimer(self)
        self.rotation_timer.setInterval(self.tick_interval_ms)
        self.rotation_timer.timeout.connect(self._on_tick)

        self.setup_ui()
        self._update_title()

        set_main_window(self)

    def _update_title(self):
        self.setWindowTitle(f"{APP_NAME} - {self.program.title}")

    # ========================================
    # Rotation
    # ========================================

    def toggle_rotation(self):
        """Play/pause the rotation animation"""
        if self.rotation.toggle():
            self.rotation_timer.start()
            self.play_button.setText("Pause")
        else:
            self.rotation_timer.stop()
            self.play_button.setText("Play")

    def _on_tick(self):
        angle = self.rotation.tick()
        self.canvas.set_rotation(angle)
        self.angle_label.setText(self.rotation.label())

    # ========================================
    # Demo switching / messages
    # ========================================

    def switch_demo(self, demo):
        """Replace the current program, keeping play state and angle"""
        if demo == self.current_demo or demo not in DEMO_NAMES:
            return
        logger.debug("Switching demo %s -> %s", self.current_demo, demo)
        self.current_demo = demo
        self.program = create_program(demo)
        self.rotation.step = self.program.rotation_step
        self.canvas.set_program(self.program)
        self.cursor_label.setText("")
        self._sync_demo_controls()
        self._update_title()

    def _on_canvas_message(self, message):
        if isinstance(message, CursorMoved):
            self.cursor_label.setText(f"x: {message.position.x:.0f}  y: {message.position.y:.0f}")

    # ========================================
    # Export
    # ========================================

    def export_svg(self):
        """Export the current polygon as an SVG file

        Returns:
            str: Path written, or None if the dialog was cancelled
        """
        filename, _ = QFileDialog.getSaveFileName(
            self,
            "Export as SVG",
            "",
            "SVG Files (*.svg);;All Files (*)"
        )

        if not filename:
            return None

        if not filename.lower().endswith('.svg'):
            filename += '.svg'

        try:
            with open(filename, 'w', encoding='utf-8') as f:
                f.write(self.program.to_svg())
        except OSError as e:
            loggerRaise(e, "Failed to export SVG")

        logger.info("Exported SVG to %s", filename)
        self.statusBar().showMessage(f"Exported {os.path.basename(filename)}", 3000)
        return filename

    def closeEvent(self, event):
        self.rotation_timer.stop()
        self._save_config()
        event.accept()


def _apply_dark_palette(app):
    app.setStyle("Fusion")

    dark_palette = QPalette()
    dark_palette.setColor(QPalette.Window, QColor(53, 53, 53))
    dark_palette.setColor(QPalette.WindowText, Qt.white)
    dark_palette.setColor(QPalette.Base, QColor(25, 25, 25))
    dark_palette.setColor(QPalette.AlternateBase, QColor(53, 53, 53))
    dark_palette.setColor(QPalette.Text, Qt.white)
    dark_palette.setColor(QPalette.Button, QColor(53, 53, 53))
    dark_palette.setColor(QPalette.ButtonText, Qt.white)
    dark_palette.setColor(QPalette.Highlight, QColor(42, 130, 218))
    dark_palette.setColor(QPalette.HighlightedText, Qt.black)

    app.setPalette(dark_palette)


def build_parser():
    parser = argparse.ArgumentParser(prog="canvas-demos", description=APP_NAME)
    parser.add_argument("demo", nargs="?", choices=DEMO_NAMES,
                        help="Demo to open (default: last used)")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Enable debug logging")
    return parser


def main(argv=None):
    """Main entry point for Canvas Shape Demos"""
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)

    app = QtWidgets.QApplication(sys.argv[:1])
    _apply_dark_palette(app)

    window = DemoWindow(demo=args.demo)
    window.show()
    return app.exec_()


def run_line_demo():
    return main([DEMO_LINE])


def run_rectangle_demo():
    return main([DEMO_RECTANGLE])


def run_creator_demo():
    return main([DEMO_CREATOR])


def run_polygon_demo():
    return main([DEMO_POLYGON])


if __name__ == "__main__":
    sys.exit(main())
