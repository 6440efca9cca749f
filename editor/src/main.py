import sys
import os
import argparse
import logging

# Add editor/src to path so imports work when running directly
if __name__ == "__main__":
    current_dir = os.path.dirname(os.path.abspath(__file__))
    if current_dir not in sys.path:
        sys.path.insert(0, current_dir)

# PyQt5 import/s
from PyQt5.QtWidgets import QMainWindow, QApplication, QAction, QLabel
from PyQt5.QtGui import QKeySequence

# Component imports
from components.ellipse_canvas import EllipseCanvas

# Utility imports
from utils.logger import configure_logging, set_main_window
from version import get_version

# Mixin imports
from window.config_mixin import ConfigMixin

logger = logging.getLogger('EllipseEditor')


class EllipseEditor(ConfigMixin, QMainWindow):
    def __init__(self, config_dir=None):
        super().__init__()
        self.setWindowTitle(f"Ellipse Transform Editor {get_version()}")

        self._init_config_paths(config_dir)
        self._load_config()
        self.resize(int(self.config['window_width']), int(self.config['window_height']))

        self.canvas = EllipseCanvas(self)
        self.setCentralWidget(self.canvas)

        self._setup_menu()
        self._setup_status_bar()

        self.canvas.shapeChanged.connect(self._update_status)
        self.canvas.editModeChanged.connect(self._update_status)
        self._update_status()

    def _setup_menu(self):
        """Create File and Edit menus"""
        menubar = self.menuBar()

        file_menu = menubar.addMenu("&File")
        quit_action = QAction("&Quit", self)
        quit_action.setShortcut(QKeySequence.Quit)
        quit_action.triggered.connect(self.close)
        file_menu.addAction(quit_action)

        edit_menu = menubar.addMenu("&Edit")
        self.reset_action = QAction("&Reset Shape", self)
        self.reset_action.setShortcut("Ctrl+R")
        self.reset_action.triggered.connect(self.canvas.reset)
        edit_menu.addAction(self.reset_action)

    def _setup_status_bar(self):
        """Status bar with the edit mode on the left and shape parameters on the right"""
        self.mode_label = QLabel()
        self.shape_label = QLabel()
        self.statusBar().addWidget(self.mode_label)
        self.statusBar().addPermanentWidget(self.shape_label)

    def _update_status(self, *_):
        """Refresh status bar text from the controller state"""
        controller = self.canvas.controller
        if controller.is_creating:
            self.mode_label.setText("Creating - click again to finish")
        elif not controller.has_shape:
            self.mode_label.setText("Click to place the ellipse center")
        elif not controller.box_visible:
            self.mode_label.setText("Click inside the ellipse to edit")
        else:
            self.mode_label.setText(f"Mode: {self.canvas.mode.label}")

        shape = controller.shape
        if controller.has_shape or controller.is_creating:
            self.shape_label.setText(
                f"center ({shape.center_x:.1f}, {shape.center_y:.1f})  "
                f"radii ({shape.radius_x:.1f}, {shape.radius_y:.1f})  "
                f"rotation {shape.rotation:.2f}  "
                f"shear ({shape.shear_x:.2f}, {shape.shear_y:.2f})"
            )
        else:
            self.shape_label.setText("")

    def closeEvent(self, event):
        """Persist window size on exit"""
        self._save_config()
        super().closeEvent(event)


def main(argv=None):
    parser = argparse.ArgumentParser(description='Interactive ellipse transform editor.')
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable verbose logging.')
    parser.add_argument('--config-dir', default=None, help='Directory holding config.json.')
    args, qt_args = parser.parse_known_args(argv)

    configure_logging(logging.DEBUG if args.verbose else logging.WARNING)

    app = QApplication([sys.argv[0]] + qt_args)
    window = EllipseEditor(config_dir=args.config_dir)
    if not args.verbose:
        configure_logging(window.config.get('log_level', 'WARNING'))
    set_main_window(window)
    window.show()
    return app.exec_()


if __name__ == "__main__":
    sys.exit(main())
