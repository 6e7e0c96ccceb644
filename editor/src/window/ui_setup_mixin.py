"""UI setup for the demo window"""

from PyQt5.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QGridLayout, QLabel, QPushButton,
    QComboBox, QSlider,
)
from PyQt5.QtCore import Qt

from components.canvas_widget import CanvasWidget
from constants import (
    DEMO_NAMES, MIN_POLYGON_EDGES, MAX_POLYGON_EDGES,
)


class UISetupMixin:
    """UI initialization and component wiring"""

    def setup_ui(self):
        """Initialize and wire up all UI components"""
        central_widget = QWidget()
        self.setCentralWidget(central_widget)

        main_layout = QVBoxLayout(central_widget)
        main_layout.setContentsMargins(8, 8, 8, 8)
        main_layout.setSpacing(6)

        # Top bar: demo picker, play/pause, angle, zoom and cursor readouts
        top_bar = QHBoxLayout()

        self.demo_combo = QComboBox()
        self.demo_combo.addItems(DEMO_NAMES)
        self.demo_combo.setCurrentText(self.current_demo)
        self.demo_combo.currentTextChanged.connect(self.switch_demo)
        top_bar.addWidget(self.demo_combo)

        self.play_button = QPushButton("Play")
        self.play_button.clicked.connect(self.toggle_rotation)
        top_bar.addWidget(self.play_button)

        self.angle_label = QLabel(self.rotation.label())
        top_bar.addWidget(self.angle_label)

        self.zoom_label = QLabel("")
        top_bar.addWidget(self.zoom_label)

        top_bar.addStretch()

        self.cursor_label = QLabel("")
        top_bar.addWidget(self.cursor_label)

        main_layout.addLayout(top_bar)

        # Canvas
        self.canvas = CanvasWidget(self.program)
        self.canvas.messageEmitted.connect(self._on_canvas_message)
        self.canvas.zoomChanged.connect(self._on_zoom_changed)
        main_layout.addWidget(self.canvas, 1)

        # Polygon controls and SVG export (only shown for the polygon demo)
        self.polygon_controls = self._create_polygon_controls()
        main_layout.addWidget(self.polygon_controls)
        self._sync_demo_controls()

    def _create_polygon_controls(self):
        """Edge count slider and HSB sliders"""
        panel = QWidget()
        grid = QGridLayout(panel)
        grid.setContentsMargins(0, 0, 0, 0)

        self.edges_label = QLabel()
        self.edges_slider = self._make_slider(MIN_POLYGON_EDGES, MAX_POLYGON_EDGES)
        self.edges_slider.valueChanged.connect(self._on_edges_changed)
        grid.addWidget(self.edges_label, 0, 0)
        grid.addWidget(self.edges_slider, 0, 1, 1, 3)

        self.hue_slider = self._make_slider(0, 360)
        self.saturation_slider = self._make_slider(0, 100)
        self.brightness_slider = self._make_slider(0, 100)
        self.hue_slider.valueChanged.connect(self._on_color_changed)
        self.saturation_slider.valueChanged.connect(self._on_color_changed)
        self.brightness_slider.valueChanged.connect(self._on_color_changed)

        self.color_label = QLabel()
        grid.addWidget(self.color_label, 1, 0)
        grid.addWidget(self.hue_slider, 1, 1)
        grid.addWidget(self.saturation_slider, 1, 2)
        grid.addWidget(self.brightness_slider, 1, 3)

        self.export_svg_button = QPushButton("Export SVG...")
        self.export_svg_button.clicked.connect(self.export_svg)
        grid.addWidget(self.export_svg_button, 2, 3)
        return panel

    @staticmethod
    def _make_slider(minimum, maximum):
        slider = QSlider(Qt.Horizontal)
        slider.setRange(minimum, maximum)
        return slider

    def _sync_demo_controls(self):
        """Show the controls that apply to the current demo and load their values"""
        pan_zoom = getattr(self.program, 'pan_zoom', None)
        self.zoom_label.setVisible(pan_zoom is not None)
        if pan_zoom is not None:
            self._on_zoom_changed(self.canvas.get_zoom_percent())

        polygon = getattr(self.program, 'polygon', None)
        self.polygon_controls.setVisible(polygon is not None)
        if polygon is None:
            return

        for slider, value in (
            (self.edges_slider, polygon.edges),
            (self.hue_slider, polygon.hue),
            (self.saturation_slider, polygon.saturation),
            (self.brightness_slider, polygon.brightness),
        ):
            slider.blockSignals(True)
            slider.setValue(int(value))
            slider.blockSignals(False)
        self._update_polygon_labels()

    def _update_polygon_labels(self):
        polygon = self.program.polygon
        self.edges_label.setText(f"Number of edges: {polygon.edges}")
        self.color_label.setText(
            f"Hue: {polygon.hue:.1f}  Saturation: {polygon.saturation:.1f}  "
            f"Brightness: {polygon.brightness:.1f}"
        )

    def _on_zoom_changed(self, percent):
        self.zoom_label.setText(f"Zoom: {percent}%")

    def _on_edges_changed(self, value):
        self.program.set_edges(value)
        self._update_polygon_labels()
        self.canvas.update()

    def _on_color_changed(self, _value):
        self.program.set_hue(float(self.hue_slider.value()))
        self.program.set_saturation(float(self.saturation_slider.value()))
        self.program.set_brightness(float(self.brightness_slider.value()))
        self._update_polygon_labels()
        self.canvas.update()
