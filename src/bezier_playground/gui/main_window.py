from PyQt6.QtWidgets import QMainWindow, QWidget, QHBoxLayout, QVBoxLayout

from .canvas import Canvas
from .controls import Controls
from .basis_plot import BasisPlot
from ..core.state import CurveState
from .. import config


class MainWindow(QMainWindow):
    def __init__(self, order=config.DEFAULT_ORDER):
        super().__init__()
        self.setWindowTitle("Bezier Playground")
        self.resize(1200, 600)

        # Core state
        self.state = CurveState(order=order, t=0.0)

        # GUI Components
        self.central_widget = QWidget()
        self.setCentralWidget(self.central_widget)
        self.main_layout = QHBoxLayout(self.central_widget)

        # --- Left: drawing surface ---
        self.canvas = Canvas(self.state)
        self.main_layout.addWidget(self.canvas, stretch=3)

        # --- Right: controls and basis plot ---
        self.right_panel = QWidget()
        self.right_layout = QVBoxLayout(self.right_panel)

        self.controls = Controls(t=self.state.t, order=self.state.order)
        self.right_layout.addWidget(self.controls)

        self.basis_plot = BasisPlot(order=self.state.order, t=self.state.t)
        self.right_layout.addWidget(self.basis_plot, stretch=1)

        self.main_layout.addWidget(self.right_panel, stretch=1)

        # Wiring
        self.controls.tChanged.connect(self.on_t_changed)
        self.controls.orderChanged.connect(self.on_order_changed)
        self.canvas.geometryChanged.connect(self.on_geometry_changed)

        self.update_status()

    def on_t_changed(self, t):
        self.state.set_t(t)
        self.canvas.refresh()
        self.basis_plot.set_t(self.state.t)
        self.update_status()

    def on_order_changed(self, order):
        # New points replace the old ones, a running drag has nothing to hold
        self.canvas.reset_interaction()
        self.state.set_order(order)
        self.canvas.refresh()
        self.basis_plot.set_order(self.state.order)
        self.update_status()

    def on_geometry_changed(self, points):
        self.update_status()

    def update_status(self):
        p = self.state.point_at_t()
        if p is None:
            return
        self.statusBar().showMessage(
            f"Order {self.state.order}  |  t = {self.state.t:.2f}  |  B(t) = ({p.x:.1f}, {p.y:.1f})")
