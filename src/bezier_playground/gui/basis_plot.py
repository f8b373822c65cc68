from PyQt6.QtWidgets import QWidget, QVBoxLayout
from matplotlib.backends.backend_qtagg import FigureCanvasQTAgg as FigureCanvas
from matplotlib.figure import Figure
import numpy as np

from ..core.basis import bernstein
from .. import config


class BasisPlot(QWidget):
    """Bernstein basis polynomials of the current order, with a marker at t."""

    def __init__(self, order=config.DEFAULT_ORDER, t=0.0, parent=None):
        super().__init__(parent)
        self.layout = QVBoxLayout(self)
        self.layout.setContentsMargins(0, 0, 0, 0)

        self.figure = Figure(figsize=(4, 3), dpi=100, constrained_layout=True)
        self.canvas = FigureCanvas(self.figure)
        self.layout.addWidget(self.canvas)

        self.ax = self.figure.add_subplot(111)
        self.ts = np.linspace(0.0, 1.0, config.CURVE_RESOLUTION)

        self.order = order
        self.t = t
        self.t_line = None
        self.weight_dots = None
        self.draw_basis()

    def draw_basis(self):
        self.ax.clear()
        self.ax.set_title(f"Bernstein Basis (n = {self.order})")
        self.ax.set_xlabel("t")
        self.ax.set_ylabel("weight")
        self.ax.set_xlim(0, 1)
        self.ax.set_ylim(0, 1.05)
        self.ax.grid(True, alpha=0.3)

        curves = bernstein(self.order, self.ts)
        for row in curves:
            self.ax.plot(self.ts, row, linewidth=1.0)

        self.t_line = self.ax.axvline(self.t, color='k', linestyle='--', linewidth=1.0)
        self.weight_dots, = self.ax.plot([], [], 'ro', markersize=3)
        self._update_marker()

    def _update_marker(self):
        weights = bernstein(self.order, self.t)
        self.t_line.set_xdata([self.t, self.t])
        self.weight_dots.set_data(np.full(len(weights), self.t), weights)
        self.canvas.draw_idle()

    def set_order(self, order):
        self.order = order
        self.draw_basis()

    def set_t(self, t):
        self.t = t
        self._update_marker()
