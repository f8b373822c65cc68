from PyQt6.QtWidgets import QWidget, QVBoxLayout, QLabel, QSlider, QLineEdit
from PyQt6.QtCore import Qt, pyqtSignal

from ..core.control_points import parse_order
from .. import config


class Controls(QWidget):
    tChanged = pyqtSignal(float)
    orderChanged = pyqtSignal(int)

    def __init__(self, t=0.0, order=config.DEFAULT_ORDER, parent=None):
        super().__init__(parent)
        layout = QVBoxLayout(self)

        # --- Parameter t ---
        self.t_label = QLabel()
        layout.addWidget(self.t_label)
        self.t_slider = QSlider(Qt.Orientation.Horizontal)
        self.t_slider.setRange(0, config.T_SLIDER_STEPS)
        self.t_slider.setValue(round(t * config.T_SLIDER_STEPS))
        layout.addWidget(self.t_slider)
        self._update_t_label(self.t_value())

        layout.addSpacing(10)

        # --- Order ---
        layout.addWidget(QLabel("Order"))
        self.order_edit = QLineEdit(str(order))
        layout.addWidget(self.order_edit)
        self.current_order = order

        hint = QLabel("Drag red circles to move control points")
        hint.setStyleSheet("color: gray;")
        layout.addWidget(hint)

        layout.addStretch()

        # Connections
        self.t_slider.valueChanged.connect(self.on_t_changed)
        self.order_edit.textEdited.connect(self.on_order_edited)
        self.order_edit.editingFinished.connect(self.on_order_finished)

    def t_value(self):
        return self.t_slider.value() / config.T_SLIDER_STEPS

    def _update_t_label(self, t):
        self.t_label.setText(f"T = {t:.2f}")

    def on_t_changed(self):
        t = self.t_value()
        self._update_t_label(t)
        self.tChanged.emit(t)

    def on_order_edited(self, text):
        order = parse_order(text)
        if order is None or order == self.current_order:
            return
        self.current_order = order
        self.orderChanged.emit(order)

    def on_order_finished(self):
        # Show the order actually in use after clamping or ignored input
        self.order_edit.setText(str(self.current_order))
