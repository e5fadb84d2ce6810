"""PySide6 front end that draws a ring list and drives the walkthrough engine."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Optional

from PySide6.QtCore import QPointF, QRectF, Qt
from PySide6.QtGui import (
    QColor,
    QFont,
    QLinearGradient,
    QPaintEvent,
    QPainter,
    QPen,
    QRadialGradient,
)
from PySide6.QtWidgets import (
    QComboBox,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QPushButton,
    QSizePolicy,
    QVBoxLayout,
    QWidget,
)

from .walkthrough import RingWalkthrough, TraversalStep

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RingSkin:
    """Palette that describes how the ring should be rendered."""

    name: str
    background_gradient: tuple[str, str, str]
    node_gradient: tuple[str, str]
    link_color: str
    node_border_color: str
    value_color: str
    head_color: str
    tail_color: str
    focus_color: str
    sequence_background_rgba: str
    sequence_text_color: str
    ui_accent_color: str
    ui_accent_text_color: str


BUTTON_IDLE_BACKGROUND = "rgba(15, 23, 42, 160)"
RING_RADIUS_RATIO = 0.36
NODE_RADIUS_RATIO = 0.055
MAX_NODE_RADIUS = 34.0

RING_SKIN_PRESETS = [
    RingSkin(
        name="Midnight",
        background_gradient=("#0f172a", "#111b2c", "#1f2937"),
        node_gradient=("#f8fafc", "#cbd5f5"),
        link_color="#94a3b8",
        node_border_color="#1f2937",
        value_color="#0f172a",
        head_color="#38bdf8",
        tail_color="#f97316",
        focus_color="#facc15",
        sequence_background_rgba="rgba(15, 23, 42, 140)",
        sequence_text_color="#e2e8f0",
        ui_accent_color="#38bdf8",
        ui_accent_text_color="#0f172a",
    ),
    RingSkin(
        name="Paper",
        background_gradient=("#fafaf9", "#f5f5f4", "#e7e5e4"),
        node_gradient=("#ffffff", "#e2e8f0"),
        link_color="#57534e",
        node_border_color="#292524",
        value_color="#1c1917",
        head_color="#2563eb",
        tail_color="#dc2626",
        focus_color="#16a34a",
        sequence_background_rgba="rgba(41, 37, 36, 200)",
        sequence_text_color="#fafaf9",
        ui_accent_color="#1c1917",
        ui_accent_text_color="#fafaf9",
    ),
]

RING_SKINS = {skin.name: skin for skin in RING_SKIN_PRESETS}
DEFAULT_RING_SKIN = RING_SKIN_PRESETS[0]


class RingViewWidget(QWidget):
    """Widget that renders every node of the ring on a circle."""

    def __init__(
        self,
        walkthrough: Optional[RingWalkthrough] = None,
        skin: Optional[RingSkin] = None,
        parent: Optional[QWidget] = None,
    ) -> None:
        super().__init__(parent)
        self._walkthrough = walkthrough or RingWalkthrough()
        self._skin = skin or DEFAULT_RING_SKIN
        self.setMinimumSize(360, 360)
        self.setAutoFillBackground(False)

    def set_walkthrough(self, walkthrough: RingWalkthrough) -> None:
        self._walkthrough = walkthrough
        self.update()

    def set_skin(self, skin: RingSkin) -> None:
        """Update the rendering palette for the ring view."""
        if self._skin == skin:
            return
        self._skin = skin
        self.update()

    def paintEvent(self, event: QPaintEvent) -> None:
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing, True)

        self._draw_background(painter)

        values = self._walkthrough.values()
        if not values:
            return

        size = min(self.width(), self.height())
        radius = size * RING_RADIUS_RATIO
        node_radius = min(size * NODE_RADIUS_RATIO, MAX_NODE_RADIUS, math.pi * radius / len(values) * 0.8)

        painter.translate(self.width() / 2.0, self.height() / 2.0)
        self._draw_links(painter, radius, len(values))
        self._draw_nodes(painter, radius, node_radius, values)

    def _draw_background(self, painter: QPainter) -> None:
        painter.save()
        gradient = QLinearGradient(0, 0, 0, self.height())
        top, mid, bottom = self._skin.background_gradient
        gradient.setColorAt(0.0, QColor(top))
        gradient.setColorAt(0.45, QColor(mid))
        gradient.setColorAt(1.0, QColor(bottom))
        painter.fillRect(self.rect(), gradient)
        painter.restore()

    def _draw_links(self, painter: QPainter, radius: float, count: int) -> None:
        painter.save()
        pen = QPen(QColor(self._skin.link_color))
        pen.setWidthF(max(1.5, radius * 0.012))
        pen.setCapStyle(Qt.PenCapStyle.RoundCap)
        painter.setPen(pen)
        painter.setBrush(Qt.BrushStyle.NoBrush)
        if count == 1:
            # A single node links to itself in both directions.
            loop_radius = radius * 0.18
            center = self._point_on_circle(radius + loop_radius, 0.0)
            painter.drawEllipse(center, loop_radius, loop_radius)
        else:
            for index in range(count):
                start = self._point_on_circle(radius, index * 360.0 / count)
                end = self._point_on_circle(radius, (index + 1) * 360.0 / count)
                painter.drawLine(start, end)
        painter.restore()

    def _draw_nodes(self, painter: QPainter, radius: float, node_radius: float, values: list[int]) -> None:
        painter.save()
        count = len(values)
        focus_index = self._walkthrough.focus_index
        font = painter.font()
        font.setFamily("Segoe UI")
        font.setPointSizeF(max(6.0, node_radius * 0.55))
        font.setWeight(QFont.Weight.DemiBold)
        painter.setFont(font)

        for index, value in enumerate(values):
            center = self._point_on_circle(radius, index * 360.0 / count)
            rect = QRectF(center.x() - node_radius, center.y() - node_radius, node_radius * 2, node_radius * 2)

            gradient = QRadialGradient(center, node_radius)
            inner, outer = self._skin.node_gradient
            gradient.setColorAt(0.0, QColor(inner))
            gradient.setColorAt(1.0, QColor(outer))

            border = QColor(self._skin.node_border_color)
            if index == focus_index:
                border = QColor(self._skin.focus_color)
            elif index == 0:
                border = QColor(self._skin.head_color)
            elif index == count - 1:
                border = QColor(self._skin.tail_color)
            border_pen = QPen(border)
            border_pen.setWidthF(node_radius * (0.22 if index == focus_index else 0.12))
            painter.setPen(border_pen)
            painter.setBrush(gradient)
            painter.drawEllipse(rect)

            painter.setPen(QPen(QColor(self._skin.value_color)))
            painter.drawText(rect, Qt.AlignmentFlag.AlignCenter, str(value))

            marker = self._marker_for(index, count)
            if marker:
                label_center = self._point_on_circle(radius + node_radius * 1.9, index * 360.0 / count)
                label_rect = QRectF(label_center.x() - node_radius, label_center.y() - node_radius, node_radius * 2, node_radius * 2)
                color = self._skin.head_color if marker.startswith("H") else self._skin.tail_color
                painter.setPen(QPen(QColor(color)))
                painter.drawText(label_rect, Qt.AlignmentFlag.AlignCenter, marker)

        painter.restore()

    @staticmethod
    def _marker_for(index: int, count: int) -> str:
        if count == 1:
            return "H/T"
        if index == 0:
            return "H"
        if index == count - 1:
            return "T"
        return ""

    @staticmethod
    def _point_on_circle(radius: float, angle_degrees: float) -> QPointF:
        radians = math.radians(angle_degrees - 90.0)
        x = radius * math.cos(radians)
        y = radius * math.sin(radians)
        return QPointF(x, y)


class RingWindow(QMainWindow):
    """Main application window."""

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.setWindowTitle("Ring List")
        self._walkthrough = RingWalkthrough()
        self._active_skin = DEFAULT_RING_SKIN
        self._ring_widget = RingViewWidget(walkthrough=self._walkthrough, skin=self._active_skin)
        self._ring_widget.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)

        central = QWidget(self)
        layout = QVBoxLayout(central)
        layout.setContentsMargins(24, 24, 24, 24)
        layout.setSpacing(18)

        self._skin_label = QLabel("Skin")
        self._skin_selector = QComboBox()
        for skin in RING_SKIN_PRESETS:
            self._skin_selector.addItem(skin.name)
        self._skin_selector.setCurrentText(self._active_skin.name)
        self._skin_selector.currentTextChanged.connect(self._on_skin_selected)

        skin_layout = QHBoxLayout()
        skin_layout.setSpacing(8)
        skin_layout.addStretch(1)
        skin_layout.addWidget(self._skin_label)
        skin_layout.addWidget(self._skin_selector)
        skin_layout.addStretch(1)
        layout.addLayout(skin_layout)

        self._sequence_display = QLabel("")
        self._sequence_display.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._sequence_display.setWordWrap(True)
        sequence_font = self._sequence_display.font()
        sequence_font.setPointSize(14)
        sequence_font.setFamily("Segoe UI")
        sequence_font.setWeight(QFont.Weight.Medium)
        self._sequence_display.setFont(sequence_font)
        layout.addWidget(self._sequence_display)

        layout.addWidget(self._ring_widget, stretch=1)

        self._append_button = QPushButton("Append")
        self._prev_button = QPushButton("Previous")
        self._next_button = QPushButton("Next")
        self._scale_button = QPushButton(f"Scale x{self._walkthrough.factor}")
        self._forward_button = QPushButton("Forward pass")
        self._backward_button = QPushButton("Backward pass")
        self._chain_button = QPushButton("Chain")
        self._reset_button = QPushButton("Reset")

        self._append_button.clicked.connect(self._handle_append)
        self._prev_button.clicked.connect(self._handle_prev)
        self._next_button.clicked.connect(self._handle_next)
        self._scale_button.clicked.connect(self._handle_scale)
        self._forward_button.clicked.connect(self._handle_forward)
        self._backward_button.clicked.connect(self._handle_backward)
        self._chain_button.clicked.connect(self._handle_chain)
        self._reset_button.clicked.connect(self._handle_reset)

        self._focus_buttons = (self._append_button, self._prev_button, self._next_button, self._scale_button)
        self._pass_buttons = (self._forward_button, self._backward_button, self._chain_button, self._reset_button)
        for row in (self._focus_buttons, self._pass_buttons):
            row_layout = QHBoxLayout()
            row_layout.setSpacing(12)
            row_layout.addStretch(1)
            for button in row:
                button.setCursor(Qt.CursorShape.PointingHandCursor)
                button.setMinimumWidth(110)
                row_layout.addWidget(button)
            row_layout.addStretch(1)
            layout.addLayout(row_layout)

        self._apply_skin_to_ui()

        self.setCentralWidget(central)
        self.resize(720, 840)

        self._show_focus()

    def _on_skin_selected(self, skin_name: str) -> None:
        skin = RING_SKINS.get(skin_name)
        if skin is None or skin == self._active_skin:
            return
        self._active_skin = skin
        self._ring_widget.set_skin(skin)
        self._apply_skin_to_ui()

    def _handle_append(self) -> None:
        values = self._walkthrough.values()
        self._walkthrough.append(max(values) + 1 if values else 1)
        self._refresh()
        self._show_focus()

    def _handle_prev(self) -> None:
        self._walkthrough.step_backward()
        self._refresh()
        self._show_focus()

    def _handle_next(self) -> None:
        self._walkthrough.step_forward()
        self._refresh()
        self._show_focus()

    def _handle_scale(self) -> None:
        self._walkthrough.scale_focus()
        self._refresh()
        self._show_focus()

    def _handle_forward(self) -> None:
        steps = self._walkthrough.forward_pass()
        self._refresh()
        self._sequence_display.setText(f"Forward: {self._format_steps(steps)}")

    def _handle_backward(self) -> None:
        steps = self._walkthrough.backward_pass()
        self._refresh()
        self._sequence_display.setText(f"Backward: {self._format_steps(steps)}")

    def _handle_chain(self) -> None:
        value = self._walkthrough.chain_round_trip()
        self._sequence_display.setText(f"Chaining: {value}")

    def _handle_reset(self) -> None:
        self._walkthrough = RingWalkthrough()
        self._ring_widget.set_walkthrough(self._walkthrough)
        logger.info("Ring reset to %s", self._walkthrough.values())
        self._refresh()
        self._show_focus()

    def _refresh(self) -> None:
        self._ring_widget.update()
        has_nodes = not self._walkthrough.ring.is_empty()
        for button in (self._prev_button, self._next_button, self._scale_button, self._chain_button):
            button.setEnabled(has_nodes)

    def _show_focus(self) -> None:
        focus = self._walkthrough.focus
        if focus is None:
            self._sequence_display.setText("Empty ring")
            return
        self._sequence_display.setText(f"Focus #{self._walkthrough.focus_index}: {focus.value}")

    @staticmethod
    def _format_steps(steps: list[TraversalStep]) -> str:
        parts = []
        for step in steps:
            if step.role == TraversalStep.ROLE_HEAD:
                parts.append(f"Head:{step.value}")
            elif step.role == TraversalStep.ROLE_TAIL:
                parts.append(f"Tail:{step.value}")
            else:
                parts.append(str(step.value))
        return " ".join(parts)

    def _apply_skin_to_ui(self) -> None:
        skin = self._active_skin
        self._sequence_display.setStyleSheet(
            f"color: {skin.sequence_text_color}; background-color: {skin.sequence_background_rgba}; padding: 12px; border-radius: 16px;"
        )

        disabled_suffix = (
            "\nQPushButton:disabled {background-color: rgba(100, 116, 139, 120); color: rgba(226, 232, 240, 160);}"
        )
        focus_style = (
            f"QPushButton {{background-color: {skin.ui_accent_color}; color: {skin.ui_accent_text_color}; padding: 10px 16px; "
            f"border-radius: 12px; font-weight: 600;}}"
            f"{disabled_suffix}"
        )
        pass_style = (
            f"QPushButton {{background-color: {BUTTON_IDLE_BACKGROUND}; color: {skin.sequence_text_color}; padding: 10px 16px; "
            f"border-radius: 12px; font-weight: 600;}}"
            f"{disabled_suffix}"
        )
        for button in self._focus_buttons:
            button.setStyleSheet(focus_style)
        for button in self._pass_buttons:
            button.setStyleSheet(pass_style)

        self._skin_label.setStyleSheet(f"color: {skin.sequence_text_color}; font-weight: 600;")
        combo_style = (
            f"QComboBox {{color: {skin.sequence_text_color}; background-color: rgba(15, 23, 42, 120); padding: 6px 12px; "
            f"border-radius: 12px; border: 2px solid {skin.ui_accent_color}; selection-background-color: {skin.ui_accent_color}; "
            f"selection-color: {skin.ui_accent_text_color};}}"
        )
        self._skin_selector.setStyleSheet(combo_style)
