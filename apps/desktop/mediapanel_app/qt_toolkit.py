"""PySide6 implementation of the panel widget-tree collaborator."""

from __future__ import annotations

from PySide6.QtCore import Qt, QTimer
from PySide6.QtGui import QColor, QIcon, QImage, QPixmap
from PySide6.QtWidgets import QGraphicsDropShadowEffect, QHBoxLayout, QLabel, QWidget

from mediapanel_color.models import PixelBuffer
from mediapanel_core.metadata import LabelRole

from .qss import to_qt_stylesheet

_ICON_PX = 16
_MARQUEE_GAP = "   "


class QtElement:
    """Wraps one QWidget with style text, a role tag and one-shot destroy."""

    def __init__(self, widget: QWidget, role: str | None = None) -> None:
        self.widget = widget
        self._role = role
        self._style = ""
        self._classes: list[str] = []
        self.destroyed = False
        if role:
            widget.setProperty("styleRole", role)
            widget.setObjectName(LabelRole(role).style_class)

    def get_style(self) -> str:
        return self._style

    def set_style(self, style: str) -> None:
        self._style = style or ""
        sheet, shadow = to_qt_stylesheet(self._style)
        self.widget.setStyleSheet(sheet)
        if shadow is None:
            if self.widget.graphicsEffect() is not None:
                self.widget.setGraphicsEffect(None)
            return
        effect = QGraphicsDropShadowEffect(self.widget)
        effect.setBlurRadius(shadow.blur)
        effect.setOffset(0, 0)
        effect.setColor(QColor(*shadow.color.as_tuple()))
        self.widget.setGraphicsEffect(effect)

    def get_style_role(self) -> str | None:
        return self._role

    def add_style_class(self, name: str) -> None:
        if name not in self._classes:
            self._classes.append(name)
            self.widget.setProperty("styleClass", " ".join(self._classes))

    def destroy(self) -> None:
        if self.destroyed:
            return
        self.destroyed = True
        self.widget.hide()
        self.widget.setParent(None)
        self.widget.deleteLater()


class QtContainer(QtElement):
    def __init__(self, widget: QWidget | None = None, spacing: int = 4) -> None:
        super().__init__(widget or QWidget())
        self._layout = QHBoxLayout(self.widget)
        self._layout.setContentsMargins(0, 0, 0, 0)
        self._layout.setSpacing(spacing)
        self._children: list[QtElement] = []

    def get_children(self) -> list[QtElement]:
        return list(self._children)

    def _index(self, child: QtElement) -> int:
        for i, c in enumerate(self._children):
            if c is child:
                return i
        raise ValueError("widget is not a child of this container")

    def insert_at(self, child: QtElement, index: int) -> None:
        index = max(0, min(index, len(self._children)))
        self._children.insert(index, child)
        self._layout.insertWidget(index, child.widget, 0, Qt.AlignmentFlag.AlignVCenter)
        child.widget.show()

    def replace(self, old: QtElement, new: QtElement) -> None:
        index = self._index(old)
        self._layout.replaceWidget(old.widget, new.widget)
        self._children[index] = new
        old.widget.hide()
        new.widget.show()

    def remove(self, child: QtElement) -> None:
        self._children.pop(self._index(child))
        self._layout.removeWidget(child.widget)
        child.widget.hide()

    def set_fixed_width(self, width: int) -> None:
        self.widget.setFixedWidth(width)

    def destroy(self) -> None:
        for child in self._children:
            child.destroy()
        self._children.clear()
        super().destroy()


class MarqueeLabel(QLabel):
    """QLabel that rotates its text while it does not fit."""

    def __init__(self, text: str, scroll_speed: int, parent: QWidget | None = None) -> None:
        super().__init__(text, parent)
        self._full = text
        self._offset = 0
        self._timer = QTimer(self)
        self._timer.setInterval(max(20, 400 // max(1, scroll_speed)))
        self._timer.timeout.connect(self._tick)

    def set_paused(self, paused: bool) -> None:
        if paused:
            self._timer.stop()
        else:
            self._timer.start()

    @property
    def paused(self) -> bool:
        return not self._timer.isActive()

    def _tick(self) -> None:
        if self.fontMetrics().horizontalAdvance(self._full) <= self.width():
            if self._offset:
                self._offset = 0
                self.setText(self._full)
            return
        padded = self._full + _MARQUEE_GAP
        self._offset = (self._offset + 1) % len(padded)
        self.setText(padded[self._offset :] + padded[: self._offset])


class QtScrollingLabel(QtElement):
    def __init__(self, text: str, width: int, fixed_width: bool, paused: bool, scroll_speed: int) -> None:
        box = QWidget()
        layout = QHBoxLayout(box)
        layout.setContentsMargins(0, 0, 0, 0)
        marquee = MarqueeLabel(text, scroll_speed, box)
        layout.addWidget(marquee)
        if width > 0:
            if fixed_width:
                box.setFixedWidth(width)
            else:
                box.setMaximumWidth(width)
        super().__init__(box)
        self.marquee = marquee
        self.label = QtElement(marquee)
        marquee.set_paused(paused)


class QtToolkit:
    def app_icon_name(self, identity: str, desktop_entry: str | None) -> str | None:
        for candidate in (desktop_entry, (identity or "").lower().replace(" ", "-")):
            if candidate and QIcon.hasThemeIcon(candidate):
                return candidate
        return None

    def fallback_icon(self, icon_name: str, colored: bool) -> QtElement:
        label = QLabel()
        label.setPixmap(QIcon.fromTheme(icon_name).pixmap(_ICON_PX, _ICON_PX))
        label.setProperty("styleClass", "colored-icon" if colored else "symbolic-icon")
        return QtElement(label)

    def art_icon(self, buffer: PixelBuffer, size: int, style: str, image_style: str) -> QtElement:
        fmt = QImage.Format.Format_RGBA8888 if buffer.has_alpha else QImage.Format.Format_RGB888
        # QImage borrows the bytes; copy so the pixmap owns its data.
        image = QImage(buffer.pixels, buffer.width, buffer.height, buffer.rowstride, fmt).copy()
        pixmap = QPixmap.fromImage(image).scaled(
            size,
            size,
            Qt.AspectRatioMode.KeepAspectRatio,
            Qt.TransformationMode.SmoothTransformation,
        )

        outer = QWidget()
        layout = QHBoxLayout(outer)
        layout.setContentsMargins(0, 0, 0, 0)
        inner = QLabel(outer)
        inner.setPixmap(pixmap)
        inner.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(inner)

        QtElement(inner).set_style(image_style)
        element = QtElement(outer)
        element.set_style(style)
        return element

    def scrolling_label(
        self,
        text: str,
        width: int,
        fixed_width: bool,
        paused: bool,
        scroll_speed: int,
    ) -> QtScrollingLabel:
        return QtScrollingLabel(text, width, fixed_width, paused, scroll_speed)

    def label_box(self) -> QtContainer:
        container = QtContainer(spacing=0)
        container.add_style_class("panel-label-container")
        return container

    def label(self, text: str, role: LabelRole) -> QtElement:
        widget = QLabel(text)
        widget.setAlignment(Qt.AlignmentFlag.AlignVCenter)
        return QtElement(widget, role=LabelRole(role).value)
