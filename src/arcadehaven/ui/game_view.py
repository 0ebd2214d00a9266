"""GameView — paints the mounted variant and feeds it keyboard/mouse input."""

from __future__ import annotations

from PyQt6.QtCore import QPointF, QRectF, Qt, QTimer, pyqtSignal
from PyQt6.QtGui import QFont, QKeyEvent, QMouseEvent, QPainter, QPaintEvent
from PyQt6.QtWidgets import QSizePolicy, QWidget

from arcadehaven.core.input import InputEvent, Key, KeyPress, PointerPress
from arcadehaven.game.host import GameHost, HostStatus
from arcadehaven.game.interfaces import PongScore
from arcadehaven.games.pong import AI, PLAYER
from arcadehaven.ui.i18n import t
from arcadehaven.ui.renderers import paint_variant
from arcadehaven.ui.styles.theme import FieldTheme

_KEY_MAP: dict[Qt.Key, Key] = {
    Qt.Key.Key_Up: Key.UP,
    Qt.Key.Key_W: Key.UP,
    Qt.Key.Key_Down: Key.DOWN,
    Qt.Key.Key_S: Key.DOWN,
    Qt.Key.Key_Left: Key.LEFT,
    Qt.Key.Key_A: Key.LEFT,
    Qt.Key.Key_Right: Key.RIGHT,
    Qt.Key.Key_D: Key.RIGHT,
    Qt.Key.Key_Space: Key.ACTION,
}

REPAINT_INTERVAL_MS = 16


def map_key(qt_key: int) -> Key | None:
    """Translate a Qt key code into a logical :class:`Key`."""
    try:
        return _KEY_MAP.get(Qt.Key(qt_key))
    except ValueError:
        return None


class GameView(QWidget):
    """Letterboxed, aspect-preserving view of one game field."""

    pause_requested = pyqtSignal()

    def __init__(
        self,
        host: GameHost,
        parent: QWidget | None = None,
        theme: FieldTheme | None = None,
    ) -> None:
        super().__init__(parent)
        self._host = host
        self._theme = theme or FieldTheme.neon()
        self.setFocusPolicy(Qt.FocusPolicy.StrongFocus)
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        width, height = host.controller.variant.field_size
        self.setMinimumSize(width // 2, height // 2)

        self._repaint_timer = QTimer(self)
        self._repaint_timer.timeout.connect(self.update)
        self._repaint_timer.start(REPAINT_INTERVAL_MS)

    @property
    def host(self) -> GameHost:
        return self._host

    def stop_repaint(self) -> None:
        self._repaint_timer.stop()

    # ── Coordinate helpers ───────────────────────────────────────────────

    def field_rect(self) -> QRectF:
        """Widget-space rectangle the field is drawn into."""
        fw, fh = self._host.controller.variant.field_size
        scale = min(self.width() / fw, self.height() / fh) if fw and fh else 1.0
        w, h = fw * scale, fh * scale
        return QRectF((self.width() - w) / 2, (self.height() - h) / 2, w, h)

    def to_field(self, point: QPointF) -> tuple[float, float] | None:
        rect = self.field_rect()
        if rect.width() <= 0 or not rect.contains(point):
            return None
        fw, fh = self._host.controller.variant.field_size
        return (
            (point.x() - rect.left()) * fw / rect.width(),
            (point.y() - rect.top()) * fh / rect.height(),
        )

    # ── Input ────────────────────────────────────────────────────────────

    def keyPressEvent(self, event: QKeyEvent | None) -> None:
        if event is None:
            return
        if event.key() == Qt.Key.Key_P:
            self.pause_requested.emit()
            event.accept()
            return
        key = map_key(event.key())
        if key is None:
            super().keyPressEvent(event)
            return
        self._dispatch(KeyPress(key))
        event.accept()

    def mousePressEvent(self, event: QMouseEvent | None) -> None:
        if event is None or event.button() != Qt.MouseButton.LeftButton:
            return
        self.setFocus()
        point = self.to_field(event.position())
        if point is not None:
            self._dispatch(PointerPress(*point))

    def _dispatch(self, event: InputEvent) -> None:
        if self._host.handle_input(event):
            self.update()

    # ── Painting ─────────────────────────────────────────────────────────

    def paintEvent(self, event: QPaintEvent | None) -> None:
        p = QPainter(self)
        p.setRenderHint(QPainter.RenderHint.Antialiasing)
        p.fillRect(self.rect(), self._theme.grid)

        rect = self.field_rect()
        fw, fh = self._host.controller.variant.field_size
        p.save()
        p.setClipRect(rect)
        p.fillRect(rect, self._theme.background)
        p.translate(rect.topLeft())
        p.scale(rect.width() / fw, rect.height() / fh)
        paint_variant(p, self._host.controller.variant, self._theme)
        p.restore()

        self._draw_overlay(p, rect)
        p.end()

    def _draw_overlay(self, p: QPainter, rect: QRectF) -> None:
        lines = self._overlay_lines()
        if not lines:
            return
        p.fillRect(rect, self._theme.overlay)
        p.setPen(self._theme.text)
        p.setFont(QFont("Helvetica Neue", 22, QFont.Weight.Bold))
        p.drawText(rect, Qt.AlignmentFlag.AlignCenter, "\n".join(lines))

    def _overlay_lines(self) -> list[str]:
        s = t()
        status = self._host.status
        if status == HostStatus.READY:
            return [s.overlay_ready]
        if status == HostStatus.PAUSED:
            return [s.overlay_paused]
        if status != HostStatus.GAME_OVER:
            return []
        outcome = self._host.last_outcome
        lines = [s.overlay_game_over]
        if outcome is None:
            return lines
        if outcome.winner == PLAYER:
            lines.append(s.overlay_you_win)
        elif outcome.winner == AI:
            lines.append(s.overlay_ai_wins)
        score = outcome.score
        shown = str(score) if isinstance(score, PongScore) else str(outcome.score_value)
        lines.append(s.final_score.format(score=shown))
        return lines
