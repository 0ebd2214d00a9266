"""Visual theme constants and QSS styles for Arcade Haven."""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtGui import QColor


@dataclass(frozen=True)
class FieldTheme:
    """Colour scheme for game fields painted by the renderers."""

    background: QColor
    grid: QColor
    player: QColor  # paddles, ship, maze runner
    opponent: QColor  # AI paddle
    ball: QColor
    hazard: QColor  # asteroids, walls
    goal: QColor  # maze exit, click target
    card_back: QColor
    card_face: QColor
    card_matched: QColor
    block: QColor
    text: QColor
    overlay: QColor  # translucent pause / game-over veil

    @classmethod
    def neon(cls) -> FieldTheme:
        return cls(
            background=QColor(17, 17, 34),
            grid=QColor(40, 40, 70),
            player=QColor(0, 229, 255),
            opponent=QColor(255, 64, 129),
            ball=QColor(255, 255, 255),
            hazard=QColor(120, 130, 160),
            goal=QColor(118, 255, 3),
            card_back=QColor(63, 81, 181),
            card_face=QColor(236, 239, 241),
            card_matched=QColor(76, 175, 80),
            block=QColor(255, 171, 64),
            text=QColor(240, 240, 240),
            overlay=QColor(0, 0, 0, 150),  # black veil
        )

    @classmethod
    def classic(cls) -> FieldTheme:
        return cls(
            background=QColor(0, 0, 0),
            grid=QColor(30, 30, 30),
            player=QColor(255, 255, 255),
            opponent=QColor(255, 255, 255),
            ball=QColor(255, 255, 255),
            hazard=QColor(150, 150, 150),
            goal=QColor(255, 215, 0),
            card_back=QColor(80, 80, 80),
            card_face=QColor(220, 220, 220),
            card_matched=QColor(120, 200, 120),
            block=QColor(200, 200, 200),
            text=QColor(255, 255, 255),
            overlay=QColor(0, 0, 0, 170),
        )


# ── Application-wide QSS ────────────────────────────────────────────────────

APP_STYLE = """
QMainWindow {
    background: #1b1b2f;
}

QLabel {
    color: #e0e0e0;
    font-family: "Helvetica Neue", "Segoe UI", sans-serif;
}

QLabel#titleLabel {
    color: #ff4081;
    font-size: 28px;
    font-weight: bold;
}

QListWidget, QTableWidget {
    background: #16162a;
    color: #d4d4d4;
    border: 1px solid #3c3c5c;
    font-size: 13px;
}

QListWidget::item:selected, QTableWidget::item:selected {
    background: #3949ab;
}

QHeaderView::section {
    background: #2a2a45;
    color: #e0e0e0;
    border: none;
    padding: 4px;
}

QPushButton {
    background: #2f2f50;
    color: #e0e0e0;
    border: 1px solid #4a4a70;
    border-radius: 4px;
    padding: 6px 14px;
    font-size: 13px;
}
QPushButton:hover {
    background: #3f3f68;
}
QPushButton:pressed {
    background: #ff4081;
}
QPushButton:disabled {
    color: #666;
    background: #1b1b2f;
}

QMenuBar {
    background: #1b1b2f;
    color: #e0e0e0;
}
QMenuBar::item:selected {
    background: #2f2f50;
}
QMenu {
    background: #1b1b2f;
    color: #e0e0e0;
    border: 1px solid #3c3c5c;
}
QMenu::item:selected {
    background: #3949ab;
}
"""
