"""QPainter renderers, one per game variant.

Each renderer draws in field coordinates; :class:`GameView` installs the
scale transform beforehand.
"""

from __future__ import annotations

from collections.abc import Callable

from PyQt6.QtCore import QRectF, Qt
from PyQt6.QtGui import QFont, QPainter, QPen

from arcadehaven.core.geometry import Rect
from arcadehaven.game.interfaces import GameVariant
from arcadehaven.games import clicker, cosmic, maze, pong, stacker
from arcadehaven.games.clicker import SpeedClickerGame
from arcadehaven.games.cosmic import CosmicRushGame
from arcadehaven.games.maze import Cell, MazeGame
from arcadehaven.games.memory import MemoryMatchGame
from arcadehaven.games.pong import PongGame
from arcadehaven.games.stacker import BlockStackerGame
from arcadehaven.ui.styles.theme import FieldTheme

Renderer = Callable[[QPainter, GameVariant, FieldTheme], None]


def _qrect(rect: Rect) -> QRectF:
    return QRectF(rect.x, rect.y, rect.width, rect.height)


def _paint_pong(p: QPainter, game: PongGame, theme: FieldTheme) -> None:
    p.setPen(QPen(theme.grid, 2, Qt.PenStyle.DashLine))
    mid = pong.FIELD_WIDTH / 2
    p.drawLine(int(mid), 0, int(mid), pong.FIELD_HEIGHT)

    p.setPen(Qt.PenStyle.NoPen)
    p.setBrush(theme.player)
    p.drawRect(QRectF(0, game.player_y, pong.PADDLE_WIDTH, pong.PADDLE_HEIGHT))
    p.setBrush(theme.opponent)
    p.drawRect(
        QRectF(
            pong.FIELD_WIDTH - pong.PADDLE_WIDTH,
            game.ai_y,
            pong.PADDLE_WIDTH,
            pong.PADDLE_HEIGHT,
        )
    )
    p.setBrush(theme.ball)
    p.drawEllipse(QRectF(game.ball.x, game.ball.y, pong.BALL_SIZE, pong.BALL_SIZE))

    p.setPen(theme.text)
    p.setFont(QFont("Helvetica Neue", 28, QFont.Weight.Bold))
    score = game.score
    p.drawText(QRectF(0, 10, mid - 20, 40), Qt.AlignmentFlag.AlignRight, str(score.player))
    p.drawText(QRectF(mid + 20, 10, mid - 20, 40), Qt.AlignmentFlag.AlignLeft, str(score.ai))


def _paint_maze(p: QPainter, game: MazeGame, theme: FieldTheme) -> None:
    size = maze.CELL_SIZE
    p.setPen(Qt.PenStyle.NoPen)
    for y, row in enumerate(game.grid):
        for x, cell in enumerate(row):
            if cell == Cell.WALL:
                p.setBrush(theme.hazard)
            elif cell == Cell.EXIT:
                p.setBrush(theme.goal)
            else:
                continue
            p.drawRect(QRectF(x * size, y * size, size, size))

    px, py = game.position
    p.setBrush(theme.player)
    p.drawEllipse(QRectF(px * size + 4, py * size + 4, size - 8, size - 8))


def _paint_clicker(p: QPainter, game: SpeedClickerGame, theme: FieldTheme) -> None:
    p.setPen(Qt.PenStyle.NoPen)
    p.setBrush(theme.goal)
    p.drawEllipse(_qrect(game.target))
    p.setPen(theme.text)
    p.setFont(QFont("Helvetica Neue", 14))
    p.drawText(
        QRectF(0, 0, clicker.FIELD_WIDTH - 10, 30),
        Qt.AlignmentFlag.AlignRight,
        str(game.score),
    )


def _paint_memory(p: QPainter, game: MemoryMatchGame, theme: FieldTheme) -> None:
    p.setFont(QFont("Noto Color Emoji", 28))
    for index, card in enumerate(game.cards):
        rect = _qrect(game.card_rect(index))
        if card.is_matched:
            p.setBrush(theme.card_matched)
        elif card.is_flipped:
            p.setBrush(theme.card_face)
        else:
            p.setBrush(theme.card_back)
        p.setPen(Qt.PenStyle.NoPen)
        p.drawRoundedRect(rect, 6, 6)
        if card.is_flipped or card.is_matched:
            p.setPen(theme.background)
            p.drawText(rect, Qt.AlignmentFlag.AlignCenter, card.symbol)


def _paint_stacker(p: QPainter, game: BlockStackerGame, theme: FieldTheme) -> None:
    # Scroll so the moving block stays in view once the tower grows tall.
    moving_y = game.top.y - stacker.BLOCK_HEIGHT
    offset = max(0.0, stacker.BLOCK_HEIGHT * 3 - moving_y)
    p.translate(0, offset)

    p.setPen(QPen(theme.background, 1))
    p.setBrush(theme.block)
    for block in game.stack:
        p.drawRect(QRectF(block.x, block.y, block.width, stacker.BLOCK_HEIGHT))
    if not game.is_terminal():
        p.setBrush(theme.player)
        current = game.current
        p.drawRect(QRectF(current.x, moving_y, current.width, stacker.BLOCK_HEIGHT))


def _paint_cosmic(p: QPainter, game: CosmicRushGame, theme: FieldTheme) -> None:
    p.setPen(Qt.PenStyle.NoPen)
    p.setBrush(theme.hazard)
    for obstacle in game.obstacles:
        p.drawEllipse(_qrect(obstacle.rect))
    p.setBrush(theme.player)
    p.drawRect(_qrect(game.player_rect))
    p.setPen(theme.text)
    p.setFont(QFont("Helvetica Neue", 14))
    p.drawText(
        QRectF(0, 0, cosmic.FIELD_WIDTH - 10, 30),
        Qt.AlignmentFlag.AlignRight,
        str(game.score),
    )


_RENDERERS: dict[type[GameVariant], Renderer] = {
    PongGame: _paint_pong,
    MazeGame: _paint_maze,
    SpeedClickerGame: _paint_clicker,
    MemoryMatchGame: _paint_memory,
    BlockStackerGame: _paint_stacker,
    CosmicRushGame: _paint_cosmic,
}


def paint_variant(p: QPainter, game: GameVariant, theme: FieldTheme) -> None:
    """Draw *game* with its registered renderer; unknown variants get a blank field."""
    renderer = _RENDERERS.get(type(game))
    if renderer is not None:
        renderer(p, game, theme)
