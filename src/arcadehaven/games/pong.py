"""Pixel Pong — player paddle on the left, AI paddle on the right."""

from __future__ import annotations

from dataclasses import dataclass

from arcadehaven.core.geometry import clamp
from arcadehaven.core.input import InputEvent, Key, KeyPress
from arcadehaven.core.rng import RandomSource, random_sign, uniform
from arcadehaven.game.interfaces import GameOutcome, GameVariant, PongScore

FIELD_WIDTH = 600
FIELD_HEIGHT = 400
PADDLE_WIDTH = 10
PADDLE_HEIGHT = 80
BALL_SIZE = 10
PADDLE_STEP = 20

SERVE_SPEED_X = 5.0
SERVE_SPEED_Y_MIN = 2.0
SERVE_SPEED_Y_MAX = 4.0
SPEED_GROWTH = 1.1
MAX_BALL_SPEED_X = 12.0
MAX_BALL_SPEED_Y = 8.0
DEFLECTION = 6.0

AI_BASE_SPEED = 4.0
AI_DEAD_ZONE = 6.0
AI_CLOSE_MATCH_BONUS = 0.5

WIN_SCORE = 5

PLAYER = "player"
AI = "ai"

# x of the ball's left edge when it touches each paddle face
_LEFT_PLANE = float(PADDLE_WIDTH)
_RIGHT_PLANE = float(FIELD_WIDTH - PADDLE_WIDTH - BALL_SIZE)


@dataclass(slots=True)
class Ball:
    x: float
    y: float
    dx: float
    dy: float


class PongGame(GameVariant):
    """First to :data:`WIN_SCORE` points wins the match."""

    game_id = "pixelpong"
    field_size = (FIELD_WIDTH, FIELD_HEIGHT)

    def __init__(self, rng: RandomSource | None = None) -> None:
        super().__init__(rng)
        self.ball = Ball(0.0, 0.0, 0.0, 0.0)
        self.player_y = 0.0
        self.ai_y = 0.0
        self._score = PongScore()
        self._winner: str | None = None
        self.reset()

    # ── GameVariant ──────────────────────────────────────────────────────

    @property
    def score(self) -> PongScore:
        return self._score

    @property
    def winner(self) -> str | None:
        return self._winner

    def reset(self) -> None:
        centre = (FIELD_HEIGHT - PADDLE_HEIGHT) / 2
        self.player_y = centre
        self.ai_y = centre
        self._score = PongScore()
        self._winner = None
        self.serve(random_sign(self._rng))

    def tick(self, dt: float) -> None:
        if self._winner is not None:
            return
        ball = self.ball
        prev_x = ball.x
        ball.x += ball.dx
        ball.y += ball.dy

        self._bounce_off_walls()
        self._bounce_off_paddles(prev_x)
        if self._check_point():
            return
        self._move_ai()

    def handle_input(self, event: InputEvent) -> bool:
        if not isinstance(event, KeyPress):
            return False
        if event.key == Key.UP:
            target = self.player_y - PADDLE_STEP
        elif event.key == Key.DOWN:
            target = self.player_y + PADDLE_STEP
        else:
            return False
        target = clamp(target, 0.0, FIELD_HEIGHT - PADDLE_HEIGHT)
        if target == self.player_y:
            return False
        self.player_y = target
        return True

    def is_terminal(self) -> bool:
        return self._winner is not None

    def outcome(self) -> GameOutcome:
        return GameOutcome(self._score, won=self._winner == PLAYER, winner=self._winner)

    # ── Rules ────────────────────────────────────────────────────────────

    def serve(self, direction: int) -> None:
        """Put the ball in the centre moving toward *direction* (-1 left, +1 right)."""
        speed_y = uniform(self._rng, SERVE_SPEED_Y_MIN, SERVE_SPEED_Y_MAX)
        self.ball = Ball(
            x=(FIELD_WIDTH - BALL_SIZE) / 2,
            y=(FIELD_HEIGHT - BALL_SIZE) / 2,
            dx=SERVE_SPEED_X * (1 if direction >= 0 else -1),
            dy=speed_y * random_sign(self._rng),
        )

    @property
    def ai_speed(self) -> float:
        """Faster with ball speed and when the match is close."""
        gap = abs(self._score.player - self._score.ai)
        closeness = 1.0 + AI_CLOSE_MATCH_BONUS * (1.0 - min(gap, WIN_SCORE) / WIN_SCORE)
        return AI_BASE_SPEED * (abs(self.ball.dx) / SERVE_SPEED_X) * closeness

    def _bounce_off_walls(self) -> None:
        ball = self.ball
        if ball.y < 0:
            ball.y = 0.0
            ball.dy = abs(ball.dy)
        elif ball.y > FIELD_HEIGHT - BALL_SIZE:
            ball.y = float(FIELD_HEIGHT - BALL_SIZE)
            ball.dy = -abs(ball.dy)

    def _bounce_off_paddles(self, prev_x: float) -> None:
        ball = self.ball
        if ball.dx < 0:
            if prev_x >= _LEFT_PLANE >= ball.x and self._overlaps_paddle(self.player_y):
                ball.x = _LEFT_PLANE
                self._return_ball(self.player_y, direction=1)
        elif ball.dx > 0:
            if prev_x <= _RIGHT_PLANE <= ball.x and self._overlaps_paddle(self.ai_y):
                ball.x = _RIGHT_PLANE
                self._return_ball(self.ai_y, direction=-1)

    def _overlaps_paddle(self, paddle_y: float) -> bool:
        ball_y = self.ball.y
        return ball_y + BALL_SIZE >= paddle_y and ball_y <= paddle_y + PADDLE_HEIGHT

    def _return_ball(self, paddle_y: float, direction: int) -> None:
        ball = self.ball
        ball.dx = direction * min(abs(ball.dx) * SPEED_GROWTH, MAX_BALL_SPEED_X)
        hit = clamp((ball.y + BALL_SIZE / 2 - paddle_y) / PADDLE_HEIGHT, 0.0, 1.0)
        ball.dy = clamp(ball.dy + (hit - 0.5) * DEFLECTION, -MAX_BALL_SPEED_Y, MAX_BALL_SPEED_Y)

    def _check_point(self) -> bool:
        ball = self.ball
        if ball.x < 0:
            self._score = PongScore(self._score.player, self._score.ai + 1)
            conceded = -1
        elif ball.x + BALL_SIZE > FIELD_WIDTH:
            self._score = PongScore(self._score.player + 1, self._score.ai)
            conceded = 1
        else:
            return False

        if self._score.player >= WIN_SCORE:
            self._winner = PLAYER
        elif self._score.ai >= WIN_SCORE:
            self._winner = AI
        else:
            self.serve(conceded)
        return True

    def _move_ai(self) -> None:
        target = self.ball.y + BALL_SIZE / 2 - PADDLE_HEIGHT / 2
        diff = target - self.ai_y
        if abs(diff) <= AI_DEAD_ZONE:
            return
        step = min(self.ai_speed, abs(diff))
        self.ai_y += step if diff > 0 else -step
        self.ai_y = clamp(self.ai_y, 0.0, FIELD_HEIGHT - PADDLE_HEIGHT)
