"""MainWindow — top-level window: catalog, game page and leaderboards."""

from __future__ import annotations

import logging

from PyQt6.QtGui import QAction, QCloseEvent
from PyQt6.QtWidgets import QLabel, QMainWindow, QStackedWidget, QStatusBar

from arcadehaven.config import ArcadeConfig
from arcadehaven.games.catalog import GameNotFoundError
from arcadehaven.services.http import ArcadeApiClient, HttpAuthService, HttpScoreService
from arcadehaven.services.interfaces import IAuthService, IScoreService
from arcadehaven.services.memory import InMemoryAuthService, InMemoryScoreService
from arcadehaven.services.models import LeaderboardEntry, ScoreRecord
from arcadehaven.ui.dialogs.login_dialog import LoginDialog
from arcadehaven.ui.game_page import GamePage
from arcadehaven.ui.i18n import set_language, t
from arcadehaven.ui.panels.catalog_panel import CatalogPanel
from arcadehaven.ui.panels.leaderboard_panel import LeaderboardPanel
from arcadehaven.ui.score_session import ScoreSession

_LOGGER = logging.getLogger(__name__)

_STATUS_TIMEOUT_MS = 5000


def build_services(config: ArcadeConfig) -> tuple[IAuthService, IScoreService]:
    """In-memory services when offline, REST clients otherwise."""
    if config.offline:
        auth = InMemoryAuthService()
        return auth, InMemoryScoreService(auth)
    client = ArcadeApiClient(config.api_base_url, timeout=config.request_timeout)
    return HttpAuthService(client), HttpScoreService(client)


class MainWindow(QMainWindow):
    """Main application window for Arcade Haven."""

    def __init__(
        self,
        config: ArcadeConfig | None = None,
        *,
        auth: IAuthService | None = None,
        scores: IScoreService | None = None,
    ) -> None:
        super().__init__()
        self._config = config or ArcadeConfig()
        set_language(self._config.language)
        if auth is None or scores is None:
            auth, scores = build_services(self._config)
        self._auth = auth
        self._scores = scores
        self._high_scores: dict[str, int] = {}
        self._game_page: GamePage | None = None

        self.setMinimumSize(800, 560)
        self.resize(1000, 680)

        self._setup_ui()
        self._setup_menu()
        self._score_session = ScoreSession(
            scores=self._scores,
            auth=self._auth,
            on_submitted=self._on_score_submitted,
            on_submit_failed=self._on_score_not_submitted,
            on_leaderboard=self._on_leaderboard,
            on_leaderboard_failed=self._on_leaderboard_failed,
            parent=self,
            leaderboard_limit=self._config.leaderboard_limit,
        )
        self._score_session.setup()
        self.retranslate_ui()
        self.show_home()

    # ── UI setup ─────────────────────────────────────────────────────────

    def _setup_ui(self) -> None:
        self._stack = QStackedWidget()
        self.setCentralWidget(self._stack)

        self._catalog = CatalogPanel()
        self._catalog.game_selected.connect(self.open_game)
        self._stack.addWidget(self._catalog)

        self._leaderboard = LeaderboardPanel()
        self._leaderboard.refresh_requested.connect(self._request_leaderboard)
        self._stack.addWidget(self._leaderboard)

        self._status = QStatusBar()
        self.setStatusBar(self._status)
        self._user_label = QLabel()
        self._status.addPermanentWidget(self._user_label)

    def _setup_menu(self) -> None:
        menu_bar = self.menuBar()
        assert menu_bar is not None

        self._menu_arcade = menu_bar.addMenu("")
        assert self._menu_arcade is not None
        self._act_home = QAction(self)
        self._act_home.setShortcut("Ctrl+H")
        self._act_home.triggered.connect(self.show_home)
        self._menu_arcade.addAction(self._act_home)
        self._act_leaderboards = QAction(self)
        self._act_leaderboards.setShortcut("Ctrl+L")
        self._act_leaderboards.triggered.connect(lambda: self.show_leaderboards())
        self._menu_arcade.addAction(self._act_leaderboards)
        self._menu_arcade.addSeparator()
        self._act_quit = QAction(self)
        self._act_quit.setShortcut("Ctrl+Q")
        self._act_quit.triggered.connect(self.close)
        self._menu_arcade.addAction(self._act_quit)

        self._menu_account = menu_bar.addMenu("")
        assert self._menu_account is not None
        self._act_login = QAction(self)
        self._act_login.triggered.connect(self._on_login)
        self._menu_account.addAction(self._act_login)
        self._act_logout = QAction(self)
        self._act_logout.triggered.connect(self.logout)
        self._menu_account.addAction(self._act_logout)

    def retranslate_ui(self) -> None:
        s = t()
        self.setWindowTitle(s.app_title)
        assert self._menu_arcade is not None and self._menu_account is not None
        self._menu_arcade.setTitle(s.menu_arcade)
        self._act_home.setText(s.menu_home)
        self._act_leaderboards.setText(s.menu_leaderboards)
        self._act_quit.setText(s.menu_quit)
        self._menu_account.setTitle(s.menu_account)
        self._act_login.setText(s.menu_login)
        self._act_logout.setText(s.menu_logout)
        self._catalog.retranslate_ui()
        self._leaderboard.retranslate_ui()
        if self._game_page is not None:
            self._game_page.retranslate_ui()
        self._sync_user_label()

    # ── Navigation ───────────────────────────────────────────────────────

    @property
    def game_page(self) -> GamePage | None:
        return self._game_page

    @property
    def current_page(self) -> object:
        return self._stack.currentWidget()

    def show_home(self) -> None:
        self._close_game_page()
        self._stack.setCurrentWidget(self._catalog)

    def show_leaderboards(self, game_id: str | None = None) -> None:
        self._close_game_page()
        self._stack.setCurrentWidget(self._leaderboard)
        if game_id:
            self._leaderboard.select_game(game_id)
        self._request_leaderboard(self._leaderboard.selected_game_id)

    def open_game(self, game_id: str) -> bool:
        """Mount *game_id* in a fresh game page; False if the id is unknown."""
        self._close_game_page()
        try:
            page = GamePage(
                game_id,
                submit_score=self._submit_score,
                high_score=self._high_scores.get(game_id.lower(), 0),
                frame_interval_ms=self._config.frame_interval_ms,
            )
        except GameNotFoundError as exc:
            _LOGGER.warning("%s", exc)
            self._status.showMessage(t().game_not_found.format(game=game_id), _STATUS_TIMEOUT_MS)
            self._stack.setCurrentWidget(self._catalog)
            return False

        page.exit_requested.connect(self.show_home)
        page.game_finished.connect(self._on_game_finished)
        self._game_page = page
        self._stack.addWidget(page)
        self._stack.setCurrentWidget(page)
        page.view.setFocus()
        return True

    def _close_game_page(self) -> None:
        page = self._game_page
        if page is None:
            return
        self._game_page = None
        page.shutdown()
        self._stack.removeWidget(page)
        page.deleteLater()

    # ── Account ──────────────────────────────────────────────────────────

    def _on_login(self) -> None:
        session = LoginDialog.ask(self._auth, self)
        if session is not None:
            self._sync_user_label()

    def logout(self) -> None:
        self._auth.logout()
        self._sync_user_label()

    def _sync_user_label(self) -> None:
        s = t()
        user = self._auth.current_user
        text = s.status_signed_in.format(name=user.username) if user else s.status_guest
        if self._config.offline:
            text = f"{text} · {s.status_offline}"
        self._user_label.setText(text)
        self._act_logout.setEnabled(user is not None)

    # ── Scores ───────────────────────────────────────────────────────────

    def _submit_score(self, game_name: str, score_value: int) -> None:
        self._score_session.submit(game_name, score_value)

    def _on_game_finished(self, game_id: str, score_value: int) -> None:
        best = self._high_scores.get(game_id, 0)
        self._high_scores[game_id] = max(best, score_value)

    def _on_score_submitted(self, record: ScoreRecord) -> None:
        self._status.showMessage(
            t().status_score_saved.format(game=record.game_name, score=record.score_value),
            _STATUS_TIMEOUT_MS,
        )

    def _on_score_not_submitted(self, game_name: str) -> None:
        self._status.showMessage(
            t().status_score_not_saved.format(game=game_name), _STATUS_TIMEOUT_MS
        )

    def _request_leaderboard(self, game_id: str) -> None:
        self._leaderboard.set_loading()
        self._score_session.request_leaderboard(game_id)

    def _on_leaderboard(self, game_id: str, entries: list[LeaderboardEntry]) -> None:
        if game_id == self._leaderboard.selected_game_id:
            self._leaderboard.set_entries(entries)

    def _on_leaderboard_failed(self, game_id: str, message: str) -> None:
        if game_id == self._leaderboard.selected_game_id:
            self._leaderboard.set_error(message)

    # ── Lifecycle ────────────────────────────────────────────────────────

    def closeEvent(self, event: QCloseEvent | None) -> None:
        self._close_game_page()
        self._score_session.shutdown()
        super().closeEvent(event)
