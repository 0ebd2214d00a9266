"""Internationalisation strings for the Arcade Haven UI.

Usage::

    from arcadehaven.ui.i18n import t, set_language

    set_language("Russian")
    print(t().btn_pause)          # "Пауза"
    print(t().final_score.format(score=42))
"""

from __future__ import annotations

from dataclasses import dataclass

from arcadehaven.game.host import HostStatus


@dataclass(frozen=True)
class Strings:
    # ── Main window ──────────────────────────────────────────────────────
    app_title: str
    menu_arcade: str
    menu_home: str
    menu_leaderboards: str
    menu_quit: str
    menu_account: str
    menu_login: str
    menu_logout: str

    status_guest: str
    status_signed_in: str  # "Signed in as {name}"
    status_offline: str
    status_score_saved: str  # "Score saved: {game} {score}"
    status_score_not_saved: str  # "Score not saved for {game}"

    home_title: str
    home_subtitle: str
    btn_play: str
    game_not_found: str  # "Game not found: {game}"

    # ── Game page ────────────────────────────────────────────────────────
    btn_start: str
    btn_restart: str
    btn_pause: str
    btn_resume: str
    btn_exit: str

    info_status: str
    info_score: str
    info_high_score: str
    info_time_left: str
    info_controls: str

    status_loading: str
    status_ready: str
    status_playing: str
    status_paused: str
    status_game_over: str

    overlay_ready: str
    overlay_paused: str
    overlay_game_over: str
    overlay_you_win: str
    overlay_ai_wins: str
    final_score: str  # "Final score: {score}"

    # ── Leaderboard ──────────────────────────────────────────────────────
    leaderboard_title: str
    leaderboard_game: str
    leaderboard_refresh: str
    leaderboard_empty: str
    leaderboard_loading: str
    leaderboard_error: str  # "Could not load leaderboard: {msg}"
    col_rank: str
    col_player: str
    col_score: str
    col_date: str

    # ── Login dialog ─────────────────────────────────────────────────────
    login_title: str
    login_mode_login: str
    login_mode_register: str
    login_identity: str
    login_username: str
    login_email: str
    login_password: str
    login_failed: str  # "Sign-in failed: {msg}"
    register_done: str  # "Account created for {name}. You can sign in now."


_EN = Strings(
    app_title="Arcade Haven",
    menu_arcade="&Arcade",
    menu_home="&Home",
    menu_leaderboards="&Leaderboards",
    menu_quit="&Quit",
    menu_account="A&ccount",
    menu_login="Sign &in…",
    menu_logout="Sign &out",
    status_guest="Playing as guest",
    status_signed_in="Signed in as {name}",
    status_offline="Offline mode",
    status_score_saved="Score saved: {game} {score}",
    status_score_not_saved="Score not saved for {game}",
    home_title="Arcade Haven",
    home_subtitle="Pick a game and chase the high score.",
    btn_play="Play",
    game_not_found="Game not found: {game}",
    btn_start="Start",
    btn_restart="Restart",
    btn_pause="Pause",
    btn_resume="Resume",
    btn_exit="Exit to Menu",
    info_status="Status",
    info_score="Score",
    info_high_score="High score",
    info_time_left="Time left",
    info_controls="Controls",
    status_loading="Loading",
    status_ready="Ready",
    status_playing="Playing",
    status_paused="Paused",
    status_game_over="Game Over",
    overlay_ready="Press Start to play",
    overlay_paused="Paused",
    overlay_game_over="Game Over",
    overlay_you_win="You win!",
    overlay_ai_wins="AI wins!",
    final_score="Final score: {score}",
    leaderboard_title="Leaderboards",
    leaderboard_game="Game:",
    leaderboard_refresh="Refresh",
    leaderboard_empty="No scores yet. Be the first!",
    leaderboard_loading="Loading…",
    leaderboard_error="Could not load leaderboard: {msg}",
    col_rank="Rank",
    col_player="Player",
    col_score="Score",
    col_date="Date",
    login_title="Sign in",
    login_mode_login="Sign in",
    login_mode_register="Create account",
    login_identity="Email or username:",
    login_username="Username:",
    login_email="Email:",
    login_password="Password:",
    login_failed="Sign-in failed: {msg}",
    register_done="Account created for {name}. You can sign in now.",
)

_RU = Strings(
    app_title="Arcade Haven",
    menu_arcade="&Аркада",
    menu_home="&Главная",
    menu_leaderboards="&Рекорды",
    menu_quit="&Выход",
    menu_account="&Аккаунт",
    menu_login="&Войти…",
    menu_logout="В&ыйти из аккаунта",
    status_guest="Игра в гостевом режиме",
    status_signed_in="Вы вошли как {name}",
    status_offline="Офлайн-режим",
    status_score_saved="Результат сохранён: {game} {score}",
    status_score_not_saved="Результат не сохранён: {game}",
    home_title="Arcade Haven",
    home_subtitle="Выберите игру и побейте рекорд.",
    btn_play="Играть",
    game_not_found="Игра не найдена: {game}",
    btn_start="Старт",
    btn_restart="Заново",
    btn_pause="Пауза",
    btn_resume="Продолжить",
    btn_exit="В меню",
    info_status="Статус",
    info_score="Счёт",
    info_high_score="Рекорд",
    info_time_left="Осталось",
    info_controls="Управление",
    status_loading="Загрузка",
    status_ready="Готово",
    status_playing="Игра",
    status_paused="Пауза",
    status_game_over="Игра окончена",
    overlay_ready="Нажмите «Старт»",
    overlay_paused="Пауза",
    overlay_game_over="Игра окончена",
    overlay_you_win="Победа!",
    overlay_ai_wins="Победил ИИ!",
    final_score="Итоговый счёт: {score}",
    leaderboard_title="Таблица рекордов",
    leaderboard_game="Игра:",
    leaderboard_refresh="Обновить",
    leaderboard_empty="Пока нет результатов. Станьте первым!",
    leaderboard_loading="Загрузка…",
    leaderboard_error="Не удалось загрузить рекорды: {msg}",
    col_rank="Место",
    col_player="Игрок",
    col_score="Счёт",
    col_date="Дата",
    login_title="Вход",
    login_mode_login="Вход",
    login_mode_register="Регистрация",
    login_identity="Email или имя:",
    login_username="Имя пользователя:",
    login_email="Email:",
    login_password="Пароль:",
    login_failed="Не удалось войти: {msg}",
    register_done="Аккаунт {name} создан. Теперь можно войти.",
)

_LOCALES: dict[str, Strings] = {
    "English": _EN,
    "Russian": _RU,
}

LANGUAGES: list[str] = list(_LOCALES.keys())

_current: Strings = _EN


def t() -> Strings:
    """Return the active locale strings."""
    return _current


def set_language(language: str) -> None:
    """Switch the global locale. Unknown names fall back to English."""
    global _current
    _current = _LOCALES.get(language, _EN)


def status_text(status: HostStatus) -> str:
    s = t()
    return {
        HostStatus.LOADING: s.status_loading,
        HostStatus.READY: s.status_ready,
        HostStatus.PLAYING: s.status_playing,
        HostStatus.PAUSED: s.status_paused,
        HostStatus.GAME_OVER: s.status_game_over,
    }[status]
