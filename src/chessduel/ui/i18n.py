"""Internationalisation strings for the chessduel UI.

Usage::

    from chessduel.ui.i18n import t, set_language

    set_language("Russian")
    print(t().btn_undo)          # "Отменить ход"
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Strings:
    # ── Main window ──────────────────────────────────────────────────────
    window_title: str
    status_header: str
    fen_header: str
    time_control_header: str

    # Status line
    status_to_move: str  # "{color} to move"
    status_in_check: str  # ", {color} is in check"
    status_checkmate: str  # "Game over, {color} is in checkmate."
    status_draw: str
    status_time_up: str  # "Time's up! {color} wins."
    color_white: str
    color_black: str

    # ── ClockWidget ──────────────────────────────────────────────────────
    clock_white: str
    clock_black: str

    # ── MovePanel ────────────────────────────────────────────────────────
    moves_header: str
    moves_white: str
    moves_black: str

    # ── ControlPanel ─────────────────────────────────────────────────────
    btn_reset: str
    btn_undo: str
    time_option: str  # "{minutes} min"


_EN = Strings(
    window_title="Bet on Your Intelligence",
    status_header="Status:",
    fen_header="FEN:",
    time_control_header="Time Control:",
    status_to_move="{color} to move",
    status_in_check=", {color} is in check",
    status_checkmate="Game over, {color} is in checkmate.",
    status_draw="Game over, drawn position",
    status_time_up="Time's up! {color} wins.",
    color_white="White",
    color_black="Black",
    clock_white="White:",
    clock_black="Black:",
    moves_header="Moves:",
    moves_white="White",
    moves_black="Black",
    btn_reset="Reset",
    btn_undo="Undo",
    time_option="{minutes} min",
)

_RU = Strings(
    window_title="Поставь на свой интеллект",
    status_header="Статус:",
    fen_header="FEN:",
    time_control_header="Контроль времени:",
    status_to_move="Ход: {color}",
    status_in_check=", {color} под шахом",
    status_checkmate="Игра окончена, {color} получили мат.",
    status_draw="Игра окончена, ничья",
    status_time_up="Время вышло! {color} побеждают.",
    color_white="Белые",
    color_black="Чёрные",
    clock_white="Белые:",
    clock_black="Чёрные:",
    moves_header="Ходы:",
    moves_white="Белые",
    moves_black="Чёрные",
    btn_reset="Сброс",
    btn_undo="Отменить ход",
    time_option="{minutes} мин",
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
