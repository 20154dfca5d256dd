"""Pygame GUI frontend — fully self-contained.

Includes main menu, username entry, difficulty selection, gameplay,
pause / save menus, post-game screen and leaderboards.  No terminal
interaction required.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Sequence

import pygame

from backend.engine.gameflow import GameFlowController, MessageKind, Screen
from backend.models.leaderboard import LeaderboardEntry, LeaderboardStore, crowned
from backend.models.question import QUESTIONS_PER_ROUND, Difficulty
from backend.models.savegame import SaveStore

# ---------------------------------------------------------------------------
# Catppuccin Mocha palette
# ---------------------------------------------------------------------------
COL_BASE = (30, 30, 46)
COL_MANTLE = (24, 24, 37)
COL_SURFACE0 = (49, 50, 68)
COL_SURFACE1 = (69, 71, 90)
COL_OVERLAY0 = (108, 112, 134)
COL_TEXT = (205, 214, 244)
COL_SUBTEXT = (166, 173, 200)
COL_BLUE = (137, 180, 250)
COL_LAVENDER = (180, 190, 254)
COL_GREEN = (166, 227, 161)
COL_PINK = (245, 194, 231)
COL_YELLOW = (249, 226, 175)
COL_RED = (243, 139, 168)

# ---------------------------------------------------------------------------
# Layout
# ---------------------------------------------------------------------------
WIN_W, WIN_H = 640, 640
MARGIN = 30
USERNAME_MAX = 20


# ---------------------------------------------------------------------------
# Text helpers
# ---------------------------------------------------------------------------
def _wrap(text: str, font: pygame.font.Font, width: int) -> list[str]:
    """Greedy word wrap that keeps explicit line breaks."""
    lines: list[str] = []
    for paragraph in text.splitlines() or [""]:
        line = ""
        for word in paragraph.split(" "):
            candidate = f"{line} {word}" if line else word
            if line and font.size(candidate)[0] > width:
                lines.append(line)
                line = word
            else:
                line = candidate
        lines.append(line)
    return lines


def _cx(w: int) -> int:
    return (WIN_W - w) // 2


def _blit_center(surf: pygame.Surface, rendered: pygame.Surface, y: int) -> None:
    surf.blit(rendered, (_cx(rendered.get_width()), y))


# ---------------------------------------------------------------------------
# Simple clickable button
# ---------------------------------------------------------------------------
class _Btn:
    __slots__ = ("rect", "text", "font", "bg", "hover", "fg", "radius", "_hot")

    def __init__(
        self,
        rect: tuple[int, int, int, int],
        text: str,
        font: pygame.font.Font,
        *,
        bg: tuple = COL_SURFACE0,
        hover: tuple = COL_SURFACE1,
        fg: tuple = COL_TEXT,
        radius: int = 8,
    ) -> None:
        self.rect = pygame.Rect(rect)
        self.text = text
        self.font = font
        self.bg = bg
        self.hover = hover
        self.fg = fg
        self.radius = radius
        self._hot = False

    def draw(self, surf: pygame.Surface) -> None:
        c = self.hover if self._hot else self.bg
        pygame.draw.rect(surf, c, self.rect, border_radius=self.radius)
        lines = [
            self.font.render(line, True, self.fg)
            for line in _wrap(self.text, self.font, self.rect.w - 16)
        ]
        y = self.rect.centery - sum(lbl.get_height() for lbl in lines) // 2
        for lbl in lines:
            surf.blit(lbl, (self.rect.centerx - lbl.get_width() // 2, y))
            y += lbl.get_height()

    def motion(self, pos: tuple[int, int]) -> None:
        self._hot = self.rect.collidepoint(pos)

    def hit(self, pos: tuple[int, int]) -> bool:
        return self.rect.collidepoint(pos)


def _column(
    labels: Sequence[str], font: pygame.font.Font, top: int, *, w: int = 280, h: int = 46
) -> list[_Btn]:
    """Vertically stacked, centred buttons."""
    return [
        _Btn((_cx(w), top + i * (h + 12), w, h), label, font)
        for i, label in enumerate(labels)
    ]


# ---------------------------------------------------------------------------
# Main application
# ---------------------------------------------------------------------------
class PygameApp:
    """Window, event loop and the controller's presentation in one object."""

    def __init__(self, data_dir: Path) -> None:
        pygame.init()
        self._surf = pygame.display.set_mode((WIN_W, WIN_H))
        pygame.display.set_caption("Queeze")
        self._clock = pygame.time.Clock()

        # Fonts
        self._f_big = pygame.font.SysFont("Helvetica", 38, bold=True)
        self._f_title = pygame.font.SysFont("Helvetica", 24, bold=True)
        self._f_body = pygame.font.SysFont("Helvetica", 18)
        self._f_question = pygame.font.SysFont("Helvetica", 20, bold=True)
        self._f_btn = pygame.font.SysFont("Helvetica", 17, bold=True)
        self._f_btn_sm = pygame.font.SysFont("Helvetica", 15, bold=True)
        self._f_small = pygame.font.SysFont("Helvetica", 13)

        # Last rendered state
        self._prompt = ""
        self._score = 0
        self._lives = 0
        self._is_win = False
        self._final_score = 0
        self._board_difficulty: Difficulty | None = None
        self._entries: list[LeaderboardEntry] = []
        self._typed = ""
        self._music_on = False
        self._status_msg = ""
        self._status_col = COL_YELLOW

        self._build_btns()
        self.controller = GameFlowController(
            self, LeaderboardStore(data_dir), SaveStore(data_dir)
        )

    # ── buttons ─────────────────────────────────────────────────────────────

    def _build_btns(self) -> None:
        f = self._f_btn
        self._menu_btns = _column(["Start Game", "Leaderboard", "Exit"], f, 260)
        self._menu_btns[0].bg, self._menu_btns[0].hover = COL_BLUE, COL_LAVENDER
        self._menu_btns[0].fg = COL_BASE
        self._menu_btns[2].bg, self._menu_btns[2].hover = COL_RED, (255, 170, 185)
        self._menu_btns[2].fg = COL_BASE

        self._user_enter = _Btn(
            (_cx(280), 330, 280, 46), "Enter", f,
            bg=COL_BLUE, hover=COL_LAVENDER, fg=COL_BASE,
        )
        self._user_back = _Btn((_cx(280), 388, 280, 46), "Return", f)

        self._diff_btns = _column(
            [
                f"{d.label}  ({d.initial_lives} {'life' if d.initial_lives == 1 else 'lives'})"
                for d in Difficulty
            ],
            f,
            200,
            h=56,
        )
        self._diff_back = _Btn((_cx(280), 420, 280, 46), "Return", f)

        ow, oh, gap = 270, 92, 14
        ox = _cx(2 * ow + gap)
        self._option_btns = [
            _Btn(
                (ox + (i % 2) * (ow + gap), 300 + (i // 2) * (oh + gap), ow, oh),
                "",
                self._f_btn_sm,
                bg=COL_BLUE,
                hover=COL_LAVENDER,
                fg=COL_BASE,
            )
            for i in range(4)
        ]
        self._pause_btn = _Btn((MARGIN, 16, 90, 34), "Pause", self._f_btn_sm)

        self._pause_btns = _column(
            ["Resume", "Play Music", "Save Menu", "Main Menu", "Exit Game"], f, 190
        )
        self._pause_btns[0].bg, self._pause_btns[0].hover = COL_GREEN, (190, 240, 190)
        self._pause_btns[0].fg = COL_BASE

        self._save_btns = _column(["Back", "Save Game", "Delete Save", "Load Save"], f, 200)

        self._post_btns = _column(
            ["Restart Game", "Choose Another Difficulty", "Return to Main Menu"], f, 330
        )
        self._post_btns[0].bg, self._post_btns[0].hover = COL_GREEN, (190, 240, 190)
        self._post_btns[0].fg = COL_BASE

        self._board_back = _Btn((_cx(180), WIN_H - 70, 180, 46), "Return", f)

    def _buttons(self, screen: Screen) -> list[_Btn]:
        return {
            Screen.MENU: self._menu_btns,
            Screen.USERNAME: [self._user_enter, self._user_back],
            Screen.DIFFICULTY: [*self._diff_btns, self._diff_back],
            Screen.LEADERBOARD_SELECT: [*self._diff_btns, self._diff_back],
            Screen.GAMEPLAY: [*self._option_btns, self._pause_btn],
            Screen.PAUSED: self._pause_btns,
            Screen.SAVE_MENU: self._save_btns,
            Screen.POST_GAME: self._post_btns,
            Screen.LEADERBOARD: [self._board_back],
        }[screen]

    # ── presentation ────────────────────────────────────────────────────────

    def show_screen(self, screen: Screen) -> None:
        if screen is Screen.USERNAME:
            self._typed = ""

    def render_question(self, prompt: str, options: Sequence[str]) -> None:
        self._prompt = prompt
        for btn, text in zip(self._option_btns, options):
            btn.text = text

    def render_score(self, score: int) -> None:
        self._score = score

    def render_lives(self, lives: int) -> None:
        self._lives = lives

    def render_post_game(self, is_win: bool, final_score: int) -> None:
        self._is_win = is_win
        self._final_score = final_score

    def render_leaderboard(
        self, difficulty: Difficulty, entries: Sequence[LeaderboardEntry]
    ) -> None:
        self._board_difficulty = difficulty
        self._entries = list(entries)

    def render_message(self, kind: MessageKind, text: str) -> None:
        self._status_msg = text
        if kind is MessageKind.ERROR:
            self._status_col = COL_RED
        elif text == "Correct!":
            self._status_col = COL_GREEN
        else:
            self._status_col = COL_YELLOW

    def ask_load_save(self) -> bool:
        return self._modal(
            "You have a saved game for this difficulty. Do you want to load it?",
            "Yes",
            "Start New Game",
        )

    def confirm(self, text: str) -> bool:
        return self._modal(text, "Yes", "No")

    def toggle_audio(self) -> bool:
        # Playback is out of scope; only the button label follows the flag.
        self._music_on = not self._music_on
        self._pause_btns[1].text = "Stop Music" if self._music_on else "Play Music"
        return self._music_on

    # ── modal dialog ────────────────────────────────────────────────────────

    def _modal(self, text: str, yes: str, no: str) -> bool:
        """Block in a nested loop until one of the two buttons is chosen."""
        box = pygame.Rect(_cx(480), 200, 480, 240)
        yes_btn = _Btn(
            (box.x + 30, box.bottom - 70, 200, 46), yes, self._f_btn,
            bg=COL_GREEN, hover=(190, 240, 190), fg=COL_BASE,
        )
        no_btn = _Btn((box.right - 230, box.bottom - 70, 200, 46), no, self._f_btn)
        backdrop = self._surf.copy()
        shade = pygame.Surface((WIN_W, WIN_H), pygame.SRCALPHA)
        shade.fill((0, 0, 0, 160))

        while True:
            for ev in pygame.event.get():
                if ev.type == pygame.QUIT:
                    return False
                if ev.type == pygame.MOUSEMOTION:
                    yes_btn.motion(ev.pos)
                    no_btn.motion(ev.pos)
                elif ev.type == pygame.MOUSEBUTTONDOWN and ev.button == 1:
                    if yes_btn.hit(ev.pos):
                        return True
                    if no_btn.hit(ev.pos):
                        return False
                elif ev.type == pygame.KEYDOWN:
                    if ev.key in (pygame.K_y, pygame.K_RETURN):
                        return True
                    if ev.key in (pygame.K_n, pygame.K_ESCAPE):
                        return False

            self._surf.blit(backdrop, (0, 0))
            self._surf.blit(shade, (0, 0))
            pygame.draw.rect(self._surf, COL_MANTLE, box, border_radius=12)
            y = box.y + 24
            if self._status_msg:
                _blit_center(
                    self._surf,
                    self._f_small.render(self._status_msg, True, self._status_col),
                    y,
                )
                y += 26
            for line in _wrap(text, self._f_body, box.w - 40):
                _blit_center(self._surf, self._f_body.render(line, True, COL_TEXT), y)
                y += 24
            yes_btn.draw(self._surf)
            no_btn.draw(self._surf)
            pygame.display.flip()
            self._clock.tick(30)

    # ── drawing ─────────────────────────────────────────────────────────────

    def _draw_title(self, text: str, col: tuple = COL_TEXT, y: int = 80) -> None:
        _blit_center(self._surf, self._f_big.render(text, True, col), y)

    def _draw_menu(self) -> None:
        self._draw_title("Q U E E Z E", y=110)
        _blit_center(
            self._surf,
            self._f_body.render("A trivia quiz in fifteen questions", True, COL_SUBTEXT),
            170,
        )

    def _draw_username(self) -> None:
        self._draw_title("Please Enter Your Username:", y=150)
        field = pygame.Rect(_cx(320), 240, 320, 52)
        pygame.draw.rect(self._surf, COL_SURFACE0, field, border_radius=8)
        caret = "|" if pygame.time.get_ticks() // 500 % 2 else ""
        lbl = self._f_title.render(self._typed + caret, True, COL_TEXT)
        self._surf.blit(
            lbl, (field.centerx - lbl.get_width() // 2, field.centery - lbl.get_height() // 2)
        )

    def _draw_difficulty(self) -> None:
        self._draw_title("Select Difficulty", y=100)

    def _draw_board_select(self) -> None:
        self._draw_title("Leaderboard", y=100)

    def _draw_game(self) -> None:
        game = self.controller.game
        if game is not None:
            header = (
                f"{game.difficulty.label}  ·  Question "
                f"{game.question_number}/{game.total_questions}"
            )
            lbl = self._f_small.render(header, True, COL_SUBTEXT)
            self._surf.blit(lbl, (WIN_W - MARGIN - lbl.get_width(), 26))

        _blit_center(
            self._surf,
            self._f_body.render(
                f"Score: {self._score}/{QUESTIONS_PER_ROUND}    Lives: {self._lives}",
                True,
                COL_PINK,
            ),
            76,
        )

        y = 130
        for line in _wrap(self._prompt, self._f_question, WIN_W - 2 * MARGIN):
            _blit_center(self._surf, self._f_question.render(line, True, COL_TEXT), y)
            y += 28

        _blit_center(
            self._surf,
            self._f_small.render("1-4  answer     P / Esc  pause", True, COL_OVERLAY0),
            WIN_H - 30,
        )

    def _draw_pause(self) -> None:
        self._draw_title("P A U S E D", COL_YELLOW)

    def _draw_save_menu(self) -> None:
        self._draw_title("S A V E   M E N U", COL_YELLOW)

    def _draw_post_game(self) -> None:
        if self._is_win:
            self._draw_title("★  Congratulations!  ★", COL_GREEN, 130)
        else:
            self._draw_title("Game Over!", COL_RED, 130)
        _blit_center(
            self._surf,
            self._f_title.render(f"Final Score: {self._final_score}", True, COL_YELLOW),
            210,
        )

    def _draw_leaderboard(self) -> None:
        label = self._board_difficulty.label if self._board_difficulty else ""
        self._draw_title(f"Leaderboard ({label})", y=30)
        y = 100
        if not self._entries:
            _blit_center(
                self._surf,
                self._f_body.render("No scores recorded yet.", True, COL_OVERLAY0),
                y + 30,
            )
        for entry, crown in crowned(self._entries):
            mark = "♛ " if crown else ""
            _blit_center(
                self._surf,
                self._f_title.render(
                    f"{mark}{entry.username}: {entry.best_score}",
                    True,
                    COL_YELLOW if crown else COL_SUBTEXT,
                ),
                y,
            )
            y += 34
            if y > WIN_H - 110:
                break

    def _draw(self) -> None:
        screen = self.controller.screen
        self._surf.fill(COL_BASE)
        drawers: dict[Screen, Callable[[], None]] = {
            Screen.MENU: self._draw_menu,
            Screen.USERNAME: self._draw_username,
            Screen.DIFFICULTY: self._draw_difficulty,
            Screen.LEADERBOARD_SELECT: self._draw_board_select,
            Screen.GAMEPLAY: self._draw_game,
            Screen.PAUSED: self._draw_pause,
            Screen.SAVE_MENU: self._draw_save_menu,
            Screen.POST_GAME: self._draw_post_game,
            Screen.LEADERBOARD: self._draw_leaderboard,
        }
        drawers[screen]()
        for btn in self._buttons(screen):
            btn.draw(self._surf)

        # status message
        if self._status_msg:
            _blit_center(
                self._surf,
                self._f_btn.render(self._status_msg, True, self._status_col),
                WIN_H - 64 if screen is Screen.GAMEPLAY else WIN_H - 110,
            )

    # ── event handling ──────────────────────────────────────────────────────

    def _click(self, pos: tuple[int, int]) -> bool:
        c = self.controller
        screen = c.screen
        buttons = self._buttons(screen)
        hit = next((i for i, b in enumerate(buttons) if b.hit(pos)), None)
        if hit is None:
            return True

        if screen is Screen.MENU:
            if hit == 0:
                c.open_username_entry()
            elif hit == 1:
                c.open_leaderboard_selection()
            else:
                return False
        elif screen is Screen.USERNAME:
            if hit == 0:
                c.submit_username(self._typed)
            else:
                c.on_back()
        elif screen in (Screen.DIFFICULTY, Screen.LEADERBOARD_SELECT):
            difficulties = list(Difficulty)
            if hit >= len(difficulties):
                c.on_back()
            elif screen is Screen.DIFFICULTY:
                c.start_round(difficulties[hit])
            else:
                c.show_leaderboard(difficulties[hit])
        elif screen is Screen.GAMEPLAY:
            if hit < 4:
                c.on_answer_selected(buttons[hit].text)
            else:
                c.on_pause_requested()
        elif screen is Screen.PAUSED:
            actions = [
                c.on_resume_requested,
                c.on_toggle_audio,
                c.on_open_save_menu,
                c.on_return_to_menu,
            ]
            if hit < len(actions):
                actions[hit]()
            elif c.on_exit_requested():
                return False
        elif screen is Screen.SAVE_MENU:
            [
                c.on_close_save_menu,
                c.on_save_requested,
                c.on_delete_requested,
                c.on_load_requested,
            ][hit]()
        elif screen is Screen.POST_GAME:
            [c.on_restart, c.on_choose_difficulty, c.on_return_to_menu][hit]()
        elif screen is Screen.LEADERBOARD:
            c.on_back()
        return True

    def _key(self, ev: pygame.event.Event) -> bool:
        c = self.controller
        screen = c.screen

        if screen is Screen.MENU:
            if ev.key == pygame.K_RETURN:
                c.open_username_entry()
            elif ev.key in (pygame.K_q, pygame.K_ESCAPE):
                return False

        elif screen is Screen.USERNAME:
            if ev.key == pygame.K_RETURN:
                c.submit_username(self._typed)
            elif ev.key == pygame.K_ESCAPE:
                c.on_back()
            elif ev.key == pygame.K_BACKSPACE:
                self._typed = self._typed[:-1]
            elif ev.unicode and ev.unicode.isprintable() and len(self._typed) < USERNAME_MAX:
                self._typed += ev.unicode

        elif screen is Screen.GAMEPLAY:
            _answers = {pygame.K_1: 0, pygame.K_2: 1, pygame.K_3: 2, pygame.K_4: 3}
            if ev.key in _answers:
                c.on_answer_selected(self._option_btns[_answers[ev.key]].text)
            elif ev.key in (pygame.K_p, pygame.K_ESCAPE):
                c.on_pause_requested()

        elif screen is Screen.PAUSED:
            if ev.key in (pygame.K_p, pygame.K_ESCAPE):
                c.on_resume_requested()

        elif screen is Screen.POST_GAME:
            if ev.key in (pygame.K_r, pygame.K_RETURN):
                c.on_restart()
            elif ev.key in (pygame.K_m, pygame.K_ESCAPE):
                c.on_return_to_menu()

        elif ev.key in (pygame.K_ESCAPE, pygame.K_BACKSPACE):
            c.on_back()
        return True

    # ── main loop ───────────────────────────────────────────────────────────

    def run_loop(self) -> None:
        self.controller.start()

        running = True
        while running:
            for ev in pygame.event.get():
                if ev.type == pygame.QUIT:
                    running = not self.controller.on_exit_requested()
                elif ev.type == pygame.MOUSEMOTION:
                    for btn in self._buttons(self.controller.screen):
                        btn.motion(ev.pos)
                elif ev.type == pygame.MOUSEBUTTONDOWN and ev.button == 1:
                    self._status_msg = ""
                    running = self._click(ev.pos)
                elif ev.type == pygame.KEYDOWN:
                    self._status_msg = ""
                    running = self._key(ev)
                if not running:
                    break

            self._draw()
            pygame.display.flip()
            self._clock.tick(30)

        pygame.quit()


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------
def run(data_dir: Path = Path("data")) -> None:
    """Launch the Pygame GUI (opens directly to the menu)."""
    app = PygameApp(data_dir)
    app.run_loop()
