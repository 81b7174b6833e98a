import curses
import logging

from grid_pane import GridPane
from screen_layout import ScreenLayout
from line_navigator import LineNavigator
from window_reader import WindowReader
from pagination import Paginator
from navigation import NavigationController
from counts import PendingCount
from status_bar import render_count_prompt

logger = logging.getLogger(__name__)

CTRL_C = 3
CTRL_N = 14
CTRL_P = 16


class Orchestrator:
    def __init__(self, stdscr, app_state, fh, layout=None, grid=None):
        self.stdscr = stdscr
        self.state = app_state
        self.layout = layout if layout is not None else ScreenLayout(stdscr)
        self.grid = grid if grid is not None else GridPane()

        _, height = self.layout.size()
        self.paginator = Paginator(height)
        self.navigator = LineNavigator(fh)
        self.reader = WindowReader(
            fh,
            app_state.delimiter,
            encoding=app_state.encoding,
            width_mode=app_state.width_mode,
        )
        self.nav = NavigationController(
            self.state, self.navigator, self.reader, self.paginator
        )
        self.count = PendingCount()

        self.key_map = {
            ord("j"): self.nav.line_forward,
            curses.KEY_DOWN: self.nav.line_forward,
            ord("k"): self.nav.line_backward,
            curses.KEY_UP: self.nav.line_backward,
            ord("l"): self._pan_right,
            curses.KEY_RIGHT: self._pan_right,
            ord("h"): self._pan_left,
            curses.KEY_LEFT: self._pan_left,
            CTRL_N: self.nav.page_forward,
            curses.KEY_NPAGE: self.nav.page_forward,
            CTRL_P: self.nav.page_backward,
            curses.KEY_PPAGE: self.nav.page_backward,
            ord(" "): self.nav.half_page_forward,
            ord("g"): self.nav.jump_to_start,
            curses.KEY_HOME: self.nav.jump_to_start,
            ord("G"): self.nav.jump_to_end,
            curses.KEY_END: self.nav.jump_to_end,
        }
        self.count_directions = {
            ord("j"): "down",
            curses.KEY_DOWN: "down",
            ord("k"): "up",
            curses.KEY_UP: "up",
        }

    # ---------------- helpers ----------------

    def _pan_right(self):
        self.nav.pan_right(self.layout.size()[0])

    def _pan_left(self):
        self.nav.pan_left()

    def _set_cursor_visible(self, visible):
        try:
            curses.curs_set(1 if visible else 0)
        except curses.error:
            pass

    # ---------------- UI ----------------

    def _render(self):
        width, height = self.layout.size()
        lines = self.nav.refresh(width, height)
        prompt = None
        if self.count.active:
            prompt = render_count_prompt(self.count.text(), width)
        self.grid.draw(self.layout.table_win, lines, prompt)

    def redraw(self):
        """Re-render the current window; safe to call from any thread."""
        with self.state.lock:
            self._render()

    def on_resize(self):
        with self.state.lock:
            self.layout.resize()
            width, height = self.layout.size()
            logger.debug("resized to %dx%d", width, height)
            self._render()

    # ---------------- key dispatch ----------------

    def _dispatch(self, ch):
        if ch == CTRL_C:
            self.count.reset()
            return False

        if ord("0") <= ch <= ord("9"):
            self.count.push_digit(ch - ord("0"))
            return True

        if self.count.active:
            n = self.count.consume()
            direction = self.count_directions.get(ch)
            if direction is not None:
                logger.debug("jump %d lines %s", n, direction)
                self.nav.jump_lines(n, direction)
            return True

        if ch == ord("q"):
            return False

        action = self.key_map.get(ch)
        if action is not None:
            action()
        return True

    def handle_key(self, ch):
        """Apply one key event. Returns False once the session should end."""
        if ch == -1:
            return True
        if ch == curses.KEY_RESIZE:
            self.on_resize()
            return True

        with self.state.lock:
            keep_running = self._dispatch(ch)
            if keep_running:
                self._render()
        return keep_running

    # ---------------- main loop ----------------

    def run(self):
        try:
            curses.raw()
        except curses.error:
            pass
        self.stdscr.keypad(True)
        self.stdscr.nodelay(False)
        self._set_cursor_visible(False)

        logger.info("viewing %s", self.state.file_path)
        self.redraw()
        try:
            while True:
                ch = self.stdscr.getch()
                if not self.handle_key(ch):
                    break
        finally:
            self._set_cursor_visible(True)
        logger.info("closed %s", self.state.file_path)
