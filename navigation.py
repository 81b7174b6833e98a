import bisect
import logging

import table_renderer

logger = logging.getLogger(__name__)


class NavigationController:
    """Dispatches viewport commands against the session state.

    Callers hold ``state.lock`` around a command and the ``refresh`` that
    follows it.
    """

    def __init__(self, state, navigator, reader, paginator):
        self.state = state
        self.navigator = navigator
        self.reader = reader
        self.pager = paginator

    def _move_to(self, offset):
        if offset != self.state.cursor_offset:
            logger.debug("cursor %d -> %d", self.state.cursor_offset, offset)
        self.state.cursor_offset = offset

    # ---------- vertical ----------
    def line_forward(self, n=1):
        self._move_to(self.navigator.step_forward(self.state.cursor_offset, n))

    def line_backward(self, n=1):
        self._move_to(self.navigator.step_backward(self.state.cursor_offset, n))

    def page_forward(self):
        self.line_forward(self.pager.page_size)

    def page_backward(self):
        self.line_backward(self.pager.page_size)

    def half_page_forward(self):
        self.line_forward(self.pager.half_page)

    def jump_to_start(self):
        self._move_to(0)

    def jump_to_end(self):
        end = self.navigator.size()
        self._move_to(self.navigator.step_backward(end, self.pager.page_size))

    def jump_lines(self, n, direction):
        # no line index: this still walks the file one line at a time
        if direction == "down":
            self.line_forward(n)
        elif direction == "up":
            self.line_backward(n)

    # ---------- horizontal ----------
    def _column_at(self, shift):
        bounds = table_renderer.column_bounds(self.state.column_widths)
        if not bounds:
            return -1
        return bisect.bisect_right(bounds, shift) - 1

    def pan_right(self, viewport_width):
        widths = self.state.column_widths
        total = table_renderer.table_width(widths)
        shift = self.state.horizontal_shift
        if not widths or total - shift <= viewport_width:
            return
        col = self._column_at(shift)
        step = widths[min(col, len(widths) - 1)] + 1
        self.state.horizontal_shift = min(shift + step, total - viewport_width)

    def pan_left(self):
        widths = self.state.column_widths
        shift = self.state.horizontal_shift
        if shift <= 0 or not widths:
            self.state.horizontal_shift = 0
            return
        col = self._column_at(shift)
        step = widths[max(0, min(col, len(widths)) - 1)] + 1
        self.state.horizontal_shift = max(0, shift - step)

    # ---------- window ----------
    def refresh(self, viewport_width, viewport_height):
        self.pager.update_height(viewport_height)
        window = self.reader.read_window(self.state.cursor_offset, self.pager.page_size)
        self.state.apply_window(window)

        total = table_renderer.table_width(self.state.column_widths)
        max_shift = max(0, total - viewport_width)
        self.state.horizontal_shift = max(0, min(self.state.horizontal_shift, max_shift))

        self.state.printable_lines = table_renderer.render(
            window.records,
            self.state.column_widths,
            viewport_width,
            viewport_height,
            self.state.horizontal_shift,
        )
        return self.state.printable_lines
