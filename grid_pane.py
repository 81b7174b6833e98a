import curses


class GridPane:
    """Writes already composed table rows into a curses window."""

    def draw(self, win, lines, prompt=None):
        win.erase()
        h, w = win.getmaxyx()

        for y, line in enumerate(lines[:h]):
            try:
                win.addnstr(y, 0, line, w)
            except curses.error:
                # writing the bottom-right cell moves the cursor off screen
                pass

        if prompt is not None and h > 0:
            try:
                win.addnstr(h - 1, 0, prompt, w)
            except curses.error:
                pass

        win.refresh()
