import curses


class ScreenLayout:
    def __init__(self, stdscr):
        self.stdscr = stdscr
        self.H, self.W = stdscr.getmaxyx()
        self.table_win = self._new_table_win()

    def _new_table_win(self):
        win = curses.newwin(max(1, self.H), max(1, self.W), 0, 0)
        # the table never owns the cursor
        win.leaveok(True)
        return win

    def size(self):
        return self.W, self.H

    def resize(self):
        try:
            curses.update_lines_cols()
        except (AttributeError, curses.error):
            pass
        self.H, self.W = self.stdscr.getmaxyx()
        try:
            self.stdscr.clear()
            self.stdscr.refresh()
        except curses.error:
            pass
        self.table_win = self._new_table_win()
