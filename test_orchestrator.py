import curses
import io
import threading

from app_state import AppState
from orchestrator import Orchestrator, CTRL_C, CTRL_N


class DummyWin:
    def __init__(self, h, w):
        self._h = h
        self._w = w

    def getmaxyx(self):
        return self._h, self._w


class DummyLayout:
    def __init__(self, w=80, h=8):
        self.W = w
        self.H = h
        self.table_win = DummyWin(h, w)
        self.resizes = 0

    def size(self):
        return self.W, self.H

    def resize(self):
        self.resizes += 1
        self.table_win = DummyWin(self.H, self.W)


class DummyGrid:
    def __init__(self, state):
        self.state = state
        self.draws = []

    def draw(self, win, lines, prompt=None):
        # rendering always happens inside the session lock
        assert self.state.lock.locked()
        self.draws.append((list(lines), prompt))


def _data(n=12):
    return b"".join(f"r{i:02d},{i}\n".encode() for i in range(n))


ROW = len(b"r00,0\n")


def _make(data=None, w=80, h=8):
    fh = io.BytesIO(_data() if data is None else data)
    state = AppState("test.csv")
    grid = DummyGrid(state)
    layout = DummyLayout(w, h)
    orch = Orchestrator(None, state, fh, layout=layout, grid=grid)
    return orch, state, grid, layout


def test_j_and_k_move_one_line():
    orch, state, grid, _ = _make()
    assert orch.handle_key(ord("j"))
    assert state.cursor_offset == ROW
    orch.handle_key(curses.KEY_DOWN)
    orch.handle_key(ord("k"))
    assert state.cursor_offset == ROW
    assert len(grid.draws) == 3


def test_digit_prefix_jumps_like_repeated_steps():
    orch, state, grid, _ = _make()
    orch.handle_key(ord("4"))
    assert grid.draws[-1][1].startswith("4")
    orch.handle_key(curses.KEY_DOWN)
    jumped = state.cursor_offset
    assert grid.draws[-1][1] is None

    orch.handle_key(ord("g"))
    for _ in range(4):
        orch.handle_key(ord("j"))
    assert state.cursor_offset == jumped == 4 * ROW


def test_multi_digit_prefix_and_backward_jump():
    orch, state, grid, _ = _make()
    orch.handle_key(ord("1"))
    orch.handle_key(ord("0"))
    assert grid.draws[-1][1].startswith("10")
    orch.handle_key(ord("j"))
    assert state.cursor_offset == 10 * ROW
    orch.handle_key(ord("3"))
    orch.handle_key(ord("k"))
    assert state.cursor_offset == 7 * ROW


def test_non_directional_key_cancels_count():
    orch, state, _, _ = _make()
    orch.handle_key(ord("5"))
    assert orch.handle_key(ord("q")) is True
    assert state.cursor_offset == 0
    assert not orch.count.active


def test_quit_keys_stop_the_loop():
    orch, _, _, _ = _make()
    assert orch.handle_key(ord("q")) is False
    assert orch.handle_key(CTRL_C) is False


def test_ctrl_c_drops_pending_count():
    orch, state, _, _ = _make()
    orch.handle_key(ord("4"))
    assert orch.count.active
    assert orch.handle_key(CTRL_C) is False
    assert not orch.count.active
    assert state.cursor_offset == 0


def test_page_keys_use_terminal_height():
    orch, state, _, _ = _make(h=8)
    orch.handle_key(CTRL_N)
    assert state.cursor_offset == 3 * ROW
    orch.handle_key(ord(" "))
    assert state.cursor_offset == 4 * ROW
    orch.handle_key(ord("G"))
    assert state.cursor_offset == 9 * ROW
    orch.handle_key(curses.KEY_HOME)
    assert state.cursor_offset == 0


def test_horizontal_pan_keys():
    orch, state, grid, _ = _make(data=b"aaa,bbb,ccc\n", w=5, h=8)
    orch.redraw()
    orch.handle_key(ord("l"))
    assert state.horizontal_shift == 4
    orch.handle_key(curses.KEY_RIGHT)
    assert state.horizontal_shift == 8
    assert all(len(line) == 5 for line in grid.draws[-1][0])
    orch.handle_key(ord("h"))
    orch.handle_key(curses.KEY_LEFT)
    orch.handle_key(ord("h"))
    assert state.horizontal_shift == 0


def test_resize_rebuilds_layout_and_redraws():
    orch, _, grid, layout = _make()
    layout.W, layout.H = 40, 20
    assert orch.handle_key(curses.KEY_RESIZE)
    assert layout.resizes == 1
    assert orch.paginator.page_size == 9
    assert grid.draws


def test_no_key_is_ignored():
    orch, _, grid, _ = _make()
    assert orch.handle_key(-1)
    assert grid.draws == []


def test_redraw_from_another_thread():
    orch, state, grid, _ = _make()
    worker = threading.Thread(target=orch.redraw)
    worker.start()
    worker.join(timeout=5)
    assert len(grid.draws) == 1
    assert not state.lock.locked()
