import threading


class AppState:
    """Mutable session state for one open file.

    Every read or write goes through ``lock``; the orchestrator holds it for
    the whole mutate, read and render sequence of a command.
    """

    def __init__(self, file_path, delimiter=",", encoding="utf-8", width_mode="per_column"):
        self.file_path = file_path
        self.delimiter = delimiter
        self.encoding = encoding
        self.width_mode = width_mode

        self.lock = threading.Lock()

        # always the start of a logical line (0 or just past a newline)
        self.cursor_offset = 0
        self.horizontal_shift = 0

        # metrics of the window currently on screen
        self.max_field_count = 0
        self.column_widths: list[int] = []

        self.lines_read = 0
        self.printable_lines: list[str] = []

    def apply_window(self, window):
        self.lines_read = window.lines_read
        self.max_field_count = window.metrics.max_field_count
        self.column_widths = window.metrics.widths()
