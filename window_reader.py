import csv
import io
import logging
import sys
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)

WIDTH_MODES = ("per_column", "uniform")

_CONTROL_TO_SPACE = str.maketrans({"\r": " ", "\n": " ", "\t": " "})

# upper bound on bytes read per window; an unterminated quote ends here
MAX_WINDOW_BYTES = 16 * 1024 * 1024


def _lift_field_size_limit():
    limit = sys.maxsize
    while True:
        try:
            csv.field_size_limit(limit)
            return limit
        except OverflowError:
            limit //= 10


class ColumnMetrics:
    """Running maxima of field count and field width for one window."""

    def __init__(self, mode: str = "per_column"):
        if mode not in WIDTH_MODES:
            raise ValueError(f"Unknown column width mode: {mode}")
        self.mode = mode
        self.max_field_count = 0
        self.max_width = 0
        self.column_widths: list[int] = []

    def observe(self, record):
        self.max_field_count = max(self.max_field_count, len(record))
        for idx, value in enumerate(record):
            n = len(value)
            self.max_width = max(self.max_width, n)
            if idx >= len(self.column_widths):
                self.column_widths.append(n)
            elif n > self.column_widths[idx]:
                self.column_widths[idx] = n

    def widths(self) -> list[int]:
        if self.mode == "uniform":
            return [self.max_width] * self.max_field_count
        return list(self.column_widths)


@dataclass
class Window:
    records: list[list[str]] = field(default_factory=list)
    lines_read: int = 0
    metrics: ColumnMetrics = field(default_factory=ColumnMetrics)


class WindowReader:
    def __init__(
        self,
        fh,
        delimiter: str,
        encoding: str = "utf-8",
        width_mode: str = "per_column",
        max_window_bytes: int = MAX_WINDOW_BYTES,
    ):
        if not delimiter or len(delimiter) != 1:
            raise ValueError("Delimiter must be a single character")
        if width_mode not in WIDTH_MODES:
            raise ValueError(f"Unknown column width mode: {width_mode}")
        self.fh = fh
        self.delimiter = delimiter
        self.encoding = encoding
        self.width_mode = width_mode
        self.max_window_bytes = max(1, max_window_bytes)
        _lift_field_size_limit()

    def _text_lines(self, offset: int):
        self.fh.seek(offset, io.SEEK_SET)
        budget = self.max_window_bytes
        while budget > 0:
            raw = self.fh.readline(budget)
            if not raw:
                return
            budget -= len(raw)
            yield raw.decode(self.encoding, errors="replace")

    def _parser(self, offset: int):
        return csv.reader(
            self._text_lines(offset),
            delimiter=self.delimiter,
            quotechar='"',
            doublequote=True,
            skipinitialspace=False,
            strict=False,
        )

    def read_window(self, offset: int, max_lines: int) -> Window:
        """Parse up to ``max_lines`` records starting at byte ``offset``.

        The handle's position is restored before returning, so measuring a
        window never moves whatever the caller considers current.
        """
        window = Window(metrics=ColumnMetrics(self.width_mode))
        if max_lines <= 0:
            return window

        saved = self.fh.tell()
        try:
            for row in self._parser(max(0, offset)):
                if not row:
                    continue
                record = [value.translate(_CONTROL_TO_SPACE) for value in row]
                window.metrics.observe(record)
                window.records.append(record)
                window.lines_read += 1
                if window.lines_read >= max_lines:
                    break
        finally:
            self.fh.seek(saved, io.SEEK_SET)

        logger.debug(
            "read %d/%d records at offset %d (fields=%d)",
            window.lines_read,
            max_lines,
            offset,
            window.metrics.max_field_count,
        )
        return window
