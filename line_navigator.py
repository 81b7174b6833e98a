import io
from enum import Enum


NEWLINE = 0x0A


class ScanPhase(Enum):
    # newline bytes directly behind the cursor (the current line's terminator)
    SKIP_TERMINATOR = 0
    # bytes of the previous line, until the newline that precedes it
    SCAN_LINE = 1


class LineNavigator:
    """Moves a byte offset between logical line starts by scanning raw bytes.

    The handle must be binary and seekable. Every read is an absolute seek
    followed by a bounded read, so callers never depend on the handle's
    implicit position.
    """

    BLOCK_SIZE = 4096

    def __init__(self, fh, block_size: int | None = None):
        self.fh = fh
        self.block_size = max(1, block_size or self.BLOCK_SIZE)

    def size(self) -> int:
        return self.fh.seek(0, io.SEEK_END)

    def _read_at(self, offset: int, length: int) -> bytes:
        self.fh.seek(offset, io.SEEK_SET)
        return self.fh.read(length)

    def _clamp(self, offset: int) -> tuple[int, int]:
        end = self.size()
        return max(0, min(offset, end)), end

    def previous_line_start(self, offset: int) -> int:
        pos, _ = self._clamp(offset)
        if pos <= 0:
            return 0

        phase = ScanPhase.SKIP_TERMINATOR
        while pos > 0:
            start = max(0, pos - self.block_size)
            block = self._read_at(start, pos - start)
            for i in range(len(block) - 1, -1, -1):
                b = block[i]
                if phase is ScanPhase.SKIP_TERMINATOR:
                    if b != NEWLINE:
                        phase = ScanPhase.SCAN_LINE
                elif b == NEWLINE:
                    return start + i + 1
            pos = start
        return 0

    def next_line_start(self, offset: int) -> int:
        pos, end = self._clamp(offset)
        seen_newline = False
        while pos < end:
            block = self._read_at(pos, min(self.block_size, end - pos))
            if not block:
                # file shrank underneath us; treat as end of file
                break
            for i, b in enumerate(block):
                if b == NEWLINE:
                    seen_newline = True
                elif seen_newline:
                    return pos + i
            pos += len(block)
        return end

    def step_forward(self, offset: int, n: int) -> int:
        for _ in range(max(0, n)):
            nxt = self.next_line_start(offset)
            if nxt == offset:
                break
            offset = nxt
        return offset

    def step_backward(self, offset: int, n: int) -> int:
        for _ in range(max(0, n)):
            prev = self.previous_line_start(offset)
            if prev == offset:
                break
            offset = prev
        return offset
