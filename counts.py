class PendingCount:
    """Numeric prefix typed before a directional key (``12j``)."""

    def __init__(self):
        self.value = None

    @property
    def active(self) -> bool:
        return self.value is not None

    def reset(self):
        self.value = None

    def push_digit(self, digit: int):
        if digit < 0 or digit > 9:
            return
        if self.value is None:
            self.value = digit
        else:
            self.value = self.value * 10 + digit

    def consume(self, default: int = 0) -> int:
        count = self.value if self.value is not None else default
        self.value = None
        return max(0, count)

    def text(self) -> str:
        return "" if self.value is None else str(self.value)
