class Paginator:
    # one data row plus the border under it
    LINES_PER_RECORD = 2

    def __init__(self, height: int = 0):
        self.height = max(0, height)

    def update_height(self, height: int):
        self.height = max(0, height)

    @property
    def page_size(self) -> int:
        # records the table can show under its header row
        return max(0, (self.height - 1) // self.LINES_PER_RECORD)

    @property
    def half_page(self) -> int:
        return self.page_size // 2
