class NavigationController:
    """Selected cell plus the scroll offsets that keep it on screen.

    ``width_of(col_idx)`` gives the rendered width of a column; columns are
    separated by one unit when laid out horizontally.
    """

    SEPARATOR = 1

    def __init__(self, table, width_of):
        self.table = table
        self.width_of = width_of
        self.curr_row = 0
        self.curr_col = 0
        self.col_offset = 0
        self.row_offset = 0
        self.view_width = 0
        self.view_height = 0

    # ---------- geometry ----------
    def col_start(self, col_idx: int) -> int:
        return sum(self.width_of(i) + self.SEPARATOR for i in range(col_idx))

    def col_span(self, col_idx: int) -> tuple[int, int]:
        return self.col_start(col_idx), self.width_of(col_idx)

    def adjust_horizontal_offset(self):
        if self.table.column_count == 0:
            self.col_offset = 0
            return
        start, width = self.col_span(self.curr_col)
        if start < self.col_offset:
            self.col_offset = start
        elif start + width > self.col_offset + self.view_width:
            self.col_offset = start + width - self.view_width

    def ensure_row_visible(self):
        if self.view_height <= 0:
            return
        if self.curr_row < self.row_offset:
            self.row_offset = self.curr_row
        elif self.curr_row >= self.row_offset + self.view_height:
            self.row_offset = self.curr_row - self.view_height + 1
        self.row_offset = max(0, self.row_offset)

    def set_viewport(self, width: int, height: int):
        width = max(0, width)
        height = max(0, height)
        width_changed = width != self.view_width
        self.view_width = width
        self.view_height = height
        if width_changed:
            self.adjust_horizontal_offset()
        self.ensure_row_visible()

    # ---------- moves ----------
    def move_up(self):
        if self.curr_row > 0:
            self.curr_row -= 1
        self.ensure_row_visible()

    def move_down(self):
        if self.curr_row < self.table.row_count - 1:
            self.curr_row += 1
        self.ensure_row_visible()

    def move_left(self):
        if self.curr_col > 0:
            self.curr_col -= 1
            self.adjust_horizontal_offset()

    def move_right(self):
        if self.curr_col < self.table.column_count - 1:
            self.curr_col += 1
            self.adjust_horizontal_offset()

    def reset_row(self):
        self.curr_row = 0
        self.row_offset = 0
