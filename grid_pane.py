# ~/Apps/fastdata/grid_pane.py
import curses


def safe_addnstr(win, y, x, text, n, attr=0):
    if n <= 0:
        return
    try:
        win.addnstr(y, x, text, n, attr)
    except curses.error:
        # writing the bottom-right cell of a window moves the cursor off-screen
        pass


def draw_box(win, rect, title=""):
    if rect is None or rect.h < 2 or rect.w < 2:
        return
    top, left = rect.y, rect.x
    bottom, right = rect.y + rect.h - 1, rect.x + rect.w - 1
    try:
        win.hline(top, left + 1, curses.ACS_HLINE, rect.w - 2)
        win.hline(bottom, left + 1, curses.ACS_HLINE, rect.w - 2)
        win.vline(top + 1, left, curses.ACS_VLINE, rect.h - 2)
        win.vline(top + 1, right, curses.ACS_VLINE, rect.h - 2)
        win.addch(top, left, curses.ACS_ULCORNER)
        win.addch(top, right, curses.ACS_URCORNER)
        win.addch(bottom, left, curses.ACS_LLCORNER)
    except curses.error:
        pass
    try:
        win.addch(bottom, right, curses.ACS_LRCORNER)
    except curses.error:
        pass
    if title:
        safe_addnstr(win, top, left + 1, title, rect.w - 2)


def clip_cell(text, x, width, avail):
    """Clip a cell of ``width`` at relative ``x`` to ``[0, avail)``.

    Returns ``(x, text)`` of the part to paint, or None when nothing shows.
    """
    padded = str(text)[:width].ljust(width)
    if x < 0:
        padded = padded[-x:]
        x = 0
    if x >= avail:
        return None
    padded = padded[: avail - x]
    if not padded:
        return None
    return x, padded


class GridPane:
    PAIR_HEADER = 1
    PAIR_HEADER_ACTIVE = 2
    PAIR_CELL_ACTIVE = 3
    PAIR_CELL_TEXT = 4

    def __init__(self):
        try:
            curses.start_color()
            curses.use_default_colors()
            curses.init_pair(self.PAIR_HEADER, curses.COLOR_YELLOW, -1)
            curses.init_pair(
                self.PAIR_HEADER_ACTIVE, curses.COLOR_YELLOW, curses.COLOR_BLUE
            )
            curses.init_pair(self.PAIR_CELL_ACTIVE, curses.COLOR_BLACK, curses.COLOR_CYAN)
            curses.init_pair(self.PAIR_CELL_TEXT, -1, -1)
        except curses.error:
            pass

    # ---------- grid ----------
    def draw(self, win, rect, grid):
        draw_box(win, rect, grid.title)
        inner = rect.inner()
        if inner.h <= 0 or inner.w <= 0:
            return

        header_attr = curses.color_pair(self.PAIR_HEADER) | curses.A_BOLD | curses.A_UNDERLINE
        header_active = (
            curses.color_pair(self.PAIR_HEADER_ACTIVE) | curses.A_BOLD | curses.A_UNDERLINE
        )
        for cell in grid.header:
            clipped = clip_cell(cell.text, cell.x, cell.width, inner.w)
            if clipped is None:
                continue
            x, text = clipped
            attr = header_active if cell.highlighted else header_attr
            safe_addnstr(win, inner.y, inner.x + x, text, len(text), attr)

        text_attr = curses.color_pair(self.PAIR_CELL_TEXT)
        active_attr = curses.color_pair(self.PAIR_CELL_ACTIVE)
        for line, cells in enumerate(grid.rows, start=1):
            if line >= inner.h:
                break
            for cell in cells:
                clipped = clip_cell(cell.text, cell.x, cell.width, inner.w)
                if clipped is None:
                    continue
                x, text = clipped
                attr = active_attr if cell.highlighted else text_attr
                safe_addnstr(win, inner.y + line, inner.x + x, text, len(text), attr)

    # ---------- aggregation panel ----------
    def draw_panel(self, win, rect, panel):
        if rect is None or panel is None:
            return
        draw_box(win, rect, panel.title)
        inner = rect.inner()
        if inner.h <= 0 or inner.w <= 0:
            return

        def _row(y, values, attr):
            x = 0
            for value, width in zip(values, panel.widths):
                clipped = clip_cell(value, x, width, inner.w)
                if clipped is None:
                    break
                cx, text = clipped
                safe_addnstr(win, y, inner.x + cx, text, len(text), attr)
                x += width + 1

        _row(inner.y, panel.headers, curses.A_BOLD)
        for line, values in enumerate(panel.rows, start=1):
            if line >= inner.h:
                break
            _row(inner.y + line, values, 0)

    def draw_status(self, win, rect, text):
        safe_addnstr(win, rect.y, rect.x, text.ljust(rect.w), rect.w, curses.A_REVERSE)
