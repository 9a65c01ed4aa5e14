import curses

from grid_pane import safe_addnstr, draw_box


class OverlayView:
    """Modal popup listing the aggregation functions with checkboxes."""

    PAIR_POPUP = 5
    PAIR_POPUP_CURSOR = 6
    CURSOR_SYMBOL = ">> "

    def __init__(self):
        try:
            curses.init_pair(self.PAIR_POPUP, curses.COLOR_WHITE, curses.COLOR_BLACK)
            curses.init_pair(
                self.PAIR_POPUP_CURSOR, curses.COLOR_YELLOW, curses.COLOR_BLUE
            )
        except curses.error:
            pass

    def draw(self, win, rect, popup):
        if popup is None or rect.h < 3 or rect.w < 4:
            return

        base = curses.color_pair(self.PAIR_POPUP)
        blank = " " * rect.w
        for row in range(rect.h):
            safe_addnstr(win, rect.y + row, rect.x, blank, rect.w, base)
        draw_box(win, rect, popup.title)

        inner = rect.inner()
        list_h = len(popup.items)
        # vertically centre the list inside the box
        top = inner.y + max(0, (inner.h - list_h) // 2)
        pad = " " * len(self.CURSOR_SYMBOL)
        for idx, item in enumerate(popup.items):
            y = top + idx
            if y >= inner.y + inner.h:
                break
            if idx == popup.cursor:
                text = f"{self.CURSOR_SYMBOL}{item}"
                attr = curses.color_pair(self.PAIR_POPUP_CURSOR)
            else:
                text = f"{pad}{item}"
                attr = base
            safe_addnstr(win, y, inner.x, text, inner.w, attr)
