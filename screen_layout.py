class Rect:
    def __init__(self, y, x, h, w):
        self.y = y
        self.x = x
        self.h = max(0, h)
        self.w = max(0, w)

    def inner(self):
        """Area inside a one-cell border."""
        return Rect(self.y + 1, self.x + 1, self.h - 2, self.w - 2)

    def __eq__(self, other):
        return isinstance(other, Rect) and (self.y, self.x, self.h, self.w) == (
            other.y,
            other.x,
            other.h,
            other.w,
        )

    def __repr__(self):
        return f"Rect(y={self.y}, x={self.x}, h={self.h}, w={self.w})"


class ScreenLayout:
    POPUP_PERCENT_X = 60
    POPUP_PERCENT_Y = 40

    def __init__(self, H, W, agg_rows=0):
        self.H = H
        self.W = W

        # layout: table box (main), optional aggregation box, status bar (1 line)
        self.status_h = 1
        # borders (2) + header row (1) + one line per aggregated column
        self.agg_h = 3 + agg_rows if agg_rows > 0 else 0

        available = max(0, H - self.status_h)
        self.agg_h = min(self.agg_h, max(0, available - 3))
        self.table_h = max(0, available - self.agg_h)

        self.table_rect = Rect(0, 0, self.table_h, W)
        self.agg_rect = Rect(self.table_h, 0, self.agg_h, W) if self.agg_h else None
        self.status_rect = Rect(self.table_h + self.agg_h, 0, self.status_h, W)
        self.popup_rect = self.centered_rect(
            self.POPUP_PERCENT_X, self.POPUP_PERCENT_Y, Rect(0, 0, H, W)
        )

    @property
    def grid_rect(self):
        return self.table_rect.inner()

    @property
    def grid_width(self) -> int:
        return self.grid_rect.w

    @property
    def body_height(self) -> int:
        # first inner line holds the header
        return max(0, self.grid_rect.h - 1)

    @staticmethod
    def centered_rect(percent_x, percent_y, r):
        h = r.h * percent_y // 100
        w = r.w * percent_x // 100
        y = r.y + (r.h - h) // 2
        x = r.x + (r.w - w) // 2
        return Rect(y, x, h, w)
