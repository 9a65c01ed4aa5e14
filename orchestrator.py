# ~/Apps/fastdata/orchestrator.py
import curses
import logging
import time

from column_widths import DEFAULT_FIXED_WIDTH
from frame_builder import build_frame
from grid_pane import GridPane
from overlay import OverlayView
from screen_layout import ScreenLayout
from status_bar import render_status, status_context
from table_viewer import TableViewer
from view_stack import ViewStack

log = logging.getLogger(__name__)


class Orchestrator:
    """Runs the poll / dispatch / render loop until the view stack is empty."""

    def __init__(self, stdscr, table, file_path=None, config=None):
        self.stdscr = stdscr
        self.file_path = file_path
        self.config = config or {}
        self.poll_timeout_ms = self.config.get("POLL_TIMEOUT_MS", 100)

        try:
            curses.curs_set(0)
        except curses.error:
            pass
        self.stdscr.keypad(True)
        self.stdscr.timeout(self.poll_timeout_ms)

        self.grid = GridPane()
        self.overlay = OverlayView()

        # ---- status ----
        self.status_msg = None
        self.status_msg_until = 0

        root = TableViewer(
            table,
            set_status_cb=self._set_status,
            fixed_width=self.config.get("FIXED_COLUMN_WIDTH", DEFAULT_FIXED_WIDTH),
        )
        self.views = ViewStack(root)

    # ---------------- helpers ----------------

    def _set_status(self, msg, seconds=3):
        self.status_msg = msg
        self.status_msg_until = time.time() + seconds

    # ---------------- UI ----------------

    def redraw(self):
        viewer = self.views.active
        if viewer is None:
            return

        H, W = self.stdscr.getmaxyx()
        layout = ScreenLayout(H, W, agg_rows=len(viewer.selected_aggregations))
        viewer.nav.set_viewport(layout.grid_width, layout.body_height)

        context = status_context(
            viewer,
            self.views.depth,
            file_path=self.file_path,
            status_msg=self.status_msg,
            status_until=self.status_msg_until,
        )
        frame = build_frame(viewer, layout, render_status(context, W))

        self.stdscr.erase()
        self.grid.draw(self.stdscr, layout.table_rect, frame.grid)
        self.grid.draw_panel(self.stdscr, layout.agg_rect, frame.panel)
        self.grid.draw_status(self.stdscr, layout.status_rect, frame.status)
        if frame.popup is not None:
            self.overlay.draw(self.stdscr, layout.popup_rect, frame.popup)
        self.stdscr.refresh()

    # ---------------- main loop ----------------

    def run(self):
        self.stdscr.clear()
        self.redraw()

        while self.views:
            ch = self.stdscr.getch()

            if ch == curses.KEY_RESIZE:
                curses.update_lines_cols()
                # a resize is not a key: drop any pending chord
                self.views.active.handle_key(None)
            else:
                self.views.dispatch(ch)

            if not self.views:
                break
            self.redraw()

        log.info("view stack empty, leaving")
