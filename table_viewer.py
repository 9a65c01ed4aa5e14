# ~/Apps/fastdata/table_viewer.py
import curses
import logging

from aggregations import ALL_FUNCTIONS, toggle_selection
from column_widths import (
    DEFAULT_FIXED_WIDTH,
    column_width,
    default_policies,
    toggle_policy,
)
from input_modes import ChordPending, Normal, PopupOpen
from navigation import NavigationController
from table_data import Table
from table_sort import sort_table

log = logging.getLogger(__name__)

KEY_ENTER_CODES = (10, 13, curses.KEY_ENTER)
KEY_ESC = 27
KEY_SPACE = ord(" ")

CHORD_PREFIX = ord("g")
CHORD_CLEAR_AGGREGATIONS = ord("-")
CHORD_TOGGLE_ALL_WIDTHS = ord("_")
KEY_TOGGLE_WIDTH = ord("_")
KEY_SORT_ASC = ord("[")
KEY_SORT_DESC = ord("]")
KEY_QUIT = ord("q")

# handle_key results the caller acts on
OPEN_DETAIL = "detail"
QUIT = "quit"


class TableViewer:
    """One interactive view over a table: selection, widths, aggregations and input mode."""

    def __init__(
        self,
        table,
        title="Table",
        set_status_cb=None,
        fixed_width=DEFAULT_FIXED_WIDTH,
    ):
        self.table = table
        self.title = title
        self.set_status = set_status_cb or (lambda *_: None)
        self.fixed_width = fixed_width

        self.column_widths = default_policies(table.column_count, fixed_width)
        self.nav = NavigationController(table, self.get_col_width)
        self.mode = Normal()
        # column index -> set of AggregationFunction, never an empty set
        self.selected_aggregations = {}

    # ---------- state accessors ----------
    @property
    def selected_row(self) -> int:
        return self.nav.curr_row

    @property
    def selected_column(self) -> int:
        return self.nav.curr_col

    def get_col_width(self, col_idx: int) -> int:
        return column_width(self.table, col_idx, self.column_widths[col_idx])

    def col_widths(self) -> list[int]:
        return [self.get_col_width(i) for i in range(self.table.column_count)]

    # ---------- actions ----------
    def sort(self, ascending: bool):
        if self.table.column_count == 0:
            return
        col = self.selected_column
        sort_table(self.table, col, ascending)
        self.nav.reset_row()
        direction = "ascending" if ascending else "descending"
        self.set_status(f"Sorted '{self.table.headers[col]}' {direction}", 2)

    def toggle_column_width(self):
        if self.table.column_count == 0:
            return
        col = self.selected_column
        self.column_widths[col] = toggle_policy(self.column_widths[col], self.fixed_width)
        self.nav.adjust_horizontal_offset()

    def toggle_all_widths(self):
        self.column_widths = [
            toggle_policy(policy, self.fixed_width) for policy in self.column_widths
        ]
        self.nav.adjust_horizontal_offset()
        self.set_status("Toggled width mode for all columns", 2)

    def clear_aggregations(self):
        self.selected_aggregations.clear()
        self.set_status("Cleared aggregations", 2)

    def toggle_aggregation(self, func) -> bool:
        return toggle_selection(self.selected_aggregations, self.selected_column, func)

    def is_aggregation_selected(self, func, col_idx=None) -> bool:
        col = self.selected_column if col_idx is None else col_idx
        return func in self.selected_aggregations.get(col, ())

    def detail_table(self):
        if self.table.row_count == 0:
            return None
        row = self.selected_row
        return Table(["Field", "Value"], [self.table.headers, self.table.row(row)])

    def open_detail_view(self):
        """Build a fresh viewer projecting the selected row, or None if there are no rows."""
        detail = self.detail_table()
        if detail is None:
            return None
        return TableViewer(
            detail,
            title="Detail",
            set_status_cb=self.set_status,
            fixed_width=self.fixed_width,
        )

    # ---------- input ----------
    def handle_key(self, ch):
        """Apply one key event; ``None`` or -1 means no key arrived this poll.

        Returns OPEN_DETAIL or QUIT when the view stack must act, else None.
        """
        if isinstance(self.mode, PopupOpen):
            self._handle_popup_key(ch)
            return None

        if isinstance(self.mode, ChordPending):
            self.mode = Normal()
            if ch == CHORD_CLEAR_AGGREGATIONS:
                self.clear_aggregations()
            elif ch == CHORD_TOGGLE_ALL_WIDTHS:
                self.toggle_all_widths()
            return None

        if ch is None or ch == -1:
            return None

        if ch == CHORD_PREFIX:
            self.mode = ChordPending(chr(CHORD_PREFIX))
        elif ch == KEY_TOGGLE_WIDTH:
            self.toggle_column_width()
        elif ch in (curses.KEY_UP, ord("k")):
            self.nav.move_up()
        elif ch in (curses.KEY_DOWN, ord("j")):
            self.nav.move_down()
        elif ch in (curses.KEY_LEFT, ord("h")):
            self.nav.move_left()
        elif ch in (curses.KEY_RIGHT, ord("l")):
            self.nav.move_right()
        elif ch == KEY_SORT_ASC:
            self.sort(ascending=True)
        elif ch == KEY_SORT_DESC:
            self.sort(ascending=False)
        elif ch == KEY_SPACE:
            if self.table.column_count:
                self.mode = PopupOpen(0)
        elif ch in KEY_ENTER_CODES:
            return OPEN_DETAIL
        elif ch == KEY_QUIT:
            return QUIT
        return None

    def _handle_popup_key(self, ch):
        if ch is None or ch == -1:
            return
        cursor = self.mode.cursor
        count = len(ALL_FUNCTIONS)
        if ch in (curses.KEY_UP, ord("k")):
            self.mode = PopupOpen((cursor - 1) % count)
        elif ch in (curses.KEY_DOWN, ord("j")):
            self.mode = PopupOpen((cursor + 1) % count)
        elif ch == KEY_SPACE:
            func = ALL_FUNCTIONS[cursor]
            selected = self.toggle_aggregation(func)
            log.debug(
                "column %d %s %s", self.selected_column,
                "selected" if selected else "deselected", func.label,
            )
        elif ch in KEY_ENTER_CODES or ch in (KEY_QUIT, KEY_ESC):
            self.mode = Normal()
