import curses

from aggregations import AggregationFunction
from frame_builder import build_frame, visible_columns
from screen_layout import ScreenLayout
from table_data import Table
from table_viewer import TableViewer


def _viewer(rows=3):
    table = Table(
        ["a", "b", "c"],
        [
            [f"a{i}" for i in range(rows)],
            [str(i) for i in range(rows)],
            [f"c{i}" for i in range(rows)],
        ],
    )
    return TableViewer(table)


def _frame(viewer, H=24, W=40):
    layout = ScreenLayout(H, W, agg_rows=len(viewer.selected_aggregations))
    viewer.nav.set_viewport(layout.grid_width, layout.body_height)
    return build_frame(viewer, layout, status="status")


def test_header_and_single_highlighted_cell():
    viewer = _viewer()
    viewer.handle_key(curses.KEY_DOWN)
    frame = _frame(viewer)

    assert [(c.text, c.x, c.width) for c in frame.grid.header] == [
        ("a", 0, 15),
        ("b", 16, 15),
        ("c", 32, 15),
    ]
    assert [c.highlighted for c in frame.grid.header] == [True, False, False]

    highlighted = [
        (r, cell.text)
        for r, cells in zip(frame.grid.row_indices, frame.grid.rows)
        for cell in cells
        if cell.highlighted
    ]
    assert highlighted == [(1, "a1")]
    assert frame.panel is None
    assert frame.popup is None
    assert frame.status == "status"


def test_horizontal_offset_shifts_columns():
    viewer = _viewer()
    _frame(viewer)
    viewer.handle_key(curses.KEY_RIGHT)
    viewer.handle_key(curses.KEY_RIGHT)
    frame = _frame(viewer)

    # grid is 38 wide; column c spans [32, 47)
    assert frame.grid.col_offset == 9
    assert [(c.text, c.x) for c in frame.grid.header] == [("a", -9), ("b", 7), ("c", 23)]
    assert frame.grid.header[2].highlighted


def test_columns_outside_viewport_are_skipped():
    viewer = _viewer()
    _frame(viewer, W=20)
    cols = visible_columns(viewer, 18)
    assert [c[0] for c in cols] == [0, 1]


def test_body_rows_follow_selection():
    viewer = _viewer(rows=50)
    frame = _frame(viewer, H=10)
    # 10 lines: status 1, borders 2, header 1
    assert frame.grid.row_indices == list(range(6))
    for _ in range(8):
        viewer.handle_key(curses.KEY_DOWN)
    frame = _frame(viewer, H=10)
    assert frame.grid.row_indices == list(range(3, 9))


def test_panel_lists_selected_functions():
    viewer = _viewer()
    viewer.toggle_aggregation(AggregationFunction.COUNT)
    viewer.handle_key(curses.KEY_RIGHT)
    viewer.toggle_aggregation(AggregationFunction.SUM)
    frame = _frame(viewer)

    assert frame.panel.headers == ["Column", "Count", "Sum"]
    assert frame.panel.rows == [["a", "3", "-"], ["b", "-", "3"]]
    assert frame.panel.title == "Aggregations"


def test_popup_items_show_checkboxes():
    viewer = _viewer()
    viewer.toggle_aggregation(AggregationFunction.UNIQUE_COUNT)
    viewer.handle_key(ord(" "))
    viewer.handle_key(curses.KEY_DOWN)
    frame = _frame(viewer)

    assert frame.popup.items == ["[ ] Count", "[x] UniqueCount", "[ ] Sum"]
    assert frame.popup.cursor == 1
    assert frame.popup.title == "Select aggregation functions (q to quit)"


def test_empty_table_frame():
    viewer = TableViewer(Table(["a"], [[]]))
    frame = _frame(viewer)
    assert len(frame.grid.header) == 1
    assert frame.grid.rows == []
