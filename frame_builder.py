from dataclasses import dataclass, field

from aggregations import ALL_FUNCTIONS, aggregation_rows
from input_modes import PopupOpen

POPUP_TITLE = "Select aggregation functions (q to quit)"
AGG_TITLE = "Aggregations"
AGG_NAME_WIDTH = 15
AGG_VALUE_WIDTH = 15


@dataclass
class GridCell:
    text: str
    x: int  # relative to the grid's left edge after horizontal scroll; may be negative
    width: int
    highlighted: bool = False


@dataclass
class GridFrame:
    title: str
    header: list[GridCell] = field(default_factory=list)
    rows: list[list[GridCell]] = field(default_factory=list)
    row_indices: list[int] = field(default_factory=list)
    col_offset: int = 0


@dataclass
class AggregationPanel:
    headers: list[str]
    rows: list[list[str]]
    widths: list[int]
    title: str = AGG_TITLE


@dataclass
class PopupFrame:
    items: list[str]
    cursor: int
    title: str = POPUP_TITLE


@dataclass
class Frame:
    grid: GridFrame
    panel: AggregationPanel | None = None
    popup: PopupFrame | None = None
    status: str = ""


def visible_columns(viewer, view_width):
    """Columns whose span overlaps the scrolled viewport, with their x and width."""
    nav = viewer.nav
    out = []
    x = 0
    for col_idx, width in enumerate(viewer.col_widths()):
        rel = x - nav.col_offset
        if rel + width > 0 and rel < view_width:
            out.append((col_idx, rel, width))
        x += width + nav.SEPARATOR
    return out


def build_grid(viewer, view_width, body_height) -> GridFrame:
    nav = viewer.nav
    table = viewer.table
    cols = visible_columns(viewer, view_width)
    headers = table.headers

    grid = GridFrame(title=viewer.title, col_offset=nav.col_offset)
    for col_idx, x, width in cols:
        grid.header.append(
            GridCell(headers[col_idx], x, width, col_idx == viewer.selected_column)
        )

    start = min(nav.row_offset, max(0, table.row_count - 1))
    end = min(table.row_count, start + max(0, body_height))
    for r in range(start, end):
        cells = []
        for col_idx, x, width in cols:
            active = r == viewer.selected_row and col_idx == viewer.selected_column
            cells.append(GridCell(table.cell(r, col_idx), x, width, active))
        grid.rows.append(cells)
        grid.row_indices.append(r)
    return grid


def build_panel(viewer):
    if not viewer.selected_aggregations:
        return None
    funcs, rows = aggregation_rows(viewer.table, viewer.selected_aggregations)
    if not rows:
        return None
    headers = ["Column"] + [f.label for f in funcs]
    widths = [AGG_NAME_WIDTH] + [AGG_VALUE_WIDTH] * len(funcs)
    return AggregationPanel(
        headers=headers,
        rows=[[name] + cells for name, cells in rows],
        widths=widths,
    )


def build_popup(viewer):
    if not isinstance(viewer.mode, PopupOpen):
        return None
    items = []
    for func in ALL_FUNCTIONS:
        checkbox = "[x]" if viewer.is_aggregation_selected(func) else "[ ]"
        items.append(f"{checkbox} {func.label}")
    return PopupFrame(items=items, cursor=viewer.mode.cursor)


def build_frame(viewer, layout, status="") -> Frame:
    return Frame(
        grid=build_grid(viewer, layout.grid_width, layout.body_height),
        panel=build_panel(viewer),
        popup=build_popup(viewer),
        status=status,
    )
