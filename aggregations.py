import logging
from enum import Enum

from cell_coercion import format_number, parse_float

log = logging.getLogger(__name__)

PLACEHOLDER = "-"


class AggregationFunction(Enum):
    COUNT = "Count"
    UNIQUE_COUNT = "UniqueCount"
    SUM = "Sum"

    @property
    def label(self) -> str:
        return self.value

    @property
    def order(self) -> int:
        return ALL_FUNCTIONS.index(self)


ALL_FUNCTIONS = list(AggregationFunction)


def aggregate(table, col_idx: int, func: AggregationFunction) -> str | None:
    """Compute one aggregation over a column.

    Returns None when the function does not apply to the column's data.
    """
    if func is AggregationFunction.COUNT:
        return str(table.row_count)

    if func is AggregationFunction.UNIQUE_COUNT:
        if table.row_count == 0:
            return "0"
        return str(int(table.df.iloc[:, col_idx].nunique(dropna=False)))

    if func is AggregationFunction.SUM:
        values = []
        for cell in table.column(col_idx):
            num = parse_float(cell)
            if num is None:
                return None
            values.append(num)
        if not values:
            return None
        return format_number(sum(values))

    return None


def toggle_selection(selections: dict, col_idx: int, func: AggregationFunction) -> bool:
    """Flip ``func`` for a column; returns True when it is now selected.

    A column whose last function is removed is dropped from the map.
    """
    selected = selections.get(col_idx)
    if selected is not None and func in selected:
        selected.discard(func)
        if not selected:
            del selections[col_idx]
        return False
    selections.setdefault(col_idx, set()).add(func)
    return True


def selected_functions(selections: dict) -> list[AggregationFunction]:
    union = set()
    for funcs in selections.values():
        union.update(funcs)
    return sorted(union, key=lambda f: f.order)


def calculate_aggregations(table, selections: dict):
    """Evaluate every selected function.

    Returns ``{col_idx: {func: result}}`` for columns with a selection.
    """
    results = {}
    for col_idx, funcs in selections.items():
        if not funcs or col_idx >= table.column_count:
            continue
        results[col_idx] = {func: aggregate(table, col_idx, func) for func in funcs}
    return results


def aggregation_rows(table, selections: dict):
    """Panel rows as ``(column name, [cell per selected function])``."""
    funcs = selected_functions(selections)
    results = calculate_aggregations(table, selections)
    rows = []
    for col_idx in sorted(results):
        col_results = results[col_idx]
        cells = []
        for func in funcs:
            value = col_results.get(func)
            cells.append(PLACEHOLDER if value is None else value)
        rows.append((table.headers[col_idx], cells))
    return funcs, rows
