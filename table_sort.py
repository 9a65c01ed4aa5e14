import logging
from functools import cmp_to_key

from cell_coercion import compare_cells

log = logging.getLogger(__name__)


def sorted_row_order(table, col_idx: int, ascending: bool = True) -> list[int]:
    values = table.column(col_idx)
    key = cmp_to_key(lambda i, j: compare_cells(values[i], values[j]))
    # reverse=True keeps equal cells in their original relative order
    return sorted(range(len(values)), key=key, reverse=not ascending)


def sort_table(table, col_idx: int, ascending: bool = True):
    """Reorder all rows of ``table`` in place by the cells of one column.

    Cells that both parse as floats compare numerically, any other pair
    compares as strings. The sort is stable in both directions.
    """
    if table.column_count == 0 or not (0 <= col_idx < table.column_count):
        return table
    order = sorted_row_order(table, col_idx, ascending)
    table.reorder_rows(order)
    log.debug(
        "sorted %d rows by column %d (%s)",
        table.row_count,
        col_idx,
        "ascending" if ascending else "descending",
    )
    return table
