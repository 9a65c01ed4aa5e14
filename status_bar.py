import os
import time

from input_modes import mode_label


def status_context(viewer, depth, file_path=None, status_msg=None, status_until=0):
    rows, cols = viewer.table.shape
    return {
        "status_msg": status_msg,
        "status_until": status_until,
        "mode": mode_label(viewer.mode),
        "file_path": file_path,
        "depth": depth,
        "title": viewer.title,
        "shape": (rows, cols),
        "row": viewer.selected_row,
        "col": viewer.selected_column,
    }


def render_status(context, width, now=None):
    """
    context keys: status_msg, status_until, mode, file_path, depth, title,
                   shape, row, col
    """
    now = time.time() if now is None else now
    if context.get("status_msg") and now < context.get("status_until", 0):
        text = f" {context['status_msg']}"
    else:
        mode = context.get("mode", "TABLE")
        fname = context.get("file_path") or ""
        if fname:
            fname = os.path.basename(fname)
        depth = context.get("depth", 1)
        view = context.get("title", "Table")
        if depth > 1:
            view = f"{view} {depth}"
        rows, cols = context.get("shape", (0, 0))
        if rows and cols:
            pos = f"r{context.get('row', 0) + 1}/{rows} c{context.get('col', 0) + 1}/{cols}"
        else:
            pos = "empty"
        text = f" {mode} | {fname} | {view} | ({rows}, {cols}) | {pos}"

    return text.ljust(width)[:width]
