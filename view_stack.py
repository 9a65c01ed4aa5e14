import logging

from table_viewer import OPEN_DETAIL, QUIT

log = logging.getLogger(__name__)


class ViewStack:
    """Viewers in open order; the last one is live."""

    def __init__(self, root=None):
        self.viewers = []
        if root is not None:
            self.push(root)

    def __len__(self):
        return len(self.viewers)

    def __bool__(self):
        return bool(self.viewers)

    @property
    def active(self):
        return self.viewers[-1] if self.viewers else None

    @property
    def depth(self) -> int:
        return len(self.viewers)

    def push(self, viewer):
        self.viewers.append(viewer)
        return viewer

    def push_detail(self):
        """Open a detail view on the active viewer's selected row.

        Returns the new viewer, or None when there was nothing to project.
        """
        parent = self.active
        if parent is None:
            return None
        detail = parent.open_detail_view()
        if detail is None:
            parent.set_status("No rows to show", 2)
            return None
        log.debug("opened detail view for row %d at depth %d", parent.selected_row, self.depth + 1)
        return self.push(detail)

    def pop_current(self):
        if not self.viewers:
            return None
        viewer = self.viewers.pop()
        log.debug("closed view, %d left", len(self.viewers))
        return viewer

    def dispatch(self, ch):
        """Feed one key to the active viewer and apply any stack signal."""
        viewer = self.active
        if viewer is None:
            return None
        result = viewer.handle_key(ch)
        if result == OPEN_DETAIL:
            self.push_detail()
        elif result == QUIT:
            self.pop_current()
        return result
