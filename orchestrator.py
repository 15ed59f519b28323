import curses
import time

from app_state import EditRow, EditTable, Select
from editor_controller import EditorController
from grid_pane import GridPane
from key_bindings import command_for_key
from row_editor_pane import RowEditorPane
from screen_layout import ScreenLayout
from status_bar import render_status
from table_list_pane import TableListPane


class Orchestrator:
    def __init__(self, stdscr, store, sample_limit=100):
        self.stdscr = stdscr
        curses.curs_set(0)
        curses.raw()
        self.stdscr.keypad(True)
        self.stdscr.nodelay(False)
        self.stdscr.timeout(100)

        self.layout = ScreenLayout(stdscr)
        self.list_pane = TableListPane()
        self.grid = GridPane()
        self.row_pane = RowEditorPane()

        # ---- status ----
        self.status_msg = None
        self.status_msg_until = 0

        self.controller = EditorController(store, self._set_status, sample_limit)

    def _set_status(self, msg, seconds=3):
        self.status_msg = msg
        self.status_msg_until = time.time() + seconds

    # ---------------- UI ----------------

    def redraw(self):
        state = self.controller.state
        win = self.layout.main_win
        table = self.controller.current_table()

        if isinstance(state, Select):
            self.list_pane.draw(
                win, self.controller.store.table_names(), self.controller.list_index
            )
        elif isinstance(state, EditTable):
            self.grid.draw(win, table)
        elif isinstance(state, EditRow) and self.controller.row_editor is not None:
            self.row_pane.draw(win, table.header(), self.controller.row_editor, table.cursor)

        context = {
            "status_msg": self.status_msg,
            "status_until": self.status_msg_until,
            "state": state,
            "table_name": table.name if table is not None else None,
            "row_count": table.row_count if table is not None else 0,
            "cursor": table.cursor if table is not None else None,
        }
        sw = self.layout.status_win
        sw.erase()
        _, w = sw.getmaxyx()
        try:
            sw.addnstr(0, 0, render_status(context, w), max(1, w - 1), curses.A_REVERSE)
        except curses.error:
            pass
        sw.refresh()

        try:
            curses.curs_set(1 if isinstance(state, EditRow) else 0)
        except curses.error:
            pass
        if isinstance(state, EditRow):
            win.refresh()

    # ---------------- main loop ----------------

    def run(self):
        self.stdscr.clear()
        self.stdscr.refresh()
        self.controller.tick()
        self.redraw()

        while not self.controller.done:
            ch = self.stdscr.getch()

            if ch == -1:
                self.redraw()
                continue

            if ch == 3:  # Ctrl+C
                break

            if ch == curses.KEY_RESIZE:
                self.layout = ScreenLayout(self.stdscr)
                self.redraw()
                continue

            command = command_for_key(ch, self.controller.state)
            self.controller.handle(command, ch)
            self.redraw()
