from typing import Callable, Optional

from app_state import EditorState, EditRow, EditTable, Quit, Select, Start
from data_table import DEFAULT_SAMPLE_LIMIT
from key_bindings import Command
from row_edit_buffer import RowEditBuffer


class EditorController:
    """Screen state machine: select table -> edit table -> edit row.

    ``handle`` takes one command (or a raw key while a row is open),
    applies it to the store or the table of the current state and moves
    to the next state.
    """

    def __init__(
        self,
        store,
        set_status_cb: Optional[Callable[[str, float], None]] = None,
        sample_limit: Optional[int] = DEFAULT_SAMPLE_LIMIT,
    ):
        self.store = store
        self._set_status = set_status_cb or (lambda *_: None)
        self.sample_limit = sample_limit

        self.state: EditorState = Start()
        self.list_index = 0
        self.row_editor: Optional[RowEditBuffer] = None

    @property
    def done(self) -> bool:
        return isinstance(self.state, Quit)

    def current_table(self):
        if isinstance(self.state, (EditTable, EditRow)):
            return self.store.get_table(self.state.table)
        return None

    def highlighted_table(self) -> Optional[str]:
        names = self.store.table_names()
        if not names:
            return None
        return names[self.list_index % len(names)]

    # ---------- transitions ----------
    def _enter_select(self, last_table: Optional[str]):
        names = self.store.table_names()
        self.list_index = names.index(last_table) if last_table in names else 0
        self.row_editor = None
        self.state = Select(last_table)

    def _enter_edit_table(self, name: str):
        self.row_editor = None
        self.state = EditTable(name)

    def _enter_edit_row(self, name: str, table):
        self.row_editor = RowEditBuffer(table.row(table.cursor))
        self.state = EditRow(name)

    def tick(self) -> EditorState:
        if isinstance(self.state, Start):
            self._enter_select(None)
        return self.state

    def handle(self, command: Optional[Command], ch: Optional[int] = None) -> EditorState:
        state = self.state
        if isinstance(state, Start):
            return self.tick()
        if isinstance(state, Select):
            self._handle_select(command)
        elif isinstance(state, EditTable):
            self._handle_edit_table(state.table, command)
        elif isinstance(state, EditRow):
            self._handle_edit_row(state.table, command, ch)
        return self.state

    # ---------- select screen ----------
    def _handle_select(self, command):
        names = self.store.table_names()
        if command is Command.QUIT:
            self.state = Quit()
        elif command is Command.SAVE:
            self.save()
        elif command is Command.DOWN and names:
            self.list_index = (self.list_index + 1) % len(names)
        elif command is Command.UP and names:
            self.list_index = (self.list_index - 1) % len(names)
        elif command is Command.OPEN:
            name = self.highlighted_table()
            if name is None:
                self._set_status("No tables to edit", 3)
                return
            self._enter_edit_table(name)

    def save(self) -> Optional[str]:
        try:
            archive_dir = self.store.save()
        except OSError as e:
            self._set_status(f"Save failed: {e}", 4)
            return None
        self._set_status(f"Saved to {archive_dir}", 3)
        return archive_dir

    # ---------- table screen ----------
    def _handle_edit_table(self, name, command):
        table = self.store.get_table(name)
        if command is Command.ESCAPE:
            self._enter_select(name)
        elif command is Command.OPEN:
            if table.cursor is not None:
                self._enter_edit_row(name, table)
        elif command is Command.DOWN:
            table.next()
        elif command is Command.UP:
            table.previous()
        elif command is Command.SELECT_ROW:
            table.select_current()
        elif command is Command.DESELECT_ROW:
            table.deselect_current()
        elif command is Command.PASTE:
            count = table.duplicate_selected()
            if count:
                self._set_status(f"Pasted {count} row{'s' if count != 1 else ''}", 2)
        elif command is Command.DELETE:
            count = table.delete_selected()
            if count:
                self._set_status(f"Deleted {count} row{'s' if count != 1 else ''}", 2)
        elif command is Command.ADD_ROW:
            table.add_row()
        elif command is Command.REINFER:
            table.infer_schema(self.sample_limit)
            self._set_status("Column types re-inferred", 2)

    # ---------- row screen ----------
    def _handle_edit_row(self, name, command, ch):
        if command is Command.ESCAPE:
            self._enter_edit_table(name)
            return
        if command is Command.SAVE:
            table = self.store.get_table(name)
            if self.row_editor is not None and table.cursor is not None:
                table.set_row(table.cursor, self.row_editor.values())
            self._enter_edit_table(name)
            return
        if self.row_editor is None:
            return
        if command is Command.NEXT_FIELD:
            self.row_editor.next_field()
        elif command is Command.PREV_FIELD:
            self.row_editor.prev_field()
        elif command is None and ch is not None:
            self.row_editor.handle_key(ch)
