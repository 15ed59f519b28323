import curses

import pytest

from app_state import EditRow, EditTable, Quit, Select, Start
from data_table import DataTable
from editor_controller import EditorController
from key_bindings import Command, command_for_key
from table_store import TableStore


class FakeStore:
    def __init__(self, tables, fail_with=None):
        self.tables = tables
        self.saves = 0
        self.fail_with = fail_with

    def table_names(self):
        return list(self.tables)

    def get_table(self, name):
        return self.tables[name]

    def save(self):
        if self.fail_with is not None:
            raise self.fail_with
        self.saves += 1
        return f"/archive/{self.saves}"


def _tables():
    return {
        "alpha": DataTable.from_records([["a", "b"], ["1", "x"], ["2", "y"]], name="alpha"),
        "beta": DataTable.from_records([["c"]], name="beta"),
    }


def _controller(store=None):
    messages = []
    ctrl = EditorController(store or FakeStore(_tables()), lambda m, *_: messages.append(m))
    return ctrl, messages


def test_start_ticks_into_select():
    ctrl, _ = _controller()
    assert ctrl.state == Start()
    assert ctrl.tick() == Select(None)
    assert ctrl.list_index == 0


def test_select_open_quit_and_navigation():
    ctrl, _ = _controller()
    ctrl.tick()
    ctrl.handle(Command.DOWN)
    assert ctrl.highlighted_table() == "beta"
    ctrl.handle(Command.DOWN)
    assert ctrl.highlighted_table() == "alpha"
    ctrl.handle(Command.UP)
    assert ctrl.highlighted_table() == "beta"
    assert ctrl.handle(Command.OPEN) == EditTable("beta")

    ctrl.handle(Command.ESCAPE)
    assert ctrl.handle(Command.QUIT) == Quit()
    assert ctrl.done


def test_escape_from_table_rehighlights_it():
    ctrl, _ = _controller()
    ctrl.tick()
    ctrl.handle(Command.DOWN)
    ctrl.handle(Command.OPEN)
    assert ctrl.handle(Command.ESCAPE) == Select("beta")
    assert ctrl.highlighted_table() == "beta"


def test_save_keeps_state_and_reports():
    store = FakeStore(_tables())
    ctrl, messages = _controller(store)
    ctrl.tick()
    assert ctrl.handle(Command.SAVE) == Select(None)
    assert store.saves == 1
    assert messages[-1] == "Saved to /archive/1"


def test_save_failure_is_reported_not_raised():
    store = FakeStore(_tables(), fail_with=OSError("read-only"))
    ctrl, messages = _controller(store)
    ctrl.tick()
    assert ctrl.handle(Command.SAVE) == Select(None)
    assert messages[-1] == "Save failed: read-only"


def test_open_row_requires_cursor():
    ctrl, _ = _controller()
    ctrl.tick()
    ctrl.handle(Command.OPEN)
    assert ctrl.handle(Command.OPEN) == EditTable("alpha")
    ctrl.handle(Command.DOWN)
    assert ctrl.handle(Command.OPEN) == EditRow("alpha")
    assert ctrl.row_editor.values() == ["1", "x"]


def test_row_commit_and_discard():
    ctrl, _ = _controller()
    ctrl.tick()
    ctrl.handle(Command.OPEN)
    ctrl.handle(Command.DOWN)
    ctrl.handle(Command.OPEN)

    ctrl.handle(None, ord("0"))
    assert ctrl.handle(Command.ESCAPE) == EditTable("alpha")
    table = ctrl.current_table()
    assert table.row(0) == ["1", "x"]

    ctrl.handle(Command.OPEN)
    ctrl.handle(None, ord("0"))
    ctrl.handle(Command.NEXT_FIELD)
    ctrl.handle(None, curses.KEY_BACKSPACE)
    ctrl.handle(None, ord("z"))
    assert ctrl.handle(Command.SAVE) == EditTable("alpha")
    assert table.row(0) == ["10", "z"]
    assert ctrl.row_editor is None


def test_table_commands_route_to_table():
    ctrl, messages = _controller()
    ctrl.tick()
    ctrl.handle(Command.OPEN)
    table = ctrl.current_table()

    ctrl.handle(Command.DOWN)
    ctrl.handle(Command.SELECT_ROW)
    assert table.selected_rows == {0}
    ctrl.handle(Command.PASTE)
    assert table.row_count == 3
    assert messages[-1] == "Pasted 1 row"
    ctrl.handle(Command.DESELECT_ROW)
    assert table.selected_rows == set()

    ctrl.handle(Command.SELECT_ROW)
    ctrl.handle(Command.DELETE)
    assert table.row_count == 2
    assert table.cursor is None

    ctrl.handle(Command.ADD_ROW)
    assert table.row_count == 3

    table.set_row(2, ["word", "x"])
    ctrl.handle(Command.REINFER)
    assert table.schema.columns[0].inferred_type.label == "String"


def test_next_in_empty_table_self_heals():
    ctrl, _ = _controller()
    ctrl.tick()
    ctrl.handle(Command.DOWN)
    ctrl.handle(Command.OPEN)
    table = ctrl.current_table()
    ctrl.handle(Command.DOWN)
    assert table.row_count == 1
    assert table.cursor == 0


def test_open_with_no_tables():
    ctrl, messages = _controller(FakeStore({}))
    ctrl.tick()
    assert ctrl.handle(Command.OPEN) == Select(None)
    assert messages[-1] == "No tables to edit"


def test_quit_is_terminal():
    ctrl, _ = _controller()
    ctrl.tick()
    ctrl.handle(Command.QUIT)
    assert ctrl.handle(Command.OPEN) == Quit()


def test_controller_with_real_store(tmp_path):
    master = tmp_path / "master"
    master.mkdir()
    (master / "t.csv").write_text("k,v\na,1\n", encoding="utf-8")
    store = TableStore.load(str(master), str(tmp_path / "history"))
    ctrl, messages = _controller(store)
    ctrl.tick()
    ctrl.handle(Command.OPEN)
    ctrl.handle(Command.DOWN)
    ctrl.handle(Command.OPEN)
    ctrl.handle(None, ord("b"))
    ctrl.handle(Command.SAVE)
    ctrl.handle(Command.ESCAPE)
    ctrl.handle(Command.SAVE)
    assert messages[-1].startswith("Saved to ")
    assert (master / "t.csv").read_text(encoding="utf-8") == "k,v\nab,1\n"


@pytest.mark.parametrize(
    "ch, state, expected",
    [
        (ord("q"), Select(None), Command.QUIT),
        (19, Select(None), Command.SAVE),
        (10, Select(None), Command.OPEN),
        (curses.KEY_DOWN, EditTable("t"), Command.DOWN),
        (curses.KEY_RIGHT, EditTable("t"), Command.SELECT_ROW),
        (curses.KEY_LEFT, EditTable("t"), Command.DESELECT_ROW),
        (22, EditTable("t"), Command.PASTE),
        (curses.KEY_DC, EditTable("t"), Command.DELETE),
        (27, EditTable("t"), Command.ESCAPE),
        (ord("q"), EditTable("t"), None),
        (19, EditRow("t"), Command.SAVE),
        (9, EditRow("t"), Command.NEXT_FIELD),
        (ord("q"), EditRow("t"), None),
        (ord("q"), Quit(), None),
    ],
)
def test_command_for_key(ch, state, expected):
    assert command_for_key(ch, state) is expected
