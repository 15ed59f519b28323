import curses


class RowEditBuffer:
    """Editable copies of one row's cells while the row screen is open."""

    def __init__(self, values):
        self.fields: list[str] = [str(v) for v in values]
        self.active = 0
        self.cursor = len(self.fields[0]) if self.fields else 0

    @property
    def active_text(self) -> str:
        return self.fields[self.active] if self.fields else ""

    def values(self) -> list[str]:
        return list(self.fields)

    # ---------- field focus ----------
    def _focus(self, index: int):
        if not self.fields:
            return
        self.active = index % len(self.fields)
        self.cursor = len(self.fields[self.active])

    def next_field(self):
        self._focus(self.active + 1)

    def prev_field(self):
        self._focus(self.active - 1)

    # ---------- text input ----------
    def handle_key(self, ch: int) -> bool:
        if not self.fields:
            return False
        buf = self.fields[self.active]

        if ch in (curses.KEY_BACKSPACE, 127, 8):
            if self.cursor > 0:
                self.fields[self.active] = buf[: self.cursor - 1] + buf[self.cursor :]
                self.cursor -= 1
            return True

        if ch == curses.KEY_DC:
            if self.cursor < len(buf):
                self.fields[self.active] = buf[: self.cursor] + buf[self.cursor + 1 :]
            return True

        if ch == curses.KEY_LEFT:
            self.cursor = max(0, self.cursor - 1)
            return True

        if ch == curses.KEY_RIGHT:
            self.cursor = min(len(buf), self.cursor + 1)
            return True

        if ch == curses.KEY_HOME:
            self.cursor = 0
            return True

        if ch == curses.KEY_END:
            self.cursor = len(buf)
            return True

        if 32 <= ch <= 126:
            self.fields[self.active] = buf[: self.cursor] + chr(ch) + buf[self.cursor :]
            self.cursor += 1
            return True

        return False
