import curses


class RowEditorPane:
    """One line per column: name on the left, editable text on the right."""

    def __init__(self):
        self.field_offset = 0
        self.hscroll = 0

    def draw(self, win, header, buffer, row_index):
        win.erase()
        h, w = win.getmaxyx()
        label_w = min(max((len(n) for n in header), default=4) + 1, max(4, w // 3))
        text_w = max(1, w - label_w - 3)
        body_h = max(1, h - 2)

        if buffer.active < self.field_offset:
            self.field_offset = buffer.active
        elif buffer.active >= self.field_offset + body_h:
            self.field_offset = buffer.active - body_h + 1

        if buffer.cursor < self.hscroll:
            self.hscroll = buffer.cursor
        elif buffer.cursor > self.hscroll + text_w - 1:
            self.hscroll = buffer.cursor - text_w + 1

        cursor_yx = None
        try:
            title = f" Row {row_index}  (Tab/Shift+Tab field, Ctrl+S commit, Esc discard)"
            win.addnstr(0, 0, title.ljust(w), w, curses.A_BOLD)
            last = min(len(buffer.fields), self.field_offset + body_h)
            for y, idx in enumerate(range(self.field_offset, last), start=2):
                active = idx == buffer.active
                name = header[idx] if idx < len(header) else ""
                win.addnstr(y, 0, name[:label_w].rjust(label_w), label_w, curses.A_BOLD)
                text = buffer.fields[idx]
                start = self.hscroll if active else 0
                attr = curses.A_UNDERLINE if active else curses.A_NORMAL
                win.addnstr(y, label_w + 2, text[start : start + text_w].ljust(text_w), text_w, attr)
                if active:
                    cursor_yx = (y, label_w + 2 + buffer.cursor - start)
            if cursor_yx is not None:
                win.move(*cursor_yx)
        except curses.error:
            pass
        win.refresh()
