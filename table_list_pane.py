import curses


class TableListPane:
    HIGHLIGHT_SYMBOL = "> "

    def draw(self, win, names, highlighted):
        win.erase()
        h, w = win.getmaxyx()
        try:
            win.addnstr(0, 0, " Tables".ljust(w), w, curses.A_BOLD)
            if not names:
                win.addnstr(2, 2, "(no tables in master directory)", max(1, w - 3))
            body_h = max(1, h - 2)
            start = max(0, highlighted - body_h + 1)
            for y, idx in enumerate(range(start, min(len(names), start + body_h)), start=2):
                active = idx == highlighted
                prefix = self.HIGHLIGHT_SYMBOL if active else " " * len(self.HIGHLIGHT_SYMBOL)
                attr = curses.A_BOLD | curses.A_REVERSE if active else curses.A_NORMAL
                win.addnstr(y, 1, f"{prefix}{names[idx]}", max(1, w - 2), attr)
        except curses.error:
            pass
        win.refresh()
