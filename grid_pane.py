import curses


class GridPane:
    """Draws one DataTable: title, column names, [type] labels and the rows."""

    PAIR_CELL_TEXT = 1
    PAIR_INDEX = 2
    MAX_COL_WIDTH = 30
    HEADER_LINES = 3
    SELECTED_MARK = "*"

    def __init__(self):
        try:
            curses.start_color()
            curses.use_default_colors()
            curses.init_pair(self.PAIR_CELL_TEXT, curses.COLOR_WHITE, -1)
            curses.init_pair(self.PAIR_INDEX, curses.COLOR_BLUE, -1)
        except curses.error:
            pass
        self.row_offset = 0

    def adjust_row_offset(self, cursor, body_h):
        """Scroll so the cursor row stays inside a body of ``body_h`` lines."""
        body_h = max(1, body_h)
        if cursor is None:
            return self.row_offset
        if cursor < self.row_offset:
            self.row_offset = cursor
        elif cursor >= self.row_offset + body_h:
            self.row_offset = cursor - body_h + 1
        self.row_offset = max(0, self.row_offset)
        return self.row_offset

    def column_widths(self, table, rows):
        widths = []
        for c, column in enumerate(table.schema.columns):
            max_len = max(len(column.name), len(column.inferred_type.label) + 2)
            for r in rows:
                max_len = max(max_len, len(table.cell(r, c)))
            widths.append(min(self.MAX_COL_WIDTH, max_len + 1))
        return widths

    def draw(self, win, table):
        win.erase()
        h, w = win.getmaxyx()
        body_h = max(1, h - self.HEADER_LINES)
        total = table.row_count

        if total == 0:
            self.row_offset = 0
        else:
            self.row_offset = min(self.row_offset, total - 1)
        self.adjust_row_offset(table.cursor, body_h)
        rows = range(self.row_offset, min(total, self.row_offset + body_h))

        widths = self.column_widths(table, rows)
        row_w = max(3, len(str(max(total - 1, 0)))) + 1

        try:
            title = f" {table.name} ({total} rows, {len(table.selected_rows)} selected)"
            win.addnstr(0, 0, title.ljust(w), w, curses.A_BOLD)

            x = row_w + 1
            for column, cw in zip(table.schema.columns, widths):
                if x >= w - 1:
                    break
                eff = min(cw, w - x - 1)
                win.addnstr(1, x, column.name[:eff].ljust(eff), eff, curses.A_BOLD)
                win.addnstr(2, x, f"[{column.inferred_type.label}]"[:eff], eff)
                x += cw + 1

            y = self.HEADER_LINES
            for r in rows:
                if y >= h:
                    break
                mark = self.SELECTED_MARK if r in table.selected_rows else " "
                index_attr = curses.color_pair(self.PAIR_INDEX)
                win.addnstr(y, 0, f"{r:>{row_w - 1}}{mark}", row_w, index_attr)
                attr = curses.color_pair(self.PAIR_CELL_TEXT)
                if r == table.cursor:
                    attr |= curses.A_REVERSE
                x = row_w + 1
                for c, cw in enumerate(widths):
                    if x >= w - 1:
                        break
                    eff = min(cw, w - x - 1)
                    text = table.cell(r, c).replace("\n", " ")
                    win.addnstr(y, x, text[:eff].ljust(eff), eff, attr)
                    x += cw + 1
                y += 1
        except curses.error:
            pass

        win.refresh()
