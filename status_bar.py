import time

from app_state import EditRow, EditTable, Select

_MODE_NAMES = {
    Select: "TABLES",
    EditTable: "TABLE",
    EditRow: "ROW",
}

_HINTS = {
    Select: "Enter open | Ctrl+S save all | q quit",
    EditTable: "l/h select | Ctrl+V paste | x delete | a add | Ctrl+R types | Esc back",
    EditRow: "",
}


def render_status(context, width):
    """
    context keys: status_msg, status_until, state, table_name, row_count,
                  cursor
    """
    text = ""
    now = time.time()
    if context.get("status_msg") and now < context.get("status_until", 0):
        text = f" {context['status_msg']}"
    else:
        state = context.get("state")
        mode = _MODE_NAMES.get(type(state), "")
        parts = [mode]
        name = context.get("table_name")
        if name:
            parts.append(name)
            row_count = context.get("row_count", 0)
            cursor = context.get("cursor")
            position = "-" if cursor is None else str(cursor)
            parts.append(f"row {position} of {row_count}")
        hint = _HINTS.get(type(state), "")
        if hint:
            parts.append(hint)
        text = " " + " | ".join(p for p in parts if p)

    return text.ljust(width)[:width]
