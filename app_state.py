from dataclasses import dataclass
from typing import Optional, Union


@dataclass(frozen=True)
class Start:
    pass


@dataclass(frozen=True)
class Select:
    last_table: Optional[str] = None


@dataclass(frozen=True)
class EditTable:
    table: str


@dataclass(frozen=True)
class EditRow:
    table: str


@dataclass(frozen=True)
class Quit:
    pass


EditorState = Union[Start, Select, EditTable, EditRow, Quit]
