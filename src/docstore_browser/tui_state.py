"""
Filename:       tui_state.py
Author:         jole
Created:        02.10.2025

Description:    State classes for the browser: where we are in the store (NavigationState), what is listed
                (SelectionList), the live aggregate of both (AppContext), the key events, and view/theme helpers.

Notes:
"""

import curses

from dataclasses    import dataclass, field
from enum           import Enum
from typing         import Iterable, Iterator, List, NamedTuple, Optional, Union

from .defs import ROOT_HEADER_ROWS, NESTED_HEADER_ROWS



# --- Navigation states ------------------------------------------------------------------------------------------------
@dataclass(frozen=True)
class Root:
    """No database selected, the database list is showing."""


@dataclass(frozen=True)
class InContainer:
    container_name: str
    root_row:       int = 0     # row of the database in the root list


@dataclass(frozen=True)
class InCollection:
    container_name:     str
    collection_name:    str
    root_row:           int = 0
    container_row:      int = 0     # row of the collection in the database's list


NavigationState = Union[Root, InContainer, InCollection]
# --- END OF navigation states -----------------------------------------------------------------------------------------



def header_rows(_state: NavigationState) -> int:
    """Rows the path header occupies above the first item."""
    return ROOT_HEADER_ROWS if isinstance(_state, Root) else NESTED_HEADER_ROWS



def path_of(_state: NavigationState) -> str:
    """The path shown in the header line. Empty at root."""
    match _state:
        case InContainer(container_name = c):
            return f"/{c}"
        case InCollection(container_name = c, collection_name = col):
            return f"{c}/{col}"
        case _:
            return ""
# --- END OF path_of() -------------------------------------------------------------------------------------------------



class SelectionItem(NamedTuple):
    label:      str
    position:   int



class SelectionList:
    """
    The items listed at one level, one per screen row. Positions are always 0..n-1, in display order.
    """

    def __init__(self, _labels: Iterable[str] = ()) -> None:
        self._items: List[SelectionItem] = [SelectionItem(label, i) for i, label in enumerate(_labels)]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[SelectionItem]:
        return iter(self._items)

    def __eq__(self, _other) -> bool:
        if not isinstance(_other, SelectionList):
            return NotImplemented
        return self._items == _other._items

    def __repr__(self) -> str:
        return f"SelectionList({self.labels()!r})"

    def labels(self) -> List[str]:
        return [item.label for item in self._items]

    def resolve(self, _index: int) -> Optional[str]:
        """Label of the item at _index, or None if there is no such row."""
        if 0 <= _index < len(self._items):
            return self._items[_index].label
        return None

    def position_of(self, _label: str) -> Optional[int]:
        for item in self._items:
            if item.label == _label:
                return item.position
        return None

    def clamp(self, _index: int) -> int:
        """Pull _index back inside the list. An empty list clamps everything to 0."""
        return max(0, min(_index, len(self._items) - 1))
# --- END OF class SelectionList ---------------------------------------------------------------------------------------



@dataclass
class AppContext:
    """
        The live state of the session. The Navigator mutates it in place on every accepted transition, and DrawTUI
    draws from it. `items` always belongs to `state`; in a collection it holds the serialized documents.
    """
    root_items: SelectionList
    state:      NavigationState         = field(default_factory=Root)
    items:      Optional[SelectionList] = None
    selected:   int                     = 0
    message:    Optional[str]           = None

    def __post_init__(self) -> None:
        if self.items is None:
            self.items = self.root_items

    @property
    def previous_row(self) -> int:
        """Row of the item that was entered to reach the current level."""
        match self.state:
            case InContainer(root_row = row):
                return row
            case InCollection(container_row = row):
                return row
            case _:
                return 0
# --- END OF class AppContext ------------------------------------------------------------------------------------------



class KeyEvent(Enum):
    UP      = "up"
    DOWN    = "down"
    CONFIRM = "confirm"
    CANCEL  = "cancel"
    OTHER   = "other"



@dataclass
class UIState:
    """
        What part of the list is on screen. DrawTUI keeps `offset` following the selection.
    """
    offset:         int     = 0     # the element currently at top of the view
    view_height:    int     = 20
    has_colors:     bool    = False
# --- END OF class UIState ---------------------------------------------------------------------------------------------



@dataclass()
class TUITheme:
    header:     int = 0
    marker:     int = 0
    help_bar:   int = curses.A_REVERSE
    error:      int = curses.A_BOLD
    reversed:   int = curses.A_REVERSE

    @staticmethod
    def init_theme() -> "TUITheme":

        if not curses.has_colors():
            return TUITheme()

        curses.start_color()
        curses.use_default_colors()

        curses.init_pair(1, curses.COLOR_YELLOW, -1)                # path header
        curses.init_pair(2, curses.COLOR_GREEN, -1)                 # marker glyph
        curses.init_pair(3, curses.COLOR_BLACK, curses.COLOR_WHITE) # help bar
        curses.init_pair(4, curses.COLOR_RED, -1)                   # error line

        return TUITheme(
            header      = curses.A_BOLD | curses.color_pair(1),
            marker      = curses.color_pair(2),
            help_bar    = curses.color_pair(3),
            error       = curses.A_BOLD | curses.color_pair(4),
            )
    # --- END OF init_theme() ------------------------------------------------------------------------------------------
# --- END OF class TUITheme --------------------------------------------------------------------------------------------
