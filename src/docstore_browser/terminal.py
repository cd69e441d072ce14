"""
Filename:       terminal.py
Author:         jole
Created:        03.10.2025

Description:    Thin wrapper around the curses screen. Turns key codes into KeyEvents, and gives DrawTUI the few
                screen primitives it needs.

Notes:          Terminal setup and teardown is left to curses.wrapper(), which restores the terminal on every exit.
"""

# --- Import section ---------------------------------------------------------------------------------------------------
import curses

from typing import Tuple

# --- Project defined
from .defs      import UP_KEYS, DOWN_KEYS, CONFIRM_KEYS, CANCEL_KEYS, ESCAPE_DELAY
from .tui_state import KeyEvent
# --- END OF Import section --------------------------------------------------------------------------------------------



class InputError(Exception):
    """The terminal could not deliver a key event."""



def key_to_event(_key: int) -> KeyEvent:
    """
    Map a curses key code to one of the semantic key events.
    """

    match _key:
        case k if k in UP_KEYS:
            return KeyEvent.UP
        case k if k in DOWN_KEYS:
            return KeyEvent.DOWN
        case k if k in CONFIRM_KEYS:
            return KeyEvent.CONFIRM
        case k if k in CANCEL_KEYS:
            return KeyEvent.CANCEL
        case _:
            return KeyEvent.OTHER
# --- END OF key_to_event() --------------------------------------------------------------------------------------------



class CursesTerminal:
    """
    Everything that touches the curses screen goes through here.
    """

    def __init__(self, _stdscr) -> None:
        self.stdscr = _stdscr
    # --- END OF __init__() --------------------------------------------------------------------------------------------



    def setup(self) -> None:
        """
        Called once, right after curses.wrapper() hands us the screen.
        """

        # --- Important for KEY_* codes
        self.stdscr.keypad(True)
        try:
            curses.set_escdelay(ESCAPE_DELAY)
        except curses.error:
            pass
    # --- END OF setup() -----------------------------------------------------------------------------------------------



    def read_next_key_event(self) -> KeyEvent:
        """
        Block until a key arrives.

        :raises InputError: If curses reports a failed read
        """

        try:
            key = self.stdscr.getch()
        except curses.error as e:
            raise InputError(f"Could not read from terminal: {e}") from e

        # --- getch() only returns -1 in blocking mode when the read itself failed
        if key == -1:
            raise InputError("Could not read from terminal")

        return key_to_event(key)
    # --- END OF read_next_key_event() ---------------------------------------------------------------------------------



    def size(self) -> Tuple[int, int]:
        return self.stdscr.getmaxyx()



    def get_cursor_row(self) -> int:
        return self.stdscr.getyx()[0]



    def clear_screen(self) -> None:
        self.stdscr.erase()



    def move_cursor(self, _row: int, _col: int = 0) -> None:
        max_y, max_x = self.size()
        if 0 <= _row < max_y and 0 <= _col < max_x:
            self.stdscr.move(_row, _col)



    def write(self, _y: int, _x: int, _text: str, _attr: int = 0) -> None:
        """
        Writes a string to the screen, clipping if necessary

        :param _y:       y co-ordinate
        :param _x:       x co-ordinate
        :param _text:    What to write
        :param _attr:    Text attributes

        :return:        None
        """

        max_y, max_x = self.size()
        if _y < 0 or _y >= max_y or _x >= max_x:
            return

        try:
            self.stdscr.addstr(_y, _x, _text[: max_x - _x - 1], _attr)
        except curses.error:
            # --- Writing into the bottom-right cell always "fails", the text is there anyway
            pass
    # --- END OF write() -----------------------------------------------------------------------------------------------



    def refresh(self) -> None:
        self.stdscr.refresh()
# --- END OF class CursesTerminal --------------------------------------------------------------------------------------
