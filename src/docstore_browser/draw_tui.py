"""
Filename:       draw_tui.py
Author:         jole
Created:        03.10.2025

Description:

Notes:
"""

# --- Import section ---------------------------------------------------------------------------------------------------
# --- Project defined
from .defs      import HELPBAR_TEXT, MARKER, FOOTER_ROWS
from .terminal  import CursesTerminal
from .tui_state import AppContext, InCollection, TUITheme, UIState, header_rows, path_of
# --- END OF Import section --------------------------------------------------------------------------------------------



class DrawTUI():
    """
    This one is responsible for all the drawing to screen. It never changes the navigation, it only reads the
    AppContext and keeps UIState.offset following the selection.
    """

    def __init__(self, _terminal: CursesTerminal) -> None:
        self.term = _terminal
    # --- END OF __init__() --------------------------------------------------------------------------------------------



    def render(self, _ctx: AppContext, _theme: TUITheme, _state: UIState) -> None:
        """
        Redraw the whole screen for the current level, and park the cursor on the selected row.

        :param _ctx:    What to draw
        :param _theme:  Colors
        :param _state:  Scroll position, updated here

        :return:        None
        """

        max_y, _ = self.term.size()
        top      = header_rows(_ctx.state)

        _state.view_height = max(1, max_y - top - FOOTER_ROWS)

        self.term.clear_screen()
        self.draw_header(_ctx, _theme)
        self.draw_rows(_ctx, _theme, _state)

        if _ctx.message:
            self.draw_error(_ctx.message, _theme)

        self.draw_helpbar(_ctx, _theme, _state)

        self.term.move_cursor(top + _ctx.selected - _state.offset, 0)
        self.term.refresh()
    # --- END OF render() ----------------------------------------------------------------------------------------------



    def draw_header(self, _ctx: AppContext, _theme: TUITheme) -> None:
        """
        The path line on top of the screen. Nothing at root.
        """

        if header_rows(_ctx.state):
            self.term.write(0, 0, path_of(_ctx.state), _theme.header)
    # --- END OF draw_header() -----------------------------------------------------------------------------------------



    def draw_rows(self, _ctx: AppContext, _theme: TUITheme, _state: UIState) -> None:
        """
        Draws the visible part of the list. Databases and collections get the marker in front, documents are
        written as they are.
        """

        # --- Normalize state attributes if we're outside view boundaries.
        if _ctx.selected < _state.offset:
            _state.offset = _ctx.selected
        elif _ctx.selected >= _state.offset + _state.view_height:
            _state.offset = _ctx.selected - _state.view_height + 1
        _state.offset = max(0, min(_state.offset, len(_ctx.items) - 1))

        top         = header_rows(_ctx.state)
        is_records  = isinstance(_ctx.state, InCollection)
        items       = list(_ctx.items)

        for label, position in items[_state.offset:_state.offset + _state.view_height]:
            y        = top + position - _state.offset
            row_attr = _theme.reversed if position == _ctx.selected else 0

            if is_records:
                self.term.write(y, 0, label, row_attr)
            else:
                self.term.write(y, 0, MARKER, _theme.marker)
                self.term.write(y, len(MARKER) + 2, label, row_attr)
    # --- END OF draw_rows() -------------------------------------------------------------------------------------------



    def draw_error(self, _message: str, _theme: TUITheme) -> None:
        max_y, _ = self.term.size()
        self.term.write(max_y - 2, 0, f"Error: {_message}", _theme.error)



    def draw_helpbar(self, _ctx: AppContext, _theme: TUITheme, _state: UIState) -> None:
        """
        Key hints, where we are, and the row counter, on the last line.
        """

        max_y, max_x = self.term.size()
        total = len(_ctx.items)
        right = f"row {min(_ctx.selected + 1, total)}/{total}"
        path  = path_of(_ctx.state) or "/"
        bar   = f"{HELPBAR_TEXT}  {path}  {right}"
        bar_attr = _theme.help_bar if _state.has_colors else _theme.reversed
        self.term.write(max_y - 1, 0, bar.ljust(max_x), bar_attr)
    # --- END OF draw_helpbar() ----------------------------------------------------------------------------------------

# --- END OF class DrawTUI ---------------------------------------------------------------------------------------------
