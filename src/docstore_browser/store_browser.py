"""
Filename:       store_browser.py
Author:         jole
Created:        03.10.2025

Description:    Holds class definitions for StoreBrowser along with attributes and methods.

Notes:
"""

# --- Import section ---------------------------------------------------------------------------------------------------
import curses
import logging

from typing import Optional

# --- Project defined
from .catalog_client    import CatalogClient, CatalogConnectionError, QueryError, connect, redact_uri
from .defs              import DEFAULT_TIMEOUT
from .draw_tui          import DrawTUI
from .log_helper        import LOGGER_NAME, MUTED, set_stream_threshold
from .navigator         import Navigator
from .terminal          import CursesTerminal, InputError
from .tui_state         import AppContext, SelectionList, TUITheme, UIState
# --- END OF Import section --------------------------------------------------------------------------------------------



logger = logging.getLogger(__name__)



class StoreBrowser:
    """
    StoreBrowser keeps everything together!

    Application execution steps:
        - Connect to the store and read the list of databases.
        - Display the list, supporting navigation with keyboard in terminal.
        - Run the loop, catching users input and handing it to the Navigator.
    """

    def __init__(self,
                 _uri:      str,
                 _timeout:  float = DEFAULT_TIMEOUT
                 ) -> None:
        self.uri                = _uri
        self.timeout            = _timeout
        self.state              = UIState()
        self.theme: TUITheme    = TUITheme()

        # --- The one store connection of the session, opened in run()
        self.client: Optional[CatalogClient]    = None
        self.ctx:    Optional[AppContext]       = None
    # --- END OF __init__() --------------------------------------------------------------------------------------------



    def _curses_main(self, _stdscr) -> None:
        """
        This constitutes the main loop of the application.
        """

        self.theme              = TUITheme.init_theme()
        self.state.has_colors   = curses.has_colors()

        term = CursesTerminal(_stdscr)
        term.setup()

        draw      = DrawTUI(term)
        navigator = Navigator(self.client, self.ctx)

        # --- Start the main loop
        running: bool = True
        while running:
            draw.render(self.ctx, self.theme, self.state)
            running = navigator.dispatch(term.read_next_key_event())
        # --- END OF while running -------------------------------------------------------------------------------------
    # --- END OF _curses_main() ----------------------------------------------------------------------------------------



    def _start_session(self) -> bool:
        """
        Connect and fetch the databases. Both failures end the program before curses starts.

        :return: True if we have something to browse
        """

        try:
            self.client = connect(self.uri, self.timeout)
        except CatalogConnectionError as e:
            logger.error(str(e))
            return False

        try:
            names = self.client.list_top_level_containers()
        except QueryError as e:
            logger.error(f"Connected to {redact_uri(self.uri)}, but {e}")
            return False

        logger.notice(f"Found {len(names)} databases")
        self.ctx = AppContext(root_items = SelectionList(names))
        return True
    # --- END OF _start_session() --------------------------------------------------------------------------------------



    def run(self) -> int:
        """
        Starting point for the application.

        :return: Process exit code, 0 when the user quit from the top level
        """

        try:
            if not self._start_session():
                return 1

            # --- Anything written to the terminal now would end up on top of the curses screen
            previous = set_stream_threshold(logging.getLogger(LOGGER_NAME), MUTED)
            try:
                curses.wrapper(self._curses_main)
            finally:
                set_stream_threshold(logging.getLogger(LOGGER_NAME), previous)

        except InputError as e:
            logger.error(str(e))
            return 1
        except KeyboardInterrupt:
            logger.debug("Interrupted")
        finally:
            if self.client is not None:
                self.client.close()

        return 0
    # --- END OF run() -------------------------------------------------------------------------------------------------

# --- END OF class StoreBrowser ----------------------------------------------------------------------------------------
