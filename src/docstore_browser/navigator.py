"""
Filename:       navigator.py
Author:         jole
Created:        03.10.2025

Description:    The navigation state machine. Takes one KeyEvent at a time, decides what it means at the current
                level, talks to the catalog client when a level is entered, and updates the AppContext.

Notes:          State, items and selection are only written after a fetch succeeded. A failed fetch leaves all three
                as they were and puts the error in AppContext.message.
"""

# --- Import section ---------------------------------------------------------------------------------------------------
import logging

from typing import Optional

# --- Project defined
from .catalog_client    import CatalogClient, QueryError
from .tui_state         import AppContext, InCollection, InContainer, KeyEvent, Root, SelectionList
# --- END OF Import section --------------------------------------------------------------------------------------------



logger = logging.getLogger(__name__)



class Navigator:
    """
    Dispatches on (state, key):

        Root          Up/Down  -> move         Confirm -> InContainer     Cancel -> quit
        InContainer   Up/Down  -> move         Confirm -> InCollection    Cancel -> Root
        InCollection  Up/Down  -> move                                     Cancel -> InContainer

    Everything else is a no-op.
    """

    def __init__(self, _client: CatalogClient, _ctx: AppContext) -> None:
        self.client = _client
        self.ctx    = _ctx
    # --- END OF __init__() --------------------------------------------------------------------------------------------



    def dispatch(self, _event: KeyEvent) -> bool:
        """
        Handle one key event.

        :param _event:  The key the user pressed

        :return:        False when the user asked to quit, True otherwise
        """

        # --- An error line only stays up until the next key
        self.ctx.message = None

        match (self.ctx.state, _event):
            case (_, KeyEvent.UP):
                self._move(-1)
            case (_, KeyEvent.DOWN):
                self._move(+1)

            case (Root(), KeyEvent.CONFIRM):
                self._enter_container()
            case (Root(), KeyEvent.CANCEL):
                logger.debug("Cancel at root, quitting")
                return False

            case (InContainer(), KeyEvent.CONFIRM):
                self._enter_collection()
            case (InContainer(), KeyEvent.CANCEL):
                self._back_to_root()

            case (InCollection(), KeyEvent.CANCEL):
                self._back_to_container()

            case _:
                pass

        return True
    # --- END OF dispatch() --------------------------------------------------------------------------------------------



    def _move(self, _delta: int) -> None:
        self.ctx.selected = self.ctx.items.clamp(self.ctx.selected + _delta)



    def _selected_label(self) -> Optional[str]:
        return self.ctx.items.resolve(self.ctx.selected)



    def _fail(self, _error: QueryError) -> None:
        logger.warning(f"{type(self.ctx.state).__name__}: transition aborted: {_error}")
        self.ctx.message = str(_error)



    def _enter_container(self) -> None:
        """
        Root -> InContainer. One listing call; nothing changes unless it succeeds.
        """

        name = self._selected_label()
        if name is None:
            return

        try:
            names = self.client.list_sub_containers(name)
        except QueryError as e:
            self._fail(e)
            return

        self.ctx.state      = InContainer(name, root_row = self.ctx.selected)
        self.ctx.items      = SelectionList(names)
        # --- The cursor lands on the same row as the item just entered
        self.ctx.selected   = self.ctx.items.clamp(self.ctx.previous_row)
        logger.debug(f"Entered {name} ({len(names)} collections)")
    # --- END OF _enter_container() ------------------------------------------------------------------------------------



    def _enter_collection(self) -> None:
        """
        InContainer -> InCollection. Fetches every document of the collection before anything is shown.
        """

        state: InContainer = self.ctx.state
        name = self._selected_label()
        if name is None:
            return

        try:
            records = self.client.fetch_all_records(state.container_name, name)
        except QueryError as e:
            self._fail(e)
            return

        self.ctx.state      = InCollection(state.container_name,
                                           name,
                                           root_row         = state.root_row,
                                           container_row    = self.ctx.selected)
        self.ctx.items      = SelectionList(self.client.format_record(r) for r in records)
        # --- The cursor lands on the same row as the item just entered
        self.ctx.selected   = self.ctx.items.clamp(self.ctx.previous_row)
        logger.debug(f"Entered {state.container_name}/{name} ({len(records)} documents)")
    # --- END OF _enter_collection() -----------------------------------------------------------------------------------



    def _back_to_root(self) -> None:
        """
        InContainer -> Root. The root list was fetched at startup and is reused as is.
        """

        state: InContainer = self.ctx.state

        self.ctx.state      = Root()
        self.ctx.items      = self.ctx.root_items
        self.ctx.selected   = self.ctx.root_items.clamp(state.root_row)
        logger.debug(f"Left {state.container_name}")
    # --- END OF _back_to_root() ---------------------------------------------------------------------------------------



    def _back_to_container(self) -> None:
        """
        InCollection -> InContainer. The collection list is fetched again, so collections created or dropped while
        we were away show up correctly.
        """

        state: InCollection = self.ctx.state

        try:
            names = self.client.list_sub_containers(state.container_name)
        except QueryError as e:
            self._fail(e)
            return

        items = SelectionList(names)
        row   = items.position_of(state.collection_name)

        self.ctx.state      = InContainer(state.container_name, root_row = state.root_row)
        self.ctx.items      = items
        self.ctx.selected   = row if row is not None else items.clamp(state.container_row)
        logger.debug(f"Left {state.container_name}/{state.collection_name}")
    # --- END OF _back_to_container() ----------------------------------------------------------------------------------
