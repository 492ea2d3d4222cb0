"""Session shell around the state reducer.

A WallSession holds the current AppState, runs actions through the
reducer and takes care of the side effects the reducer must not do:
saving confirmed selections, deleting history entries and capturing
quote requests. The UI talks to the session only.
"""

from typing import Callable

from loguru import logger

from videowall.core.records import InputParams, QuoteRequest, SavedSelection
from videowall.core.state import (
    Action,
    AppState,
    DeleteHistory,
    LoadHistory,
    initial_state,
    reducer,
)
from videowall.core.storage import HistoryStore, QuoteStore
from videowall.core.units import Unit


class WallSession:
    """Owns the current state snapshot and the local stores."""

    def __init__(
        self,
        history_store: HistoryStore,
        quote_store: QuoteStore,
        unit: Unit = Unit.INCHES,
    ):
        self._history = history_store
        self._quotes = quote_store
        self._state = initial_state(unit)
        self._listeners: list[Callable[[AppState], None]] = []
        self._last_saved: SavedSelection | None = None

        self._state = reducer(self._state, LoadHistory(tuple(self._history.get_selections())))

    @property
    def state(self) -> AppState:
        return self._state

    @property
    def last_saved(self) -> SavedSelection | None:
        """The most recently confirmed selection, if any this session."""
        return self._last_saved

    def add_listener(self, callback: Callable[[AppState], None]):
        """Register a callback invoked with the new state after every dispatch."""
        self._listeners.append(callback)

    def dispatch(self, action: Action) -> AppState:
        """Apply `action`, persist any new confirmation, and notify listeners."""
        previous = self._state
        self._state = reducer(previous, action)

        if self._state.confirmed is not None and self._state.confirmed is not previous.confirmed:
            self._save_confirmed()

        if self._state is not previous:
            self._notify_listeners()
        return self._state

    def delete_history(self, selection_id: str):
        self._history.delete_selection(selection_id)
        if self._last_saved is not None and self._last_saved.id == selection_id:
            self._last_saved = None
        self.dispatch(DeleteHistory(selection_id))

    def submit_quote(
        self,
        name: str,
        contact_method: str,
        contact_value: str,
    ) -> QuoteRequest:
        """Validate and store a quote request for the last saved selection.

        Raises ValueError if the contact details are invalid.
        """
        selection_id = self._last_saved.id if self._last_saved else None
        quote = QuoteRequest.create(name, contact_method, contact_value, selection_id)
        self._quotes.save_quote(quote)
        return quote

    def _save_confirmed(self):
        state = self._state
        inp = state.calc_input()
        if inp is None:
            return
        selection = SavedSelection.from_config(
            state.confirmed,
            InputParams(combo=inp.combo, values=inp.values(), unit=state.unit),
        )
        if self._history.save_selection(selection):
            self._last_saved = selection
        else:
            self._last_saved = next(
                (s for s in self._history.get_selections() if s.same_wall(selection)),
                selection,
            )
        self._state = reducer(self._state, LoadHistory(tuple(self._history.get_selections())))

    def _notify_listeners(self):
        for listener in self._listeners:
            try:
                listener(self._state)
            except Exception as e:
                logger.error(f"Session listener error: {e}")
