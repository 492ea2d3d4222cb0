"""Tests for the session shell: persistence side effects and listeners."""

import json

import pytest

from videowall.core.solver import Param
from videowall.core.state import (
    Cancel,
    Confirm,
    LockParam,
    ReloadHistory,
    SelectOption,
    SetUnit,
)
from videowall.core.storage import HistoryStore, QuoteStore
from videowall.core.session import WallSession
from videowall.core.units import Unit, to_mm


INCH_100 = to_mm(100, Unit.INCHES)


def _confirm(session: WallSession, index: int = 0):
    session.dispatch(LockParam(Param.ASPECT_RATIO, 16 / 9))
    session.dispatch(LockParam(Param.HEIGHT, INCH_100))
    session.dispatch(SelectOption(index))
    session.dispatch(Confirm())


class TestConfirmPersistence:
    def test_confirm_saves_selection(self, session, history_store):
        _confirm(session)
        saved = history_store.get_selections()
        assert len(saved) == 1
        assert (saved[0].rows, saved[0].cols) == (7, 7)
        assert saved[0].input_params.values == {Param.ASPECT_RATIO: 16 / 9, Param.HEIGHT: INCH_100}
        assert saved[0].input_params.unit == Unit.INCHES

    def test_state_history_reflects_store(self, session):
        _confirm(session)
        assert len(session.state.history) == 1
        assert session.state.history[0] == session.last_saved

    def test_repeat_confirm_does_not_duplicate(self, session, history_store):
        _confirm(session)
        first = session.last_saved
        session.dispatch(Cancel())
        session.dispatch(SelectOption(0))
        session.dispatch(Confirm())
        assert len(history_store.get_selections()) == 1
        assert session.last_saved.id == first.id

    def test_other_dispatches_do_not_save(self, session, history_store):
        session.dispatch(LockParam(Param.ASPECT_RATIO, 16 / 9))
        session.dispatch(LockParam(Param.HEIGHT, INCH_100))
        session.dispatch(SetUnit(Unit.FEET))
        assert history_store.get_selections() == []
        assert session.last_saved is None

    def test_confirm_records_current_unit(self, session, history_store):
        session.dispatch(SetUnit(Unit.METERS))
        _confirm(session, 2)
        saved = history_store.get_selections()[0]
        assert saved.input_params.unit == Unit.METERS
        assert (saved.cols, saved.rows) == (9, 5)

    def test_reload_of_saved_entry_is_not_resaved(self, session, history_store):
        _confirm(session)
        entry = session.state.history[0]
        session.dispatch(ReloadHistory(entry))
        assert session.state.confirmed == entry.to_config()
        assert [s.id for s in history_store.get_selections()] == [entry.id]


class TestHistory:
    def test_loads_existing_history_on_start(self, tmp_data_dir):
        first = WallSession(HistoryStore(tmp_data_dir), QuoteStore(tmp_data_dir))
        _confirm(first)

        second = WallSession(HistoryStore(tmp_data_dir), QuoteStore(tmp_data_dir))
        assert [h.id for h in second.state.history] == [first.last_saved.id]

    def test_starts_with_malformed_history(self, tmp_data_dir):
        store = HistoryStore(tmp_data_dir)
        _confirm(WallSession(store, QuoteStore(tmp_data_dir)))
        entry = json.loads(store.path.read_text(encoding="utf-8"))[0]

        list_values = dict(entry, inputParams={"combo": "ar_height", "values": [1], "unit": "in"})
        infinite_time = dict(entry, savedAt=float("inf"))
        store.path.write_text(json.dumps([list_values, infinite_time]), encoding="utf-8")

        session = WallSession(store, QuoteStore(tmp_data_dir))
        assert session.state.history == ()

    def test_delete_history(self, session, history_store):
        _confirm(session)
        entry_id = session.state.history[0].id
        session.delete_history(entry_id)
        assert session.state.history == ()
        assert history_store.get_selections() == []

    def test_unit_passed_through(self, history_store, quote_store):
        assert WallSession(history_store, quote_store, Unit.FEET).state.unit == Unit.FEET


class TestQuotes:
    def test_quote_links_last_saved_selection(self, session, quote_store):
        _confirm(session)
        quote = session.submit_quote("Jordan", "email", "jordan@example.com")
        assert quote.selection_id == session.last_saved.id
        assert quote_store.get_quotes() == [quote]

    def test_quote_after_deleting_saved_selection_is_unlinked(self, session):
        _confirm(session)
        session.delete_history(session.last_saved.id)
        assert session.last_saved is None
        quote = session.submit_quote("Jordan", "email", "jordan@example.com")
        assert quote.selection_id is None

    def test_quote_without_selection(self, session, quote_store):
        quote = session.submit_quote("Jordan", "phone", "555 123 4567")
        assert quote.selection_id is None
        assert len(quote_store.get_quotes()) == 1

    def test_invalid_quote_raises_and_stores_nothing(self, session, quote_store):
        with pytest.raises(ValueError, match="Enter a valid email address"):
            session.submit_quote("Jordan", "email", "not-an-email")
        assert quote_store.get_quotes() == []


class TestListeners:
    def test_listener_receives_new_state(self, session):
        seen = []
        session.add_listener(seen.append)
        session.dispatch(LockParam(Param.HEIGHT, INCH_100))
        assert seen == [session.state]

    def test_noop_dispatch_does_not_notify(self, session):
        seen = []
        session.add_listener(seen.append)
        session.dispatch(Confirm())
        assert seen == []

    def test_failing_listener_does_not_break_dispatch(self, session):
        calls = []

        def broken(state):
            raise RuntimeError("boom")

        session.add_listener(broken)
        session.add_listener(calls.append)
        session.dispatch(LockParam(Param.HEIGHT, INCH_100))
        assert len(calls) == 1
