"""Tests for history and quote persistence."""

import json

from videowall.core.catalog import CabinetType
from videowall.core.records import InputParams, QuoteRequest, SavedSelection
from videowall.core.solver import Combo, Config, Param
from videowall.core.storage import HistoryStore, QuoteStore
from videowall.core.units import Unit


def _selection(selection_id: str, rows: int = 7, cols: int = 7, saved_at: int = 1000) -> SavedSelection:
    return SavedSelection.from_config(
        Config.from_grid(rows, cols, CabinetType.WIDE),
        InputParams(Combo.AR_HEIGHT, {Param.ASPECT_RATIO: 16 / 9, Param.HEIGHT: 2540.0}, Unit.INCHES),
        selection_id=selection_id,
        saved_at=saved_at,
    )


def _quote(quote_id: str) -> QuoteRequest:
    return QuoteRequest(
        id=quote_id,
        selection_id=None,
        name="Jordan",
        contact_method="email",
        contact_value="jordan@example.com",
        submitted_at=5000,
    )


class TestHistoryStore:
    def test_empty_when_missing(self, history_store):
        assert history_store.get_selections() == []

    def test_save_and_reload(self, tmp_data_dir):
        store = HistoryStore(tmp_data_dir)
        assert store.save_selection(_selection("a")) is True

        loaded = HistoryStore(tmp_data_dir).get_selections()
        assert loaded == [_selection("a")]

    def test_newest_first(self, history_store):
        history_store.save_selection(_selection("a", 7, 7))
        history_store.save_selection(_selection("b", 8, 8))
        assert [s.id for s in history_store.get_selections()] == ["b", "a"]

    def test_duplicate_wall_is_not_stored(self, history_store):
        assert history_store.save_selection(_selection("first")) is True
        assert history_store.save_selection(_selection("second", saved_at=2000)) is False
        assert [s.id for s in history_store.get_selections()] == ["first"]

    def test_delete(self, history_store):
        history_store.save_selection(_selection("a", 7, 7))
        history_store.save_selection(_selection("b", 8, 8))
        history_store.delete_selection("a")
        assert [s.id for s in history_store.get_selections()] == ["b"]

    def test_file_uses_camel_case_keys(self, history_store):
        history_store.save_selection(_selection("a"))
        raw = json.loads(history_store.path.read_text(encoding="utf-8"))
        assert history_store.path.name == "videowall_selections.json"
        assert raw[0]["cabinetType"] == "16:9"
        assert raw[0]["widthMM"] == 4200
        assert raw[0]["inputParams"] == {
            "combo": "ar_height",
            "values": {"aspectRatio": 16 / 9, "height": 2540.0},
            "unit": "in",
        }

    def test_corrupted_file_reads_as_empty(self, history_store):
        history_store.path.write_text("{{{ not json", encoding="utf-8")
        assert history_store.get_selections() == []

    def test_non_list_reads_as_empty(self, history_store):
        history_store.path.write_text('{"id": "a"}', encoding="utf-8")
        assert history_store.get_selections() == []

    def test_malformed_entries_are_skipped(self, history_store):
        good = _selection("good").to_dict()

        list_values = _selection("list-values").to_dict()
        list_values["inputParams"]["values"] = [1]
        string_params = _selection("string-params").to_dict()
        string_params["inputParams"] = "ar_height"
        infinite_time = _selection("infinite-time").to_dict()
        infinite_time["savedAt"] = float("inf")
        infinite_rows = _selection("infinite-rows").to_dict()
        infinite_rows["rows"] = float("inf")

        history_store.path.write_text(
            json.dumps([
                {"id": "bad"}, "junk", list_values, string_params,
                infinite_time, infinite_rows, good,
            ]),
            encoding="utf-8",
        )
        assert [s.id for s in history_store.get_selections()] == ["good"]

    def test_save_recovers_from_corruption(self, history_store):
        history_store.path.write_text("garbage", encoding="utf-8")
        history_store.save_selection(_selection("a"))
        assert [s.id for s in history_store.get_selections()] == ["a"]


class TestQuoteStore:
    def test_empty_when_missing(self, quote_store):
        assert quote_store.get_quotes() == []

    def test_save_newest_first(self, quote_store):
        quote_store.save_quote(_quote("q1"))
        quote_store.save_quote(_quote("q2"))
        assert [q.id for q in quote_store.get_quotes()] == ["q2", "q1"]

    def test_round_trip(self, tmp_data_dir):
        QuoteStore(tmp_data_dir).save_quote(_quote("q1"))
        assert QuoteStore(tmp_data_dir).get_quotes() == [_quote("q1")]

    def test_corrupted_file_reads_as_empty(self, quote_store):
        quote_store.path.write_text("[", encoding="utf-8")
        assert quote_store.get_quotes() == []

    def test_infinite_timestamp_is_skipped(self, quote_store):
        bad = _quote("bad").to_dict()
        bad["submittedAt"] = float("inf")
        quote_store.path.write_text(
            json.dumps([bad, _quote("good").to_dict()]), encoding="utf-8"
        )
        assert [q.id for q in quote_store.get_quotes()] == ["good"]
