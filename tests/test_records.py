"""Tests for persisted records and contact validation."""

import pytest

from videowall.core.catalog import CabinetType
from videowall.core.records import (
    InputParams,
    QuoteRequest,
    SavedSelection,
    validate_contact,
)
from videowall.core.solver import Combo, Config, Param
from videowall.core.units import Unit


class TestSavedSelection:
    def test_from_config_copies_geometry(self):
        config = Config.from_grid(5, 9, CabinetType.SQUARE)
        params = InputParams(Combo.HEIGHT_WIDTH, {Param.HEIGHT: 2500.0, Param.WIDTH: 4500.0}, Unit.METERS)
        selection = SavedSelection.from_config(config, params)

        assert selection.id
        assert selection.saved_at > 0
        assert (selection.rows, selection.cols, selection.total_cabinets) == (5, 9, 45)
        assert selection.width_mm == 4500
        assert selection.to_config() == config

    def test_dict_round_trip(self):
        selection = SavedSelection.from_config(
            Config.from_grid(7, 7, CabinetType.WIDE),
            InputParams(Combo.AR_HEIGHT, {Param.ASPECT_RATIO: 16 / 9, Param.HEIGHT: 2540.0}, Unit.INCHES),
            selection_id="abc",
            saved_at=1234,
        )
        assert SavedSelection.from_dict(selection.to_dict()) == selection

    def test_same_wall_ignores_id_and_time(self):
        params = InputParams(Combo.HEIGHT_WIDTH, {Param.HEIGHT: 1.0, Param.WIDTH: 1.0})
        a = SavedSelection.from_config(Config.from_grid(2, 2, CabinetType.WIDE), params, "a", 1)
        b = SavedSelection.from_config(Config.from_grid(2, 2, CabinetType.WIDE), params, "b", 2)
        c = SavedSelection.from_config(Config.from_grid(2, 2, CabinetType.SQUARE), params, "c", 3)
        assert a.same_wall(b)
        assert not a.same_wall(c)


class TestValidateContact:
    def test_valid_email(self):
        assert validate_contact("Sam", "email", "sam@example.com") == {}

    def test_valid_phone(self):
        assert validate_contact("Sam", "phone", "+1 (555) 123-4567") == {}

    def test_name_required(self):
        assert validate_contact("   ", "email", "sam@example.com") == {"name": "Name is required"}

    @pytest.mark.parametrize("value", ["", "sam", "sam@example", "sam @example.com"])
    def test_bad_email(self, value):
        assert validate_contact("Sam", "email", value)["contact"] == "Enter a valid email address"

    @pytest.mark.parametrize("value", ["", "12345", "555-CALL-NOW", "  1234  "])
    def test_bad_phone(self, value):
        assert validate_contact("Sam", "phone", value)["contact"] == "Enter a valid phone number"

    def test_unknown_method(self):
        assert "contact" in validate_contact("Sam", "fax", "123")


class TestQuoteRequest:
    def test_create_trims_fields(self):
        quote = QuoteRequest.create("  Sam  ", "email", "sam@example.com", "sel-1")
        assert quote.name == "Sam"
        assert quote.selection_id == "sel-1"
        assert quote.contact_method == "email"
        assert quote.id and quote.submitted_at > 0

    def test_create_rejects_invalid(self):
        with pytest.raises(ValueError, match="Name is required"):
            QuoteRequest.create("", "email", "sam@example.com")

    def test_dict_round_trip(self):
        quote = QuoteRequest.create("Sam", "phone", "555 123 4567")
        data = quote.to_dict()
        assert data["contactMethod"] == "phone"
        assert data["selectionId"] is None
        assert QuoteRequest.from_dict(data) == quote

    def test_from_dict_rejects_unknown_method(self):
        data = QuoteRequest.create("Sam", "phone", "555 123 4567").to_dict()
        data["contactMethod"] = "pigeon"
        with pytest.raises(ValueError):
            QuoteRequest.from_dict(data)
