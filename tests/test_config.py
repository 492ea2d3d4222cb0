"""Tests for the configuration system."""

from pathlib import Path

from videowall.config.manager import ConfigManager
from videowall.config.defaults import DEFAULT_CONFIG
from videowall.core.units import Unit


class TestConfigManager:
    def test_load_defaults(self, config_manager):
        """Config loads with default values."""
        assert config_manager.get("general", "default_unit") == "in"
        assert config_manager.get("display", "grid_max_cells") == 50

    def test_set_and_get(self, config_manager):
        config_manager.set("display", "decimal_places", 3)
        assert config_manager.get("display", "decimal_places") == 3

    def test_save_and_reload(self, tmp_config_dir):
        """Config persists across save/load cycles."""
        mgr = ConfigManager(config_dir=tmp_config_dir)
        mgr.load()
        mgr.set("general", "default_unit", "m")
        mgr.save()

        mgr2 = ConfigManager(config_dir=tmp_config_dir)
        mgr2.load()
        assert mgr2.get("general", "default_unit") == "m"
        # Defaults for untouched keys survive the merge
        assert mgr2.get("general", "confirm_toast_seconds") == 3

    def test_corrupted_file_falls_back_to_defaults(self, tmp_config_dir):
        (tmp_config_dir / ConfigManager.CONFIG_FILENAME).write_text("{not json", encoding="utf-8")
        mgr = ConfigManager(config_dir=tmp_config_dir)
        mgr.load()
        assert mgr.get("general", "default_unit") == "in"

    def test_groups(self, config_manager):
        groups = config_manager.groups()
        for group in ("general", "display", "storage", "logging"):
            assert group in groups

    def test_group_labels(self, config_manager):
        assert config_manager.get_group_label("display") == "Display"
        assert config_manager.get_group_label("storage") == "Storage"

    def test_get_group_hides_internal_keys(self, config_manager):
        assert "_label" not in config_manager.get_group("general")

    def test_listener_called(self, config_manager):
        """Config change listeners are notified."""
        changes = []
        config_manager.add_listener(
            lambda group, key, new, old: changes.append((group, key, new, old))
        )
        config_manager.set("display", "decimal_places", 1)
        config_manager.set("display", "decimal_places", 1)
        assert changes == [("display", "decimal_places", 1, 2)]

    def test_default_unit(self, config_manager):
        assert config_manager.default_unit() == Unit.INCHES
        config_manager.set("general", "default_unit", "ft")
        assert config_manager.default_unit() == Unit.FEET

    def test_unknown_default_unit_falls_back_to_inches(self, config_manager):
        config_manager.set("general", "default_unit", "furlongs")
        assert config_manager.default_unit() == Unit.INCHES

    def test_data_dir_override(self, config_manager, tmp_path):
        config_manager.set("storage", "data_directory", str(tmp_path / "walls"))
        assert config_manager.data_dir() == Path(tmp_path / "walls")

    def test_default_config_has_labels(self):
        """Every default config group has a _label."""
        for group, values in DEFAULT_CONFIG.items():
            assert "_label" in values, f"Group '{group}' missing _label"
