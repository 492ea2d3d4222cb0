"""Shared test fixtures for VideoWall Sizer."""

import pytest
from pathlib import Path


@pytest.fixture
def tmp_config_dir(tmp_path):
    """Provide a temporary configuration directory."""
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    return config_dir


@pytest.fixture
def tmp_data_dir(tmp_path):
    """Provide a temporary directory for history and quote files."""
    data_dir = tmp_path / "data"
    data_dir.mkdir()
    return data_dir


@pytest.fixture
def config_manager(tmp_config_dir):
    """Provide a ConfigManager with a temp directory."""
    from videowall.config.manager import ConfigManager

    mgr = ConfigManager(config_dir=tmp_config_dir)
    mgr.load()
    return mgr


@pytest.fixture
def history_store(tmp_data_dir):
    from videowall.core.storage import HistoryStore

    return HistoryStore(tmp_data_dir)


@pytest.fixture
def quote_store(tmp_data_dir):
    from videowall.core.storage import QuoteStore

    return QuoteStore(tmp_data_dir)


@pytest.fixture
def session(history_store, quote_store):
    from videowall.core.session import WallSession

    return WallSession(history_store, quote_store)


@pytest.fixture
def project_root():
    """Return the project root directory."""
    return Path(__file__).parent.parent
