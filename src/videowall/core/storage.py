"""Local persistence for saved selections and quote requests.

Each collection is a JSON array in its own file, newest entry first.
Writes replace the whole file (last write wins). Unreadable or corrupted
files are treated as empty rather than raised to the caller.
"""

import json
from pathlib import Path
from typing import Any, Callable, Generic, TypeVar

from loguru import logger
from platformdirs import user_data_dir

from videowall.core.records import QuoteRequest, SavedSelection


SELECTIONS_KEY = "videowall_selections"
QUOTES_KEY = "videowall_quotes"

T = TypeVar("T")


def default_data_dir() -> Path:
    return Path(user_data_dir("VideoWall", "VideoWall"))


class JsonListStore(Generic[T]):
    """A list of records kept in `<data_dir>/<key>.json`."""

    def __init__(
        self,
        data_dir: str | Path,
        key: str,
        decode: Callable[[dict[str, Any]], T],
        encode: Callable[[T], dict[str, Any]],
    ):
        self._path = Path(data_dir) / f"{key}.json"
        self._decode = decode
        self._encode = encode

    @property
    def path(self) -> Path:
        return self._path

    def read(self) -> list[T]:
        """Load all records. Returns [] if the file is missing or corrupted."""
        if not self._path.exists():
            return []
        try:
            with open(self._path, "r", encoding="utf-8") as f:
                raw = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning(f"Could not read {self._path.name}, treating as empty: {e}")
            return []

        if not isinstance(raw, list):
            logger.warning(f"{self._path.name} does not hold a list, treating as empty")
            return []

        records = []
        for entry in raw:
            try:
                records.append(self._decode(entry))
            except (KeyError, TypeError, ValueError, AttributeError, OverflowError) as e:
                logger.warning(f"Skipping malformed entry in {self._path.name}: {e}")
        return records

    def write(self, records: list[T]):
        """Replace the stored records."""
        self._path.parent.mkdir(parents=True, exist_ok=True)
        with open(self._path, "w", encoding="utf-8") as f:
            json.dump([self._encode(r) for r in records], f, indent=2)
        logger.debug(f"Wrote {len(records)} records to {self._path}")


class HistoryStore:
    """Confirmed wall selections, newest first, without duplicate walls."""

    def __init__(self, data_dir: str | Path | None = None):
        self._store = JsonListStore(
            data_dir or default_data_dir(),
            SELECTIONS_KEY,
            SavedSelection.from_dict,
            SavedSelection.to_dict,
        )

    @property
    def path(self) -> Path:
        return self._store.path

    def get_selections(self) -> list[SavedSelection]:
        return self._store.read()

    def save_selection(self, selection: SavedSelection) -> bool:
        """Prepend `selection` unless the same wall is already saved.

        Returns True if the selection was stored.
        """
        existing = self._store.read()
        if any(s.same_wall(selection) for s in existing):
            logger.info(
                f"Selection {selection.cols}x{selection.rows} "
                f"{selection.cabinet_type.value} already in history"
            )
            return False
        existing.insert(0, selection)
        self._store.write(existing)
        logger.info(f"Saved selection {selection.id}")
        return True

    def delete_selection(self, selection_id: str):
        existing = self._store.read()
        self._store.write([s for s in existing if s.id != selection_id])
        logger.info(f"Deleted selection {selection_id}")


class QuoteStore:
    """Quote requests captured locally, newest first."""

    def __init__(self, data_dir: str | Path | None = None):
        self._store = JsonListStore(
            data_dir or default_data_dir(),
            QUOTES_KEY,
            QuoteRequest.from_dict,
            QuoteRequest.to_dict,
        )

    @property
    def path(self) -> Path:
        return self._store.path

    def get_quotes(self) -> list[QuoteRequest]:
        return self._store.read()

    def save_quote(self, quote: QuoteRequest):
        existing = self._store.read()
        existing.insert(0, quote)
        self._store.write(existing)
        logger.info(f"Saved quote request {quote.id}")
