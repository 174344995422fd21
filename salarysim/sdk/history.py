"""
Simulation history storage.

The history is a single JSON document stored under a fixed key
(history.json in the data directory): a list of results, newest first.

Storage rules
-------------

Append-only:
    The only way the history grows is append(), which prepends. Nothing
    removes, edits or reorders an entry.

Write-through:
    Every append rewrites the whole document before returning, so the file
    always matches the in-memory list. There are no partial or delta writes.
    append() holds a lock across prepend + write so two callers can't
    interleave and lose an entry.

Unreadable storage is an empty history:
    A missing file, invalid JSON, a payload that isn't a list, or an entry
    that doesn't match the result schema all load as []. This is logged as
    a warning, never raised. The next append overwrites the bad document.
"""

import json
import logging
import os
import tempfile
import threading
from pathlib import Path
from typing import List, Optional

from pydantic import ValidationError as PydanticValidationError

from .config import get_data_path
from .schemas import SimulationResult

# Configure logging based on LOG_LEVEL environment variable
_log_level = os.environ.get("LOG_LEVEL", "INFO").upper()
logging.basicConfig(
    level=getattr(logging, _log_level, logging.INFO),
    format="%(asctime)s.%(msecs)03d %(levelname)s: %(message)s",
    datefmt="%H:%M:%S"
)
logger = logging.getLogger(__name__)

HISTORY_KEY = "history"


def get_history_path() -> Path:
    """Get the path of the history document (~/.local/share/salary-sim/history.json)."""
    return get_data_path() / f"{HISTORY_KEY}.json"


class HistoryStore:
    """Newest-first, durably persisted list of simulation results."""

    def __init__(self, path: Optional[Path] = None):
        """
        Args:
            path: History document location (default: get_history_path())
        """
        self.path = Path(path) if path else get_history_path()
        self._results: List[SimulationResult] = []
        self._lock = threading.Lock()

    @property
    def results(self) -> List[SimulationResult]:
        """Current history, newest first (a copy)."""
        return list(self._results)

    def __len__(self) -> int:
        return len(self._results)

    def load(self) -> List[SimulationResult]:
        """Read the persisted history into memory.

        Returns:
            Results newest first; [] if nothing usable is stored
        """
        self._results = self._read()
        return self.results

    def _read(self) -> List[SimulationResult]:
        if not self.path.exists():
            logger.debug(f"No history at {self.path}, starting empty")
            return []

        try:
            with open(self.path, encoding="utf-8") as f:
                payload = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError, OSError) as e:
            logger.warning(f"Ignoring unreadable history {self.path}: {e}")
            return []

        if not isinstance(payload, list):
            logger.warning(
                f"Ignoring history {self.path}: expected a list, got {type(payload).__name__}"
            )
            return []

        try:
            results = [SimulationResult.model_validate(entry) for entry in payload]
        except PydanticValidationError as e:
            logger.warning(f"Ignoring history {self.path}: {e.error_count()} invalid field(s)")
            return []

        logger.debug(f"Loaded {len(results)} simulation(s) from {self.path}")
        return results

    def append(self, result: SimulationResult) -> List[SimulationResult]:
        """Prepend a result and persist the whole history.

        Returns:
            The new history, newest first
        """
        with self._lock:
            updated = [result] + self._results
            self.persist(updated)
            self._results = updated
        return self.results

    def persist(self, results: List[SimulationResult]) -> Path:
        """Serialize the full sequence, replacing any prior content.

        The document is written to a temp file next to the target and moved
        into place, so a crash mid-write leaves the previous history intact.

        Returns:
            Path to the history document
        """
        self.path.parent.mkdir(parents=True, exist_ok=True)
        payload = [r.to_record() for r in results]

        fd, tmp_name = tempfile.mkstemp(
            dir=self.path.parent, prefix=f".{HISTORY_KEY}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(payload, f, indent=2, ensure_ascii=False)
            os.replace(tmp_name, self.path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

        logger.debug(f"Persisted {len(results)} simulation(s) to {self.path}")
        return self.path
