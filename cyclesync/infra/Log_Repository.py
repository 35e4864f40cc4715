"""Log repository: loads, normalizes and saves the whole journal."""
import logging
from typing import Any, Dict, List, Optional

from cyclesync.domain.LogEntry import LogEntry
from cyclesync.infra import paths
from cyclesync.infra.Json_Store import JsonFileStore
from cyclesync.logic.logs import journal
from cyclesync.logic.logs.normalizer import normalize_log_entry
from cyclesync.utilities.constants import STORAGE_KEY_LOGS

logger = logging.getLogger(__name__)


class LogRepository:
    def __init__(self, store: Optional[JsonFileStore] = None):
        self.store = store or JsonFileStore(paths.DATA_DIR)

    def load_logs(self) -> List[LogEntry]:
        """Every stored record passed through the normalizer; no data means an empty journal.

        Records stored without an id get one here and the journal is saved
        back once, so the id stays the same on the next load.
        """
        raw = self.store.load(STORAGE_KEY_LOGS, [])
        if not isinstance(raw, list):
            logger.warning("Stored logs are not a list; treating as empty")
            return []
        logs = [normalize_log_entry(item) for item in raw]
        if any(not isinstance(item, dict) or item.get("id") is None for item in raw):
            self.save_logs(logs)
            logger.info("Assigned ids to stored log entries that had none")
        return logs

    def save_logs(self, logs: List[LogEntry]) -> None:
        self.store.save(STORAGE_KEY_LOGS, [entry.to_dict() for entry in logs])

    def add(self, entry: LogEntry) -> LogEntry:
        self.save_logs(journal.add_log(self.load_logs(), entry))
        logger.info("Log entry %s created for %s", entry.id, entry.date or "(no date)")
        return entry

    def update(self, entry_id: str, patch: Dict[str, Any]) -> Optional[LogEntry]:
        """Patch one entry; returns the updated entry or None if the id is unknown."""
        logs = self.load_logs()
        if journal.find_log(logs, entry_id) is None:
            return None
        logs = journal.update_log(logs, entry_id, patch)
        self.save_logs(logs)
        return journal.find_log(logs, entry_id)

    def remove(self, entry_id: str) -> bool:
        logs = self.load_logs()
        remaining = journal.remove_log(logs, entry_id)
        if len(remaining) == len(logs):
            return False
        self.save_logs(remaining)
        return True

    def for_date(self, date_str: str) -> List[LogEntry]:
        return journal.entries_for_date(self.load_logs(), date_str)
