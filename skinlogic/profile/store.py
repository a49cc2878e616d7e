"""
Record Store
============
Persistence seam for profiles and daily logs, keyed by user id.

InMemoryRecordStore backs tests and local runs. FastAPI executes sync
endpoints in a threadpool, so all access goes through one lock.
"""

import logging
import threading
from typing import Dict, List, Optional, Protocol

from skinlogic.tracking.models import DailyLog

from .models import UserProfile

logger = logging.getLogger(__name__)


class RecordStore(Protocol):
    def get_profile(self, user_id: str) -> Optional[UserProfile]: ...

    def upsert_profile(self, user_id: str, profile: UserProfile) -> None: ...

    def list_logs(self, user_id: str) -> List[DailyLog]: ...

    def insert_log(self, user_id: str, log: DailyLog) -> None: ...


class InMemoryRecordStore:
    def __init__(self):
        self._lock = threading.Lock()
        self._profiles: Dict[str, UserProfile] = {}
        self._logs: Dict[str, List[DailyLog]] = {}

    def get_profile(self, user_id: str) -> Optional[UserProfile]:
        with self._lock:
            return self._profiles.get(user_id)

    def upsert_profile(self, user_id: str, profile: UserProfile) -> None:
        with self._lock:
            self._profiles[user_id] = profile
        logger.debug(f"Upserted profile for {user_id}")

    def list_logs(self, user_id: str) -> List[DailyLog]:
        """Logs in insertion order. Callers sort with sort_logs."""
        with self._lock:
            return list(self._logs.get(user_id, []))

    def insert_log(self, user_id: str, log: DailyLog) -> None:
        with self._lock:
            self._logs.setdefault(user_id, []).append(log)
        logger.debug(f"Inserted log {log.id} for {user_id}")
