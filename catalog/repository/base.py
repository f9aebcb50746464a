from __future__ import annotations

import logging
import threading
from typing import Callable, Optional

from ..errors import NotInitializedError

logger = logging.getLogger(__name__)


class RepoState:
    UNINITIALIZED = "UNINITIALIZED"
    READY = "READY"
    FAILED = "FAILED"


class InitGuard:
    """
    Run a function exactly once. Concurrent callers block until the first run
    finishes; every caller, then and later, sees its outcome (the same exception
    instance when it failed). The function is never re-run once it has returned
    or raised an Exception; a BaseException such as KeyboardInterrupt leaves the
    guard open so the next caller runs it again.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._done = False
        self._error: Optional[Exception] = None

    def run(self, fn: Callable[[], None]):
        with self._lock:
            if not self._done:
                try:
                    fn()
                except Exception as e:
                    self._error = e
                self._done = True
        if self._error is not None:
            raise self._error


class CatalogRepo:
    """Shared lifecycle: UNINITIALIZED -> READY (or FAILED) exactly once via init()."""

    name = "catalog"

    def __init__(self, db_path: str, seed_count: int = 100):
        self.db_path = db_path
        self.seed_count = seed_count
        self.state = RepoState.UNINITIALIZED
        self._init = InitGuard()

    def init(self):
        self._init.run(self._init_once)

    def _init_once(self):
        logger.info("seeding %s repository at %s", self.name, self.db_path)
        try:
            self.seed()
        except Exception:
            # partial seed is not rolled back; the repo stays unusable
            self.state = RepoState.FAILED
            logger.exception("seeding %s repository failed", self.name)
            raise
        self.state = RepoState.READY
        logger.info("%s repository ready", self.name)

    def seed(self):
        raise NotImplementedError

    def _require_ready(self):
        if self.state != RepoState.READY:
            raise NotInitializedError(self.name)
