"""
Advisory lock around store updates.
"""
import fcntl
import logging
import os

logger = logging.getLogger(__name__)


class StoreLock:
    """Re-entrant flock on a lock file, held for one load-modify-save cycle.

    Invocations that race on the store queue up behind each other instead
    of overwriting each other's changes.
    """

    def __init__(self, path: str):
        self.path = path
        self._fd = None
        self._depth = 0

    @property
    def held(self) -> bool:
        return self._depth > 0

    def acquire(self):
        if self._depth == 0:
            fd = os.open(self.path, os.O_CREAT | os.O_RDWR, 0o644)
            try:
                fcntl.flock(fd, fcntl.LOCK_EX)
            except OSError:
                os.close(fd)
                raise
            self._fd = fd
            logger.debug(f"Acquired store lock {self.path}")
        self._depth += 1

    def release(self):
        if self._depth == 0:
            return
        self._depth -= 1
        if self._depth == 0:
            try:
                fcntl.flock(self._fd, fcntl.LOCK_UN)
            finally:
                os.close(self._fd)
                self._fd = None
            logger.debug(f"Released store lock {self.path}")

    def __enter__(self):
        self.acquire()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.release()
        return False
