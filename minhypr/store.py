"""
Persisted list of minimized windows.
"""
import json
import logging
import os
import tempfile
from typing import List

from .window import MinimizedWindow

logger = logging.getLogger(__name__)


class WindowStore:
    """JSON file holding minimized windows, oldest first.

    The store does not enforce address uniqueness; callers do.
    """

    def __init__(self, path: str):
        self.path = path

    def load(self) -> List[MinimizedWindow]:
        """Read the store; a missing or corrupt file reads as empty"""
        if not os.path.exists(self.path):
            return []

        try:
            with open(self.path, 'r') as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning(f"Discarding unreadable state file {self.path}: {e}")
            return []

        if not isinstance(data, list):
            logger.warning(f"Discarding state file {self.path}: not a list")
            return []

        windows = []
        for item in data:
            try:
                windows.append(MinimizedWindow.from_dict(item))
            except (KeyError, TypeError, ValueError) as e:
                logger.warning(f"Dropping malformed record {item!r}: {e}")
        return windows

    def save(self, windows: List[MinimizedWindow]):
        """Replace the store contents"""
        directory = os.path.dirname(self.path) or "."
        fd, tmp_path = tempfile.mkstemp(dir=directory, prefix=".windows-", suffix=".json")
        try:
            with os.fdopen(fd, 'w') as f:
                json.dump([window.to_dict() for window in windows], f, ensure_ascii=False)
            os.replace(tmp_path, self.path)
        except BaseException:
            try:
                os.unlink(tmp_path)
            except OSError:
                pass
            raise

    def ensure_exists(self):
        if not os.path.exists(self.path):
            self.save([])
