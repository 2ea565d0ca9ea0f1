"""
Keeps the minimized-window store in line with Hyprland's live state.

A record survives a pass only when its window is still open and still
sits on the hidden workspace. If Hyprland cannot be queried the store is
left alone: dropping valid records is worse than keeping stale ones,
which the next pass will clean up.
"""
import logging
from typing import Iterable, List, Optional, Set, Tuple

from .window import MinimizedWindow

logger = logging.getLogger(__name__)


def reconcile(
    windows: List[MinimizedWindow],
    open_addresses: Optional[Set[str]],
    hidden_addresses: Optional[Set[str]],
) -> Tuple[List[MinimizedWindow], bool]:
    """Filter records against two live snapshots.

    Returns the kept records and whether anything was dropped.
    """
    if open_addresses is None or hidden_addresses is None:
        return list(windows), False

    kept = []
    for window in windows:
        if window.address in open_addresses and window.address in hidden_addresses:
            kept.append(window)
        else:
            logger.info(f"Forgetting window {window.address}: no longer minimized")

    return kept, len(kept) != len(windows)


class Reconciler:
    """Runs reconciliation passes against the store"""

    def __init__(self, store, window_manager, notifier, hidden_workspace: str, lock=None):
        self.store = store
        self.window_manager = window_manager
        self.notifier = notifier
        self.hidden_workspace = hidden_workspace
        self.lock = lock

    def snapshots(self) -> Tuple[Optional[Set[str]], Optional[Set[str]]]:
        open_addresses = self.window_manager.get_client_addresses()
        if open_addresses is None:
            return None, None
        hidden_addresses = self.window_manager.get_workspace_addresses(self.hidden_workspace)
        return open_addresses, hidden_addresses

    def run(self, windows: Optional[Iterable[MinimizedWindow]] = None) -> List[MinimizedWindow]:
        """Purge stale records; returns the reconciled list"""
        if self.lock is not None:
            with self.lock:
                return self._run(windows)
        return self._run(windows)

    def _run(self, windows):
        windows = self.store.load() if windows is None else list(windows)
        if not windows:
            return windows

        open_addresses, hidden_addresses = self.snapshots()
        if open_addresses is None or hidden_addresses is None:
            logger.warning("Could not query Hyprland; keeping minimized windows as they are")
            return windows

        kept, changed = reconcile(windows, open_addresses, hidden_addresses)
        if changed:
            self.store.save(kept)
            self.notifier.state_changed()
        return kept
