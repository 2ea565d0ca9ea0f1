"""
Minimize and restore operations for MinHypr.
"""
import logging
from typing import Callable, Dict, List, Optional

from .config import Config
from .constants import DEFAULT_WORKSPACE
from .lock import StoreLock
from .notify import status_record
from .reconcile import Reconciler
from .window import MinimizedWindow, find_window

logger = logging.getLogger(__name__)


class MinimizeManager:
    """Drives minimize/restore against Hyprland and the store"""

    def __init__(self, config: Config, window_manager, store, preview, notifier,
                 reconciler: Optional[Reconciler] = None, lock=None):
        self.config = config
        self.window_manager = window_manager
        self.store = store
        self.preview = preview
        self.notifier = notifier
        self.lock = lock if lock is not None else StoreLock(config.lock_file)
        self.reconciler = reconciler or Reconciler(
            store, window_manager, notifier, config.hidden_workspace_name, lock=self.lock
        )

    def minimize(self) -> bool:
        """Minimize the active window. Returns True if it was minimized."""
        window = self.window_manager.get_active_window()
        if window is None:
            logger.warning("No active window to minimize")
            return False

        if window.class_name.lower() in self.config.denylist:
            logger.info(f"Not minimizing {window.class_name} window")
            return False

        workspace = self.window_manager.get_active_workspace_id()
        if workspace is None:
            workspace = DEFAULT_WORKSPACE

        preview_path = self.preview.capture(window.address, window.geometry)
        record = MinimizedWindow.create(
            address=window.address,
            class_name=window.class_name,
            title=window.title,
            workspace=workspace,
            preview_path=preview_path,
        )

        # Move to special workspace
        if not self.window_manager.move_to_workspace(
            window.address, self.config.hidden_workspace_name, silent=True
        ):
            logger.warning(f"Could not move window {window.address} to the hidden workspace")
            if preview_path:
                self.preview.discard(window.address)
            return False

        with self.lock:
            windows = [w for w in self.reconciler.run() if w.address != record.address]
            windows.append(record)
            self.store.save(windows)

        logger.debug(f"Minimized {record.display_label} from workspace {workspace}")
        self.notifier.state_changed()
        return True

    def restore(self, address: str, reconcile: bool = True) -> bool:
        """Restore one window to its original workspace.

        Returns False if the address is not minimized. The record is
        dropped even when Hyprland rejects the dispatches.
        """
        with self.lock:
            windows = self.reconciler.run() if reconcile else self.store.load()
            window = find_window(windows, address)
            if window is None:
                logger.info(f"Window not found in cache: {address}")
                return False

            moved = self.window_manager.move_to_workspace(
                address, str(window.origin_workspace)
            )
            focused = self.window_manager.focus_window(address)
            if not (moved and focused):
                logger.warning(f"Hyprland did not fully restore {address}; forgetting it anyway")

            self.store.save([w for w in windows if w.address != address])

        self.notifier.state_changed()
        return True

    def restore_all(self) -> int:
        """Restore every minimized window, oldest first"""
        addresses = [window.address for window in self.reconciler.run()]
        restored = 0
        for address in addresses:
            if self.restore(address, reconcile=False):
                restored += 1
        return restored

    def restore_last(self) -> bool:
        """Restore the window at the head of the store"""
        windows = self.reconciler.run()
        if not windows:
            return False
        return self.restore(windows[0].address, reconcile=False)

    def choose_and_restore(self, chooser: Callable[[List[MinimizedWindow]], Optional[str]],
                           windows: Optional[List[MinimizedWindow]] = None) -> bool:
        """Let the user pick a window through `chooser` and restore it"""
        if windows is None:
            windows = self.menu_entries()
        if not windows:
            return False

        address = chooser(windows)
        if not address:
            return False
        return self.restore(address)

    def menu_entries(self) -> List[MinimizedWindow]:
        return self.reconciler.run()

    def status(self) -> Dict[str, str]:
        """Waybar status; never reconciles or writes"""
        return status_record(len(self.store.load()))
