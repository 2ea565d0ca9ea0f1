"""
Status bar notifications for MinHypr.
"""
import logging
import subprocess
from typing import Dict, Optional

from .constants import STATUS_ICON

logger = logging.getLogger(__name__)


def status_record(count: int) -> Dict[str, str]:
    """Waybar custom module payload for the given minimized count"""
    if count > 0:
        return {
            "text": f"{STATUS_ICON} {count}",
            "class": "has-windows",
            "tooltip": f"{count} minimized windows",
        }
    return {
        "text": STATUS_ICON,
        "class": "empty",
        "tooltip": "No minimized windows",
    }


class WaybarNotifier:
    """Tells waybar to refresh its minimized-windows module"""

    def __init__(self, signal: str, timeout: Optional[float] = None):
        self.signal = signal
        self.timeout = timeout

    def state_changed(self):
        # Fire and forget; waybar may not be running at all
        try:
            subprocess.run(
                ["pkill", f"-{self.signal}", "waybar"],
                capture_output=True,
                timeout=self.timeout,
            )
        except (OSError, subprocess.TimeoutExpired) as e:
            logger.debug(f"Could not signal waybar: {e}")
