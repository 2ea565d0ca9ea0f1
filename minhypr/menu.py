"""
Rofi integration for MinHypr.
"""
import logging
import os
import re
import subprocess
from typing import List, Mapping, Optional

from .preview import icon_path_for
from .window import MinimizedWindow

logger = logging.getLogger(__name__)

# rofi exits with 1 when the user dismisses the menu
ROFI_CANCELLED = 1

INFO_PATTERN = re.compile(r"info\x1f?(\S+)\s*$")


def icon_reference(window: MinimizedWindow) -> str:
    """Image or icon name rofi should show for a window"""
    if window.preview_path:
        icon_path = icon_path_for(window.preview_path)
        if os.path.exists(icon_path):
            return icon_path
        return window.preview_path
    return window.class_name.lower()


def menu_row(window: MinimizedWindow) -> str:
    """One rofi row: label plus icon and info row options"""
    label = f"[WS:{window.origin_workspace}] {window.display_label}".replace("\n", " ")
    return f"{label}\0icon\x1f{icon_reference(window)}\x1finfo\x1f{window.address}"


def format_menu(windows: List[MinimizedWindow]) -> str:
    return "".join(f"{menu_row(window)}\n" for window in windows)


def selected_address(selection: Optional[str], environ: Optional[Mapping[str, str]] = None) -> Optional[str]:
    """Address picked in rofi script mode.

    rofi passes the row's info in ROFI_INFO; older setups only hand us
    the selected text, which ends in 'info<address>'.
    """
    env = os.environ if environ is None else environ
    if env.get("ROFI_INFO"):
        return env["ROFI_INFO"].strip()

    if selection:
        match = INFO_PATTERN.search(selection)
        if match:
            return match.group(1)
    return None


def choose_with_rofi(windows: List[MinimizedWindow]) -> Optional[str]:
    """Show a rofi dmenu of minimized windows and return the picked address.

    Raises OSError if rofi is missing and CalledProcessError if it fails
    for any reason other than the user cancelling.
    """
    result = subprocess.run(
        [
            "rofi", "-dmenu",
            "-p", "Restore window",
            "-i",  # case insensitive matching
            "-no-custom",
            "-show-icons",
            "-format", "i",
        ],
        input=format_menu(windows),
        capture_output=True,
        text=True,
    )

    if result.returncode == ROFI_CANCELLED:
        return None
    if result.returncode != 0:
        raise subprocess.CalledProcessError(result.returncode, "rofi", result.stdout, result.stderr)

    try:
        index = int(result.stdout.strip())
    except ValueError:
        return None
    if 0 <= index < len(windows):
        return windows[index].address
    return None


def choose_with_gtk(windows: List[MinimizedWindow]) -> Optional[str]:
    """Show the GTK picker; None if GTK cannot be loaded"""
    try:
        from .ui import pick_window
        return pick_window(windows)
    except (ImportError, ValueError, RuntimeError) as e:
        logger.warning(f"GTK picker unavailable: {e}")
        return None


def choose_window(windows: List[MinimizedWindow]) -> Optional[str]:
    """Ask the user which window to restore, rofi first, GTK otherwise"""
    try:
        return choose_with_rofi(windows)
    except (OSError, subprocess.CalledProcessError) as e:
        logger.warning(f"rofi unavailable ({e}); falling back to the GTK picker")

    return choose_with_gtk(windows)
