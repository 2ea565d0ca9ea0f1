"""
Window records for MinHypr.
"""
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence, Tuple

from .constants import ICONS


def get_app_icon(class_name: str, icons: Sequence[Tuple[str, str]] = ICONS) -> str:
    """Get icon for a window class; the last table row is the fallback"""
    class_lower = (class_name or "").lower()

    for app_name, app_icon in icons:
        if app_name.lower() in class_lower:
            return app_icon

    return icons[-1][1]


def short_address(address: str) -> str:
    """Last four characters of an address, reversed"""
    return address[::-1][:4]


@dataclass
class MinimizedWindow:
    """One minimized window as persisted in the store"""

    address: str
    display_label: str
    class_name: str
    original_title: str
    preview_path: Optional[str]
    icon: str
    origin_workspace: int

    @classmethod
    def create(
        cls,
        address: str,
        class_name: str,
        title: str,
        workspace: int,
        preview_path: Optional[str] = None,
        icons: Sequence[Tuple[str, str]] = ICONS,
    ) -> "MinimizedWindow":
        """Build a record, resolving the icon and display label once"""
        icon = get_app_icon(class_name, icons)
        return cls(
            address=address,
            display_label=f"{icon} {class_name} - {title} [{short_address(address)}]",
            class_name=class_name,
            original_title=title,
            preview_path=preview_path,
            icon=icon,
            origin_workspace=workspace,
        )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MinimizedWindow":
        """Load a record from its JSON form.

        Raises KeyError, TypeError or ValueError on malformed data.
        """
        if not isinstance(data, dict):
            raise TypeError(f"expected an object, got {type(data).__name__}")

        address = data["address"]
        if not isinstance(address, str) or not address:
            raise ValueError("record has no address")

        preview = data.get("preview_path")
        return cls(
            address=address,
            display_label=str(data["display_label"]),
            class_name=str(data["class"]),
            original_title=str(data.get("original_title", "")),
            preview_path=str(preview) if preview else None,
            icon=str(data.get("icon", "")),
            origin_workspace=int(data["origin_workspace"]),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "address": self.address,
            "display_label": self.display_label,
            "class": self.class_name,
            "original_title": self.original_title,
            "preview_path": self.preview_path,
            "icon": self.icon,
            "origin_workspace": self.origin_workspace,
        }


def find_window(windows: List[MinimizedWindow], address: str) -> Optional[MinimizedWindow]:
    for window in windows:
        if window.address == address:
            return window
    return None
