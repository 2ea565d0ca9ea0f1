"""
Hyprland window manager interface for MinHypr.
"""
import json
import logging
import subprocess
from dataclasses import dataclass
from typing import Dict, List, Optional, Set

logger = logging.getLogger(__name__)


def _stringify(value) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, bool) or value is None or isinstance(value, dict):
        return json.dumps(value)
    if isinstance(value, list):
        return ",".join(_stringify(item) for item in value)
    return str(value)


def parse_window_info(info: str) -> Dict[str, str]:
    """Parse a hyprctl key/value blob into a mapping of strings.

    JSON objects are parsed strictly. Anything else goes through a
    permissive split on ',' and the first ':', which mangles values that
    themselves contain commas or colons.
    """
    try:
        data = json.loads(info)
    except (TypeError, ValueError):
        data = None

    if isinstance(data, dict):
        return {str(key): _stringify(value) for key, value in data.items()}

    result = {}
    content = (info or "").strip()
    if content.startswith("{"):
        content = content[1:]
    if content.endswith("}"):
        content = content[:-1]

    for pair in content.split(","):
        key, sep, value = pair.partition(":")
        if not sep:
            continue
        clean_key = key.strip().strip('"')
        if clean_key:
            result[clean_key] = value.strip().strip('"')

    return result


def _parse_pair(value: Optional[str]) -> Optional[List[int]]:
    if not value:
        return None
    try:
        numbers = [int(part.strip()) for part in value.split(",")]
    except ValueError:
        return None
    return numbers if len(numbers) == 2 else None


@dataclass
class ActiveWindow:
    """Typed view of `hyprctl activewindow -j`"""

    address: str
    class_name: str
    title: str
    at: Optional[str] = None
    size: Optional[str] = None

    @classmethod
    def from_info(cls, info: Dict[str, str]) -> Optional["ActiveWindow"]:
        address = info.get("address")
        class_name = info.get("class")
        title = info.get("title")
        if not address or class_name is None or title is None:
            return None
        return cls(
            address=address,
            class_name=class_name,
            title=title,
            at=info.get("at"),
            size=info.get("size"),
        )

    @property
    def geometry(self) -> Optional[str]:
        """Region string for grim: 'X,Y WxH'"""
        at = _parse_pair(self.at)
        size = _parse_pair(self.size)
        if not at or not size or size[0] <= 0 or size[1] <= 0:
            return None
        return f"{at[0]},{at[1]} {size[0]}x{size[1]}"


class WindowManager:
    """Handles Hyprland queries and dispatches through hyprctl"""

    def __init__(self, timeout: Optional[float] = None):
        self.timeout = timeout

    def run_hyprctl(self, command: List[str]) -> Optional[str]:
        """Run hyprctl command and return output, or None on failure"""
        try:
            result = subprocess.run(
                ["hyprctl"] + command,
                capture_output=True,
                text=True,
                check=True,
                timeout=self.timeout,
            )
            return result.stdout.strip()
        except subprocess.CalledProcessError as e:
            logger.warning(f"hyprctl command failed: {e}")
        except subprocess.TimeoutExpired:
            logger.warning(f"hyprctl {' '.join(command)} timed out")
        except OSError as e:
            logger.warning(f"Could not run hyprctl: {e}")
        return None

    def _query_json(self, command: List[str]):
        output = self.run_hyprctl(command + ["-j"])
        if not output:
            return None
        try:
            return json.loads(output)
        except json.JSONDecodeError:
            logger.warning(f"hyprctl {command[0]} returned invalid JSON")
            return None

    def get_active_window(self) -> Optional[ActiveWindow]:
        output = self.run_hyprctl(["activewindow", "-j"])
        if not output:
            return None
        return ActiveWindow.from_info(parse_window_info(output))

    def get_active_workspace_id(self) -> Optional[int]:
        output = self.run_hyprctl(["activeworkspace", "-j"])
        if not output:
            return None
        try:
            return int(parse_window_info(output).get("id", ""))
        except ValueError:
            return None

    def get_clients(self) -> Optional[List[dict]]:
        clients = self._query_json(["clients"])
        if not isinstance(clients, list):
            return None
        return [client for client in clients if isinstance(client, dict)]

    def get_client_addresses(self) -> Optional[Set[str]]:
        """Addresses of every open window"""
        clients = self.get_clients()
        if clients is None:
            return None
        return {client["address"] for client in clients if client.get("address")}

    def get_workspace_addresses(self, workspace_name: str) -> Optional[Set[str]]:
        """Addresses of the windows assigned to the named workspace"""
        clients = self.get_clients()
        if clients is None:
            return None

        addresses = set()
        for client in clients:
            workspace = client.get("workspace")
            if isinstance(workspace, dict) and workspace.get("name") == workspace_name:
                if client.get("address"):
                    addresses.add(client["address"])
        return addresses

    def dispatch(self, *args: str) -> bool:
        output = self.run_hyprctl(["dispatch"] + list(args))
        if output is None:
            return False
        if output and output.lower() != "ok":
            logger.warning(f"hyprctl dispatch {' '.join(args)}: {output}")
            return False
        return True

    def move_to_workspace(self, address: str, workspace: str, silent: bool = False) -> bool:
        dispatcher = "movetoworkspacesilent" if silent else "movetoworkspace"
        return self.dispatch(dispatcher, f"{workspace},address:{address}")

    def focus_window(self, address: str) -> bool:
        return self.dispatch("focuswindow", f"address:{address}")
