"""
Runtime configuration for MinHypr.
"""
import logging
import os
from typing import Mapping, Optional, Sequence

from .constants import (
    CACHE_DIR,
    CACHE_FILE_NAME,
    COMMAND_TIMEOUT,
    CONFIG_DIR,
    DENYLIST,
    HIDDEN_WORKSPACE,
    IMAGE_COMMAND,
    LOCK_FILE_NAME,
    PREVIEW_DIR,
    WAYBAR_SIGNAL,
)

logger = logging.getLogger(__name__)


class Config:
    """Paths and tunables, built once per invocation and passed around"""

    def __init__(
        self,
        state_dir: str = CACHE_DIR,
        preview_dir: str = PREVIEW_DIR,
        config_dir: str = CONFIG_DIR,
        hidden_workspace: str = HIDDEN_WORKSPACE,
        denylist: Sequence[str] = DENYLIST,
        command_timeout: Optional[float] = COMMAND_TIMEOUT,
        waybar_signal: str = WAYBAR_SIGNAL,
        image_command: str = IMAGE_COMMAND,
    ):
        self.state_dir = state_dir
        self.preview_dir = preview_dir
        self.config_dir = os.path.expanduser(config_dir)
        self.hidden_workspace = hidden_workspace
        self.denylist = tuple(name.lower() for name in denylist)
        self.command_timeout = command_timeout
        self.waybar_signal = waybar_signal
        self.image_command = image_command

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Config":
        """Build a config from MINHYPR_* environment variables"""
        env = os.environ if environ is None else environ
        kwargs = {}

        for key, name in (
            ("state_dir", "MINHYPR_STATE_DIR"),
            ("preview_dir", "MINHYPR_PREVIEW_DIR"),
            ("config_dir", "MINHYPR_CONFIG_DIR"),
            ("waybar_signal", "MINHYPR_WAYBAR_SIGNAL"),
            ("image_command", "MINHYPR_IMAGE_COMMAND"),
        ):
            if env.get(name):
                kwargs[key] = env[name]

        workspace = env.get("MINHYPR_HIDDEN_WORKSPACE")
        if workspace:
            if workspace.startswith("special:"):
                workspace = workspace[len("special:"):]
            kwargs["hidden_workspace"] = workspace

        timeout = env.get("MINHYPR_TIMEOUT")
        if timeout:
            try:
                value = float(timeout)
                kwargs["command_timeout"] = value if value > 0 else None
            except ValueError:
                logger.warning(f"Ignoring invalid MINHYPR_TIMEOUT: {timeout!r}")

        return cls(**kwargs)

    @property
    def state_file(self) -> str:
        return os.path.join(self.state_dir, CACHE_FILE_NAME)

    @property
    def lock_file(self) -> str:
        return os.path.join(self.state_dir, LOCK_FILE_NAME)

    @property
    def hidden_workspace_name(self) -> str:
        """Full Hyprland name of the hidden workspace"""
        return f"special:{self.hidden_workspace}"

    def ensure_dirs(self):
        """Create the state and preview directories.

        Raises OSError when the filesystem refuses; that is fatal.
        """
        os.makedirs(self.state_dir, exist_ok=True)
        os.makedirs(self.preview_dir, exist_ok=True)
