"""
Test doubles for the Hyprland side of MinHypr.
"""
import os
import shutil
import tempfile

from minhypr.config import Config
from minhypr.window import MinimizedWindow


def make_config(root: str) -> Config:
    return Config(
        state_dir=os.path.join(root, "state"),
        preview_dir=os.path.join(root, "previews"),
        config_dir=os.path.join(root, "config"),
    )


def make_record(address: str, workspace: int = 1, class_name: str = "kitty",
                title: str = "shell") -> MinimizedWindow:
    return MinimizedWindow.create(address, class_name, title, workspace)


class TempDirMixin:
    """Gives each test a scratch directory"""

    def make_tempdir(self) -> str:
        path = tempfile.mkdtemp(prefix="minhypr-test-")
        self.addCleanup(shutil.rmtree, path, True)
        return path


class FakeWindowManager:
    """In-memory Hyprland: clients map address to workspace name"""

    def __init__(self, active=None, workspace_id=3):
        self.active = active
        self.workspace_id = workspace_id
        self.clients = {}
        self.commands = []
        self.queries = 0
        self.queries_fail = False
        self.moves_fail = False
        self.focus_fails = False

    def get_active_window(self):
        return self.active

    def get_active_workspace_id(self):
        return self.workspace_id

    def get_client_addresses(self):
        self.queries += 1
        if self.queries_fail:
            return None
        return set(self.clients)

    def get_workspace_addresses(self, workspace_name):
        self.queries += 1
        if self.queries_fail:
            return None
        return {address for address, name in self.clients.items() if name == workspace_name}

    def move_to_workspace(self, address, workspace, silent=False):
        self.commands.append(("move", address, workspace, silent))
        if self.moves_fail:
            return False
        if address in self.clients:
            self.clients[address] = workspace
        return True

    def focus_window(self, address):
        self.commands.append(("focus", address))
        return not self.focus_fails


class FakePreview:
    def __init__(self, result=None):
        self.result = result
        self.calls = []
        self.discarded = []

    def capture(self, window_id, geometry):
        self.calls.append((window_id, geometry))
        return self.result

    def discard(self, window_id):
        self.discarded.append(window_id)


class FakeNotifier:
    def __init__(self):
        self.count = 0

    def state_changed(self):
        self.count += 1
