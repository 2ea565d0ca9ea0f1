"""
Command line entry point for MinHypr.
"""
import argparse
import json
import logging
import os
import sys
from typing import List, Optional

from .config import Config
from .hyprland import WindowManager
from .manager import MinimizeManager
from .menu import choose_window, format_menu, selected_address
from .notify import WaybarNotifier
from .preview import PreviewCapture
from .scaffold import keybinds, write_rofi_config
from .store import WindowStore

logger = logging.getLogger(__name__)

USAGE = """Usage: minhypr <command> [window_id]
Available commands:
  minimize       - Minimize active window
  restore        - Show menu to restore windows
  restore <id>   - Restore specific window
  restore-all    - Restore all windows
  restore-last   - Restore the longest minimized window
  show           - Show status for waybar
  setup-rofi     - Configure integration with Rofi
  show-rofi      - Internal script used by Rofi"""


def setup_logging(verbose: bool = False):
    # stdout belongs to waybar and rofi
    debug = verbose or os.environ.get("MINHYPR_DEBUG") == "1"
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format='%(asctime)s - %(levelname)s - %(message)s',
        stream=sys.stderr
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="minhypr",
        description="Window minimization manager for Hyprland",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=USAGE,
    )
    parser.add_argument("command", nargs="?", default="", help="command to run")
    parser.add_argument("args", nargs="*", help="command arguments")
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="log debug output to stderr")
    return parser


def build_manager(config: Config, store: WindowStore) -> MinimizeManager:
    return MinimizeManager(
        config,
        WindowManager(timeout=config.command_timeout),
        store,
        PreviewCapture(config),
        WaybarNotifier(config.waybar_signal, timeout=config.command_timeout),
    )


def cmd_restore(manager: MinimizeManager, address: Optional[str]):
    if address:
        print(f"Restoring window: {address}")
        if not manager.restore(address):
            print(f"Window not found in cache: {address}")
        return

    windows = manager.menu_entries()
    if not windows:
        print("No minimized windows")
        return
    manager.choose_and_restore(choose_window, windows)


def cmd_show_rofi(manager: MinimizeManager, selection: Optional[str]):
    # rofi script mode: ROFI_RETV=1 means an entry was picked
    if selection is not None or os.environ.get("ROFI_RETV") == "1":
        address = selected_address(selection)
        if address:
            manager.restore(address)
        else:
            logger.warning(f"Could not find a window address in {selection!r}")
        return

    windows = manager.menu_entries()
    if not windows:
        sys.stdout.write("\0message\x1fNo minimized windows\n")
        return
    sys.stdout.write(format_menu(windows))


def cmd_setup_rofi(config: Config):
    written = write_rofi_config(config.config_dir)
    print(f"Rofi configuration generated in: {config.config_dir}")
    print("Generated files:")
    for path in written:
        print(f"  {path}")

    print("\nYou can add these shortcuts to your Hyprland config:")
    for line in keybinds(config.config_dir):
        print(f"  {line}")


def run_command(command: str, args: List[str], config: Config, store: WindowStore) -> int:
    manager = build_manager(config, store)
    argument = args[0] if args else None

    if command == "minimize":
        manager.minimize()
    elif command == "restore":
        cmd_restore(manager, argument)
    elif command == "restore-all":
        restored = manager.restore_all()
        logger.debug(f"Restored {restored} windows")
    elif command == "restore-last":
        if not manager.restore_last():
            print("No minimized windows to restore")
    elif command == "show":
        print(json.dumps(manager.status(), ensure_ascii=False))
    elif command == "show-rofi":
        cmd_show_rofi(manager, argument)
    elif command == "setup-rofi":
        cmd_setup_rofi(config)
    else:
        print(f"Unknown command: {command}")
        print(USAGE)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point"""
    args, unknown = build_parser().parse_known_args(argv)
    setup_logging(args.verbose)
    if unknown:
        print(f"Unknown command: {' '.join(unknown)}")
        print(USAGE)
        return 0
    config = Config.from_env()

    try:
        config.ensure_dirs()
        store = WindowStore(config.state_file)
        store.ensure_exists()
        return run_command(args.command, args.args, config, store)
    except OSError as e:
        logger.error(f"MinHypr cannot use its state directories: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
