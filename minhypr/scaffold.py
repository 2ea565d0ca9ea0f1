"""
Rofi theme and launcher scripts written by `minhypr setup-rofi`.
"""
import logging
import os
from typing import List

logger = logging.getLogger(__name__)

THEME_NAME = "minhypr.rasi"

THEME = """/**
 * MinHypr Rofi Theme
 */

configuration {
    show-icons: true;
    display-minimized: "Minimized Windows";
    fullscreen: false;
    sidebar-mode: false;
}

* {
    background:     #2E3440;
    background-alt: #3B4252;
    foreground:     #ECEFF4;
    selected:       #88C0D0;
    border:         #4C566A;
}

window {
    width: 650px;
    border: 2px;
    border-color: @border;
    border-radius: 6px;
    padding: 12px;
    background-color: @background;
}

inputbar {
    children: [ prompt, textbox-prompt-colon, entry ];
    padding: 12px;
}

prompt {
    text-color: @selected;
}

textbox-prompt-colon {
    expand: false;
    str: ":";
    margin: 0px 4px 0px 0px;
    text-color: @foreground;
}

entry {
    text-color: @foreground;
}

listview {
    fixed-height: 0;
    border: 2px 0px 0px;
    border-color: @border;
    spacing: 4px;
    scrollbar: true;
    padding: 10px 5px 0px;
}

element {
    border: 0;
    border-radius: 4px;
    padding: 8px 12px;
}

element normal.normal {
    background-color: inherit;
    text-color: @foreground;
}

element selected.normal {
    background-color: @background-alt;
    text-color: @selected;
}

element-icon {
    size: 42px;
    margin: 0 8px 0 0;
}

element-text {
    background-color: inherit;
    text-color: inherit;
    vertical-align: 0.5;
}

scrollbar {
    width: 4px;
    border: 0;
    handle-width: 8px;
    padding: 0;
    handle-color: @border;
}
"""

FIND_EXECUTABLE = """# Find minhypr executable
if [ -x "$HOME/.local/bin/minhypr" ]; then
    MINHYPR="$HOME/.local/bin/minhypr"
elif [ -x "/usr/local/bin/minhypr" ]; then
    MINHYPR="/usr/local/bin/minhypr"
elif [ -x "/usr/bin/minhypr" ]; then
    MINHYPR="/usr/bin/minhypr"
elif command -v minhypr &> /dev/null; then
    MINHYPR="minhypr"
else
    notify-send "Error" "Unable to find minhypr executable"
    exit 1
fi
"""

SCRIPTS = {
    "launch-menu.sh": """#!/bin/bash

# Rofi menu for minimized windows, generated by MinHypr

{find}
THEME="{config_dir}/{theme}"

rofi \\
  -show minimized \\
  -modi "minimized:$MINHYPR show-rofi" \\
  -theme "$THEME" \\
  -no-fixed-num-lines \\
  -theme-str "window {{width: 650px;}}"
""",
    "simple-menu.sh": """#!/bin/bash

# Show and restore minimized windows without the rofi script mode

{find}
if [[ "$($MINHYPR show)" == *'"empty"'* ]]; then
    notify-send "MinHypr" "No minimized windows"
    exit 0
fi

$MINHYPR restore
""",
    "restore-all.sh": """#!/bin/bash

# Restore all minimized windows

{find}
$MINHYPR restore-all
""",
}

KEYBINDS = [
    "bind = ALT, M, exec, minhypr minimize",
    "bind = ALT SHIFT, M, exec, {config_dir}/launch-menu.sh",
    "bind = ALT CTRL, M, exec, {config_dir}/simple-menu.sh",
    "bind = ALT SHIFT, R, exec, {config_dir}/restore-all.sh",
]


def write_rofi_config(config_dir: str) -> List[str]:
    """Write the theme and scripts; returns the written paths"""
    os.makedirs(config_dir, exist_ok=True)
    written = []

    theme_path = os.path.join(config_dir, THEME_NAME)
    with open(theme_path, 'w') as f:
        f.write(THEME)
    written.append(theme_path)

    for name, template in SCRIPTS.items():
        path = os.path.join(config_dir, name)
        with open(path, 'w') as f:
            f.write(template.format(find=FIND_EXECUTABLE, config_dir=config_dir, theme=THEME_NAME))
        os.chmod(path, 0o755)
        written.append(path)

    logger.debug(f"Wrote rofi configuration to {config_dir}")
    return written


def keybinds(config_dir: str) -> List[str]:
    return [line.format(config_dir=config_dir) for line in KEYBINDS]
