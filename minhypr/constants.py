"""
Constants for MinHypr.
"""

# Directories and Files
CACHE_DIR = "/tmp/minhypr-state"
CACHE_FILE_NAME = "windows.json"
LOCK_FILE_NAME = "minhypr.lock"
PREVIEW_DIR = "/tmp/minhypr-previews"
CONFIG_DIR = "~/.config/minhypr"

# Hyprland special workspace used as the minimized parking spot
HIDDEN_WORKSPACE = "minimized"

# Menu/launcher windows must never be minimized
DENYLIST = ("wofi", "rofi")

# External commands
COMMAND_TIMEOUT = 5.0
WAYBAR_SIGNAL = "RTMIN+8"
IMAGE_COMMAND = "convert"

# Preview sizes (width, height) and quality
THUMBNAIL_SIZE = (200, 150)
ICON_SIZE = (64, 64)
PREVIEW_QUALITY = 90

# Workspace used when the active one cannot be queried
DEFAULT_WORKSPACE = 1

# Waybar status glyph
STATUS_ICON = "\U000f0638"

# Icon mapping for different applications, matched in order.
# The last row is the fallback.
ICONS = [
    ("firefox", "\uf269"),
    ("Alacritty", "\uf120"),
    ("kitty", "\uf120"),
    ("discord", "\U000f066f"),
    ("Steam", "\uf1b6"),
    ("chromium", "\uf268"),
    ("chrome", "\uf268"),
    ("code", "\U000f0a1e"),
    ("spotify", "\uf1bc"),
    ("default", "\U000f05b2"),
]
