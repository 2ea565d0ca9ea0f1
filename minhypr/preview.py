"""
Window preview capture for MinHypr.

A preview is a screenshot of the window region, reduced to a menu
thumbnail and a rofi-sized icon. Any failing step leaves the window
without a preview.
"""
import logging
import os
import subprocess
from typing import List, Optional, Tuple

from .config import Config
from .constants import ICON_SIZE, PREVIEW_QUALITY, THUMBNAIL_SIZE

logger = logging.getLogger(__name__)


def preview_paths(preview_dir: str, window_id: str) -> Tuple[str, str, str]:
    """Full capture, thumbnail and icon paths for a window"""
    return (
        os.path.join(preview_dir, f"{window_id}.png"),
        os.path.join(preview_dir, f"{window_id}.thumb.png"),
        os.path.join(preview_dir, f"{window_id}.icon.png"),
    )


def icon_path_for(thumb_path: str) -> str:
    """Icon image that sits beside a thumbnail"""
    if thumb_path.endswith(".thumb.png"):
        return thumb_path[:-len(".thumb.png")] + ".icon.png"
    return thumb_path


class PreviewCapture:
    """Runs grim and ImageMagick to build window previews"""

    def __init__(self, config: Config):
        self.config = config

    def _run(self, command: List[str]) -> bool:
        try:
            subprocess.run(
                command,
                capture_output=True,
                check=True,
                timeout=self.config.command_timeout,
            )
            return True
        except subprocess.CalledProcessError as e:
            logger.debug(f"{command[0]} failed with status {e.returncode}: {e.stderr!r}")
        except subprocess.TimeoutExpired:
            logger.debug(f"{command[0]} timed out")
        except OSError as e:
            logger.debug(f"Could not run {command[0]}: {e}")
        return False

    def _resize(self, source: str, target: str, size: Tuple[int, int]) -> bool:
        dimensions = f"{size[0]}x{size[1]}"
        return self._run([
            self.config.image_command,
            source,
            "-resize", f"{dimensions}^",
            "-gravity", "center",
            "-extent", dimensions,
            "-quality", str(PREVIEW_QUALITY),
            target,
        ])

    def discard(self, window_id: str):
        """Remove the derived images of a window"""
        for path in preview_paths(self.config.preview_dir, window_id)[1:]:
            try:
                os.remove(path)
            except FileNotFoundError:
                pass
            except OSError as e:
                logger.debug(f"Could not remove {path}: {e}")

    def capture(self, window_id: str, geometry: Optional[str]) -> Optional[str]:
        """Capture a preview and return the thumbnail path, or None"""
        if not geometry:
            return None

        full_path, thumb_path, icon_path = preview_paths(self.config.preview_dir, window_id)

        ok = (
            self._run(["grim", "-g", geometry, full_path])
            and self._resize(full_path, thumb_path, THUMBNAIL_SIZE)
            and self._resize(full_path, icon_path, ICON_SIZE)
        )

        # Only the derived images are kept
        try:
            os.remove(full_path)
        except FileNotFoundError:
            pass
        except OSError as e:
            logger.debug(f"Could not remove {full_path}: {e}")
            ok = False

        if not ok:
            logger.info(f"No preview for window {window_id}")
            return None
        return thumb_path
