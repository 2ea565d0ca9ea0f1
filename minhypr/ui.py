"""
GTK restore picker for MinHypr, used when rofi is not available.
"""
import logging
from typing import List, Optional

import gi
gi.require_version('Gtk', '3.0')
gi.require_version('Gdk', '3.0')
gi.require_version('GtkLayerShell', '0.1')
from gi.repository import Gdk, GdkPixbuf, GLib, Gtk, GtkLayerShell

from .window import MinimizedWindow

logger = logging.getLogger(__name__)

CSS = """
window {
    background-color: rgba(46, 52, 64, 0.95);
    border-radius: 10px;
    border: 2px solid #4C566A;
}

* {
    transition: none;
    animation: none;
}

.window-item {
    padding: 8px;
    margin: 2px;
    border-radius: 5px;
    background-color: rgba(255, 255, 255, 0.05);
}

.window-item:selected {
    background-color: rgba(136, 192, 208, 0.6);
}

.workspace {
    color: #888;
}
"""


class RestorePicker(Gtk.Window):
    """Layer-shell overlay listing minimized windows"""

    def __init__(self, windows: List[MinimizedWindow]):
        super().__init__()
        self.windows = windows
        self.current_index = 0
        self.selected_address = None
        self.setup_ui()
        self.load_windows()
        self.connect("key-press-event", self.on_key_press)
        self.connect("destroy", lambda widget: Gtk.main_quit())

    def setup_ui(self):
        self.set_title("MinHypr")

        GtkLayerShell.init_for_window(self)
        GtkLayerShell.set_layer(self, GtkLayerShell.Layer.OVERLAY)
        GtkLayerShell.set_namespace(self, "minhypr")
        GtkLayerShell.set_keyboard_mode(self, GtkLayerShell.KeyboardMode.EXCLUSIVE)

        self.set_decorated(False)
        self.set_resizable(False)
        self.set_can_focus(True)
        self.add_events(Gdk.EventMask.KEY_PRESS_MASK)
        self.set_size_request(600, -1)

        self.main_box = Gtk.Box(orientation=Gtk.Orientation.VERTICAL, spacing=8)
        self.main_box.set_margin_top(15)
        self.main_box.set_margin_bottom(15)
        self.main_box.set_margin_start(15)
        self.main_box.set_margin_end(15)
        self.add(self.main_box)

        self.title_label = Gtk.Label()
        self.title_label.set_markup("<b>Minimized Windows</b>")
        self.main_box.pack_start(self.title_label, False, False, 0)

        self.list_box = Gtk.ListBox()
        self.list_box.set_selection_mode(Gtk.SelectionMode.SINGLE)
        self.list_box.set_activate_on_single_click(True)
        self.list_box.connect("row-activated", self.on_row_activated)
        self.list_box.connect("row-selected", self.on_row_selected)
        self.main_box.pack_start(self.list_box, True, True, 0)

        instructions = Gtk.Label()
        instructions.set_markup("<small>Enter to restore • Esc to cancel</small>")
        self.main_box.pack_start(instructions, False, False, 0)

        style_provider = Gtk.CssProvider()
        style_provider.load_from_data(CSS.encode())
        Gtk.StyleContext.add_provider_for_screen(
            Gdk.Screen.get_default(),
            style_provider,
            Gtk.STYLE_PROVIDER_PRIORITY_APPLICATION
        )

    def load_windows(self):
        for window in self.windows:
            self.list_box.add(self.create_window_row(window))

        if self.windows:
            self.list_box.select_row(self.list_box.get_row_at_index(0))

    def _preview_image(self, window: MinimizedWindow) -> Gtk.Widget:
        if window.preview_path:
            try:
                pixbuf = GdkPixbuf.Pixbuf.new_from_file_at_scale(window.preview_path, 96, 72, True)
                return Gtk.Image.new_from_pixbuf(pixbuf)
            except GLib.Error as e:
                logger.debug(f"Could not load preview {window.preview_path}: {e}")

        label = Gtk.Label(label=window.icon)
        label.set_size_request(96, -1)
        return label

    def create_window_row(self, window: MinimizedWindow) -> Gtk.ListBoxRow:
        row = Gtk.ListBoxRow()
        row.get_style_context().add_class("window-item")

        box = Gtk.Box(orientation=Gtk.Orientation.HORIZONTAL, spacing=10)
        box.pack_start(self._preview_image(window), False, False, 0)

        info_box = Gtk.Box(orientation=Gtk.Orientation.VERTICAL, spacing=2)

        title_label = Gtk.Label()
        title_label.set_halign(Gtk.Align.START)
        title_label.set_markup(f"<b>{GLib.markup_escape_text(window.class_name)}</b>")
        info_box.pack_start(title_label, False, False, 0)

        subtitle_label = Gtk.Label(label=window.original_title)
        subtitle_label.set_halign(Gtk.Align.START)
        subtitle_label.set_ellipsize(3)  # ELLIPSIZE_END
        subtitle_label.set_max_width_chars(50)
        info_box.pack_start(subtitle_label, False, False, 0)

        workspace_label = Gtk.Label(label=f"Workspace {window.origin_workspace}")
        workspace_label.set_halign(Gtk.Align.START)
        workspace_label.get_style_context().add_class("workspace")
        info_box.pack_start(workspace_label, False, False, 0)

        box.pack_start(info_box, True, True, 0)
        row.add(box)
        return row

    def move_selection(self, step: int):
        if not self.windows:
            return
        self.current_index = (self.current_index + step) % len(self.windows)
        row = self.list_box.get_row_at_index(self.current_index)
        if row:
            self.list_box.select_row(row)
            row.grab_focus()

    def choose(self, index: int):
        if 0 <= index < len(self.windows):
            self.selected_address = self.windows[index].address
        self.close_picker()

    def close_picker(self):
        self.destroy()

    def on_row_activated(self, list_box, row):
        self.choose(row.get_index())

    def on_row_selected(self, list_box, row):
        if row is not None:
            self.current_index = row.get_index()

    def selected_index(self) -> int:
        row = self.list_box.get_selected_row()
        return row.get_index() if row is not None else self.current_index

    def on_key_press(self, widget, event):
        keyval = event.keyval

        if keyval in (Gdk.KEY_Return, Gdk.KEY_KP_Enter, Gdk.KEY_space):
            self.choose(self.selected_index())
            return True
        elif keyval == Gdk.KEY_Escape:
            self.close_picker()
            return True
        elif keyval in (Gdk.KEY_Down, Gdk.KEY_j, Gdk.KEY_Tab):
            self.move_selection(1)
            return True
        elif keyval in (Gdk.KEY_Up, Gdk.KEY_k, Gdk.KEY_ISO_Left_Tab):
            self.move_selection(-1)
            return True

        return False


def pick_window(windows: List[MinimizedWindow]) -> Optional[str]:
    """Show the picker and block until the user chooses or cancels"""
    if Gdk.Display.get_default() is None:
        raise RuntimeError("no display to show the picker on")

    picker = RestorePicker(windows)
    picker.show_all()
    picker.present()
    Gtk.main()
    return picker.selected_address
