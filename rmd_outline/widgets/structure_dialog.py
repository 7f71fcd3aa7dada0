"""Dialog showing the heading structure as indented text."""

from gi.repository import Adw, Gdk, Gtk

from ..services.toast_service import ToastService


class StructureDialog(Adw.Dialog):
    """Read-only view of the document's heading structure with a copy button."""

    def __init__(self, structure: str, **kwargs):
        super().__init__(**kwargs)
        self._structure = structure

        self.set_title("Heading Structure")
        self.set_content_width(520)
        self.set_content_height(480)

        self._build_ui()

    def _build_ui(self):
        toolbar_view = Adw.ToolbarView()

        header = Adw.HeaderBar()
        copy_btn = Gtk.Button()
        copy_btn.set_icon_name("edit-copy-symbolic")
        copy_btn.set_tooltip_text("Copy to clipboard")
        copy_btn.connect("clicked", self._on_copy_clicked)
        header.pack_start(copy_btn)
        toolbar_view.add_top_bar(header)

        text_view = Gtk.TextView()
        text_view.set_editable(False)
        text_view.set_cursor_visible(False)
        text_view.set_monospace(True)
        text_view.set_left_margin(12)
        text_view.set_right_margin(12)
        text_view.set_top_margin(12)
        text_view.set_bottom_margin(12)
        text_view.get_buffer().set_text(self._structure)

        scrolled = Gtk.ScrolledWindow()
        scrolled.set_policy(Gtk.PolicyType.AUTOMATIC, Gtk.PolicyType.AUTOMATIC)
        scrolled.set_vexpand(True)
        scrolled.set_child(text_view)
        toolbar_view.set_content(scrolled)

        self.set_child(toolbar_view)

    def _on_copy_clicked(self, button):
        clipboard = Gdk.Display.get_default().get_clipboard()
        clipboard.set(self._structure)
        ToastService.show("Heading structure copied to clipboard")
