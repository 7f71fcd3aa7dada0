"""Main application window: document editor with an outline sidebar."""

from pathlib import Path

from gi.repository import Adw, Gio, GLib, Gtk

from .services import (
    DocumentReadError,
    OutlineSession,
    OutlineStatus,
    describe_detection,
    format_heading_structure,
)
from .services.document_monitor import DocumentMonitor
from .services.settings_service import SettingsService
from .services.toast_service import ToastService
from .widgets import DocumentEditor, OutlinePanel, PreferencesDialog, StructureDialog

APP_NAME = "RMD Outline"


class OutlineWindow(Adw.ApplicationWindow):
    """Editor on the left, collapsible heading outline on the right."""

    def __init__(self, file_path: str | None = None, **kwargs):
        super().__init__(**kwargs)

        self._setup_window()
        self._build_ui()
        self._setup_actions()

        self.connect("destroy", self._on_destroy)

        if file_path:
            self.open_file(file_path)

    def _setup_window(self):
        """Configure window properties."""
        self.settings = SettingsService.get_instance()
        self._apply_theme()
        self.settings.connect("changed", self._on_setting_changed)

        width = self.settings.get("window.width", 1100)
        height = self.settings.get("window.height", 750)
        self.set_default_size(width, height)
        self.set_title(APP_NAME)

    def _build_ui(self):
        """Build the UI layout."""
        self.editor = DocumentEditor()
        self.editor.connect("text-edited", self._on_text_edited)
        self.editor.connect("modified-changed", lambda e, m: self._update_window_title())

        # The editor is both the text source and the cursor mover
        self.session = OutlineSession(
            source=self.editor,
            mover=self.editor,
            extensions=self.settings.get("outline.extensions", [".rmd", ".md"]),
        )
        self.outline_panel = OutlinePanel(self.session)

        self.monitor = DocumentMonitor(
            edit_delay_ms=self.settings.get("outline.refresh_delay_ms", 500)
        )
        self.monitor.connect("document-opened", self._on_document_opened)
        self.monitor.connect("document-modified", self._on_document_modified)

        self.paned = Gtk.Paned(orientation=Gtk.Orientation.HORIZONTAL)
        self.paned.set_shrink_start_child(False)
        self.paned.set_shrink_end_child(False)
        self.paned.set_resize_start_child(True)
        self.paned.set_resize_end_child(False)
        self.paned.set_start_child(self.editor)
        self.paned.set_end_child(self.outline_panel)

        outline_width = self.settings.get("window.outline_width", 320)
        width = self.settings.get("window.width", 1100)
        self.paned.set_position(max(width - outline_width, 300))

        self.window_title = Adw.WindowTitle(title=APP_NAME, subtitle="")

        toolbar_view = Adw.ToolbarView()
        toolbar_view.add_top_bar(self._build_header())
        toolbar_view.set_content(self.paned)

        # Wrap in toast overlay for notifications
        self.toast_overlay = Adw.ToastOverlay()
        self.toast_overlay.set_child(toolbar_view)
        self.set_content(self.toast_overlay)
        ToastService.init(self.toast_overlay)

    def _build_header(self) -> Adw.HeaderBar:
        """Build the header bar with open button and main menu."""
        header = Adw.HeaderBar()
        header.set_title_widget(self.window_title)

        open_btn = Gtk.Button()
        open_btn.set_icon_name("document-open-symbolic")
        open_btn.set_tooltip_text("Open file (Ctrl+O)")
        open_btn.set_action_name("win.open")
        header.pack_start(open_btn)

        menu = Gio.Menu()
        menu.append("Detect Headings", "win.detect-headings")
        menu.append("Show Heading Structure", "win.show-structure")
        menu.append("Preferences", "win.preferences")

        menu_btn = Gtk.MenuButton()
        menu_btn.set_icon_name("open-menu-symbolic")
        menu_btn.set_menu_model(menu)
        header.pack_end(menu_btn)

        return header

    def _setup_actions(self):
        """Register window actions and their shortcuts."""
        actions = {
            "open": self._on_open_action,
            "save": lambda *args: self.editor.save(),
            "detect-headings": self._on_detect_headings_action,
            "show-structure": self._on_show_structure_action,
            "preferences": self._on_preferences_action,
        }
        for name, callback in actions.items():
            action = Gio.SimpleAction.new(name, None)
            action.connect("activate", callback)
            self.add_action(action)

        app = self.get_application()
        if app is not None:
            app.set_accels_for_action("win.open", ["<Control>o"])
            app.set_accels_for_action("win.save", ["<Control>s"])
            app.set_accels_for_action("win.show-structure", ["<Control><Shift>o"])
            app.set_accels_for_action("win.preferences", ["<Control>comma"])

    # --- Documents ---

    def open_file(self, file_path: str):
        """Load a document into the editor and start watching it."""
        path = str(Path(file_path).expanduser().resolve())
        try:
            self.editor.load(path)
        except DocumentReadError as e:
            ToastService.show_error(f"Failed to read file: {e.reason}")

        self.outline_panel.reset_search()
        self.monitor.watch(path)
        self._update_window_title(path)

    def _on_document_opened(self, monitor, path: str):
        self.session.on_document_opened(path)
        self.outline_panel.render()

        if self.settings.get("outline.auto_scan", False):
            self._show_detection_summary()
        elif self.session.status == OutlineStatus.UNSUPPORTED:
            ToastService.show("Not an R Markdown document")

    def _on_document_modified(self, monitor, path: str):
        if self.session.on_document_modified(path):
            self.outline_panel.render()

    def _on_text_edited(self, editor):
        if editor.file_path:
            self.monitor.notify_edited(editor.file_path)

    def _show_detection_summary(self):
        ToastService.show(describe_detection(
            self.session.status, len(self.session.headings), self.session.error
        ))

    def _update_window_title(self, path: str | None = None):
        path = path or self.editor.file_path or self.session.document
        if not path:
            self.set_title(APP_NAME)
            self.window_title.set_subtitle("")
            return

        name = Path(path).name
        if self.editor.is_modified:
            name = f"● {name}"
        self.set_title(f"{name} - {APP_NAME}")
        self.window_title.set_subtitle(name)

    # --- Actions ---

    def _on_open_action(self, action, param):
        """Show a file chooser limited to outline documents."""
        dialog = Gtk.FileDialog()
        dialog.set_title("Open Document")

        file_filter = Gtk.FileFilter()
        file_filter.set_name("R Markdown / Markdown")
        for ext in self.session.extensions:
            suffix = ext.lstrip(".")
            file_filter.add_suffix(suffix)
            file_filter.add_suffix(suffix.upper())
            file_filter.add_suffix(suffix.capitalize())
        filters = Gio.ListStore.new(Gtk.FileFilter)
        filters.append(file_filter)
        dialog.set_filters(filters)

        dialog.open(self, None, self._on_open_dialog_finish)

    def _on_open_dialog_finish(self, dialog, result):
        try:
            gfile = dialog.open_finish(result)
        except GLib.Error:
            return  # Dismissed
        if gfile and gfile.get_path():
            self.open_file(gfile.get_path())

    def _on_detect_headings_action(self, action, param):
        self.session.refresh()
        self.outline_panel.render()
        self._show_detection_summary()

    def _on_show_structure_action(self, action, param):
        self.session.refresh()
        self.outline_panel.render()
        if self.session.status != OutlineStatus.READY:
            self._show_detection_summary()
            return

        structure = format_heading_structure(
            self.session.headings,
            Path(self.session.document).name,
            show_line_numbers=self.settings.get("outline.show_line_numbers", True),
        )
        StructureDialog(structure).present(self)

    def _on_preferences_action(self, action, param):
        PreferencesDialog().present(self)

    # --- Settings ---

    def _apply_theme(self):
        """Apply color theme from settings."""
        theme = self.settings.get("appearance.theme", "system")
        style_manager = Adw.StyleManager.get_default()

        if theme == "dark":
            style_manager.set_color_scheme(Adw.ColorScheme.FORCE_DARK)
        elif theme == "light":
            style_manager.set_color_scheme(Adw.ColorScheme.FORCE_LIGHT)
        else:  # system
            style_manager.set_color_scheme(Adw.ColorScheme.DEFAULT)

    def _on_setting_changed(self, settings, key, value):
        """Handle setting changes."""
        if key == "appearance.theme":
            self._apply_theme()
        elif key == "outline.extensions":
            self.session.extensions = tuple(value)
            self.session.refresh()
            self.outline_panel.render()
        elif key == "outline.refresh_delay_ms":
            self.monitor.edit_delay_ms = int(value)

    def _on_destroy(self, window):
        """Clean up on window destroy."""
        if not self.is_maximized():
            width, height = self.get_default_size()
            # get_default_size returns -1 if not set, use actual size
            if width <= 0 or height <= 0:
                width = self.get_width()
                height = self.get_height()
            self.settings.set("window.width", width)
            self.settings.set("window.height", height)
            outline_width = width - self.paned.get_position()
            if outline_width >= 200:
                self.settings.set("window.outline_width", outline_width)

        self.monitor.shutdown()
        ToastService.init(None)
