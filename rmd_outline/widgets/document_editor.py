"""Editable document view the outline navigates in."""

import gi

gi.require_version("GtkSource", "5")

from gi.repository import Adw, GLib, GObject, Gtk, GtkSource

from ..services import DocumentReadError, FileDocumentSource
from ..services.settings_service import SettingsService
from ..services.toast_service import ToastService


class DocumentEditor(Gtk.Box):
    """GtkSourceView editor for one document at a time.

    Acts as the cursor mover for the outline (move_to / focus_editor) and
    as its document source: text for the open file comes from the buffer,
    so unsaved edits show up in the outline.
    """

    __gsignals__ = {
        "text-edited": (GObject.SignalFlags.RUN_FIRST, None, ()),
        "modified-changed": (GObject.SignalFlags.RUN_FIRST, None, (bool,)),
    }

    def __init__(self):
        super().__init__(orientation=Gtk.Orientation.VERTICAL)
        self.set_vexpand(True)
        self.set_hexpand(True)

        self.file_path: str | None = None
        self._modified = False
        self._loading = False
        self._file_source = FileDocumentSource()

        self._build_ui()

    def _build_ui(self):
        """Build the editor UI."""
        self.settings = SettingsService.get_instance()

        self.buffer = GtkSource.Buffer()
        self.source_view = GtkSource.View(buffer=self.buffer)
        self.source_view.set_show_line_numbers(True)
        self.source_view.set_monospace(True)
        self.source_view.set_auto_indent(True)
        self.source_view.set_highlight_current_line(True)
        self.source_view.set_left_margin(6)

        # R Markdown highlights well enough as Markdown
        language = GtkSource.LanguageManager.get_default().get_language("markdown")
        if language:
            self.buffer.set_language(language)

        self._apply_settings()
        self.settings.connect("changed", self._on_setting_changed)
        self.buffer.connect("changed", self._on_buffer_changed)

        scrolled = Gtk.ScrolledWindow()
        scrolled.set_policy(Gtk.PolicyType.AUTOMATIC, Gtk.PolicyType.AUTOMATIC)
        scrolled.set_vexpand(True)
        scrolled.set_hexpand(True)
        scrolled.set_child(self.source_view)

        self.placeholder = Adw.StatusPage()
        self.placeholder.set_icon_name("text-x-generic-symbolic")
        self.placeholder.set_title("No Document")
        self.placeholder.set_description("Open an R Markdown file to see its outline")

        self.stack = Gtk.Stack()
        self.stack.set_vexpand(True)
        self.stack.add_named(self.placeholder, "empty")
        self.stack.add_named(scrolled, "editor")
        self.stack.set_visible_child_name("empty")
        self.append(self.stack)

    def _apply_settings(self):
        """Apply appearance and editor settings."""
        scheme_id = self.settings.get("appearance.syntax_scheme", "Adwaita-dark")
        scheme_manager = GtkSource.StyleSchemeManager.get_default()
        scheme = scheme_manager.get_scheme(scheme_id) or scheme_manager.get_scheme("classic")
        if scheme:
            self.buffer.set_style_scheme(scheme)

        font_family = self.settings.get("editor.font_family", "Monospace")
        font_size = self.settings.get("editor.font_size", 12)
        css_provider = Gtk.CssProvider()
        css_provider.load_from_string(f"""
            textview {{
                font-family: "{font_family}";
                font-size: {font_size}pt;
            }}
        """)
        self.source_view.get_style_context().add_provider(
            css_provider, Gtk.STYLE_PROVIDER_PRIORITY_APPLICATION
        )
        self._css_provider = css_provider  # Keep reference

        word_wrap = self.settings.get("editor.word_wrap", True)
        self.source_view.set_wrap_mode(Gtk.WrapMode.WORD_CHAR if word_wrap else Gtk.WrapMode.NONE)

    def _on_setting_changed(self, settings, key, value):
        if key.startswith("appearance.") or key.startswith("editor.") or key == "*":
            self._apply_settings()

    # --- Loading and saving ---

    def load(self, file_path: str):
        """Load a document into the buffer.

        Raises:
            DocumentReadError: The file could not be read; the buffer is left
                empty and read-only.
        """
        self.file_path = str(file_path)
        try:
            content = self._file_source.read_text(self.file_path)
        except DocumentReadError:
            # Outline reads fall through to disk and report the failure
            self.file_path = None
            self._loading = True
            self.buffer.set_text("")
            self._loading = False
            self.source_view.set_editable(False)
            self.stack.set_visible_child_name("empty")
            raise

        self._loading = True
        self.buffer.set_text(content)
        self._loading = False
        self.buffer.set_modified(False)
        self._set_modified(False)
        self.source_view.set_editable(True)
        self.buffer.place_cursor(self.buffer.get_start_iter())
        self.stack.set_visible_child_name("editor")

    def save(self) -> bool:
        """Save the buffer to disk. Returns True on success."""
        if not self.file_path:
            return False
        try:
            with open(self.file_path, "w", encoding="utf-8") as f:
                f.write(self.get_text())
        except OSError as e:
            ToastService.show_error(f"Error saving file: {e}")
            return False

        self.buffer.set_modified(False)
        self._set_modified(False)
        return True

    def get_text(self) -> str:
        start = self.buffer.get_start_iter()
        end = self.buffer.get_end_iter()
        return self.buffer.get_text(start, end, True)

    @property
    def is_modified(self) -> bool:
        return self._modified

    def _set_modified(self, is_modified: bool):
        if is_modified != self._modified:
            self._modified = is_modified
            self.emit("modified-changed", is_modified)

    def _on_buffer_changed(self, buffer):
        if self._loading:
            return
        self._set_modified(buffer.get_modified())
        self.emit("text-edited")

    # --- Document source ---

    def read_text(self, handle: str) -> str:
        """Return buffer text for the open document, disk text otherwise."""
        if self.file_path and str(handle) == self.file_path:
            return self.get_text()
        return self._file_source.read_text(handle)

    # --- Cursor mover ---

    def move_to(self, line: int, column: int):
        """Place the cursor at a 0-based line/column and scroll to it."""
        success, line_iter = self.buffer.get_iter_at_line_offset(line, column)
        if not success:
            return
        self.buffer.place_cursor(line_iter)
        # Use idle_add to ensure UI is ready
        GLib.idle_add(self._scroll_to_cursor)

    def focus_editor(self):
        # Let the outline row finish handling its click first
        GLib.timeout_add(50, self._grab_focus_once)

    def _grab_focus_once(self) -> bool:
        self.source_view.grab_focus()
        return False  # Don't repeat

    def _scroll_to_cursor(self) -> bool:
        """Scroll view to cursor position."""
        self.source_view.scroll_to_mark(
            self.buffer.get_insert(),
            0.2,  # margin
            True,  # use_align
            0.0,   # xalign
            0.3    # yalign (1/3 from top)
        )
        return False  # Don't repeat
