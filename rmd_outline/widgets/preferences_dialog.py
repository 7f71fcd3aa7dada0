"""Preferences dialog for application settings."""

import gi

gi.require_version("Adw", "1")
gi.require_version("GtkSource", "5")

from gi.repository import Adw, Gtk, GtkSource

from ..services.settings_service import SettingsService


class PreferencesDialog(Adw.PreferencesDialog):
    """Application preferences dialog."""

    def __init__(self, **kwargs):
        super().__init__(**kwargs)

        self.settings = SettingsService.get_instance()

        self.set_title("Preferences")

        self._build_outline_page()
        self._build_editor_page()

    def _build_outline_page(self):
        """Build the Outline preferences page."""
        page = Adw.PreferencesPage()
        page.set_title("Outline")
        page.set_icon_name("view-list-symbolic")

        display_group = Adw.PreferencesGroup()
        display_group.set_title("Display")

        lines_row = Adw.SwitchRow()
        lines_row.set_title("Show Line Numbers")
        lines_row.set_subtitle("Show source line next to each heading")
        lines_row.set_active(self.settings.get("outline.show_line_numbers", True))
        lines_row.connect("notify::active", self._on_show_line_numbers_changed)
        display_group.add(lines_row)

        scan_row = Adw.SwitchRow()
        scan_row.set_title("Auto Scan")
        scan_row.set_subtitle("Report detected headings when a document opens")
        scan_row.set_active(self.settings.get("outline.auto_scan", False))
        scan_row.connect("notify::active", self._on_auto_scan_changed)
        display_group.add(scan_row)

        page.add(display_group)

        refresh_group = Adw.PreferencesGroup()
        refresh_group.set_title("Refresh")

        delay_row = Adw.SpinRow.new_with_range(100, 3000, 100)
        delay_row.set_title("Refresh Delay")
        delay_row.set_subtitle("Milliseconds to wait after typing before re-reading headings")
        delay_row.set_value(self.settings.get("outline.refresh_delay_ms", 500))
        delay_row.connect("notify::value", self._on_refresh_delay_changed)
        refresh_group.add(delay_row)

        extensions_row = Adw.EntryRow()
        extensions_row.set_title("File Extensions")
        extensions_row.set_text(", ".join(self.settings.get("outline.extensions", [".rmd", ".md"])))
        extensions_row.connect("changed", self._on_extensions_changed)
        refresh_group.add(extensions_row)

        page.add(refresh_group)
        self.add(page)

    def _build_editor_page(self):
        """Build the Editor preferences page."""
        page = Adw.PreferencesPage()
        page.set_title("Editor")
        page.set_icon_name("accessories-text-editor-symbolic")

        font_group = Adw.PreferencesGroup()
        font_group.set_title("Font")

        font_row = Adw.EntryRow()
        font_row.set_title("Font Family")
        font_row.set_text(self.settings.get("editor.font_family", "Monospace"))
        font_row.connect("changed", self._on_font_family_changed)
        font_group.add(font_row)

        size_row = Adw.SpinRow.new_with_range(8, 32, 1)
        size_row.set_title("Font Size")
        size_row.set_value(self.settings.get("editor.font_size", 12))
        size_row.connect("notify::value", self._on_font_size_changed)
        font_group.add(size_row)

        page.add(font_group)

        display_group = Adw.PreferencesGroup()
        display_group.set_title("Display")

        theme_row = Adw.ComboRow()
        theme_row.set_title("Color Scheme")
        theme_row.set_model(Gtk.StringList.new(["System", "Light", "Dark"]))
        theme_map = {"system": 0, "light": 1, "dark": 2}
        theme_row.set_selected(theme_map.get(self.settings.get("appearance.theme", "system"), 0))
        theme_row.connect("notify::selected", self._on_theme_changed)
        display_group.add(theme_row)

        # Syntax scheme selector
        scheme_row = Adw.ComboRow()
        scheme_row.set_title("Syntax Highlighting")

        scheme_manager = GtkSource.StyleSchemeManager.get_default()
        scheme_names = []
        self._scheme_ids = []
        for scheme_id in sorted(scheme_manager.get_scheme_ids()):
            scheme = scheme_manager.get_scheme(scheme_id)
            if scheme:
                scheme_names.append(scheme.get_name() or scheme_id)
                self._scheme_ids.append(scheme_id)

        scheme_row.set_model(Gtk.StringList.new(scheme_names))
        current_scheme = self.settings.get("appearance.syntax_scheme", "Adwaita-dark")
        if current_scheme in self._scheme_ids:
            scheme_row.set_selected(self._scheme_ids.index(current_scheme))
        scheme_row.connect("notify::selected", self._on_scheme_changed)
        display_group.add(scheme_row)

        wrap_row = Adw.SwitchRow()
        wrap_row.set_title("Word Wrap")
        wrap_row.set_subtitle("Wrap long lines at word boundaries")
        wrap_row.set_active(self.settings.get("editor.word_wrap", True))
        wrap_row.connect("notify::active", self._on_word_wrap_changed)
        display_group.add(wrap_row)

        page.add(display_group)
        self.add(page)

    # Signal handlers

    def _on_show_line_numbers_changed(self, row, pspec):
        self.settings.set("outline.show_line_numbers", row.get_active())

    def _on_auto_scan_changed(self, row, pspec):
        self.settings.set("outline.auto_scan", row.get_active())

    def _on_refresh_delay_changed(self, row, pspec):
        self.settings.set("outline.refresh_delay_ms", int(row.get_value()))

    def _on_extensions_changed(self, row):
        """Handle extension list change ("rmd, .md" -> [".rmd", ".md"])."""
        extensions = []
        for part in row.get_text().split(","):
            part = part.strip().lower()
            if part:
                extensions.append(part if part.startswith(".") else f".{part}")
        if extensions:
            self.settings.set("outline.extensions", extensions)

    def _on_font_family_changed(self, row):
        self.settings.set("editor.font_family", row.get_text())

    def _on_font_size_changed(self, row, pspec):
        self.settings.set("editor.font_size", int(row.get_value()))

    def _on_theme_changed(self, row, pspec):
        """Handle theme selection change."""
        theme_map = {0: "system", 1: "light", 2: "dark"}
        self.settings.set("appearance.theme", theme_map.get(row.get_selected(), "system"))

    def _on_scheme_changed(self, row, pspec):
        """Handle syntax scheme selection change."""
        selected = row.get_selected()
        if 0 <= selected < len(self._scheme_ids):
            self.settings.set("appearance.syntax_scheme", self._scheme_ids[selected])

    def _on_word_wrap_changed(self, row, pspec):
        self.settings.set("editor.word_wrap", row.get_active())
