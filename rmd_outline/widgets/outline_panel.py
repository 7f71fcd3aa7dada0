"""Collapsible, searchable outline panel for the current document."""

from gi.repository import Adw, Gtk, Pango

from ..models import VisibleHeading
from ..services import OutlineSession, OutlineStatus, describe_detection
from ..services.settings_service import SettingsService


# CSS for outline color coding using Adwaita semantic colors
OUTLINE_CSS = """
.outline-h1 {
    color: @accent_color;
    font-weight: bold;
}
.outline-h2 {
    color: @accent_color;
}
.outline-h3 {
    color: @success_color;
}
.outline-h4, .outline-h5, .outline-h6 {
    color: @warning_color;
}
.outline-row {
    border-left: 3px solid alpha(@borders, 0.8);
}
.outline-row.outline-child {
    margin-top: 1px;
}
.outline-row.outline-active {
    background-color: alpha(@accent_bg_color, 0.15);
}
.outline-row.outline-active label.outline-text {
    font-weight: 500;
    color: @accent_color;
}
"""

# Width of the expander column, shared with the placeholder for alignment
EXPANDER_WIDTH = 20


class OutlinePanel(Gtk.Box):
    """Heading list with a search entry and a collapse/expand all button.

    All state lives in the OutlineSession; the panel only renders
    session.visible_headings() and forwards user actions to the session.
    """

    def __init__(self, session: OutlineSession):
        super().__init__(orientation=Gtk.Orientation.VERTICAL)
        self.session = session
        self.settings = SettingsService.get_instance()

        self.set_size_request(220, -1)

        self._setup_css()
        self._build_ui()

        self.settings.connect("changed", self._on_setting_changed)
        self.render()

    def _setup_css(self):
        """Setup CSS for outline color coding."""
        css_provider = Gtk.CssProvider()
        css_provider.load_from_string(OUTLINE_CSS)
        Gtk.StyleContext.add_provider_for_display(
            self.get_display() or Gtk.Settings.get_default().get_display(),
            css_provider,
            Gtk.STYLE_PROVIDER_PRIORITY_APPLICATION
        )

    def _build_ui(self):
        """Build panel UI."""
        toolbar = Gtk.Box(orientation=Gtk.Orientation.HORIZONTAL, spacing=6)
        toolbar.set_margin_start(8)
        toolbar.set_margin_end(8)
        toolbar.set_margin_top(6)
        toolbar.set_margin_bottom(6)

        self.search_entry = Gtk.SearchEntry()
        self.search_entry.set_placeholder_text("Search headings...")
        self.search_entry.set_hexpand(True)
        self.search_entry.connect("search-changed", self._on_search_changed)
        toolbar.append(self.search_entry)

        self.collapse_all_btn = Gtk.Button()
        self.collapse_all_btn.add_css_class("flat")
        self.collapse_all_btn.connect("clicked", self._on_collapse_all_clicked)
        toolbar.append(self.collapse_all_btn)
        self._update_collapse_all_button()

        self.append(toolbar)
        self.append(Gtk.Separator(orientation=Gtk.Orientation.HORIZONTAL))

        # Heading list
        scrolled = Gtk.ScrolledWindow()
        scrolled.set_policy(Gtk.PolicyType.NEVER, Gtk.PolicyType.AUTOMATIC)
        scrolled.set_vexpand(True)

        self.outline_list = Gtk.ListBox()
        self.outline_list.set_selection_mode(Gtk.SelectionMode.NONE)
        self.outline_list.add_css_class("navigation-sidebar")
        self.outline_list.connect("row-activated", self._on_row_activated)
        scrolled.set_child(self.outline_list)

        # Empty / error states
        self.status_page = Adw.StatusPage()
        self.status_page.add_css_class("compact")

        self.stack = Gtk.Stack()
        self.stack.set_vexpand(True)
        self.stack.add_named(scrolled, "list")
        self.stack.add_named(self.status_page, "status")
        self.append(self.stack)

    # --- Rendering ---

    def render(self):
        """Rebuild the list from the current session state."""
        self._update_collapse_all_button()
        self.outline_list.remove_all()

        status = self.session.status
        if status != OutlineStatus.READY:
            self._show_status(status)
            return

        rows = self.session.visible_headings()
        if not rows:
            self.status_page.set_icon_name("system-search-symbolic")
            self.status_page.set_title("No Matches")
            self.status_page.set_description(f"No headings contain “{self.session.search_term}”")
            self.stack.set_visible_child_name("status")
            return

        show_line_numbers = self.settings.get("outline.show_line_numbers", True)
        for item in rows:
            self.outline_list.append(self._create_row(item, show_line_numbers))
        self.stack.set_visible_child_name("list")

    def _show_status(self, status: OutlineStatus):
        """Show the status page for an outline without rows."""
        message = describe_detection(status, 0, self.session.error)
        if status == OutlineStatus.READ_FAILED:
            self.status_page.set_icon_name("dialog-error-symbolic")
            self.status_page.set_title("Read Failed")
        elif status == OutlineStatus.NO_HEADINGS:
            self.status_page.set_icon_name("view-list-symbolic")
            self.status_page.set_title("No Headings")
        else:
            self.status_page.set_icon_name("document-open-symbolic")
            self.status_page.set_title("No Document")
        self.status_page.set_description(message)
        self.stack.set_visible_child_name("status")

    def _create_row(self, item: VisibleHeading, show_line_numbers: bool) -> Gtk.ListBoxRow:
        """Create a row for a visible heading."""
        row = Gtk.ListBoxRow()
        row.item = item  # Store reference
        row.add_css_class("outline-row")
        if item.is_child:
            row.add_css_class("outline-child")
        if item.is_active:
            row.add_css_class("outline-active")

        box = Gtk.Box(orientation=Gtk.Orientation.HORIZONTAL, spacing=4)
        box.set_margin_end(8)
        box.set_margin_top(2)
        box.set_margin_bottom(2)

        # Indent based on heading level (h1=4, h2=16, h3=28, etc.)
        box.set_margin_start(4 + (item.level - 1) * 12)

        box.append(self._create_expander(item))

        label = Gtk.Label(label=item.heading.display_name)
        label.set_xalign(0)
        label.set_hexpand(True)
        label.set_ellipsize(Pango.EllipsizeMode.END)
        label.add_css_class("outline-text")
        label.add_css_class(f"outline-h{min(item.level, 6)}")
        box.append(label)

        if show_line_numbers:
            line_label = Gtk.Label(label=f":{item.line}")
            line_label.add_css_class("dim-label")
            line_label.set_xalign(1)
            box.append(line_label)

        row.set_child(box)
        return row

    def _create_expander(self, item: VisibleHeading) -> Gtk.Widget:
        """Create the collapse toggle, or a same-width spacer."""
        if not item.has_children:
            placeholder = Gtk.Box()
            placeholder.set_size_request(EXPANDER_WIDTH, -1)
            return placeholder

        button = Gtk.Button()
        button.add_css_class("flat")
        button.set_valign(Gtk.Align.CENTER)
        button.set_size_request(EXPANDER_WIDTH, -1)
        button.set_icon_name("pan-end-symbolic" if item.is_collapsed else "pan-down-symbolic")
        button.set_tooltip_text("Expand" if item.is_collapsed else "Collapse")
        button.connect("clicked", self._on_expander_clicked, item)
        return button

    def _update_collapse_all_button(self):
        if self.session.all_collapsed:
            self.collapse_all_btn.set_icon_name("view-more-symbolic")
            self.collapse_all_btn.set_tooltip_text("Expand all")
        else:
            self.collapse_all_btn.set_icon_name("view-list-symbolic")
            self.collapse_all_btn.set_tooltip_text("Collapse all")
        self.collapse_all_btn.set_sensitive(self.session.status == OutlineStatus.READY)

    # --- Signal handlers ---

    def _on_row_activated(self, listbox, row):
        """Handle row activation - select heading and jump to it."""
        if hasattr(row, "item"):
            self.session.select(row.item.heading)
            self.render()

    def _on_expander_clicked(self, button, item: VisibleHeading):
        if self.session.toggle(item.identity):
            self.render()

    def _on_search_changed(self, entry):
        self.session.set_search_term(entry.get_text())
        self.render()

    def _on_collapse_all_clicked(self, button):
        self.session.toggle_all()
        self.render()

    def _on_setting_changed(self, settings, key, value):
        if key == "outline.show_line_numbers" or key == "*":
            self.render()

    # --- Public API ---

    def reset_search(self):
        """Clear the search entry after switching documents."""
        if self.search_entry.get_text():
            self.search_entry.set_text("")
