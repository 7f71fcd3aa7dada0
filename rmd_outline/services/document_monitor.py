"""Debounced change notifications for the displayed document."""

from pathlib import Path

import gi

gi.require_version("Gio", "2.0")
gi.require_version("GLib", "2.0")
gi.require_version("GObject", "2.0")

from gi.repository import Gio, GLib, GObject


class DocumentMonitor(GObject.Object):
    """Turns file and editor events into debounced document signals.

    Each event source owns at most one pending timeout. A new event
    removes the pending one and schedules again, so a burst of edits
    produces a single emission with the latest handle.

    Usage:
        monitor = DocumentMonitor()
        monitor.connect("document-opened", on_opened)
        monitor.connect("document-modified", on_modified)
        monitor.watch(path)          # disk changes -> document-modified
        monitor.notify_edited(path)  # buffer edits -> document-modified
        ...
        monitor.shutdown()
    """

    __gsignals__ = {
        # Document became current in the editor - path passed as argument
        "document-opened": (GObject.SignalFlags.RUN_FIRST, None, (str,)),
        # Document content changed on disk or in the editor buffer
        "document-modified": (GObject.SignalFlags.RUN_FIRST, None, (str,)),
    }

    # Debounce delays (ms)
    DEBOUNCE_OPENED = 100
    DEBOUNCE_DISK = 300
    DEBOUNCE_EDIT = 500

    def __init__(self, edit_delay_ms: int | None = None):
        super().__init__()

        self._monitor: Gio.FileMonitor | None = None
        self._watched_path: str | None = None
        self.edit_delay_ms = edit_delay_ms or self.DEBOUNCE_EDIT

        # Debounce state
        self._pending_signals: dict[str, int] = {}  # source key -> timeout_id

    # --- Sources ---

    def watch(self, path: str | Path | None):
        """Monitor a document on disk and announce it as opened."""
        self._cancel_monitor()
        self._watched_path = str(path) if path else None
        if self._watched_path is None:
            return

        try:
            gfile = Gio.File.new_for_path(self._watched_path)
            self._monitor = gfile.monitor_file(Gio.FileMonitorFlags.NONE, None)
            self._monitor.connect("changed", self._on_file_changed)
        except GLib.Error as e:
            print(f"Cannot monitor {self._watched_path}: {e.message}")
            self._monitor = None

        self._schedule("opened", "document-opened", self._watched_path, self.DEBOUNCE_OPENED)

    def notify_edited(self, path: str | Path):
        """Report an edit made in the editor buffer."""
        self._schedule("edit", "document-modified", str(path), self.edit_delay_ms)

    # --- Event handlers ---

    def _on_file_changed(self, monitor, file, other_file, event_type):
        """Handle changes of the watched file on disk."""
        if event_type not in (
            Gio.FileMonitorEvent.CHANGES_DONE_HINT,
            Gio.FileMonitorEvent.CREATED,
            Gio.FileMonitorEvent.DELETED,
        ):
            return

        path = file.get_path() if file else None
        if not path:
            return
        self._schedule("disk", "document-modified", path, self.DEBOUNCE_DISK)

    # --- Debounce logic ---

    def _schedule(self, source_key: str, signal_name: str, path: str, delay_ms: int):
        """Schedule a debounced signal emission, replacing any pending one."""
        if source_key in self._pending_signals:
            GLib.source_remove(self._pending_signals[source_key])

        timeout_id = GLib.timeout_add(
            delay_ms,
            self._emit_signal,
            source_key,
            signal_name,
            path,
        )
        self._pending_signals[source_key] = timeout_id

    def _emit_signal(self, source_key: str, signal_name: str, path: str) -> bool:
        """Emit signal and clear pending state."""
        self._pending_signals.pop(source_key, None)
        self.emit(signal_name, path)
        return False  # Don't repeat

    # --- Lifecycle ---

    def _cancel_monitor(self):
        if self._monitor is not None:
            self._monitor.cancel()
            self._monitor = None

    def shutdown(self):
        """Cancel the file monitor and all pending timeouts."""
        for timeout_id in self._pending_signals.values():
            GLib.source_remove(timeout_id)
        self._pending_signals.clear()
        self._cancel_monitor()
        self._watched_path = None
