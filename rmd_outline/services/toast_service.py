"""Toast notifications for outline and editor messages."""

import gi

gi.require_version("Adw", "1")

from gi.repository import Adw


class ToastService:
    """Application-wide toasts on the main window's overlay.

    Usage:
        ToastService.init(toast_overlay)  # once, in OutlineWindow

        ToastService.show("Detected 4 heading(s)")
        ToastService.show_error("Failed to read file: Permission denied")
    """

    _overlay: Adw.ToastOverlay | None = None

    @classmethod
    def init(cls, overlay: Adw.ToastOverlay | None):
        cls._overlay = overlay

    @classmethod
    def show(cls, message: str, timeout: int = 3):
        """Show an info toast (timeout in seconds, 0 = until dismissed)."""
        if cls._overlay is None:
            print(f"[Toast not initialized] {message}")
            return

        toast = Adw.Toast.new(message)
        toast.set_timeout(timeout)
        cls._overlay.add_toast(toast)

    @classmethod
    def show_error(cls, message: str, timeout: int = 5):
        """Show a read or save failure; stays longer and jumps the queue."""
        if cls._overlay is None:
            print(f"[Toast not initialized] ERROR: {message}")
            return

        toast = Adw.Toast.new(message)
        toast.set_timeout(timeout)
        toast.set_priority(Adw.ToastPriority.HIGH)
        cls._overlay.add_toast(toast)
