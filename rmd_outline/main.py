"""RMD Outline - GTK4/libadwaita editor with a collapsible heading outline."""

import argparse
import sys
from pathlib import Path

import gi

gi.require_version("Gtk", "4.0")
gi.require_version("Adw", "1")

from gi.repository import Adw, Gio

from .version import __version__
from .window import OutlineWindow


class Application(Adw.Application):
    """Main application class."""

    def __init__(self, file_path: str | None = None):
        super().__init__(
            application_id="dev.rmdoutline.RmdOutline",
            flags=Gio.ApplicationFlags.NON_UNIQUE,
        )
        self.file_path = file_path

    def do_activate(self):
        """Called when the application is activated."""
        win = OutlineWindow(application=self, file_path=self.file_path)
        win.present()


def main():
    """Application entry point."""
    parser = argparse.ArgumentParser(description="RMD Outline")
    parser.add_argument(
        "file",
        nargs="?",
        type=str,
        help="R Markdown or Markdown document to open"
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    # Parse known args to allow GTK to handle its own args
    args, remaining = parser.parse_known_args()

    # Validate file path if provided
    file_path = None
    if args.file:
        path = Path(args.file).expanduser().resolve()
        if path.is_file():
            file_path = str(path)
        else:
            print(f"Error: File does not exist: {args.file}", file=sys.stderr)
            return 1

    app = Application(file_path=file_path)
    # Pass remaining args to GTK
    return app.run([sys.argv[0]] + remaining)


if __name__ == "__main__":
    sys.exit(main())
