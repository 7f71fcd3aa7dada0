"""Tests for toast routing when no window overlay is registered."""

import pytest

pytest.importorskip("gi")

try:
    from rmd_outline.services.toast_service import ToastService
except (ImportError, ValueError):  # Adw typelib not installed
    pytest.skip("libadwaita typelib not available", allow_module_level=True)


@pytest.fixture(autouse=True)
def no_overlay():
    ToastService.init(None)
    yield
    ToastService.init(None)


def test_show_without_overlay_prints(capsys):
    ToastService.show("Detected 3 heading(s)")
    assert capsys.readouterr().out == "[Toast not initialized] Detected 3 heading(s)\n"


def test_show_error_without_overlay_prints(capsys):
    ToastService.show_error("Failed to read file: Permission denied")
    out = capsys.readouterr().out
    assert out == "[Toast not initialized] ERROR: Failed to read file: Permission denied\n"
