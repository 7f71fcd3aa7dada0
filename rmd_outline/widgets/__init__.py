from .outline_panel import OutlinePanel
from .document_editor import DocumentEditor
from .structure_dialog import StructureDialog
from .preferences_dialog import PreferencesDialog

__all__ = [
    "OutlinePanel",
    "DocumentEditor",
    "StructureDialog",
    "PreferencesDialog",
]
