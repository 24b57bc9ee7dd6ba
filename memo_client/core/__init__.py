from .app_state import MemoApp, ViewMode
from .collection import NoteCollection, filter_notes
from .editor import EditorMode, NoteEditor
from .errors import ApiStatusError, AuthFailure, MemoClientError, TransportFailure
from .markup import ImageBlock, TextBlock, image_markup_line, preview_text, split_blocks
from .models import Note
from .session import SessionGate
from .settings_panel import SettingsPanel
from .tasks import ImmediateRunner, TaskRunner

__all__ = ["MemoApp",
           "ViewMode",
           "NoteCollection",
           "filter_notes",
           "EditorMode",
           "NoteEditor",
           "ApiStatusError",
           "AuthFailure",
           "MemoClientError",
           "TransportFailure",
           "ImageBlock",
           "TextBlock",
           "image_markup_line",
           "preview_text",
           "split_blocks",
           "Note",
           "SessionGate",
           "SettingsPanel",
           "ImmediateRunner",
           "TaskRunner",
           ]
