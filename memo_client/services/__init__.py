from .api_client import MemoApiClient
from .content_renderer import render_detail_page, render_note_body
from .upload import HttpUploadAdapter, UploadResult

__all__ = [
    "MemoApiClient",
    "render_detail_page",
    "render_note_body",
    "HttpUploadAdapter",
    "UploadResult",
]
