from __future__ import annotations

from memo_client.settings import THEME_DEEP_BLUE, THEME_LIGHT_PINK, normalize_theme

THEME_LABELS = {
    THEME_LIGHT_PINK: "淡いピンク",
    THEME_DEEP_BLUE: "深い青",
}

_PALETTES = {
    THEME_LIGHT_PINK: {
        "grad_start": "#fff0f5",
        "grad_mid": "#ffe4e1",
        "grad_end": "#ffb6c1",
        "text": "#1f2937",
        "panel": "rgba(255, 255, 255, 26)",
    },
    THEME_DEEP_BLUE: {
        "grad_start": "#1a237e",
        "grad_mid": "#0d47a1",
        "grad_end": "#000000",
        "text": "#ffffff",
        "panel": "rgba(255, 255, 255, 13)",
    },
}


def stylesheet_for(theme: str) -> str:
    p = _PALETTES[normalize_theme(theme)]
    return f"""
    QMainWindow, #root {{
        background: qlineargradient(x1:0, y1:0, x2:1, y2:1,
            stop:0 {p['grad_start']}, stop:0.5 {p['grad_mid']}, stop:1 {p['grad_end']});
    }}
    QWidget {{ color: {p['text']}; }}
    QLineEdit, QTextEdit, QListWidget {{
        background: {p['panel']};
        border: 1px solid rgba(255, 255, 255, 51);
        border-radius: 8px;
        padding: 6px;
    }}
    QPushButton {{
        background: rgba(255, 255, 255, 51);
        border: none;
        border-radius: 8px;
        padding: 6px 14px;
    }}
    QPushButton:hover {{ background: rgba(255, 255, 255, 77); }}
    QPushButton#primary {{ background: rgba(37, 99, 235, 204); color: #ffffff; }}
    QPushButton#danger {{ color: #fca5a5; background: transparent; }}
    QLabel#error {{ color: #fca5a5; }}
    QLineEdit#code {{ font-size: 24px; letter-spacing: 8px; }}
    """
